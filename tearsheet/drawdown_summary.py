"""Summary of current, average and maximum drawdowns over closed positions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from tearsheet.drawdown import AvgDrawdown, Drawdown, MaxDrawdown
from tearsheet.durations import duration_to_secs
from tearsheet.equity import EquityPoint
from tearsheet.summariser import PositionSummariser
from tearsheet.table import TableBuilder, format_decimal


def _whole_days(duration: timedelta) -> int:
    seconds = duration_to_secs(duration)
    days = abs(seconds) // 86400
    return -days if seconds < 0 else days


@dataclass
class DrawdownSummary(PositionSummariser, TableBuilder):
    """Drawdown statistics fed by the exit balances of closed positions."""

    current_drawdown: Drawdown
    avg_drawdown: AvgDrawdown = field(default_factory=AvgDrawdown)
    max_drawdown: MaxDrawdown = field(default_factory=MaxDrawdown)

    @classmethod
    def from_starting_equity(cls, starting_equity: float) -> "DrawdownSummary":
        """Create a summary whose first equity peak is the starting equity."""
        return cls(current_drawdown=Drawdown.init(starting_equity))

    def update(self, position: Any) -> None:
        """Fold in a position; positions that have not exited are ignored."""
        exit_balance = position.meta.exit_balance
        if exit_balance is None:
            return
        ended = self.current_drawdown.update(EquityPoint.from_balance(exit_balance))
        if ended is not None:
            self.avg_drawdown.update(ended)
            self.max_drawdown.update(ended)

    def titles(self) -> list[str]:
        return [
            "Max Drawdown",
            "Max Drawdown Days",
            "Avg. Drawdown",
            "Avg. Drawdown Days",
        ]

    def row(self) -> list[str]:
        return [
            format_decimal(self.max_drawdown.drawdown.drawdown),
            str(_whole_days(self.max_drawdown.drawdown.duration)),
            format_decimal(self.avg_drawdown.mean_drawdown),
            str(_whole_days(self.avg_drawdown.mean_duration)),
        ]