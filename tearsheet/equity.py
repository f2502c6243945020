"""Portfolio equity at a point in time."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from tearsheet.summariser import PositionSummariser


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class EquityPoint(PositionSummariser):
    """Total equity at a moment in time."""

    time: datetime = field(default_factory=_now)
    total: float = 0.0

    @classmethod
    def from_balance(cls, balance: Any) -> "EquityPoint":
        """Create an equity point from a balance's time and total."""
        return cls(time=balance.time, total=balance.total)

    def update(self, position: Any) -> None:
        """Apply a position's profit or loss and its timestamp.

        An exited position contributes its realised result at exit time; an
        open one contributes its unrealised result at its last update time.
        """
        exit_balance = position.meta.exit_balance
        if exit_balance is None:
            self.time = position.meta.update_time
            self.total += position.unrealised_profit_loss
        else:
            self.time = exit_balance.time
            self.total += position.realised_profit_loss