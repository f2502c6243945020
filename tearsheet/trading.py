"""Trading summary combining returns, drawdowns and risk-adjusted ratios."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from tearsheet.drawdown_summary import DrawdownSummary
from tearsheet.pnl import PnLReturnSummary
from tearsheet.ratio import CalmarRatio, SharpeRatio, SortinoRatio
from tearsheet.summariser import PositionSummariser
from tearsheet.table import TableBuilder, format_decimal


@dataclass(frozen=True)
class TradingConfig:
    """Settings used to initialise a trading summary."""

    starting_equity: float
    trading_days_per_year: int
    risk_free_return: float


@dataclass
class TearSheet(TableBuilder):
    """Sharpe, Sortino and Calmar ratios of a trading session."""

    sharpe_ratio: SharpeRatio = field(default_factory=SharpeRatio)
    sortino_ratio: SortinoRatio = field(default_factory=SortinoRatio)
    calmar_ratio: CalmarRatio = field(default_factory=CalmarRatio)

    @classmethod
    def with_risk_free_return(cls, risk_free_return: float) -> "TearSheet":
        """Create a tear sheet whose ratios all use the given risk-free return."""
        return cls(
            sharpe_ratio=SharpeRatio(risk_free_return=risk_free_return),
            sortino_ratio=SortinoRatio(risk_free_return=risk_free_return),
            calmar_ratio=CalmarRatio(risk_free_return=risk_free_return),
        )

    def update(self, pnl_returns: PnLReturnSummary, drawdown: DrawdownSummary) -> None:
        """Recompute every ratio from the latest returns and drawdowns."""
        self.sharpe_ratio.update(pnl_returns)
        self.sortino_ratio.update(pnl_returns)
        self.calmar_ratio.update(pnl_returns, drawdown.max_drawdown.drawdown.drawdown)

    def titles(self) -> list[str]:
        return ["Sharpe Ratio", "Sortino Ratio", "Calmar Ratio"]

    def row(self) -> list[str]:
        return [
            format_decimal(self.sharpe_ratio.daily()),
            format_decimal(self.sortino_ratio.daily()),
            format_decimal(self.calmar_ratio.daily()),
        ]


@dataclass
class TradingSummary(PositionSummariser, TableBuilder):
    """Returns, drawdowns and tear sheet of a trading session."""

    pnl_returns: PnLReturnSummary
    drawdown: DrawdownSummary
    tear_sheet: TearSheet

    @classmethod
    def from_config(cls, config: TradingConfig) -> "TradingSummary":
        """Create an empty summary from a configuration."""
        return cls(
            pnl_returns=PnLReturnSummary(),
            drawdown=DrawdownSummary.from_starting_equity(config.starting_equity),
            tear_sheet=TearSheet.with_risk_free_return(config.risk_free_return),
        )

    def update(self, position: Any) -> None:
        """Fold one position into every part of the summary."""
        self.pnl_returns.update(position)
        self.drawdown.update(position)
        self.tear_sheet.update(self.pnl_returns, self.drawdown)

    def titles(self) -> list[str]:
        return [
            *self.pnl_returns.titles(),
            *self.tear_sheet.titles(),
            *self.drawdown.titles(),
        ]

    def row(self) -> list[str]:
        return [
            *self.pnl_returns.row(),
            *self.tear_sheet.row(),
            *self.drawdown.row(),
        ]


def calculate_trading_duration(start_time: datetime, position: Any) -> timedelta:
    """Return the time from ``start_time`` to the position's exit or last update."""
    exit_balance = position.meta.exit_balance
    if exit_balance is None:
        return position.meta.update_time - start_time
    return exit_balance.time - start_time