"""Profit and loss summaries of trading positions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

from tearsheet.data_summary import DataSummary
from tearsheet.durations import duration_to_secs
from tearsheet.summariser import PositionSummariser
from tearsheet.table import TableBuilder, format_decimal

SECONDS_IN_DAY = 86400.0


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _whole_days(duration: timedelta) -> int:
    seconds = duration_to_secs(duration)
    days = abs(seconds) // 86400
    return -days if seconds < 0 else days


def _divide(numerator: float, denominator: float) -> float:
    """Floating-point division giving inf or NaN on a zero denominator."""
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


class Side(Enum):
    """Direction of a position."""

    BUY = "buy"
    SELL = "sell"


@dataclass
class PnLReturnSummary(PositionSummariser, TableBuilder):
    """Summary of the profit and loss returns of a trading session."""

    time: datetime = field(default_factory=_now)
    duration: timedelta = field(default_factory=timedelta)
    trades_per_day: float = 0.0
    total: DataSummary = field(default_factory=DataSummary)
    losses: DataSummary = field(default_factory=DataSummary)

    def update(self, position: Any) -> None:
        """Fold one position's return into the summary."""
        if self.total.count == 0:
            self.time = position.meta.enter_time

        self.update_trading_session_duration(position)
        self.update_trades_per_day()

        pnl_return = position.calculate_profit_loss_return()
        self.total.update(pnl_return)
        if math.copysign(1.0, pnl_return) < 0:
            self.losses.update(pnl_return)

    def titles(self) -> list[str]:
        return [
            "Trades",
            "Wins",
            "Losses",
            "Trading Days",
            "Trades Per Day",
            "Mean Return",
            "Std. Dev. Return",
            "Loss Mean Return",
            "Biggest Win",
            "Biggest Loss",
        ]

    def row(self) -> list[str]:
        wins = self.total.count - self.losses.count
        return [
            str(self.total.count),
            str(wins),
            str(self.losses.count),
            str(_whole_days(self.duration)),
            format_decimal(self.trades_per_day),
            format_decimal(self.total.mean),
            format_decimal(self.total.dispersion.std_dev),
            format_decimal(self.losses.mean),
            format_decimal(self.total.dispersion.range.high),
            format_decimal(self.total.dispersion.range.low),
        ]

    def update_trading_session_duration(self, position: Any) -> None:
        """Set the session duration from its start to the position's latest time."""
        exit_balance = position.meta.exit_balance
        if exit_balance is None:
            self.duration = position.meta.update_time - self.time
        else:
            self.duration = exit_balance.time - self.time

    def update_trades_per_day(self) -> None:
        """Recompute trades per day from the trade count and session duration."""
        days = duration_to_secs(self.duration) / SECONDS_IN_DAY
        self.trades_per_day = _divide(float(self.total.count), days)


@dataclass
class ProfitLossSummary(PositionSummariser, TableBuilder):
    """Realised profit and loss split by long and short positions."""

    long_contracts: float = 0.0
    long_pnl: float = 0.0
    long_pnl_per_contract: float = 0.0
    short_contracts: float = 0.0
    short_pnl: float = 0.0
    short_pnl_per_contract: float = 0.0
    total_contracts: float = 0.0
    total_pnl: float = 0.0
    total_pnl_per_contract: float = 0.0

    def update(self, position: Any) -> None:
        """Add one position's contracts and realised result."""
        side = Side(position.side)
        contracts = abs(position.quantity)
        pnl = position.realised_profit_loss

        self.total_contracts += contracts
        self.total_pnl += pnl
        self.total_pnl_per_contract = _divide(self.total_pnl, self.total_contracts)

        if side is Side.BUY:
            self.long_contracts += contracts
            self.long_pnl += pnl
            self.long_pnl_per_contract = _divide(self.long_pnl, self.long_contracts)
        else:
            self.short_contracts += contracts
            self.short_pnl += pnl
            self.short_pnl_per_contract = _divide(self.short_pnl, self.short_contracts)

    def titles(self) -> list[str]:
        return [
            "Long Contracts",
            "Long PnL",
            "Long PnL Per Contract",
            "Short Contracts",
            "Short PnL",
            "Short PnL Per Contract",
            "Total Contracts",
            "Total PnL",
            "Total PnL Per Contract",
        ]

    def row(self) -> list[str]:
        return [
            format_decimal(value)
            for value in (
                self.long_contracts,
                self.long_pnl,
                self.long_pnl_per_contract,
                self.short_contracts,
                self.short_pnl,
                self.short_pnl_per_contract,
                self.total_contracts,
                self.total_pnl,
                self.total_pnl_per_contract,
            )
        ]