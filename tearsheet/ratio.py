"""Risk-adjusted return ratios: Sharpe, Sortino and Calmar."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from tearsheet.pnl import PnLReturnSummary


def _sqrt(value: float) -> float:
    """Square root that yields NaN rather than raising for negative input."""
    if value >= 0.0:
        return math.sqrt(value)
    return math.nan


def calculate_daily(ratio_per_trade: float, trades_per_day: float) -> float:
    """Scale a per-trade ratio to a daily ratio."""
    return ratio_per_trade * _sqrt(trades_per_day)


def calculate_annual(
    ratio_per_trade: float, trades_per_day: float, trading_days: int
) -> float:
    """Scale a per-trade ratio to an annual ratio over the given trading days."""
    if trading_days < 0:
        raise ValueError(f"trading_days must not be negative, got {trading_days}")
    return calculate_daily(ratio_per_trade, trades_per_day) * math.sqrt(
        float(trading_days)
    )


class Ratio(ABC):
    """A per-trade ratio that can be scaled to daily and annual figures."""

    risk_free_return: float
    trades_per_day: float

    @abstractmethod
    def ratio(self) -> float:
        """Return the ratio per trade."""

    def daily(self) -> float:
        """Return the ratio scaled to one day."""
        return calculate_daily(self.ratio(), self.trades_per_day)

    def annual(self, trading_days: int) -> float:
        """Return the ratio scaled to a year of ``trading_days`` days."""
        return calculate_annual(self.ratio(), self.trades_per_day, trading_days)


@dataclass
class SharpeRatio(Ratio):
    """Excess mean return per unit of total return volatility."""

    risk_free_return: float = 0.0
    trades_per_day: float = 0.0
    sharpe_ratio_per_trade: float = 0.0

    def ratio(self) -> float:
        return self.sharpe_ratio_per_trade

    def update(self, pnl_returns: PnLReturnSummary) -> None:
        """Recompute the ratio from the latest return summary."""
        self.trades_per_day = pnl_returns.trades_per_day
        std_dev = pnl_returns.total.dispersion.std_dev
        if std_dev == 0.0:
            self.sharpe_ratio_per_trade = 0.0
        else:
            self.sharpe_ratio_per_trade = (
                pnl_returns.total.mean - self.risk_free_return
            ) / std_dev


@dataclass
class SortinoRatio(Ratio):
    """Excess mean return per unit of downside (loss) volatility."""

    risk_free_return: float = 0.0
    trades_per_day: float = 0.0
    sortino_ratio_per_trade: float = 0.0

    def ratio(self) -> float:
        return self.sortino_ratio_per_trade

    def update(self, pnl_returns: PnLReturnSummary) -> None:
        """Recompute the ratio from the latest return summary."""
        self.trades_per_day = pnl_returns.trades_per_day
        loss_std_dev = pnl_returns.losses.dispersion.std_dev
        if loss_std_dev == 0.0:
            self.sortino_ratio_per_trade = 0.0
        else:
            self.sortino_ratio_per_trade = (
                pnl_returns.total.mean - self.risk_free_return
            ) / loss_std_dev


@dataclass
class CalmarRatio(Ratio):
    """Excess mean return per unit of maximum drawdown."""

    risk_free_return: float = 0.0
    trades_per_day: float = 0.0
    calmar_ratio_per_trade: float = 0.0

    def ratio(self) -> float:
        return self.calmar_ratio_per_trade

    def update(self, pnl_returns: PnLReturnSummary, max_drawdown: float) -> None:
        """Recompute the ratio from the latest returns and maximum drawdown."""
        self.trades_per_day = pnl_returns.trades_per_day
        if max_drawdown == 0.0:
            self.calmar_ratio_per_trade = 0.0
        else:
            self.calmar_ratio_per_trade = (
                pnl_returns.total.mean - self.risk_free_return
            ) / abs(max_drawdown)