"""Drawdown metrics: current, maximum and average peak-to-trough declines."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from tearsheet import welford
from tearsheet.dispersion import Range
from tearsheet.equity import EquityPoint


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _milliseconds(duration: timedelta) -> int:
    """Return the whole milliseconds of a duration, truncated toward zero."""
    micros = duration // timedelta(microseconds=1)
    millis = abs(micros) // 1000
    return -millis if micros < 0 else millis


@dataclass
class Drawdown:
    """Peak-to-trough decline of a portfolio during one period."""

    equity_range: Range = field(default_factory=Range)
    drawdown: float = 0.0
    start_time: datetime = field(default_factory=_now)
    duration: timedelta = field(default_factory=timedelta)

    @classmethod
    def init(cls, starting_equity: float) -> "Drawdown":
        """Create a drawdown tracker using the starting equity as the first peak."""
        return cls(
            equity_range=Range(activated=True, high=starting_equity, low=starting_equity),
            drawdown=0.0,
            start_time=_now(),
            duration=timedelta(0),
        )

    def update(self, current: EquityPoint) -> Optional["Drawdown"]:
        """Fold in the latest equity point.

        Returns the finished drawdown when equity recovers above the previous
        peak, otherwise None.
        """
        waiting = self.is_waiting_for_peak()
        new_peak = current.total > self.equity_range.high

        if waiting and new_peak:
            self.equity_range.high = current.total
            return None

        if waiting:
            self.start_time = current.time
            self.equity_range.low = current.total
            self.drawdown = self.calculate()
            return None

        if not new_peak:
            self.duration = current.time - self.start_time
            self.equity_range.update(current.total)
            self.drawdown = self.calculate()
            return None

        finished = Drawdown(
            equity_range=copy.copy(self.equity_range),
            drawdown=self.drawdown,
            start_time=self.start_time,
            duration=self.duration,
        )
        self.drawdown = 0.0
        self.duration = timedelta(0)
        self.equity_range.high = current.total
        return finished

    def is_waiting_for_peak(self) -> bool:
        """Return True when no drawdown is in progress."""
        return self.drawdown == 0.0

    def calculate(self) -> float:
        """Return (low - high) / high of the equity range."""
        return (-self.equity_range.calculate()) / self.equity_range.high


@dataclass
class MaxDrawdown:
    """The largest drawdown seen so far."""

    drawdown: Drawdown = field(default_factory=Drawdown)

    def update(self, next_drawdown: Drawdown) -> None:
        """Replace the held drawdown if the given one is larger in magnitude."""
        if abs(next_drawdown.drawdown) > abs(self.drawdown.drawdown):
            self.drawdown = copy.deepcopy(next_drawdown)


@dataclass
class AvgDrawdown:
    """Mean value and duration of a series of drawdowns."""

    count: int = 0
    mean_drawdown: float = 0.0
    mean_duration: timedelta = field(default_factory=timedelta)
    mean_duration_milliseconds: int = 0

    def update(self, drawdown: Drawdown) -> None:
        """Fold one finished drawdown into the averages."""
        self.count += 1
        self.mean_drawdown = welford.calculate_mean(
            self.mean_drawdown, drawdown.drawdown, float(self.count)
        )
        self.mean_duration_milliseconds = welford.calculate_mean(
            self.mean_duration_milliseconds,
            _milliseconds(drawdown.duration),
            self.count,
        )
        self.mean_duration = timedelta(milliseconds=self.mean_duration_milliseconds)