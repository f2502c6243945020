"""Advisory trading decisions and forced exit signals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, ClassVar


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Decision(Enum):
    """The type of advisory signal a strategy endorses."""

    LONG = "Long"
    CLOSE_LONG = "CloseLong"
    SHORT = "Short"
    CLOSE_SHORT = "CloseShort"

    def is_long(self) -> bool:
        """Return True for a long entry."""
        return self is Decision.LONG

    def is_short(self) -> bool:
        """Return True for a short entry."""
        return self is Decision.SHORT

    def is_entry(self) -> bool:
        """Return True for a long or short entry."""
        return self in (Decision.LONG, Decision.SHORT)

    def is_exit(self) -> bool:
        """Return True for closing a long or a short."""
        return self in (Decision.CLOSE_LONG, Decision.CLOSE_SHORT)


@dataclass(frozen=True, order=True)
class SignalStrength:
    """Strength of an advisory decision."""

    value: float


@dataclass
class SignalForceExit:
    """Signal to exit a market's position, issued from outside the strategy."""

    FORCED_EXIT_SIGNAL: ClassVar[str] = "SignalForcedExit"

    exchange: str
    instrument: Any
    time: datetime = field(default_factory=_now)

    @classmethod
    def from_market(cls, market: Any) -> "SignalForceExit":
        """Create a forced exit for the market's exchange and instrument."""
        return cls(exchange=market.exchange, instrument=market.instrument)