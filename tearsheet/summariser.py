"""Base class for statistics that are updated position by position."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable


class PositionSummariser(ABC):
    """A statistic that folds positions into itself one at a time."""

    @abstractmethod
    def update(self, position: Any) -> None:
        """Update the statistic with one position."""

    def generate_summary(self, positions: Iterable[Any]) -> None:
        """Update the statistic with every position, in order."""
        for position in positions:
            self.update(position)