"""Errors raised by the statistics package."""

from __future__ import annotations


class StatisticError(Exception):
    """Base class of every statistics error."""


class BuilderIncompleteError(StatisticError):
    """A struct could not be built because attributes are missing."""

    def __init__(self, missing: str) -> None:
        self.missing = missing
        super().__init__(f"Failed to build struct due to missing attributes: {missing}")


class BuilderNoMetricsProvidedError(StatisticError):
    """A struct could not be built because no metrics were provided."""

    def __init__(self) -> None:
        super().__init__("Failed to build struct due to insufficient metrics provided")