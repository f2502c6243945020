"""Incremental trading statistics: running means and dispersion, drawdowns, risk-adjusted ratios and text tear sheets."""

__version__ = "0.1.0"