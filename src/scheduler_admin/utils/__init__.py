"""Utilities: interval rendering, error handling, metrics and app wiring."""

from .interval import TIME_PERIODS, humanize_interval

__all__ = ["TIME_PERIODS", "humanize_interval"]
