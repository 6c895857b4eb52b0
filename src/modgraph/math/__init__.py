"""Numeric helpers shared by the metric and scoring code."""

from .statistics import Statistics

__all__ = ["Statistics"]
