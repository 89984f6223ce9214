"""Utility modules."""

from .metrics import MetricsLogger
from .match import play_match

__all__ = ["MetricsLogger", "play_match"]
