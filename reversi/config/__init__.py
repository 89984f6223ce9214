"""Config package exports."""

from .schema import OPPONENT_TYPES, GameConfig, load_config

__all__ = ["GameConfig", "OPPONENT_TYPES", "load_config"]
