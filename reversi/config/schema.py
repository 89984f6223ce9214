"""Configuration schema for game sessions."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from reversi.othello.state import Player
from reversi.othello.utils import OTHELLO_SIZE, validate_size
from reversi.search import DIFFICULTY_DEPTHS, MinimaxConfig

OPPONENT_TYPES = ("human", "ai")
_COLOR_ALIASES = {"b": "black", "black": "black", "w": "white", "white": "white"}


@dataclass
class GameConfig:
    board_size: int = OTHELLO_SIZE
    opponent: str = "ai"
    difficulty: str = "easy"
    human_color: str = "black"
    dynamic_depth: bool = False

    def validate(self) -> "GameConfig":
        """Normalize and check every field; raise ValueError on bad input."""
        validate_size(self.board_size)
        if self.opponent not in OPPONENT_TYPES:
            raise ValueError(f"opponent must be one of {OPPONENT_TYPES}, got {self.opponent!r}")
        if self.difficulty not in DIFFICULTY_DEPTHS:
            raise ValueError(
                f"difficulty must be one of {tuple(DIFFICULTY_DEPTHS)}, got {self.difficulty!r}"
            )
        color = _COLOR_ALIASES.get(str(self.human_color).lower())
        if color is None:
            raise ValueError(f"human_color must be 'black' or 'white', got {self.human_color!r}")
        self.human_color = color
        if not isinstance(self.dynamic_depth, bool):
            raise ValueError(f"dynamic_depth must be a boolean, got {self.dynamic_depth!r}")
        return self

    @property
    def human_player(self) -> Player:
        return Player.BLACK if self.human_color == "black" else Player.WHITE

    @property
    def ai_player(self) -> Player:
        return self.human_player.opponent

    @property
    def vs_ai(self) -> bool:
        return self.opponent == "ai"

    def search_config(self) -> MinimaxConfig:
        return MinimaxConfig.for_difficulty(self.difficulty, dynamic_depth=self.dynamic_depth)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data).validate()


def load_config(path: Union[str, Path]) -> GameConfig:
    """Load GameConfig from a YAML file."""
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a YAML mapping, got {type(data)}")
    if "game" in data and isinstance(data["game"], dict):
        data = data["game"]
    return GameConfig.from_dict(data)
