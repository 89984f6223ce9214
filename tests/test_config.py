"""Tests for configuration schemas."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from reversi.config import GameConfig, load_config
from reversi.othello import Player


def test_game_config_parsing():
    data = {
        "board_size": 10,
        "opponent": "ai",
        "difficulty": "hard",
        "human_color": "W",
        "dynamic_depth": True,
    }

    cfg = GameConfig.from_dict(data)
    assert cfg.board_size == 10
    assert cfg.human_color == "white"
    assert cfg.human_player == Player.WHITE
    assert cfg.ai_player == Player.BLACK
    assert cfg.vs_ai

    search = cfg.search_config()
    assert search.depth == 6
    assert search.dynamic_depth


def test_defaults():
    cfg = GameConfig().validate()
    assert cfg.board_size == 8
    assert cfg.opponent == "ai"
    assert cfg.search_config().depth == 2
    assert cfg.human_player == Player.BLACK


@pytest.mark.parametrize("size", [4, 5, 7, 9, 22, "8", 8.0, True])
def test_bad_board_size(size):
    with pytest.raises(ValueError):
        GameConfig(board_size=size).validate()


@pytest.mark.parametrize(
    "data",
    [
        {"opponent": "robot"},
        {"difficulty": "insane"},
        {"human_color": "red"},
        {"dynamic_depth": "yes"},
        {"board": 8},
    ],
)
def test_bad_fields(data):
    with pytest.raises(ValueError):
        GameConfig.from_dict(data)


def test_load_config_from_yaml():
    with tempfile.TemporaryDirectory() as tmpdir:
        nested = Path(tmpdir) / "nested.yaml"
        nested.write_text("game:\n  board_size: 6\n  opponent: human\n")
        flat = Path(tmpdir) / "flat.yaml"
        flat.write_text("difficulty: medium\nhuman_color: black\n")
        empty = Path(tmpdir) / "empty.yaml"
        empty.write_text("")

        assert load_config(nested).board_size == 6
        assert not load_config(nested).vs_ai
        assert load_config(flat).search_config().depth == 4
        assert load_config(empty) == GameConfig()


def test_load_config_rejects_non_mapping():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "list.yaml"
        path.write_text("- 8\n- ai\n")
        with pytest.raises(ValueError):
            load_config(path)


def test_shipped_default_config_is_valid():
    path = Path(__file__).resolve().parents[1] / "configs" / "default.yaml"
    cfg = load_config(path)
    assert cfg.difficulty == "medium"
