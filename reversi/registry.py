"""Lookup tables for rule sets and agents, keyed by short string ids.

``reversi.othello`` registers the ``"othello"`` game and ``reversi.agents``
registers ``"random"`` and ``"minimax"`` on import, so the CLIs and the
match runner can be driven by plain strings.
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Dict, Iterable, Tuple

Factory = Callable[..., Any]


class _Registry:
    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._entries: Dict[str, Tuple[Factory, Dict[str, Any]]] = {}

    def add(self, entry_id: str, factory: Factory, defaults: Dict[str, Any]) -> None:
        if entry_id in self._entries:
            raise ValueError(f"{self.kind} id '{entry_id}' is already registered.")
        self._entries[entry_id] = (factory, dict(defaults))

    def entry(self, entry_id: str) -> Tuple[Factory, Dict[str, Any]]:
        try:
            return self._entries[entry_id]
        except KeyError:
            raise KeyError(
                f"{self.kind} id '{entry_id}' is not registered "
                f"(known: {', '.join(sorted(self._entries)) or 'none'})."
            ) from None

    def build(self, entry_id: str, overrides: Dict[str, Any]) -> Any:
        factory, defaults = self.entry(entry_id)
        return factory(**{**defaults, **overrides})

    def ids(self) -> Tuple[str, ...]:
        return tuple(self._entries)


_GAMES = _Registry("Game")
_AGENTS = _Registry("Agent")


def register_game(game_id: str, entry_point: Factory, **default_kwargs: Any) -> None:
    """Register a rules class, e.g. ``register_game("othello", OthelloGame, size=8)``."""
    _GAMES.add(game_id, entry_point, default_kwargs)


def make_game(game_id: str, **overrides: Any) -> Any:
    return _GAMES.build(game_id, overrides)


def list_games() -> Iterable[str]:
    return _GAMES.ids()


def register_agent(agent_id: str, ctor: Factory, **default_kwargs: Any) -> None:
    _AGENTS.add(agent_id, ctor, default_kwargs)


def make_agent(agent_id: str, **kwargs: Any) -> Any:
    return _AGENTS.build(agent_id, kwargs)


def configure_agent(agent_id: str, **options: Any) -> Any:
    """
    Build an agent from a shared bag of options.

    Options the constructor does not take are dropped, so a CLI can pass
    ``seed``, ``depth`` and ``dynamic_depth`` to any registered agent.
    """
    ctor, _ = _AGENTS.entry(agent_id)
    accepted = inspect.signature(ctor).parameters
    return make_agent(agent_id, **{k: v for k, v in options.items() if k in accepted})


def list_agents() -> Iterable[str]:
    return _AGENTS.ids()


def get_agent_entry(agent_id: str) -> Factory:
    return _AGENTS.entry(agent_id)[0]
