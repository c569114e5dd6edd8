"""Local and remote players with their cursor positions."""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping


def _now_ms() -> float:
    return time.time() * 1000.0


class MouseState(Enum):
    """Which mouse button is held down."""

    UP = "up"
    LEFT_DOWN = "left_down"
    RIGHT_DOWN = "right_down"


@dataclass
class Player:
    """A player's cursor position and colour."""

    id: str
    x: float
    y: float
    color: str
    active: bool = True
    last_update: float = 0.0


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


@dataclass
class PlayerStateResource:
    """Players of a multiplayer game and the local pointer state."""

    local_player_id: str | None = None
    mouse_x: float = 0.0
    mouse_y: float = 0.0
    mouse_state: MouseState = MouseState.UP
    last_position_update: float = 0.0
    last_key_pressed: str | None = None
    clock: Callable[[], float] = field(default=_now_ms, repr=False, compare=False)
    active_player_count: int = field(default=0, init=False)
    _players: dict[str, Player] = field(default_factory=dict, init=False, repr=False)

    def local_player(self) -> Player | None:
        if self.local_player_id is None:
            return None
        return self._players.get(self.local_player_id)

    def add_player(self, player_id: str, x: float, y: float, color: str) -> Player:
        """Add or replace a player and return it."""
        player = Player(player_id, x, y, color, True, self.clock())
        self._players[player_id] = player
        self._update_active_count()
        return player

    def remove_player(self, player_id: str) -> None:
        self._players.pop(player_id, None)
        self._update_active_count()

    def has_player(self, player_id: str) -> bool:
        return player_id in self._players

    def all_players(self) -> Mapping[str, Player]:
        """Read-only view of every player by id."""
        return MappingProxyType(self._players)

    def _update_active_count(self) -> None:
        self.active_player_count = sum(1 for p in self._players.values() if p.active)

    def update_player_position(self, player_id: str, x: float, y: float) -> None:
        player = self._players.get(player_id)
        if player is not None:
            player.x = x
            player.y = y
            player.last_update = self.clock()

    def update_local_player_position(self, x: float, y: float) -> None:
        if self.local_player_id is not None:
            self.update_player_position(self.local_player_id, x, y)

    def add_players_from_json(self, message: Mapping[str, Any]) -> None:
        """Add the players held as a JSON string under ``message["players"]``.

        Entries lacking a numeric ``x``/``y`` or a string ``color`` are skipped.
        """
        players_text = message.get("players")
        if not isinstance(players_text, str):
            raise ValueError("Players value is not a string")
        try:
            players = json.loads(players_text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Failed to parse players JSON: {exc}") from exc
        if not isinstance(players, dict):
            return
        for player_id, entry in players.items():
            if not isinstance(entry, dict):
                continue
            x = _as_number(entry.get("x"))
            y = _as_number(entry.get("y"))
            color = entry.get("color")
            if x is not None and y is not None and isinstance(color, str):
                self.add_player(player_id, x, y, color)

    def players_to_json(self) -> str:
        """Compact JSON object of every player, keys sorted."""
        players = {
            player_id: {
                "x": float(p.x),
                "y": float(p.y),
                "color": p.color,
                "active": p.active,
            }
            for player_id, p in self._players.items()
        }
        return json.dumps(players, sort_keys=True, separators=(",", ":"))