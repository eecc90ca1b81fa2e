"""Game-wide service registry, frame data and event dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, ClassVar, Optional, Protocol

from raidengine.vector import Vector2

INVALID_ENTITY_ID = 0
INVALID_POSITION = Vector2(-1, -1)


@dataclass(frozen=True)
class GameFrame:
    """One fixed simulation step."""

    frame: int
    time_step: int
    time_step_secs: float


class GameEventType(IntEnum):
    INVALID = 0
    GAME_START = 1
    GAME_END = 2
    ZONE_ENTER = 3
    ZONE_EXIT = 4
    COMBAT_START = 5
    COMBAT_END = 6
    TILE_PROPERTIES_CHANGED = 7
    DAMAGE = 8
    DEATH = 9
    ENTITY_SPAWNED = 10
    ENTITY_DESTROYED = 11
    ENTITY_OCCUPANCY_CHANGED = 12
    ENTITY_POSITION_CHANGED = 13


class GameEvent:
    """Base of everything sent through ``Game.dispatch``."""

    type: ClassVar[GameEventType] = GameEventType.INVALID


class GameSystem(Protocol):
    def update(self, frame: GameFrame) -> None: ...


class GameEventListener(Protocol):
    def on_game_event(self, event: GameEvent) -> None: ...


SERVICES = frozenset(
    {
        "engine",
        "entity_manager",
        "damage_calculator",
        "combat_system",
        "encounter_log",
        "faction_manager",
        "localization_system",
        "map",
    }
)


class Game:
    """Locates the game's services and fans frames and events out to subscribers."""

    def __init__(self) -> None:
        self.engine: Optional[Any] = None
        self.entity_manager: Optional[Any] = None
        self.damage_calculator: Optional[Any] = None
        self.combat_system: Optional[Any] = None
        self.encounter_log: Optional[Any] = None
        self.faction_manager: Optional[Any] = None
        self.localization_system: Optional[Any] = None
        self.map: Optional[Any] = None
        self._systems: list[GameSystem] = []
        self._listeners: list[GameEventListener] = []

    @property
    def systems(self) -> tuple[GameSystem, ...]:
        return tuple(self._systems)

    @property
    def listeners(self) -> tuple[GameEventListener, ...]:
        return tuple(self._listeners)

    def update(self, frame: GameFrame) -> None:
        for system in list(self._systems):
            system.update(frame)

    def shutdown(self) -> None:
        self._systems.clear()

    def register_system(self, system: GameSystem) -> None:
        self._systems.append(system)

    def unregister_system(self, system: GameSystem) -> None:
        _remove_first(self._systems, system)

    def register_listener(self, listener: GameEventListener) -> None:
        self._listeners.append(listener)

    def unregister_listener(self, listener: GameEventListener) -> None:
        _remove_first(self._listeners, listener)

    def dispatch(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener.on_game_event(event)

    def provide(self, name: str, service: Optional[Any]) -> None:
        """Install (or clear, with ``None``) the named service."""
        if name not in SERVICES:
            raise ValueError(f"unknown game service: {name!r}")
        setattr(self, name, service)


def _remove_first(items: list, value: Any) -> None:
    try:
        items.remove(value)
    except ValueError:
        pass


def tiles_per_second(speed: float) -> float:
    """A speed stat of 100 moves one tile per second."""
    return speed / 100.0


# Shared instance for systems that are not handed a Game explicitly.
GAME = Game()