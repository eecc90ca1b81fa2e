"""The concrete events that flow through the game's dispatcher."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional

from raidengine.game import INVALID_POSITION, GameEvent, GameEventType
from raidengine.vector import Vector2

if TYPE_CHECKING:
    from raidengine.entity import Entity


class DamageType(IntEnum):
    INVALID = 0
    PHYSICAL = 1
    FIRE = 2
    FROST = 3
    EARTH = 4
    ETC = 5


class GameStartEvent(GameEvent):
    type = GameEventType.GAME_START


class GameEndEvent(GameEvent):
    type = GameEventType.GAME_END


class ZoneEnterEvent(GameEvent):
    type = GameEventType.ZONE_ENTER


class ZoneExitEvent(GameEvent):
    type = GameEventType.ZONE_EXIT


class CombatStartEvent(GameEvent):
    type = GameEventType.COMBAT_START


class CombatEndEvent(GameEvent):
    type = GameEventType.COMBAT_END


@dataclass
class TilePropertiesChangedEvent(GameEvent):
    """Snapshot of a tile's flags after one of them changed."""

    type = GameEventType.TILE_PROPERTIES_CHANGED

    position: Vector2 = field(default_factory=Vector2)
    is_valid: bool = False
    allows_movement: bool = False
    allows_occupancy: bool = False

    @classmethod
    def from_tile(cls, tile: Any) -> TilePropertiesChangedEvent:
        return cls(
            position=tile.position,
            is_valid=tile.valid,
            allows_movement=tile.allows_movement,
            allows_occupancy=tile.allows_occupancy,
        )


@dataclass
class _EntityEvent(GameEvent):
    entity: Optional[Entity]


@dataclass
class EntitySpawnedEvent(_EntityEvent):
    type = GameEventType.ENTITY_SPAWNED


@dataclass
class EntityDestroyedEvent(_EntityEvent):
    type = GameEventType.ENTITY_DESTROYED


@dataclass
class EntityOccupancyChangedEvent(_EntityEvent):
    type = GameEventType.ENTITY_OCCUPANCY_CHANGED

    position: Vector2 = field(default_factory=Vector2)


@dataclass
class EntityPositionChangedEvent(_EntityEvent):
    type = GameEventType.ENTITY_POSITION_CHANGED

    previous: Vector2 = INVALID_POSITION
    position: Vector2 = INVALID_POSITION


@dataclass
class DeathEvent(_EntityEvent):
    type = GameEventType.DEATH


@dataclass
class DamageEvent(_EntityEvent):
    type = GameEventType.DAMAGE

    base_damage: float = 0.0
    actual_damage: float = 0.0
    damage_type: DamageType = DamageType.INVALID