"""Packing of game event details into the compact extra-data fields of encounter events."""

from __future__ import annotations

import struct
from typing import Callable, Optional, TypeVar

from raidengine.entity import EntityManager, entity_id
from raidengine.event import EncounterEvent, EncounterField
from raidengine.game import GAME, GameEvent
from raidengine.game_events import (
    EntityOccupancyChangedEvent,
    EntityPositionChangedEvent,
    TilePropertiesChangedEvent,
)
from raidengine.vector import Vector2

_POSITION = struct.Struct("<hh")
_BOOL = struct.Struct("<B")

E = TypeVar("E", bound=GameEvent)


def _pack_position(position: Vector2, target: EncounterField, offset: int) -> int:
    try:
        _POSITION.pack_into(target.buffer, offset, int(position.x), int(position.y))
    except struct.error as exc:
        raise ValueError(f"position {position} does not fit the encounter field") from exc
    return offset + _POSITION.size


def _unpack_position(source: EncounterField, offset: int) -> tuple[Vector2, int]:
    x, y = _POSITION.unpack_from(source.buffer, offset)
    return Vector2(x, y), offset + _POSITION.size


def _pack_bool(value: bool, target: EncounterField, offset: int) -> int:
    try:
        _BOOL.pack_into(target.buffer, offset, 1 if value else 0)
    except struct.error as exc:
        raise ValueError("flag does not fit the encounter field") from exc
    return offset + _BOOL.size


def _unpack_bool(source: EncounterField, offset: int) -> tuple[bool, int]:
    (value,) = _BOOL.unpack_from(source.buffer, offset)
    return value == 1, offset + _BOOL.size


def _pack_position_changed(event: EntityPositionChangedEvent, target: EncounterEvent) -> None:
    target.source = entity_id(event.entity)
    offset = _pack_position(event.previous, target.extra_data1, 0)
    _pack_position(event.position, target.extra_data1, offset)


def _pack_occupancy_changed(event: EntityOccupancyChangedEvent, target: EncounterEvent) -> None:
    target.source = entity_id(event.entity)
    _pack_position(event.position, target.extra_data1, 0)


def _pack_tile_properties(event: TilePropertiesChangedEvent, target: EncounterEvent) -> None:
    field = target.extra_data1
    offset = _pack_position(event.position, field, 0)
    offset = _pack_bool(event.is_valid, field, offset)
    offset = _pack_bool(event.allows_movement, field, offset)
    _pack_bool(event.allows_occupancy, field, offset)


_PACKERS: tuple[tuple[type, Callable[[object, EncounterEvent], None]], ...] = (
    (EntityPositionChangedEvent, _pack_position_changed),
    (EntityOccupancyChangedEvent, _pack_occupancy_changed),
    (TilePropertiesChangedEvent, _pack_tile_properties),
)


def pack_data(game_event: GameEvent, encounter_event: EncounterEvent) -> None:
    """Store the details of ``game_event`` in ``encounter_event``."""
    for event_class, packer in _PACKERS:
        if isinstance(game_event, event_class):
            packer(game_event, encounter_event)
            return
    raise TypeError(f"cannot package {type(game_event).__name__} into an encounter event")


def unpack_data(
    encounter_event: EncounterEvent,
    event_class: type[E],
    entity_manager: Optional[EntityManager] = None,
) -> E:
    """Rebuild a game event of ``event_class`` from ``encounter_event``.

    Entities are looked up in ``entity_manager``, or in the shared game's manager.
    """
    manager = entity_manager if entity_manager is not None else GAME.entity_manager

    def find_entity():
        if manager is None:
            return None
        return manager.find_entity(encounter_event.source)

    field = encounter_event.extra_data1
    if issubclass(event_class, EntityPositionChangedEvent):
        previous, offset = _unpack_position(field, 0)
        position, _ = _unpack_position(field, offset)
        return event_class(find_entity(), previous, position)
    if issubclass(event_class, EntityOccupancyChangedEvent):
        position, _ = _unpack_position(field, 0)
        return event_class(find_entity(), position)
    if issubclass(event_class, TilePropertiesChangedEvent):
        position, offset = _unpack_position(field, 0)
        is_valid, offset = _unpack_bool(field, offset)
        allows_movement, offset = _unpack_bool(field, offset)
        allows_occupancy, _ = _unpack_bool(field, offset)
        return event_class(position, is_valid, allows_movement, allows_occupancy)
    raise TypeError(f"cannot unpackage an encounter event into {event_class.__name__}")