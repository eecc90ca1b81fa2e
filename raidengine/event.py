"""Encounter log records and the fixed-size pool they are drawn from."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from raidengine.game import INVALID_ENTITY_ID

if TYPE_CHECKING:
    from raidengine.entity import Entity


class EncounterEventType(IntEnum):
    INVALID = 0
    GAME_START = 1
    GAME_END = 2
    ZONE_ENTER = 3
    ZONE_EXIT = 4
    ENCOUNTER_START = 5
    ENCOUNTER_END = 6
    TILE_PROPERTIES_CHANGED = 7
    ENTITY_CREATED = 8
    ENTITY_DIED = 9
    ENTITY_DESTROYED = 10
    ABILITY_START = 11
    ABILITY_END = 12
    HEALTH_CHANGED = 13
    MANA_CHANGED = 14
    AURA_GAINED = 15
    AURA_REFRESHED = 16
    AURA_REMOVED = 17
    OCCUPANCY_CHANGED = 18
    POSITION_CHANGED = 19
    MAX = 20


FIELD_SIZE = 8


class EncounterField:
    """Eight bytes of extra event data, readable as raw bytes or a signed 64-bit integer."""

    __slots__ = ("buffer",)

    def __init__(self, value: int = 0) -> None:
        self.buffer = bytearray(FIELD_SIZE)
        self.int64 = value

    @property
    def int64(self) -> int:
        return int.from_bytes(self.buffer, "little", signed=True)

    @int64.setter
    def int64(self, value: int) -> None:
        self.buffer[:] = int(value).to_bytes(FIELD_SIZE, "little", signed=True)

    def clear(self) -> None:
        self.buffer[:] = bytes(FIELD_SIZE)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncounterField):
            return NotImplemented
        return self.buffer == other.buffer

    def __repr__(self) -> str:
        return f"EncounterField({self.int64})"


@dataclass(eq=False)
class EncounterEvent:
    """One entry of the encounter log."""

    type: EncounterEventType = EncounterEventType.INVALID
    frame: int = 0
    source: int = INVALID_ENTITY_ID
    target: int = INVALID_ENTITY_ID
    extra_data1: EncounterField = field(default_factory=EncounterField)
    extra_data2: EncounterField = field(default_factory=EncounterField)


class EventPool:
    """A fixed number of preallocated events, handed out and returned in FIFO order."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("pool size must not be negative")
        self._available: deque[EncounterEvent] = deque(EncounterEvent() for _ in range(size))

    @property
    def num_available(self) -> int:
        return len(self._available)

    def __len__(self) -> int:
        return len(self._available)

    def create(self) -> Optional[EncounterEvent]:
        """Take the next free event, or ``None`` when the pool is exhausted."""
        if not self._available:
            return None
        return self._available.popleft()

    def free(self, event: Optional[EncounterEvent]) -> None:
        if event is not None:
            self._available.append(event)


def create_event(
    event_type: EncounterEventType, frame: int, pool: Optional[EventPool]
) -> Optional[EncounterEvent]:
    """Draw an event from ``pool`` and initialise it to ``event_type`` at ``frame``."""
    if pool is None:
        return None
    event = pool.create()
    if event is not None:
        event.type = event_type
        event.frame = frame
        event.source = INVALID_ENTITY_ID
        event.target = INVALID_ENTITY_ID
        event.extra_data1.clear()
        event.extra_data2.clear()
    return event


def on_ability_start(event: EncounterEvent, spell_id: int) -> None:
    event.type = EncounterEventType.ABILITY_START
    event.extra_data1.int64 = spell_id


def on_entity_created(event: EncounterEvent, entity: Entity) -> None:
    event.type = EncounterEventType.ENTITY_CREATED