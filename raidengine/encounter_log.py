"""Records game events into encounters, and renders their timing for display."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from raidengine import timeutil
from raidengine.encounter import Encounter
from raidengine.encounter_data import pack_data
from raidengine.event import EncounterEvent, EncounterEventType, EventPool, create_event
from raidengine.game import GAME, Game, GameEvent, GameEventType

logger = logging.getLogger(__name__)

_NANOS_PER_MILLI = 1_000_000


class EncounterLog:
    """Listens to the game and files each relevant event under the active encounter."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else GAME
        self._active: Optional[Encounter] = None
        self._pool: Optional[EventPool] = None
        self._encounters: list[Encounter] = []
        self._start_frame = 0
        self._handlers: dict[GameEventType, Callable[[GameEvent], None]] = {
            GameEventType.GAME_START: self._on_game_start,
            GameEventType.GAME_END: self._on_game_end,
            GameEventType.ZONE_ENTER: self._simple(EncounterEventType.ZONE_ENTER),
            GameEventType.ZONE_EXIT: self._simple(EncounterEventType.ZONE_EXIT),
            GameEventType.COMBAT_START: self._on_combat_start,
            GameEventType.COMBAT_END: self._on_combat_end,
            GameEventType.TILE_PROPERTIES_CHANGED: self._packed(
                EncounterEventType.TILE_PROPERTIES_CHANGED
            ),
            GameEventType.ENTITY_SPAWNED: self._simple(EncounterEventType.ENTITY_CREATED),
            GameEventType.ENTITY_DESTROYED: self._simple(EncounterEventType.ENTITY_DESTROYED),
            GameEventType.ENTITY_OCCUPANCY_CHANGED: self._packed(
                EncounterEventType.OCCUPANCY_CHANGED
            ),
            GameEventType.ENTITY_POSITION_CHANGED: self._packed(
                EncounterEventType.POSITION_CHANGED
            ),
        }

    @property
    def encounters(self) -> tuple[Encounter, ...]:
        return tuple(self._encounters)

    @property
    def active_encounter(self) -> Optional[Encounter]:
        return self._active

    @property
    def start_frame(self) -> int:
        return self._start_frame

    @property
    def pool(self) -> Optional[EventPool]:
        return self._pool

    def init(self, pool: EventPool) -> None:
        """Start listening to the game, drawing events from ``pool``."""
        self.game.register_listener(self)
        self._pool = pool

    def shutdown(self) -> None:
        self.game.unregister_listener(self)
        self._pool = None

    def create_encounter(self) -> Encounter:
        """Start a new encounter and make it the active one."""
        encounter = Encounter()
        self._encounters.append(encounter)
        self._active = encounter
        return encounter

    def clear(self) -> None:
        """Drop every encounter, returning its events to the pool."""
        while self._encounters:
            encounter = self._encounters.pop()
            if self._pool is not None:
                encounter.shutdown(self._pool)
            else:
                encounter.events.clear()
        self._active = None

    def on_game_event(self, event: GameEvent) -> None:
        handler = self._handlers.get(event.type)
        if handler is not None:
            handler(event)

    def load_event(self) -> Optional[EncounterEvent]:
        """A fresh event from the pool, or ``None`` without a pool or when it is exhausted."""
        if self._pool is None:
            return None
        return self._pool.create()

    def time_since(self, frame: int, since: Optional[int] = None) -> int:
        """Milliseconds of game time from ``since`` (default: the game start) to ``frame``."""
        if since is None:
            since = self._start_frame
        engine = self.game.engine
        if engine is None:
            return 0
        return engine.frames_to_millis(frame - since)

    def encounter_display(self, encounter: Encounter) -> str:
        """``start - end (duration)`` for ended encounters, ``start (duration)`` otherwise."""
        if encounter.end_frame != 0:
            start = self.time_since(encounter.start_frame)
            end = self.time_since(encounter.end_frame)
            duration = self.time_since(encounter.end_frame, encounter.start_frame)
            return f"{_hms(start)} - {_hms(end)} ({_hms(duration)})"

        if encounter.start_frame == 0:
            logger.error("Encounter has not begun")
        start = self.time_since(encounter.start_frame)
        duration = self.time_since(self._frame(), encounter.start_frame)
        return f"{_hms(start)} ({_hms(duration)})"

    def event_display(self, event: EncounterEvent) -> str:
        return _hms(self.time_since(event.frame))

    def _frame(self) -> int:
        engine = self.game.engine
        return engine.frame_count if engine is not None else 0

    def _add(self, event_type: EncounterEventType) -> Optional[EncounterEvent]:
        event = create_event(event_type, self._frame(), self._pool)
        if event is None:
            return None
        if self._active is None:
            logger.error("No active encounter for %s", event_type.name)
            if self._pool is not None:
                self._pool.free(event)
            return None
        self._active.add_event(event)
        return event

    def _simple(self, event_type: EncounterEventType) -> Callable[[GameEvent], None]:
        def handler(_event: GameEvent) -> None:
            self._add(event_type)

        return handler

    def _packed(self, event_type: EncounterEventType) -> Callable[[GameEvent], None]:
        def handler(event: GameEvent) -> None:
            record = self._add(event_type)
            if record is not None:
                pack_data(event, record)

        return handler

    def _on_game_start(self, _event: GameEvent) -> None:
        encounter = self.create_encounter()
        frame = self._frame()
        encounter.begin(frame, False)
        start = create_event(EncounterEventType.GAME_START, frame, self._pool)
        if start is None:
            return
        encounter.add_event(start)
        self._start_frame = frame

    def _on_game_end(self, _event: GameEvent) -> None:
        if self._active is None:
            logger.error("Game ended without an active encounter")
            return
        self._add(EncounterEventType.GAME_END)
        self._active.end(self._frame())
        self._active = None

    def _on_combat_start(self, _event: GameEvent) -> None:
        self.create_encounter()
        self._add(EncounterEventType.ENCOUNTER_START)

    def _on_combat_end(self, _event: GameEvent) -> None:
        self._add(EncounterEventType.ENCOUNTER_END)
        self._active = None


def _hms(millis: int) -> str:
    return timeutil.format_hms(millis * _NANOS_PER_MILLI)