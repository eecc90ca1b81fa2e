"""One span of logged play, from its start frame to its end frame."""

from __future__ import annotations

from raidengine.event import EncounterEvent, EventPool


class Encounter:
    """A stretch of the log with its own ordered events."""

    def __init__(self) -> None:
        self.start_frame = 0
        self.end_frame = 0
        self.is_combat = False
        self.name = ""
        self.events: list[EncounterEvent] = []

    def begin(self, frame: int, is_combat: bool) -> None:
        self.start_frame = frame
        self.is_combat = is_combat

    def end(self, frame: int) -> None:
        self.end_frame = frame

    def duration(self, current: int) -> int:
        """Frames elapsed: up to the end if ended, else up to ``current``; 0 if never begun."""
        if self.start_frame == 0:
            return 0
        if self.end_frame != 0:
            return self.end_frame - self.start_frame
        return current - self.start_frame

    def add_event(self, event: EncounterEvent) -> None:
        self.events.append(event)

    def shutdown(self, pool: EventPool) -> None:
        """Return every event, in order, to ``pool``."""
        events, self.events = self.events, []
        for event in events:
            pool.free(event)