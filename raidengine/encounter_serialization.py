"""Reading and writing the encounter log as comma-separated text."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from platformdirs import user_data_dir

from raidengine.encounter import Encounter
from raidengine.encounter_log import EncounterLog
from raidengine.event import EncounterEventType

PROJECT_NAME = "Raidnite"
FILE_NAME = "encounter.log"
_FIELDS = 6

PathLike = Union[str, "os.PathLike[str]"]


class SerializationError(ValueError):
    """Raised when an encounter log file holds a malformed line."""


def default_path() -> Path:
    """Where the encounter log is kept for the current user."""
    return Path(user_data_dir(PROJECT_NAME, appauthor=False)) / FILE_NAME


def _parse_line(line: str, number: int) -> list[int]:
    parts = line.split(",")
    if len(parts) != _FIELDS:
        raise SerializationError(f"line {number}: expected {_FIELDS} fields, got {len(parts)}")
    try:
        return [int(part.strip()) for part in parts]
    except ValueError as exc:
        raise SerializationError(f"line {number}: {exc}") from exc


def load(path: PathLike, encounter_log: EncounterLog) -> int:
    """Read events from ``path`` into ``encounter_log``; return how many were kept.

    Each encounter-start event opens a new encounter; events before the first one are
    dropped, as are lines for which the log's pool has no event left.
    """
    encounter: Optional[Encounter] = None
    kept = 0
    with open(path, encoding="utf-8") as infile:
        for number, line in enumerate(infile, start=1):
            event = encounter_log.load_event()
            if event is None:
                continue
            try:
                etype, frame, source, target, extra1, extra2 = _parse_line(line, number)
                try:
                    event.type = EncounterEventType(etype)
                except ValueError as exc:
                    raise SerializationError(f"line {number}: unknown event type {etype}") from exc
                event.frame = frame
                event.source = source
                event.target = target
                try:
                    event.extra_data1.int64 = extra1
                    event.extra_data2.int64 = extra2
                except OverflowError as exc:
                    raise SerializationError(f"line {number}: extra data out of range") from exc
            except SerializationError:
                encounter_log.pool.free(event)
                raise

            if event.type == EncounterEventType.ENCOUNTER_START:
                encounter = encounter_log.create_encounter()

            if encounter is not None:
                encounter.add_event(event)
                kept += 1
            else:
                encounter_log.pool.free(event)
    return kept


def save(path: PathLike, encounter_log: EncounterLog) -> int:
    """Write every event of ``encounter_log`` to ``path``; return how many were written."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    written = 0
    with open(target, "w", encoding="utf-8", newline="") as outfile:
        for encounter in encounter_log.encounters:
            for event in encounter.events:
                outfile.write(
                    f"{int(event.type)},{event.frame},{event.source},{event.target},"
                    f"{event.extra_data1.int64},{event.extra_data2.int64}\n"
                )
                written += 1
    return written