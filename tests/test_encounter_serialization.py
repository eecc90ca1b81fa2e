import pytest

from raidengine.encounter_log import EncounterLog
from raidengine.encounter_serialization import (
    SerializationError,
    default_path,
    load,
    save,
)
from raidengine.event import EncounterEventType, EventPool
from raidengine.game import Game
from raidengine.game_events import (
    CombatEndEvent,
    CombatStartEvent,
    EntityOccupancyChangedEvent,
    GameStartEvent,
    ZoneEnterEvent,
)
from raidengine.vector import Vector2


def make_log(size=32):
    encounter_log = EncounterLog(Game())
    encounter_log.init(EventPool(size))
    return encounter_log


def snapshot(encounter_log):
    return [
        [
            (e.type, e.frame, e.source, e.target, e.extra_data1.int64, e.extra_data2.int64)
            for e in encounter.events
        ]
        for encounter in encounter_log.encounters
    ]


def test_save_writes_one_line_per_event(tmp_path):
    encounter_log = make_log()
    encounter_log.game.dispatch(CombatStartEvent())
    encounter_log.game.dispatch(ZoneEnterEvent())
    encounter_log.game.dispatch(CombatEndEvent())
    path = tmp_path / "encounter.log"
    assert save(path, encounter_log) == 3
    assert path.read_text(encoding="utf-8") == "5,0,0,0,0,0\n3,0,0,0,0,0\n6,0,0,0,0,0\n"


def test_round_trip(tmp_path):
    source_log = make_log()
    game = source_log.game
    game.dispatch(CombatStartEvent())
    game.dispatch(EntityOccupancyChangedEvent(None, Vector2(4, -2)))
    game.dispatch(CombatEndEvent())
    game.dispatch(CombatStartEvent())
    game.dispatch(ZoneEnterEvent())
    path = tmp_path / "log.txt"
    save(path, source_log)

    target_log = make_log()
    assert load(path, target_log) == 5
    assert snapshot(target_log) == snapshot(source_log)


def test_events_before_first_encounter_start_are_dropped(tmp_path):
    source_log = make_log()
    source_log.game.dispatch(GameStartEvent())
    source_log.game.dispatch(ZoneEnterEvent())
    source_log.game.dispatch(CombatStartEvent())
    path = tmp_path / "log.txt"
    save(path, source_log)

    target_log = make_log(8)
    assert load(path, target_log) == 1
    assert len(target_log.encounters) == 1
    assert target_log.encounters[0].events[0].type == EncounterEventType.ENCOUNTER_START
    assert target_log.pool.num_available == 7


def test_malformed_line_raises(tmp_path):
    path = tmp_path / "bad.log"
    path.write_text("5,0,0,0,0\n", encoding="utf-8")
    encounter_log = make_log(4)
    with pytest.raises(SerializationError):
        load(path, encounter_log)
    assert encounter_log.pool.num_available == 4


def test_non_numeric_field_raises(tmp_path):
    path = tmp_path / "bad.log"
    path.write_text("5,zero,0,0,0,0\n", encoding="utf-8")
    with pytest.raises(SerializationError):
        load(path, make_log())


def test_unknown_event_type_raises(tmp_path):
    path = tmp_path / "bad.log"
    path.write_text("99,0,0,0,0,0\n", encoding="utf-8")
    with pytest.raises(SerializationError):
        load(path, make_log())


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "absent.log", make_log())


def test_load_without_pool_keeps_nothing(tmp_path):
    path = tmp_path / "log.txt"
    path.write_text("5,0,0,0,0,0\n", encoding="utf-8")
    encounter_log = EncounterLog(Game())
    assert load(path, encounter_log) == 0
    assert encounter_log.encounters == ()


def test_save_creates_missing_directories(tmp_path):
    encounter_log = make_log()
    encounter_log.game.dispatch(CombatStartEvent())
    path = tmp_path / "nested" / "dir" / "encounter.log"
    save(path, encounter_log)
    assert path.read_text(encoding="utf-8").splitlines() == ["5,0,0,0,0,0"]


def test_default_path_names_the_log_file():
    path = default_path()
    assert path.name == "encounter.log"
    assert "Raidnite" in path.parts