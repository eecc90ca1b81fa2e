import pytest

from raidengine.entity import Entity
from raidengine.event import (
    EncounterEvent,
    EncounterEventType,
    EncounterField,
    EventPool,
    create_event,
    on_ability_start,
    on_entity_created,
)
from raidengine.game import INVALID_ENTITY_ID


def test_field_int64_round_trip():
    field = EncounterField()
    for value in (0, 42, -7, 2**63 - 1, -(2**63)):
        field.int64 = value
        assert field.int64 == value


def test_field_is_little_endian_and_clears():
    field = EncounterField(1)
    assert field.buffer == bytearray([1, 0, 0, 0, 0, 0, 0, 0])
    field.clear()
    assert field.int64 == 0
    assert field == EncounterField()


def test_field_rejects_values_out_of_range():
    with pytest.raises(OverflowError):
        EncounterField(2**63)


def test_event_defaults():
    event = EncounterEvent()
    assert event.type == EncounterEventType.INVALID
    assert event.source == INVALID_ENTITY_ID
    assert event.target == INVALID_ENTITY_ID
    assert event.extra_data1.int64 == 0


def test_pool_hands_out_until_exhausted():
    pool = EventPool(2)
    first = pool.create()
    second = pool.create()
    assert first is not second
    assert pool.num_available == 0
    assert pool.create() is None


def test_pool_free_returns_event():
    pool = EventPool(1)
    event = pool.create()
    pool.free(event)
    pool.free(None)
    assert len(pool) == 1
    assert pool.create() is event


def test_pool_rejects_negative_size():
    with pytest.raises(ValueError):
        EventPool(-1)


def test_create_event_initialises_fields():
    pool = EventPool(1)
    stale = pool.create()
    stale.source = 9
    stale.extra_data1.int64 = 5
    pool.free(stale)
    event = create_event(EncounterEventType.ZONE_ENTER, 30, pool)
    assert event is stale
    assert event.type == EncounterEventType.ZONE_ENTER
    assert event.frame == 30
    assert event.source == INVALID_ENTITY_ID
    assert event.extra_data1.int64 == 0


def test_create_event_without_pool_or_capacity():
    assert create_event(EncounterEventType.GAME_START, 1, None) is None
    assert create_event(EncounterEventType.GAME_START, 1, EventPool(0)) is None


def test_on_ability_start_stores_spell():
    event = EncounterEvent()
    on_ability_start(event, 1234)
    assert event.type == EncounterEventType.ABILITY_START
    assert event.extra_data1.int64 == 1234


def test_on_entity_created_sets_type():
    event = EncounterEvent()
    on_entity_created(event, Entity())
    assert event.type == EncounterEventType.ENTITY_CREATED