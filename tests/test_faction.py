from raidengine.faction import FactionInfo, FactionManager, FactionRelationship
from raidengine.localization import INVALID_LOCALIZATION_KEY, string_hash


def test_register_and_name():
    manager = FactionManager()
    key = string_hash("faction.horde")
    manager.register_faction(1, FactionInfo(display_name=key))
    assert manager.faction_name(1) == key
    manager.unregister_faction(1)
    assert manager.faction_name(1) == INVALID_LOCALIZATION_KEY


def test_unknown_faction_name():
    assert FactionManager().faction_name(9) == INVALID_LOCALIZATION_KEY


def test_self_is_friendly():
    manager = FactionManager()
    assert manager.relationship(3, 3) is FactionRelationship.FRIENDLY
    manager.set_relationship(3, 3, FactionRelationship.HOSTILE)
    assert manager.is_friendly(3, 3)


def test_unset_relationship_is_invalid_and_neutral():
    manager = FactionManager()
    assert manager.relationship(1, 2) is FactionRelationship.INVALID
    assert manager.is_neutral(1, 2)
    assert not manager.is_neutral_or_hostile(1, 2)


def test_relationship_is_directional():
    manager = FactionManager()
    manager.set_relationship(1, 2, FactionRelationship.HOSTILE)
    assert manager.is_hostile(1, 2)
    assert manager.relationship(2, 1) is FactionRelationship.INVALID


def test_predicates():
    manager = FactionManager()
    manager.set_relationship(1, 2, FactionRelationship.NEUTRAL)
    manager.set_relationship(1, 3, FactionRelationship.HOSTILE)
    manager.set_relationship(1, 4, FactionRelationship.FRIENDLY)
    assert manager.is_neutral(1, 2) and manager.is_neutral_or_hostile(1, 2)
    assert manager.is_hostile(1, 3) and manager.is_neutral_or_hostile(1, 3)
    assert not manager.is_neutral(1, 3)
    assert manager.is_friendly(1, 4)
    assert not manager.is_neutral_or_hostile(1, 4)


def test_overwrite_relationship():
    manager = FactionManager()
    manager.set_relationship(5, 6, FactionRelationship.HOSTILE)
    manager.set_relationship(5, 6, FactionRelationship.FRIENDLY)
    assert manager.relationship(5, 6) is FactionRelationship.FRIENDLY