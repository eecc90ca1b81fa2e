"""Factions, their display names and how they regard one another."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from raidengine.localization import INVALID_LOCALIZATION_KEY
from raidengine.multikeymap import CombinedKeyMap


class FactionRelationship(IntEnum):
    INVALID = 0
    FRIENDLY = 1
    HOSTILE = 2
    NEUTRAL = 3


@dataclass
class FactionInfo:
    display_name: int = INVALID_LOCALIZATION_KEY


class FactionManager:
    """Registry of factions and of the directed relationship from one to another."""

    def __init__(self) -> None:
        self.relationships: CombinedKeyMap[FactionRelationship] = CombinedKeyMap()
        self.factions: dict[int, FactionInfo] = {}

    def register_faction(self, faction_id: int, info: FactionInfo) -> None:
        self.factions[faction_id] = info

    def unregister_faction(self, faction_id: int) -> None:
        self.factions.pop(faction_id, None)

    def faction_name(self, faction_id: int) -> int:
        info = self.factions.get(faction_id)
        return info.display_name if info is not None else INVALID_LOCALIZATION_KEY

    def relationship(self, a: int, b: int) -> FactionRelationship:
        """A faction is always friendly to itself; unknown pairs are invalid."""
        if a == b:
            return FactionRelationship.FRIENDLY
        result = self.relationships.get(a, b)
        return result if result is not None else FactionRelationship.INVALID

    def set_relationship(self, a: int, b: int, relationship: FactionRelationship) -> None:
        if a == b:
            return
        self.relationships.set(a, b, relationship)

    def is_friendly(self, a: int, b: int) -> bool:
        return self.relationship(a, b) == FactionRelationship.FRIENDLY

    def is_neutral(self, a: int, b: int) -> bool:
        return self.relationship(a, b) in (FactionRelationship.NEUTRAL, FactionRelationship.INVALID)

    def is_neutral_or_hostile(self, a: int, b: int) -> bool:
        return self.relationship(a, b) in (FactionRelationship.NEUTRAL, FactionRelationship.HOSTILE)

    def is_hostile(self, a: int, b: int) -> bool:
        return self.relationship(a, b) == FactionRelationship.HOSTILE