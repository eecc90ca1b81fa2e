"""Damage mitigation formulas and the combat system's entity handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from raidengine.entity import Entity
from raidengine.game import GAME, INVALID_ENTITY_ID, Game
from raidengine.game_events import DamageType, DeathEvent

INVALID_SPELL_ID = 0


class DamageCalculator:
    """Turns armor and resistances into a percentage of damage resisted."""

    def armor_resist_percent(self, enemy_level: float, armor: float) -> float:
        return armor / (enemy_level + 100 + armor) * 100

    def resist_percent(self, enemy_level: float, resist: float) -> float:
        return resist / (enemy_level + 50 + resist) * 100


@dataclass
class DamageParams:
    """A request to deal damage from one entity to another."""

    source: int = INVALID_ENTITY_ID
    source_level: float = 0.0
    target: int = INVALID_ENTITY_ID
    type: DamageType = DamageType.INVALID
    spell: int = INVALID_SPELL_ID
    value: float = 0.0


class CombatSystem:
    """Resolves combat outcomes against the game's entity manager."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else GAME

    def kill_entity(self, entity: Optional[Entity]) -> None:
        """Tell the entity manager that ``entity`` died."""
        manager = self.game.entity_manager
        if manager is not None:
            manager.on_game_event(DeathEvent(entity))