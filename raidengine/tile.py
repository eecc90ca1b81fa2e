"""A single cell of the map grid."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from raidengine.vector import Vector2

if TYPE_CHECKING:
    from raidengine.entity import Entity


class Tile:
    """One grid cell: its flags, its occupant and the entities passing through it."""

    def __init__(self, position: Vector2 = Vector2(-1, -1)) -> None:
        self.position = position
        # An entity occupies a tile when it has claimed it, even while still in transit.
        self.occupant: Optional[Entity] = None
        self.valid = True
        self.allows_movement = True
        self.allows_occupancy = True
        self._active_entities: list[Entity] = []

    @property
    def is_occupied(self) -> bool:
        return self.occupant is not None

    @property
    def active_entities(self) -> tuple[Entity, ...]:
        """Entities currently standing on or passing through this tile."""
        return tuple(self._active_entities)

    def on_entity_enter(self, entity: Entity) -> None:
        self._active_entities.append(entity)

    def on_entity_exit(self, entity: Entity) -> None:
        for index, existing in enumerate(self._active_entities):
            if existing is entity:
                del self._active_entities[index]
                return

    def __repr__(self) -> str:
        return (
            f"Tile(position={self.position}, valid={self.valid}, "
            f"movement={self.allows_movement}, occupancy={self.allows_occupancy}, "
            f"occupied={self.is_occupied})"
        )