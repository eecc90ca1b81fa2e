"""The live set of entities: identifiers, lookup, updates and listeners."""

from __future__ import annotations

from typing import Optional

from raidengine.entity import Entity, EntityListener, EntityManager
from raidengine.game import INVALID_ENTITY_ID, GameEvent, GameFrame


class World(EntityManager):
    """Owns the registered entities, hands out their ids and forwards frames and events."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._next_id = INVALID_ENTITY_ID
        self._listeners: list[EntityListener] = []

    @property
    def entities(self) -> tuple[Entity, ...]:
        return tuple(self._entities)

    def find_entity(self, entity_id: int) -> Optional[Entity]:
        return next((e for e in self._entities if e.id == entity_id), None)

    def reset(self) -> None:
        """Destroy every entity and restart id allocation."""
        while self._entities:
            self._entities.pop().destroy()
        self._next_id = INVALID_ENTITY_ID

    def __len__(self) -> int:
        return len(self._entities)

    def entity_at(self, index: int) -> Optional[Entity]:
        if 0 <= index < len(self._entities):
            return self._entities[index]
        return None

    def add_listener(self, listener: EntityListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: EntityListener) -> None:
        for index, existing in enumerate(self._listeners):
            if existing is listener:
                del self._listeners[index]
                return

    def update(self, frame: GameFrame) -> None:
        for entity in list(self._entities):
            entity.update(frame)

    def on_game_event(self, event: GameEvent) -> None:
        for entity in list(self._entities):
            entity.on_game_event(event)

    def register_entity(self, entity: Entity) -> None:
        """Add ``entity``, give it the next free id and initialise it."""
        self._entities.append(entity)
        self._next_id += 1
        if self._next_id == INVALID_ENTITY_ID:
            self._next_id += 1
        entity.id = self._next_id
        entity.init()

    def unregister_entity(self, entity: Entity) -> None:
        """Remove ``entity`` and tell every listener it is gone."""
        for index, existing in enumerate(self._entities):
            if existing is entity:
                del self._entities[index]
                break
        for listener in list(self._listeners):
            listener.on_entity_removed(entity)