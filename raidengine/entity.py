"""Entities built from components, and the interface of entity managers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional, Protocol, TypeVar

from raidengine.game import INVALID_ENTITY_ID, INVALID_POSITION, GameEvent, GameFrame
from raidengine.vector import Vector2, Vector3


class Component:
    """A piece of behaviour attached to one entity."""

    def __init__(self, parent: Entity) -> None:
        self.parent = parent

    def init(self) -> None:
        pass

    def update(self, frame: GameFrame) -> None:
        pass

    def on_game_event(self, event: GameEvent) -> None:
        pass

    def shutdown(self) -> None:
        pass


C = TypeVar("C", bound=Component)


class Entity:
    """An identified game object that owns at most one component of each type."""

    def __init__(self) -> None:
        self.id: int = INVALID_ENTITY_ID
        self._components: dict[type, Component] = {}

    def add_component(self, component_type: type[C], *args: Any, **kwargs: Any) -> C:
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError("component_type must be derived from Component")
        component = component_type(self, *args, **kwargs)
        self._components[component_type] = component
        return component

    def get_component(self, component_type: type[C]) -> Optional[C]:
        return self._components.get(component_type)  # type: ignore[return-value]

    def init(self) -> None:
        for component in self._components.values():
            component.init()
        self.on_init()

    def on_init(self) -> None:
        pass

    def update(self, frame: GameFrame) -> None:
        for component in self._components.values():
            component.update(frame)

    def on_game_event(self, event: GameEvent) -> None:
        for component in self._components.values():
            component.on_game_event(event)

    def destroy(self) -> None:
        """Shut down and release every component."""
        for component in self._components.values():
            component.shutdown()
        self._components.clear()


class NameComponent(Component):
    """Display naming of an entity."""

    def __init__(self, parent: Entity) -> None:
        super().__init__(parent)
        self.name = ""
        self.title_prefix = ""
        self.title_suffix = ""
        self.tag = ""


class TransformComponent(Component):
    """Where an entity is, and which tile it has claimed."""

    def __init__(self, parent: Entity) -> None:
        super().__init__(parent)
        self.position: Vector2 = Vector2()
        self.location: Vector3 = Vector3()
        # While moving, the entity need not overlap the tile it occupies.
        self.occupying_tile: Vector2 = INVALID_POSITION


class EntityListener(Protocol):
    def on_entity_removed(self, entity: Entity) -> None: ...


class EntityManager(ABC):
    """Owns the live entities of a game."""

    @abstractmethod
    def find_entity(self, entity_id: int) -> Optional[Entity]: ...

    @abstractmethod
    def on_game_event(self, event: GameEvent) -> None: ...

    @abstractmethod
    def register_entity(self, entity: Entity) -> None: ...

    @abstractmethod
    def unregister_entity(self, entity: Entity) -> None: ...

    @abstractmethod
    def reset(self) -> None: ...

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def entity_at(self, index: int) -> Optional[Entity]: ...

    @abstractmethod
    def add_listener(self, listener: EntityListener) -> None: ...

    @abstractmethod
    def remove_listener(self, listener: EntityListener) -> None: ...

    def __iter__(self) -> Iterator[Optional[Entity]]:
        return (self.entity_at(index) for index in range(len(self)))

    def for_each(self, callback: Callable[[Optional[Entity]], bool]) -> None:
        """Call ``callback`` on each entity until it returns true."""
        for entity in self:
            if callback(entity):
                break


def entity_id(entity: Optional[Entity]) -> int:
    return entity.id if entity is not None else INVALID_ENTITY_ID