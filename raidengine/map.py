"""The tile grid: tile flags, occupancy and path queries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Union

from raidengine import pathfinding
from raidengine.game import GAME, Game, GameEvent, GameEventType
from raidengine.game_events import EntityOccupancyChangedEvent, TilePropertiesChangedEvent
from raidengine.pathfinding import TilePath
from raidengine.tile import Tile
from raidengine.vector import Vector2

if TYPE_CHECKING:
    from raidengine.entity import Entity, TransformComponent

logger = logging.getLogger(__name__)

# East, West, North, South
_DIRECTIONS = (Vector2(1, 0), Vector2(-1, 0), Vector2(0, -1), Vector2(0, 1))

# Diagonal step, followed by the two orthogonal steps it must not cut across.
_DIAGONALS = (
    (Vector2(1, 1), Vector2(1, 0), Vector2(0, 1)),
    (Vector2(-1, -1), Vector2(-1, 0), Vector2(0, -1)),
    (Vector2(-1, 1), Vector2(-1, 0), Vector2(0, 1)),
    (Vector2(1, -1), Vector2(1, 0), Vector2(0, -1)),
)

ALLOW_DIAGONAL_MOTION = True


class Map:
    """A rectangular grid of tiles indexed by integer ``Vector2`` positions."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else GAME
        self._tiles: list[list[Tile]] = []
        self._width = 0
        self._height = 0
        self.map_scale = Vector2()
        self.player_spawn_position = Vector2()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def build(self, width: int, height: int) -> None:
        self._tiles = [[Tile(Vector2(x, y)) for y in range(height)] for x in range(width)]
        self._width = width
        self._height = height

    def shutdown(self) -> None:
        self.game.unregister_listener(self)
        self._width = 0
        self._height = 0
        self._tiles = []

    def register_for_events(self) -> None:
        self.game.register_listener(self)

    def on_game_event(self, event: GameEvent) -> None:
        if event.type == GameEventType.ENTITY_POSITION_CHANGED:
            self._on_entity_position_changed(event.entity, event.previous, event.position)

    def is_position_valid(self, position: Vector2) -> bool:
        return 0 <= position.x < self._width and 0 <= position.y < self._height

    def get_tile(self, position: Vector2) -> Optional[Tile]:
        if not self.is_position_valid(position):
            logger.error("Invalid tile: %s,%s", position.x, position.y)
            return None
        return self._tiles[int(position.x)][int(position.y)]

    def has_tile(self, position: Vector2) -> bool:
        if not self.is_position_valid(position):
            return False
        return self._tiles[int(position.x)][int(position.y)].valid

    def is_tile_enabled(self, position: Vector2) -> bool:
        tile = self.get_tile(position)
        return tile is not None and tile.valid

    def set_tile_enabled(self, position: Vector2, enabled: bool) -> None:
        tile = self.get_tile(position)
        if tile is not None and tile.valid != enabled:
            tile.valid = enabled
            self.game.dispatch(TilePropertiesChangedEvent.from_tile(tile))

    def can_occupy(self, position: Vector2) -> bool:
        tile = self.get_tile(position)
        return tile is not None and tile.allows_occupancy and not tile.is_occupied

    def is_occupied(self, position: Vector2) -> bool:
        tile = self.get_tile(position)
        return tile is not None and tile.is_occupied

    def set_tile_occupation(
        self, position: Vector2, entity: Optional[Entity], transform: TransformComponent
    ) -> None:
        """Move the claim of ``entity`` (tracked by ``transform``) to ``position``."""
        previous = transform.occupying_tile
        if self.is_position_valid(previous):
            previous_tile = self.get_tile(previous)
            if previous_tile is not None:
                previous_tile.occupant = None
                self.game.dispatch(EntityOccupancyChangedEvent(None, previous))

        tile = self.get_tile(position)
        if tile is not None:
            transform.occupying_tile = position
            tile.occupant = entity
            self.game.dispatch(EntityOccupancyChangedEvent(entity, position))

    def set_occupancy_allowed(self, position: Vector2, allow: bool) -> None:
        tile = self.get_tile(position)
        if tile is not None and tile.allows_occupancy != allow:
            tile.allows_occupancy = allow
            self.game.dispatch(TilePropertiesChangedEvent.from_tile(tile))

    def is_movement_allowed(self, position: Vector2) -> bool:
        tile = self.get_tile(position)
        return tile is not None and tile.allows_movement

    def set_movement_allowed(self, position: Vector2, allow: bool) -> None:
        tile = self.get_tile(position)
        if tile is not None and tile.allows_movement != allow:
            tile.allows_movement = allow
            self.game.dispatch(TilePropertiesChangedEvent.from_tile(tile))

    def build_path(
        self, start: Union[Vector2, Tile, None], end: Union[Vector2, Tile, None]
    ) -> TilePath:
        """Path of tiles from ``start`` to ``end``; empty if ``end`` cannot be occupied or reached."""
        if start is None or end is None:
            return TilePath()
        start_pos = start.position if isinstance(start, Tile) else start
        end_pos = end.position if isinstance(end, Tile) else end

        if not self.can_occupy(end_pos):
            return TilePath()

        came_from, _ = pathfinding.a_star_search(self, start_pos, end_pos)
        return pathfinding.reconstruct_path(self, start_pos, end_pos, came_from)

    def _is_passable(self, position: Vector2) -> bool:
        return self.has_tile(position) and self.is_movement_allowed(position)

    def neighbors(self, position: Vector2) -> list[Vector2]:
        """Passable neighbours: orthogonal first, then diagonals that cut no corner."""
        results: list[Vector2] = []
        for step in _DIRECTIONS:
            nxt = position + step
            if self.is_position_valid(nxt) and self._is_passable(nxt):
                results.append(nxt)

        if ALLOW_DIAGONAL_MOTION:
            for step, req1, req2 in _DIAGONALS:
                nxt = position + step
                if (
                    self.is_position_valid(nxt)
                    and self._is_passable(nxt)
                    and self._is_passable(position + req1)
                    and self._is_passable(position + req2)
                ):
                    results.append(nxt)

        return results

    def cost(self, start: Vector2, end: Vector2) -> float:
        """Orthogonal steps cost 1; diagonal steps slightly more."""
        if start.x == end.x or start.y == end.y:
            return 1.0
        return 1.001

    def nearest_unoccupied_tile(
        self, target: Vector2, start: Optional[Vector2] = None
    ) -> Optional[Vector2]:
        """Closest passable, unoccupied tile to ``target``, preferring ones near ``start``."""

        def evaluator(grid: Map, position: Vector2) -> bool:
            return grid.can_occupy(position) and grid.is_movement_allowed(position)

        return pathfinding.find_closest_tile(
            self, evaluator, target if start is None else start, target
        )

    def nearest_moveable_tile(
        self, target: Vector2, start: Optional[Vector2] = None
    ) -> Optional[Vector2]:
        """Closest enabled tile that allows movement, preferring ones near ``start``."""

        def evaluator(grid: Map, position: Vector2) -> bool:
            tile = grid.get_tile(position)
            return tile is not None and tile.valid and tile.allows_movement

        return pathfinding.find_closest_tile(
            self, evaluator, target if start is None else start, target
        )

    def _on_entity_position_changed(
        self, entity: Optional[Entity], previous: Vector2, position: Vector2
    ) -> None:
        if entity is None:
            return
        previous_tile = self.get_tile(previous)
        if previous_tile is not None:
            previous_tile.on_entity_exit(entity)
        next_tile = self.get_tile(position)
        if next_tile is not None:
            next_tile.on_entity_enter(entity)