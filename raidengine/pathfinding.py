"""A* search over the tile grid and nearest-tile lookup."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional, Protocol

from raidengine.vector import Vector2

if TYPE_CHECKING:
    from raidengine.tile import Tile


class Graph(Protocol):
    def neighbors(self, position: Vector2) -> list[Vector2]: ...

    def cost(self, start: Vector2, end: Vector2) -> float: ...

    def get_tile(self, position: Vector2) -> Optional[Tile]: ...

    def has_tile(self, position: Vector2) -> bool: ...


Evaluator = Callable[[Any, Vector2], bool]


@dataclass
class TilePath:
    """An ordered list of tiles from a start tile to a destination tile."""

    tiles: list = field(default_factory=list)

    def reset(self) -> None:
        self.tiles.clear()

    @property
    def destination(self) -> Optional[Tile]:
        return self.tiles[-1] if self.tiles else None

    def __len__(self) -> int:
        return len(self.tiles)

    def __getitem__(self, index: int) -> Tile:
        return self.tiles[index]

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)


def tile_offset(first: Vector2, second: Vector2) -> Vector2:
    """Per-axis tile difference ``first - second``."""
    return Vector2(first.x - second.x, first.y - second.y)


def tile_distance(first: Vector2, second: Vector2) -> float:
    """Chebyshev distance between two tile positions."""
    return float(max(abs(second.x - first.x), abs(second.y - first.y)))


def _heuristic(a: Vector2, b: Vector2) -> float:
    return abs(a.x - b.x) + abs(a.y - b.y)


def a_star_search(
    graph: Graph, start: Vector2, goal: Vector2
) -> tuple[dict[Vector2, Vector2], dict[Vector2, float]]:
    """Search from ``start`` towards ``goal``; return the came-from and cost maps."""
    order = count()
    frontier: list[tuple[float, int, Vector2]] = [(0.0, next(order), start)]
    came_from: dict[Vector2, Vector2] = {start: start}
    cost_so_far: dict[Vector2, float] = {start: 0.0}

    while frontier:
        _, _, current = heapq.heappop(frontier)
        if current == goal:
            break

        results = graph.neighbors(current)
        # Alternate the search order between tiles to avoid ugly staircase paths.
        if (current.x + current.y) % 2 == 0:
            results.reverse()

        for nxt in results:
            new_cost = cost_so_far[current] + graph.cost(current, nxt)
            if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                cost_so_far[nxt] = new_cost
                priority = new_cost + _heuristic(nxt, goal)
                heapq.heappush(frontier, (priority, next(order), nxt))
                came_from[nxt] = current

    return came_from, cost_so_far


def reconstruct_path(
    graph: Graph, start: Vector2, goal: Vector2, came_from: dict[Vector2, Vector2]
) -> TilePath:
    """Build the tile path from ``start`` to ``goal``; empty if the goal was not reached."""
    if goal not in came_from:
        return TilePath()

    positions: list[Vector2] = []
    current = goal
    while current != start:
        positions.append(current)
        current = came_from[current]
    positions.append(start)

    return TilePath([graph.get_tile(position) for position in reversed(positions)])


def find_closest_tile(
    graph: Graph, evaluator: Evaluator, start: Vector2, goal: Vector2
) -> Optional[Vector2]:
    """Nearest position to ``goal`` accepted by ``evaluator``; ``start`` breaks ties."""
    visited: set[Vector2] = set()
    candidates: list[Vector2] = [goal]

    while candidates:
        position = candidates.pop()
        visited.add(position)

        if evaluator(graph, position):
            return position

        for neighbour in reversed(graph.neighbors(position)):
            if (
                neighbour not in visited
                and neighbour not in candidates
                and graph.has_tile(neighbour)
            ):
                candidates.append(neighbour)

        # Best candidates go last, since they are popped from the back.
        candidates.sort(
            key=lambda p: (tile_distance(goal, p), tile_distance(start, p)), reverse=True
        )

    return None


def can_swap_tiles(first: Vector2, second: Vector2) -> bool:
    """Whether two tiles touch, including diagonally (or are the same tile)."""
    return abs(first.x - second.x) <= 1 and abs(first.y - second.y) <= 1