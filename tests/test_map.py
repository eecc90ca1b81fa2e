import pytest

from raidengine.entity import Entity, TransformComponent
from raidengine.game import Game, GameEventType, INVALID_POSITION
from raidengine.game_events import EntityPositionChangedEvent
from raidengine.map import Map
from raidengine.pathfinding import can_swap_tiles
from raidengine.vector import Vector2


class Recorder:
    def __init__(self):
        self.events = []

    def on_game_event(self, event):
        self.events.append(event)


@pytest.fixture
def game():
    return Game()


@pytest.fixture
def grid(game):
    grid_map = Map(game)
    grid_map.build(5, 4)
    return grid_map


def test_build_sets_dimensions_and_positions(grid):
    assert grid.width == 5
    assert grid.height == 4
    position = Vector2(3, 2)
    assert grid.get_tile(position).position == position


def test_position_validity_bounds(grid):
    assert grid.is_position_valid(Vector2(0, 0))
    assert grid.is_position_valid(Vector2(4, 3))
    assert not grid.is_position_valid(Vector2(5, 0))
    assert not grid.is_position_valid(Vector2(0, -1))
    assert grid.get_tile(Vector2(-1, 0)) is None


def test_set_tile_enabled_dispatches_once(game, grid):
    recorder = Recorder()
    game.register_listener(recorder)
    position = Vector2(1, 1)
    grid.set_tile_enabled(position, False)
    grid.set_tile_enabled(position, False)
    assert not grid.is_tile_enabled(position)
    assert not grid.has_tile(position)
    assert len(recorder.events) == 1
    event = recorder.events[0]
    assert event.type == GameEventType.TILE_PROPERTIES_CHANGED
    assert event.position == position
    assert event.is_valid is False


def test_movement_and_occupancy_flags(game, grid):
    recorder = Recorder()
    game.register_listener(recorder)
    position = Vector2(2, 2)
    grid.set_movement_allowed(position, False)
    grid.set_occupancy_allowed(position, False)
    assert not grid.is_movement_allowed(position)
    assert not grid.can_occupy(position)
    assert [e.allows_occupancy for e in recorder.events] == [True, False]


def test_neighbors_centre_and_corner(grid):
    assert len(grid.neighbors(Vector2(2, 2))) == 8
    assert set(grid.neighbors(Vector2(0, 0))) == {Vector2(1, 0), Vector2(0, 1), Vector2(1, 1)}


def test_diagonal_needs_both_sides(grid):
    grid.set_movement_allowed(Vector2(1, 0), False)
    assert grid.neighbors(Vector2(0, 0)) == [Vector2(0, 1)]


def test_cost(grid):
    assert grid.cost(Vector2(0, 0), Vector2(1, 0)) == 1
    assert grid.cost(Vector2(0, 0), Vector2(1, 1)) == 1.001


def test_set_tile_occupation_moves_claim(game, grid):
    recorder = Recorder()
    game.register_listener(recorder)
    entity = Entity()
    transform = entity.add_component(TransformComponent)
    first, second = Vector2(0, 0), Vector2(3, 3)

    grid.set_tile_occupation(first, entity, transform)
    assert grid.get_tile(first).occupant is entity
    assert transform.occupying_tile == first

    grid.set_tile_occupation(second, entity, transform)
    assert not grid.is_occupied(first)
    assert grid.is_occupied(second)
    assert [e.entity for e in recorder.events] == [entity, None, entity]
    assert recorder.events[1].position == first


def test_position_change_updates_active_entities(game, grid):
    grid.register_for_events()
    entity = Entity()
    a, b = Vector2(1, 1), Vector2(1, 2)
    game.dispatch(EntityPositionChangedEvent(entity, INVALID_POSITION, a))
    assert grid.get_tile(a).active_entities == (entity,)
    game.dispatch(EntityPositionChangedEvent(entity, a, b))
    assert grid.get_tile(a).active_entities == ()
    assert grid.get_tile(b).active_entities == (entity,)


def test_build_path_between_tiles(grid):
    start, end = Vector2(0, 0), Vector2(4, 3)
    path = grid.build_path(start, end)
    assert path[0].position == start
    assert path.destination.position == end
    same = grid.build_path(grid.get_tile(start), grid.get_tile(end))
    assert [t.position for t in same] == [t.position for t in path]


def test_build_path_to_occupied_tile_is_empty(grid):
    end = Vector2(4, 3)
    grid.get_tile(end).occupant = Entity()
    assert len(grid.build_path(Vector2(0, 0), end)) == 0
    assert len(grid.build_path(None, end)) == 0


def test_nearest_unoccupied_tile(grid):
    target = Vector2(2, 2)
    assert grid.nearest_unoccupied_tile(target) == target
    grid.get_tile(target).occupant = Entity()
    result = grid.nearest_unoccupied_tile(target, Vector2(0, 0))
    assert result != target
    assert can_swap_tiles(result, target)
    assert grid.can_occupy(result)


def test_nearest_moveable_tile(grid):
    target = Vector2(2, 1)
    grid.set_tile_enabled(target, False)
    result = grid.nearest_moveable_tile(target)
    assert can_swap_tiles(result, target)
    assert grid.is_tile_enabled(result)
    assert grid.is_movement_allowed(result)


def test_shutdown_clears_and_unregisters(game, grid):
    grid.register_for_events()
    grid.shutdown()
    assert grid.width == 0
    assert grid.height == 0
    assert game.listeners == ()
    assert grid.get_tile(Vector2(0, 0)) is None