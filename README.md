# raidengine

The core of a tile-based raid game engine, as a library. It covers the following areas.

- **Timing**: `raidengine.engine.Engine` adds up elapsed nanoseconds and calls
  `Game.update` once for each whole time step. `raidengine.timeutil` converts
  durations and formats them as `MM:SS`, or as `HH:MM:SS` once they reach an hour.
- **Game services**: `raidengine.game.Game` keeps the registered game systems and
  event listeners. It also holds named services (`engine`, `entity_manager`, `map`,
  `faction_manager`, `encounter_log` and others), which are installed with
  `Game.provide`. `Game.dispatch` sends an event to every listener. The shared
  instance is `raidengine.game.GAME`. The concrete event classes live in
  `raidengine.game_events`.
- **Entities**: an `Entity` is built from `Component`s, for example `NameComponent`
  and `TransformComponent` (`raidengine.entity`). `raidengine.world.World` holds the
  entities, gives each one an id, forwards frames and events to them and tells
  listeners when an entity is removed.
- **Maps**: `raidengine.map.Map` is a grid of `Tile`s, each with validity, movement
  and occupancy flags. Changing a flag dispatches a `TilePropertiesChangedEvent`.
  `Map.build_path` runs A* (`raidengine.pathfinding`) with diagonal moves that cannot
  cut corners. `nearest_unoccupied_tile` and `nearest_moveable_tile` find the closest
  suitable tile.
- **Combat**: `raidengine.damage.DamageCalculator` gives the armor and resist
  mitigation percentages. `CombatSystem.kill_entity` sends a `DeathEvent` to the
  game's entity manager.
- **Game sessions**: `raidengine.game_instance.GameInstance` moves a session through
  loading, active play and game end. Loading is done by a `LoadDelegate` that you
  subclass.
- **Factions**: `raidengine.faction.FactionManager` stores directed relationships
  between factions. A faction is always friendly to itself.
- **Localization**: `raidengine.localization.LocalizationSystem` looks strings up by
  hashed key across `LocalizationSet`s. `load_localization_data` fills a set from a
  JSON document of the form `{"version": 1, "strings": [{"key": ..., "text": {"en": ...}}]}`.
- **Command-line flags**: `raidengine.args` has `BoolArgument`, `IntArgument` and
  `StringArgument`. Each one registers with a `CommandLineManager`, which reads
  `-name value` and `-name=value` forms from an argument list.
- **Encounter log**: `raidengine.encounter_log.EncounterLog` listens to game events
  and records them into `Encounter`s. The events come from a fixed-size `EventPool`.
  `raidengine.encounter_serialization` saves the log as comma-separated lines and
  loads it back. `default_path()` gives a file in the user's data directory.
- **Utilities**: the `Vector2` and `Vector3` types (`raidengine.vector`), a seeded
  xorshift* `BasicRNG` (`raidengine.rng`), `Delegate` multicast callbacks, stat
  `Modifier`s and a `CombinedKeyMap` keyed by pairs of integers.

## Installation

```
pip install raidengine
```

## Example

```python
from raidengine.map import Map
from raidengine.vector import Vector2

arena = Map()
arena.build(10, 10)
arena.set_movement_allowed(Vector2(5, 5), False)

path = arena.build_path(Vector2(0, 0), Vector2(9, 9))
print([tile.position for tile in path.tiles])
```

The generator is seeded, so the same seed always gives the same sequence:

```python
from raidengine.rng import BasicRNG

rng = BasicRNG(42)
roll = rng.randint(1, 20)
```

## What it does not do

- It has no rendering, no input handling and no program to run. It is a library only.
- It has no unit stats such as levels, attributes, health or mana. `DamageCalculator`
  computes mitigation percentages, but nothing applies damage to an entity. The only
  combat action is `CombatSystem.kill_entity`.
- Zones, abilities and auras appear only as event types in the encounter log. The
  package has no systems behind them.

## Running the tests

```
pip install raidengine[test]
pytest
```