"""Core systems for a tile-based raid game: timing, entities, maps and pathfinding, factions, localization and encounter logging."""

__version__ = "0.1.0"