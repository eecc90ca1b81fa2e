"""Game session state machine and the loading handshake it relies on."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from raidengine.game import GAME, Game, GameFrame
from raidengine.game_events import GameEndEvent, GameStartEvent

logger = logging.getLogger(__name__)


class GameState(Enum):
    NONE = "None"
    LOADING = "Loading"
    ACTIVE = "Active"
    END_GAME = "EndGame"
    FATAL_ERROR = "FatalError"


class LoadType(Enum):
    STARTING = "Starting"
    ENDING = "Ending"


@dataclass
class LoadContext:
    map_name: str = ""
    level_script: str = ""


class LoadDelegate(ABC):
    """Loads game data and map; the session is ready when both report done."""

    def __init__(self) -> None:
        self.is_map_loaded = False
        self.is_game_loaded = False

    @property
    def is_ready(self) -> bool:
        return self.is_game_loaded and self.is_map_loaded

    def begin_load_game(self, context: LoadContext) -> bool:
        logger.debug(
            "BeginLoadGame: Map: %s, LevelScript: %s", context.map_name, context.level_script
        )
        self._reset()
        return self.load_game_data(context)

    @abstractmethod
    def load_game_data(self, context: LoadContext) -> bool:
        """Start loading; return whether loading could begin."""

    def on_game_loaded(self) -> None:
        self.is_game_loaded = True

    def on_map_loaded(self) -> None:
        self.is_map_loaded = True

    def _reset(self) -> None:
        self.is_map_loaded = False
        self.is_game_loaded = False


class GameInstance:
    """Drives a session through loading, play and ending."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else GAME
        self._load_delegate: Optional[LoadDelegate] = None
        self._state = GameState.NONE
        self._load_type = LoadType.STARTING

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def load_type(self) -> LoadType:
        return self._load_type

    @property
    def is_loading(self) -> bool:
        return self._state == GameState.LOADING

    @property
    def is_active(self) -> bool:
        return self._state == GameState.ACTIVE

    def init(self, load_delegate: Optional[LoadDelegate]) -> None:
        self._load_delegate = load_delegate

    def shutdown(self) -> None:
        self._load_delegate = None

    def reset(self) -> None:
        self._set_state(GameState.NONE)

    def update(self, frame: GameFrame) -> None:
        if self._state == GameState.LOADING:
            self._update_loading()

    def begin_load_game(self, context: LoadContext) -> bool:
        self._load_type = LoadType.STARTING
        return self._load(context)

    def start_game(self) -> None:
        logger.debug("GameInstance.start_game")
        self.game.dispatch(GameStartEvent())

    def begin_end_game(self, context: LoadContext) -> bool:
        self.game.dispatch(GameEndEvent())
        self._load_type = LoadType.ENDING
        return self._load(context)

    def end_game(self) -> None:
        logger.debug("GameInstance.end_game")

    def _load(self, context: LoadContext) -> bool:
        if self._load_delegate is not None and self._load_delegate.begin_load_game(context):
            self._set_state(GameState.LOADING)
            return True
        self._set_state(GameState.FATAL_ERROR)
        return False

    def _set_state(self, state: GameState) -> None:
        if self._state == state:
            return
        logger.info("SetGameState::%s", state.value)
        self._state = state

    def _update_loading(self) -> None:
        if self._load_delegate is None:
            self._set_state(GameState.FATAL_ERROR)
            return
        if not self._load_delegate.is_ready:
            return
        if self._load_type == LoadType.STARTING:
            self.start_game()
            self._set_state(GameState.ACTIVE)
        else:
            self.end_game()
            self._set_state(GameState.END_GAME)