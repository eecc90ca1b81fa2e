"""Fixed-timestep driver that turns wall-clock time into game frames."""

from __future__ import annotations

from typing import Optional

from raidengine import timeutil
from raidengine.game import GAME, Game, GameFrame


class Engine:
    """Accumulates elapsed time and steps the game once per whole time step."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else GAME
        self._frame_count = 0
        self._accumulation = 0
        self._time_step = 0
        self._time_step_secs = 0.0
        self._base_time_step = 0
        self._last_update = timeutil.now()

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def time_step(self) -> int:
        """Current step length in nanoseconds."""
        return self._time_step

    @time_step.setter
    def time_step(self, nanos: int) -> None:
        self._time_step = nanos
        self._time_step_secs = nanos / timeutil.NANOS_PER_SECOND

    @property
    def time_step_secs(self) -> float:
        return self._time_step_secs

    def init(self, frame_time: int) -> None:
        if frame_time == 0:
            raise ValueError("frame_time must be non-zero")
        self._base_time_step = frame_time
        self.time_step = frame_time
        self._last_update = timeutil.now()

    def update(self, now: Optional[int] = None, elapsed: Optional[int] = None) -> None:
        """Advance by ``elapsed`` nanoseconds, measured from the clock when omitted."""
        if self._time_step <= 0:
            raise RuntimeError("engine has no positive time step; call init() first")
        if now is None:
            now = timeutil.now()
        if elapsed is None:
            elapsed = now - self._last_update

        self._accumulation += elapsed
        while self._accumulation >= self._time_step:
            frame = GameFrame(self._frame_count, self._time_step, self._time_step_secs)
            self.game.update(frame)
            self._accumulation -= self._time_step
            self._frame_count += 1

        self._last_update = now

    def shutdown(self) -> None:
        self._accumulation = 0

    def frames_to_millis(self, frames: int) -> int:
        return timeutil.to_millis(self._base_time_step * frames)

    def frames_to_duration(self, frames: int) -> int:
        return self._base_time_step * frames