"""A multicast callback list."""

from __future__ import annotations

from typing import Any, Callable


class Delegate:
    """Holds callbacks and calls each of them, in order, on ``invoke``."""

    def __init__(self) -> None:
        self._functions: list[Callable[..., Any]] = []

    def register(self, func: Callable[..., Any]) -> None:
        self._functions.append(func)

    def unregister(self, func: Callable[..., Any]) -> None:
        """Remove every registration equal to ``func``."""
        self._functions = [f for f in self._functions if f != func]

    def invoke(self, *args: Any) -> None:
        for func in list(self._functions):
            func(*args)

    __call__ = invoke

    def __len__(self) -> int:
        return len(self._functions)