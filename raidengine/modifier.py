"""Additive and multiplicative value modifiers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ModifierType(IntEnum):
    MULTIPLY_DIVIDE = 0
    ADD_SUBTRACT = 1


@dataclass
class Modifier:
    """Adjusts a value by adding or multiplying ``amount``."""

    kind: ModifierType
    amount: float = 0.0

    def apply(self, value: float) -> float:
        if self.kind == ModifierType.ADD_SUBTRACT:
            return value + self.amount
        if self.kind == ModifierType.MULTIPLY_DIVIDE:
            return value * self.amount
        return value

    def __lt__(self, other: Modifier) -> bool:
        if self.kind < other.kind:
            return True
        return self.amount < other.amount