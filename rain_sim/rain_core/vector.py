"""
Vector
======

Two-component vector used for positions, sizes and velocities.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Vector2:
    """Immutable (x, y) pair. Defaults to the origin."""
    x: float = 0.0
    y: float = 0.0

    @staticmethod
    def zero() -> "Vector2":
        return Vector2(0.0, 0.0)

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"


def format_rain(rain: Iterable[Vector2]) -> str:
    """Render raindrop positions as one line, each followed by a space."""
    return "".join(f"{drop} " for drop in rain)
