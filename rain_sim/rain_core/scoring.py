"""
Scoring System
==============

Counts raindrop collisions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from rain_sim.rain_core.vector import Vector2


@dataclass
class CollisionEvent:
    """Record of a raindrop hitting the object."""
    position: Vector2
    step_index: int

    def __repr__(self) -> str:
        return f"CollisionEvent(step={self.step_index}, at={self.position})"


class ScoreTracker:
    """
    Tracks the collision score.

    Every collision is worth exactly one point, so the score always equals
    the number of recorded events.
    """

    def __init__(self):
        self._score: int = 0
        self._events: List[CollisionEvent] = []

    @property
    def score(self) -> int:
        """Current total score."""
        return self._score

    @property
    def events(self) -> List[CollisionEvent]:
        """All collisions recorded since the last reset."""
        return list(self._events)

    def apply_collision(self, position: Vector2, step_index: int) -> CollisionEvent:
        """
        Score a collision and return the event.

        Args:
            position: Raindrop position at the moment of collision.
            step_index: Index of the step the collision happened in.

        Returns:
            CollisionEvent describing the hit.
        """
        event = CollisionEvent(position=position, step_index=step_index)
        self._events.append(event)
        self._score += 1
        return event

    def reset(self) -> None:
        """Reset score to zero."""
        self._score = 0
        self._events = []
