"""
Simulation Rules
================

Handles scene bounds, collision geometry, and termination conditions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from rain_sim.rain_core.config_loader import SimulationParameters
from rain_sim.rain_core.vector import Vector2


@dataclass
class TerminationResult:
    """Result of termination check."""
    terminated: bool
    truncated: bool
    reason: str

    @staticmethod
    def none() -> "TerminationResult":
        return TerminationResult(False, False, "")

    @staticmethod
    def exited(reason: str) -> "TerminationResult":
        return TerminationResult(True, False, reason)

    @staticmethod
    def truncation(reason: str) -> "TerminationResult":
        return TerminationResult(False, True, reason)


class SceneRules:
    """
    Geometry checks against the scene and the moving object.

    All comparisons are strict: a raindrop on an edge is outside.
    """

    def __init__(self, parameters: SimulationParameters):
        self._parameters = parameters

    def in_scene(self, drop: Vector2) -> bool:
        """True if a raindrop is still inside the scene."""
        return 0.0 < drop.x < self._parameters.scene_size.x and drop.y > 0.0

    def hits_object(self, drop: Vector2, object_position: Vector2) -> bool:
        """
        True if a raindrop lies strictly inside the object's bounding box.

        Args:
            drop: Raindrop position.
            object_position: Bottom-left corner of the object.
        """
        size = self._parameters.object_size
        return (
            object_position.x < drop.x < object_position.x + size.x
            and object_position.y < drop.y < object_position.y + size.y
        )


class TerminationRules:
    """
    Handles simulation termination conditions.

    - Exit: object's trailing edge is past the right side of the scene
    - Step cap: optional safety limit on the number of steps
    """

    def __init__(
        self,
        parameters: SimulationParameters,
        max_steps: Optional[int] = None
    ):
        """
        Initialize termination rules.

        Args:
            parameters: Simulation parameters.
            max_steps: Optional step cap. None means no cap.
        """
        self._parameters = parameters
        self._max_steps = max_steps

    @property
    def max_steps(self) -> Optional[int]:
        """Maximum steps per run, or None."""
        return self._max_steps

    def object_exited(self, object_position: Vector2) -> bool:
        """True once the whole object is right of the scene."""
        return (
            object_position.x + self._parameters.object_size.x
            > self._parameters.scene_size.x
        )

    def check_termination(
        self,
        object_position: Vector2,
        steps_taken: int
    ) -> TerminationResult:
        """
        Check all termination conditions.

        Args:
            object_position: Bottom-left corner of the object.
            steps_taken: Number of steps completed so far.

        Returns:
            TerminationResult indicating run state.
        """
        if self.object_exited(object_position):
            return TerminationResult.exited("exited_scene")

        if self._max_steps is not None and steps_taken >= self._max_steps:
            return TerminationResult.truncation("step_cap")

        return TerminationResult.none()
