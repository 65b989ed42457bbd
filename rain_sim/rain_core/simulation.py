"""
Simulation
==========

World state and the fixed-order update step.
"""

from __future__ import annotations

from typing import Callable, List, Optional

import numpy as np

from rain_sim.rain_core.config_loader import SimulationParameters
from rain_sim.rain_core.rng import RainSpawner
from rain_sim.rain_core.rules import SceneRules, TerminationResult, TerminationRules
from rain_sim.rain_core.scoring import CollisionEvent, ScoreTracker
from rain_sim.rain_core.vector import Vector2


class Simulation:
    """
    A single object crossing a scene while rain falls.

    Each step runs, in order:
    - Raindrop advection
    - Culling of raindrops that left the scene
    - Spawning along the top edge
    - Object movement along x
    - Collision scoring and removal
    - Exit check

    The object's y position is never changed by step.
    """

    def __init__(
        self,
        parameters: SimulationParameters,
        rng: Optional[np.random.Generator] = None,
        collision_callback: Optional[Callable[[Vector2], None]] = None,
        max_steps: Optional[int] = None
    ):
        """
        Initialize simulation.

        Args:
            parameters: Fixed simulation parameters.
            rng: Random generator for spawn positions. Unseeded if None.
            collision_callback: Called with each colliding raindrop position.
            max_steps: Optional safety cap reported through is_over.
        """
        self._parameters = parameters
        self._collision_callback = collision_callback

        self._spawner = RainSpawner(parameters, rng)
        self._scene = SceneRules(parameters)
        self._termination = TerminationRules(parameters, max_steps)
        self._scorer = ScoreTracker()

        # World state
        self.object_position: Vector2 = Vector2.zero()
        self._rain: List[Vector2] = []
        self._steps: int = 0
        self._last_collisions: List[CollisionEvent] = []
        self._result: TerminationResult = TerminationResult.none()

    @property
    def parameters(self) -> SimulationParameters:
        """Simulation parameters."""
        return self._parameters

    @property
    def rain(self) -> List[Vector2]:
        """Raindrop positions. The list is live and may be edited."""
        return self._rain

    @property
    def score(self) -> int:
        """Number of collisions so far."""
        return self._scorer.score

    @property
    def scorer(self) -> ScoreTracker:
        """Score tracker (for event history)."""
        return self._scorer

    @property
    def steps_taken(self) -> int:
        """Number of completed steps."""
        return self._steps

    @property
    def last_collisions(self) -> List[CollisionEvent]:
        """Collisions detected during the most recent step."""
        return list(self._last_collisions)

    @property
    def object_top_right(self) -> Vector2:
        """Top-right corner of the object's bounding box."""
        size = self._parameters.object_size
        return Vector2(self.object_position.x + size.x, self.object_position.y + size.y)

    @property
    def terminated(self) -> bool:
        """True once the object has left the scene."""
        return self._result.terminated

    @property
    def truncated(self) -> bool:
        """True once the step cap has been reached."""
        return self._result.truncated

    @property
    def is_over(self) -> bool:
        return self._result.terminated or self._result.truncated

    @property
    def termination_reason(self) -> str:
        """Reason for the run ending, or empty string."""
        return self._result.reason

    def add_raindrop(self, position: Vector2) -> None:
        """Place a raindrop directly (bypasses spawning)."""
        self._rain.append(position)

    def step(self, dt: float) -> bool:
        """
        Advance the world by dt.

        Args:
            dt: Time step.

        Returns:
            True if the object has fully exited the scene. The step is
            applied in full either way.
        """
        params = self._parameters

        # Advect
        dx = params.rain_speed.x * dt
        dy = params.rain_speed.y * dt
        self._rain[:] = [Vector2(drop.x + dx, drop.y + dy) for drop in self._rain]

        # Cull
        self._rain[:] = [drop for drop in self._rain if self._scene.in_scene(drop)]

        # Spawn
        self._rain.extend(self._spawner.spawn(dt))

        # Move object
        self.object_position = Vector2(
            self.object_position.x + params.object_speed * dt,
            self.object_position.y
        )

        self._resolve_collisions()

        self._steps += 1
        self._result = self._termination.check_termination(
            self.object_position, self._steps
        )
        return self._result.terminated

    def _resolve_collisions(self) -> None:
        """Score and remove every raindrop inside the object."""
        kept: List[Vector2] = []
        hits: List[Vector2] = []
        for drop in self._rain:
            if self._scene.hits_object(drop, self.object_position):
                hits.append(drop)
            else:
                kept.append(drop)

        self._last_collisions = []
        for drop in hits:
            event = self._scorer.apply_collision(drop, self._steps)
            self._last_collisions.append(event)
            if self._collision_callback is not None:
                self._collision_callback(drop)

        self._rain[:] = kept
