"""
RNG - Raindrop Spawner
======================

Decides how many raindrops appear each step and where they enter the scene.
"""

from __future__ import annotations

import math
from typing import List, Optional

import numpy as np

from rain_sim.rain_core.config_loader import SimulationParameters
from rain_sim.rain_core.vector import Vector2


class RainSpawner:
    """
    Spawns raindrops along the top edge of the scene.

    The expected number of drops per step is rain_density * dt * scene width,
    truncated toward zero. Products that are negative or not finite spawn nothing.
    """

    def __init__(
        self,
        parameters: SimulationParameters,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize spawner.

        Args:
            parameters: Simulation parameters.
            rng: Random generator. Unseeded default_rng() if None.
        """
        self._parameters = parameters
        self._rng = rng if rng is not None else np.random.default_rng()

    @property
    def rng(self) -> np.random.Generator:
        """Random generator used for spawn positions."""
        return self._rng

    def spawn_count(self, dt: float) -> int:
        """
        Number of raindrops to spawn for a step of length dt.

        Args:
            dt: Time step.

        Returns:
            Non-negative drop count.
        """
        expected = self._parameters.rain_density * dt * self._parameters.scene_size.x
        if not math.isfinite(expected) or expected <= 0:
            return 0
        return int(expected)

    def spawn(self, dt: float) -> List[Vector2]:
        """
        Create the raindrops for one step.

        Each drop sits on the top edge with x uniform in [0, scene width).

        Args:
            dt: Time step.

        Returns:
            Newly spawned raindrop positions.
        """
        count = self.spawn_count(dt)
        if count == 0:
            return []

        width = self._parameters.scene_size.x
        top = self._parameters.scene_size.y
        xs = self._rng.random(count) * width
        return [Vector2(float(x), top) for x in xs]
