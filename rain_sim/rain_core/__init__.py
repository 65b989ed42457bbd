"""
Rain Core - The simulation itself.

This module provides the world state, the update step, and all supporting
systems (configuration, spawning, scoring, rules).

Main exports:
- Simulation: World state and the fixed-order update step
- SimulationParameters: Fixed parameters of a run
- Vector2: Two-component vector
- SimConfig: Configuration loaded from sim_config.yaml
"""

from rain_sim.rain_core.vector import Vector2, format_rain
from rain_sim.rain_core.config_loader import (
    SimulationParameters,
    RunConfig,
    SimConfig,
    default_parameters,
    load_config,
    get_config,
)
from rain_sim.rain_core.rng import RainSpawner
from rain_sim.rain_core.scoring import CollisionEvent, ScoreTracker
from rain_sim.rain_core.rules import SceneRules, TerminationRules, TerminationResult
from rain_sim.rain_core.simulation import Simulation

__all__ = [
    "Vector2",
    "format_rain",
    "SimulationParameters",
    "RunConfig",
    "SimConfig",
    "default_parameters",
    "load_config",
    "get_config",
    "RainSpawner",
    "CollisionEvent",
    "ScoreTracker",
    "SceneRules",
    "TerminationRules",
    "TerminationResult",
    "Simulation",
]
