"""
Configuration Loader
====================

Loads and validates sim_config.yaml, providing typed access to all parameters.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from rain_sim.rain_core.vector import Vector2


@dataclass(frozen=True)
class SimulationParameters:
    """Fixed parameters of a single simulation run."""
    object_size: Vector2    # Width/height of the moving object
    object_speed: float     # X-axis speed of the object (units/second)
    scene_size: Vector2     # Width/height of the scene
    rain_speed: Vector2     # Velocity applied to every raindrop
    rain_density: float     # New raindrops per unit scene width per second


@dataclass(frozen=True)
class RunConfig:
    """Runner settings."""
    dt: float
    max_steps: Optional[int] = None  # Safety cap, None runs until the object exits


@dataclass(frozen=True)
class SimConfig:
    """
    Complete configuration loaded from YAML.

    All values are immutable to prevent accidental modification during runtime.
    """
    simulation: SimulationParameters
    run: RunConfig


def default_parameters() -> SimulationParameters:
    """The fixed parameters the command-line runner uses."""
    return SimulationParameters(
        object_size=Vector2(1.0, 1.0),
        object_speed=0.5,
        scene_size=Vector2(100.0, 10.0),
        rain_speed=Vector2(0.0, -1.0),
        rain_density=1.0
    )


def _parse_vector(name: str, data: Any) -> Vector2:
    """Parse an [x, y] pair from YAML."""
    if not isinstance(data, (list, tuple)) or len(data) != 2:
        raise ValueError(f"{name} must have 2 values [x, y], got {data}")
    return Vector2(_parse_float(name, data[0]), _parse_float(name, data[1]))


def _parse_float(name: str, value: Any) -> float:
    """Parse a finite scalar from YAML."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(result):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return result


def _parse_int(name: str, value: Any) -> int:
    """Parse a whole number from YAML. Integral floats such as 3.0 are accepted."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return int(value)


def _require(section: dict, key: str, section_name: str) -> Any:
    if key not in section:
        raise ValueError(f"Missing '{key}' in '{section_name}' section")
    return section[key]


def _validate_config(config: SimConfig) -> None:
    """Validate configuration consistency."""
    if config.run.dt <= 0:
        raise ValueError(f"run.dt must be positive, got {config.run.dt}")

    if config.run.max_steps is not None and config.run.max_steps < 0:
        raise ValueError(f"run.max_steps must be non-negative, got {config.run.max_steps}")


def load_config(config_path: Optional[str] = None) -> SimConfig:
    """
    Load and validate simulation configuration from YAML.

    Args:
        config_path: Path to sim_config.yaml. If None, uses default location.

    Returns:
        Validated SimConfig instance.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValueError: If config validation fails.
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)),
            "sim_config.yaml"
        )

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    sim_data = raw.get("simulation")
    if not isinstance(sim_data, dict):
        raise ValueError("Missing 'simulation' section")

    simulation = SimulationParameters(
        object_size=_parse_vector(
            "object_size", _require(sim_data, "object_size", "simulation")
        ),
        object_speed=_parse_float(
            "object_speed", _require(sim_data, "object_speed", "simulation")
        ),
        scene_size=_parse_vector(
            "scene_size", _require(sim_data, "scene_size", "simulation")
        ),
        rain_speed=_parse_vector(
            "rain_speed", _require(sim_data, "rain_speed", "simulation")
        ),
        rain_density=_parse_float(
            "rain_density", _require(sim_data, "rain_density", "simulation")
        )
    )

    # Run section is optional
    run_data = raw.get("run") or {}
    if not isinstance(run_data, dict):
        raise ValueError("'run' section must be a mapping")
    max_steps = run_data.get("max_steps")
    run = RunConfig(
        dt=_parse_float("dt", run_data.get("dt", 0.1)),
        max_steps=_parse_int("max_steps", max_steps) if max_steps is not None else None
    )

    config = SimConfig(simulation=simulation, run=run)

    _validate_config(config)
    return config


# Module-level singleton for convenience
_cached_config: Optional[SimConfig] = None


def get_config() -> SimConfig:
    """Get the cached configuration, loading if necessary."""
    global _cached_config
    if _cached_config is None:
        _cached_config = load_config()
    return _cached_config


def reload_config(config_path: Optional[str] = None) -> SimConfig:
    """Reload the configuration (useful for testing)."""
    global _cached_config
    _cached_config = load_config(config_path)
    return _cached_config
