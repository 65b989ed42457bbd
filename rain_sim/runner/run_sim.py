"""
Simulation Runner
=================

Steps a simulation with a fixed time step until the object leaves the scene,
reporting progress to the console.

Usage:
    python -m rain_sim.runner.run_sim [--config sim_config.yaml]
"""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
import yaml

from rain_sim.rain_core.config_loader import (
    RunConfig,
    SimulationParameters,
    default_parameters,
    load_config,
)
from rain_sim.rain_core.simulation import Simulation
from rain_sim.rain_core.vector import Vector2, format_rain

DEFAULT_DT = 0.1


@dataclass
class RunResult:
    """Result of a complete run."""
    final_score: int
    steps: int
    sim_time: float
    termination_reason: str
    final_object_position: Vector2
    elapsed_time: float


def print_collision(position: Vector2) -> None:
    print(f"Collision with raindrop at {position}")


def print_progress(simulation: Simulation, sim_time: float, show_rain: bool = False) -> None:
    """Print elapsed time, score and object corners for one step."""
    print(f"Time: {sim_time:.1f}, Number of collisions: {simulation.score}")
    print(f"Object position: ({simulation.object_position}, {simulation.object_top_right})")
    if show_rain:
        print(f"Rain: {format_rain(simulation.rain)}")


def run_simulation(
    parameters: Optional[SimulationParameters] = None,
    dt: float = DEFAULT_DT,
    max_steps: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    verbose: bool = True,
    show_rain: bool = False
) -> RunResult:
    """
    Run a simulation to completion.

    Args:
        parameters: Simulation parameters. Uses the fixed defaults if None.
        dt: Time step passed to every step.
        max_steps: Optional safety cap on the number of steps.
        rng: Random generator for spawn positions. Unseeded if None.
        verbose: If True, print collisions and per-step progress.
        show_rain: If True, also print every raindrop position each step.

    Returns:
        RunResult for this run.
    """
    if parameters is None:
        parameters = default_parameters()

    simulation = Simulation(
        parameters,
        rng=rng,
        collision_callback=print_collision if verbose else None,
        max_steps=max_steps
    )

    sim_time = 0.0
    start_time = time.time()

    # The cap is checked before stepping, so max_steps=0 takes no steps
    while max_steps is None or simulation.steps_taken < max_steps:
        if simulation.step(dt) or simulation.is_over:
            break
        sim_time += dt
        if verbose:
            print_progress(simulation, sim_time, show_rain)

    elapsed = time.time() - start_time
    termination_reason = simulation.termination_reason or "step_cap"

    print(f"Game over! Score: {simulation.score}")

    return RunResult(
        final_score=simulation.score,
        steps=simulation.steps_taken,
        sim_time=sim_time,
        termination_reason=termination_reason,
        final_object_position=simulation.object_position,
        elapsed_time=elapsed
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the rain simulation")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a simulation config YAML (uses built-in defaults if not specified)"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Stop after this many steps even if the object is still in the scene"
    )
    parser.add_argument(
        "--show-rain",
        action="store_true",
        help="Print every raindrop position each step"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the final score"
    )

    args = parser.parse_args(argv)

    if args.max_steps is not None and args.max_steps < 0:
        parser.error(f"--max-steps must be non-negative, got {args.max_steps}")

    parameters = default_parameters()
    run = RunConfig(dt=DEFAULT_DT)
    if args.config:
        try:
            config = load_config(args.config)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            print(f"Error loading config: {e}")
            return 1
        parameters = config.simulation
        run = config.run

    max_steps = args.max_steps if args.max_steps is not None else run.max_steps

    run_simulation(
        parameters,
        dt=run.dt,
        max_steps=max_steps,
        verbose=not args.quiet,
        show_rain=args.show_rain
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
