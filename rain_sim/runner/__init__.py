"""
Runner Package
==============

Contains the command-line driver that steps a simulation to completion.
"""

from rain_sim.runner.run_sim import run_simulation, RunResult

__all__ = ["run_simulation", "RunResult"]
