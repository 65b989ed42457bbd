"""
Rain Simulation Package
=======================

This package contains the core simulation logic and the command-line runner
for the rain simulation. It controls:

- Raindrop advection, culling and spawning
- Collision detection and scoring
- Termination when the object leaves the scene

Default parameters live in sim_config.yaml.
"""
