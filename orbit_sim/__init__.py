"""
Orbit Simulator - gravitational motion of a few bodies with fixed time steps.

Features:
- Pairwise Newtonian gravity with exact action/reaction symmetry
- Two integrators: explicit ("naive") and semi-implicit ("symplectic") Euler
- Earth-Moon and Sun-Earth-Moon presets
- Tab-separated trajectory output and matplotlib plots
- CLI with JSON/YAML configuration
"""

__version__ = "0.1.0"

from orbit_sim.physics.body import Body
from orbit_sim.physics.simulator import Simulator
from orbit_sim.physics.integrators.method import IntegrationMethod

__all__ = [
    "Body",
    "Simulator",
    "IntegrationMethod",
]
