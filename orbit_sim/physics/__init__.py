"""Physics engine for small gravitational systems."""

from orbit_sim.physics.body import Body
from orbit_sim.physics.force_calculator import ForceCalculator, CoincidentBodiesError
from orbit_sim.physics.simulator import Simulator

__all__ = ["Body", "ForceCalculator", "CoincidentBodiesError", "Simulator"]
