"""Numerical integrators for the gravity simulation."""

from orbit_sim.physics.integrators.base import Integrator
from orbit_sim.physics.integrators.euler import ExplicitEulerIntegrator
from orbit_sim.physics.integrators.symplectic_euler import SemiImplicitEulerIntegrator
from orbit_sim.physics.integrators.method import IntegrationMethod

__all__ = [
    "Integrator",
    "ExplicitEulerIntegrator",
    "SemiImplicitEulerIntegrator",
    "IntegrationMethod",
]
