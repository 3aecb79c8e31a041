"""Explicit Euler integrator (the "naive" method)."""

from typing import Tuple
import numpy as np
from orbit_sim.physics.integrators.base import Integrator


class ExplicitEulerIntegrator(Integrator):
    """Explicit Euler - first order, not symplectic.

    The position update uses the velocity from before this step's kick, so
    orbits slowly spiral outwards and energy grows without bound.
    """

    @property
    def name(self) -> str:
        return "naive"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, masses, forces, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """Euler step: v_new = v + a*dt, r_new = r + v*dt."""
        accelerations = self.accelerations(forces, masses)

        new_velocities = velocities + accelerations * dt
        new_positions = positions + velocities * dt

        return new_positions, new_velocities
