"""Semi-implicit Euler integrator (the "symplectic" method)."""

from typing import Tuple
import numpy as np
from orbit_sim.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit (symplectic) Euler - first order, symplectic.

    Identical to explicit Euler except that the position is advanced with
    the freshly updated velocity. That one change keeps the energy error
    bounded over many orbital periods instead of letting it accumulate.
    """

    @property
    def name(self) -> str:
        return "symplectic"

    @property
    def order(self) -> int:
        return 1

    @property
    def symplectic(self) -> bool:
        return True

    def step(self, positions, velocities, masses, forces, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """Symplectic Euler step: v_new = v + a*dt, r_new = r + v_new*dt."""
        accelerations = self.accelerations(forces, masses)

        new_velocities = velocities + accelerations * dt
        new_positions = positions + new_velocities * dt

        return new_positions, new_velocities
