"""Conservation diagnostics for gravitational systems."""

import numpy as np
from typing import Tuple
from orbit_sim.physics.force_calculator import GRAVITATIONAL_CONSTANT


class Diagnostics:
    """Energy, momentum and separation measurements matching the force law."""

    def __init__(self, G: float = GRAVITATIONAL_CONSTANT):
        self.G = G

    def compute_energies(self, positions, velocities, masses) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        U = -G * Σ_{i<j} m_i * m_j / r_ij (no softening, like the force law)

        Args:
            positions: (n, 2) positions
            velocities: (n, 2) velocities
            masses: (n,) masses

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        positions_np = np.asarray(positions, dtype=np.float64)
        velocities_np = np.asarray(velocities, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        n = len(masses_np)

        # K = 0.5 * Σ m_i * v_i^2
        v_sq = np.sum(velocities_np ** 2, axis=1)
        K = 0.5 * np.sum(masses_np * v_sq)

        U = 0.0
        for i in range(n):
            for j in range(i + 1, n):
                r = np.linalg.norm(positions_np[j] - positions_np[i])
                U -= self.G * masses_np[i] * masses_np[j] / r

        return float(K), float(U), float(K + U)

    def compute_total_energy(self, positions, velocities, masses) -> float:
        return self.compute_energies(positions, velocities, masses)[2]

    @staticmethod
    def energy_drift(energy: float, initial_energy: float) -> float:
        """Relative energy error |E - E0| / |E0|."""
        if initial_energy == 0.0:
            return float("inf") if energy != 0.0 else 0.0
        return abs(energy - initial_energy) / abs(initial_energy)

    @staticmethod
    def net_force(forces) -> np.ndarray:
        """Vector sum of all forces; zero for an isolated system."""
        return np.sum(np.asarray(forces, dtype=np.float64), axis=0)

    @staticmethod
    def angular_momentum(positions, velocities, masses) -> float:
        """L_z = Σ m_i * (x_i * vy_i - y_i * vx_i)."""
        positions_np = np.asarray(positions, dtype=np.float64)
        velocities_np = np.asarray(velocities, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        return float(np.sum(masses_np * (positions_np[:, 0] * velocities_np[:, 1] -
                                         positions_np[:, 1] * velocities_np[:, 0])))

    @staticmethod
    def separation(positions, i: int, j: int) -> float:
        positions_np = np.asarray(positions, dtype=np.float64)
        return float(np.linalg.norm(positions_np[i] - positions_np[j]))

    @staticmethod
    def center_of_mass(positions, masses) -> np.ndarray:
        positions_np = np.asarray(positions, dtype=np.float64)
        masses_np = np.asarray(masses, dtype=np.float64).flatten()
        return np.sum(masses_np[:, np.newaxis] * positions_np, axis=0) / np.sum(masses_np)
