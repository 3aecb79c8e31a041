"""Abstract base class for time integrators."""

from abc import ABC, abstractmethod
from typing import Tuple
import numpy as np


class Integrator(ABC):
    """Advances positions and velocities by one fixed time step."""

    @abstractmethod
    def step(self, positions, velocities, masses, forces, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """Perform one integration step.

        Forces must already be complete for every body at the current
        instant. Inputs are not modified.

        Args:
            positions: (n, 2) current positions
            velocities: (n, 2) current velocities
            masses: (n,) masses
            forces: (n, 2) net forces at the current positions
            dt: Time step in seconds

        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name used to select this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass

    @property
    def symplectic(self) -> bool:
        return False

    @staticmethod
    def accelerations(forces, masses) -> np.ndarray:
        """a = F / m for every body."""
        return np.asarray(forces) / np.asarray(masses, dtype=np.float64)[:, np.newaxis]
