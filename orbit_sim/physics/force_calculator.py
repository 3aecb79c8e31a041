"""Pairwise Newtonian gravity.

Every unordered pair is evaluated once and the result is applied with
opposite signs to both bodies, so the net force on the system is zero by
construction.
"""

from typing import Optional
import numpy as np

GRAVITATIONAL_CONSTANT = 6.674e-11  # m^3 kg^-1 s^-2


class CoincidentBodiesError(ZeroDivisionError):
    """Raised when two bodies occupy the same position."""

    def __init__(self, i: int, j: int):
        super().__init__(f"Bodies {i} and {j} are at the same position; gravity is undefined")
        self.i = i
        self.j = j


class ForceCalculator:
    """Direct O(n^2) gravitational force accumulation."""

    def __init__(self, G: float = GRAVITATIONAL_CONSTANT):
        self.G = float(G)

    def compute_forces(
        self,
        positions: np.ndarray,
        masses: np.ndarray,
        out: Optional[np.ndarray] = None,
    ) -> np.ndarray:
        """Compute the net gravitational force on every body.

        Args:
            positions: (n, 2) positions in meters
            masses: (n,) masses in kg
            out: Optional (n, 2) buffer to overwrite

        Returns:
            (n, 2) forces in newtons

        Raises:
            CoincidentBodiesError: If two bodies share a position
        """
        n = positions.shape[0]
        if out is None:
            out = np.zeros((n, 2), dtype=np.float64)
        else:
            # Previous step's values must not leak into this one
            out.fill(0.0)

        for i in range(n):
            for j in range(i + 1, n):
                displacement = positions[j] - positions[i]
                distance_sq = displacement[0] * displacement[0] + displacement[1] * displacement[1]
                if distance_sq == 0.0:
                    raise CoincidentBodiesError(i, j)
                # Direction from i to j
                direction = displacement / np.sqrt(distance_sq)
                magnitude = self.G * (masses[i] * masses[j]) / distance_sq

                force = direction * magnitude
                out[i] += force
                out[j] -= force

        return out
