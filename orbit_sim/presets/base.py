"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List
from orbit_sim.physics.body import Body


class Preset(ABC):
    """Abstract base class for preset initial conditions."""

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial conditions.

        Returns:
            Fresh list of bodies, in output order
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
