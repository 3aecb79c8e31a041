"""Closed selection of the integration scheme."""

from enum import Enum
from orbit_sim.physics.integrators.base import Integrator
from orbit_sim.physics.integrators.euler import ExplicitEulerIntegrator
from orbit_sim.physics.integrators.symplectic_euler import SemiImplicitEulerIntegrator


class IntegrationMethod(Enum):
    """Integration scheme, chosen once per run."""

    NAIVE = "naive"
    SYMPLECTIC = "symplectic"

    # Aliases
    EXPLICIT = "naive"
    SEMI_IMPLICIT = "symplectic"

    @classmethod
    def from_name(cls, name: str) -> "IntegrationMethod":
        """Parse a method token such as 'naive' or 'symplectic'.

        Raises:
            ValueError: If the token is not a known method
        """
        try:
            return cls(name)
        except ValueError:
            raise ValueError(
                f"Unknown integration method '{name}'. Available: {[m.value for m in cls]}"
            ) from None

    def create_integrator(self) -> Integrator:
        if self is IntegrationMethod.NAIVE:
            return ExplicitEulerIntegrator()
        return SemiImplicitEulerIntegrator()
