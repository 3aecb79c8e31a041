"""Body data model."""

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence
import numpy as np


def _as_vector(value, field_name: str) -> np.ndarray:
    vec = np.array(value, dtype=np.float64)
    if vec.shape != (2,):
        raise ValueError(f"{field_name} must be a 2D vector, got shape {vec.shape}")
    return vec


@dataclass(eq=False)
class Body:
    """A massive body with 2D position and velocity.

    Positions are in meters, velocities in m/s and mass in kg. The name is
    only used to identify the body in output.
    """
    name: str
    mass: float
    position: np.ndarray
    velocity: np.ndarray

    def __post_init__(self):
        self.mass = float(self.mass)
        if not np.isfinite(self.mass) or self.mass <= 0.0:
            raise ValueError(f"Body '{self.name}' must have a positive finite mass, got {self.mass}")
        self.position = _as_vector(self.position, "position")
        self.velocity = _as_vector(self.velocity, "velocity")

    def copy(self) -> "Body":
        return Body(self.name, self.mass, self.position.copy(), self.velocity.copy())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Body":
        """Build a body from a descriptor dictionary.

        Args:
            data: Mapping with 'name', 'mass', 'position' and optional 'velocity'

        Returns:
            Body instance
        """
        missing = [key for key in ("name", "mass", "position") if key not in data]
        if missing:
            raise ValueError(f"Body descriptor is missing {missing}")
        return cls(
            name=str(data["name"]),
            mass=data["mass"],
            position=data["position"],
            velocity=data.get("velocity", (0.0, 0.0)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "mass": self.mass,
            "position": self.position.tolist(),
            "velocity": self.velocity.tolist(),
        }


def validate_bodies(bodies: Sequence[Body]) -> List[Body]:
    """Check a body collection before a run.

    Rejects empty collections and bodies sharing an initial position, since
    the force law is undefined at zero separation.

    Args:
        bodies: Ordered body collection

    Returns:
        The bodies as a list
    """
    bodies = list(bodies)
    if not bodies:
        raise ValueError("At least one body is required")
    for i in range(len(bodies)):
        for j in range(i + 1, len(bodies)):
            if np.array_equal(bodies[i].position, bodies[j].position):
                raise ValueError(
                    f"Bodies '{bodies[i].name}' and '{bodies[j].name}' start at the same position"
                )
    return bodies
