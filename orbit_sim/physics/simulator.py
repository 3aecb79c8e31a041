"""Main simulator controller."""

import sys
from typing import Callable, List, Optional, Sequence, Union
import numpy as np
from orbit_sim.physics.body import Body, validate_bodies
from orbit_sim.physics.diagnostics import Diagnostics
from orbit_sim.physics.force_calculator import ForceCalculator, GRAVITATIONAL_CONSTANT
from orbit_sim.physics.integrators.base import Integrator
from orbit_sim.physics.integrators.method import IntegrationMethod

# Time step is one hour, voluntarily coarse
DEFAULT_DT = 3600.0
# One simulated year
DEFAULT_STEPS = 24 * 365


def resolve_integrator(method: Union[IntegrationMethod, Integrator, str]) -> Integrator:
    """Turn a method token, enum member or integrator into an integrator."""
    if isinstance(method, Integrator):
        return method
    if isinstance(method, str):
        method = IntegrationMethod.from_name(method)
    if not isinstance(method, IntegrationMethod):
        raise TypeError(f"Cannot select an integrator from {method!r}")
    return method.create_integrator()


class Simulator:
    """Main simulation controller.

    Owns the body collection for the lifetime of the run and drives the
    force -> integrate -> emit cycle. Each step finishes the force buffer
    for every body before any body is moved.
    """

    def __init__(
        self,
        bodies: Sequence[Body],
        method: Union[IntegrationMethod, Integrator, str] = IntegrationMethod.SYMPLECTIC,
        dt: float = DEFAULT_DT,
        G: float = GRAVITATIONAL_CONSTANT,
        verbose: bool = False
    ):
        """Initialize simulator.

        Args:
            bodies: Initial bodies; copied, the caller's objects are not mutated
            method: Integration method (enum, token, or Integrator instance)
            dt: Time step in seconds
            G: Gravitational constant
            verbose: Print run summaries to stderr
        """
        if not dt > 0.0:
            raise ValueError(f"Time step must be positive, got {dt}")

        self.bodies: List[Body] = [body.copy() for body in validate_bodies(bodies)]
        self.integrator = resolve_integrator(method)
        self.dt = float(dt)
        self.G = float(G)
        self.verbose = verbose

        self.force_calculator = ForceCalculator(G=self.G)
        self.diagnostics = Diagnostics(G=self.G)
        self.masses = np.array([body.mass for body in self.bodies], dtype=np.float64)
        # Per-step scratch; recomputed every step, carries nothing across steps
        self.forces = np.zeros((len(self.bodies), 2), dtype=np.float64)

        self.time = 0.0
        self.step_count = 0

        self.on_step_callback: Optional[Callable] = None

    @property
    def n_bodies(self) -> int:
        return len(self.bodies)

    @property
    def positions(self) -> np.ndarray:
        return np.array([body.position for body in self.bodies], dtype=np.float64)

    @property
    def velocities(self) -> np.ndarray:
        return np.array([body.velocity for body in self.bodies], dtype=np.float64)

    def compute_forces(self, positions: Optional[np.ndarray] = None) -> np.ndarray:
        """Recompute the force buffer for the current (or given) configuration."""
        if positions is None:
            positions = self.positions
        return self.force_calculator.compute_forces(positions, self.masses, out=self.forces)

    def step(self):
        """Perform one simulation step."""
        positions = self.positions
        velocities = self.velocities

        self.compute_forces(positions)
        new_positions, new_velocities = self.integrator.step(
            positions,
            velocities,
            self.masses,
            self.forces,
            self.dt,
        )

        for body, position, velocity in zip(self.bodies, new_positions, new_velocities):
            body.position = position
            body.velocity = velocity

        self.time += self.dt
        self.step_count += 1

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int = DEFAULT_STEPS, emitter=None) -> int:
        """Run the simulation for a fixed number of steps.

        After each step the emitter receives the elapsed-time label and the
        bodies. The label for the k-th step of a fresh run is k * dt, so
        the first line reads 0.

        Args:
            n_steps: Number of steps to run
            emitter: Optional TrajectoryEmitter

        Returns:
            Number of steps run
        """
        if n_steps < 0:
            raise ValueError(f"Step count must be non-negative, got {n_steps}")

        if self.verbose:
            initial_energy = self.get_energy()
            print(f"Running {n_steps} steps: integrator={self.integrator.name}, dt={self.dt:g} s, "
                  f"bodies={self.n_bodies}", file=sys.stderr)

        for _ in range(n_steps):
            self.step()
            if emitter is not None:
                emitter.emit((self.step_count - 1) * self.dt, self.bodies)

        if self.verbose:
            drift = self.diagnostics.energy_drift(self.get_energy(), initial_energy)
            print(f"Simulation complete: t={self.time:g} s, energy drift={drift * 100:.4f}%",
                  file=sys.stderr)

        return n_steps

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count)
        """
        return self.positions, self.velocities, self.masses.copy(), self.time, self.step_count

    def get_energy(self) -> float:
        """Get current total energy (kinetic + potential)."""
        return self.diagnostics.compute_total_energy(self.positions, self.velocities, self.masses)
