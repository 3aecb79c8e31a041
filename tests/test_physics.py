"""Tests for the body model and gravitational force accumulation."""

import numpy as np
import pytest
from orbit_sim.physics.body import Body, validate_bodies
from orbit_sim.physics.force_calculator import (
    ForceCalculator,
    CoincidentBodiesError,
    GRAVITATIONAL_CONSTANT,
)


def _arrays(bodies):
    positions = np.array([b.position for b in bodies])
    masses = np.array([b.mass for b in bodies])
    return positions, masses


def test_body_initialization():
    """Test body construction converts vectors to float64 arrays."""
    body = Body("Earth", 5.9722e24, [0, 0], (0, -12.5))

    assert body.mass == 5.9722e24
    assert body.position.dtype == np.float64
    assert body.position.shape == (2,)
    assert np.allclose(body.velocity, [0.0, -12.5])


@pytest.mark.parametrize("mass", [0.0, -1.0, float("nan"), float("inf")])
def test_body_rejects_invalid_mass(mass):
    with pytest.raises(ValueError):
        Body("bad", mass, (0.0, 0.0), (0.0, 0.0))


def test_body_rejects_wrong_dimension():
    with pytest.raises(ValueError):
        Body("bad", 1.0, (0.0, 0.0, 0.0), (0.0, 0.0))


def test_body_copy_is_independent():
    body = Body("Moon", 7.342e22, (1.0, 2.0), (3.0, 4.0))
    clone = body.copy()
    clone.position[0] = 99.0

    assert body.position[0] == 1.0
    assert clone.name == body.name and clone.mass == body.mass


def test_body_dict_descriptor():
    """Test building a body from a descriptor and back."""
    body = Body.from_dict({"name": "Probe", "mass": 1000, "position": [1e7, 0]})

    assert np.allclose(body.velocity, [0.0, 0.0])
    assert Body.from_dict(body.to_dict()).to_dict() == body.to_dict()

    with pytest.raises(ValueError):
        Body.from_dict({"name": "Probe", "position": [0, 0]})


def test_validate_bodies():
    a = Body("a", 1.0, (0.0, 0.0), (0.0, 0.0))
    b = Body("b", 1.0, (0.0, 0.0), (1.0, 0.0))

    with pytest.raises(ValueError):
        validate_bodies([])
    with pytest.raises(ValueError):
        validate_bodies([a, b])
    assert validate_bodies((a,)) == [a]


def test_force_calculation_two_bodies():
    """Test the concrete 1e24 kg / 1e22 kg pair at 1e8 m."""
    bodies = [
        Body("heavy", 1e24, (0.0, 0.0), (0.0, 0.0)),
        Body("light", 1e22, (1e8, 0.0), (0.0, 0.0)),
    ]
    positions, masses = _arrays(bodies)

    forces = ForceCalculator().compute_forces(positions, masses)

    expected = GRAVITATIONAL_CONSTANT * 1e24 * 1e22 / 1e8 ** 2
    assert expected == pytest.approx(6.674e19)
    # Attractive: heavy pulled towards +x, light towards -x
    assert forces[0, 0] == pytest.approx(expected, rel=1e-12)
    assert forces[1, 0] == pytest.approx(-expected, rel=1e-12)
    assert forces[0, 1] == 0.0 and forces[1, 1] == 0.0


def test_pairwise_symmetry_is_exact():
    """Test force[i] == -force[j] bit for bit for a two-body system."""
    positions = np.array([[1.234e7, -5.5e6], [-3.21e8, 7.77e7]])
    masses = np.array([5.9722e24, 7.342e22])

    forces = ForceCalculator().compute_forces(positions, masses)

    assert np.array_equal(forces[0], -forces[1])


@pytest.mark.parametrize("n", [2, 3, 5, 10])
def test_zero_net_force(n):
    """Test the forces on all bodies sum to zero for any body count."""
    angles = np.linspace(0.0, 2.0 * np.pi, n, endpoint=False)
    radii = 1e8 * (1.0 + 0.37 * np.arange(n))
    positions = np.stack([radii * np.cos(angles), radii * np.sin(angles)], axis=1)
    masses = 1e22 * (1.0 + np.arange(n) ** 2)

    forces = ForceCalculator().compute_forces(positions, masses)

    scale = np.max(np.abs(forces))
    assert scale > 0
    assert np.allclose(np.sum(forces, axis=0), 0.0, atol=1e-12 * scale)


def test_forces_accumulate_across_pairs():
    """Test a body between two equal masses feels no net force."""
    positions = np.array([[-1e8, 0.0], [0.0, 0.0], [1e8, 0.0]])
    masses = np.array([1e24, 1e22, 1e24])

    forces = ForceCalculator().compute_forces(positions, masses)

    assert np.allclose(forces[1], 0.0, atol=1e-6 * abs(forces[0, 0]))
    # Outer bodies feel the middle body and each other
    pair_outer = GRAVITATIONAL_CONSTANT * 1e24 * 1e24 / (2e8) ** 2
    pair_middle = GRAVITATIONAL_CONSTANT * 1e24 * 1e22 / (1e8) ** 2
    assert forces[0, 0] == pytest.approx(pair_outer + pair_middle, rel=1e-12)


def test_forces_overwrite_previous_buffer():
    """Test repeated calls overwrite the output buffer instead of adding."""
    positions = np.array([[0.0, 0.0], [1e8, 0.0], [0.0, 2e8]])
    masses = np.array([1e24, 1e22, 5e23])
    calculator = ForceCalculator()

    buffer = np.full((3, 2), 1e30)
    first = calculator.compute_forces(positions, masses, out=buffer).copy()
    second = calculator.compute_forces(positions, masses, out=buffer)

    assert second is buffer
    assert np.array_equal(first, second)


def test_custom_gravitational_constant():
    positions = np.array([[0.0, 0.0], [2.0, 0.0]])
    masses = np.array([3.0, 4.0])

    forces = ForceCalculator(G=1.0).compute_forces(positions, masses)

    assert np.allclose(forces, [[3.0, 0.0], [-3.0, 0.0]])


def test_coincident_bodies_raise():
    positions = np.array([[1.0, 1.0], [5.0, 5.0], [1.0, 1.0]])
    masses = np.array([1.0, 1.0, 1.0])

    with pytest.raises(CoincidentBodiesError) as exc_info:
        ForceCalculator().compute_forces(positions, masses)

    assert (exc_info.value.i, exc_info.value.j) == (0, 2)
    assert isinstance(exc_info.value, ZeroDivisionError)
