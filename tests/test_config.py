"""Tests for configuration loading and saving."""

import json
import numpy as np
import pytest
from orbit_sim.physics.integrators import IntegrationMethod
from orbit_sim.utils.config import Config, load_config, save_config


def test_config_defaults():
    config = Config()

    assert config.method == "symplectic"
    assert config.dt == 3600.0
    assert config.steps == 8760
    assert config.G == 6.674e-11
    assert config.tracked == [0, 1]
    assert config.integration_method is IntegrationMethod.SYMPLECTIC

    bodies = config.build_bodies()
    assert [b.name for b in bodies] == ["Earth", "Moon"]


def test_config_validation():
    with pytest.raises(ValueError):
        Config(method="verlet")
    with pytest.raises(ValueError):
        Config(dt=-1.0)
    with pytest.raises(ValueError):
        Config(steps=-5)
    with pytest.raises(ValueError):
        Config(tracked=[0, 5]).build_bodies()
    with pytest.raises(ValueError):
        Config(preset="andromeda").build_bodies()


def test_config_body_descriptors():
    config = Config(bodies=[
        {"name": "A", "mass": 1e24, "position": [0, 0]},
        {"name": "B", "mass": 1e22, "position": [1e8, 0], "velocity": [0, 500]},
        {"name": "C", "mass": 1e20, "position": [0, 2e8]},
    ])

    bodies = config.build_bodies()

    assert [b.name for b in bodies] == ["A", "B", "C"]
    assert np.allclose(bodies[1].velocity, [0.0, 500.0])


def test_save_load_json(tmp_path):
    """Test saving and loading JSON format."""
    config = Config(method="naive", steps=10, preset="sun_earth_moon", tracked=[0, 2])
    path = tmp_path / "config.json"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config
    assert json.loads(path.read_text())["method"] == "naive"


def test_save_load_yaml(tmp_path):
    """Test saving and loading YAML format."""
    config = Config(dt=60.0, bodies=[{"name": "A", "mass": 1.0, "position": [0.0, 0.0],
                                      "velocity": [0.0, 0.0]}])
    path = tmp_path / "config.yaml"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_load_rejects_unknown_keys(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"method": "naive", "integrator": "rk4"}))

    with pytest.raises(TypeError):
        load_config(str(path))


def test_load_rejects_non_mapping(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("- naive\n- symplectic\n")

    with pytest.raises(ValueError):
        load_config(str(path))
