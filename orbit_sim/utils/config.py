"""Configuration management."""

import json
import yaml
from typing import Any, Dict, List, Optional
from pathlib import Path
from dataclasses import dataclass, asdict
from orbit_sim.physics.body import Body
from orbit_sim.physics.force_calculator import GRAVITATIONAL_CONSTANT
from orbit_sim.physics.integrators.method import IntegrationMethod
from orbit_sim.physics.simulator import DEFAULT_DT, DEFAULT_STEPS
from orbit_sim.presets import get_preset


@dataclass
class Config:
    """Simulation configuration."""
    # Simulation parameters
    method: str = "symplectic"
    dt: float = DEFAULT_DT
    steps: int = DEFAULT_STEPS
    G: float = GRAVITATIONAL_CONSTANT

    # Initial conditions: explicit body descriptors win over the preset
    preset: str = "earth_moon"
    bodies: Optional[List[Dict[str, Any]]] = None

    # Output parameters
    tracked: List[int] = None
    precision: int = 6
    plot_path: Optional[str] = None

    def __post_init__(self):
        if self.tracked is None:
            self.tracked = [0, 1]
        self.tracked = [int(i) for i in self.tracked]
        IntegrationMethod.from_name(self.method)
        self.dt = float(self.dt)
        self.steps = int(self.steps)
        if self.dt <= 0.0:
            raise ValueError(f"dt must be positive, got {self.dt}")
        if self.steps < 0:
            raise ValueError(f"steps must be non-negative, got {self.steps}")

    @property
    def integration_method(self) -> IntegrationMethod:
        return IntegrationMethod.from_name(self.method)

    def build_bodies(self) -> List[Body]:
        """Create the initial bodies from descriptors or the named preset."""
        if self.bodies:
            bodies = [Body.from_dict(descriptor) for descriptor in self.bodies]
        else:
            bodies = get_preset(self.preset).generate()
        for index in self.tracked:
            if not 0 <= index < len(bodies):
                raise ValueError(f"Tracked body index {index} out of range for {len(bodies)} bodies")
        return bodies


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")
    return Config(**data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
