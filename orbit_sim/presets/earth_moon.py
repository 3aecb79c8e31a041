"""Earth-Moon and Sun-Earth-Moon initial conditions (SI units)."""

from typing import List
from orbit_sim.physics.body import Body
from orbit_sim.presets.base import Preset

EARTH_MASS = 5.9722e24
MOON_MASS = 7.342e22
SUN_MASS = 1.989e30

EARTH_MOON_DISTANCE = 384405000.0
MOON_ORBITAL_SPEED = 1022.0
# Earth-Moon pair has almost zero total momentum
EARTH_RECOIL_SPEED = 12.5

ASTRONOMICAL_UNIT = 1.496e11
EARTH_ORBITAL_SPEED = 29780.0


class EarthMoon(Preset):
    """Earth at the origin with the Moon on a near-circular orbit."""

    @property
    def name(self) -> str:
        return "earth_moon"

    def generate(self) -> List[Body]:
        return [
            Body("Earth", EARTH_MASS, (0.0, 0.0), (0.0, -EARTH_RECOIL_SPEED)),
            Body("Moon", MOON_MASS, (EARTH_MOON_DISTANCE, 0.0), (0.0, MOON_ORBITAL_SPEED)),
        ]


class SunEarthMoon(Preset):
    """Earth-Moon pair on a heliocentric orbit.

    Earth and Moon come first so the default tracked bodies stay the same
    as in the two-body scenario.
    """

    @property
    def name(self) -> str:
        return "sun_earth_moon"

    def generate(self) -> List[Body]:
        return [
            Body("Earth", EARTH_MASS, (ASTRONOMICAL_UNIT, 0.0),
                 (0.0, EARTH_ORBITAL_SPEED - EARTH_RECOIL_SPEED)),
            Body("Moon", MOON_MASS, (ASTRONOMICAL_UNIT + EARTH_MOON_DISTANCE, 0.0),
                 (0.0, EARTH_ORBITAL_SPEED + MOON_ORBITAL_SPEED)),
            Body("Sun", SUN_MASS, (0.0, 0.0), (0.0, 0.0)),
        ]
