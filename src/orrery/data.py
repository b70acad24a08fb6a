"""
Static configuration of the bodies in the scene.

Orbital elements are in scene units: distances are scene-distance units chosen for
display rather than astronomical distances, and periods are in seconds.
"""

import equinox as eqx

from orrery.kepler.elements import OrbitalElements

__all__ = ["MOON", "MoonSpec", "PLANETS", "PlanetSpec"]

# Mesh radius per unit of catalogue size
SIZE_TO_RADIUS = 5.0


class PlanetSpec(eqx.Module):
    """Configuration record for one planet.

    Attributes
    ----------
    name : str
        Display name, also used as the body identifier.
    elements : OrbitalElements
        Orbital elements of the planet.
    size : float
        Relative size; the rendered sphere radius is ``size * SIZE_TO_RADIUS``.
    color : int
        24-bit RGB color of the orbit path.
    rotation_speed : float
        Spin about the planet's own axis, in radians per reference frame.
    info : str
        One-line description shown when the planet is selected.
    nasa_link : str
        URL of the planet's NASA fact sheet.
    """

    name: str = eqx.field(static=True)
    elements: OrbitalElements
    size: float
    color: int = eqx.field(static=True)
    rotation_speed: float
    info: str = eqx.field(default="", static=True)
    nasa_link: str = eqx.field(default="", static=True)

    @property
    def radius(self) -> float:
        """Rendered sphere radius."""
        return self.size * SIZE_TO_RADIUS


class MoonSpec(eqx.Module):
    """Configuration record for a satellite drawn around a planet.

    The satellite is not solved with Kepler's equation: it moves uniformly on a
    tilted circle centred on its host's position of the same frame.

    Attributes
    ----------
    name : str
        Display name.
    host : str
        Name of the planet the satellite orbits.
    radius : float
        Rendered sphere radius.
    orbit_radius : float
        Radius of the circular orbit around the host.
    angular_step : float
        Orbital angle advanced per reference frame, in radians.
    inclination : float
        Tilt of the circular orbit, in degrees.
    spin_step : float
        Spin advanced per reference frame, in radians.
    """

    name: str = eqx.field(static=True)
    host: str = eqx.field(static=True)
    radius: float = 2.0
    orbit_radius: float = 30.0
    angular_step: float = 0.02
    inclination: float = 5.14
    spin_step: float = 0.01

    def __check_init__(self) -> None:
        if not self.orbit_radius > 0:
            raise ValueError("Moon orbit radius must be positive")


PLANETS: tuple[PlanetSpec, ...] = (
    PlanetSpec(
        name="Mercury",
        elements=OrbitalElements(150.0, 0.2056, 7600544.0, 7.0),
        size=1.0,
        color=0xFFA500,
        rotation_speed=0.00001,
        info="Smallest planet, closest to the Sun",
        nasa_link="https://science.nasa.gov/mercury/facts/",
    ),
    PlanetSpec(
        name="Venus",
        elements=OrbitalElements(250.0, 0.0067, 19414149.0, 3.4),
        size=1.5,
        color=0xFFD700,
        rotation_speed=-0.00000005,
        info="Hottest planet, rotates backwards",
        nasa_link="https://science.nasa.gov/venus/venus-facts/",
    ),
    PlanetSpec(
        name="Earth",
        elements=OrbitalElements(350.0, 0.0167, 31557600.0, 0.0),
        size=1.6,
        color=0x00FF00,
        rotation_speed=0.01,
        info="Our home, the blue planet",
        nasa_link="https://science.nasa.gov/earth/facts/",
    ),
    PlanetSpec(
        name="Mars",
        elements=OrbitalElements(450.0, 0.0934, 59355072.0, 1.85),
        size=1.2,
        color=0xFF4500,
        rotation_speed=0.01,
        info="The Red Planet, home to Olympus Mons",
        nasa_link="https://science.nasa.gov/mars/facts/",
    ),
    PlanetSpec(
        name="Jupiter",
        elements=OrbitalElements(650.0, 0.0489, 374335776.0, 1.31),
        size=4.0,
        color=0xFFFF00,
        rotation_speed=0.02,
        info="Largest planet, Great Red Spot",
        nasa_link="https://science.nasa.gov/jupiter/facts/",
    ),
    PlanetSpec(
        name="Saturn",
        elements=OrbitalElements(850.0, 0.0565, 929596608.0, 2.49),
        size=3.0,
        color=0x87CEEB,
        rotation_speed=0.015,
        info="Known for its beautiful rings",
        nasa_link="https://science.nasa.gov/saturn/facts/",
    ),
    PlanetSpec(
        name="Uranus",
        elements=OrbitalElements(1050.0, 0.0457, 2651370019.0, 0.77),
        size=2.5,
        color=0x4682B4,
        rotation_speed=-0.01,
        info="Ice giant, tilted on its side",
        nasa_link="https://science.nasa.gov/uranus/facts/",
    ),
    PlanetSpec(
        name="Neptune",
        elements=OrbitalElements(1250.0, 0.0086, 5200418560.0, 1.77),
        size=2.5,
        color=0x0000FF,
        rotation_speed=0.015,
        info="Windiest planet, dark spot",
        nasa_link="https://science.nasa.gov/neptune/facts/",
    ),
)

MOON = MoonSpec(name="Moon", host="Earth")
