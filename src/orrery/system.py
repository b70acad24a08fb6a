"""The bodies of the scene as one arena of orbital elements, and its frame update."""

import logging
from collections.abc import Sequence

import equinox as eqx
import jax
import quaxed.numpy as jnp
from jaxtyping import ArrayLike
from unxt import Quantity, ustrip

from orrery.config import SceneConfig
from orrery.custom_types import NFloatArray, NPositions, Position
from orrery.data import MOON, PLANETS, MoonSpec, PlanetSpec
from orrery.kepler.elements import OrbitalElements
from orrery.kepler.path import sample_orbit_path
from orrery.kepler.solver import solve_position

logger = logging.getLogger(__name__)


def _strip(x, unit: str) -> float:  # type: ignore[no-untyped-def]
    return float(ustrip(unit, x)) if isinstance(x, Quantity) else float(x)


class SystemState(eqx.Module):
    """Snapshot of every body at one frame.

    Attributes
    ----------
    positions : Array, shape (n, 3)
        Scene position of each body, in arena order.
    rotation_y : Array, shape (n,)
        Accumulated spin of each body about its own y-axis, in radians.
    moon_position : Array, shape (3,), optional
        Scene position of the satellite, or None if the system has none.
    moon_rotation_y : float
        Accumulated spin of the satellite.
    elapsed : float
        Clock time of the snapshot.
    """

    positions: NPositions
    rotation_y: NFloatArray
    moon_position: Position | None = None
    moon_rotation_y: float = 0.0
    elapsed: float = 0.0


class SolarSystem(eqx.Module):
    """Orbital elements of all bodies, stored as arrays indexed by body.

    Each body is addressed by its position in ``names`` (a stable index) or by name.
    The arena holds no rendering objects: positions come out as arrays that a
    renderer applies to whatever it draws.

    Periods are stored in seconds and inclinations in degrees. Times passed to
    :meth:`positions` are in seconds unless given as a time quantity.
    """

    names: tuple[str, ...] = eqx.field(static=True)
    semi_major_axis: NFloatArray
    eccentricity: NFloatArray
    period: NFloatArray
    inclination: NFloatArray
    rotation_speed: NFloatArray
    moon: MoonSpec | None = None
    config: SceneConfig = SceneConfig()

    def __check_init__(self) -> None:
        if len(set(self.names)) != len(self.names):
            raise ValueError(f"Body names must be unique, got {self.names}")

        if self.moon is not None and self.moon.host not in self.names:
            raise ValueError(
                f"Host {self.moon.host!r} of {self.moon.name!r} is not a body of the "
                "system"
            )

    # ========================================================================
    # Alternative constructors
    #

    @classmethod
    def from_specs(
        cls,
        planets: Sequence[PlanetSpec] = PLANETS,
        moon: MoonSpec | None = MOON,
        config: SceneConfig | None = None,
    ) -> "SolarSystem":
        """Build the arena from per-planet configuration records.

        Parameters
        ----------
        planets
            Planet configurations, in the order that defines body indices.
        moon
            Optional: satellite configuration. If its host is not among ``planets``,
            the satellite is dropped with a warning.
        config
            Optional: host-loop configuration.
        """
        if len(planets) == 0:
            raise ValueError("A solar system needs at least one planet")

        names = tuple(p.name for p in planets)
        if moon is not None and moon.host not in names:
            logger.warning(
                "Host %r of %r is not among the bodies; the satellite is disabled",
                moon.host,
                moon.name,
            )
            moon = None

        kw = {}
        if config is not None:
            kw["config"] = config

        system = cls(
            names=names,
            semi_major_axis=jnp.asarray(
                [float(p.elements.semi_major_axis) for p in planets]
            ),
            eccentricity=jnp.asarray([float(p.elements.eccentricity) for p in planets]),
            period=jnp.asarray([_strip(p.elements.period, "s") for p in planets]),
            inclination=jnp.asarray(
                [_strip(p.elements.inclination, "deg") for p in planets]
            ),
            rotation_speed=jnp.asarray([float(p.rotation_speed) for p in planets]),
            moon=moon,
            **kw,
        )
        logger.debug(
            "Built solar system with %d bodies: %s", system.n_bodies, ", ".join(names)
        )
        return system

    # ========================================================================
    # Properties
    #

    @property
    def n_bodies(self) -> int:
        """Number of bodies solved with Kepler's equation."""
        return len(self.names)

    @property
    def moon_host_index(self) -> int | None:
        """Index of the body the satellite orbits, or None without a satellite."""
        if self.moon is None:
            return None
        return self.index(self.moon.host)

    # ========================================================================
    # Lookups
    #

    def index(self, name: str) -> int:
        """Stable index of the body called ``name``."""
        try:
            return self.names.index(name)
        except ValueError:
            raise KeyError(f"No body named {name!r}") from None

    def elements(self, idx: int | str) -> OrbitalElements:
        """Orbital elements of a body, by index or name."""
        if isinstance(idx, str):
            idx = self.index(idx)

        if not -self.n_bodies <= idx < self.n_bodies:
            raise IndexError(
                f"body index {idx} out of range for {self.n_bodies} bodies"
            )

        return OrbitalElements(
            semi_major_axis=float(self.semi_major_axis[idx]),
            eccentricity=float(self.eccentricity[idx]),
            period=float(self.period[idx]),
            inclination=float(self.inclination[idx]),
        )

    # ========================================================================
    # Methods
    #

    def positions(self, time: Quantity["time"] | ArrayLike) -> NPositions:
        """Scene positions of all bodies at a single time, shape (n, 3).

        Bodies are independent of one another and are solved in one vectorized call.
        """
        if isinstance(time, Quantity):
            time = ustrip("s", time)

        return jax.vmap(solve_position, in_axes=(0, 0, None, 0, 0))(
            self.semi_major_axis,
            self.eccentricity,
            time,
            self.period,
            self.inclination,
        )

    def orbit_paths(self, segments: int | None = None) -> jax.Array:
        """Closed orbit outlines of all bodies, shape (n, segments + 1, 3).

        Outlines lie in each orbit's own plane (``y = 0``); the renderer applies each
        body's inclination to its outline as a whole.
        """
        segments = self.config.orbit_segments if segments is None else segments

        def _sample(a, e):  # type: ignore[no-untyped-def] # noqa: ANN202
            return sample_orbit_path(a, e, segments)

        return jax.vmap(_sample)(self.semi_major_axis, self.eccentricity)

    def moon_position(self, host_position: ArrayLike, elapsed: ArrayLike) -> Position:
        """Position of the satellite given its host's position of the same frame.

        The satellite advances ``angular_step`` radians per reference frame on a
        circle of ``orbit_radius`` tilted by its inclination.
        """
        if self.moon is None:
            raise ValueError("This system has no satellite")

        phi = self.moon.angular_step * self.config.reference_frame_rate * elapsed
        i = jnp.deg2rad(self.moon.inclination)
        offset = self.moon.orbit_radius * jnp.stack(
            [jnp.cos(phi), jnp.sin(phi) * jnp.sin(i), jnp.sin(phi) * jnp.cos(i)],
            axis=0,
        )
        return jnp.asarray(host_position) + offset

    def light_intensities(self, positions: NPositions) -> NFloatArray:
        """Inverse-square light intensity from the Sun at each position, floored."""
        d2 = jnp.sum(jnp.asarray(positions) ** 2, axis=-1)
        return jnp.maximum(1.0 / d2, self.config.min_light_intensity)

    def initial_state(self) -> SystemState:
        """State at clock time zero, with no accumulated spin."""
        positions = self.positions(0.0)
        moon_position = None
        if self.moon is not None:
            moon_position = self.moon_position(positions[self.moon_host_index], 0.0)

        return SystemState(
            positions=positions,
            rotation_y=jnp.zeros_like(self.rotation_speed),
            moon_position=moon_position,
        )

    def step(self, state: SystemState, elapsed: float, delta: float) -> SystemState:
        """Advance the scene to clock time ``elapsed``.

        Parameters
        ----------
        state
            State of the previous frame; only its accumulated spin is carried over.
        elapsed
            Clock time since the start of the animation. Positions are evaluated at
            ``elapsed * config.time_scale``.
        delta
            Clock time since the previous frame. Spin advances once per frame by
            ``rotation_speed * delta * config.reference_frame_rate``.

        Returns
        -------
        state
            The new frame. The satellite is placed after its host's position for this
            frame is known.
        """
        positions = self.positions(elapsed * self.config.time_scale)

        frames = delta * self.config.reference_frame_rate
        rotation_y = state.rotation_y + self.rotation_speed * frames

        moon_position = None
        moon_rotation_y = state.moon_rotation_y
        if self.moon is not None:
            host_position = positions[self.moon_host_index]
            moon_position = self.moon_position(host_position, elapsed)
            moon_rotation_y = moon_rotation_y + self.moon.spin_step * frames

        return SystemState(
            positions=positions,
            rotation_y=rotation_y,
            moon_position=moon_position,
            moon_rotation_y=moon_rotation_y,
            elapsed=elapsed,
        )
