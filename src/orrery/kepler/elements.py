"""Orbital elements of a body, validated at construction."""

import equinox as eqx
import jax
import quaxed.numpy as jnp
from jaxtyping import ArrayLike
from unxt import Quantity

from orrery.kepler.orientation import InclinationOrientation
from orrery.kepler.path import ORBIT_PATH_SEGMENTS, sample_orbit_path
from orrery.kepler.solver import solve_position


def _magnitude(x):  # type: ignore[no-untyped-def] # noqa: ANN202
    return x.value if isinstance(x, Quantity) else x


class OrbitalElements(eqx.Module):
    """Orbital elements of a body on a bound Keplerian orbit around the origin.

    The body sits at pericenter at time zero, so no phase or time-of-pericenter
    element is carried. Elements are immutable once constructed; each body owns its
    own instance.

    Parameters
    ----------
    semi_major_axis
        Semi-major axis of the ellipse, in scene-distance units.
    eccentricity
        Orbital eccentricity, in [0, 1).
    period
        Time for one full revolution. Either a plain number, in which case times
        passed to :meth:`get_position` must be in the same unit, or a time quantity.
    inclination
        Tilt of the orbital plane; degrees unless given as an angle quantity.
    """

    semi_major_axis: float
    eccentricity: float
    period: Quantity["time"] | float
    inclination: Quantity["angle"] | float = 0.0

    def __check_init__(self) -> None:
        if not (_magnitude(self.semi_major_axis) > 0.0):
            raise ValueError("Semi-major axis must be positive")

        if not (0.0 <= self.eccentricity < 1.0):
            raise ValueError(
                "Eccentricity must be in the range [0, 1) for bound orbits"
            )

        if not (_magnitude(self.period) > 0.0):
            raise ValueError("Period must be positive")

    # ========================================================================
    # Derived quantities
    #

    @property
    def orientation(self) -> InclinationOrientation:
        """Orientation of the orbital plane."""
        return InclinationOrientation.from_inclination(self.inclination)

    @property
    def pericenter(self) -> float:
        """Closest distance to the focus, ``a (1 - e)``."""
        return self.semi_major_axis * (1 - self.eccentricity)

    @property
    def apocenter(self) -> float:
        """Farthest distance from the focus, ``a (1 + e)``."""
        return self.semi_major_axis * (1 + self.eccentricity)

    # ========================================================================
    # Methods
    #

    def get_position(self, time: Quantity["time"] | ArrayLike) -> jax.Array:
        """Get 3D scene position of the body at given time(s), shape (3, ...)."""
        return solve_position(
            self.semi_major_axis,
            self.eccentricity,
            time,
            self.period,
            self.inclination,
        )

    def get_orbit_path(self, segments: int = ORBIT_PATH_SEGMENTS) -> jax.Array:
        """Closed outline of the orbit in its own plane, shape (segments + 1, 3)."""
        return sample_orbit_path(self.semi_major_axis, self.eccentricity, segments)

    def get_radius(self, time: Quantity["time"] | ArrayLike) -> jax.Array:
        """Distance from the focus at given time(s)."""
        return jnp.sqrt(jnp.sum(self.get_position(time) ** 2, axis=0))
