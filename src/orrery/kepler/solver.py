"""Instantaneous position of a body on its Keplerian orbit."""

import jax
import quaxed.numpy as jnp
from jaxtyping import ArrayLike
from unxt import Quantity

from orrery.kepler.helpers import (
    KEPLER_MAX_ITER,
    KEPLER_TOL,
    mean_anomaly,
    orbital_radius,
    solve_eccentric_anomaly,
    true_anomaly,
)
from orrery.kepler.orientation import InclinationOrientation


def solve_position(
    semi_major_axis: ArrayLike,
    eccentricity: ArrayLike,
    time: Quantity["time"] | ArrayLike,
    period: Quantity["time"] | ArrayLike,
    inclination: Quantity["angle"] | ArrayLike = 0.0,
    *,
    tol: float = KEPLER_TOL,
    max_iter: int = KEPLER_MAX_ITER,
) -> jax.Array:
    """Get the 3D scene position of a body at the given time(s).

    The body starts at pericenter (on +x) at ``time = 0`` and moves through the
    orbital plane toward +z. Time is not wrapped to a single period: any real value,
    including negative or multi-period times, gives the periodic position through the
    trigonometry alone.

    Preconditions (not checked): ``semi_major_axis > 0``, ``0 <= eccentricity < 1``
    and ``period > 0``. Malformed values propagate as non-finite output.

    Parameters
    ----------
    semi_major_axis
        Semi-major axis, in scene-distance units.
    eccentricity
        Orbital eccentricity.
    time
        Elapsed time, in the same unit as ``period``.
    period
        Orbital period.
    inclination
        Inclination of the orbital plane; degrees unless given as an angle quantity.
    tol, max_iter
        Newton-Raphson stopping rule, see :func:`solve_eccentric_anomaly`.

    Returns
    -------
    xyz
        Array of shape (3, ...) holding ``x, y, z``; unpack with ``x, y, z = ...``.
    """
    M = mean_anomaly(time, period)
    E, _ = solve_eccentric_anomaly(M, eccentricity, tol=tol, max_iter=max_iter)

    r = orbital_radius(semi_major_axis, eccentricity, E)
    theta = true_anomaly(eccentricity, E)

    # Position in orbital plane
    x_orb = r * jnp.cos(theta)
    z_orb = r * jnp.sin(theta)
    xyz_orb = jnp.stack([x_orb, jnp.zeros_like(x_orb), z_orb], axis=0)

    orientation = InclinationOrientation.from_inclination(inclination)
    return orientation.apply(xyz_orb)
