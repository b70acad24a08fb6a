"""Static orbit paths for drawing."""

import jax
import quaxed.numpy as jnp
from jaxtyping import ArrayLike

ORBIT_PATH_SEGMENTS = 128


def sample_orbit_path(
    semi_major_axis: ArrayLike,
    eccentricity: ArrayLike,
    segments: int = ORBIT_PATH_SEGMENTS,
) -> jax.Array:
    """Sample the closed outline of an orbit in its own plane.

    Points follow the polar ellipse equation ``r = a (1 - e^2) / (1 + e cos(theta))``
    for ``theta`` uniformly spaced over [0, 2 pi], with the focus at the origin. All
    points have ``y = 0``: the inclination is not applied here. A renderer tilts the
    whole polyline as one object, which is a different tilt axis from the per-point
    rotation used for body positions.

    Parameters
    ----------
    semi_major_axis
        Semi-major axis, in scene-distance units.
    eccentricity
        Orbital eccentricity.
    segments
        Number of line segments. Must be a static positive integer.

    Returns
    -------
    points
        Array of shape (segments + 1, 3). The last point is the first point repeated,
        so the polyline is closed.
    """
    segments = int(segments)
    if segments < 1:
        raise ValueError(f"segments must be a positive integer, got {segments}")

    theta = (jnp.arange(segments) / segments) * 2 * jnp.pi
    r = semi_major_axis * (1 - eccentricity**2) / (1 + eccentricity * jnp.cos(theta))

    x = r * jnp.cos(theta)
    z = r * jnp.sin(theta)
    points = jnp.stack([x, jnp.zeros_like(x), z], axis=-1)
    return jnp.concatenate([points, points[:1]], axis=0)
