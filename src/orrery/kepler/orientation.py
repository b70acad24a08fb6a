"""Inclination of an orbital plane relative to the scene's reference plane."""

import equinox as eqx
import jax
import quaxed.numpy as jnp
from jaxtyping import ArrayLike
from unxt import Quantity, ustrip


class InclinationOrientation(eqx.Module):
    """Tilt of an orbital plane about the scene x-axis.

    Orbits are laid out in the scene's x-z plane (y is up), with pericenter along +x.
    The inclination tilts that plane about the x-axis so that a point ``(x_p, 0, z_p)``
    of the untilted orbit lands at ``(x_p, z_p sin(i), z_p cos(i))``.

    The angle is stored as a sin/cos pair, for numerical stability and so that the
    degree-to-radian conversion happens exactly once, at construction.
    """

    sin_i: float = 0.0
    cos_i: float = 1.0

    def __check_init__(self) -> None:
        x = jnp.asarray(self.sin_i**2 + self.cos_i**2)
        eqx.error_if(
            x,
            jnp.logical_not(
                jnp.isclose(
                    x,
                    1.0,
                    atol=jnp.finfo(float).eps,  # type: ignore[no-untyped-call]
                )
            ),
            "Inclination sin/cos values are not normalized",
        )

    @classmethod
    def from_degrees(cls, inclination: ArrayLike) -> "InclinationOrientation":
        """Construct from an inclination given in degrees."""
        i = jnp.deg2rad(jnp.asarray(inclination))
        return cls(sin_i=jnp.sin(i), cos_i=jnp.cos(i))

    @classmethod
    def from_angles(
        cls, /, inclination: Quantity["angle"] = Quantity(0, "rad")
    ) -> "InclinationOrientation":
        """Construct from an angle quantity."""
        i = ustrip("rad", Quantity.from_(inclination))
        return cls(sin_i=jnp.sin(i), cos_i=jnp.cos(i))

    @classmethod
    def from_inclination(
        cls, inclination: Quantity["angle"] | ArrayLike
    ) -> "InclinationOrientation":
        """Construct from a quantity, or from a plain number taken to be degrees."""
        if isinstance(inclination, Quantity):
            return cls.from_angles(inclination)
        return cls.from_degrees(inclination)

    @property
    def inclination(self) -> jax.Array:
        """Inclination (i), in radians."""
        return jnp.arctan2(self.sin_i, self.cos_i)

    @property
    def rotation_matrix(self) -> jax.Array:
        """Matrix carrying orbital-plane vectors into the scene frame.

        This is a rotation about the x-axis by ``-i``:

        R = [[1, 0, 0], [0, c_i, s_i], [0, -s_i, c_i]]

        so that for an in-plane vector ``(x_p, 0, z_p)`` the scene coordinates are
        ``y = z_p s_i`` and ``z = z_p c_i``. If the sin/cos pair is batched with shape
        (n,), the matrix has shape (3, 3, n).
        """
        s_i = jnp.asarray(self.sin_i)
        c_i = jnp.asarray(self.cos_i)
        one = jnp.ones_like(c_i)
        zero = jnp.zeros_like(c_i)

        return jnp.stack(
            [
                jnp.stack([one, zero, zero], axis=0),
                jnp.stack([zero, c_i, s_i], axis=0),
                jnp.stack([zero, -s_i, c_i], axis=0),
            ],
            axis=0,
        )

    def apply(self, xyz_orb: ArrayLike) -> jax.Array:
        """Rotate orbital-plane vector(s) of shape (3, ...) into the scene frame."""
        return jnp.einsum("ij...,j...->i...", self.rotation_matrix, xyz_orb)
