"""Kepler's equation and the anomalies derived from it."""

import jax
import quaxed.numpy as jnp
from jaxtyping import Array, ArrayLike, Float, Int
from unxt import Quantity, ustrip

# Newton-Raphson stops once a correction is at most KEPLER_TOL, or after
# KEPLER_MAX_ITER corrections, whichever comes first
KEPLER_TOL = 1e-6
KEPLER_MAX_ITER = 10


def mean_anomaly(
    time: Quantity["time"] | ArrayLike, period: Quantity["time"] | ArrayLike
) -> Float[Array, "..."]:
    """Mean anomaly ``M = 2 pi t / T`` in radians.

    The result is not reduced to [0, 2 pi); downstream trigonometry handles the
    wraparound. ``time`` and ``period`` must either both carry time units or both be
    plain numbers in the same unit.
    """
    if isinstance(time, Quantity) or isinstance(period, Quantity):
        return jnp.asarray(ustrip("", 2 * jnp.pi * time / period))
    return 2 * jnp.pi * jnp.asarray(time) / jnp.asarray(period)


def solve_eccentric_anomaly(
    M: ArrayLike,
    eccentricity: ArrayLike,
    tol: float = KEPLER_TOL,
    max_iter: int = KEPLER_MAX_ITER,
) -> tuple[Float[Array, "..."], Int[Array, "..."]]:
    """Solve Kepler's equation ``E - e sin(E) = M`` by Newton-Raphson.

    Starting from ``E0 = M + e sin(M)``, each element is refined independently until
    its last correction satisfies ``|dE| <= tol`` or ``max_iter`` corrections have
    been applied. The iteration cap is a safety bound: the solver never fails and
    returns its best estimate even when it did not converge.

    Parameters
    ----------
    M
        Mean anomaly in radians, any shape.
    eccentricity
        Orbital eccentricity, broadcastable against ``M``.
    tol
        Convergence threshold on the magnitude of the Newton correction.
    max_iter
        Maximum number of Newton corrections per element.

    Returns
    -------
    E, n_iter
        Eccentric anomaly in radians and the number of corrections applied to each
        element.
    """
    M = jnp.asarray(M)
    e = jnp.asarray(eccentricity)
    E0 = M + e * jnp.sin(M)

    def _active(carry):  # type: ignore[no-untyped-def] # noqa: ANN202
        _, dE, n_iter = carry
        return (jnp.abs(dE) > tol) & (n_iter < max_iter)

    def _any_active(carry):  # type: ignore[no-untyped-def] # noqa: ANN202
        return jnp.any(_active(carry))

    def _newton_step(carry):  # type: ignore[no-untyped-def] # noqa: ANN202
        E, dE, n_iter = carry
        active = _active(carry)
        step = (E - e * jnp.sin(E) - M) / (1 - e * jnp.cos(E))
        return (
            jnp.where(active, E - step, E),
            jnp.where(active, step, dE),
            jnp.where(active, n_iter + 1, n_iter),
        )

    init = (E0, jnp.ones_like(E0), jnp.zeros_like(E0, dtype=int))
    E, _, n_iter = jax.lax.while_loop(_any_active, _newton_step, init)
    return E, n_iter


def orbital_radius(
    semi_major_axis: ArrayLike, eccentricity: ArrayLike, E: ArrayLike
) -> Float[Array, "..."]:
    """Distance from the focus, ``r = a (1 - e cos(E))``."""
    return semi_major_axis * (1 - eccentricity * jnp.cos(E))


def true_anomaly(eccentricity: ArrayLike, E: ArrayLike) -> Float[Array, "..."]:
    """True anomaly from the eccentric anomaly, in radians."""
    e = jnp.asarray(eccentricity)
    return jnp.arctan2(jnp.sqrt(1 - e**2) * jnp.sin(E), jnp.cos(E) - e)
