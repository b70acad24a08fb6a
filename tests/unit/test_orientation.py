"""Unit tests for :mod:`orrery.kepler.orientation`."""

import pytest
import quaxed.numpy as jnp
from unxt import Quantity

from orrery.kepler.orientation import InclinationOrientation


def test_default_is_identity() -> None:
    orientation = InclinationOrientation()
    assert jnp.allclose(orientation.rotation_matrix, jnp.eye(3))
    assert orientation.inclination == 0.0


@pytest.mark.parametrize("inclination", [0.0, 0.77, 7.0, 45.0, 90.0, 135.0, -30.0])
def test_inclination_round_trip(inclination: float, dtype: str) -> None:
    """Test that the stored sin/cos pair recovers the inclination."""
    atol = 1e-6 if dtype == "float32" else 1e-12

    orientation = InclinationOrientation.from_degrees(inclination)
    assert jnp.allclose(
        orientation.inclination, jnp.deg2rad(inclination), rtol=0, atol=atol
    )


@pytest.mark.parametrize("inclination", [1.31, 30.0, 90.0])
def test_from_angles_matches_degrees(inclination: float) -> None:
    from_quantity = InclinationOrientation.from_angles(
        inclination=Quantity(inclination, "deg")
    )
    from_float = InclinationOrientation.from_degrees(inclination)

    assert jnp.allclose(from_quantity.sin_i, from_float.sin_i, atol=1e-12)
    assert jnp.allclose(from_quantity.cos_i, from_float.cos_i, atol=1e-12)


def test_from_inclination_dispatches_on_units() -> None:
    in_radians = InclinationOrientation.from_inclination(Quantity(0.5, "rad"))
    in_degrees = InclinationOrientation.from_inclination(0.5)

    assert jnp.allclose(in_radians.inclination, 0.5)
    assert jnp.allclose(in_degrees.inclination, jnp.deg2rad(0.5))


@pytest.mark.parametrize("inclination", [0.0, 3.4, 60.0, 90.0, 170.0])
def test_rotation_matrix_is_orthonormal(inclination: float) -> None:
    R = InclinationOrientation.from_degrees(inclination).rotation_matrix
    assert jnp.allclose(R @ R.T, jnp.eye(3), atol=1e-12)


def test_apply_tilts_orbital_plane() -> None:
    orientation = InclinationOrientation.from_degrees(30.0)
    xyz_orb = jnp.array([[3.0, -1.0], [0.0, 0.0], [4.0, 2.0]])

    xyz = orientation.apply(xyz_orb)

    s = jnp.sin(jnp.deg2rad(30.0))
    c = jnp.cos(jnp.deg2rad(30.0))
    expected = jnp.array([[3.0, -1.0], [4.0 * s, 2.0 * s], [4.0 * c, 2.0 * c]])
    assert jnp.allclose(xyz, expected, atol=1e-12)


def test_apply_keeps_x_axis_fixed() -> None:
    orientation = InclinationOrientation.from_degrees(63.0)
    xyz = orientation.apply(jnp.array([5.0, 0.0, 0.0]))
    assert jnp.allclose(xyz, jnp.array([5.0, 0.0, 0.0]))


def test_batched_orientation() -> None:
    inclinations = jnp.array([0.0, 1.85, 7.0])
    orientation = InclinationOrientation.from_degrees(inclinations)
    assert orientation.rotation_matrix.shape == (3, 3, 3)

    xyz_orb = jnp.array([[1.0, 1.0, 1.0], [0.0, 0.0, 0.0], [2.0, 2.0, 2.0]])
    xyz = orientation.apply(xyz_orb)

    for k, inclination in enumerate(inclinations):
        single = InclinationOrientation.from_degrees(inclination).apply(xyz_orb[:, k])
        assert jnp.allclose(xyz[:, k], single)


def test_not_normalized_raises() -> None:
    with pytest.raises(RuntimeError):
        InclinationOrientation(sin_i=0.5, cos_i=0.5)
