from .elements import OrbitalElements
from .helpers import (
    KEPLER_MAX_ITER,
    KEPLER_TOL,
    mean_anomaly,
    orbital_radius,
    solve_eccentric_anomaly,
    true_anomaly,
)
from .orientation import InclinationOrientation
from .path import ORBIT_PATH_SEGMENTS, sample_orbit_path
from .solver import solve_position


__all__ = [
    "KEPLER_MAX_ITER",
    "KEPLER_TOL",
    "ORBIT_PATH_SEGMENTS",
    "InclinationOrientation",
    "OrbitalElements",
    "mean_anomaly",
    "orbital_radius",
    "sample_orbit_path",
    "solve_eccentric_anomaly",
    "solve_position",
    "true_anomaly",
]
