"""
orrery: Keplerian positions for an animated solar-system scene

A JAX-based package that places the planets of a solar-system animation on their
elliptical orbits. Positions come from a Newton-Raphson Kepler solver, static orbit
paths from the polar ellipse equation, and the per-frame host step from an immutable
arena of orbital elements driven by an explicit clock.
"""

from orrery.clock import FrameClock
from orrery.config import SceneConfig
from orrery.data import MOON, PLANETS, MoonSpec, PlanetSpec
from orrery.kepler import (
    InclinationOrientation,
    OrbitalElements,
    sample_orbit_path,
    solve_eccentric_anomaly,
    solve_position,
)
from orrery.system import SolarSystem, SystemState

__all__ = [
    "FrameClock",
    "InclinationOrientation",
    "MOON",
    "MoonSpec",
    "OrbitalElements",
    "PLANETS",
    "PlanetSpec",
    "SceneConfig",
    "SolarSystem",
    "SystemState",
    "sample_orbit_path",
    "solve_eccentric_anomaly",
    "solve_position",
]
