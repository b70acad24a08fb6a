"""Tunable constants of the per-frame scene update."""

import equinox as eqx

from orrery.kepler.path import ORBIT_PATH_SEGMENTS

# Simulated seconds per wall-clock second: one Earth year (31557600 s) per minute
DEFAULT_TIME_SCALE = 31_557_600.0 / 60.0

# Spin and Moon steps in the catalogue are expressed per frame at this rate
DEFAULT_REFERENCE_FRAME_RATE = 60.0

DEFAULT_MIN_LIGHT_INTENSITY = 0.1


class SceneConfig(eqx.Module):
    """Configuration of the host loop that drives the solar system.

    Parameters
    ----------
    time_scale
        Simulated time units elapsed per unit of clock time. Clock time is multiplied
        by this before it is handed to the Kepler solver.
    reference_frame_rate
        Frame rate at which the per-frame spin and Moon steps of the catalogue were
        tuned. Steps are scaled by ``delta * reference_frame_rate`` so the animation
        speed does not depend on the actual frame rate.
    orbit_segments
        Number of segments in each sampled orbit path.
    min_light_intensity
        Floor of the inverse-square light intensity.
    """

    time_scale: float = eqx.field(
        default=DEFAULT_TIME_SCALE, converter=lambda x: float(x)
    )
    reference_frame_rate: float = eqx.field(
        default=DEFAULT_REFERENCE_FRAME_RATE, converter=lambda x: float(x)
    )
    orbit_segments: int = eqx.field(
        default=ORBIT_PATH_SEGMENTS, converter=lambda x: int(x), static=True
    )
    min_light_intensity: float = eqx.field(
        default=DEFAULT_MIN_LIGHT_INTENSITY, converter=lambda x: float(x)
    )

    def __check_init__(self) -> None:
        if not self.time_scale > 0:
            raise ValueError(f"time_scale must be positive, got {self.time_scale}")

        if not self.reference_frame_rate > 0:
            raise ValueError(
                "reference_frame_rate must be positive, got "
                f"{self.reference_frame_rate}"
            )

        if self.orbit_segments < 1:
            raise ValueError(
                f"orbit_segments must be at least 1, got {self.orbit_segments}"
            )

        if self.min_light_intensity < 0:
            raise ValueError(
                "min_light_intensity must be non-negative, got "
                f"{self.min_light_intensity}"
            )
