"""
Export body positions and orbit paths of the scene to ECSV tables.

Writes two files to the output directory:

positions.ecsv
    One row per body: name, x, y, z and light intensity at the requested clock
    time, plus a row for the satellite.
orbit_paths.ecsv
    One row per sampled point of each body's closed orbit outline: name, point
    index, x, y, z. Outlines lie in each orbit's own plane (y = 0).

Clock time is multiplied by the scene's time scale before positions are solved,
exactly as in the animation loop.
"""

import logging
import pathlib

import astropy.table as at
import numpy as np

from orrery import SceneConfig, SolarSystem


def export_positions(system: SolarSystem, elapsed: float) -> at.Table:
    positions = system.positions(elapsed * system.config.time_scale)
    intensity = system.light_intensities(positions)

    tbl = at.Table()
    tbl["name"] = list(system.names)
    tbl["x"] = np.asarray(positions[:, 0])
    tbl["y"] = np.asarray(positions[:, 1])
    tbl["z"] = np.asarray(positions[:, 2])
    tbl["light_intensity"] = np.asarray(intensity)

    if system.moon is not None:
        moon = np.asarray(
            system.moon_position(positions[system.moon_host_index], elapsed)
        )
        moon_intensity = float(system.light_intensities(moon))
        tbl.add_row([system.moon.name, moon[0], moon[1], moon[2], moon_intensity])

    return tbl


def export_orbit_paths(system: SolarSystem, segments: int) -> at.Table:
    paths = np.asarray(system.orbit_paths(segments))
    n_points = paths.shape[1]

    tbl = at.Table()
    tbl["name"] = np.repeat(np.array(system.names), n_points)
    tbl["index"] = np.tile(np.arange(n_points), system.n_bodies)
    tbl["x"] = paths[..., 0].ravel()
    tbl["y"] = paths[..., 1].ravel()
    tbl["z"] = paths[..., 2].ravel()
    return tbl


def main(
    elapsed: float, segments: int, time_scale: float, output_path: pathlib.Path
) -> None:
    system = SolarSystem.from_specs(
        config=SceneConfig(time_scale=time_scale, orbit_segments=segments)
    )

    output_path.mkdir(parents=True, exist_ok=True)

    positions_file = output_path / "positions.ecsv"
    export_positions(system, elapsed).write(
        positions_file, format="ascii.ecsv", overwrite=True
    )
    print(f"Wrote {positions_file!s}")

    paths_file = output_path / "orbit_paths.ecsv"
    export_orbit_paths(system, segments).write(
        paths_file, format="ascii.ecsv", overwrite=True
    )
    print(f"Wrote {paths_file!s}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(
        description=__doc__, formatter_class=argparse.RawTextHelpFormatter
    )
    parser.add_argument(
        "--time",
        type=float,
        default=0.0,
        help="Clock time in seconds since the start of the animation",
    )
    parser.add_argument(
        "--segments", type=int, default=128, help="Segments per orbit path"
    )
    parser.add_argument(
        "--time-scale",
        type=float,
        default=SceneConfig().time_scale,
        help="Simulated seconds per clock second",
    )
    parser.add_argument(
        "--output-path",
        type=pathlib.Path,
        required=True,
        help="Output directory for the tables",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    main(
        args.time,
        args.segments,
        args.time_scale,
        args.output_path.expanduser().resolve(),
    )
