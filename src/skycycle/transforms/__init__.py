"""Coordinate transformation utilities."""

from skycycle.transforms.celestial import (
    direction_to_elevation_azimuth,
    ecliptic_to_equatorial,
    equatorial_to_horizon,
    equatorial_to_horizon_matrix,
    greenwich_mean_sidereal_time_deg,
    julian_centuries,
    local_sidereal_time_deg,
    mean_obliquity_deg,
    moon_ecliptic,
    phase_angle,
    radec_to_equatorial,
    sun_ecliptic,
)

__all__ = [
    "direction_to_elevation_azimuth",
    "ecliptic_to_equatorial",
    "equatorial_to_horizon",
    "equatorial_to_horizon_matrix",
    "greenwich_mean_sidereal_time_deg",
    "julian_centuries",
    "local_sidereal_time_deg",
    "mean_obliquity_deg",
    "moon_ecliptic",
    "phase_angle",
    "radec_to_equatorial",
    "sun_ecliptic",
]
