"""Sun, moon and sky reference directions for an observer.

Every function here is pure: the same ``(instant, latitude, longitude)``
always yields the same arrays. ``instant`` is either a datetime (naive values
are taken as UTC) or a Julian date.

Elevation, azimuth and phase are always derived from the direction vector
that is returned alongside them, never recomputed from a separate formula.
"""

from datetime import datetime

import jax.numpy as jnp

from skycycle import constants as const
from skycycle import conversions as conv
from skycycle.core.clock import julian_date
from skycycle.core.states import MoonState, SunState
from skycycle.transforms.celestial import (
    direction_to_elevation_azimuth,
    ecliptic_to_equatorial,
    equatorial_to_horizon,
    local_sidereal_time_deg,
    mean_obliquity_deg,
    moon_ecliptic,
    phase_angle,
    radec_to_equatorial,
    sun_ecliptic,
)

# Upper bounds (exclusive) of each named phase, as a fraction of the cycle
_PHASE_NAMES = (
    (0.03, "New Moon"),
    (0.22, "Waxing Crescent"),
    (0.28, "First Quarter"),
    (0.47, "Waxing Gibbous"),
    (0.53, "Full Moon"),
    (0.72, "Waning Gibbous"),
    (0.78, "Last Quarter"),
    (0.97, "Waning Crescent"),
)


def _as_jd(instant: datetime | float) -> float:
    if isinstance(instant, datetime):
        return julian_date(instant)
    return float(instant)


def _to_horizon(vector, jd, latitude, longitude):
    return equatorial_to_horizon(
        vector, local_sidereal_time_deg(jd, longitude), latitude
    )


def _sun_equatorial(jd):
    longitude, distance_au = sun_ecliptic(jd)
    vector = ecliptic_to_equatorial(longitude, 0.0, mean_obliquity_deg(jd))
    return vector, longitude, distance_au


def _moon_equatorial(jd):
    longitude, latitude, distance_km = moon_ecliptic(jd)
    vector = ecliptic_to_equatorial(longitude, latitude, mean_obliquity_deg(jd))
    return vector, longitude, distance_km


def sun_direction(instant, latitude, longitude):
    """Unit vector from the observer toward the sun.

    Args:
        instant: Datetime or Julian date.
        latitude: Observer latitude in degrees.
        longitude: Observer longitude in degrees, east positive.

    Returns:
        Horizon-frame unit vector (east, up, north).
    """
    jd = _as_jd(instant)
    vector, _, _ = _sun_equatorial(jd)
    return _to_horizon(vector, jd, latitude, longitude)


def moon_direction(instant, latitude, longitude):
    """Unit vector from the observer toward the moon (geocentric, no parallax).

    Args:
        instant: Datetime or Julian date.
        latitude: Observer latitude in degrees.
        longitude: Observer longitude in degrees, east positive.

    Returns:
        Horizon-frame unit vector (east, up, north).
    """
    jd = _as_jd(instant)
    vector, _, _ = _moon_equatorial(jd)
    return _to_horizon(vector, jd, latitude, longitude)


def galactic_up_direction(instant, latitude, longitude):
    """Direction of the north galactic pole in the horizon frame.

    The pole is fixed on the celestial sphere, so this vector only turns with
    sidereal time. Orienting a star-field dome with it keeps the dome from
    rolling along with the sun.
    """
    jd = _as_jd(instant)
    pole = radec_to_equatorial(
        const.north_galactic_pole_ra_deg, const.north_galactic_pole_dec_deg
    )
    return _to_horizon(pole, jd, latitude, longitude)


def solar_system_up_direction(instant, latitude, longitude):
    """Direction of the north ecliptic pole in the horizon frame.

    Used to orient a planetary backdrop whose plane is the ecliptic.
    """
    jd = _as_jd(instant)
    pole = radec_to_equatorial(
        const.north_ecliptic_pole_ra_deg, 90.0 - mean_obliquity_deg(jd)
    )
    return _to_horizon(pole, jd, latitude, longitude)


def sun_properties(instant, latitude, longitude) -> SunState:
    """Sun direction, elevation, azimuth and distance."""
    jd = _as_jd(instant)
    vector, _, distance_au = _sun_equatorial(jd)
    direction = _to_horizon(vector, jd, latitude, longitude)
    elevation, azimuth = direction_to_elevation_azimuth(direction)
    return SunState(
        direction=direction,
        elevation_deg=elevation,
        azimuth_deg=azimuth,
        distance_au=distance_au,
    )


def moon_properties(instant, latitude, longitude) -> MoonState:
    """Moon direction, elevation, azimuth, phase, illumination and distance.

    ``phase_fraction`` is the moon-minus-sun ecliptic longitude over 360
    degrees. ``illumination_fraction`` is ``(1 + cos(i)) / 2`` with ``i`` the
    sun-moon-earth phase angle.
    """
    jd = _as_jd(instant)
    moon_vector, moon_long, distance_km = _moon_equatorial(jd)
    sun_vector, sun_long, sun_distance_au = _sun_equatorial(jd)

    direction = _to_horizon(moon_vector, jd, latitude, longitude)
    elevation, azimuth = direction_to_elevation_azimuth(direction)

    phase = conv.wrap_degrees(conv.rad_to_deg(moon_long - sun_long)) / 360.0
    angle = phase_angle(
        sun_vector, moon_vector, conv.au_to_km(sun_distance_au), distance_km
    )
    illumination = conv.clamp01(0.5 * (1.0 + jnp.cos(angle)))

    return MoonState(
        direction=direction,
        elevation_deg=elevation,
        azimuth_deg=azimuth,
        phase_fraction=phase,
        illumination_fraction=illumination,
        distance_km=distance_km,
    )


def moon_phase_name(phase_fraction) -> str:
    """Conventional name of a lunar phase fraction (0 new, 0.5 full)."""
    phase = float(phase_fraction) % 1.0
    for upper, name in _PHASE_NAMES:
        if phase < upper:
            return name
    return "New Moon"
