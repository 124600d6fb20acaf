"""JAX friendly celestial coordinate functions.

Low-precision solar and lunar positions (Astronomical Almanac solar formula,
truncated Meeus lunar series) and the frame rotations that carry them into a
local horizon frame. The horizon frame has x = east, y = up and z = north,
the left-handed y-up convention of real-time 3D engines.
"""

import jax.numpy as jnp

from skycycle import constants as const
from skycycle import conversions as conv

# Truncated lunar longitude/distance series.
# Columns: D, M, M', F, longitude (1e-6 deg), distance (1e-3 km)
_MOON_LR_TERMS = jnp.array(
    [
        [0, 0, 1, 0, 6288774, -20905355],
        [2, 0, -1, 0, 1274027, -3699111],
        [2, 0, 0, 0, 658314, -2955968],
        [0, 0, 2, 0, 213618, -569925],
        [0, 1, 0, 0, -185116, 48888],
        [0, 0, 0, 2, -114332, -3149],
        [2, 0, -2, 0, 58793, 246158],
        [2, -1, -1, 0, 57066, -152138],
        [2, 0, 1, 0, 53322, -170733],
        [2, -1, 0, 0, 45758, -204586],
        [0, 1, -1, 0, -40923, -129620],
        [1, 0, 0, 0, -34720, 108743],
        [0, 1, 1, 0, -30383, 104755],
        [2, 0, 0, -2, 15327, 10321],
        [0, 0, 1, 2, -12528, 0],
        [0, 0, 1, -2, 10980, 79661],
        [4, 0, -1, 0, 10675, -34782],
        [0, 0, 3, 0, 10034, -23210],
    ],
    dtype=float,
)

# Truncated lunar latitude series.
# Columns: D, M, M', F, latitude (1e-6 deg)
_MOON_B_TERMS = jnp.array(
    [
        [0, 0, 0, 1, 5128122],
        [0, 0, 1, 1, 280602],
        [0, 0, 1, -1, 277693],
        [2, 0, 0, -1, 173237],
        [2, 0, -1, 1, 55413],
        [2, 0, -1, -1, 46271],
        [2, 0, 0, 1, 32573],
        [0, 0, 2, 1, 17198],
        [2, 0, 1, -1, 9266],
        [0, 0, 2, -1, 8822],
        [2, -1, 0, -1, 8216],
        [2, 0, -2, -1, 4324],
        [2, 0, 1, 1, 4200],
        [2, 1, 0, -1, -3359],
        [2, -1, -1, 1, 2463],
        [2, -1, 0, 1, 2211],
        [2, -1, -1, -1, 2065],
    ],
    dtype=float,
)


def julian_centuries(jd):
    """Julian centuries elapsed since J2000.0."""
    return (jd - const.J2000_JD) / const.days_per_century


def greenwich_mean_sidereal_time_deg(jd):
    """Greenwich mean sidereal time in degrees, wrapped onto [0, 360).

    Args:
        jd: Julian date (UT).

    Returns:
        GMST in degrees.
    """
    d = jd - const.J2000_JD
    t = d / const.days_per_century
    theta = (
        280.46061837
        + 360.98564736629 * d
        + 0.000387933 * t**2
        - t**3 / 38710000.0
    )
    return conv.wrap_degrees(theta)


def local_sidereal_time_deg(jd, longitude_deg):
    """Local mean sidereal time in degrees for an east-positive longitude."""
    return conv.wrap_degrees(greenwich_mean_sidereal_time_deg(jd) + longitude_deg)


def mean_obliquity_deg(jd):
    """Mean obliquity of the ecliptic in degrees."""
    t = julian_centuries(jd)
    seconds = 21.448 - t * (46.8150 + t * (0.00059 - 0.001813 * t))
    return 23.0 + 26.0 / 60.0 + seconds / 3600.0


def sun_ecliptic(jd):
    """Geocentric ecliptic longitude and distance of the sun.

    Uses the Astronomical Almanac low-precision formula, good to roughly
    0.01 degrees between 1950 and 2050.

    Args:
        jd: Julian date.

    Returns:
        tuple: (longitude_rad, distance_au)
    """
    n = jd - const.J2000_JD
    mean_long = conv.wrap_degrees(280.460 + 0.9856474 * n)
    mean_anom = conv.deg_to_rad(conv.wrap_degrees(357.528 + 0.9856003 * n))
    ecl_long = mean_long + 1.915 * jnp.sin(mean_anom) + 0.020 * jnp.sin(2 * mean_anom)
    distance_au = (
        1.00014 - 0.01671 * jnp.cos(mean_anom) - 0.00014 * jnp.cos(2 * mean_anom)
    )
    return conv.deg_to_rad(conv.wrap_degrees(ecl_long)), distance_au


def moon_ecliptic(jd):
    """Geocentric ecliptic longitude, latitude and distance of the moon.

    Top terms of the Meeus lunar theory (chapter 47). Longitude is good to a
    few tenths of a degree, which is plenty for lighting.

    Args:
        jd: Julian date.

    Returns:
        tuple: (longitude_rad, latitude_rad, distance_km)
    """
    t = julian_centuries(jd)
    # Fundamental arguments, degrees
    mean_long = 218.3164477 + 481267.88123421 * t - 0.0015786 * t**2
    elong = 297.8501921 + 445267.1114034 * t - 0.0018819 * t**2
    sun_anom = 357.5291092 + 35999.0502909 * t - 0.0001536 * t**2
    moon_anom = 134.9633964 + 477198.8675055 * t + 0.0087414 * t**2
    arg_lat = 93.2720950 + 483202.0175233 * t - 0.0036539 * t**2
    fundamentals = conv.deg_to_rad(
        conv.wrap_degrees(jnp.stack([elong, sun_anom, moon_anom, arg_lat]))
    )

    # Terms involving the sun's anomaly shrink with Earth's orbital eccentricity
    ecc = 1.0 - 0.002516 * t - 0.0000074 * t**2

    lr_args = _MOON_LR_TERMS[:, :4] @ fundamentals
    lr_ecc = ecc ** jnp.abs(_MOON_LR_TERMS[:, 1])
    sum_l = jnp.sum(_MOON_LR_TERMS[:, 4] * lr_ecc * jnp.sin(lr_args))
    sum_r = jnp.sum(_MOON_LR_TERMS[:, 5] * lr_ecc * jnp.cos(lr_args))

    b_args = _MOON_B_TERMS[:, :4] @ fundamentals
    b_ecc = ecc ** jnp.abs(_MOON_B_TERMS[:, 1])
    sum_b = jnp.sum(_MOON_B_TERMS[:, 4] * b_ecc * jnp.sin(b_args))

    # Additive corrections (Venus, Jupiter, flattening)
    a1 = conv.deg_to_rad(119.75 + 131.849 * t)
    a2 = conv.deg_to_rad(53.09 + 479264.290 * t)
    a3 = conv.deg_to_rad(313.45 + 481266.484 * t)
    lp = conv.deg_to_rad(mean_long)
    f = fundamentals[3]
    mp = fundamentals[2]
    sum_l = sum_l + 3958 * jnp.sin(a1) + 1962 * jnp.sin(lp - f) + 318 * jnp.sin(a2)
    sum_b = (
        sum_b
        - 2235 * jnp.sin(lp)
        + 382 * jnp.sin(a3)
        + 175 * jnp.sin(a1 - f)
        + 175 * jnp.sin(a1 + f)
        + 127 * jnp.sin(lp - mp)
        - 115 * jnp.sin(lp + mp)
    )

    longitude = conv.deg_to_rad(conv.wrap_degrees(mean_long + sum_l / 1e6))
    latitude = conv.deg_to_rad(sum_b / 1e6)
    distance_km = const.moon_mean_distance_km + sum_r / 1000.0
    return longitude, latitude, distance_km


def ecliptic_to_equatorial(longitude_rad, latitude_rad, obliquity_deg):
    """Unit vector in the equatorial frame for an ecliptic direction."""
    eps = conv.deg_to_rad(obliquity_deg)
    cos_b = jnp.cos(latitude_rad)
    sin_b = jnp.sin(latitude_rad)
    x = cos_b * jnp.cos(longitude_rad)
    y = cos_b * jnp.sin(longitude_rad) * jnp.cos(eps) - sin_b * jnp.sin(eps)
    z = cos_b * jnp.sin(longitude_rad) * jnp.sin(eps) + sin_b * jnp.cos(eps)
    return jnp.array([x, y, z])


def radec_to_equatorial(ra_deg, dec_deg):
    """Unit vector in the equatorial frame for a right ascension/declination."""
    ra = conv.deg_to_rad(ra_deg)
    dec = conv.deg_to_rad(dec_deg)
    return jnp.array(
        [jnp.cos(dec) * jnp.cos(ra), jnp.cos(dec) * jnp.sin(ra), jnp.sin(dec)]
    )


def equatorial_to_horizon_matrix(lst_deg, latitude_deg):
    """Orthonormal transform of equatorial vectors into the local horizon frame.

    Built as a product of two matrices (sidereal spin about the pole, then a
    tilt by latitude into east, up, north), so it stays well defined at the
    geographic poles where the spherical-trig hour-angle formulas divide by
    ``cos(latitude)``.

    Args:
        lst_deg: Local sidereal time in degrees.
        latitude_deg: Observer latitude in degrees.

    Returns:
        A (3, 3) orthonormal matrix mapping (x, y, z) equatorial to
        (east, up, north).
    """
    lst = conv.deg_to_rad(lst_deg)
    lat = conv.deg_to_rad(latitude_deg)
    # Equatorial -> meridian frame (x toward the local meridian, y toward east)
    spin = jnp.array(
        [
            [jnp.cos(lst), jnp.sin(lst), 0.0],
            [-jnp.sin(lst), jnp.cos(lst), 0.0],
            [0.0, 0.0, 1.0],
        ]
    )
    # Meridian frame -> (east, up, north)
    tilt = jnp.array(
        [
            [0.0, 1.0, 0.0],
            [jnp.cos(lat), 0.0, jnp.sin(lat)],
            [-jnp.sin(lat), 0.0, jnp.cos(lat)],
        ]
    )
    return tilt @ spin


def equatorial_to_horizon(vector, lst_deg, latitude_deg):
    """Rotate an equatorial vector into the horizon frame and normalize it."""
    horizon = equatorial_to_horizon_matrix(lst_deg, latitude_deg) @ vector
    return horizon / jnp.linalg.norm(horizon)


def direction_to_elevation_azimuth(direction):
    """Elevation and azimuth in degrees for a horizon-frame unit vector.

    Elevation is ``asin(y)``; azimuth is measured clockwise from north
    (0 north, 90 east) and wrapped onto [0, 360).
    """
    elevation = conv.rad_to_deg(jnp.arcsin(jnp.clip(direction[1], -1.0, 1.0)))
    azimuth = conv.wrap_degrees(
        conv.rad_to_deg(jnp.arctan2(direction[0], direction[2]))
    )
    return elevation, azimuth


def phase_angle(sun_vector, moon_vector, sun_distance_km, moon_distance_km):
    """Sun-moon-earth phase angle in radians.

    Args:
        sun_vector: Geocentric unit vector toward the sun.
        moon_vector: Geocentric unit vector toward the moon.
        sun_distance_km: Earth-sun distance in km.
        moon_distance_km: Earth-moon distance in km.

    Returns:
        Phase angle in [0, pi]; 0 is full moon, pi is new moon.
    """
    cos_elong = jnp.clip(jnp.dot(sun_vector, moon_vector), -1.0, 1.0)
    sin_elong = jnp.sqrt(1.0 - cos_elong**2)
    return jnp.arctan2(
        sun_distance_km * sin_elong, moon_distance_km - sun_distance_km * cos_elong
    )
