"""Tests for celestial coordinate transforms in skycycle.transforms."""

import jax.numpy as jnp
import pytest

from skycycle import constants as const
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


class TestTimeScales:
    """Tests for Julian centuries and sidereal time."""

    def test_julian_centuries_at_epoch(self):
        """J2000.0 is zero centuries."""
        assert julian_centuries(const.J2000_JD) == 0.0

    def test_gmst_at_epoch(self):
        """GMST at J2000.0 is 280.46061837 degrees (Meeus 12.4)."""
        assert jnp.isclose(
            greenwich_mean_sidereal_time_deg(const.J2000_JD), 280.46061837
        )

    def test_gmst_meeus_example(self):
        """Meeus example 12.a: 1987 April 10, 0h UT gives 13h10m46.3668s."""
        expected_deg = (13 + 10 / 60 + 46.3668 / 3600) * 15.0
        gmst = greenwich_mean_sidereal_time_deg(2446895.5)
        assert jnp.isclose(gmst, expected_deg, atol=1e-3)

    def test_lst_adds_longitude(self):
        """Local sidereal time is GMST shifted by east longitude."""
        jd = 2460000.25
        gmst = greenwich_mean_sidereal_time_deg(jd)
        lst = local_sidereal_time_deg(jd, 90.0)
        assert jnp.isclose(jnp.mod(lst - gmst, 360.0), 90.0)

    def test_obliquity_at_epoch(self):
        """Mean obliquity at J2000.0 is about 23.4393 degrees."""
        assert jnp.isclose(mean_obliquity_deg(const.J2000_JD), 23.4393, atol=1e-3)


class TestSunEcliptic:
    """Tests for the low-precision solar position."""

    def test_distance_range(self):
        """Earth-sun distance stays between perihelion and aphelion."""
        for jd in jnp.linspace(2460000.0, 2460365.0, 13):
            _, distance = sun_ecliptic(jd)
            assert 0.983 < distance < 1.017

    def test_equinox_longitude(self):
        """Near the March 2024 equinox the sun's longitude is about 0."""
        longitude, _ = sun_ecliptic(2460389.625)  # 2024-03-20 03:00 UTC
        longitude_deg = jnp.rad2deg(longitude)
        offset = jnp.minimum(longitude_deg, 360.0 - longitude_deg)
        assert offset < 0.1


class TestMoonEcliptic:
    """Tests for the truncated lunar series."""

    def test_meeus_example(self):
        """Meeus example 47.a (1992 April 12, 0h TD)."""
        longitude, latitude, distance = moon_ecliptic(2448724.5)
        assert jnp.isclose(jnp.rad2deg(longitude), 133.162655, atol=0.3)
        assert jnp.isclose(jnp.rad2deg(latitude), -3.229126, atol=0.2)
        assert jnp.isclose(distance, 368409.7, atol=500.0)

    def test_latitude_bounded(self):
        """The moon never strays more than about 5.3 degrees from the ecliptic."""
        for jd in jnp.linspace(2460000.0, 2460030.0, 31):
            _, latitude, _ = moon_ecliptic(jd)
            assert jnp.abs(jnp.rad2deg(latitude)) < 5.4


class TestFrameRotations:
    """Tests for equatorial and horizon frame conversions."""

    def test_ecliptic_origin_is_equinox(self):
        """Ecliptic longitude 0, latitude 0 is the equatorial x axis."""
        vector = ecliptic_to_equatorial(0.0, 0.0, 23.44)
        assert jnp.allclose(vector, jnp.array([1.0, 0.0, 0.0]), atol=1e-12)

    def test_radec_pole(self):
        """Declination 90 is the equatorial z axis."""
        vector = radec_to_equatorial(123.0, 90.0)
        assert jnp.allclose(vector, jnp.array([0.0, 0.0, 1.0]), atol=1e-12)

    def test_matrix_is_orthonormal(self):
        """The horizon matrix is orthonormal.

        (east, up, north) is a left-handed frame, so the determinant is -1.
        """
        matrix = equatorial_to_horizon_matrix(47.0, 51.5)
        assert jnp.allclose(matrix @ matrix.T, jnp.eye(3), atol=1e-12)
        assert jnp.isclose(jnp.linalg.det(matrix), -1.0)

    def test_celestial_pole_altitude_equals_latitude(self):
        """The north celestial pole stands at the observer's latitude, due north."""
        pole = jnp.array([0.0, 0.0, 1.0])
        for latitude in (-45.0, 0.0, 30.0, 51.5):
            direction = equatorial_to_horizon(pole, 123.0, latitude)
            elevation, azimuth = direction_to_elevation_azimuth(direction)
            assert jnp.isclose(elevation, latitude, atol=1e-9)
            if latitude > 0:
                assert jnp.isclose(azimuth, 0.0, atol=1e-9)

    def test_meridian_transit(self):
        """A body transiting south of the zenith stands at azimuth 180."""
        lst = 80.0
        vector = radec_to_equatorial(lst, 10.0)
        direction = equatorial_to_horizon(vector, lst, 50.0)
        elevation, azimuth = direction_to_elevation_azimuth(direction)
        assert jnp.isclose(elevation, 50.0, atol=1e-9)
        assert jnp.isclose(azimuth, 180.0, atol=1e-9)

    def test_rising_body_is_east(self):
        """Six hours before transit an equatorial body rises due east."""
        vector = radec_to_equatorial(90.0, 0.0)
        direction = equatorial_to_horizon(vector, 0.0, 40.0)
        assert jnp.allclose(direction, const.east, atol=1e-9)

    @pytest.mark.parametrize("latitude", [90.0, -90.0])
    def test_poles_are_finite(self, latitude):
        """Polar observers get finite unit vectors."""
        vector = radec_to_equatorial(10.0, 20.0)
        direction = equatorial_to_horizon(vector, 200.0, latitude)
        assert jnp.all(jnp.isfinite(direction))
        assert jnp.isclose(jnp.linalg.norm(direction), 1.0)
        elevation, _ = direction_to_elevation_azimuth(direction)
        assert jnp.isclose(elevation, 20.0 if latitude > 0 else -20.0, atol=1e-9)


class TestElevationAzimuth:
    """Tests for direction to angle conversion."""

    def test_cardinal_directions(self):
        """North is azimuth 0, east 90, south 180, west 270."""
        cases = [
            (jnp.array([0.0, 0.0, 1.0]), 0.0),
            (jnp.array([1.0, 0.0, 0.0]), 90.0),
            (jnp.array([0.0, 0.0, -1.0]), 180.0),
            (jnp.array([-1.0, 0.0, 0.0]), 270.0),
        ]
        for direction, expected in cases:
            elevation, azimuth = direction_to_elevation_azimuth(direction)
            assert jnp.isclose(elevation, 0.0)
            assert jnp.isclose(azimuth, expected)

    def test_zenith(self):
        """Straight up is elevation 90 with a defined azimuth."""
        elevation, azimuth = direction_to_elevation_azimuth(const.up)
        assert jnp.isclose(elevation, 90.0)
        assert jnp.isfinite(azimuth)


class TestPhaseAngle:
    """Tests for the sun-moon-earth phase angle."""

    def test_full_and_new(self):
        """Opposition gives phase angle 0, conjunction gives pi."""
        sun = jnp.array([1.0, 0.0, 0.0])
        r_sun = 1.496e8
        r_moon = 384400.0
        full = phase_angle(sun, -sun, r_sun, r_moon)
        new = phase_angle(sun, sun, r_sun, r_moon)
        assert jnp.isclose(full, 0.0, atol=1e-9)
        assert jnp.isclose(new, jnp.pi, atol=1e-9)

    def test_quadrature(self):
        """At 90 degrees elongation the phase angle is just under 90 degrees."""
        angle = phase_angle(
            jnp.array([1.0, 0.0, 0.0]), jnp.array([0.0, 1.0, 0.0]), 1.496e8, 384400.0
        )
        assert 89.0 < jnp.rad2deg(angle) < 90.0
