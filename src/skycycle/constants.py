"""Astronomical constants and unit conversions for skycycle."""

import jax.numpy as jnp

# Mathematical constants
deg2rad = jnp.pi / 180.0  # degrees to radians
rad2deg = 180.0 / jnp.pi  # radians to degrees

# Time conversions
J2000_JD = 2451545.0  # J2000 epoch in Julian days
days_per_century = 36525.0  # Julian century
hours_per_day = 24.0

# Distance conversions
AU2km = 1.495978707e8  # AU to kilometers
moon_mean_distance_km = 385000.56  # Meeus mean Earth-Moon distance

# Reference poles (J2000 equatorial, degrees)
north_galactic_pole_ra_deg = 192.85948
north_galactic_pole_dec_deg = 27.12825
north_ecliptic_pole_ra_deg = 270.0

# Horizon-frame axes (x = east, y = up, z = north)
east = jnp.array([1.0, 0.0, 0.0])
up = jnp.array([0.0, 1.0, 0.0])

# Day/night defaults, in the sun-direction dot-up domain
nautical_twilight = 0.1

# Observer altitude ramp for the "deep space" lighting regime
space_altitude_start = 20000.0
space_altitude_end = 100000.0
