"""Interpolation, angle, time-of-day and distance helpers.

The interpolation and angle helpers accept scalars or ``jax.numpy`` arrays
and are used inside the celestial kernels. The time-of-day helpers work on
plain Python numbers for the scenario scheduler.
"""

import jax.numpy as jnp

from skycycle import constants as const


# Interpolation helpers
def clamp01(value):
    """Clamp a value (or array) to the closed interval [0, 1]."""
    return jnp.clip(value, 0.0, 1.0)


def remap(value, in_min, in_max, out_min, out_max):
    """Linearly map ``value`` from [in_min, in_max] onto [out_min, out_max].

    The mapping is not clamped; combine with :func:`clamp01` for a ramp.
    A degenerate input range maps everything at or above ``in_max`` to
    ``out_max`` and everything below to ``out_min``.

    Args:
        value: Input value or array.
        in_min: Input value that maps to ``out_min``.
        in_max: Input value that maps to ``out_max``.
        out_min: Output at ``in_min``.
        out_max: Output at ``in_max``.

    Returns:
        The remapped value.
    """
    span = in_max - in_min
    safe_span = jnp.where(span == 0.0, 1.0, span)
    t = jnp.where(
        span == 0.0,
        jnp.where(value >= in_max, 1.0, 0.0),
        (value - in_min) / safe_span,
    )
    return out_min + (out_max - out_min) * t


def lerp(a, b, t):
    """Linear interpolation between ``a`` and ``b``."""
    return a + (b - a) * t


# Angular conversions
def deg_to_rad(angle_deg):
    """Convert angle from degrees to radians."""
    return angle_deg * const.deg2rad


def rad_to_deg(angle_rad):
    """Convert angle from radians to degrees."""
    return angle_rad * const.rad2deg


def wrap_degrees(angle_deg):
    """Wrap an angle in degrees onto [0, 360)."""
    return jnp.mod(angle_deg, 360.0)


# Time conversions
def normalize_hours(time_of_day_hours: float) -> float:
    """Wrap a time of day in hours onto [0, 24)."""
    return time_of_day_hours % const.hours_per_day


def hhmm_to_hours(hours: int, minutes: int) -> float:
    """Convert a wall-clock hour and minute to fractional hours."""
    return hours + minutes / 60.0


# Distance conversions
def au_to_km(length_au):
    """Convert length from AU to kilometers."""
    return length_au * const.AU2km
