"""Computed state objects, recomputed on every evaluation."""

import equinox as eqx
from jaxtyping import Array


class SunState(eqx.Module):
    """Apparent position of the sun for one instant and observer."""

    direction: Array  # Unit vector toward the sun (east, up, north)
    elevation_deg: Array  # Degrees above the horizon, asin(direction.y)
    azimuth_deg: Array  # Degrees clockwise from north, [0, 360)
    distance_au: Array  # Earth-sun distance in AU


class MoonState(eqx.Module):
    """Apparent position and illumination of the moon."""

    direction: Array  # Unit vector toward the moon (east, up, north)
    elevation_deg: Array  # Degrees above the horizon, asin(direction.y)
    azimuth_deg: Array  # Degrees clockwise from north, [0, 360)
    phase_fraction: Array  # Elongation / 360: 0 new, 0.5 full
    illumination_fraction: Array  # Illuminated fraction of the disk, [0, 1]
    distance_km: Array  # Earth-moon distance in km


class LightingParameters(eqx.Module):
    """Light settings derived from the sun and moon states.

    The caller applies these to whatever rendering resources it owns.
    """

    sun_intensity: Array  # Relative to full sun at 1 AU
    sun_color_temperature_k: Array
    moon_intensity: Array  # Relative illuminance of the moon light
    moon_color_temperature_k: Array
    earthshine: Array  # Planet light reflected onto the moon's dark side
    is_sun_above_horizon: bool


class DayNightState(eqx.Module):
    """Discrete day/night classification plus the continuous blend weights."""

    is_day: bool
    day_weight: float  # 0 at night, 1 in full day
    space_weight: float = 0.0  # 0 near the planet, 1 in deep space

    @property
    def is_night(self) -> bool:
        """Always the negation of ``is_day``."""
        return not self.is_day


class DayNightTransition(eqx.Module):
    """A single edge of the day/night state machine."""

    is_day: bool  # State entered by this transition

    @property
    def name(self) -> str:
        """Either ``"day"`` or ``"night"``."""
        return "day" if self.is_day else "night"


class BlendState(eqx.Module):
    """Which two scenarios to blend and by how much.

    ``from_scenario`` and ``to_scenario`` are ``None`` when no scenario is
    available.
    """

    from_scenario: str | None = None
    to_scenario: str | None = None
    blend_factor: float = 0.0

    @property
    def is_empty(self) -> bool:
        """True for the neutral state produced by an empty catalog."""
        return self.from_scenario is None
