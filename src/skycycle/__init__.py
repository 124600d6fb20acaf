"""Sun, moon and scenario blending for day/night environments."""

import jax

# Julian dates need double precision
jax.config.update("jax_enable_x64", True)

from skycycle import constants, conversions  # noqa: E402
from skycycle.core import (  # noqa: E402
    LOCATION_PRESETS,
    BlendState,
    CelestialLightingController,
    DayNightState,
    DayNightStateMachine,
    DirectionSmoother,
    EnvironmentSnapshot,
    GeoLocation,
    LightingParameters,
    MoonState,
    ScenarioBlendScheduler,
    ScenarioEntry,
    SimClock,
    SunState,
    TimeOfDay,
    apply_preset,
    approach,
    galactic_up_direction,
    moon_direction,
    moon_properties,
    run_bake_sweep,
    solar_system_up_direction,
    sun_direction,
    sun_properties,
)
from skycycle.settings import Settings  # noqa: E402

__all__ = [
    "constants",
    "conversions",
    "LOCATION_PRESETS",
    "BlendState",
    "CelestialLightingController",
    "DayNightState",
    "DayNightStateMachine",
    "DirectionSmoother",
    "EnvironmentSnapshot",
    "GeoLocation",
    "LightingParameters",
    "MoonState",
    "ScenarioBlendScheduler",
    "ScenarioEntry",
    "Settings",
    "SimClock",
    "SunState",
    "TimeOfDay",
    "apply_preset",
    "approach",
    "galactic_up_direction",
    "moon_direction",
    "moon_properties",
    "run_bake_sweep",
    "solar_system_up_direction",
    "sun_direction",
    "sun_properties",
]
