"""Core classes and functions for skycycle."""

from skycycle.core.clock import (
    LOCATION_PRESETS,
    GeoLocation,
    SimClock,
    apply_preset,
    julian_date,
    local_time,
    utc_instant,
)
from skycycle.core.states import (
    BlendState,
    DayNightState,
    DayNightTransition,
    LightingParameters,
    MoonState,
    SunState,
)
from skycycle.core.positions import (
    galactic_up_direction,
    moon_direction,
    moon_phase_name,
    moon_properties,
    solar_system_up_direction,
    sun_direction,
    sun_properties,
)
from skycycle.core.lighting import CelestialLightingController, is_sun_above_horizon
from skycycle.core.day_night import DayNightStateMachine, day_weight, space_weight
from skycycle.core.smoothing import DirectionSmoother, approach
from skycycle.core.scenarios import (
    ScenarioBlendScheduler,
    ScenarioEntry,
    parse_scenario_time,
    scenario_name,
)
from skycycle.core.environment import EnvironmentSnapshot, TimeOfDay
from skycycle.core.bake import BakeSweepResult, bake_hours, run_bake_sweep

__all__ = [
    "LOCATION_PRESETS",
    "GeoLocation",
    "SimClock",
    "apply_preset",
    "julian_date",
    "local_time",
    "utc_instant",
    "BlendState",
    "DayNightState",
    "DayNightTransition",
    "LightingParameters",
    "MoonState",
    "SunState",
    "galactic_up_direction",
    "moon_direction",
    "moon_phase_name",
    "moon_properties",
    "solar_system_up_direction",
    "sun_direction",
    "sun_properties",
    "CelestialLightingController",
    "is_sun_above_horizon",
    "DayNightStateMachine",
    "day_weight",
    "space_weight",
    "DirectionSmoother",
    "approach",
    "ScenarioBlendScheduler",
    "ScenarioEntry",
    "parse_scenario_time",
    "scenario_name",
    "EnvironmentSnapshot",
    "TimeOfDay",
    "BakeSweepResult",
    "bake_hours",
    "run_bake_sweep",
]
