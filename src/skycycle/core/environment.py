"""Per-scene controller that runs the whole day/night pipeline once per tick."""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

import equinox as eqx
from jaxtyping import Array

from skycycle import conversions as conv
from skycycle.core.clock import (
    GeoLocation,
    SimClock,
    apply_preset,
    julian_date,
    utc_instant,
)
from skycycle.core.day_night import DayNightStateMachine
from skycycle.core.positions import (
    galactic_up_direction,
    moon_properties,
    solar_system_up_direction,
    sun_properties,
)
from skycycle.core.scenarios import ScenarioBlendScheduler, ScenarioEntry
from skycycle.core.smoothing import DirectionSmoother
from skycycle.core.states import (
    BlendState,
    DayNightState,
    DayNightTransition,
    LightingParameters,
    MoonState,
    SunState,
)
from skycycle.logger import logger
from skycycle.settings import Settings


class EnvironmentSnapshot(eqx.Module):
    """Everything computed for one tick."""

    instant: datetime  # UTC
    julian_date: float
    sun: SunState
    moon: MoonState
    sun_light_direction: Array  # Smoothed direction toward the sun
    moon_light_direction: Array  # Smoothed direction toward the moon
    galactic_up: Array
    solar_system_up: Array
    lighting: LightingParameters
    day_night: DayNightState
    transitions: tuple[DayNightTransition, ...]
    blend: BlendState


class TimeOfDay:
    """Environment controller for one simulated scene.

    Owns the scene's location, clock and scenario catalog, plus the small
    amount of carried state (day/night edge memory, smoothed light
    directions). Inputs are changed through explicit setters; :meth:`tick`
    evaluates the pipeline for the current inputs.
    """

    def __init__(
        self,
        clock: SimClock,
        location: GeoLocation | None = None,
        settings: Settings | None = None,
        scenarios: Iterable[str | ScenarioEntry] = (),
    ):
        """Initialize the controller.

        Args:
            clock (SimClock):
                Simulated local date and time of day.
            location (GeoLocation, optional):
                Observer location. Defaults to the settings' location.
            settings (Settings, optional):
                Tuning parameters. Defaults to ``Settings()``.
            scenarios (iterable of str or ScenarioEntry, optional):
                Initial scenario catalog.
        """
        self.settings = settings if settings is not None else Settings()
        self.clock = clock
        self.location = location if location is not None else self.settings.location()
        self.altitude = 0.0

        self.lighting = self.settings.lighting_controller()
        self.day_night = DayNightStateMachine(
            twilight_lower=self.settings.twilight_lower,
            twilight_upper=self.settings.twilight_upper,
            space_start=self.settings.space_altitude_start,
            space_end=self.settings.space_altitude_end,
            initial_is_day=self.settings.initial_is_day,
        )
        self.sun_smoother = self._make_smoother()
        self.moon_smoother = self._make_smoother()
        self.scheduler = ScenarioBlendScheduler(scenarios)

    def _make_smoother(self) -> DirectionSmoother:
        return DirectionSmoother(
            enabled=self.settings.smoothing_enabled,
            rate=self.settings.smoothing_rate,
            mode=self.settings.smoothing_mode,
        )

    # Inputs
    def set_time(self, time_of_day_hours: float) -> None:
        """Jump to a time of day on the current date (scrubbing is allowed)."""
        self.clock = self.clock.with_time(time_of_day_hours)

    def set_date(self, year: int, month: int, day: int) -> None:
        """Change the calendar date, keeping the time of day."""
        self.clock = SimClock(year, month, day, self.clock.time_of_day_hours)

    def advance(self, hours: float) -> None:
        """Move the clock forward, rolling the calendar date past midnight."""
        total = self.clock.time_of_day_hours + hours
        day_shift, time_of_day = divmod(total, 24.0)
        current = date(self.clock.year, self.clock.month, self.clock.day)
        rolled = current + timedelta(days=int(day_shift))
        self.clock = SimClock(rolled.year, rolled.month, rolled.day, time_of_day)

    def set_location(self, location: GeoLocation) -> None:
        """Use explicit coordinates."""
        self.location = location

    def apply_preset(self, name: str) -> GeoLocation:
        """Switch to a named location preset and return it."""
        self.location = apply_preset(name, self.location)
        logger.info("Location preset %s applied: %s", name, self.location)
        return self.location

    def set_altitude(self, altitude: float) -> None:
        """Observer altitude used for the planet/space lighting ramp."""
        self.altitude = altitude

    def set_scenarios(self, scenarios: Iterable[str | ScenarioEntry]) -> None:
        """Replace the scenario catalog."""
        self.scheduler.rebuild(scenarios)

    # Evaluation
    @property
    def utc_instant(self) -> datetime:
        """UTC instant of the current clock at the current location."""
        return utc_instant(self.clock, self.location)

    def evaluate_blend(self) -> BlendState:
        """Scenario blend for the current time of day."""
        query = conv.normalize_hours(
            self.clock.time_of_day_hours + self.settings.blend_time_bias_hours
        )
        return self.scheduler.evaluate(query)

    def tick(self, elapsed_seconds: float = 0.0) -> EnvironmentSnapshot:
        """Evaluate the pipeline once.

        Args:
            elapsed_seconds:
                Real time since the previous tick, used only for smoothing.

        Returns:
            EnvironmentSnapshot for the current inputs.
        """
        instant = self.utc_instant
        jd = julian_date(instant)
        lat, lon = self.location.latitude, self.location.longitude

        sun = sun_properties(jd, lat, lon)
        moon = moon_properties(jd, lat, lon)
        day_night, transitions = self.day_night.update(sun, self.altitude)
        lighting = self.lighting.update_light_properties(
            sun, moon, day_night.space_weight
        )
        blend = self.evaluate_blend()

        logger.debug(
            "%s UTC: sun %.2f/%.2f deg, moon %.2f/%.2f deg, day weight %.3f, "
            "blend %s -> %s (%.3f)",
            instant.isoformat(),
            float(sun.elevation_deg),
            float(sun.azimuth_deg),
            float(moon.elevation_deg),
            float(moon.azimuth_deg),
            day_night.day_weight,
            blend.from_scenario,
            blend.to_scenario,
            blend.blend_factor,
        )

        return EnvironmentSnapshot(
            instant=instant,
            julian_date=jd,
            sun=sun,
            moon=moon,
            sun_light_direction=self.sun_smoother.update(
                sun.direction, elapsed_seconds
            ),
            moon_light_direction=self.moon_smoother.update(
                moon.direction, elapsed_seconds
            ),
            galactic_up=galactic_up_direction(jd, lat, lon),
            solar_system_up=solar_system_up_direction(jd, lat, lon),
            lighting=lighting,
            day_night=day_night,
            transitions=tuple(transitions),
            blend=blend,
        )

    def spawn_sweep_copy(self) -> "TimeOfDay":
        """Independent controller for offline sweeps.

        The copy shares no carried state with this controller and snaps its
        light directions instead of smoothing them.
        """
        sweep_settings = Settings(
            custom_settings={**vars(self.settings), "smoothing_enabled": False}
        )
        return TimeOfDay(
            clock=self.clock,
            location=self.location,
            settings=sweep_settings,
            scenarios=self.scheduler.entries,
        )
