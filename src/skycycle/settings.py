"""Configuration management for day/night environment simulations.

This module provides the Settings class for managing the tuning parameters of
the day/night pipeline. It handles loading settings from TOML files and
validates custom overrides.

The Settings class controls:
- The observer location (explicit coordinates or a named preset)
- The twilight band used for the continuous day weight
- The altitude ramp into the deep-space lighting regime
- Light direction smoothing (on/off, rate, mode)
- Light intensity and color tuning
- Scenario blending and baking options
"""

import tomllib

from skycycle import constants as const
from skycycle.core.clock import GeoLocation, apply_preset
from skycycle.core.lighting import CelestialLightingController
from skycycle.core.smoothing import SMOOTHING_MODES


class Settings:
    """Configuration manager for the day/night pipeline.

    Attributes:
        latitude (float):
            Observer latitude in degrees.
        longitude (float):
            Observer longitude in degrees, east positive.
        utc_offset_hours (int):
            Whole-hour offset of the local wall clock from UTC.
        location_preset (str):
            Named preset applied over the coordinates, or ``"Custom"``.
        twilight_lower (float):
            Sun height (dot with up) where the day weight starts to rise.
        twilight_upper (float):
            Sun height where the day weight reaches 1.
        space_altitude_start (float):
            Observer altitude where the space weight starts to rise.
        space_altitude_end (float):
            Observer altitude where the space weight reaches 1.
        smoothing_enabled (bool):
            Whether light directions ease toward their targets. Disable for
            design-time preview, where lights should snap.
        smoothing_rate (float):
            Approach rate in 1/s.
        smoothing_mode (str):
            ``"exponential"`` (tick-rate independent) or ``"linear"``
            (per-frame lerp).
        horizon_fade (float):
            Height of the light intensity ramp above the horizon.
        sun_horizon_temperature_k (float):
            Sun color temperature at the horizon.
        sun_zenith_temperature_k (float):
            Sun color temperature at the zenith.
        moon_intensity_scale (float):
            Moon light intensity at full moon and mean distance.
        moon_color_temperature_k (float):
            Moon color temperature.
        earthshine_scale (float):
            Earthshine strength at new moon.
        blend_time_bias_hours (float):
            Offset added to the time of day before querying the scenario
            blend, so a time exactly on a scenario starts the next interval.
        skip_odd_hours (bool):
            Whether the 24 hour bake sweep only bakes even hours.
        initial_is_day (bool):
            Day/night classification assumed before the first evaluation.
    """

    def __init__(self, toml_file=None, custom_settings=None):
        """Initialize Settings with default values and optional configuration.

        Args:
            toml_file (str or pathlib.Path, optional):
                Path to TOML configuration file. If provided, settings will
                be loaded from this file after applying defaults.
            custom_settings (dict, optional):
                Dictionary of custom setting overrides. Keys must correspond
                to valid Settings attributes. Applied after TOML file loading.

        Raises:
            AttributeError:
                If custom_settings contains keys that don't correspond to
                valid Settings attributes.
            ValueError:
                If the smoothing mode or location preset is unknown.
        """
        default_location = GeoLocation()
        # Default settings
        self.latitude = default_location.latitude
        self.longitude = default_location.longitude
        self.utc_offset_hours = default_location.utc_offset_hours
        self.location_preset = "Custom"
        self.twilight_lower = 0.0
        self.twilight_upper = const.nautical_twilight
        self.space_altitude_start = const.space_altitude_start
        self.space_altitude_end = const.space_altitude_end
        self.smoothing_enabled = True
        self.smoothing_rate = 1.0
        self.smoothing_mode = "exponential"
        lighting = CelestialLightingController()
        self.horizon_fade = lighting.horizon_fade
        self.sun_horizon_temperature_k = lighting.sun_horizon_temperature_k
        self.sun_zenith_temperature_k = lighting.sun_zenith_temperature_k
        self.moon_intensity_scale = lighting.moon_intensity_scale
        self.moon_color_temperature_k = lighting.moon_color_temperature_k
        self.earthshine_scale = lighting.earthshine_scale
        self.blend_time_bias_hours = 0.001
        self.skip_odd_hours = True
        self.initial_is_day = False

        if toml_file:
            self.load_settings(toml_file)

        if custom_settings:
            for key, value in custom_settings.items():
                if hasattr(self, key):
                    setattr(self, key, value)
                else:
                    raise AttributeError(f"{key} is not a valid setting.")

        if self.smoothing_mode not in SMOOTHING_MODES:
            raise ValueError(
                f"smoothing_mode must be one of {SMOOTHING_MODES}, "
                f"got {self.smoothing_mode!r}"
            )
        # Resolving the preset validates its name
        self.location()

    def __repr__(self):
        """Return a string representation of the Settings object.

        Returns:
            str:
                A formatted string showing all settings and their current values.
        """
        attrs = vars(self)
        parts = ["Settings:"]
        for key, value in attrs.items():
            parts.append(f"  {key}: {value}")
        return "\n".join(parts)

    def location(self) -> GeoLocation:
        """The configured location; a named preset overrides the coordinates."""
        custom = GeoLocation(self.latitude, self.longitude, self.utc_offset_hours)
        return apply_preset(self.location_preset, custom)

    def lighting_controller(self) -> CelestialLightingController:
        """A lighting controller built from the lighting settings."""
        return CelestialLightingController(
            horizon_fade=self.horizon_fade,
            sun_horizon_temperature_k=self.sun_horizon_temperature_k,
            sun_zenith_temperature_k=self.sun_zenith_temperature_k,
            moon_intensity_scale=self.moon_intensity_scale,
            moon_color_temperature_k=self.moon_color_temperature_k,
            earthshine_scale=self.earthshine_scale,
        )

    def load_settings(self, toml_file):
        """Load configuration settings from a TOML file.

        Only keys present in the file are updated; everything else keeps its
        current value.

        Args:
            toml_file (str or pathlib.Path):
                Path to the TOML configuration file to load.

        Example TOML structure:
            [location]
            preset = "Tokyo"        # or "Custom" with explicit values below
            latitude = 35.6764
            longitude = 139.65
            utc_offset = 9

            [twilight]
            lower = 0.0
            upper = 0.1

            [space]
            start = 20000.0
            end = 100000.0

            [smoothing]
            enabled = true
            rate = 1.0
            mode = "exponential"

            [lighting]
            horizon_fade = 0.05
            sun_horizon_temperature = 2000.0
            sun_zenith_temperature = 6500.0
            moon_intensity = 1.0
            moon_temperature = 4100.0
            earthshine = 0.02

            [scenarios]
            blend_time_bias = 0.001
            skip_odd_hours = true
        """
        with open(toml_file, "rb") as file:
            config = tomllib.load(file)

        # Section -> {toml key: attribute}
        layout = {
            "location": {
                "preset": "location_preset",
                "latitude": "latitude",
                "longitude": "longitude",
                "utc_offset": "utc_offset_hours",
            },
            "twilight": {
                "lower": "twilight_lower",
                "upper": "twilight_upper",
                "initial_is_day": "initial_is_day",
            },
            "space": {
                "start": "space_altitude_start",
                "end": "space_altitude_end",
            },
            "smoothing": {
                "enabled": "smoothing_enabled",
                "rate": "smoothing_rate",
                "mode": "smoothing_mode",
            },
            "lighting": {
                "horizon_fade": "horizon_fade",
                "sun_horizon_temperature": "sun_horizon_temperature_k",
                "sun_zenith_temperature": "sun_zenith_temperature_k",
                "moon_intensity": "moon_intensity_scale",
                "moon_temperature": "moon_color_temperature_k",
                "earthshine": "earthshine_scale",
            },
            "scenarios": {
                "blend_time_bias": "blend_time_bias_hours",
                "skip_odd_hours": "skip_odd_hours",
            },
        }

        for section_name, keys in layout.items():
            if section_name not in config:
                continue
            section = config[section_name]
            for key, attribute in keys.items():
                if (value := section.get(key)) is not None:
                    setattr(self, attribute, value)
