"""Tests for the celestial lighting controller."""

import jax.numpy as jnp

from skycycle import constants as const
from skycycle.core.lighting import CelestialLightingController, is_sun_above_horizon
from skycycle.core.states import MoonState, SunState


def make_sun(height, distance_au=1.0):
    """Sun state for a direction with the given vertical component."""
    direction = jnp.array([0.0, height, jnp.sqrt(1.0 - height**2)])
    return SunState(
        direction=direction,
        elevation_deg=jnp.rad2deg(jnp.arcsin(height)),
        azimuth_deg=jnp.asarray(0.0),
        distance_au=jnp.asarray(distance_au),
    )


def make_moon(height, illumination, distance_km=const.moon_mean_distance_km):
    """Moon state for a direction with the given vertical component."""
    direction = jnp.array([jnp.sqrt(1.0 - height**2), height, 0.0])
    return MoonState(
        direction=direction,
        elevation_deg=jnp.rad2deg(jnp.arcsin(height)),
        azimuth_deg=jnp.asarray(90.0),
        phase_fraction=jnp.asarray(0.5),
        illumination_fraction=jnp.asarray(illumination),
        distance_km=jnp.asarray(distance_km),
    )


class TestSunAboveHorizon:
    """Tests for is_sun_above_horizon."""

    def test_above_and_below(self):
        """The sign of the vertical component decides."""
        assert is_sun_above_horizon(make_sun(0.3))
        assert not is_sun_above_horizon(make_sun(-0.3))

    def test_exactly_on_horizon_counts_as_above(self):
        """A zero vertical component is above (non-negative)."""
        assert is_sun_above_horizon(make_sun(0.0))


class TestUpdateLightProperties:
    """Tests for CelestialLightingController.update_light_properties."""

    def setup_method(self):
        self.controller = CelestialLightingController()

    def test_zenith_sun(self):
        """An overhead sun at 1 AU has unit intensity and the zenith color."""
        params = self.controller.update_light_properties(
            make_sun(1.0), make_moon(0.5, 1.0)
        )
        assert jnp.isclose(params.sun_intensity, 1.0)
        assert jnp.isclose(params.sun_color_temperature_k, 6500.0)
        assert params.is_sun_above_horizon

    def test_sun_below_horizon_is_dark(self):
        """No sunlight once the sun has set."""
        params = self.controller.update_light_properties(
            make_sun(-0.2), make_moon(0.5, 1.0)
        )
        assert params.sun_intensity == 0.0
        assert not params.is_sun_above_horizon

    def test_horizon_fade(self):
        """Intensity ramps up over the fade height instead of stepping."""
        half = self.controller.horizon_fade / 2.0
        params = self.controller.update_light_properties(
            make_sun(half), make_moon(0.5, 1.0)
        )
        assert jnp.isclose(params.sun_intensity, 0.5)

    def test_low_sun_is_warmer(self):
        """The sun's color temperature drops toward the horizon."""
        low = self.controller.update_light_properties(
            make_sun(0.05), make_moon(0.5, 1.0)
        )
        high = self.controller.update_light_properties(
            make_sun(0.9), make_moon(0.5, 1.0)
        )
        assert low.sun_color_temperature_k < high.sun_color_temperature_k

    def test_inverse_square_distance(self):
        """A sun twice as far is a quarter as bright."""
        near = self.controller.update_light_properties(
            make_sun(1.0, 1.0), make_moon(0.5, 1.0)
        )
        far = self.controller.update_light_properties(
            make_sun(1.0, 2.0), make_moon(0.5, 1.0)
        )
        assert jnp.isclose(far.sun_intensity, near.sun_intensity / 4.0)

    def test_full_moon_at_mean_distance(self):
        """A risen full moon at mean distance gets the configured intensity."""
        params = self.controller.update_light_properties(
            make_sun(-0.5), make_moon(0.5, 1.0)
        )
        assert jnp.isclose(params.moon_intensity, 1.0)
        assert jnp.isclose(params.moon_color_temperature_k, 4100.0)

    def test_moon_intensity_follows_illumination(self):
        """A half-lit moon gives half the light."""
        params = self.controller.update_light_properties(
            make_sun(-0.5), make_moon(0.5, 0.5)
        )
        assert jnp.isclose(params.moon_intensity, 0.5)

    def test_perigee_moon_is_brighter(self):
        """A closer moon is brighter."""
        mean = self.controller.update_light_properties(
            make_sun(-0.5), make_moon(0.5, 1.0)
        )
        perigee = self.controller.update_light_properties(
            make_sun(-0.5), make_moon(0.5, 1.0, 357000.0)
        )
        assert perigee.moon_intensity > mean.moon_intensity

    def test_set_moon_gives_no_light(self):
        """A moon below the horizon gives no light."""
        params = self.controller.update_light_properties(
            make_sun(-0.5), make_moon(-0.1, 1.0)
        )
        assert params.moon_intensity == 0.0


class TestEarthshine:
    """Tests for the earthshine term."""

    def setup_method(self):
        self.controller = CelestialLightingController()

    def test_peaks_at_new_moon(self):
        """Earthshine is strongest on a dark moon and absent at full moon."""
        new = self.controller.update_light_properties(
            make_sun(0.5), make_moon(0.5, 0.0)
        )
        full = self.controller.update_light_properties(
            make_sun(0.5), make_moon(0.5, 1.0)
        )
        assert jnp.isclose(new.earthshine, self.controller.earthshine_scale)
        assert full.earthshine == 0.0

    def test_fades_continuously_into_space(self):
        """Earthshine decreases smoothly with the space weight."""
        values = [
            float(
                self.controller.update_light_properties(
                    make_sun(0.5), make_moon(0.5, 0.0), weight
                ).earthshine
            )
            for weight in (0.0, 0.25, 0.5, 0.75, 1.0)
        ]
        assert values[0] > values[1] > values[2] > values[3] > values[4]
        assert jnp.isclose(values[2], values[0] / 2.0)
        assert values[4] == 0.0

    def test_space_weight_is_clamped(self):
        """Out-of-range space weights act like the nearest bound."""
        beyond = self.controller.update_light_properties(
            make_sun(0.5), make_moon(0.5, 0.0), 3.0
        )
        assert beyond.earthshine == 0.0


class TestTuning:
    """Tests for custom controller constants."""

    def test_custom_constants(self):
        """Tuning fields are used in place of the defaults."""
        controller = CelestialLightingController(
            moon_intensity_scale=0.2, sun_zenith_temperature_k=5800.0
        )
        params = controller.update_light_properties(make_sun(1.0), make_moon(0.5, 1.0))
        assert jnp.isclose(params.moon_intensity, 0.2)
        assert jnp.isclose(params.sun_color_temperature_k, 5800.0)
