"""Light intensity and color derived from the sun and moon states."""

import equinox as eqx
import jax.numpy as jnp

from skycycle import constants as const
from skycycle import conversions as conv
from skycycle.core.states import LightingParameters, MoonState, SunState


def is_sun_above_horizon(sun_state: SunState) -> bool:
    """True iff the sun direction's vertical component is non-negative."""
    return bool(jnp.dot(sun_state.direction, const.up) >= 0.0)


class CelestialLightingController(eqx.Module):
    """Stateless mapping from celestial geometry to light parameters.

    The fields are tuning constants; the controller holds nothing that
    changes between evaluations.
    """

    horizon_fade: float = 0.05  # Height of the intensity ramp, in dot(dir, up)
    sun_horizon_temperature_k: float = 2000.0
    sun_zenith_temperature_k: float = 6500.0
    moon_intensity_scale: float = 1.0
    moon_color_temperature_k: float = 4100.0
    earthshine_scale: float = 0.02

    def _horizon_factor(self, direction):
        return conv.clamp01(jnp.dot(direction, const.up) / self.horizon_fade)

    def update_light_properties(
        self,
        sun_state: SunState,
        moon_state: MoonState,
        space_weight: float = 0.0,
    ) -> LightingParameters:
        """Compute light parameters for the current sun and moon.

        Args:
            sun_state:
                Output of :func:`skycycle.core.positions.sun_properties`.
            moon_state:
                Output of :func:`skycycle.core.positions.moon_properties`.
            space_weight:
                0 near the planet, 1 in deep space. Earthshine on the moon
                fades out continuously as this approaches 1.

        Returns:
            LightingParameters for the caller to apply.
        """
        sun_height = conv.clamp01(jnp.dot(sun_state.direction, const.up))
        sun_intensity = self._horizon_factor(sun_state.direction) / (
            sun_state.distance_au**2
        )
        sun_temperature = conv.lerp(
            self.sun_horizon_temperature_k,
            self.sun_zenith_temperature_k,
            jnp.sqrt(sun_height),
        )

        distance_ratio = const.moon_mean_distance_km / moon_state.distance_km
        moon_intensity = (
            self.moon_intensity_scale
            * moon_state.illumination_fraction
            * distance_ratio**2
            * self._horizon_factor(moon_state.direction)
        )

        # Earthshine peaks near new moon, when the sunlit Earth faces the moon
        earthshine = (
            self.earthshine_scale
            * (1.0 - moon_state.illumination_fraction)
            * (1.0 - conv.clamp01(space_weight))
        )

        return LightingParameters(
            sun_intensity=sun_intensity,
            sun_color_temperature_k=sun_temperature,
            moon_intensity=moon_intensity,
            moon_color_temperature_k=jnp.asarray(self.moon_color_temperature_k),
            earthshine=earthshine,
            is_sun_above_horizon=is_sun_above_horizon(sun_state),
        )
