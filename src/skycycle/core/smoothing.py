"""Time-step parameterized approach of a direction toward its target."""

import jax.numpy as jnp

from skycycle import conversions as conv

SMOOTHING_MODES = ("exponential", "linear")


def interpolation_factor(
    elapsed_seconds, rate: float = 1.0, mode: str = "exponential"
):
    """Fraction of the remaining distance covered in one step.

    Args:
        elapsed_seconds:
            Real time since the previous step.
        rate:
            Approach rate in 1/s.
        mode:
            ``"exponential"`` gives ``1 - exp(-rate * dt)``, which composes
            exactly across steps, so the result does not depend on how a
            span of time is split into ticks. ``"linear"`` gives
            ``clamp01(rate * dt)``, the per-frame lerp used by engines that
            feed the frame delta straight into the interpolation; kept for
            visual parity with such scenes.

    Returns:
        The interpolation factor in [0, 1].

    Raises:
        ValueError:
            If ``mode`` is not one of ``SMOOTHING_MODES``.
    """
    if mode == "exponential":
        return 1.0 - jnp.exp(-rate * jnp.maximum(elapsed_seconds, 0.0))
    if mode == "linear":
        return conv.clamp01(rate * elapsed_seconds)
    raise ValueError(
        f"Unknown smoothing mode {mode!r}, expected one of {SMOOTHING_MODES}"
    )


def approach(
    current,
    target,
    elapsed_seconds,
    rate: float = 1.0,
    mode: str = "exponential",
    normalize: bool = True,
):
    """Move ``current`` toward ``target`` for one step of ``elapsed_seconds``.

    With ``normalize`` the result is projected back onto the unit sphere. If
    the interpolated vector collapses (opposite directions half way through),
    the target is returned.
    """
    factor = interpolation_factor(elapsed_seconds, rate, mode)
    result = conv.lerp(current, target, factor)
    if not normalize:
        return result
    norm = jnp.linalg.norm(result)
    return jnp.where(norm > 1e-9, result / jnp.where(norm > 1e-9, norm, 1.0), target)


class DirectionSmoother:
    """Holds the displayed direction of one light and eases it toward targets.

    When ``enabled`` is False (design-time preview, offline sweeps) every
    update snaps straight to the target.
    """

    def __init__(
        self, enabled: bool = True, rate: float = 1.0, mode: str = "exponential"
    ):
        if mode not in SMOOTHING_MODES:
            raise ValueError(
                f"Unknown smoothing mode {mode!r}, expected one of {SMOOTHING_MODES}"
            )
        self.enabled = enabled
        self.rate = rate
        self.mode = mode
        self._current = None

    @property
    def current(self):
        """Last direction produced, or None before the first update."""
        return self._current

    def reset(self) -> None:
        """Forget the displayed direction; the next update snaps."""
        self._current = None

    def update(self, target, elapsed_seconds: float):
        """Advance one tick toward ``target`` and return the new direction."""
        if not self.enabled or self._current is None:
            self._current = jnp.asarray(target)
        else:
            self._current = approach(
                self._current, target, elapsed_seconds, self.rate, self.mode
            )
        return self._current
