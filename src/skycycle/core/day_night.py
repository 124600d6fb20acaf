"""Day/night classification with edge-triggered transition events."""

from collections.abc import Callable

import jax.numpy as jnp

from skycycle import constants as const
from skycycle import conversions as conv
from skycycle.core.lighting import is_sun_above_horizon
from skycycle.core.states import DayNightState, DayNightTransition, SunState
from skycycle.logger import logger

TransitionListener = Callable[[DayNightTransition], None]


def day_weight(direction, lower: float = 0.0, upper: float = const.nautical_twilight):
    """Continuous day weight through the twilight band.

    ``clamp01(remap(dot(direction, up), lower, upper, 0, 1))``: 0 when the sun
    is at or below ``lower``, 1 at or above ``upper``, linear in between.

    Args:
        direction: Horizon-frame unit vector toward the sun.
        lower: Start of the twilight band in the dot-product domain.
        upper: End of the twilight band in the dot-product domain.

    Returns:
        The day weight in [0, 1].
    """
    height = jnp.dot(direction, const.up)
    return float(conv.clamp01(conv.remap(height, lower, upper, 0.0, 1.0)))


def space_weight(
    altitude: float,
    start: float = const.space_altitude_start,
    end: float = const.space_altitude_end,
) -> float:
    """Monotone 0 -> 1 ramp of observer altitude between ``start`` and ``end``."""
    return float(conv.clamp01(conv.remap(altitude, start, end, 0.0, 1.0)))


class DayNightStateMachine:
    """Tracks whether it is day and emits one event per day/night edge.

    The machine only remembers the last classification. Each simulation (a
    live session, or an offline sweep over many times) needs its own
    instance.

    Listeners registered with :meth:`add_listener` are called once per
    emitted transition; :meth:`update` also returns the transitions so a
    caller can dispatch them itself.
    """

    def __init__(
        self,
        twilight_lower: float = 0.0,
        twilight_upper: float = const.nautical_twilight,
        space_start: float = const.space_altitude_start,
        space_end: float = const.space_altitude_end,
        initial_is_day: bool = False,
    ):
        """Initialize the state machine.

        Args:
            twilight_lower (float):
                Sun height (dot with up) at which the day weight starts to rise.
            twilight_upper (float):
                Sun height at which the day weight reaches 1.
            space_start (float):
                Observer altitude where the space weight starts to rise.
            space_end (float):
                Observer altitude where the space weight reaches 1.
            initial_is_day (bool):
                Classification assumed before the first update.
        """
        self.twilight_lower = twilight_lower
        self.twilight_upper = twilight_upper
        self.space_start = space_start
        self.space_end = space_end
        self._initial_is_day = initial_is_day
        self._is_day = initial_is_day
        self._listeners: list[TransitionListener] = []

    @property
    def is_day(self) -> bool:
        """Current classification."""
        return self._is_day

    @property
    def is_night(self) -> bool:
        """Always the negation of ``is_day``."""
        return not self._is_day

    def add_listener(self, listener: TransitionListener) -> TransitionListener:
        """Register a callback for transitions and return it."""
        self._listeners.append(listener)
        return listener

    def remove_listener(self, listener: TransitionListener) -> None:
        """Unregister a callback previously passed to :meth:`add_listener`."""
        self._listeners.remove(listener)

    def reset(self) -> None:
        """Forget the transition history."""
        self._is_day = self._initial_is_day

    def update(
        self, sun_state: SunState, altitude: float = 0.0
    ) -> tuple[DayNightState, list[DayNightTransition]]:
        """Classify the current sun state.

        Args:
            sun_state:
                The sun for this evaluation.
            altitude:
                Observer altitude, used for the space weight.

        Returns:
            tuple: (DayNightState, transitions). ``transitions`` holds at most
            one event, present only when the classification changed.
        """
        above = is_sun_above_horizon(sun_state)
        transitions = []
        if above != self._is_day:
            transitions.append(DayNightTransition(is_day=above))
            logger.info(
                "Transition to %s (sun elevation %.2f deg)",
                "day" if above else "night",
                float(sun_state.elevation_deg),
            )
        self._is_day = above

        state = DayNightState(
            is_day=above,
            day_weight=day_weight(
                sun_state.direction, self.twilight_lower, self.twilight_upper
            ),
            space_weight=space_weight(altitude, self.space_start, self.space_end),
        )

        for transition in transitions:
            for listener in list(self._listeners):
                listener(transition)
        return state, transitions
