"""Time-keyed lighting scenarios and the blend between the two nearest.

Scenario names carry their activation time as a trailing ``HHMM`` token,
e.g. ``"Interior 1430"`` activates at 14:30. The scheduler keeps the parsed
scenarios sorted by time of day and, for any query time, finds the interval
(on a 24 hour cycle) that contains it and how far through that interval the
query lies.
"""

from collections.abc import Iterable
from datetime import datetime

import equinox as eqx

from skycycle import constants as const
from skycycle import conversions as conv
from skycycle.core.states import BlendState
from skycycle.logger import logger

HOURS_PER_DAY = const.hours_per_day


def parse_scenario_time(name: str) -> float | None:
    """Activation time encoded in a scenario name.

    Args:
        name:
            Scenario name whose last space-delimited token is a zero padded
            ``HHMM`` time.

    Returns:
        Time of day in hours, or None if the trailing token is not exactly
        four ASCII digits forming a valid wall-clock time.
    """
    token = name.split(" ")[-1]
    if len(token) != 4 or not (token.isascii() and token.isdigit()):
        return None
    hours, minutes = int(token[:2]), int(token[2:])
    if hours >= 24 or minutes >= 60:
        return None
    return conv.hhmm_to_hours(hours, minutes)


def scenario_name(scene_name: str, wall_time: datetime) -> str:
    """Scenario name for a scene baked at a local wall-clock time."""
    return f"{scene_name} {wall_time.hour:02d}{wall_time.minute:02d}"


class ScenarioEntry(eqx.Module):
    """A scenario and the time of day at which it is fully active."""

    name: str
    time_of_day_hours: float  # [0, 24)

    @classmethod
    def from_name(cls, name: str) -> "ScenarioEntry | None":
        """Parse a scenario name; None if it carries no valid time token."""
        time_of_day = parse_scenario_time(name)
        if time_of_day is None:
            return None
        return cls(name=name, time_of_day_hours=time_of_day)


def interval_contains(t: float, start: float, end: float) -> bool:
    """Whether ``t`` lies in the cyclic interval from ``start`` to ``end``.

    An interval with ``end < start`` crosses midnight. An interval with
    ``end == start`` is collapsed and only contains ``start`` itself.
    """
    if end > start:
        return start <= t <= end
    if end == start:
        return t == start
    return t >= start or t <= end


def interval_duration(start: float, end: float) -> float:
    """Length in hours of the cyclic interval from ``start`` to ``end``."""
    if end > start:
        return end - start
    if end == start:
        return 0.0
    return (HOURS_PER_DAY - start) + end


class ScenarioBlendScheduler:
    """Chooses the two scenarios to blend for a time of day.

    The sorted scenario list is the only state kept between evaluations; call
    :meth:`rebuild` whenever the underlying catalog changes. Catalogs are
    expected to be small, so each evaluation is a linear scan with early exit.
    """

    def __init__(self, entries: Iterable[str | ScenarioEntry] = ()):
        """Initialize the scheduler.

        Args:
            entries (iterable of str or ScenarioEntry):
                Initial catalog, see :meth:`rebuild`.
        """
        self._entries: tuple[ScenarioEntry, ...] = ()
        self.rebuild(entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{e.name!r}@{e.time_of_day_hours:.3f}" for e in self._entries
        )
        return f"ScenarioBlendScheduler([{parts}])"

    @property
    def entries(self) -> tuple[ScenarioEntry, ...]:
        """The catalog, sorted by time of day."""
        return self._entries

    @property
    def names(self) -> list[str]:
        """Scenario names in sorted order."""
        return [entry.name for entry in self._entries]

    def rebuild(self, entries: Iterable[str | ScenarioEntry]) -> None:
        """Replace the catalog.

        Names that do not end in a valid ``HHMM`` token, and entries whose
        time lies outside [0, 24), are skipped without error: partial
        catalogs are normal while scenarios are still being authored. The
        remaining entries are sorted by time; entries sharing a time keep
        their input order.

        Args:
            entries:
                Scenario names, or already parsed ScenarioEntry objects.
        """
        parsed = []
        skipped = 0
        for item in entries:
            if isinstance(item, ScenarioEntry):
                entry = item if 0.0 <= item.time_of_day_hours < HOURS_PER_DAY else None
                label = item.name
            else:
                entry = ScenarioEntry.from_name(item)
                label = item
            if entry is None:
                skipped += 1
                logger.debug("Skipping scenario without a valid time: %r", label)
                continue
            parsed.append(entry)

        self._entries = tuple(sorted(parsed, key=lambda e: e.time_of_day_hours))
        logger.info(
            "Scenario catalog rebuilt: %d scenarios, %d skipped",
            len(self._entries),
            skipped,
        )

    def active_interval(self, time_of_day: float) -> tuple[int, int] | None:
        """Indices of the start and end entries of the interval holding a time.

        The first matching interval in ascending order wins. Returns None for
        catalogs with fewer than two entries.
        """
        count = len(self._entries)
        if count < 2:
            return None
        for i, entry in enumerate(self._entries):
            following = self._entries[(i + 1) % count]
            if interval_contains(
                time_of_day, entry.time_of_day_hours, following.time_of_day_hours
            ):
                return i, (i + 1) % count
        # Unreachable with the wraparound interval, kept as a defined fallback
        return count - 1, 0

    def evaluate(self, time_of_day: float) -> BlendState:
        """Blend state for a time of day in hours.

        Args:
            time_of_day:
                Query time in [0, 24).

        Returns:
            BlendState. Neutral (no scenarios, factor 0) for an empty catalog;
            the single scenario with factor 0 for a one-entry catalog; the
            start scenario with factor 0 when the containing interval is
            collapsed by two entries sharing one time.
        """
        count = len(self._entries)
        if count == 0:
            return BlendState()
        if count == 1:
            only = self._entries[0].name
            return BlendState(from_scenario=only, to_scenario=only, blend_factor=0.0)

        start_index, end_index = self.active_interval(time_of_day)
        start = self._entries[start_index]
        end = self._entries[end_index]

        duration = interval_duration(start.time_of_day_hours, end.time_of_day_hours)
        if duration <= 0.0:
            return BlendState(
                from_scenario=start.name, to_scenario=start.name, blend_factor=0.0
            )

        # After midnight in a wrapping interval t < start, so the factor is 0
        elapsed = time_of_day - start.time_of_day_hours
        factor = min(1.0, max(0.0, elapsed / duration))
        return BlendState(
            from_scenario=start.name, to_scenario=end.name, blend_factor=factor
        )
