"""Observer location, simulated clock, and the UTC instant they define."""

from datetime import datetime, timedelta, timezone

import equinox as eqx
from astropy.time import Time


class GeoLocation(eqx.Module):
    """Where the simulated observer stands.

    Longitude is east positive. The UTC offset is the whole-hour offset of
    the local wall clock used by :class:`SimClock`.
    """

    latitude: float = 50.9375  # Degrees, [-90, 90]
    longitude: float = 6.9603  # Degrees, [-180, 180]
    utc_offset_hours: int = 1  # Hours, [-12, 14]


class SimClock(eqx.Module):
    """Calendar date plus a local wall-clock time of day.

    ``time_of_day_hours`` may transiently exceed 24 (or go negative); the
    derived UTC instant rolls over the calendar date accordingly.
    """

    year: int
    month: int
    day: int
    time_of_day_hours: float = 12.0

    def with_time(self, time_of_day_hours: float) -> "SimClock":
        """Return a copy of this clock at another time of day."""
        return SimClock(self.year, self.month, self.day, time_of_day_hours)


# Name -> (latitude, longitude, utc offset)
LOCATION_PRESETS = {
    "Greenwich": GeoLocation(51.4934, 0.0098, 0),
    "Cologne": GeoLocation(50.9375, 6.9603, 1),
    "Dubrovnik": GeoLocation(42.6507, 18.0944, 1),
    "Tokyo": GeoLocation(35.6764, 139.6500, 9),
    "NewYork": GeoLocation(40.7128, -74.0060, -5),
}

CUSTOM_PRESET = "Custom"


def apply_preset(name: str, current: GeoLocation | None = None) -> GeoLocation:
    """Resolve a named location preset.

    Args:
        name:
            One of the keys of ``LOCATION_PRESETS`` or ``"Custom"``.
        current:
            The location in use. Returned unchanged for ``"Custom"``.

    Returns:
        The preset location, or ``current`` (default location if ``None``)
        for ``"Custom"``.

    Raises:
        ValueError:
            If ``name`` is not a known preset.
    """
    if name == CUSTOM_PRESET:
        return current if current is not None else GeoLocation()
    try:
        return LOCATION_PRESETS[name]
    except KeyError:
        known = ", ".join([CUSTOM_PRESET, *LOCATION_PRESETS])
        raise ValueError(f"Unknown location preset {name!r} (known: {known})") from None


def utc_instant(clock: SimClock, location: GeoLocation) -> datetime:
    """UTC instant of a simulated local time.

    ``date @ 00:00 UTC + time_of_day_hours - utc_offset_hours``.
    """
    midnight = datetime(clock.year, clock.month, clock.day, tzinfo=timezone.utc)
    return midnight + timedelta(
        hours=clock.time_of_day_hours - location.utc_offset_hours
    )


def local_time(instant: datetime, utc_offset_hours: int) -> datetime:
    """Wall-clock time at ``utc_offset_hours`` for a UTC instant."""
    return to_utc(instant) + timedelta(hours=utc_offset_hours)


def to_utc(instant: datetime) -> datetime:
    """Convert to an aware UTC datetime; naive datetimes are taken as UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def julian_date(instant: datetime) -> float:
    """Julian date of an instant.

    Args:
        instant:
            A datetime. Naive values are interpreted as UTC.

    Returns:
        The Julian date as a float.
    """
    naive_utc = to_utc(instant).replace(tzinfo=None)
    return float(Time(naive_utc, scale="utc").jd)
