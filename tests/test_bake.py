"""Tests for the 24 hour bake sweep."""

from skycycle.core.bake import bake_hours, run_bake_sweep
from skycycle.core.clock import SimClock
from skycycle.core.environment import TimeOfDay


class RecordingBaker:
    """Baker stand-in that records calls and can refuse one scenario."""

    def __init__(self, refuse=None):
        self.refuse = refuse
        self.calls = []

    def __call__(self, name, snapshot):
        self.calls.append((name, snapshot))
        return name != self.refuse


def make_controller(cologne, scenarios=()):
    return TimeOfDay(SimClock(2024, 6, 21, 9.0), cologne, scenarios=scenarios)


class TestBakeHours:
    """Tests for bake_hours."""

    def test_even_hours(self):
        """Skipping odd hours leaves twelve even hours."""
        assert bake_hours() == list(range(0, 24, 2))

    def test_all_hours(self):
        """Without skipping every hour is visited."""
        assert bake_hours(skip_odd_hours=False) == list(range(24))


class TestRunBakeSweep:
    """Tests for run_bake_sweep."""

    def test_full_sweep(self, cologne):
        """Each even hour is baked under its local wall-clock name."""
        controller = make_controller(cologne)
        baker = RecordingBaker()
        result = run_bake_sweep(controller, baker, "Harbor")

        expected = [f"Harbor {hour:02d}00" for hour in range(0, 24, 2)]
        assert not result.aborted
        assert result.failed_name is None
        assert list(result.baked) == expected
        assert [name for name, _ in baker.calls] == expected

    def test_snapshots_match_hours(self, cologne):
        """The snapshot handed to the baker is evaluated at that hour."""
        controller = make_controller(cologne)
        baker = RecordingBaker()
        run_bake_sweep(controller, baker, "Harbor")

        snapshots = dict(baker.calls)
        assert snapshots["Harbor 0000"].day_night.is_night
        assert snapshots["Harbor 1200"].day_night.is_day
        assert snapshots["Harbor 1200"].instant.hour == 11

    def test_catalog_updated(self, cologne):
        """Baked scenarios join the catalog, replacing same-named entries."""
        controller = make_controller(cologne, ["Harbor 0600", "Street 0700"])
        run_bake_sweep(controller, RecordingBaker(), "Harbor")

        names = controller.scheduler.names
        assert len(names) == 13
        assert names.count("Harbor 0600") == 1
        assert "Street 0700" in names

    def test_odd_hours(self, cologne):
        """All 24 hours are baked when odd hours are not skipped."""
        controller = make_controller(cologne)
        result = run_bake_sweep(
            controller, RecordingBaker(), "Harbor", skip_odd_hours=False
        )
        assert len(result.baked) == 24
        assert result.baked[1] == "Harbor 0100"

    def test_abort(self, cologne):
        """A bake that fails to start stops the sweep."""
        controller = make_controller(cologne, ["Street 0700"])
        baker = RecordingBaker(refuse="Harbor 0600")
        result = run_bake_sweep(controller, baker, "Harbor")

        assert result.aborted
        assert result.failed_name == "Harbor 0600"
        assert result.baked == ("Harbor 0000", "Harbor 0200", "Harbor 0400")
        assert len(baker.calls) == 4
        assert controller.scheduler.names == ["Street 0700"]

    def test_live_controller_untouched(self, cologne):
        """The sweep leaves the live clock, day/night and smoothing state alone."""
        controller = make_controller(cologne)
        clock = controller.clock
        run_bake_sweep(controller, RecordingBaker(), "Harbor")

        assert controller.clock is clock
        assert controller.day_night.is_night
        assert controller.sun_smoother.current is None
