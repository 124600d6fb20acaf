"""Sweep a scene through the day and hand each hour to an external baker."""

from collections.abc import Callable

import equinox as eqx

from skycycle.core.clock import local_time
from skycycle.core.environment import EnvironmentSnapshot, TimeOfDay
from skycycle.core.scenarios import scenario_name
from skycycle.logger import logger

# Called with (scenario name, snapshot); returns False if the bake did not start
Baker = Callable[[str, EnvironmentSnapshot], bool]


class BakeSweepResult(eqx.Module):
    """Outcome of :func:`run_bake_sweep`."""

    baked: tuple[str, ...]  # Scenario names baked, in sweep order
    aborted: bool = False
    failed_name: str | None = None  # Scenario whose bake failed to start


def bake_hours(skip_odd_hours: bool = True) -> list[int]:
    """Whole hours of the day visited by a bake sweep."""
    return [hour for hour in range(24) if not (skip_odd_hours and hour % 2 == 1)]


def run_bake_sweep(
    controller: TimeOfDay,
    bake: Baker,
    scene_name: str,
    skip_odd_hours: bool | None = None,
) -> BakeSweepResult:
    """Bake one lighting scenario per hour of the controller's current date.

    The sweep runs on an independent copy of ``controller`` (see
    :meth:`TimeOfDay.spawn_sweep_copy`), so the live controller's day/night
    history and smoothed directions are untouched. Scenario names are built
    from the local wall-clock time, e.g. ``"Harbor 0600"``.

    Args:
        controller:
            The live controller. Its scenario catalog is updated with the
            baked names when the sweep completes.
        bake:
            Called once per hour with the scenario name and the evaluated
            snapshot. Returning False aborts the sweep.
        scene_name:
            Prefix for the scenario names.
        skip_odd_hours:
            Only bake even hours. Defaults to the controller's settings.

    Returns:
        BakeSweepResult with the names baked before any abort.
    """
    if skip_odd_hours is None:
        skip_odd_hours = controller.settings.skip_odd_hours

    sweep = controller.spawn_sweep_copy()
    baked = []
    for hour in bake_hours(skip_odd_hours):
        sweep.set_time(float(hour))
        snapshot = sweep.tick()
        name = scenario_name(
            scene_name, local_time(snapshot.instant, sweep.location.utc_offset_hours)
        )
        if not bake(name, snapshot):
            logger.warning(
                "Failed to start baking scenario '%s'. Aborting batch bake.", name
            )
            return BakeSweepResult(baked=tuple(baked), aborted=True, failed_name=name)
        baked.append(name)

    kept = [e for e in controller.scheduler.entries if e.name not in baked]
    controller.set_scenarios([*kept, *baked])
    logger.info("Bake 24 hours finished: %d scenarios baked.", len(baked))
    return BakeSweepResult(baked=tuple(baked))
