"""Trip plan derivation from a selection set.

The plan is always rebuilt from scratch from the selection set; it is
never patched incrementally. Tour data is copied into each PlannedTour
at build time so later catalogue edits do not alter a built plan.
"""

import hashlib
import json
from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from backend.app.config import Settings, get_settings
from backend.app.models.tour import RecurrenceEntry, Tour
from backend.app.models.trip import PlannedTour, SelectionKey, TripPlan, TripStats
from backend.app.scheduling.clock import compute_end_time
from backend.app.scheduling.scheduler import RECURRENCE_TABLE, find_instance
from backend.app.utils.logging import trip_logger
from backend.app.utils.metrics import stale_selections_total, trip_plans_built_total


def _plan_id(keys: Iterable[SelectionKey], person_count: int) -> str:
    """Stable content-derived plan id."""
    payload = {"keys": sorted(str(k) for k in keys), "persons": person_count}
    digest = hashlib.sha256(json.dumps(payload, sort_keys=True).encode()).hexdigest()
    return f"trip-{digest[:12]}"


def _snapshot(
    key: SelectionKey,
    tour: Tour,
    catalogue: Sequence[Tour],
    table: Sequence[RecurrenceEntry],
    settings: Settings,
) -> PlannedTour:
    instance = find_instance(key.date, key.tour_slug, catalogue, table)
    if instance is not None:
        departure, end = instance.departure_time, instance.end_time
    else:
        # Selected on a day the tour does not run (e.g. restored from a shared link)
        departure = settings.default_departure_time
        end = compute_end_time(departure, tour.duration_hours)

    return PlannedTour(
        tour_slug=tour.slug,
        date=key.date,
        tour_name=tour.name,
        duration_hours=tour.duration_hours,
        price=tour.price_from,
        departure_time=departure,
        end_time=end,
    )


def build_trip_plan(
    keys: Iterable[SelectionKey],
    catalogue_lookup: Mapping[str, Tour],
    person_count: int,
    table: Sequence[RecurrenceEntry] = RECURRENCE_TABLE,
    settings: Settings | None = None,
) -> TripPlan | None:
    """Build a trip plan from the current selection set.

    Keys whose slug is missing from the catalogue are treated as stale and
    dropped without error.

    Args:
        keys: Selection set
        catalogue_lookup: Tour slug -> Tour
        person_count: Headcount, >= 1
        table: Recurrence table used to thread departure times
        settings: Settings override (defaults to get_settings())

    Returns:
        TripPlan, or None when no selection survives (the "no trip" state)
    """
    settings = settings or get_settings()
    selected = list(keys)
    catalogue = list(catalogue_lookup.values())

    surviving = [k for k in selected if k.tour_slug in catalogue_lookup]
    dropped = len(selected) - len(surviving)
    if dropped:
        stale_selections_total.inc(dropped)

    if not surviving:
        trip_plans_built_total.labels(outcome="empty").inc()
        trip_logger.log_plan_built(None, len(selected), 0, person_count)
        return None

    tours = [
        _snapshot(k, catalogue_lookup[k.tour_slug], catalogue, table, settings) for k in surviving
    ]
    tours.sort(key=lambda t: (t.date, t.departure_time, t.tour_slug))

    plan = TripPlan(
        id=_plan_id(surviving, person_count),
        start_date=tours[0].date,
        end_date=max(t.date for t in tours),
        person_count=person_count,
        tours=tours,
    )

    trip_plans_built_total.labels(outcome="built").inc()
    trip_logger.log_plan_built(plan.id, len(selected), len(surviving), person_count)
    return plan


def group_by_date(plan: TripPlan) -> dict[date, list[PlannedTour]]:
    """Group planned tours by date.

    Returns:
        Mapping date -> tours, dates ascending, tours by departure time
    """
    grouped: dict[date, list[PlannedTour]] = {}
    for tour in sorted(plan.tours, key=lambda t: t.date):
        grouped.setdefault(tour.date, []).append(tour)
    return {day: sorted(tours, key=lambda t: t.departure_time) for day, tours in grouped.items()}


def compute_stats(plan: TripPlan) -> TripStats:
    """Aggregate counts and prices from the plan's snapshots."""
    per_person = sum(t.price for t in plan.tours)
    return TripStats(
        tour_count=len(plan.tours),
        day_count=len({t.date for t in plan.tours}),
        total_price_per_person=per_person,
        total_price_all_persons=per_person * plan.person_count,
    )
