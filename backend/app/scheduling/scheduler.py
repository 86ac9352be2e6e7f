"""Day and week scheduler over the static weekly recurrence table.

The recurrence table is deploy-time configuration: one entry per offered
tour slug. Changing the offering means editing RECURRENCE_TABLE and
redeploying. Per-date cancellations go in an entry's `exceptions`.
"""

import logging
from collections.abc import Sequence
from datetime import date, timedelta

from backend.app.models.tour import DaySchedule, RecurrenceEntry, ScheduledInstance, Tour
from backend.app.scheduling.clock import compute_end_time
from backend.app.scheduling.season import is_in_season
from backend.app.utils.metrics import schedule_instances_total

logger = logging.getLogger(__name__)

# Day constants, 0 = Sunday
SUN, MON, TUE, WED, THU, FRI, SAT = range(7)
DAILY = frozenset(range(7))

RECURRENCE_TABLE: tuple[RecurrenceEntry, ...] = (
    RecurrenceEntry(tour_slug="arctic-king-crab-cruise", departure_time="09:00", days_of_week=DAILY),
    RecurrenceEntry(tour_slug="classic-arctic-fjord-cruise", departure_time="11:00", days_of_week=DAILY),
    RecurrenceEntry(tour_slug="midday-arctic-explorer", departure_time="12:00", days_of_week=DAILY),
    RecurrenceEntry(
        tour_slug="evening-polar-expedition",
        departure_time="17:00",
        days_of_week=frozenset({MON, WED, FRI, SAT}),
    ),
    RecurrenceEntry(tour_slug="northern-lights-fjord-cruise", departure_time="18:00", days_of_week=DAILY),
    RecurrenceEntry(tour_slug="jazz-cruise", departure_time="19:30", days_of_week=frozenset({THU, FRI, SAT})),
    RecurrenceEntry(tour_slug="captains-secret-bars", departure_time="20:00", days_of_week=frozenset({FRI, SAT})),
)


def weekday_of(day: date) -> int:
    """Weekday index with Sunday as 0."""
    return day.isoweekday() % 7


def week_start(day: date) -> date:
    """Monday of the week containing `day`."""
    return day - timedelta(days=day.weekday())


def get_scheduled_instances_for_day(
    weekday: int,
    month: int,
    tours: Sequence[Tour],
    table: Sequence[RecurrenceEntry] = RECURRENCE_TABLE,
    on_date: date | None = None,
) -> list[ScheduledInstance]:
    """Return tour instances running on a weekday in a given month.

    Entries whose tour is missing from `tours` (filtered upstream, e.g. by
    locale) are skipped silently, as are out-of-season tours.

    Args:
        weekday: Day of week, 0 = Sunday ... 6 = Saturday
        month: Month of year (1-12)
        tours: Locale-resolved catalogue
        table: Recurrence table (defaults to the deployed one)
        on_date: Concrete date, used only to honour entry exceptions

    Returns:
        Instances sorted by departure time; ties keep table order
    """
    by_slug = {tour.slug: tour for tour in tours}

    instances: list[ScheduledInstance] = []
    for entry in table:
        if weekday not in entry.days_of_week:
            continue
        if on_date is not None and on_date in entry.exceptions:
            continue
        tour = by_slug.get(entry.tour_slug)
        if tour is None:
            continue
        if not is_in_season(tour, month):
            continue
        instances.append(
            ScheduledInstance(
                tour=tour,
                departure_time=entry.departure_time,
                end_time=compute_end_time(entry.departure_time, tour.duration_hours),
            )
        )

    # sorted() is stable, so equal departure times keep table order
    instances = sorted(instances, key=lambda i: i.departure_time)
    schedule_instances_total.inc(len(instances))
    return instances


def get_scheduled_instances_for_date(
    day: date,
    tours: Sequence[Tour],
    table: Sequence[RecurrenceEntry] = RECURRENCE_TABLE,
) -> list[ScheduledInstance]:
    """Scheduled instances for a calendar date."""
    return get_scheduled_instances_for_day(weekday_of(day), day.month, tours, table, on_date=day)


def find_instance(
    day: date,
    tour_slug: str,
    tours: Sequence[Tour],
    table: Sequence[RecurrenceEntry] = RECURRENCE_TABLE,
) -> ScheduledInstance | None:
    """Look up the instance of one tour on a date, if it runs that day."""
    for instance in get_scheduled_instances_for_date(day, tours, table):
        if instance.tour.slug == tour_slug:
            return instance
    return None


def get_week_schedule(
    anchor: date,
    tours: Sequence[Tour],
    table: Sequence[RecurrenceEntry] = RECURRENCE_TABLE,
) -> list[DaySchedule]:
    """Seven day schedules, Monday through Sunday, for the week of `anchor`."""
    monday = week_start(anchor)
    days = [monday + timedelta(days=offset) for offset in range(7)]
    week = [
        DaySchedule(date=day, instances=get_scheduled_instances_for_date(day, tours, table))
        for day in days
    ]

    logger.debug(
        "Week schedule built",
        extra={
            "structured": {
                "week_start": monday.isoformat(),
                "instances": sum(len(d.instances) for d in week),
            }
        },
    )
    return week
