"""Tests for the day and week scheduler."""

from datetime import date

from backend.app.models.tour import RecurrenceEntry, Season, Tour
from backend.app.scheduling.scheduler import (
    RECURRENCE_TABLE,
    find_instance,
    get_scheduled_instances_for_date,
    get_scheduled_instances_for_day,
    get_week_schedule,
    week_start,
    weekday_of,
)
from backend.app.scheduling.season import is_in_season

MONDAY, TUESDAY, THURSDAY, FRIDAY = 1, 2, 4, 5


def slugs(instances: list) -> list[str]:
    """Helper to extract tour slugs."""
    return [i.tour.slug for i in instances]


def test_monday_in_january(reference_tours: list[Tour]) -> None:
    """Test winter and always-on tours run on a January Monday."""
    scheduled = slugs(get_scheduled_instances_for_day(MONDAY, 1, reference_tours))

    assert scheduled == [
        "arctic-king-crab-cruise",
        "classic-arctic-fjord-cruise",
        "evening-polar-expedition",
        "northern-lights-fjord-cruise",
    ]
    assert "jazz-cruise" not in scheduled
    assert "midday-arctic-explorer" not in scheduled
    assert "captains-secret-bars" not in scheduled


def test_friday_in_january_adds_friday_only_tour(reference_tours: list[Tour]) -> None:
    """Test that the Friday/Saturday tour appears on Friday."""
    scheduled = slugs(get_scheduled_instances_for_day(FRIDAY, 1, reference_tours))

    assert "captains-secret-bars" in scheduled
    assert "evening-polar-expedition" in scheduled
    assert "jazz-cruise" not in scheduled  # Jun-Aug only


def test_friday_only_tour_absent_on_tuesday(reference_tours: list[Tour]) -> None:
    """Test weekday filter excludes Friday/Saturday tours on Tuesday."""
    scheduled = slugs(get_scheduled_instances_for_day(TUESDAY, 1, reference_tours))

    assert "captains-secret-bars" not in scheduled
    assert "evening-polar-expedition" not in scheduled


def test_summer_tours_in_july(reference_tours: list[Tour]) -> None:
    """Test summer-only tours run on a July Thursday."""
    scheduled = slugs(get_scheduled_instances_for_day(THURSDAY, 7, reference_tours))

    assert scheduled == ["classic-arctic-fjord-cruise", "midday-arctic-explorer", "jazz-cruise"]


def test_out_of_season_in_april(reference_tours: list[Tour]) -> None:
    """Test wrap-around winter tours are excluded in April."""
    scheduled = slugs(get_scheduled_instances_for_day(THURSDAY, 4, reference_tours))

    assert "arctic-king-crab-cruise" not in scheduled
    assert "northern-lights-fjord-cruise" not in scheduled


def test_end_times_computed(reference_tours: list[Tour]) -> None:
    """Test each instance carries departure and computed end time."""
    scheduled = get_scheduled_instances_for_day(MONDAY, 1, reference_tours)
    times = {i.tour.slug: (i.departure_time, i.end_time) for i in scheduled}

    assert times["arctic-king-crab-cruise"] == ("09:00", "13:00")
    assert times["northern-lights-fjord-cruise"] == ("18:00", "21:30")


def test_empty_catalogue_returns_empty() -> None:
    """Test that no tours means no instances, not an error."""
    assert get_scheduled_instances_for_day(MONDAY, 1, []) == []


def test_output_sorted_and_filtered_for_every_day_and_month(reference_tours: list[Tour]) -> None:
    """Test sort order, season filter and weekday filter over all inputs."""
    entries = {e.tour_slug: e for e in RECURRENCE_TABLE}

    for month in range(1, 13):
        for weekday in range(7):
            scheduled = get_scheduled_instances_for_day(weekday, month, reference_tours)
            departures = [i.departure_time for i in scheduled]
            assert departures == sorted(departures)
            for instance in scheduled:
                assert is_in_season(instance.tour, month)
                assert weekday in entries[instance.tour.slug].days_of_week


def test_unknown_slugs_in_table_are_skipped(reference_tours: list[Tour]) -> None:
    """Test that a table entry for a missing tour is silently ignored."""
    table = (
        RecurrenceEntry(tour_slug="retired-tour", departure_time="08:00", days_of_week=frozenset(range(7))),
        *RECURRENCE_TABLE,
    )

    scheduled = slugs(get_scheduled_instances_for_day(MONDAY, 1, reference_tours, table))

    assert "retired-tour" not in scheduled
    assert len(scheduled) == 4


def test_equal_departure_times_keep_table_order() -> None:
    """Test stable ordering for ties."""
    tours = [
        Tour(id=s, slug=s, name=s, duration_hours=1, price_from=100, season=Season(start=1, end=12))
        for s in ("b-tour", "a-tour", "c-tour")
    ]
    table = (
        RecurrenceEntry(tour_slug="c-tour", departure_time="10:00", days_of_week=frozenset({1})),
        RecurrenceEntry(tour_slug="b-tour", departure_time="10:00", days_of_week=frozenset({1})),
        RecurrenceEntry(tour_slug="a-tour", departure_time="09:00", days_of_week=frozenset({1})),
    )

    scheduled = slugs(get_scheduled_instances_for_day(MONDAY, 6, tours, table))

    assert scheduled == ["a-tour", "c-tour", "b-tour"]


def test_entry_exceptions_cancel_single_dates(reference_tours: list[Tour]) -> None:
    """Test that an exception date removes the departure on that date only."""
    cancelled = date(2026, 1, 5)
    table = tuple(
        e.model_copy(update={"exceptions": frozenset({cancelled})})
        if e.tour_slug == "classic-arctic-fjord-cruise"
        else e
        for e in RECURRENCE_TABLE
    )

    on_cancelled = slugs(get_scheduled_instances_for_date(cancelled, reference_tours, table))
    next_day = slugs(get_scheduled_instances_for_date(date(2026, 1, 6), reference_tours, table))

    assert "classic-arctic-fjord-cruise" not in on_cancelled
    assert "classic-arctic-fjord-cruise" in next_day


def test_weekday_of_uses_sunday_zero() -> None:
    """Test weekday convention 0=Sunday ... 6=Saturday."""
    assert weekday_of(date(2026, 1, 4)) == 0  # Sunday
    assert weekday_of(date(2026, 1, 5)) == 1  # Monday
    assert weekday_of(date(2026, 1, 10)) == 6  # Saturday


def test_scheduled_instances_for_date(reference_tours: list[Tour]) -> None:
    """Test date wrapper derives weekday and month."""
    friday = date(2026, 1, 9)

    assert slugs(get_scheduled_instances_for_date(friday, reference_tours)) == slugs(
        get_scheduled_instances_for_day(FRIDAY, 1, reference_tours)
    )


def test_find_instance(reference_tours: list[Tour]) -> None:
    """Test lookup of a single tour's instance on a date."""
    instance = find_instance(date(2026, 1, 9), "captains-secret-bars", reference_tours)

    assert instance is not None
    assert instance.departure_time == "20:00"
    assert instance.end_time == "23:00"
    assert find_instance(date(2026, 1, 5), "captains-secret-bars", reference_tours) is None


def test_week_schedule_runs_monday_to_sunday(reference_tours: list[Tour]) -> None:
    """Test week view anchored on a mid-week date."""
    week = get_week_schedule(date(2026, 1, 7), reference_tours)

    assert week_start(date(2026, 1, 7)) == date(2026, 1, 5)
    assert [d.date for d in week] == [date(2026, 1, d) for d in range(5, 12)]
    friday = week[4]
    assert "captains-secret-bars" in slugs(friday.instances)
    assert "captains-secret-bars" not in slugs(week[0].instances)


def test_week_schedule_crossing_season_boundary(reference_tours: list[Tour]) -> None:
    """Test each day of a week spanning two months uses its own month."""
    week = get_week_schedule(date(2026, 8, 31), reference_tours)  # Mon Aug 31 .. Sun Sep 6

    assert "northern-lights-fjord-cruise" not in slugs(week[0].instances)
    assert "northern-lights-fjord-cruise" in slugs(week[1].instances)
    assert "jazz-cruise" not in slugs(week[3].instances)  # Thursday Sep 3
