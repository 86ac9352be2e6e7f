"""Per-day itinerary view: planned tours plus suggestions for free time."""

from collections.abc import Collection, Sequence

from backend.app.config import Settings, get_settings
from backend.app.models.activity import Activity
from backend.app.models.common import InterestCategory
from backend.app.models.itinerary import DayItinerary, GapSuggestion
from backend.app.models.trip import PlannedTour, TripPlan
from backend.app.planning.trip import group_by_date
from backend.app.recommend.gap_filler import recommend
from backend.app.scheduling.clock import minutes_between, to_minutes, wraps_midnight


def between_tours(
    previous: PlannedTour,
    following: PlannedTour,
    user_interests: Collection[InterestCategory],
    activities: Sequence[Activity] | None,
    settings: Settings,
) -> GapSuggestion | None:
    """Suggestion for the gap between two consecutive tours, if worth showing.

    A previous tour that ran past midnight leaves no free time before the
    next departure on the same day.
    """
    if wraps_midnight(previous.departure_time, previous.end_time):
        return None

    gap = minutes_between(previous.end_time, following.departure_time)
    if gap < settings.min_gap_minutes:
        return None

    picks = recommend(gap, settings.gap_recommendation_count, user_interests, activities)
    if not picks:
        return None
    return GapSuggestion(
        start=previous.end_time,
        end=following.departure_time,
        gap_minutes=gap,
        activities=picks,
    )


def end_of_day(
    last: PlannedTour,
    user_interests: Collection[InterestCategory],
    activities: Sequence[Activity] | None,
    settings: Settings,
) -> GapSuggestion | None:
    """Evening suggestion after the day's last tour.

    Nothing is suggested when the tour ends late or runs past midnight.
    The considered gap is capped at end_of_day_cap_minutes.
    """
    if wraps_midnight(last.departure_time, last.end_time):
        return None
    if to_minutes(last.end_time) // 60 >= settings.evening_cutoff_hour:
        return None

    remaining = minutes_between(last.end_time, settings.evening_end)
    gap = min(remaining, settings.end_of_day_cap_minutes)
    picks = recommend(gap, settings.gap_recommendation_count, user_interests, activities)
    if not picks:
        return None
    return GapSuggestion(start=last.end_time, end=settings.evening_end, gap_minutes=gap, activities=picks)


def build_itinerary(
    plan: TripPlan,
    user_interests: Collection[InterestCategory] = (),
    activities: Sequence[Activity] | None = None,
    settings: Settings | None = None,
) -> list[DayItinerary]:
    """Day-by-day view of a plan with inter-tour and end-of-day suggestions."""
    settings = settings or get_settings()

    days: list[DayItinerary] = []
    for day, tours in group_by_date(plan).items():
        gaps: list[GapSuggestion] = []
        for previous, following in zip(tours, tours[1:]):
            suggestion = between_tours(previous, following, user_interests, activities, settings)
            if suggestion is not None:
                gaps.append(suggestion)

        days.append(
            DayItinerary(
                date=day,
                tours=tours,
                gaps=gaps,
                end_of_day=end_of_day(tours[-1], user_interests, activities, settings),
            )
        )
    return days
