"""Season predicate shared by the scheduler and the tour scorer."""

from backend.app.models.tour import Tour


def is_in_season(tour: Tour, month: int) -> bool:
    """Check whether a tour is offered in the given month.

    A season whose start month is after its end month wraps across the
    new year, e.g. start=9, end=3 covers September through March.

    Args:
        tour: Tour with a season window
        month: Month of year (1-12), not validated

    Returns:
        True if the month falls inside the tour's season
    """
    start, end = tour.season.start, tour.season.end
    if start <= end:
        return start <= month <= end
    return month >= start or month <= end
