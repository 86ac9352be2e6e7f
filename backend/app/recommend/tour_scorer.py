"""Deterministic tour suggestions scored against visitor preferences."""

from collections.abc import Sequence

from backend.app.models.intent import SuggestedSlot, TourPlanSuggestion, TourPreferences
from backend.app.models.tour import Tour
from backend.app.scheduling.season import is_in_season

SUGGESTED_TIMES = ("10:00", "14:00", "19:00")

BUDGET_CEILINGS: dict[str, int | None] = {
    "budget": 600,
    "moderate": 1000,
    "premium": None,
}


def matches_budget(tour: Tour, budget: str) -> bool:
    ceiling = BUDGET_CEILINGS.get(budget)
    return ceiling is None or tour.price_from <= ceiling


def matches_duration(tour: Tour, duration: str) -> bool:
    hours = tour.duration_hours
    if duration == "short":
        return hours <= 3
    if duration == "half-day":
        return 3 <= hours <= 5
    if duration == "full-day":
        return hours >= 5
    return False


def score_tour(tour: Tour, prefs: TourPreferences) -> int:
    """Additive preference score; higher is a better fit."""
    score = 0
    if is_in_season(tour, prefs.travel_month):
        score += 10
    if matches_budget(tour, prefs.budget):
        score += 5
    if prefs.fitness_level == "easy" and tour.difficulty_level == "easy":
        score += 3
    if prefs.fitness_level == "moderate":
        score += 2
    score += 4 * len(set(prefs.interests) & set(tour.categories))
    if matches_duration(tour, prefs.duration):
        score += 3
    return score


def recommend_tours(
    tours: Sequence[Tour],
    prefs: TourPreferences,
    limit: int = len(SUGGESTED_TIMES),
) -> TourPlanSuggestion:
    """Build a day plan from the best-scoring in-season tours.

    Falls back to the first catalogue tours when nothing is in season.
    """
    in_season = [t for t in tours if is_in_season(t, prefs.travel_month)]
    scored = sorted(
        ((score_tour(t, prefs), t) for t in in_season),
        key=lambda pair: pair[0],
        reverse=True,
    )
    picked = scored[:limit]
    if not picked:
        picked = [(score_tour(t, prefs), t) for t in tours[:limit]]

    items = [
        SuggestedSlot(
            time=SUGGESTED_TIMES[i] if i < len(SUGGESTED_TIMES) else f"{min(10 + i * 4, 23):02d}:00",
            tour=tour,
            score=score,
        )
        for i, (score, tour) in enumerate(picked)
    ]
    return TourPlanSuggestion(month=prefs.travel_month, items=items)
