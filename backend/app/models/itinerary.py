"""Itinerary models - per-day view of a trip plan with gap suggestions."""

from datetime import date

from pydantic import BaseModel

from backend.app.models.activity import Activity
from backend.app.models.common import ClockTime
from backend.app.models.trip import PlannedTour


class GapSuggestion(BaseModel):
    """Free-time window and the activities recommended for it."""

    start: ClockTime
    end: ClockTime
    gap_minutes: int
    activities: list[Activity]


class DayItinerary(BaseModel):
    """Itinerary for a single day."""

    date: date
    tours: list[PlannedTour]
    gaps: list[GapSuggestion]
    end_of_day: GapSuggestion | None = None
