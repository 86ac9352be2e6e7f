"""Models package - re-exports for convenience."""

from backend.app.models.activity import Activity
from backend.app.models.common import (
    ActivityType,
    ClockTime,
    InterestCategory,
    Month,
    Provenance,
    Weekday,
)
from backend.app.models.intent import SuggestedSlot, TourPlanSuggestion, TourPreferences
from backend.app.models.itinerary import DayItinerary, GapSuggestion
from backend.app.models.tour import (
    Category,
    DaySchedule,
    RecurrenceEntry,
    ScheduledInstance,
    Season,
    Tour,
)
from backend.app.models.trip import PlannedTour, SelectionKey, SessionState, TripPlan, TripStats

__all__ = [
    # Common
    "ClockTime",
    "Month",
    "Weekday",
    "InterestCategory",
    "ActivityType",
    "Provenance",
    # Tours
    "Category",
    "Season",
    "Tour",
    "RecurrenceEntry",
    "ScheduledInstance",
    "DaySchedule",
    # Activities
    "Activity",
    # Trip
    "SelectionKey",
    "PlannedTour",
    "TripPlan",
    "TripStats",
    "SessionState",
    # Itinerary
    "DayItinerary",
    "GapSuggestion",
    # Intent
    "TourPreferences",
    "SuggestedSlot",
    "TourPlanSuggestion",
]
