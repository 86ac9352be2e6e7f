"""Intent models - visitor preferences for tour suggestions."""

from typing import Literal

from pydantic import BaseModel, Field

from backend.app.models.common import ClockTime, Month
from backend.app.models.tour import Tour


class TourPreferences(BaseModel):
    """Answers from the preference form."""

    duration: Literal["short", "half-day", "full-day", "multi-day"]
    interests: list[str] = Field(default_factory=list, max_length=5)
    budget: Literal["budget", "moderate", "premium"]
    group_type: Literal["solo", "couple", "family", "group"]
    fitness_level: Literal["easy", "moderate", "challenging"]
    travel_month: Month


class SuggestedSlot(BaseModel):
    """One suggested tour at a proposed time of day."""

    time: ClockTime
    tour: Tour
    score: int


class TourPlanSuggestion(BaseModel):
    """Deterministic day plan built from scored tours."""

    month: Month
    items: list[SuggestedSlot]
