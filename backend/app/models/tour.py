"""Tour catalogue and schedule models."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from backend.app.models.common import ClockTime, Month, Weekday


class Season(BaseModel):
    """Inclusive month range; start > end wraps across December -> January."""

    model_config = ConfigDict(frozen=True)

    start: Month
    end: Month


class Tour(BaseModel):
    """Locale-resolved tour record as returned by the catalogue."""

    model_config = ConfigDict(frozen=True)

    id: str
    slug: str
    name: str
    description: str = ""
    duration_hours: float = Field(..., gt=0)
    price_from: int = Field(..., gt=0)
    price_to: int | None = None
    difficulty_level: str = "easy"
    categories: tuple[str, ...] = ()
    season: Season
    highlights: tuple[str, ...] = ()
    included: tuple[str, ...] = ()
    meeting_point: str | None = None
    image_url: str | None = None
    booking_url: str | None = None


class RecurrenceEntry(BaseModel):
    """Weekly departure configuration for one tour."""

    model_config = ConfigDict(frozen=True)

    tour_slug: str
    departure_time: ClockTime
    days_of_week: frozenset[Weekday]
    exceptions: frozenset[date] = frozenset()  # Dates the departure is cancelled


class ScheduledInstance(BaseModel):
    """One occurrence of a tour on a queried day."""

    model_config = ConfigDict(frozen=True)

    tour: Tour
    departure_time: ClockTime
    end_time: ClockTime


class DaySchedule(BaseModel):
    """All scheduled instances for one calendar date."""

    date: date
    instances: list[ScheduledInstance]


class Category(BaseModel):
    """Locale-resolved tour category."""

    id: str
    slug: str
    name: str
