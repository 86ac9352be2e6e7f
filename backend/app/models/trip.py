"""Trip models - user selections and the plan rebuilt from them."""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.app.models.common import ClockTime, InterestCategory


class SelectionKey(BaseModel):
    """One (date, tour) pick. Unique per pair."""

    model_config = ConfigDict(frozen=True)

    date: date
    tour_slug: str

    def __str__(self) -> str:
        return f"{self.date.isoformat()}:{self.tour_slug}"


class PlannedTour(BaseModel):
    """Snapshot of a tour taken when the plan was built."""

    model_config = ConfigDict(frozen=True)

    tour_slug: str
    date: date
    tour_name: str
    duration_hours: float
    price: int
    departure_time: ClockTime
    end_time: ClockTime


class TripPlan(BaseModel):
    """Itinerary derived from a selection set and a headcount."""

    id: str
    start_date: date
    end_date: date
    person_count: int = Field(..., ge=1)
    tours: Annotated[list[PlannedTour], Field(min_length=1)]

    @model_validator(mode="after")
    def validate_date_range(self) -> "TripPlan":
        """Ensure start/end match the dates actually spanned by tours."""
        dates = [t.date for t in self.tours]
        if self.start_date != min(dates) or self.end_date != max(dates):
            raise ValueError(
                f"date range {self.start_date}..{self.end_date} does not match "
                f"tours {min(dates)}..{max(dates)}"
            )
        return self


class TripStats(BaseModel):
    """Aggregate numbers shown on the trip summary."""

    tour_count: int
    day_count: int
    total_price_per_person: int
    total_price_all_persons: int


class SessionState(BaseModel):
    """Selection blob carried across page reloads by the client."""

    model_config = ConfigDict(populate_by_name=True)

    selected_keys: list[str] = Field(default_factory=list, alias="selectedKeys")
    person_count: int = Field(1, ge=1, alias="personCount")
    interests: list[InterestCategory] = Field(default_factory=list)
