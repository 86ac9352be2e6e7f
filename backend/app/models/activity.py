"""Filler activity models - things to do between tours."""

from pydantic import BaseModel, ConfigDict, Field

from backend.app.models.common import ActivityType, InterestCategory


class Activity(BaseModel):
    """Short local activity that can fill a gap between tours."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: ActivityType
    interests: tuple[InterestCategory, ...] = ()
    duration_minutes: int = Field(..., gt=0)
    description: str
    location: str
    walking_minutes: int | None = None  # From the harbor
    price: str | None = None
    tip: str | None = None
