"""Common types and enums shared across all models."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, Field

# Zero-padded 24h wall-clock time; lexicographic order equals chronological order
ClockTime = Annotated[str, Field(pattern=r"^([01]\d|2[0-3]):[0-5]\d$")]

# Month of year, 1 = January
Month = Annotated[int, Field(ge=1, le=12)]

# Day of week, 0 = Sunday ... 6 = Saturday
Weekday = Annotated[int, Field(ge=0, le=6)]


class InterestCategory(str, Enum):
    """User interest tag matched by filler activities."""

    fjord = "fjord"
    northern_lights = "northern-lights"
    food = "food"
    culture = "culture"
    wildlife = "wildlife"
    nightlife = "nightlife"


class ActivityType(str, Enum):
    """Kind of filler activity."""

    cafe = "cafe"
    museum = "museum"
    attraction = "attraction"
    walk = "walk"
    shopping = "shopping"
    viewpoint = "viewpoint"
    indoor = "indoor"


class Provenance(BaseModel):
    """Provenance metadata for catalogue reads."""

    source: str  # Adapter-specific identifier (e.g., "catalogue.fixtures.tours")
    ref_id: str | None = None
    source_url: str | None = None
    fetched_at: datetime
    cache_hit: bool | None = None
