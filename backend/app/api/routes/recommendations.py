"""Recommendation endpoints - gap fillers and preference-scored tours."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from backend.app.api.deps import get_catalogue
from backend.app.models.activity import Activity
from backend.app.models.common import ActivityType, InterestCategory
from backend.app.models.intent import TourPlanSuggestion, TourPreferences
from backend.app.models.tour import Tour
from backend.app.recommend.gap_filler import rank_activities, recommend
from backend.app.recommend.tour_scorer import recommend_tours

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


@router.get("/activities", response_model=list[Activity])
async def activities_for_gap(
    gap_minutes: Annotated[int, Query(ge=0)],
    count: Annotated[int, Query(ge=1, le=7)] = 3,
    interests: Annotated[list[InterestCategory] | None, Query()] = None,
) -> list[Activity]:
    """Type-diverse activities that fit a free-time gap."""
    return recommend(gap_minutes, count, interests or [])


@router.get("/activities/ranked", response_model=list[Activity])
async def ranked_activities_for_gap(
    gap_minutes: Annotated[int, Query(ge=0)],
    exclude_types: Annotated[list[ActivityType] | None, Query()] = None,
    interests: Annotated[list[InterestCategory] | None, Query()] = None,
) -> list[Activity]:
    """Every activity that fits a gap, interest matches first, then tightest fit."""
    return rank_activities(gap_minutes, exclude_types or [], interests or [])


@router.post("/tours", response_model=TourPlanSuggestion)
async def tours_for_preferences(
    prefs: TourPreferences,
    tours: Annotated[list[Tour], Depends(get_catalogue)],
) -> TourPlanSuggestion:
    """Day plan of the tours that best match the visitor's preferences.

    Raises:
        HTTPException: 503 if the catalogue is empty
    """
    if not tours:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="No tours available")
    return recommend_tours(tours, prefs)
