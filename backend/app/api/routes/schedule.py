"""Schedule endpoints - tours running on a date or through a week."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from backend.app.api.deps import get_catalogue
from backend.app.models.tour import DaySchedule, Tour
from backend.app.scheduling.scheduler import get_scheduled_instances_for_date, get_week_schedule, week_start

router = APIRouter(prefix="/schedule", tags=["schedule"])


class WeekScheduleResponse(BaseModel):
    """Response for GET /schedule/week."""

    week_start: date
    days: list[DaySchedule]


@router.get("/day", response_model=DaySchedule)
async def day_schedule(
    tours: Annotated[list[Tour], Depends(get_catalogue)],
    day: Annotated[date, Query(alias="date", description="ISO date YYYY-MM-DD")],
) -> DaySchedule:
    """Tours departing on one date, ordered by departure time."""
    return DaySchedule(date=day, instances=get_scheduled_instances_for_date(day, tours))


@router.get("/week", response_model=WeekScheduleResponse)
async def week_schedule(
    tours: Annotated[list[Tour], Depends(get_catalogue)],
    day: Annotated[date, Query(alias="date", description="Any date in the week")],
) -> WeekScheduleResponse:
    """Monday-to-Sunday schedule for the week containing `date`."""
    return WeekScheduleResponse(week_start=week_start(day), days=get_week_schedule(day, tours))
