"""Trip endpoints - selection toggling, plan rebuild, calendar export and sharing.

The selection set lives in the client's session blob; every request sends
it and every response returns a new one. Nothing is stored server-side.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel

from backend.app.api.deps import get_catalogue
from backend.app.export.ics import generate_ics
from backend.app.models.itinerary import DayItinerary
from backend.app.models.tour import Tour
from backend.app.models.trip import SessionState, TripPlan, TripStats
from backend.app.planning.itinerary import build_itinerary
from backend.app.planning.selection import (
    InvalidSelectionKeyError,
    keys_from_session,
    parse_selection_key,
    session_from_keys,
    toggle_selection,
)
from backend.app.planning.share import InvalidShareTokenError, decode_share_token, encode_share_token
from backend.app.planning.trip import build_trip_plan, compute_stats

router = APIRouter(prefix="/trip", tags=["trip"])


class ToggleRequest(BaseModel):
    """Request body for POST /trip/toggle."""

    session: SessionState
    key: str


class TripPlanResponse(BaseModel):
    """Response for POST /trip/plan. plan is null when nothing is selected."""

    plan: TripPlan | None
    stats: TripStats | None
    days: list[DayItinerary]


class ShareResponse(BaseModel):
    """Response for POST /trip/share."""

    token: str


def _bad_request(e: ValueError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def plan_from_session(session: SessionState, tours: list[Tour]) -> TripPlan | None:
    """Rebuild the plan for a session blob.

    Raises:
        HTTPException: 400 if a selection key is malformed
    """
    try:
        keys = keys_from_session(session)
    except InvalidSelectionKeyError as e:
        raise _bad_request(e) from e
    return build_trip_plan(keys, {t.slug: t for t in tours}, session.person_count)


def _require_plan(session: SessionState, tours: list[Tour]) -> TripPlan:
    plan = plan_from_session(session, tours)
    if plan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No trip selected")
    return plan


@router.post("/toggle", response_model=SessionState)
async def toggle(request: ToggleRequest) -> SessionState:
    """Add or remove one (date, tour) pick and return the new session blob."""
    try:
        keys = keys_from_session(request.session)
        key = parse_selection_key(request.key)
    except InvalidSelectionKeyError as e:
        raise _bad_request(e) from e

    return session_from_keys(
        toggle_selection(keys, key),
        request.session.person_count,
        request.session.interests,
    )


@router.post("/plan", response_model=TripPlanResponse)
async def plan(
    session: SessionState,
    tours: Annotated[list[Tour], Depends(get_catalogue)],
) -> TripPlanResponse:
    """Rebuild the trip plan, its statistics and the day-by-day itinerary."""
    trip = plan_from_session(session, tours)
    if trip is None:
        return TripPlanResponse(plan=None, stats=None, days=[])

    return TripPlanResponse(
        plan=trip,
        stats=compute_stats(trip),
        days=build_itinerary(trip, session.interests),
    )


@router.post("/ics")
async def export_ics(
    session: SessionState,
    tours: Annotated[list[Tour], Depends(get_catalogue)],
) -> Response:
    """Download the plan as an iCalendar file."""
    trip = _require_plan(session, tours)
    return Response(
        content=generate_ics(trip),
        media_type="text/calendar; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="trip-{trip.start_date}.ics"'},
    )


@router.post("/share", response_model=ShareResponse)
async def share(
    session: SessionState,
    tours: Annotated[list[Tour], Depends(get_catalogue)],
) -> ShareResponse:
    """Encode the plan's selections and the visitor's interests as a shareable token."""
    return ShareResponse(token=encode_share_token(_require_plan(session, tours), session.interests))


@router.get("/share/{token}", response_model=SessionState)
async def open_share(token: str) -> SessionState:
    """Restore a session blob from a share token."""
    try:
        return decode_share_token(token)
    except InvalidShareTokenError as e:
        raise _bad_request(e) from e
