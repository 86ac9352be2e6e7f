"""Tour catalogue endpoints - list, detail and categories."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from backend.app.adapters.fixtures import fetch_categories, fetch_tour
from backend.app.api.deps import get_catalogue, get_language
from backend.app.models.tour import Category, Tour

router = APIRouter(tags=["tours"])


class TourListResponse(BaseModel):
    """Response for GET /tours."""

    tours: list[Tour]
    total: int


class TourResponse(BaseModel):
    """Response for GET /tours/{slug}."""

    tour: Tour


class CategoryListResponse(BaseModel):
    """Response for GET /categories."""

    categories: list[Category]


@router.get("/tours", response_model=TourListResponse)
async def list_tours(
    tours: Annotated[list[Tour], Depends(get_catalogue)],
    category: str | None = None,
    duration_min: Annotated[float | None, Query(ge=0)] = None,
    duration_max: Annotated[float | None, Query(ge=0)] = None,
    price_max: Annotated[int | None, Query(ge=0)] = None,
    sort: Literal["price", "duration", "name"] | None = None,
    order: Literal["asc", "desc"] = "asc",
) -> TourListResponse:
    """List tours with optional filters and sorting.

    Args:
        tours: Locale-resolved catalogue
        category: Only tours tagged with this category slug
        duration_min: Minimum duration in hours
        duration_max: Maximum duration in hours
        price_max: Maximum base price per person
        sort: Sort key
        order: Sort direction

    Returns:
        Filtered tours and their count
    """
    if category:
        tours = [t for t in tours if category in t.categories]
    if duration_min is not None:
        tours = [t for t in tours if t.duration_hours >= duration_min]
    if duration_max is not None:
        tours = [t for t in tours if t.duration_hours <= duration_max]
    if price_max is not None:
        tours = [t for t in tours if t.price_from <= price_max]

    if sort:
        sort_keys = {
            "price": lambda t: t.price_from,
            "duration": lambda t: t.duration_hours,
            "name": lambda t: t.name.lower(),
        }
        tours = sorted(tours, key=sort_keys[sort], reverse=order == "desc")

    return TourListResponse(tours=tours, total=len(tours))


@router.get("/tours/{slug}", response_model=TourResponse)
async def get_tour(slug: str, language: Annotated[str, Depends(get_language)]) -> TourResponse:
    """Get one tour by slug.

    Raises:
        HTTPException: 404 if the slug is unknown
    """
    tour = fetch_tour(slug, language).value
    if tour is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tour not found")
    return TourResponse(tour=tour)


@router.get("/categories", response_model=CategoryListResponse)
async def list_categories(language: Annotated[str, Depends(get_language)]) -> CategoryListResponse:
    """List tour categories in the request language."""
    return CategoryListResponse(categories=fetch_categories(language).value)
