"""Fixture-based catalogue adapters for tours, categories and activities.

Tour and category records carry per-language translations; reads resolve
the requested language and fall back to English field by field.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from backend.app.adapters.provenance import CatalogueResult, provenance_for_fixture
from backend.app.config import get_settings
from backend.app.models.activity import Activity
from backend.app.models.tour import Category, Season, Tour
from backend.app.utils.metrics import catalogue_reads_total

FALLBACK_LANGUAGE = "en"


@lru_cache
def _load_json(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def _fixture(name: str) -> Any:
    return _load_json(get_settings().fixtures_dir / name)


def _resolve_translation(translations: dict[str, Any], language: str) -> dict[str, Any]:
    """Requested language merged over the English fallback."""
    resolved = dict(translations.get(FALLBACK_LANGUAGE, {}))
    resolved.update(translations.get(language, {}))
    return resolved


def _build_tour(td: dict[str, Any], language: str) -> Tour:
    tr = _resolve_translation(td.get("translations", {}), language)
    return Tour(
        id=td["id"],
        slug=td["slug"],
        name=tr.get("name", td["slug"]),
        description=tr.get("description", ""),
        duration_hours=td["duration_hours"],
        price_from=td["price_from"],
        price_to=td.get("price_to"),
        difficulty_level=td["difficulty_level"],
        categories=td.get("categories", []),
        season=Season(start=td["season_start"], end=td["season_end"]),
        highlights=tr.get("highlights", []),
        included=tr.get("included", []),
        meeting_point=tr.get("meeting_point"),
        image_url=td.get("image_url"),
        booking_url=td.get("booking_url"),
    )


def fetch_tours(language: str) -> CatalogueResult[list[Tour]]:
    """Fetch the locale-resolved tour catalogue.

    Args:
        language: Language code (e.g., "en", "de")

    Returns:
        CatalogueResult wrapping list of Tour objects with provenance
    """
    catalogue_reads_total.labels(resource="tours", language=language).inc()
    tours = [_build_tour(td, language) for td in _fixture("tours.json")]
    return CatalogueResult(value=tours, provenance=provenance_for_fixture("fixtures.tours", language))


def fetch_tour(slug: str, language: str) -> CatalogueResult[Tour | None]:
    """Fetch one tour by slug; value is None when the slug is unknown."""
    catalogue_reads_total.labels(resource="tour", language=language).inc()
    match = next((td for td in _fixture("tours.json") if td["slug"] == slug), None)
    return CatalogueResult(
        value=_build_tour(match, language) if match else None,
        provenance=provenance_for_fixture("fixtures.tours", f"{language}/{slug}"),
    )


def fetch_categories(language: str) -> CatalogueResult[list[Category]]:
    """Fetch tour categories with names in the requested language."""
    catalogue_reads_total.labels(resource="categories", language=language).inc()
    categories = [
        Category(
            id=cd["id"],
            slug=cd["slug"],
            name=cd["translations"].get(language, cd["translations"][FALLBACK_LANGUAGE]),
        )
        for cd in _fixture("categories.json")
    ]
    return CatalogueResult(
        value=categories, provenance=provenance_for_fixture("fixtures.categories", language)
    )


def load_activities() -> tuple[Activity, ...]:
    """Static filler-activity catalogue, in catalogue order."""
    return tuple(Activity(**ad) for ad in _fixture("activities.json"))
