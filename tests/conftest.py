"""Shared pytest fixtures for all test suites."""

import pytest
from fastapi.testclient import TestClient

from backend.app.adapters.fixtures import load_activities
from backend.app.main import app
from backend.app.models.activity import Activity
from backend.app.models.tour import Season, Tour


def _make_tour(slug: str, duration: float, season_start: int, season_end: int) -> Tour:
    return Tour(
        id=slug,
        slug=slug,
        name=slug,
        duration_hours=duration,
        price_from=500,
        season=Season(start=season_start, end=season_end),
    )


@pytest.fixture
def reference_tours() -> list[Tour]:
    """The seven scheduled tours with their reference durations and seasons."""
    return [
        _make_tour("arctic-king-crab-cruise", 4, 10, 3),  # Oct-Mar
        _make_tour("classic-arctic-fjord-cruise", 3, 1, 12),  # Year-round
        _make_tour("midday-arctic-explorer", 3, 5, 9),  # May-Sep
        _make_tour("evening-polar-expedition", 4, 1, 12),  # Year-round
        _make_tour("northern-lights-fjord-cruise", 3.5, 9, 3),  # Sep-Mar
        _make_tour("jazz-cruise", 2, 6, 8),  # Jun-Aug
        _make_tour("captains-secret-bars", 3, 1, 12),  # Year-round
    ]


@pytest.fixture
def catalogue_lookup(reference_tours: list[Tour]) -> dict[str, Tour]:
    """Slug -> Tour lookup over the reference tours."""
    return {t.slug: t for t in reference_tours}


@pytest.fixture
def activities() -> tuple[Activity, ...]:
    """The shipped filler-activity catalogue."""
    return load_activities()


@pytest.fixture
def client() -> TestClient:
    """Create test client."""
    return TestClient(app)
