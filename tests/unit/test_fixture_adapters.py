"""Tests for fixture-based catalogue adapters."""

from backend.app.adapters.fixtures import fetch_categories, fetch_tour, fetch_tours, load_activities
from backend.app.models.common import ActivityType


def test_fetch_tours_returns_catalogue() -> None:
    """Test that fetch_tours returns Tour objects with provenance."""
    result = fetch_tours(language="en")

    # Verify CatalogueResult structure
    assert result.value is not None
    assert result.provenance.source == "catalogue.fixtures.tours"
    assert result.provenance.ref_id is not None
    assert "fixtures.tours" in result.provenance.ref_id
    assert result.provenance.cache_hit is False

    tours = result.value
    assert len(tours) == 7
    assert len({t.slug for t in tours}) == 7

    crab = tours[0]
    assert crab.slug == "arctic-king-crab-cruise"
    assert crab.name == "Arctic King Crab Cruise"
    assert crab.duration_hours == 4
    assert crab.price_from == 1490
    assert (crab.season.start, crab.season.end) == (10, 3)
    assert "food" in crab.categories


def test_fetch_tours_resolves_language() -> None:
    """Test that translated fields use the requested language."""
    tours = {t.slug: t for t in fetch_tours(language="de").value}

    assert tours["northern-lights-fjord-cruise"].name == "Nordlicht-Fjordfahrt"


def test_fetch_tours_falls_back_to_english() -> None:
    """Test that untranslated tours fall back to English."""
    tours = {t.slug: t for t in fetch_tours(language="de").value}

    assert tours["jazz-cruise"].name == "Midnight Sun Jazz Cruise"
    assert tours["jazz-cruise"].price_from == 690


def test_fetch_tour_by_slug() -> None:
    """Test single-tour lookup."""
    result = fetch_tour("captains-secret-bars", language="en")

    assert result.value is not None
    assert result.value.duration_hours == 3
    assert result.provenance.ref_id == "fixtures.tours/en/captains-secret-bars"


def test_fetch_tour_unknown_slug() -> None:
    """Test that an unknown slug yields no tour rather than an error."""
    assert fetch_tour("does-not-exist", language="en").value is None


def test_fetch_categories() -> None:
    """Test category names resolve per language with English fallback."""
    categories = {c.slug: c for c in fetch_categories(language="de").value}

    assert len(categories) == 6
    assert categories["fjord"].name == "Fjordblicke"
    assert categories["nightlife"].name == "Nightlife"


def test_load_activities() -> None:
    """Test the activity catalogue loads in catalogue order."""
    activities = load_activities()

    assert len(activities) == 20
    assert activities[0].id == "bonnna"
    assert activities[0].type == ActivityType.cafe
    assert all(a.duration_minutes > 0 for a in activities)
    assert len({a.id for a in activities}) == len(activities)
