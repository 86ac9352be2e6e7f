"""Provenance helpers for catalogue adapters."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, TypeVar

from backend.app.models.common import Provenance

T = TypeVar("T")


@dataclass
class CatalogueResult(Generic[T]):
    """Wrapper for catalogue reads with provenance metadata."""

    value: T
    provenance: Provenance


def provenance_for_fixture(source: str, ref_id: str | None = None) -> Provenance:
    """Create provenance for fixture-based catalogue reads.

    Args:
        source: Source identifier (e.g., "fixtures.tours")
        ref_id: Optional reference ID (e.g., the language code)

    Returns:
        Provenance with source=adapter-specific string, fetched_at=now(UTC), cache_hit=False
    """
    return Provenance(
        source=f"catalogue.{source}",
        ref_id=f"{source}/{ref_id}" if ref_id else source,
        source_url=f"fixtures://{source}/{ref_id}" if ref_id else f"fixtures://{source}",
        fetched_at=datetime.now(UTC),
        cache_hit=False,
    )
