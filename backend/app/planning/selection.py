"""Selection keys and the caller-held selection set.

The selection set is a value: every operation returns a new frozenset and
never mutates its input. Persistence is the caller's concern.
"""

from collections.abc import Iterable
from datetime import date

from backend.app.models.common import InterestCategory
from backend.app.models.trip import SelectionKey, SessionState


class InvalidSelectionKeyError(ValueError):
    """Selection key string is not "YYYY-MM-DD:slug"."""

    pass


def parse_selection_key(raw: str) -> SelectionKey:
    """Parse the wire form "YYYY-MM-DD:slug".

    Raises:
        InvalidSelectionKeyError: If the date or slug part is malformed
    """
    date_part, sep, slug = raw.partition(":")
    if not sep or not slug:
        raise InvalidSelectionKeyError(f"Selection key must be 'YYYY-MM-DD:slug', got {raw!r}")
    try:
        day = date.fromisoformat(date_part)
    except ValueError as e:
        raise InvalidSelectionKeyError(f"Invalid date in selection key {raw!r}") from e
    return SelectionKey(date=day, tour_slug=slug)


def format_selection_key(key: SelectionKey) -> str:
    """Wire form of a selection key."""
    return str(key)


def toggle_selection(keys: frozenset[SelectionKey], key: SelectionKey) -> frozenset[SelectionKey]:
    """Add the key if absent, remove it if present."""
    return keys ^ {key}


def keys_from_session(state: SessionState) -> frozenset[SelectionKey]:
    """Parse the selection keys held in a session blob."""
    return frozenset(parse_selection_key(raw) for raw in state.selected_keys)


def session_from_keys(
    keys: Iterable[SelectionKey],
    person_count: int,
    interests: Iterable[InterestCategory] = (),
) -> SessionState:
    """Build a session blob; keys are emitted in (date, slug) order."""
    ordered = sorted(keys, key=lambda k: (k.date, k.tour_slug))
    return SessionState(
        selected_keys=[format_selection_key(k) for k in ordered],
        person_count=person_count,
        interests=list(interests),
    )
