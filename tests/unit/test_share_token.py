"""Tests for shareable trip tokens."""

import base64
import json
from datetime import date

import pytest

from backend.app.models.common import InterestCategory
from backend.app.models.tour import Tour
from backend.app.models.trip import SelectionKey
from backend.app.planning.selection import keys_from_session
from backend.app.planning.share import InvalidShareTokenError, decode_share_token, encode_share_token
from backend.app.planning.trip import build_trip_plan


def make_token(payload: object) -> str:
    """Helper to encode an arbitrary payload the way tokens are encoded."""
    raw = json.dumps(payload).encode()
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def test_token_restores_selection(catalogue_lookup: dict[str, Tour]) -> None:
    """Test a shared plan decodes to the same keys and headcount."""
    keys = frozenset(
        {
            SelectionKey(date=date(2026, 1, 5), tour_slug="arctic-king-crab-cruise"),
            SelectionKey(date=date(2026, 1, 9), tour_slug="captains-secret-bars"),
        }
    )
    plan = build_trip_plan(keys, catalogue_lookup, person_count=4)
    assert plan is not None

    token = encode_share_token(plan)
    state = decode_share_token(token)

    assert "=" not in token
    assert state.person_count == 4
    assert keys_from_session(state) == keys


def test_token_restores_interests(catalogue_lookup: dict[str, Tour]) -> None:
    """Test visitor interests travel with the shared plan."""
    keys = [SelectionKey(date=date(2026, 1, 5), tour_slug="arctic-king-crab-cruise")]
    plan = build_trip_plan(keys, catalogue_lookup, person_count=2)
    assert plan is not None

    state = decode_share_token(encode_share_token(plan, [InterestCategory.northern_lights, InterestCategory.food]))

    assert state.interests == [InterestCategory.northern_lights, InterestCategory.food]


def test_token_without_interests(catalogue_lookup: dict[str, Tour]) -> None:
    """Test tokens carrying no interests decode to an empty list."""
    keys = [SelectionKey(date=date(2026, 1, 5), tour_slug="arctic-king-crab-cruise")]
    plan = build_trip_plan(keys, catalogue_lookup, person_count=1)
    assert plan is not None

    token = encode_share_token(plan)

    assert "i" not in json.loads(base64.urlsafe_b64decode(token + "=" * (-len(token) % 4)))
    assert decode_share_token(token).interests == []


@pytest.mark.parametrize(
    "token",
    [
        "not base64 !!",
        make_token([1, 2, 3]),
        make_token({"p": 2}),
        make_token({"p": 2, "t": ["not-a-key"]}),
        make_token({"p": 0, "t": ["2026-01-05:jazz-cruise"]}),
        make_token({"p": 2, "t": ["2026-01-05:jazz-cruise"], "i": ["golf"]}),
    ],
)
def test_invalid_tokens_rejected(token: str) -> None:
    """Test garbage and malformed payloads raise InvalidShareTokenError."""
    with pytest.raises(InvalidShareTokenError):
        decode_share_token(token)
