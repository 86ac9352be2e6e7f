"""Shareable trip links: the selection set packed into a URL-safe token."""

import base64
import binascii
import json
from collections.abc import Iterable

from pydantic import ValidationError

from backend.app.models.common import InterestCategory
from backend.app.models.trip import SessionState, TripPlan
from backend.app.planning.selection import InvalidSelectionKeyError, parse_selection_key


class InvalidShareTokenError(ValueError):
    """Share token could not be decoded into a selection."""

    pass


def encode_share_token(plan: TripPlan, interests: Iterable[InterestCategory] = ()) -> str:
    """Pack a plan's selections, headcount and visitor interests into a URL-safe token."""
    payload: dict[str, object] = {
        "s": plan.start_date.isoformat(),
        "p": plan.person_count,
        "t": [f"{t.date.isoformat()}:{t.tour_slug}" for t in plan.tours],
    }
    tags = [InterestCategory(i).value for i in interests]
    if tags:
        payload["i"] = tags
    raw = json.dumps(payload, separators=(",", ":")).encode()
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def decode_share_token(token: str) -> SessionState:
    """Unpack a share token into a session blob.

    Raises:
        InvalidShareTokenError: If the token is not a valid encoded selection
    """
    padded = token + "=" * (-len(token) % 4)
    try:
        payload = json.loads(base64.urlsafe_b64decode(padded.encode()))
        keys = payload["t"]
        for raw in keys:
            parse_selection_key(raw)
        return SessionState(selected_keys=keys, person_count=payload["p"], interests=payload.get("i", []))
    except (binascii.Error, UnicodeError, json.JSONDecodeError) as e:
        raise InvalidShareTokenError("Share token is not valid base64 JSON") from e
    except (KeyError, TypeError, AttributeError, InvalidSelectionKeyError, ValidationError) as e:
        raise InvalidShareTokenError(f"Share token payload is malformed: {e}") from e
