"""Turn raw form input into an outbound provider query."""

from __future__ import annotations

from urllib.parse import quote

from .config import DEFAULT_BASE_URL
from .errors import ValidationError
from .models import OutboundQuery


LOCATION_TYPE = "country_code"
# The sandbox only serves data for this date.
QUERY_DATE = "2020-10-15"


def _require(value: str | None, field_name: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"Please provide the {field_name} country code.", field_name=field_name)
    return cleaned


def _encode(value: str) -> str:
    return quote(value, safe="")


def build_query(
    origin: str | None,
    destination: str | None,
    *,
    base_url: str = DEFAULT_BASE_URL,
) -> OutboundQuery:
    """Validate both locations and build the restrictions query.

    Values are trimmed and percent-encoded exactly once; callers pass raw
    input, never pre-escaped text.
    """

    origin_value = _require(origin, "origin")
    destination_value = _require(destination, "destination")

    params = (
        ("destination", _encode(destination_value)),
        ("destination_type", LOCATION_TYPE),
        ("origin", _encode(origin_value)),
        ("origin_type", LOCATION_TYPE),
        ("date", QUERY_DATE),
    )
    return OutboundQuery(url=base_url, params=params)
