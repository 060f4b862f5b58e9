"""Utility helpers."""

from datetime import date, datetime
import re
from typing import Optional, Union

FRIENDLY_DATE_FMT = "%A %b %d %Y"

_WORD = re.compile(r"\w+")


def to_title_case(text: str) -> str:
    """Uppercase the first letter of each word and lowercase the rest."""

    if not text:
        return ""
    return _WORD.sub(lambda match: match.group(0)[:1].upper() + match.group(0)[1:].lower(), text)


def excerpt(text: str, max_chars: int = 200) -> str:
    text = " ".join(text.split())
    if len(text) > max_chars:
        return text[:max_chars].rstrip() + "..."
    return text


def _parse_iso(value: str) -> Optional[datetime]:
    if not value:
        return None
    try:
        if "T" in value:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return None


def format_display_date(value: Union[str, date, datetime, None]) -> str:
    """Return a user-friendly date like 'Thursday Oct 15 2020'.

    Strings that are not ISO dates are shown as given.
    """

    if value is None:
        return ""
    if isinstance(value, (date, datetime)):
        return value.strftime(FRIENDLY_DATE_FMT)
    parsed = _parse_iso(value)
    if not parsed:
        return value
    return parsed.strftime(FRIENDLY_DATE_FMT)
