"""Unit tests for entry_check.utils."""

from datetime import datetime, timezone

import pytest

from entry_check.utils import excerpt, format_display_date, to_title_case


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("allowed", "Allowed"),
        ("RESTRICTED", "Restricted"),
        ("not allowed", "Not Allowed"),
        ("pArTiAlLy  open", "Partially  Open"),
        ("partially-restricted", "Partially-Restricted"),
        ("not_allowed", "Not_allowed"),
        ("", ""),
    ],
)
def test_to_title_case(raw, expected):
    assert to_title_case(raw) == expected


def test_format_display_date_handles_iso_dates():
    assert format_display_date("2020-10-15") == "Thursday Oct 15 2020"
    assert format_display_date("2020-10-15T08:00:00Z") == "Thursday Oct 15 2020"
    assert format_display_date(datetime(2020, 10, 14, tzinfo=timezone.utc)) == "Wednesday Oct 14 2020"


@pytest.mark.parametrize("raw", ["", "mid October", "15/10/2020"])
def test_format_display_date_passes_other_strings_through(raw):
    assert format_display_date(raw) == raw


def test_format_display_date_none_is_empty():
    assert format_display_date(None) == ""


def test_excerpt_caps_length_and_collapses_whitespace():
    assert excerpt("a\n  b") == "a b"
    assert excerpt("x" * 50, max_chars=10) == "x" * 10 + "..."
