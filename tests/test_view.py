"""Tests for entry_check.view."""

import json

from entry_check.decoder import TripInfo, decode
from entry_check.models import DocumentLink
from entry_check.view import DOCUMENT_NOTE, project, project_document


def test_project_flattens_trip_info(sample_payload):
    view = project(decode(json.dumps(sample_payload).encode()))

    assert view.origin_name == "United States"
    assert view.destination_name == "France"
    assert view.status_label == "Restricted"
    assert view.summary == "Travel to France is restricted."
    assert view.start_date == "2020-10-15"
    assert view.updated_at == "Wednesday Oct 14 2020"
    assert len(view.requirements) == 1
    requirement = view.requirements[0]
    assert requirement.category == "Health"
    assert requirement.sub_category == "COVID-19 test"
    assert requirement.documents == (
        DocumentLink(title="Sworn statement", url="https://example.org/statement.pdf"),
        DocumentLink(title="Form A", url=""),
    )


def test_requirement_summaries_are_preserved_verbatim(sample_payload):
    summaries = ["  leading space", "UPPER and lower.", "Line\nbreak", "ünïcödé ✈"]
    sample_payload["requirements"] = [{"summary": text} for text in summaries]

    view = project(decode(json.dumps(sample_payload).encode()))

    assert [r.summary for r in view.requirements] == summaries


def test_title_case_only_applies_to_status(sample_payload):
    sample_payload["summary"] = "lower case summary"
    sample_payload["destination"]["name"] = "côte d'ivoire"

    view = project(decode(json.dumps(sample_payload).encode()))

    assert view.summary == "lower case summary"
    assert view.destination_name == "côte d'ivoire"


def test_empty_trip_info_projects_to_empty_strings():
    view = project(TripInfo())

    assert view.origin_name == ""
    assert view.status_label == ""
    assert view.start_date == ""
    assert view.updated_at == ""
    assert view.requirements == ()


def test_document_without_url_becomes_note():
    assert project_document({"title": "Form A"}) == DocumentLink(title="Form A", url="")
    assert project_document({}) == DocumentLink(title=DOCUMENT_NOTE, url="")
    assert project_document({"document_url": 42, "name": "Passenger form"}) == DocumentLink(
        title="Passenger form", url=""
    )


def test_document_url_doubles_as_title():
    link = project_document({"document_url": "https://example.org/a.pdf"})
    assert link.title == "https://example.org/a.pdf"
    assert link.has_link


def test_provider_dates_are_shown_as_given():
    info = decode(
        b'{"start_date": "2020-10-15", "updated_at": "2020-10-14T09:30:00Z",'
        b' "requirements": [{"start_date": "2020-08-01", "end_date": "2020-12-31"}]}'
    )

    view = project(info)

    assert view.start_date == "2020-10-15"
    assert view.requirements[0].start_date == "2020-08-01"
    assert view.requirements[0].end_date == "2020-12-31"
    assert view.updated_at == "Wednesday Oct 14 2020"
