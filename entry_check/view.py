"""Project decoded trip info into the shape the result page needs."""

from __future__ import annotations

from typing import Any, Mapping

from .decoder import RequirementEntry, TripInfo
from .models import DocumentLink, RequirementView, ViewModel
from .utils import format_display_date, to_title_case


DOCUMENT_NOTE = "Fill in documents prior to arrival"


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def project_document(document: Mapping[str, Any]) -> DocumentLink:
    """A document without a usable ``document_url`` becomes a plain note."""

    url = _text(document.get("document_url"))
    title = _text(document.get("title")) or _text(document.get("name")) or url or DOCUMENT_NOTE
    return DocumentLink(title=title, url=url)


def project_requirement(entry: RequirementEntry) -> RequirementView:
    return RequirementView(
        category=entry.category.name,
        sub_category=entry.sub_category.name,
        summary=entry.summary,
        details=entry.details,
        start_date=entry.start_date,
        end_date=entry.end_date,
        documents=tuple(project_document(doc) for doc in entry.documents),
    )


def project(info: TripInfo) -> ViewModel:
    """Flatten ``TripInfo`` into a ``ViewModel``. Never raises."""

    return ViewModel(
        origin_name=info.origin.name,
        destination_name=info.destination.name,
        status_label=to_title_case(info.authorization_status),
        summary=info.summary,
        details=info.details,
        start_date=info.start_date,
        updated_at=format_display_date(info.updated_at),
        requirements=tuple(project_requirement(entry) for entry in info.requirements),
    )
