"""Request-scoped data models for the entry requirements checker."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TripRequest:
    origin: str
    destination: str
    requested_at: datetime = field(default_factory=_utcnow)


@dataclass(frozen=True)
class OutboundQuery:
    """A fully encoded provider query."""

    url: str
    # already percent-encoded, in wire order
    params: Tuple[Tuple[str, str], ...]

    @property
    def query_string(self) -> str:
        return "&".join(f"{key}={value}" for key, value in self.params)

    @property
    def full_url(self) -> str:
        return f"{self.url}?{self.query_string}"


@dataclass(frozen=True)
class RawResponse:
    status_code: int
    reason_phrase: str = ""
    body: Optional[bytes] = None

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason_phrase}".strip()


@dataclass(frozen=True)
class DocumentLink:
    title: str
    url: str = ""

    @property
    def has_link(self) -> bool:
        return bool(self.url)


@dataclass(frozen=True)
class RequirementView:
    category: str
    sub_category: str
    summary: str
    details: str
    start_date: str
    end_date: str
    documents: Tuple[DocumentLink, ...] = ()


@dataclass(frozen=True)
class ViewModel:
    """Flattened, rendering-ready projection of the provider answer."""

    origin_name: str
    destination_name: str
    status_label: str
    summary: str
    details: str
    start_date: str
    updated_at: str
    requirements: Tuple[RequirementView, ...] = ()
