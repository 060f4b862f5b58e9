"""Shared fixtures: settings and a fake restrictions provider."""

from __future__ import annotations

import json
from typing import Any, Callable, List, Optional

import httpx
import pytest
import pytest_asyncio

from entry_check.config import Settings


SAMPLE_PAYLOAD = {
    "origin": {"name": "United States", "country_code": "US", "type": "country_code"},
    "destination": {"name": "France", "country_code": "FR", "type": "country_code"},
    "authorization_status": "restricted",
    "summary": "Travel to France is restricted.",
    "details": "Only essential travel is allowed.",
    "start_date": "2020-10-15",
    "end_date": "",
    "updated_at": "2020-10-14T09:30:00Z",
    "requirements": [
        {
            "category": {"id": "health", "name": "Health"},
            "sub_category": {"id": "covid_test", "name": "COVID-19 test"},
            "summary": "A negative PCR test taken within 72 hours is required.",
            "details": "Children under 11 are exempt.",
            "start_date": "2020-08-01",
            "end_date": "",
            "documents": [
                {"title": "Sworn statement", "document_url": "https://example.org/statement.pdf"},
                {"title": "Form A"},
            ],
            "severity": "high",
        }
    ],
    "source": "sandbox",
}


class FakeProvider:
    """Callable for ``httpx.MockTransport`` that records every request."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.content: bytes = json.dumps(SAMPLE_PAYLOAD).encode()
        self.handler: Optional[Callable[[httpx.Request], Any]] = None

    def reply(self, status_code: int = 200, *, json_body: Any = None, text: Optional[str] = None) -> None:
        self.status_code = status_code
        if json_body is not None:
            self.content = json.dumps(json_body).encode()
        elif text is not None:
            self.content = text.encode()

    @property
    def calls(self) -> int:
        return len(self.requests)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is not None:
            return await self.handler(request)
        return httpx.Response(self.status_code, content=self.content)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key="test-key",
        base_url="https://provider.test/travelsafe/restrictions",
        request_timeout=2.0,
    )


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest_asyncio.fixture
async def http_client(provider):
    async with httpx.AsyncClient(transport=httpx.MockTransport(provider)) as client:
        yield client


@pytest.fixture
def sample_payload() -> dict:
    return json.loads(json.dumps(SAMPLE_PAYLOAD))
