"""Thin client for the TravelPerk travelsafe restrictions endpoint."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..errors import TransportError
from ..models import OutboundQuery, RawResponse


API_VERSION = "1"
DEFAULT_MAX_BODY_BYTES = 1024 * 1024

logger = logging.getLogger(__name__)


def build_headers(api_key: str) -> dict[str, str]:
    return {
        "Api-Version": API_VERSION,
        "Authorization": f"ApiKey {api_key}",
    }


async def _read_body(response: httpx.Response, max_body_bytes: int) -> bytes:
    chunks: list[bytes] = []
    size = 0
    async for chunk in response.aiter_bytes():
        size += len(chunk)
        if size > max_body_bytes:
            raise TransportError(
                f"Response body exceeds {max_body_bytes} bytes"
            )
        chunks.append(chunk)
    return b"".join(chunks)


async def _read_body_best_effort(response: httpx.Response, max_body_bytes: int) -> Optional[bytes]:
    try:
        return await _read_body(response, max_body_bytes)
    except (httpx.HTTPError, httpx.StreamError, TransportError) as exc:
        logger.debug("Could not read error body for %s: %s", response.status_code, exc)
        return None


async def _send(
    client: httpx.AsyncClient,
    query: OutboundQuery,
    headers: dict[str, str],
    max_body_bytes: int,
) -> RawResponse:
    try:
        async with client.stream("GET", query.full_url, headers=headers) as response:
            logger.info("Restrictions API answered %s", response.status_code)
            if response.status_code >= 400:
                body = await _read_body_best_effort(response, max_body_bytes)
            else:
                body = await _read_body(response, max_body_bytes)
            return RawResponse(
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
                body=body,
            )
    except httpx.RequestError as exc:
        raise TransportError("Restrictions API request failed", cause=exc) from exc


async def fetch(
    query: OutboundQuery,
    api_key: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    max_body_bytes: int = DEFAULT_MAX_BODY_BYTES,
) -> RawResponse:
    """Issue exactly one GET against the restrictions endpoint.

    No retry and no timeout here; the caller bounds the whole request.
    """

    headers = build_headers(api_key)
    logger.debug("GET %s", query.full_url)

    if client is not None:
        return await _send(client, query, headers, max_body_bytes)

    async with httpx.AsyncClient(timeout=None) as owned_client:
        return await _send(owned_client, query, headers, max_body_bytes)
