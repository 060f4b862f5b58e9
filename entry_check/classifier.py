"""Split provider responses into usable bodies and API failures."""

from __future__ import annotations

from .errors import ApiError
from .models import RawResponse


def classify(raw: RawResponse) -> bytes:
    """Return the body of a successful response or raise ``ApiError``.

    Every status >= 400 fails the same way; client and server errors are
    not told apart and nothing is retried.
    """

    if raw.status_code >= 400:
        if raw.body is None:
            raise ApiError(
                raw.status_line,
                status_code=raw.status_code,
                reason_phrase=raw.reason_phrase,
            )
        body = raw.body.decode("utf-8", errors="replace")
        raise ApiError(
            f"{raw.status_line}: {body}",
            status_code=raw.status_code,
            reason_phrase=raw.reason_phrase,
            body=body,
        )
    return raw.body or b""
