"""Typed errors raised by the trip requirements pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class EntryCheckError(Exception):
    """Base error for every pipeline stage.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception, kept for logs
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class ValidationError(EntryCheckError):
    """User input was empty or unusable. No network call was made."""

    field_name: str = ""


@dataclass
class TransportError(EntryCheckError):
    """The provider could not be reached (DNS, connect, read, size limit)."""


@dataclass
class ApiError(EntryCheckError):
    """The provider answered with a status code >= 400.

    Attributes:
        status_code: HTTP status returned by the provider
        reason_phrase: Reason text of the status line
        body: Response body text, empty when it could not be read
    """

    status_code: int = 0
    reason_phrase: str = ""
    body: str = ""

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason_phrase}".strip()


@dataclass
class DecodeError(EntryCheckError):
    """The provider payload was not the expected JSON shape."""


@dataclass
class ConfigurationError(EntryCheckError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Environment variable that was missing or invalid
    """

    setting_name: str = ""
