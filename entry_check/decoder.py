"""Decode the restrictions payload into an immutable ``TripInfo``."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError, model_validator

from .errors import DecodeError


logger = logging.getLogger(__name__)


class _Payload(BaseModel):
    """Base for provider shapes: read-only, unknown keys ignored, nulls treated as missing."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Location(_Payload):
    name: str = ""
    country_code: str = ""
    type: str = ""


class Category(_Payload):
    id: str = ""
    name: str = ""


class RequirementEntry(_Payload):
    category: Category = Field(default_factory=Category)
    sub_category: Category = Field(default_factory=Category)
    summary: str = ""
    details: str = ""
    start_date: str = ""
    end_date: str = ""
    # The provider publishes no document schema; keep each entry as an open mapping.
    documents: Tuple[Dict[str, Any], ...] = ()


class TripInfo(_Payload):
    origin: Location = Field(default_factory=Location)
    destination: Location = Field(default_factory=Location)
    authorization_status: str = ""
    summary: str = ""
    details: str = ""
    # Opaque display strings; the provider does not guarantee ISO dates.
    start_date: str = ""
    end_date: str = ""
    updated_at: Optional[datetime] = None
    requirements: Tuple[RequirementEntry, ...] = ()


def decode(body: bytes) -> TripInfo:
    """Parse a successful response body.

    Raises ``DecodeError`` when the body is not a JSON object or a known field
    carries the wrong primitive type.
    """

    try:
        return TripInfo.model_validate_json(body)
    except PydanticValidationError as exc:
        logger.warning("Restrictions payload rejected: %s", exc)
        raise DecodeError("Malformed restrictions payload", cause=exc) from exc
