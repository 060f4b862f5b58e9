"""Core orchestration logic for resolving trip entry requirements.

One call to :func:`resolve_trip` walks a single submission through

    IDLE -> VALIDATING -> FETCHING -> CLASSIFYING -> DECODING -> PROJECTING -> DONE

or stops in FAILED at the first stage that raises. Nothing is retried and all
state lives in the call itself, so concurrent submissions never see each
other's data.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import httpx

from .classifier import classify
from .config import Settings
from .decoder import decode
from .errors import ApiError, DecodeError, TransportError, ValidationError
from .models import TripRequest, ViewModel
from .query import build_query
from .services.travelsafe_client import fetch
from .utils import excerpt
from .view import project


logger = logging.getLogger(__name__)


class Stage(Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    FETCHING = "fetching"
    CLASSIFYING = "classifying"
    DECODING = "decoding"
    PROJECTING = "projecting"
    DONE = "done"
    FAILED = "failed"


class FailureKind(Enum):
    VALIDATION = "validation"
    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    API = "api"
    DECODE = "decode"


TIMEOUT_MESSAGE = "The travel restrictions service timed out. Please try again."
DECODE_MESSAGE = "The travel restrictions service returned data we could not read."


@dataclass(frozen=True)
class PipelineOutcome:
    request: TripRequest
    stage: Stage
    trail: Tuple[Stage, ...]
    view: Optional[ViewModel] = None
    failure: Optional[FailureKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.stage is Stage.DONE

    @property
    def failed_at(self) -> Optional[Stage]:
        """Stage that was running when the pipeline failed."""

        if self.ok or len(self.trail) < 2:
            return None
        return self.trail[-2]


def _api_message(exc: ApiError) -> str:
    message = f"The travel restrictions service returned {exc.status_line}"
    if exc.body:
        message = f"{message}: {excerpt(exc.body)}"
    return message


def _enter(trail: List[Stage], stage: Stage) -> None:
    logger.debug("Stage %s -> %s", trail[-1].value, stage.value)
    trail.append(stage)


async def _run_stages(
    request: TripRequest,
    settings: Settings,
    client: Optional[httpx.AsyncClient],
    trail: List[Stage],
) -> ViewModel:
    _enter(trail, Stage.VALIDATING)
    query = build_query(
        request.origin,
        request.destination,
        base_url=settings.base_url,
    )

    _enter(trail, Stage.FETCHING)
    raw = await fetch(query, settings.api_key, client=client, max_body_bytes=settings.max_body_bytes)

    _enter(trail, Stage.CLASSIFYING)
    body = classify(raw)

    _enter(trail, Stage.DECODING)
    info = decode(body)

    _enter(trail, Stage.PROJECTING)
    return project(info)


async def resolve_trip(
    request: TripRequest,
    settings: Settings,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> PipelineOutcome:
    """Run one submission through every stage, bounded by ``settings.request_timeout``."""

    trail: List[Stage] = [Stage.IDLE]

    def failed(kind: FailureKind, message: str) -> PipelineOutcome:
        logger.warning(
            "Trip %s -> %s failed while %s (%s)",
            request.origin,
            request.destination,
            trail[-1].value,
            kind.value,
        )
        trail.append(Stage.FAILED)
        return PipelineOutcome(
            request=request,
            stage=Stage.FAILED,
            trail=tuple(trail),
            failure=kind,
            message=message,
        )

    try:
        view = await asyncio.wait_for(
            _run_stages(request, settings, client, trail),
            timeout=settings.request_timeout,
        )
    except ValidationError as exc:
        return failed(FailureKind.VALIDATION, exc.message)
    except TransportError as exc:
        return failed(
            FailureKind.TRANSPORT,
            f"Could not reach the travel restrictions service: {exc}",
        )
    except ApiError as exc:
        return failed(FailureKind.API, _api_message(exc))
    except DecodeError:
        return failed(FailureKind.DECODE, DECODE_MESSAGE)
    except asyncio.TimeoutError:
        return failed(FailureKind.TIMEOUT, TIMEOUT_MESSAGE)

    trail.append(Stage.DONE)
    logger.info(
        "Trip %s -> %s resolved with %s requirement(s)",
        request.origin,
        request.destination,
        len(view.requirements),
    )
    return PipelineOutcome(
        request=request,
        stage=Stage.DONE,
        trail=tuple(trail),
        view=view,
    )
