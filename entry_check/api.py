"""FastAPI application exposing the entry requirements checker."""

from dataclasses import asdict
from typing import Any, AsyncIterator, Dict, Optional

import httpx
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from .config import Settings, get_settings
from .errors import ConfigurationError
from .models import TripRequest
from .pipeline import FailureKind, PipelineOutcome, resolve_trip
from .render import render_error, render_form, render_result


app = FastAPI(title="Entry Requirements Checker", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ],
    allow_credentials=False,
    allow_methods=["GET"],
    allow_headers=["*"],
)


FAILURE_STATUS: Dict[FailureKind, int] = {
    FailureKind.VALIDATION: 400,
    FailureKind.TRANSPORT: 502,
    FailureKind.API: 502,
    FailureKind.DECODE: 502,
    FailureKind.TIMEOUT: 504,
}


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """One outbound client per incoming request."""

    async with httpx.AsyncClient(timeout=None) as client:
        yield client


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> HTMLResponse:
    return HTMLResponse(render_error("The service is not configured yet."), status_code=500)


async def _resolve(
    origin: Optional[str],
    destination: Optional[str],
    settings: Settings,
    client: httpx.AsyncClient,
) -> PipelineOutcome:
    trip = TripRequest(origin=origin or "", destination=destination or "")
    return await resolve_trip(trip, settings, client=client)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index() -> HTMLResponse:
    return HTMLResponse(render_form())


@app.get("/searchEntry", response_class=HTMLResponse)
async def search_entry(
    origin: Optional[str] = Query(None, alias="from"),
    destination: Optional[str] = Query(None),
    to: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> HTMLResponse:
    outcome = await _resolve(origin, destination or to, settings, client)
    if outcome.view is None:
        return HTMLResponse(
            render_error(outcome.message),
            status_code=FAILURE_STATUS[outcome.failure],
        )
    return HTMLResponse(render_result(outcome.view))


@app.get("/api/requirements")
async def requirements(
    origin: Optional[str] = Query(None, alias="from"),
    destination: Optional[str] = Query(None),
    to: Optional[str] = Query(None),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> Dict[str, Any]:
    outcome = await _resolve(origin, destination or to, settings, client)
    if outcome.view is None:
        raise HTTPException(
            status_code=FAILURE_STATUS[outcome.failure],
            detail=outcome.message,
        )
    return asdict(outcome.view)
