"""Look up travel entry requirements for an origin and destination."""

from .models import TripRequest, ViewModel
from .pipeline import FailureKind, PipelineOutcome, Stage, resolve_trip

__all__ = [
    "FailureKind",
    "PipelineOutcome",
    "Stage",
    "TripRequest",
    "ViewModel",
    "resolve_trip",
]
