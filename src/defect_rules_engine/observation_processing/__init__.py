"""Observation processing exports."""

from .boundary_mappers import to_observations
from .observation_processor import (
    process_observation,
    process_observations,
    requires_issue_regeneration,
)
from .processing_contracts import Observation, ObservationOutcome
from .urgency_policy import derive_urgency, resolve_urgency

__all__ = [
    "Observation",
    "ObservationOutcome",
    "derive_urgency",
    "process_observation",
    "process_observations",
    "requires_issue_regeneration",
    "resolve_urgency",
    "to_observations",
]
