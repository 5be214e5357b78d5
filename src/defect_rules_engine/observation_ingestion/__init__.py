"""Observation ingestion exports."""

from .observation_models import ObservationReadResult, ObservationRow
from .workbook_reader import ObservationTemplateError, read_observations

__all__ = [
    "ObservationReadResult",
    "ObservationRow",
    "ObservationTemplateError",
    "read_observations",
]
