"""Observation template generation exports."""

from .constants import (
    ALL_COLUMNS,
    COLUMN_GROUPS,
    CONTEXT_COLUMNS,
    METADATA_COLUMNS,
    OBSERVATION_COLUMNS,
    OBSERVATION_SHEET_NAME,
)
from .template_workbook_builder import generate_observation_template

__all__ = [
    "ALL_COLUMNS",
    "COLUMN_GROUPS",
    "CONTEXT_COLUMNS",
    "METADATA_COLUMNS",
    "OBSERVATION_COLUMNS",
    "OBSERVATION_SHEET_NAME",
    "generate_observation_template",
]
