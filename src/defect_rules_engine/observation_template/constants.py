"""Shared observation workbook constants."""

from __future__ import annotations

OBSERVATION_SHEET_NAME = "Observations"

METADATA_COLUMNS: tuple[str, ...] = ("ID", "Enabled", "Notes")
CONTEXT_COLUMNS: tuple[str, ...] = ("INSPECTION_ID", "PROPERTY_ID", "SECTION_TEMPLATE_ID")
OBSERVATION_COLUMNS: tuple[str, ...] = ("COMPONENT", "STATUS", "SEVERITY", "URGENCY")

ALL_COLUMNS: tuple[str, ...] = METADATA_COLUMNS + CONTEXT_COLUMNS + OBSERVATION_COLUMNS

COLUMN_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Metadata", METADATA_COLUMNS),
    ("Context", CONTEXT_COLUMNS),
    ("Observation", OBSERVATION_COLUMNS),
)
