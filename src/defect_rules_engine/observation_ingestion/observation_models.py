"""Observation ingestion entities."""

from __future__ import annotations

from dataclasses import dataclass

from defect_rules_engine.defect_matching.match_outcomes import (
    ObservationSeverity,
    ObservationStatus,
)
from defect_rules_engine.issue_generation.issue_models import Urgency


@dataclass(frozen=True)
class ObservationRow:  # pylint: disable=too-many-instance-attributes
    """Normalized representation of an Excel observation row."""

    row_number: int
    observation_id: str
    enabled: bool
    notes: str
    inspection_id: str
    property_id: str
    section_template_id: str
    component: str
    status: ObservationStatus
    severity: ObservationSeverity
    urgency: Urgency | None


@dataclass(frozen=True)
class ObservationReadResult:
    """Result of ingesting an observation workbook."""

    observations: tuple[ObservationRow, ...]
