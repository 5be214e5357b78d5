"""Adapters from workbook rows to processing-domain observations."""

from __future__ import annotations

from collections.abc import Sequence

from defect_rules_engine.observation_ingestion.observation_models import ObservationRow

from .processing_contracts import Observation


def to_observations(rows: Sequence[ObservationRow]) -> tuple[Observation, ...]:
    """Convert workbook rows into observations."""
    return tuple(
        Observation(
            observation_id=row.observation_id,
            inspection_id=row.inspection_id,
            property_id=row.property_id,
            section_template_id=row.section_template_id,
            component=row.component,
            status=row.status,
            severity=row.severity,
            urgency=row.urgency,
        )
        for row in rows
    )
