"""Observation processing entities."""

from __future__ import annotations

from dataclasses import dataclass

from defect_rules_engine.defect_matching.match_outcomes import (
    MatchInput,
    MatchResult,
    ObservationSeverity,
    ObservationStatus,
)
from defect_rules_engine.issue_generation.issue_models import GeneratedIssue, Urgency


@dataclass(frozen=True)
class Observation:  # pylint: disable=too-many-instance-attributes
    """One inspector finding together with the identifiers of its inspection."""

    observation_id: str
    inspection_id: str
    property_id: str
    section_template_id: str
    component: str
    status: ObservationStatus
    severity: ObservationSeverity
    urgency: Urgency | None = None

    def match_input(self) -> MatchInput:
        return MatchInput(
            section_template_id=self.section_template_id,
            component=self.component,
            status=self.status,
            severity=self.severity,
        )


@dataclass(frozen=True)
class ObservationOutcome:
    """Rules engine outcome for one observation."""

    observation: Observation
    match_result: MatchResult
    issue: GeneratedIssue | None
    urgency: Urgency

    @property
    def observation_id(self) -> str:
        return self.observation.observation_id

    @property
    def needs_review(self) -> bool:
        """Return True when no issue was produced and a person has to classify it."""
        return self.issue is None
