"""Issue generation domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from defect_rules_engine.defect_matching.match_outcomes import MatchResult


class Urgency(str, Enum):
    """How soon a repair should be scheduled."""

    IMMEDIATE = "IMMEDIATE"
    SHORT_TERM = "SHORT_TERM"
    LONG_TERM = "LONG_TERM"
    MONITOR = "MONITOR"


class SeverityLabel(str, Enum):
    """Display label derived from a numeric severity score."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class IssueGeneratorInput:
    """Match result plus the identifiers of the observation it came from."""

    observation_id: str
    inspection_id: str
    property_id: str
    match_result: MatchResult
    urgency: Urgency


@dataclass(frozen=True)
class GeneratedIssue:  # pylint: disable=too-many-instance-attributes
    """Normalized issue record ready for persistence."""

    observation_id: str
    inspection_id: str
    property_id: str
    normalized_title: str
    normalized_description: str
    homeowner_description: str
    master_format_code: str | None
    trade_category: str
    severity_score: int
    severity_label: SeverityLabel
    risk_category: str | None
    urgency: Urgency
    is_safety_hazard: bool
    insurance_relevant: bool

    def to_record(self) -> dict[str, object]:
        """Return the persistence mapping with enum values rendered as strings."""
        return {
            "observation_id": self.observation_id,
            "inspection_id": self.inspection_id,
            "property_id": self.property_id,
            "normalized_title": self.normalized_title,
            "normalized_description": self.normalized_description,
            "homeowner_description": self.homeowner_description,
            "master_format_code": self.master_format_code,
            "trade_category": self.trade_category,
            "severity_score": self.severity_score,
            "severity_label": self.severity_label.value,
            "risk_category": self.risk_category,
            "urgency": self.urgency.value,
            "is_safety_hazard": self.is_safety_hazard,
            "insurance_relevant": self.insurance_relevant,
        }
