"""Matching domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ObservationStatus(str, Enum):
    """Condition recorded by the inspector for one component."""

    DEFICIENT = "DEFICIENT"
    FUNCTIONAL = "FUNCTIONAL"
    NOT_INSPECTED = "NOT_INSPECTED"
    NOT_PRESENT = "NOT_PRESENT"
    MAINTENANCE_NEEDED = "MAINTENANCE_NEEDED"


class ObservationSeverity(str, Enum):
    """Severity recorded by the inspector for one component."""

    SAFETY_HAZARD = "SAFETY_HAZARD"
    MAJOR_DEFECT = "MAJOR_DEFECT"
    MINOR_DEFECT = "MINOR_DEFECT"
    COSMETIC = "COSMETIC"
    INFORMATIONAL = "INFORMATIONAL"


class MatchType(str, Enum):
    """How a dictionary entry was found for an observation."""

    EXACT = "exact"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True)
class DefectEntry:  # pylint: disable=too-many-instance-attributes
    """One defect dictionary rule.

    ``severity_match`` set to ``None`` marks a rule that applies regardless of
    the observed severity.
    """

    defect_id: str
    section_template_id: str
    component_match: str
    condition_match: ObservationStatus
    severity_match: ObservationSeverity | None
    normalized_title: str
    normalized_description: str | None
    homeowner_description: str | None
    master_format_code: str | None
    trade_category: str | None
    default_severity_score: int
    risk_category: str | None
    is_safety_hazard: bool
    insurance_relevant: bool
    is_active: bool = True


@dataclass(frozen=True)
class MatchInput:
    """Classification key of one observation."""

    section_template_id: str
    component: str
    status: ObservationStatus
    severity: ObservationSeverity


@dataclass(frozen=True)
class MatchResult:  # pylint: disable=too-many-instance-attributes
    """Outcome of matching one observation against the defect dictionary."""

    matched: bool
    defect_id: str | None
    normalized_title: str | None
    normalized_description: str | None
    homeowner_description: str | None
    master_format_code: str | None
    trade_category: str | None
    severity_score: int | None
    risk_category: str | None
    is_safety_hazard: bool
    insurance_relevant: bool
    match_type: MatchType

    @staticmethod
    def from_entry(entry: DefectEntry, match_type: MatchType) -> MatchResult:
        return MatchResult(
            matched=True,
            defect_id=entry.defect_id,
            normalized_title=entry.normalized_title,
            normalized_description=entry.normalized_description,
            homeowner_description=entry.homeowner_description,
            master_format_code=entry.master_format_code,
            trade_category=entry.trade_category,
            severity_score=entry.default_severity_score,
            risk_category=entry.risk_category,
            is_safety_hazard=entry.is_safety_hazard,
            insurance_relevant=entry.insurance_relevant,
            match_type=match_type,
        )

    @staticmethod
    def unmatched() -> MatchResult:
        return MatchResult(
            matched=False,
            defect_id=None,
            normalized_title=None,
            normalized_description=None,
            homeowner_description=None,
            master_format_code=None,
            trade_category=None,
            severity_score=None,
            risk_category=None,
            is_safety_hazard=False,
            insurance_relevant=False,
            match_type=MatchType.NONE,
        )

    def to_record(self) -> dict[str, object]:
        """Return a JSON-friendly mapping with enum values rendered as strings."""
        return {
            "matched": self.matched,
            "defect_id": self.defect_id,
            "normalized_title": self.normalized_title,
            "normalized_description": self.normalized_description,
            "homeowner_description": self.homeowner_description,
            "master_format_code": self.master_format_code,
            "trade_category": self.trade_category,
            "severity_score": self.severity_score,
            "risk_category": self.risk_category,
            "is_safety_hazard": self.is_safety_hazard,
            "insurance_relevant": self.insurance_relevant,
            "match_type": self.match_type.value,
        }
