"""Results writing entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

ISSUES_SHEET_NAME = "Issues"
REVIEW_SHEET_NAME = "ManualReview"
RUN_INFO_SHEET_NAME = "RunInfo"

ISSUE_COLUMNS: tuple[str, ...] = (
    "OBSERVATION_ID",
    "DEFECT_ID",
    "MATCH_TYPE",
    "inspection_id",
    "property_id",
    "normalized_title",
    "normalized_description",
    "homeowner_description",
    "master_format_code",
    "trade_category",
    "severity_score",
    "severity_label",
    "risk_category",
    "urgency",
    "is_safety_hazard",
    "insurance_relevant",
)

REVIEW_COLUMNS: tuple[str, ...] = (
    "OBSERVATION_ID",
    "INSPECTION_ID",
    "PROPERTY_ID",
    "SECTION_TEMPLATE_ID",
    "COMPONENT",
    "STATUS",
    "SEVERITY",
    "URGENCY",
)


@dataclass(frozen=True)
class RunMetadata:  # pylint: disable=too-many-instance-attributes
    """Metadata rendered into the RunInfo sheet."""

    run_start: datetime
    input_path: Path
    output_path: Path
    dictionary_path: Path
    dictionary_entries: int
    total: int
    skipped: int
