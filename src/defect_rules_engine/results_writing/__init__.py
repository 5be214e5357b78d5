"""Results writing exports."""

from .report_models import (
    ISSUE_COLUMNS,
    ISSUES_SHEET_NAME,
    REVIEW_COLUMNS,
    REVIEW_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    RunMetadata,
)
from .run_report_writer import write_results_workbook

__all__ = [
    "ISSUE_COLUMNS",
    "ISSUES_SHEET_NAME",
    "REVIEW_COLUMNS",
    "REVIEW_SHEET_NAME",
    "RUN_INFO_SHEET_NAME",
    "RunMetadata",
    "write_results_workbook",
]
