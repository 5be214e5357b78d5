"""Results workbook writer service."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from defect_rules_engine.defect_matching.match_outcomes import MatchType
from defect_rules_engine.observation_processing.processing_contracts import ObservationOutcome

from .report_models import (
    ISSUE_COLUMNS,
    ISSUES_SHEET_NAME,
    REVIEW_COLUMNS,
    REVIEW_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
    RunMetadata,
)


@dataclass(frozen=True)
class _RunCounts:
    """Computed run-level counters for the RunInfo sheet."""

    processed: int
    issues_created: int
    exact_matches: int
    fuzzy_matches: int
    needs_review: int


def write_results_workbook(
    output_path: Path | str,
    outcomes: Sequence[ObservationOutcome],
    run_metadata: RunMetadata,
) -> Path:
    """Write generated issues, the manual review queue and run metadata."""
    workbook = Workbook()
    issues_sheet = workbook.active
    if issues_sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(issues_sheet, Worksheet)
    issues_sheet.title = ISSUES_SHEET_NAME

    _write_header(issues_sheet, ISSUE_COLUMNS)
    _write_issue_rows(issues_sheet, outcomes)

    review_sheet = workbook.create_sheet(REVIEW_SHEET_NAME)
    _write_header(review_sheet, REVIEW_COLUMNS)
    _write_review_rows(review_sheet, outcomes)

    _write_run_info_sheet(workbook, run_metadata, _calculate_run_counts(outcomes))

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_header(sheet, columns: Sequence[str]) -> None:
    for column_index, name in enumerate(columns, start=1):
        sheet.cell(row=1, column=column_index, value=name).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )


def _write_issue_rows(sheet, outcomes: Sequence[ObservationOutcome]) -> None:
    row_number = 2
    for outcome in outcomes:
        if outcome.issue is None:
            continue
        record = outcome.issue.to_record()
        values = (
            outcome.observation_id,
            outcome.match_result.defect_id,
            outcome.match_result.match_type.value,
            *(record[name] for name in ISSUE_COLUMNS[3:]),
        )
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_number, column=column_index, value=value)
        row_number += 1


def _write_review_rows(sheet, outcomes: Sequence[ObservationOutcome]) -> None:
    row_number = 2
    for outcome in outcomes:
        if not outcome.needs_review:
            continue
        observation = outcome.observation
        values = (
            observation.observation_id,
            observation.inspection_id,
            observation.property_id,
            observation.section_template_id,
            observation.component,
            observation.status.value,
            observation.severity.value,
            outcome.urgency.value,
        )
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_number, column=column_index, value=value)
        row_number += 1


def _write_run_info_sheet(workbook, run_metadata: RunMetadata, counts: _RunCounts) -> None:
    sheet = workbook.create_sheet(RUN_INFO_SHEET_NAME)
    entries = (
        ("run_start", run_metadata.run_start.isoformat()),
        ("input_path", str(run_metadata.input_path)),
        ("output_path", str(run_metadata.output_path)),
        ("dictionary_path", str(run_metadata.dictionary_path)),
        ("dictionary_entries", run_metadata.dictionary_entries),
        ("total", run_metadata.total),
        ("processed", counts.processed),
        ("skipped", run_metadata.skipped),
        ("issues_created", counts.issues_created),
        ("exact_matches", counts.exact_matches),
        ("fuzzy_matches", counts.fuzzy_matches),
        ("needs_review", counts.needs_review),
    )
    for row, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row, column=1, value=key)
        sheet.cell(row=row, column=2, value=value)


def _calculate_run_counts(outcomes: Sequence[ObservationOutcome]) -> _RunCounts:
    return _RunCounts(
        processed=len(outcomes),
        issues_created=sum(1 for outcome in outcomes if outcome.issue is not None),
        exact_matches=sum(
            1 for outcome in outcomes if outcome.match_result.match_type == MatchType.EXACT
        ),
        fuzzy_matches=sum(
            1 for outcome in outcomes if outcome.match_result.match_type == MatchType.FUZZY
        ),
        needs_review=sum(1 for outcome in outcomes if outcome.needs_review),
    )
