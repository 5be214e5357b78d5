"""Excel observation template generation service."""

from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.datavalidation import DataValidation
from openpyxl.worksheet.worksheet import Worksheet

from defect_rules_engine.defect_matching.match_outcomes import (
    ObservationSeverity,
    ObservationStatus,
)
from defect_rules_engine.issue_generation.issue_models import Urgency

from .constants import ALL_COLUMNS, COLUMN_GROUPS, OBSERVATION_SHEET_NAME

_VALIDATED_ROWS = 1000


def generate_observation_template(output_path: Path | str) -> Path:
    """Create the Excel template holding metadata, context and observation columns."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = OBSERVATION_SHEET_NAME

    _write_group_headers(sheet)
    for column_index, name in enumerate(ALL_COLUMNS, start=1):
        sheet.cell(row=2, column=column_index, value=name)
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )
    _add_choice_validations(sheet)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _write_group_headers(sheet) -> None:
    start_column = 1
    for label, columns in COLUMN_GROUPS:
        end_column = start_column + len(columns) - 1
        start_letter = get_column_letter(start_column)
        end_letter = get_column_letter(end_column)
        sheet.merge_cells(f"{start_letter}1:{end_letter}1")
        sheet[f"{start_letter}1"].value = label
        sheet[f"{start_letter}1"].style = "Headline 1"
        start_column = end_column + 1


def _add_choice_validations(sheet) -> None:
    choices = {
        "STATUS": [item.value for item in ObservationStatus],
        "SEVERITY": [item.value for item in ObservationSeverity],
        "URGENCY": [item.value for item in Urgency],
    }
    for column_name, values in choices.items():
        letter = get_column_letter(ALL_COLUMNS.index(column_name) + 1)
        validation = DataValidation(
            type="list",
            formula1=f'"{",".join(values)}"',
            allow_blank=True,
        )
        sheet.add_data_validation(validation)
        validation.add(f"{letter}3:{letter}{_VALIDATED_ROWS + 2}")
