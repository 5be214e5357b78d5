"""Excel representation of the defect dictionary."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any
from zipfile import BadZipFile

from openpyxl import Workbook, load_workbook
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from defect_rules_engine.defect_matching.match_outcomes import DefectEntry

from .entry_parsing import DictionaryValidationError

DICTIONARY_SHEET_NAME = "DefectDictionary"

DICTIONARY_COLUMNS: tuple[str, ...] = (
    "id",
    "section_template_id",
    "component_match",
    "condition_match",
    "severity_match",
    "normalized_title",
    "normalized_description",
    "homeowner_description",
    "master_format_code",
    "trade_category",
    "default_severity_score",
    "risk_category",
    "is_safety_hazard",
    "insurance_relevant",
    "is_active",
)


def read_dictionary_rows(workbook_path: Path | str) -> list[tuple[str, Mapping[str, Any]]]:
    """Read raw dictionary rows labelled with their worksheet row numbers."""
    path = Path(workbook_path)
    try:
        workbook = load_workbook(path, data_only=True)
    except (InvalidFileException, BadZipFile) as exc:
        raise DictionaryValidationError(f"Unable to open dictionary workbook: {exc}") from exc
    sheet = (
        workbook[DICTIONARY_SHEET_NAME]
        if DICTIONARY_SHEET_NAME in workbook.sheetnames
        else workbook.active
    )
    if sheet is None:
        raise DictionaryValidationError("Dictionary workbook has no active sheet.")
    assert isinstance(sheet, Worksheet)

    header_values = [
        sheet.cell(row=1, column=index + 1).value for index in range(len(DICTIONARY_COLUMNS))
    ]
    if header_values != list(DICTIONARY_COLUMNS):
        raise DictionaryValidationError(
            "Dictionary workbook columns do not match the expected layout."
        )
    for column in range(len(DICTIONARY_COLUMNS) + 1, sheet.max_column + 1):
        if sheet.cell(row=1, column=column).value not in (None, ""):
            raise DictionaryValidationError(
                "Dictionary workbook contains unexpected additional columns."
            )

    rows: list[tuple[str, Mapping[str, Any]]] = []
    for row_idx in range(2, sheet.max_row + 1):
        row_data = {
            name: sheet.cell(row=row_idx, column=col_index).value
            for col_index, name in enumerate(DICTIONARY_COLUMNS, start=1)
        }
        if all(value is None or str(value).strip() == "" for value in row_data.values()):
            continue
        rows.append((f"row {row_idx}", row_data))
    return rows


def generate_dictionary_workbook(
    entries: Sequence[DefectEntry], output_path: Path | str
) -> Path:
    """Write dictionary entries (or just the header when empty) to a workbook."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = DICTIONARY_SHEET_NAME

    for column_index, name in enumerate(DICTIONARY_COLUMNS, start=1):
        sheet.cell(row=1, column=column_index, value=name).style = "Headline 1"
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(len(name) + 6, 40)
        )

    for row_index, entry in enumerate(entries, start=2):
        for column_index, value in enumerate(_entry_row(entry), start=1):
            sheet.cell(row=row_index, column=column_index, value=value)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output)
    return output.resolve()


def _entry_row(entry: DefectEntry) -> tuple[object, ...]:
    return (
        entry.defect_id,
        entry.section_template_id,
        entry.component_match,
        entry.condition_match.value,
        entry.severity_match.value if entry.severity_match else None,
        entry.normalized_title,
        entry.normalized_description,
        entry.homeowner_description,
        entry.master_format_code,
        entry.trade_category,
        entry.default_severity_score,
        entry.risk_category,
        entry.is_safety_hazard,
        entry.insurance_relevant,
        entry.is_active,
    )
