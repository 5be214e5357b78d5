"""Observation workbook ingestion and validation service."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import TypeVar
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException
from openpyxl.worksheet.worksheet import Worksheet

from defect_rules_engine.defect_matching.match_outcomes import (
    ObservationSeverity,
    ObservationStatus,
)
from defect_rules_engine.issue_generation.issue_models import Urgency
from defect_rules_engine.observation_template import (
    ALL_COLUMNS,
    COLUMN_GROUPS,
    OBSERVATION_SHEET_NAME,
)

from .observation_models import ObservationReadResult, ObservationRow

_EnumT = TypeVar("_EnumT", bound=Enum)


class ObservationTemplateError(Exception):
    """Raised when an observation workbook is invalid."""


def read_observations(workbook_path: Path | str) -> ObservationReadResult:
    """Read the Excel workbook and return normalized observation rows."""
    path = Path(workbook_path)
    if not path.exists():
        raise ObservationTemplateError(f"Observation workbook not found: {path}")

    try:
        workbook = load_workbook(path, data_only=True)
    except (InvalidFileException, BadZipFile) as exc:
        raise ObservationTemplateError(f"Unable to open observation workbook: {exc}") from exc
    sheet = (
        workbook[OBSERVATION_SHEET_NAME]
        if OBSERVATION_SHEET_NAME in workbook.sheetnames
        else workbook.active
    )
    if sheet is None:
        raise ObservationTemplateError("Observation workbook has no active sheet.")
    assert isinstance(sheet, Worksheet)

    _validate_group_headers(sheet)
    header_values = [sheet.cell(row=2, column=index + 1).value for index in range(len(ALL_COLUMNS))]
    if header_values != list(ALL_COLUMNS):
        raise ObservationTemplateError("Observation workbook columns do not match the template.")
    _ensure_no_extra_columns(sheet, len(ALL_COLUMNS))

    header_map = {name: idx + 1 for idx, name in enumerate(ALL_COLUMNS)}
    return ObservationReadResult(observations=tuple(_parse_rows(sheet, header_map)))


def _validate_group_headers(sheet) -> None:
    column = 1
    for label, columns in COLUMN_GROUPS:
        if sheet.cell(row=1, column=column).value != label:
            raise ObservationTemplateError("Observation workbook missing required group headers.")
        column += len(columns)


def _ensure_no_extra_columns(sheet, expected_count: int) -> None:
    for column in range(expected_count + 1, sheet.max_column + 1):
        value = sheet.cell(row=2, column=column).value
        if value not in (None, ""):
            raise ObservationTemplateError(
                "Observation workbook contains unexpected additional columns."
            )


def _parse_rows(sheet, header_map: Mapping[str, int]) -> list[ObservationRow]:
    observations: list[ObservationRow] = []
    seen_ids: dict[str, int] = {}
    for row_idx in range(3, sheet.max_row + 1):
        row_data = {
            name: sheet.cell(row=row_idx, column=col_index).value
            for name, col_index in header_map.items()
        }
        if _row_is_empty(row_data):
            continue
        observation = _build_observation(row_idx, row_data)
        previous = seen_ids.get(observation.observation_id)
        if previous:
            raise ObservationTemplateError(
                f"Duplicate ID '{observation.observation_id}' detected "
                f"(rows {previous} and {row_idx})."
            )
        seen_ids[observation.observation_id] = row_idx
        observations.append(observation)
    if not observations:
        raise ObservationTemplateError("Observation workbook does not contain any rows.")
    return observations


def _row_is_empty(row_data: Mapping[str, object]) -> bool:
    return all(_is_empty(value) for value in row_data.values())


def _build_observation(row_number: int, row_data: Mapping[str, object]) -> ObservationRow:
    urgency_text = _optional_string(row_data.get("URGENCY"))
    return ObservationRow(
        row_number=row_number,
        observation_id=_require_text(row_data["ID"], "ID", row_number),
        enabled=_parse_bool(row_data.get("Enabled"), row_number),
        notes=_optional_string(row_data.get("Notes")),
        inspection_id=_require_text(row_data["INSPECTION_ID"], "INSPECTION_ID", row_number),
        property_id=_require_text(row_data["PROPERTY_ID"], "PROPERTY_ID", row_number),
        section_template_id=_require_text(
            row_data["SECTION_TEMPLATE_ID"], "SECTION_TEMPLATE_ID", row_number
        ),
        component=_require_text(row_data["COMPONENT"], "COMPONENT", row_number),
        status=_parse_choice(
            _require_text(row_data["STATUS"], "STATUS", row_number),
            ObservationStatus,
            "STATUS",
            row_number,
        ),
        severity=_parse_choice(
            _require_text(row_data["SEVERITY"], "SEVERITY", row_number),
            ObservationSeverity,
            "SEVERITY",
            row_number,
        ),
        urgency=(
            _parse_choice(urgency_text, Urgency, "URGENCY", row_number) if urgency_text else None
        ),
    )


def _parse_choice(text: str, choices: type[_EnumT], column_name: str, row_number: int) -> _EnumT:
    normalized = "_".join(text.strip().upper().replace("-", " ").split())
    try:
        return choices(normalized)
    except ValueError as exc:
        allowed = ", ".join(str(item.value) for item in choices)
        raise ObservationTemplateError(
            f"Row {row_number}: invalid {column_name} '{text}' (expected one of {allowed})."
        ) from exc


def _parse_bool(value: object, row_number: int) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"", "true", "1", "yes"}:
            return True
        if lowered in {"false", "0", "no"}:
            return False
    if isinstance(value, int | float):
        return bool(value)
    raise ObservationTemplateError(
        f"Row {row_number}: unable to interpret Enabled value: {value!r}"
    )


def _optional_string(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _is_empty(value: object) -> bool:
    return _optional_string(value) == ""


def _require_text(value: object, column_name: str, row_number: int) -> str:
    if _is_empty(value):
        raise ObservationTemplateError(f"Row {row_number}: column '{column_name}' is required.")
    return str(value).strip()
