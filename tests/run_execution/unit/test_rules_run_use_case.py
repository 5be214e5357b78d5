"""Tests for the rules run use-case service."""

from __future__ import annotations

from pathlib import Path

import pytest
from defect_rules_engine.observation_template import (
    ALL_COLUMNS,
    OBSERVATION_SHEET_NAME,
    generate_observation_template,
)
from defect_rules_engine.results_writing import (
    ISSUE_COLUMNS,
    ISSUES_SHEET_NAME,
    REVIEW_SHEET_NAME,
    RUN_INFO_SHEET_NAME,
)
from defect_rules_engine.run_execution import RunExecutionError, RunRequest, execute_rules_run
from openpyxl import load_workbook

_DICTIONARY = """
entries:
  - id: roof-shingles-deficient
    section_template_id: Roof
    component_match: Shingles
    condition_match: DEFICIENT
    normalized_title: Asphalt Shingle Repair/Replacement
    master_format_code: "07-31-13"
    trade_category: Roofing
    default_severity_score: 3
    risk_category: Water Intrusion
    insurance_relevant: true
"""


def _write_config(tmp_path: Path, extra: str = "") -> Path:
    (tmp_path / "dictionary.yaml").write_text(_DICTIONARY, encoding="utf-8")
    path = tmp_path / "config.yaml"
    path.write_text(f"dictionary:\n  path: dictionary.yaml\n{extra}", encoding="utf-8")
    return path


def _write_observations(tmp_path: Path, rows: list[tuple[object, ...]]) -> Path:
    path = generate_observation_template(tmp_path / "observations.xlsx")
    workbook = load_workbook(path)
    sheet = workbook[OBSERVATION_SHEET_NAME]
    for row_offset, values in enumerate(rows):
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=3 + row_offset, column=column_index).value = value
    workbook.save(path)
    return path


def _request(config_path: Path, input_path: Path) -> RunRequest:
    return RunRequest(config_path=str(config_path), input_path=str(input_path))


def _observation_row(
    observation_id: str,
    component: str,
    *,
    enabled: object = True,
    severity: str = "MAJOR_DEFECT",
    urgency: str | None = None,
) -> tuple[object, ...]:
    values = (
        observation_id,
        enabled,
        None,
        "insp-1",
        "prop-1",
        "Roof",
        component,
        "DEFICIENT",
        severity,
        urgency,
    )
    assert len(values) == len(ALL_COLUMNS)
    return values


def test_run_writes_results_workbook_next_to_input(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path)
    input_path = _write_observations(
        tmp_path,
        [
            _observation_row("OBS-1", "Shingles"),
            _observation_row("OBS-2", "Shingle", urgency="MONITOR"),
            _observation_row("OBS-3", "Skylight"),
            _observation_row("OBS-4", "Shingles", enabled=False),
        ],
    )

    outcome = execute_rules_run(_request(config_path, input_path))

    assert outcome.output_path.parent == tmp_path.resolve()
    assert outcome.output_path.name.startswith("observations-issues-")
    assert outcome.issues_created == 2
    assert outcome.needs_review == 1
    assert outcome.skipped == 1

    workbook = load_workbook(outcome.output_path)
    issues_sheet = workbook[ISSUES_SHEET_NAME]
    urgency_column = ISSUE_COLUMNS.index("urgency") + 1
    assert issues_sheet.cell(row=2, column=1).value == "OBS-1"
    assert issues_sheet.cell(row=2, column=urgency_column).value == "SHORT_TERM"
    assert issues_sheet.cell(row=3, column=1).value == "OBS-2"
    assert issues_sheet.cell(row=3, column=urgency_column).value == "MONITOR"
    assert workbook[REVIEW_SHEET_NAME].cell(row=2, column=1).value == "OBS-3"
    run_info = {
        row[0].value: row[1].value for row in workbook[RUN_INFO_SHEET_NAME].iter_rows()
    }
    assert run_info["total"] == 4
    assert run_info["skipped"] == 1


def test_run_uses_explicit_output_directory_over_configured_one(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "output:\n  directory: configured\n")
    input_path = _write_observations(tmp_path, [_observation_row("OBS-1", "Shingles")])
    explicit_dir = tmp_path / "explicit"

    outcome = execute_rules_run(
        RunRequest(
            config_path=str(config_path),
            input_path=str(input_path),
            output_dir=str(explicit_dir),
        )
    )

    assert outcome.output_path.parent == explicit_dir.resolve()
    assert outcome.output_path.exists()


def test_run_uses_configured_output_directory(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "output:\n  directory: configured\n")
    input_path = _write_observations(tmp_path, [_observation_row("OBS-1", "Shingles")])

    outcome = execute_rules_run(_request(config_path, input_path))

    assert outcome.output_path.parent == (tmp_path / "configured").resolve()


def test_run_applies_configured_default_urgency(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path, "processing:\n  default_urgency: IMMEDIATE\n")
    input_path = _write_observations(tmp_path, [_observation_row("OBS-1", "Shingles")])

    outcome = execute_rules_run(_request(config_path, input_path))

    issues_sheet = load_workbook(outcome.output_path)[ISSUES_SHEET_NAME]
    urgency_column = ISSUE_COLUMNS.index("urgency") + 1
    assert issues_sheet.cell(row=2, column=urgency_column).value == "IMMEDIATE"


def test_run_wraps_configuration_errors(tmp_path: Path) -> None:
    input_path = _write_observations(tmp_path, [_observation_row("OBS-1", "Shingles")])

    with pytest.raises(RunExecutionError, match="Configuration file not found"):
        execute_rules_run(
            RunRequest(config_path=str(tmp_path / "missing.yaml"), input_path=str(input_path))
        )


def test_run_wraps_observation_workbook_errors(tmp_path: Path) -> None:
    config_path = _write_config(tmp_path)
    input_path = _write_observations(
        tmp_path, [_observation_row("OBS-1", "Shingles", severity="TERRIBLE")]
    )

    with pytest.raises(RunExecutionError, match="invalid SEVERITY 'TERRIBLE'"):
        execute_rules_run(_request(config_path, input_path))
