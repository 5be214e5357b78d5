"""Run execution use-case service."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from defect_rules_engine.configuration import ConfigurationError, load_configuration
from defect_rules_engine.defect_dictionary import DictionaryValidationError, load_defect_dictionary
from defect_rules_engine.observation_ingestion import ObservationTemplateError, read_observations
from defect_rules_engine.observation_processing import process_observations, to_observations
from defect_rules_engine.results_writing import RunMetadata, write_results_workbook

from .run_contracts import RunArtifacts, RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


def execute_rules_run(request: RunRequest) -> RunOutcome:
    """Match every enabled observation of a workbook and write the result workbook."""
    artifacts = _load_run_artifacts(request.config_path, request.input_path)
    run_start = datetime.now(UTC)

    enabled_rows = [row for row in artifacts.rows if row.enabled]
    skipped = len(artifacts.rows) - len(enabled_rows)
    processing = artifacts.configuration.processing
    outcomes = process_observations(
        to_observations(enabled_rows),
        artifacts.dictionary,
        parallelism=processing.parallelism,
        default_urgency=processing.default_urgency,
    )

    output_dir = request.output_dir or artifacts.configuration.output.directory
    output_path = _resolve_output_path(request.input_path, output_dir)
    run_metadata = RunMetadata(
        run_start=run_start,
        input_path=Path(request.input_path).resolve(),
        output_path=output_path.resolve(),
        dictionary_path=artifacts.configuration.dictionary.path,
        dictionary_entries=len(artifacts.dictionary),
        total=len(artifacts.rows),
        skipped=skipped,
    )
    try:
        written_path = write_results_workbook(output_path, outcomes, run_metadata)
    except OSError as exc:
        raise RunExecutionError(str(exc)) from exc

    issues_created = sum(1 for outcome in outcomes if outcome.issue is not None)
    needs_review = len(outcomes) - issues_created
    _LOGGER.info(
        "Processed %d observations: %d issues, %d for manual review, %d skipped",
        len(outcomes),
        issues_created,
        needs_review,
        skipped,
    )
    return RunOutcome(
        output_path=written_path,
        issues_created=issues_created,
        needs_review=needs_review,
        skipped=skipped,
    )


def _resolve_output_path(input_path: str, output_dir: Path | str | None) -> Path:
    input_file = Path(input_path)
    destination = Path(output_dir) if output_dir else input_file.parent
    timestamp = datetime.now(UTC).strftime("%Y%m%d-%H%M%S")
    return destination / f"{input_file.stem}-issues-{timestamp}.xlsx"


def _load_run_artifacts(config_path: str, input_path: str) -> RunArtifacts:
    try:
        configuration = load_configuration(config_path)
        dictionary = load_defect_dictionary(configuration.dictionary.path)
        rows = read_observations(input_path).observations
    except (
        ConfigurationError,
        DictionaryValidationError,
        ObservationTemplateError,
        OSError,
        ValueError,
    ) as exc:
        raise RunExecutionError(str(exc)) from exc
    return RunArtifacts(configuration=configuration, dictionary=dictionary, rows=rows)
