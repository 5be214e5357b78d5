"""Command line interface entry point."""

from __future__ import annotations

import json
import logging
import sys
from enum import Enum

import click

from defect_rules_engine.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from defect_rules_engine.defect_dictionary import (
    DictionaryValidationError,
    generate_dictionary_workbook,
    load_defect_dictionary,
)
from defect_rules_engine.defect_matching import ObservationSeverity, ObservationStatus
from defect_rules_engine.issue_generation import Urgency
from defect_rules_engine.observation_processing import Observation, process_observation
from defect_rules_engine.observation_template import generate_observation_template
from defect_rules_engine.run_execution import RunExecutionError, RunRequest, execute_rules_run

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class CliError(Exception):
    """Custom CLI error."""


def _choice(enum_type: type[Enum]) -> click.Choice:
    return click.Choice([item.value for item in enum_type], case_sensitive=False)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="defect-rules-engine")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Turn inspection observations into normalized repair issues."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=_LOG_FORMAT,
        stream=sys.stderr,
    )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-template")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the observation workbook template to write",
)
def generate_template(output_path: str) -> None:
    """Generate an empty observation workbook."""
    try:
        resolved_output = generate_observation_template(output_path)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate-dictionary-template")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the defect dictionary workbook to write",
)
@click.option(
    "--from",
    "source_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional existing dictionary (YAML/JSON/XLSX) whose entries are copied",
)
def generate_dictionary_template(output_path: str, source_path: str | None) -> None:
    """Generate a defect dictionary workbook, empty or converted from another file."""
    try:
        entries = load_defect_dictionary(source_path).entries if source_path else ()
        resolved_output = generate_dictionary_workbook(entries, output_path)
    except (DictionaryValidationError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="match")
@click.option(
    "--dictionary",
    "dictionary_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the defect dictionary (YAML/JSON/XLSX)",
)
@click.option("--section", "section_template_id", required=True, help="Section template id")
@click.option("--component", required=True, help="Component as entered by the inspector")
@click.option("--status", required=True, type=_choice(ObservationStatus))
@click.option("--severity", required=True, type=_choice(ObservationSeverity))
@click.option("--urgency", required=False, type=_choice(Urgency), help="Defaults from severity")
@click.option("--observation-id", default="", help="Observation id copied into the issue")
@click.option("--inspection-id", default="", help="Inspection id copied into the issue")
@click.option("--property-id", default="", help="Property id copied into the issue")
# pylint: disable=too-many-arguments
def match(
    dictionary_path: str,
    section_template_id: str,
    component: str,
    status: str,
    severity: str,
    urgency: str | None,
    observation_id: str,
    inspection_id: str,
    property_id: str,
) -> None:
    """Match one observation and print the match result and issue as JSON."""
    try:
        dictionary = load_defect_dictionary(dictionary_path)
    except (DictionaryValidationError, OSError) as exc:
        raise CliError(str(exc)) from exc

    observation = Observation(
        observation_id=observation_id,
        inspection_id=inspection_id,
        property_id=property_id,
        section_template_id=section_template_id,
        component=component,
        status=ObservationStatus(status.upper()),
        severity=ObservationSeverity(severity.upper()),
        urgency=Urgency(urgency.upper()) if urgency else None,
    )
    outcome = process_observation(observation, dictionary)
    document = {
        "match": outcome.match_result.to_record(),
        "issue": outcome.issue.to_record() if outcome.issue else None,
        "needs_review": outcome.needs_review,
    }
    click.echo(json.dumps(document, ensure_ascii=False, indent=2))


# pylint: enable=too-many-arguments


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON configuration file",
)
@click.option(
    "--input",
    "input_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the filled observation workbook",
)
@click.option(
    "--output-dir",
    "output_dir",
    required=False,
    type=click.Path(path_type=str),
    help="Optional directory for storing result workbooks",
)
def run_rules(config_path: str, input_path: str, output_dir: str | None) -> None:
    """Generate issues for every enabled observation in the workbook."""
    try:
        outcome = execute_rules_run(
            RunRequest(config_path=config_path, input_path=input_path, output_dir=output_dir)
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(outcome.output_path))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
