"""CLI smoke tests."""

from click.testing import CliRunner
from defect_rules_engine.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in (
        "generate-config",
        "generate-template",
        "generate-dictionary-template",
        "match",
        "run",
    ):
        assert command in result.output


def test_match_help_lists_choices() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["match", "--help"])

    assert result.exit_code == 0
    assert "safety_hazard" in result.output.lower()
    assert "maintenance_needed" in result.output.lower()
