"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from defect_rules_engine.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["run", "--input", "/tmp/observations.xlsx"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate-template", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_choice_returns_clean_click_error(capsys) -> None:
    exit_code = main(
        [
            "match",
            "--dictionary",
            "dictionary.yaml",
            "--section",
            "Roof",
            "--component",
            "Shingles",
            "--status",
            "BROKEN",
            "--severity",
            "COSMETIC",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--status" in captured.err
    assert "Traceback" not in captured.err


def test_domain_error_returns_exit_code_one(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "run",
            "--config",
            str(tmp_path / "missing.yaml"),
            "--input",
            str(tmp_path / "observations.xlsx"),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_existing_config_is_not_overwritten(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "config.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert output_path.read_text(encoding="utf-8") == "existing"
