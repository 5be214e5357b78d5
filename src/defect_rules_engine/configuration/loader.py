"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from defect_rules_engine.issue_generation.issue_models import Urgency

from .runtime_settings import (
    Configuration,
    DictionarySettings,
    OutputSettings,
    ProcessingSettings,
)

DEFAULT_PARALLELISM = 4


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    return Configuration(
        path=path,
        dictionary=_parse_dictionary_section(parsed.get("dictionary"), base_path),
        processing=_parse_processing_section(parsed.get("processing")),
        output=_parse_output_section(parsed.get("output"), base_path),
    )


def _parse_dictionary_section(value: Any, base_path: Path) -> DictionarySettings:
    section = _require_mapping(value, "dictionary")
    raw_path = _require_non_empty_string(section.get("path"), "dictionary.path")
    dictionary_path = _resolve_path(base_path, raw_path)
    if not dictionary_path.exists():
        raise ConfigurationError(f"Defect dictionary file not found: {dictionary_path}")
    return DictionarySettings(path=dictionary_path)


def _parse_processing_section(value: Any) -> ProcessingSettings:
    section = _optional_mapping(value, "processing")
    parallelism = _require_positive_int(
        section.get("parallelism", DEFAULT_PARALLELISM), "processing.parallelism"
    )
    urgency_raw = _optional_string(section.get("default_urgency"), "processing.default_urgency")
    default_urgency = None
    if urgency_raw is not None:
        try:
            default_urgency = Urgency(urgency_raw.upper())
        except ValueError as exc:
            allowed = ", ".join(item.value for item in Urgency)
            raise ConfigurationError(
                f"processing.default_urgency must be one of {allowed}."
            ) from exc
    return ProcessingSettings(parallelism=parallelism, default_urgency=default_urgency)


def _parse_output_section(value: Any, base_path: Path) -> OutputSettings:
    section = _optional_mapping(value, "output")
    directory = _optional_string(section.get("directory"), "output.directory")
    return OutputSettings(
        directory=_resolve_path(base_path, directory) if directory else None,
    )


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
