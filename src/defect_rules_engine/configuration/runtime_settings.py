"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from defect_rules_engine.issue_generation.issue_models import Urgency


@dataclass(frozen=True)
class DictionarySettings:
    """Location of the defect dictionary file."""

    path: Path


@dataclass(frozen=True)
class ProcessingSettings:
    """Batch processing options."""

    parallelism: int
    default_urgency: Urgency | None


@dataclass(frozen=True)
class OutputSettings:
    """Result workbook destination."""

    directory: Path | None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    dictionary: DictionarySettings
    processing: ProcessingSettings
    output: OutputSettings
