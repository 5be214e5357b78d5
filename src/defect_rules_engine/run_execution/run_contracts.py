"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from defect_rules_engine.configuration.runtime_settings import Configuration
from defect_rules_engine.defect_dictionary.dictionary_store import DefectDictionary
from defect_rules_engine.observation_ingestion.observation_models import ObservationRow


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one run."""

    config_path: str
    input_path: str
    output_dir: str | None = None


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    output_path: Path
    issues_created: int
    needs_review: int
    skipped: int


@dataclass(frozen=True)
class RunArtifacts:
    """Loaded domain artifacts required during run execution."""

    configuration: Configuration
    dictionary: DefectDictionary
    rows: tuple[ObservationRow, ...]
