"""Defect dictionary loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .dictionary_store import DefectDictionary
from .dictionary_workbook import read_dictionary_rows
from .entry_parsing import DictionaryValidationError, build_defect_entries

DOCUMENT_SUFFIXES = (".yaml", ".yml", ".json")
WORKBOOK_SUFFIXES = (".xlsx",)

_LOGGER = logging.getLogger(__name__)


def load_defect_dictionary(dictionary_path: Path | str) -> DefectDictionary:
    """Load and validate a defect dictionary from a YAML, JSON or Excel file."""
    path = Path(dictionary_path)
    if not path.exists():
        raise DictionaryValidationError(f"Defect dictionary file not found: {path}")

    suffix = path.suffix.lower()
    if suffix in DOCUMENT_SUFFIXES:
        raw_entries = _read_document_entries(path)
    elif suffix in WORKBOOK_SUFFIXES:
        raw_entries = read_dictionary_rows(path)
    else:
        raise DictionaryValidationError(
            f"Unsupported defect dictionary format '{path.suffix}' "
            f"(expected one of {', '.join(DOCUMENT_SUFFIXES + WORKBOOK_SUFFIXES)})."
        )

    dictionary = DefectDictionary(build_defect_entries(raw_entries))
    _LOGGER.info(
        "Loaded %d defect dictionary entries across %d sections from %s",
        len(dictionary),
        len(dictionary.section_template_ids()),
        path,
    )
    return dictionary


def parse_dictionary_document(text: str) -> DefectDictionary:
    """Build a dictionary from YAML or JSON document text."""
    return DefectDictionary(build_defect_entries(_document_entries(text)))


def _read_document_entries(path: Path) -> list[tuple[str, Mapping[str, Any]]]:
    return _document_entries(path.read_text(encoding="utf-8"))


def _document_entries(text: str) -> list[tuple[str, Mapping[str, Any]]]:
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DictionaryValidationError(f"Failed to parse defect dictionary: {exc}") from exc

    if isinstance(parsed, Mapping):
        parsed = parsed.get("entries")
    if parsed is None:
        raise DictionaryValidationError("Defect dictionary does not contain any entries.")
    if not isinstance(parsed, Sequence) or isinstance(parsed, str):
        raise DictionaryValidationError("Defect dictionary 'entries' must be a list.")

    labelled: list[tuple[str, Mapping[str, Any]]] = []
    for index, item in enumerate(parsed, start=1):
        if not isinstance(item, Mapping):
            raise DictionaryValidationError(f"entry {index}: must be a mapping.")
        labelled.append((f"entry {index}", item))
    return labelled
