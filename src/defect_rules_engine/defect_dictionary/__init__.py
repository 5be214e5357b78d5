"""Defect dictionary exports."""

from .dictionary_loader import load_defect_dictionary, parse_dictionary_document
from .dictionary_store import DefectDictionary
from .dictionary_workbook import (
    DICTIONARY_COLUMNS,
    DICTIONARY_SHEET_NAME,
    generate_dictionary_workbook,
)
from .entry_parsing import DictionaryValidationError, build_defect_entries, derive_defect_id

__all__ = [
    "DICTIONARY_COLUMNS",
    "DICTIONARY_SHEET_NAME",
    "DefectDictionary",
    "DictionaryValidationError",
    "build_defect_entries",
    "derive_defect_id",
    "generate_dictionary_workbook",
    "load_defect_dictionary",
    "parse_dictionary_document",
]
