"""Defect matching domain exports."""

from .dictionary_contracts import DefectDictionaryReader, DefectQuery
from .match_outcomes import (
    DefectEntry,
    MatchInput,
    MatchResult,
    MatchType,
    ObservationSeverity,
    ObservationStatus,
)
from .observation_matcher import is_fuzzy_component_match, match_observation
from .string_distance import levenshtein_distance

__all__ = [
    "DefectDictionaryReader",
    "DefectEntry",
    "DefectQuery",
    "MatchInput",
    "MatchResult",
    "MatchType",
    "ObservationSeverity",
    "ObservationStatus",
    "is_fuzzy_component_match",
    "levenshtein_distance",
    "match_observation",
]
