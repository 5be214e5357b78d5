"""Observation to defect dictionary matching service.

Strategy, first hit wins:

1. exact component and condition with the observed severity
2. exact component and condition on a severity-agnostic entry
3. fuzzy component (substring or edit distance) with the exact condition
4. no match, the observation is flagged for manual review
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .dictionary_contracts import DefectDictionaryReader, DefectQuery
from .match_outcomes import DefectEntry, MatchInput, MatchResult, MatchType
from .string_distance import contains_either, levenshtein_distance

FUZZY_MAX_DISTANCE = 3

_LOGGER = logging.getLogger(__name__)


def match_observation(
    match_input: MatchInput, dictionary: DefectDictionaryReader
) -> MatchResult:
    """Match one observation classification key against the defect dictionary."""
    entry = _first(
        dictionary.find_candidates(
            DefectQuery(
                section_template_id=match_input.section_template_id,
                condition_match=match_input.status,
                component_match=match_input.component,
                severity_match=match_input.severity,
                any_severity=False,
            )
        )
    )
    if entry is None:
        entry = _first(
            dictionary.find_candidates(
                DefectQuery(
                    section_template_id=match_input.section_template_id,
                    condition_match=match_input.status,
                    component_match=match_input.component,
                    severity_match=None,
                    any_severity=False,
                )
            )
        )
    if entry is not None:
        _LOGGER.debug("Exact match %s for component %r", entry.defect_id, match_input.component)
        return MatchResult.from_entry(entry, MatchType.EXACT)

    candidates = dictionary.find_candidates(
        DefectQuery(
            section_template_id=match_input.section_template_id,
            condition_match=match_input.status,
        )
    )
    entry = _first_fuzzy_candidate(match_input.component, candidates)
    if entry is not None:
        _LOGGER.debug(
            "Fuzzy match %s (%r) for component %r",
            entry.defect_id,
            entry.component_match,
            match_input.component,
        )
        return MatchResult.from_entry(entry, MatchType.FUZZY)

    _LOGGER.debug(
        "No dictionary entry for %s/%r/%s among %d candidates",
        match_input.section_template_id,
        match_input.component,
        match_input.status.value,
        len(candidates),
    )
    return MatchResult.unmatched()


def is_fuzzy_component_match(component: str, candidate_component: str) -> bool:
    """Return True when two component names are close enough to be the same part."""
    component_lower = component.lower()
    candidate_lower = candidate_component.lower()
    if contains_either(component_lower, candidate_lower):
        return True
    return levenshtein_distance(component_lower, candidate_lower) < FUZZY_MAX_DISTANCE


def _first_fuzzy_candidate(
    component: str, candidates: Sequence[DefectEntry]
) -> DefectEntry | None:
    # First acceptable candidate in dictionary order, not the closest one.
    for candidate in candidates:
        if is_fuzzy_component_match(component, candidate.component_match):
            return candidate
    return None


def _first(entries: Sequence[DefectEntry]) -> DefectEntry | None:
    return entries[0] if entries else None
