"""Observation matcher tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from defect_rules_engine.defect_dictionary.dictionary_store import DefectDictionary
from defect_rules_engine.defect_matching.dictionary_contracts import DefectQuery
from defect_rules_engine.defect_matching.match_outcomes import (
    DefectEntry,
    MatchInput,
    MatchResult,
    MatchType,
    ObservationSeverity,
    ObservationStatus,
)
from defect_rules_engine.defect_matching.observation_matcher import (
    is_fuzzy_component_match,
    match_observation,
)


def _entry(**overrides) -> DefectEntry:
    defaults: dict[str, Any] = {
        "defect_id": "D-1",
        "section_template_id": "Roof",
        "component_match": "Shingles",
        "condition_match": ObservationStatus.DEFICIENT,
        "severity_match": None,
        "normalized_title": "Asphalt Shingle Repair/Replacement",
        "normalized_description": "Shingles are damaged.",
        "homeowner_description": "Some shingles are missing.",
        "master_format_code": "07-31-13",
        "trade_category": "Roofing",
        "default_severity_score": 3,
        "risk_category": "Water Intrusion",
        "is_safety_hazard": False,
        "insurance_relevant": True,
        "is_active": True,
    }
    defaults.update(overrides)
    return DefectEntry(**defaults)


def _input(
    component: str = "Shingles",
    *,
    section_template_id: str = "Roof",
    status: ObservationStatus = ObservationStatus.DEFICIENT,
    severity: ObservationSeverity = ObservationSeverity.MAJOR_DEFECT,
) -> MatchInput:
    return MatchInput(
        section_template_id=section_template_id,
        component=component,
        status=status,
        severity=severity,
    )


class _RecordingReader:
    """Dictionary reader double that records every query it receives."""

    def __init__(self, entries: Sequence[DefectEntry]) -> None:
        self._store = DefectDictionary(entries)
        self.queries: list[DefectQuery] = []

    def find_candidates(self, query: DefectQuery) -> Sequence[DefectEntry]:
        self.queries.append(query)
        return self._store.find_candidates(query)


def test_exact_match_with_severity_wins_over_severity_agnostic_entry() -> None:
    dictionary = DefectDictionary(
        [
            _entry(defect_id="ANY", severity_match=None),
            _entry(defect_id="HAZARD", severity_match=ObservationSeverity.SAFETY_HAZARD),
        ]
    )

    result = match_observation(
        _input(severity=ObservationSeverity.SAFETY_HAZARD), dictionary
    )

    assert result.matched is True
    assert result.defect_id == "HAZARD"
    assert result.match_type == MatchType.EXACT


def test_severity_agnostic_entry_covers_other_severities() -> None:
    dictionary = DefectDictionary(
        [
            _entry(defect_id="HAZARD", severity_match=ObservationSeverity.SAFETY_HAZARD),
            _entry(defect_id="ANY", severity_match=None),
        ]
    )

    result = match_observation(_input(severity=ObservationSeverity.COSMETIC), dictionary)

    assert result.defect_id == "ANY"
    assert result.match_type == MatchType.EXACT


def test_exact_match_preferred_over_earlier_fuzzy_candidate() -> None:
    dictionary = DefectDictionary(
        [
            _entry(defect_id="FUZZY", component_match="Shingle"),
            _entry(defect_id="EXACT", component_match="Shingles"),
        ]
    )

    result = match_observation(_input("Shingles"), dictionary)

    assert result.defect_id == "EXACT"
    assert result.match_type == MatchType.EXACT


def test_severity_specific_entry_is_not_exact_for_other_severity() -> None:
    dictionary = DefectDictionary(
        [_entry(defect_id="HAZARD", severity_match=ObservationSeverity.SAFETY_HAZARD)]
    )

    result = match_observation(_input(severity=ObservationSeverity.MINOR_DEFECT), dictionary)

    # Reachable only through the fuzzy tier, which ignores severity.
    assert result.defect_id == "HAZARD"
    assert result.match_type == MatchType.FUZZY


def test_exact_component_comparison_is_case_sensitive() -> None:
    dictionary = DefectDictionary([_entry(component_match="Shingles")])

    result = match_observation(_input("shingles"), dictionary)

    assert result.matched is True
    assert result.match_type == MatchType.FUZZY


def test_fuzzy_substring_match() -> None:
    dictionary = DefectDictionary([_entry(defect_id="SHINGLES", component_match="Shingles")])

    result = match_observation(_input("Shingle"), dictionary)

    assert result.defect_id == "SHINGLES"
    assert result.match_type == MatchType.FUZZY


def test_fuzzy_substring_match_when_input_contains_dictionary_component() -> None:
    dictionary = DefectDictionary([_entry(component_match="Gutters")])

    result = match_observation(_input("Front gutters over porch"), dictionary)

    assert result.match_type == MatchType.FUZZY


def test_fuzzy_edit_distance_match() -> None:
    dictionary = DefectDictionary(
        [
            _entry(
                defect_id="FACADE",
                section_template_id="Exterior",
                component_match="Facade",
            )
        ]
    )

    result = match_observation(_input("Fasade", section_template_id="Exterior"), dictionary)

    assert result.defect_id == "FACADE"
    assert result.match_type == MatchType.FUZZY


def test_distant_component_falls_through_to_no_match() -> None:
    dictionary = DefectDictionary(
        [_entry(section_template_id="Exterior", component_match="Facade")]
    )

    result = match_observation(
        _input("Completely Different Thing", section_template_id="Exterior"), dictionary
    )

    assert result == MatchResult.unmatched()


def test_fuzzy_match_takes_first_acceptable_candidate_not_closest() -> None:
    # "Facades" is 2 edits from "fasade", "Facade" only 1.
    dictionary = DefectDictionary(
        [
            _entry(defect_id="FIRST", section_template_id="Exterior", component_match="Facades"),
            _entry(defect_id="CLOSEST", section_template_id="Exterior", component_match="Facade"),
        ]
    )

    result = match_observation(_input("Fasade", section_template_id="Exterior"), dictionary)

    assert result.defect_id == "FIRST"
    assert result.match_type == MatchType.FUZZY


def test_fuzzy_match_keeps_condition_exact() -> None:
    dictionary = DefectDictionary(
        [_entry(component_match="Shingles", condition_match=ObservationStatus.MAINTENANCE_NEEDED)]
    )

    result = match_observation(_input("Shingle"), dictionary)

    assert result.matched is False


def test_fuzzy_match_stays_within_section() -> None:
    dictionary = DefectDictionary([_entry(section_template_id="Exterior")])

    result = match_observation(_input("Shingles", section_template_id="Roof"), dictionary)

    assert result.matched is False


def test_inactive_exact_entry_is_skipped() -> None:
    dictionary = DefectDictionary([_entry(is_active=False)])

    result = match_observation(_input("Shingles"), dictionary)

    assert result.matched is False
    assert result.match_type == MatchType.NONE


def test_inactive_entry_skipped_in_favor_of_active_fuzzy_candidate() -> None:
    dictionary = DefectDictionary(
        [
            _entry(defect_id="RETIRED", is_active=False),
            _entry(defect_id="ACTIVE", component_match="Shingle"),
        ]
    )

    result = match_observation(_input("Shingles"), dictionary)

    assert result.defect_id == "ACTIVE"
    assert result.match_type == MatchType.FUZZY


def test_match_result_copies_every_dictionary_field() -> None:
    entry = _entry(
        defect_id="D-9",
        normalized_description=None,
        homeowner_description="Plain words.",
        master_format_code=None,
        trade_category=None,
        default_severity_score=4,
        risk_category=None,
        is_safety_hazard=True,
        insurance_relevant=False,
    )

    result = match_observation(_input(), DefectDictionary([entry]))

    assert result == MatchResult(
        matched=True,
        defect_id="D-9",
        normalized_title=entry.normalized_title,
        normalized_description=None,
        homeowner_description="Plain words.",
        master_format_code=None,
        trade_category=None,
        severity_score=4,
        risk_category=None,
        is_safety_hazard=True,
        insurance_relevant=False,
        match_type=MatchType.EXACT,
    )


def test_unmatched_result_has_all_descriptive_fields_empty() -> None:
    result = match_observation(_input(), DefectDictionary([]))

    assert result.matched is False
    assert result.defect_id is None
    assert result.normalized_title is None
    assert result.normalized_description is None
    assert result.homeowner_description is None
    assert result.master_format_code is None
    assert result.trade_category is None
    assert result.severity_score is None
    assert result.risk_category is None
    assert result.is_safety_hazard is False
    assert result.insurance_relevant is False
    assert result.match_type == MatchType.NONE


def test_queries_run_in_tier_order_and_stop_at_first_hit() -> None:
    reader = _RecordingReader([_entry(severity_match=None)])

    match_observation(_input(severity=ObservationSeverity.COSMETIC), reader)

    assert len(reader.queries) == 2
    first, second = reader.queries
    assert first.component_match == "Shingles"
    assert first.any_severity is False
    assert first.severity_match == ObservationSeverity.COSMETIC
    assert second.component_match == "Shingles"
    assert second.any_severity is False
    assert second.severity_match is None


def test_fuzzy_tier_queries_by_section_and_condition_only() -> None:
    reader = _RecordingReader([])

    match_observation(_input("Anything"), reader)

    assert len(reader.queries) == 3
    fuzzy_query = reader.queries[2]
    assert fuzzy_query.section_template_id == "Roof"
    assert fuzzy_query.condition_match == ObservationStatus.DEFICIENT
    assert fuzzy_query.component_match is None
    assert fuzzy_query.any_severity is True
    assert all(query.is_active for query in reader.queries)


def test_match_result_record_renders_match_type_value() -> None:
    record = MatchResult.unmatched().to_record()

    assert record["match_type"] == "none"
    assert record["matched"] is False


def test_is_fuzzy_component_match_is_case_insensitive() -> None:
    assert is_fuzzy_component_match("MAIN PANEL", "main panel") is True
    assert is_fuzzy_component_match("Main Panle", "Main Panel") is True
    assert is_fuzzy_component_match("Sub Panel", "Main Panel") is False
