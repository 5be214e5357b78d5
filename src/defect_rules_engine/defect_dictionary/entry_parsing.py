"""Validation of raw defect dictionary rows into dictionary entries."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping, Sequence
from typing import Any

from defect_rules_engine.defect_matching.match_outcomes import (
    DefectEntry,
    ObservationSeverity,
    ObservationStatus,
)

MIN_SEVERITY_SCORE = 1
MAX_SEVERITY_SCORE = 4

_TRUE_VALUES = {"true", "1", "yes", "y"}
_FALSE_VALUES = {"false", "0", "no", "n"}

EntryKey = tuple[str, str, ObservationStatus, ObservationSeverity | None]


class DictionaryValidationError(Exception):
    """Raised when a defect dictionary source is invalid."""


def build_defect_entries(
    raw_entries: Sequence[tuple[str, Mapping[str, Any]]],
) -> tuple[DefectEntry, ...]:
    """Validate labelled raw rows and return entries in source order.

    Args:
      raw_entries: ``(label, row)`` pairs where the label locates the row in its
        source for error messages (for example ``"entry 3"`` or ``"row 7"``).

    Raises:
      DictionaryValidationError: If a row is invalid, a rule key or id repeats,
        or no rows are given.
    """
    if not raw_entries:
        raise DictionaryValidationError("Defect dictionary does not contain any entries.")

    entries: list[DefectEntry] = []
    seen_keys: dict[EntryKey, str] = {}
    seen_ids: dict[str, str] = {}
    for label, raw in raw_entries:
        entry = build_defect_entry(raw, label)
        key = entry_key(entry)
        previous = seen_keys.get(key)
        if previous:
            raise DictionaryValidationError(
                f"Duplicate rule for {_describe_key(key)} ({previous} and {label})."
            )
        seen_keys[key] = label
        previous_id = seen_ids.get(entry.defect_id)
        if previous_id:
            raise DictionaryValidationError(
                f"Duplicate id '{entry.defect_id}' ({previous_id} and {label})."
            )
        seen_ids[entry.defect_id] = label
        entries.append(entry)
    return tuple(entries)


def build_defect_entry(raw: Mapping[str, Any], label: str) -> DefectEntry:
    """Validate one raw dictionary row."""
    section_value = raw.get("section_template_id")
    if _is_empty(section_value):
        section_value = raw.get("section")
    section_template_id = _require_text(section_value, "section_template_id", label)
    component_match = _require_text(raw.get("component_match"), "component_match", label)
    condition_match = _parse_status(raw.get("condition_match"), label)
    severity_match = _parse_severity(raw.get("severity_match"), label)

    entry_id = _optional_field(raw, "id", label)
    if entry_id is None:
        entry_id = derive_defect_id(
            section_template_id, component_match, condition_match, severity_match
        )

    return DefectEntry(
        defect_id=entry_id,
        section_template_id=section_template_id,
        component_match=component_match,
        condition_match=condition_match,
        severity_match=severity_match,
        normalized_title=_require_text(raw.get("normalized_title"), "normalized_title", label),
        normalized_description=_optional_field(raw, "normalized_description", label),
        homeowner_description=_optional_field(raw, "homeowner_description", label),
        master_format_code=_optional_field(raw, "master_format_code", label),
        trade_category=_optional_field(raw, "trade_category", label),
        default_severity_score=_parse_severity_score(raw.get("default_severity_score"), label),
        risk_category=_optional_field(raw, "risk_category", label),
        is_safety_hazard=_parse_bool(raw.get("is_safety_hazard"), False, "is_safety_hazard", label),
        insurance_relevant=_parse_bool(
            raw.get("insurance_relevant"), False, "insurance_relevant", label
        ),
        is_active=_parse_bool(raw.get("is_active"), True, "is_active", label),
    )


def entry_key(entry: DefectEntry) -> EntryKey:
    return (
        entry.section_template_id,
        entry.component_match,
        entry.condition_match,
        entry.severity_match,
    )


def derive_defect_id(
    section_template_id: str,
    component_match: str,
    condition_match: ObservationStatus,
    severity_match: ObservationSeverity | None,
) -> str:
    """Return a stable id for entries whose source does not provide one."""
    parts = (
        section_template_id,
        component_match,
        condition_match.value,
        severity_match.value if severity_match else "",
    )
    return hashlib.sha256("\x1f".join(parts).encode("utf-8")).hexdigest()[:16]


def _describe_key(key: EntryKey) -> str:
    section, component, condition, severity = key
    severity_text = severity.value if severity else "any severity"
    return f"{section}/{component}/{condition.value}/{severity_text}"


def _parse_status(value: Any, label: str) -> ObservationStatus:
    text = _require_text(value, "condition_match", label)
    try:
        return ObservationStatus(text.upper())
    except ValueError as exc:
        raise DictionaryValidationError(
            f"{label}: unknown condition_match '{text}'."
        ) from exc


def _parse_severity(value: Any, label: str) -> ObservationSeverity | None:
    text = _optional_text(value, "severity_match", label)
    if text is None:
        return None
    try:
        return ObservationSeverity(text.upper())
    except ValueError as exc:
        raise DictionaryValidationError(f"{label}: unknown severity_match '{text}'.") from exc


def _parse_severity_score(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise DictionaryValidationError(f"{label}: default_severity_score must be an integer.")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if not isinstance(value, int):
        raise DictionaryValidationError(f"{label}: default_severity_score must be an integer.")
    if not MIN_SEVERITY_SCORE <= value <= MAX_SEVERITY_SCORE:
        raise DictionaryValidationError(
            f"{label}: default_severity_score must be between "
            f"{MIN_SEVERITY_SCORE} and {MAX_SEVERITY_SCORE}."
        )
    return value


def _parse_bool(value: Any, default: bool, field_name: str, label: str) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if not lowered:
            return default
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    if isinstance(value, int | float):
        return bool(value)
    raise DictionaryValidationError(f"{label}: unable to interpret {field_name} value {value!r}.")


def _optional_field(raw: Mapping[str, Any], field_name: str, label: str) -> str | None:
    return _optional_text(raw.get(field_name), field_name, label)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _optional_text(value: Any, field_name: str, label: str) -> str | None:
    if value is None:
        return None
    # YAML reads unquoted yes/no/on/off as booleans.
    if isinstance(value, bool) or not isinstance(value, str | int | float):
        raise DictionaryValidationError(
            f"{label}: {field_name} must be text, got {type(value).__name__} {value!r}."
        )
    stripped = str(value).strip()
    return stripped or None


def _require_text(value: Any, field_name: str, label: str) -> str:
    text = _optional_text(value, field_name, label)
    if text is None:
        raise DictionaryValidationError(f"{label}: {field_name} is required.")
    return text
