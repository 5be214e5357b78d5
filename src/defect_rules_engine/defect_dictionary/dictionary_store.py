"""In-memory read-only defect dictionary store."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from defect_rules_engine.defect_matching.dictionary_contracts import DefectQuery
from defect_rules_engine.defect_matching.match_outcomes import DefectEntry, ObservationStatus


class DefectDictionary:
    """Immutable defect dictionary answering matcher queries in dictionary order."""

    def __init__(self, entries: Iterable[DefectEntry]) -> None:
        self._entries = tuple(entries)
        index: dict[tuple[str, ObservationStatus], list[DefectEntry]] = {}
        for entry in self._entries:
            index.setdefault((entry.section_template_id, entry.condition_match), []).append(entry)
        self._by_section_and_condition = {key: tuple(value) for key, value in index.items()}

    @property
    def entries(self) -> tuple[DefectEntry, ...]:
        return self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def section_template_ids(self) -> tuple[str, ...]:
        """Return the distinct section template ids in first-seen order."""
        return tuple(dict.fromkeys(entry.section_template_id for entry in self._entries))

    def find_candidates(self, query: DefectQuery) -> Sequence[DefectEntry]:
        bucket = self._by_section_and_condition.get(
            (query.section_template_id, query.condition_match), ()
        )
        return tuple(entry for entry in bucket if query.accepts(entry))
