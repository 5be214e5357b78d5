"""Read-only query contract between the matcher and a defect dictionary store."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .match_outcomes import DefectEntry, ObservationSeverity, ObservationStatus


@dataclass(frozen=True)
class DefectQuery:
    """Equality filter over defect dictionary entries.

    ``component_match=None`` accepts any component. With ``any_severity=False``
    the entry severity must equal ``severity_match``, so ``severity_match=None``
    selects only severity-agnostic entries.
    """

    section_template_id: str
    condition_match: ObservationStatus
    component_match: str | None = None
    severity_match: ObservationSeverity | None = None
    any_severity: bool = True
    is_active: bool = True

    def accepts(self, entry: DefectEntry) -> bool:
        """Return True when the entry satisfies every filter field."""
        if entry.is_active != self.is_active:
            return False
        if entry.section_template_id != self.section_template_id:
            return False
        if entry.condition_match != self.condition_match:
            return False
        if self.component_match is not None and entry.component_match != self.component_match:
            return False
        if not self.any_severity and entry.severity_match != self.severity_match:
            return False
        return True


class DefectDictionaryReader(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for dictionary stores queried by the matcher."""

    def find_candidates(self, query: DefectQuery) -> Sequence[DefectEntry]: ...
