"""Severity to urgency heuristic used when an observation carries no urgency."""

from __future__ import annotations

from defect_rules_engine.defect_matching.match_outcomes import ObservationSeverity
from defect_rules_engine.issue_generation.issue_models import Urgency

_URGENCY_BY_SEVERITY = {
    ObservationSeverity.SAFETY_HAZARD: Urgency.IMMEDIATE,
    ObservationSeverity.MAJOR_DEFECT: Urgency.SHORT_TERM,
    ObservationSeverity.MINOR_DEFECT: Urgency.LONG_TERM,
    ObservationSeverity.COSMETIC: Urgency.MONITOR,
    ObservationSeverity.INFORMATIONAL: Urgency.MONITOR,
}


def derive_urgency(severity: ObservationSeverity) -> Urgency:
    """Return the default urgency for an observed severity."""
    return _URGENCY_BY_SEVERITY.get(severity, Urgency.MONITOR)


def resolve_urgency(
    severity: ObservationSeverity,
    urgency: Urgency | None,
    default_urgency: Urgency | None = None,
) -> Urgency:
    """Pick the explicit urgency, then the configured default, then the derived one."""
    if urgency is not None:
        return urgency
    if default_urgency is not None:
        return default_urgency
    return derive_urgency(severity)
