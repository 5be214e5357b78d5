"""Issue generation service."""

from __future__ import annotations

from .issue_models import GeneratedIssue, IssueGeneratorInput, SeverityLabel

DEFAULT_TRADE_CATEGORY = "General"

_SEVERITY_LABELS = {
    4: SeverityLabel.CRITICAL,
    3: SeverityLabel.HIGH,
    2: SeverityLabel.MEDIUM,
}


def severity_score_to_label(score: int) -> SeverityLabel:
    """Map a 1-4 severity score to its label; anything unknown is LOW."""
    return _SEVERITY_LABELS.get(score, SeverityLabel.LOW)


def generate_issue(generator_input: IssueGeneratorInput) -> GeneratedIssue | None:
    """Build an issue from a successful match, or return None for manual review."""
    match_result = generator_input.match_result
    if (
        not match_result.matched
        or not match_result.normalized_title
        or not match_result.severity_score
    ):
        return None

    return GeneratedIssue(
        observation_id=generator_input.observation_id,
        inspection_id=generator_input.inspection_id,
        property_id=generator_input.property_id,
        normalized_title=match_result.normalized_title,
        normalized_description=match_result.normalized_description or "",
        homeowner_description=match_result.homeowner_description or "",
        master_format_code=match_result.master_format_code,
        trade_category=match_result.trade_category or DEFAULT_TRADE_CATEGORY,
        severity_score=match_result.severity_score,
        severity_label=severity_score_to_label(match_result.severity_score),
        risk_category=match_result.risk_category,
        urgency=generator_input.urgency,
        is_safety_hazard=match_result.is_safety_hazard,
        insurance_relevant=match_result.insurance_relevant,
    )
