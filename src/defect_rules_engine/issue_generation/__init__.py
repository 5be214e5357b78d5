"""Issue generation exports."""

from .issue_generator import DEFAULT_TRADE_CATEGORY, generate_issue, severity_score_to_label
from .issue_models import GeneratedIssue, IssueGeneratorInput, SeverityLabel, Urgency

__all__ = [
    "DEFAULT_TRADE_CATEGORY",
    "GeneratedIssue",
    "IssueGeneratorInput",
    "SeverityLabel",
    "Urgency",
    "generate_issue",
    "severity_score_to_label",
]
