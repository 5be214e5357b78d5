"""Run execution domain exports."""

from .rules_run_use_case import RunExecutionError, execute_rules_run
from .run_contracts import RunArtifacts, RunOutcome, RunRequest

__all__ = [
    "RunRequest",
    "RunOutcome",
    "RunArtifacts",
    "RunExecutionError",
    "execute_rules_run",
]
