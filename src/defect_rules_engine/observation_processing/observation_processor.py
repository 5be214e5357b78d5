"""Runs the matcher and issue generator for individual observations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from defect_rules_engine.defect_matching import DefectDictionaryReader, match_observation
from defect_rules_engine.issue_generation import IssueGeneratorInput, Urgency, generate_issue

from .processing_contracts import Observation, ObservationOutcome
from .urgency_policy import resolve_urgency

_LOGGER = logging.getLogger(__name__)


def process_observation(
    observation: Observation,
    dictionary: DefectDictionaryReader,
    *,
    default_urgency: Urgency | None = None,
) -> ObservationOutcome:
    """Match one observation and build its issue when the match succeeds."""
    urgency = resolve_urgency(observation.severity, observation.urgency, default_urgency)
    match_result = match_observation(observation.match_input(), dictionary)
    issue = generate_issue(
        IssueGeneratorInput(
            observation_id=observation.observation_id,
            inspection_id=observation.inspection_id,
            property_id=observation.property_id,
            match_result=match_result,
            urgency=urgency,
        )
    )
    outcome = ObservationOutcome(
        observation=observation,
        match_result=match_result,
        issue=issue,
        urgency=urgency,
    )
    if outcome.needs_review:
        _LOGGER.info(
            "Observation %s (%s/%r) flagged for manual review",
            observation.observation_id,
            observation.section_template_id,
            observation.component,
        )
    else:
        _LOGGER.debug(
            "Observation %s matched %s (%s)",
            observation.observation_id,
            match_result.defect_id,
            match_result.match_type.value,
        )
    return outcome


def requires_issue_regeneration(current: Observation, updated: Observation) -> bool:
    """Return True when an edit invalidates the issue generated for an observation.

    The stored issue is deleted and regenerated whenever status or severity
    changes; other edits keep it.
    """
    return current.status != updated.status or current.severity != updated.severity


def process_observations(
    observations: Sequence[Observation],
    dictionary: DefectDictionaryReader,
    *,
    parallelism: int = 1,
    default_urgency: Urgency | None = None,
) -> list[ObservationOutcome]:
    """Process observations concurrently and return outcomes in input order."""
    max_workers = max(1, parallelism)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [
            executor.submit(
                process_observation,
                observation,
                dictionary,
                default_urgency=default_urgency,
            )
            for observation in observations
        ]
        return [future.result() for future in futures]
