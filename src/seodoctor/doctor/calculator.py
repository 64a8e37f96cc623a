"""
The SEO doctor: runs an entity's field-validator table and aggregates the
results into a score, health checks and a prioritised issue list.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Set, Tuple

import structlog

from seodoctor.config import settings
from seodoctor.config.config import HealthThresholds, OverallThresholds
from seodoctor.exceptions import ConfigurationError
from seodoctor.observability.logging import entity_context
from seodoctor.observability.metrics import track_evaluation
from seodoctor.protocols import (
    DoctorReport,
    EntityConfig,
    HealthBand,
    HealthCheck,
    ScoreResult,
    Status,
)
from seodoctor.utils.numbers import clamp_percentage

logger = structlog.get_logger(__name__)

ENGINE = "doctor"


def _check_config(config: EntityConfig) -> None:
    if config.max_score <= 0:
        raise ConfigurationError(f"{config.entity_type}: max_score must be positive, got {config.max_score}")
    if not config.rules:
        raise ConfigurationError(f"{config.entity_type}: configuration has no field rules")


def calculate_seo_score(data: Mapping[str, Any], config: EntityConfig) -> ScoreResult:
    """
    Sum the points of every rule in ``config``.

    A field bound to two rules is scored by both, so the total can only reach
    ``max_score`` when every rule passes at full points.
    """
    _check_config(config)
    total = sum(rule.evaluate(data).score for rule in config.rules)
    percentage = clamp_percentage(total / config.max_score * 100)
    return ScoreResult(score=total, max_score=config.max_score, percentage=percentage)


def run_health_checks(data: Mapping[str, Any], config: EntityConfig) -> List[HealthCheck]:
    """One check per distinct (field, label) rule, in configuration order."""
    checks: List[HealthCheck] = []
    seen: Set[Tuple[str, str]] = set()
    for rule in config.rules:
        key = (rule.name, rule.label)
        if key in seen:
            continue
        seen.add(key)
        result = rule.evaluate(data)
        checks.append(
            HealthCheck(
                field=rule.name,
                label=rule.label,
                status=result.status,
                message=result.message,
                score=result.score,
            )
        )
    return checks


def classify_health(percentage: int, thresholds: Optional[HealthThresholds] = None) -> HealthBand:
    """Band used by score gauges and badges: excellent, good or poor."""
    thresholds = thresholds or settings.scoring.health
    if percentage >= thresholds.excellent:
        return HealthBand.EXCELLENT
    if percentage >= thresholds.good:
        return HealthBand.GOOD
    return HealthBand.POOR


def classify_overall(percentage: int, thresholds: Optional[OverallThresholds] = None) -> HealthBand:
    """Band used by the overall score card, which adds a ``fair`` step."""
    thresholds = thresholds or settings.scoring.overall
    if percentage >= thresholds.excellent:
        return HealthBand.EXCELLENT
    if percentage >= thresholds.good:
        return HealthBand.GOOD
    if percentage >= thresholds.fair:
        return HealthBand.FAIR
    return HealthBand.POOR


def prioritize_checks(checks: Iterable[HealthCheck]) -> List[HealthCheck]:
    """Non-passing checks, failures first, then warnings, then informational notes."""
    return sorted(
        (check for check in checks if check.status is not Status.PASS),
        key=lambda check: check.status.rank,
    )


def diagnose(data: Mapping[str, Any], config: EntityConfig) -> DoctorReport:
    """Score ``data`` against ``config`` and collect everything the doctor panel shows."""
    with entity_context(data):
        with track_evaluation(ENGINE, config.entity_type) as outcome:
            score = calculate_seo_score(data, config)
            checks = run_health_checks(data, config)
            structured = config.structured_data(data) if config.structured_data else {}
            outcome["percentage"] = score.percentage

        report = DoctorReport(
            entity_type=config.entity_type,
            score=score,
            band=classify_health(score.percentage),
            checks=checks,
            issues=prioritize_checks(checks),
            structured_data=structured,
        )
        logger.debug(
            "Entity diagnosed",
            entity_type=config.entity_type,
            score=score.score,
            max_score=score.max_score,
            percentage=score.percentage,
            issues=len(report.issues),
        )
        return report
