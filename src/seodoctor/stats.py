"""Bulk score summaries for list pages and dashboards."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping

import structlog

from seodoctor.doctor.calculator import calculate_seo_score, classify_health
from seodoctor.protocols import EntityConfig, HealthBand
from seodoctor.utils.numbers import round_half_up

logger = structlog.get_logger(__name__)


def _empty_bands() -> Dict[HealthBand, int]:
    return {band: 0 for band in HealthBand}


@dataclass
class ScoreSummary:
    count: int = 0
    average: int = 0
    minimum: int = 0
    maximum: int = 0
    bands: Dict[HealthBand, int] = field(default_factory=_empty_bands)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "count": self.count,
            "average": self.average,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "bands": {band.value: total for band, total in self.bands.items()},
        }


def summarize_scores(entities: Iterable[Mapping[str, Any]], config: EntityConfig) -> ScoreSummary:
    """Score every entity and report the spread of percentages and health bands."""
    percentages = [calculate_seo_score(entity, config).percentage for entity in entities]
    if not percentages:
        return ScoreSummary()

    bands = _empty_bands()
    for percentage in percentages:
        bands[classify_health(percentage)] += 1

    summary = ScoreSummary(
        count=len(percentages),
        average=round_half_up(sum(percentages) / len(percentages)),
        minimum=min(percentages),
        maximum=max(percentages),
        bands=bands,
    )
    logger.debug("Scores summarized", entity_type=config.entity_type, count=summary.count, average=summary.average)
    return summary
