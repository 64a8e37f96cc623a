"""
Defines Prometheus metrics for the scoring engines.
"""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from prometheus_client import REGISTRY as _PROM_REGISTRY
from prometheus_client import Counter as _OrigCounter
from prometheus_client import Gauge as _OrigGauge
from prometheus_client import Histogram as _OrigHistogram
from prometheus_client import generate_latest

# ---------------------------------------------------------------------------
# Duplicate-safe Prometheus metric wrappers
# ---------------------------------------------------------------------------
# Re-importing this module (test collection, reloads) must not raise a
# duplicate registration error, so existing collectors are reused.


def _duplicate_safe_factory(metric_cls):
    """Return a factory that reuses an existing collector if already present."""

    def _factory(name: str, documentation: str, *args, **kwargs):  # type: ignore[override]
        existing = _PROM_REGISTRY._names_to_collectors.get(name)
        if existing is not None:
            return existing  # type: ignore[return-value]

        try:
            return metric_cls(name, documentation, *args, **kwargs)  # type: ignore[call-arg]
        except ValueError:
            return _PROM_REGISTRY._names_to_collectors[name]  # type: ignore[return-value]

    return _factory


Counter = _duplicate_safe_factory(_OrigCounter)  # type: ignore[assignment]
Gauge = _duplicate_safe_factory(_OrigGauge)  # type: ignore[assignment]
Histogram = _duplicate_safe_factory(_OrigHistogram)  # type: ignore[assignment]


def _create_metrics() -> Dict[str, Any]:
    return {
        "evaluations": Counter(
            "seodoctor_evaluations_total",
            "Number of entity evaluations performed",
            ["engine", "entity_type"],
        ),
        "evaluation_seconds": Histogram(
            "seodoctor_evaluation_seconds",
            "Time spent evaluating one entity",
            ["engine"],
            buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.5),
        ),
        "evaluation_errors": Counter(
            "seodoctor_evaluation_errors_total",
            "Evaluations that failed and fell back to an empty report",
            ["engine"],
        ),
        "last_percentage": Gauge(
            "seodoctor_last_percentage",
            "Percentage score of the most recent evaluation",
            ["engine", "entity_type"],
        ),
    }


METRICS: Dict[str, Any] = _create_metrics()

_enabled = True


def set_metrics_enabled(enabled: bool) -> None:
    global _enabled
    _enabled = enabled


def metrics_enabled() -> bool:
    return _enabled


@contextmanager
def track_evaluation(engine: str, entity_type: str) -> Iterator[Dict[str, Any]]:
    """
    Time one evaluation and count it.

    The body may store the resulting percentage under ``"percentage"`` in the
    yielded dict to update the last-percentage gauge.
    """
    outcome: Dict[str, Any] = {}
    start = time.perf_counter()
    try:
        yield outcome
    finally:
        if _enabled:
            METRICS["evaluation_seconds"].labels(engine=engine).observe(time.perf_counter() - start)
            METRICS["evaluations"].labels(engine=engine, entity_type=entity_type).inc()
            if "percentage" in outcome:
                METRICS["last_percentage"].labels(engine=engine, entity_type=entity_type).set(outcome["percentage"])


def record_error(engine: str) -> None:
    if _enabled:
        METRICS["evaluation_errors"].labels(engine=engine).inc()


def export_prometheus() -> str:
    """Export metrics in Prometheus text format."""
    return generate_latest(_PROM_REGISTRY).decode("utf-8")
