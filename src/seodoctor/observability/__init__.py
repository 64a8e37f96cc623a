"""Logging and metrics for the scoring engines."""

from __future__ import annotations

from .logging import configure_logging, entity_context
from .metrics import METRICS, export_prometheus, record_error, set_metrics_enabled, track_evaluation

__all__ = [
    "METRICS",
    "configure_logging",
    "entity_context",
    "export_prometheus",
    "record_error",
    "set_metrics_enabled",
    "track_evaluation",
]
