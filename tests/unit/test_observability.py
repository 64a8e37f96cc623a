"""Unit tests for metrics and logging configuration."""

import json
import logging

import pytest
import structlog
from prometheus_client import REGISTRY
from seodoctor.config import MonitoringConfig
from seodoctor.doctor import TAG_CONFIG, diagnose
from seodoctor.observability import (
    METRICS,
    configure_logging,
    entity_context,
    export_prometheus,
    record_error,
    set_metrics_enabled,
    track_evaluation,
)
from seodoctor.observability.metrics import metrics_enabled


def _sample(name, labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestMetrics:
    """Test Prometheus collectors."""

    def test_collectors_exist(self):
        assert set(METRICS) == {"evaluations", "evaluation_seconds", "evaluation_errors", "last_percentage"}

    def test_track_evaluation_counts_and_sets_gauge(self):
        labels = {"engine": "test", "entity_type": "Widget"}
        before = _sample("seodoctor_evaluations_total", labels)
        with track_evaluation("test", "Widget") as outcome:
            outcome["percentage"] = 42
        assert _sample("seodoctor_evaluations_total", labels) == before + 1
        assert _sample("seodoctor_last_percentage", labels) == 42
        assert _sample("seodoctor_evaluation_seconds_count", {"engine": "test"}) >= 1

    def test_evaluation_is_counted_when_body_raises(self):
        labels = {"engine": "test-raise", "entity_type": "Widget"}
        before = _sample("seodoctor_evaluations_total", labels)
        with pytest.raises(RuntimeError):
            with track_evaluation("test-raise", "Widget"):
                raise RuntimeError("boom")
        assert _sample("seodoctor_evaluations_total", labels) == before + 1

    def test_diagnose_updates_gauge(self):
        diagnose({"name": "SEO", "slug": "seo"}, TAG_CONFIG)
        assert _sample("seodoctor_last_percentage", {"engine": "doctor", "entity_type": "Tag"}) == 10

    def test_disabled_metrics_are_not_recorded(self):
        labels = {"engine": "test-disabled"}
        set_metrics_enabled(False)
        assert metrics_enabled() is False
        record_error("test-disabled")
        set_metrics_enabled(True)
        assert _sample("seodoctor_evaluation_errors_total", labels) == 0.0
        record_error("test-disabled")
        assert _sample("seodoctor_evaluation_errors_total", labels) == 1.0

    def test_export(self):
        record_error("test-export")
        text = export_prometheus()
        assert "seodoctor_evaluation_errors_total" in text
        assert 'engine="test-export"' in text


class TestLogging:
    """Test structlog configuration."""

    def test_file_logging_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "seodoctor.log"
        configure_logging(MonitoringConfig(log_level="DEBUG", log_file=str(log_file)))
        structlog.contextvars.bind_contextvars(entity_id="article-1")
        try:
            structlog.get_logger("seodoctor.test").info("Scored entity", percentage=87)
        finally:
            structlog.contextvars.clear_contextvars()
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        record = next(r for r in records if r["event"] == "Scored entity")
        assert record["percentage"] == 87
        assert record["entity_id"] == "article-1"
        assert record["level"] == "info"
        assert record["logger"] == "seodoctor.test"
        assert "timestamp" in record

    def test_diagnose_binds_entity_id(self, tmp_path):
        log_file = tmp_path / "doctor.log"
        configure_logging(MonitoringConfig(log_level="DEBUG", log_file=str(log_file)))
        diagnose({"slug": "seo-basics", "name": "SEO"}, TAG_CONFIG)
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        record = next(r for r in records if r["event"] == "Entity diagnosed")
        assert record["entity_id"] == "seo-basics"
        assert "entity_id" not in structlog.contextvars.get_contextvars()

    def test_entity_context_without_identity(self):
        with entity_context({"title": "Untitled"}):
            assert "entity_id" not in structlog.contextvars.get_contextvars()
        with entity_context(None):
            assert "entity_id" not in structlog.contextvars.get_contextvars()

    def test_console_logging_sets_level(self):
        configure_logging(MonitoringConfig(log_level="WARNING"))
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
