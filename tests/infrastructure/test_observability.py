"""Observability & Config — JSON log shape and environment-driven settings."""

import json
import logging

from topoguard.config import Settings
from topoguard.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "topoguard.test", logging.WARNING, __file__, 1, "Rejected %s", ("cluster state",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    line = json.loads(JSONFormatter().format(_record()))
    assert line["level"] == "WARNING"
    assert line["logger"] == "topoguard.test"
    assert line["message"] == "Rejected cluster state"
    assert "timestamp" in line


def test_json_formatter_groups_validation_fields():
    line = json.loads(JSONFormatter().format(
        _record(error_code="SYNC_REQUIRED", validator="cluster_state", generation=7),
    ))
    assert line["validation"] == {
        "validator": "cluster_state",
        "error_code": "SYNC_REQUIRED",
        "generation": 7,
    }


def test_json_formatter_keeps_path_at_top_level():
    line = json.loads(JSONFormatter().format(_record(path="/api/v1/validate/peers")))
    assert line["path"] == "/api/v1/validate/peers"
    assert "validation" not in line


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        first = setup_logging("WARNING", "json")
        second = setup_logging("DEBUG", "text")
        assert first not in root.handlers
        assert second in root.handlers
        assert isinstance(second.formatter, logging.Formatter)
        assert not isinstance(second.formatter, JSONFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.removeHandler(second)
        root.handlers[:] = before
        root.setLevel(level)


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TOPOGUARD_LOG_LEVEL", "debug")
    monkeypatch.setenv("TOPOGUARD_SERVICE_NAME", "topoguard-east")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.service_name == "topoguard-east"
