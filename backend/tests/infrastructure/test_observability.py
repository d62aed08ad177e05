"""Structured logging tests — JSONFormatter fields and setup_logging idempotence."""

import json
import logging

from learning_tracker.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "learning_tracker.test", logging.INFO, __file__, 1, "Step created", (), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "learning_tracker.test"
    assert payload["message"] == "Step created"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(project_id="p1", step_id="s1", unrelated="x"),
    ))
    assert payload["project_id"] == "p1"
    assert payload["step_id"] == "s1"
    assert "unrelated" not in payload


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        ours = [h for h in logging.root.handlers if h.get_name() == "learning_tracker"]
        assert len(ours) == 1
        assert logging.root.level == logging.WARNING
    finally:
        for handler in list(logging.root.handlers):
            if handler not in before:
                logging.root.removeHandler(handler)
