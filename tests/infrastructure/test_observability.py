"""Structured logging - JSON and text fields, handler setup."""

import json
import logging
from datetime import datetime, timezone

import pytest

from meeting_summarizer.infrastructure.observability import (
    JSONFormatter,
    TextFormatter,
    setup_logging,
)


def _record(**extra):
    record = logging.LogRecord(
        "meeting_summarizer.test", logging.WARNING, __file__, 1,
        "relay failed for %s", ("send_email",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    record = _record()
    log = json.loads(JSONFormatter().format(record))

    assert log["level"] == "WARNING"
    assert log["logger"] == "meeting_summarizer.test"
    assert log["message"] == "relay failed for send_email"
    assert log["timestamp"] == datetime.fromtimestamp(
        record.created, tz=timezone.utc,
    ).isoformat()


def test_json_formatter_surfaces_known_extras_only():
    log = json.loads(JSONFormatter().format(
        _record(error_code="MAIL_RELAY_ERROR", recipient_count=2, password="pw"),
    ))

    assert log["error_code"] == "MAIL_RELAY_ERROR"
    assert log["recipient_count"] == 2
    assert "password" not in log


def test_json_formatter_custom_extra_keys():
    log = json.loads(JSONFormatter(extra_keys=("operation",)).format(
        _record(operation="summarize", error_code="X"),
    ))

    assert log["operation"] == "summarize"
    assert "error_code" not in log


def test_text_formatter_appends_extras():
    line = TextFormatter().format(_record(error_code="MAIL_RELAY_ERROR", attempt=2))

    assert "relay failed for send_email" in line
    assert line.endswith("[error_code=MAIL_RELAY_ERROR attempt=2]")


def test_text_formatter_without_extras_has_no_brackets():
    assert not TextFormatter().format(_record()).endswith("]")


@pytest.fixture
def restore_root_logger():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)
    for name in ("httpx", "httpcore", "anthropic"):
        logging.getLogger(name).setLevel(logging.NOTSET)


def test_setup_logging_is_idempotent(restore_root_logger):
    before = len(logging.root.handlers)

    setup_logging("DEBUG", "json")
    handler = setup_logging("WARNING", "text")

    assert len(logging.root.handlers) == before + 1
    assert logging.root.handlers[-1] is handler
    assert logging.root.level == logging.WARNING
    assert isinstance(handler.formatter, TextFormatter)


def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logger):
    setup_logging("chatty", "json")

    assert logging.root.level == logging.INFO


def test_setup_logging_quiets_http_clients_unless_debug(restore_root_logger):
    setup_logging("INFO", "json")
    assert logging.getLogger("httpx").level == logging.WARNING

    setup_logging("DEBUG", "json")
    assert logging.getLogger("httpx").level == logging.NOTSET
