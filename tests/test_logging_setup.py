"""Tests for root logger configuration."""

import json
import logging
import sys

import pytest
import structlog

from gopher_translator.logging_setup import configure_logging, json_formatter


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(**kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        "gopher", logging.INFO, __file__, 1, "hello %s", ("world",), None, sinfo=kwargs.pop("sinfo", None)
    )
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
def test_configure_sets_level_and_single_handler(restore_root_logger):
    configure_logging(level="warning", fmt="simple")
    configure_logging(level="debug", fmt="simple")

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1


@pytest.mark.unit
def test_json_format_selected(restore_root_logger):
    configure_logging(level="INFO", fmt="json")

    assert isinstance(
        restore_root_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter
    )


@pytest.mark.unit
def test_json_formatter_output():
    payload = json.loads(json_formatter().format(_record()))

    assert payload["event"] == "hello world"
    assert payload["level"] == "info"
    assert payload["logger"] == "gopher"
    assert "timestamp" in payload


@pytest.mark.unit
def test_json_formatter_keeps_extra_fields_and_stack_info():
    record = _record(request_id="abc", sinfo="Stack (most recent call last):\n  here")

    payload = json.loads(json_formatter().format(record))

    assert payload["request_id"] == "abc"
    assert "Stack (most recent call last)" in payload["stack"]


@pytest.mark.unit
def test_json_formatter_renders_exceptions():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(json_formatter().format(record))

    assert "ValueError: boom" in payload["exception"]
