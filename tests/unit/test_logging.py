from __future__ import annotations

import json
import logging
import sys

from parse_seed.utils.logging import JsonFormatter, _json_formatter, configure_logging

EXPECTED_CREATED = 10


def _record(msg: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.created_objects = EXPECTED_CREATED
    record.class_name = "Contact"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["created_objects"] == EXPECTED_CREATED
    assert payload["class_name"] == "Contact"
    assert "pathname" not in payload


def test_json_formatter_includes_exception_text() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            name="test.logger",
            level=logging.ERROR,
            pathname=__file__,
            lineno=1,
            msg="error: boom",
            args=(),
            exc_info=sys.exc_info(),
        )

    payload = json.loads(_json_formatter(record))

    assert payload["message"] == "error: boom"
    assert "RuntimeError: boom" in payload["exc_info"]


def test_configure_logging_installs_selected_formatter() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging(level="debug", json_logs=True)

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
