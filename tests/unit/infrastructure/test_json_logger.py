# tests/unit/infrastructure/test_json_logger.py
from __future__ import annotations

import json
import logging
import sys

import pytest

from xbrl_facts.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    document_context,
    get_document_id,
    get_json_logger,
)


def _render(record_msg: str, level: int = logging.INFO, **attrs: object) -> dict:
    """Build a record, format it, and return the parsed JSON payload."""
    logger = logging.getLogger("test.logger")
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_json_logger",
        lno=1,
        msg=record_msg,
        args=(),
        exc_info=None,
    )
    for k, v in attrs.items():
        setattr(record, k, v)
    return json.loads(_JsonFormatter().format(record))


def test_configure_root_logging_installs_json_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    """Root logger should get a JSON formatter and respect LOG_LEVEL."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers.clear()
    try:
        configure_root_logging()
        configure_root_logging()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, _JsonFormatter)
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_json_formatter_basic_fields() -> None:
    payload = _render("hello-world")
    assert payload["message"] == "hello-world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload
    assert "document_id" not in payload


def test_json_formatter_merges_extra_dict() -> None:
    payload = _render("parsed", extra={"emitted": 6, "dropped_unknown_context": 2})
    assert payload["emitted"] == 6
    assert payload["dropped_unknown_context"] == 2


def test_document_context_enriches_and_resets() -> None:
    assert get_document_id() is None
    with document_context("msft-20230630.xml"):
        assert get_document_id() == "msft-20230630.xml"
        payload = _render("inside")
        assert payload["document_id"] == "msft-20230630.xml"
    assert get_document_id() is None


def test_json_formatter_includes_exception_info() -> None:
    logger = logging.getLogger("test.logger.exc")
    try:
        raise ValueError("boom")
    except ValueError:
        record = logger.makeRecord(
            name=logger.name,
            level=logging.ERROR,
            fn="test_json_logger",
            lno=1,
            msg="failed",
            args=(),
            exc_info=sys.exc_info(),
        )
    payload = json.loads(_JsonFormatter().format(record))
    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"


def test_get_json_logger_propagates() -> None:
    assert get_json_logger("xbrl_facts.test").propagate is True
