"""Tests for loguru configuration and stdlib log interception."""

import logging

import pytest
from loguru import logger

from src.person_api.api.utils.app_startup import InterceptHandler, configure_logging
from src.person_api.runtime.context import get_config


@pytest.fixture
def captured():
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.record), level="DEBUG"
    )
    try:
        yield messages
    finally:
        logger.remove(handler_id)


def test_stdlib_records_forwarded_to_loguru(captured):
    record = logging.LogRecord(
        "sqlalchemy.engine", logging.WARNING, __file__, 1, "pool exhausted", None, None
    )

    InterceptHandler().emit(record)

    assert [r["message"] for r in captured] == ["pool exhausted"]
    assert captured[0]["level"].name == "WARNING"
    assert captured[0]["extra"]["logger_name"] == "sqlalchemy.engine"


@pytest.mark.parametrize(
    ("name", "level"),
    [("uvicorn.access", logging.INFO), ("uvicorn.error", logging.ERROR)],
)
def test_duplicate_uvicorn_records_dropped(captured, name, level):
    record = logging.LogRecord(name, level, __file__, 1, "GET /", None, None)

    InterceptHandler().emit(record)

    assert captured == []


def test_file_sink_written(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "person_api.log"
    monkeypatch.setattr(get_config().logging, "file", str(log_file))

    try:
        configure_logging()
        logger.info("file sink check")
        logger.complete()
        assert "file sink check" in log_file.read_text()
    finally:
        monkeypatch.undo()
        configure_logging()
