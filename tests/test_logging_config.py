import json
import logging
import sys

import pytest

from starter_api.core.context import clear_trace_id, set_trace_id
from starter_api.core.logging_config import DevelopmentFormatter, StructuredFormatter, configure_logging


def make_record(msg: str = "Resource not found", **extra) -> logging.LogRecord:
    record = logging.LogRecord("starter_api.test", logging.ERROR, __file__, 1, msg, (), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def trace_id():
    set_trace_id("trace-42")
    yield "trace-42"
    clear_trace_id()


def test_structured_formatter(trace_id: str) -> None:
    line = StructuredFormatter().format(make_record(error_category="NotFound", status_code=404, ignored="x"))
    data = json.loads(line)
    assert data["level"] == "ERROR"
    assert data["logger"] == "starter_api.test"
    assert data["message"] == "Resource not found"
    assert data["trace_id"] == trace_id
    assert data["error_category"] == "NotFound"
    assert data["status_code"] == 404
    assert "ignored" not in data


def test_structured_formatter_includes_exception() -> None:
    try:
        raise ValueError("broken")
    except ValueError:
        record = make_record()
        record.exc_info = sys.exc_info()
    data = json.loads(StructuredFormatter().format(record))
    assert "ValueError: broken" in data["exception"]
    assert "trace_id" not in data


def test_development_formatter(trace_id: str) -> None:
    line = DevelopmentFormatter().format(make_record(error_category="Conflict"))
    assert "[ERROR] starter_api.test: [Conflict] Resource not found (trace_id=trace-42)" in line


@pytest.mark.usefixtures("restore_logging")
@pytest.mark.parametrize(("structured", "formatter"), [(True, StructuredFormatter), (False, DevelopmentFormatter)])
def test_configure_logging(structured: bool, formatter: type) -> None:
    configure_logging("debug", structured=structured)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, formatter)
    assert logging.getLogger("httpx").level == logging.WARNING
