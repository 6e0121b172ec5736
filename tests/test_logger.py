"""
Logging configuration tests.
"""
import json
import logging

import pytest

from employee_api.config import Settings
from employee_api.utils.logger import JSONFormatter, TextFormatter, log_api_response, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(**extra):
    record = logging.LogRecord("employee_api.test", logging.INFO, __file__, 10, "hello %s", ("world",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields():
    payload = json.loads(JSONFormatter().format(make_record(method="GET", status_code=201, ignored="x")))

    assert payload["message"] == "hello world"
    assert payload["level"] == "INFO"
    assert payload["method"] == "GET"
    assert payload["status_code"] == 201
    assert "ignored" not in payload


def test_setup_logging_json(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "api.log"

    setup_logging(Settings(LOG_LEVEL="debug", LOG_FORMAT="json", LOG_FILE=str(log_file)))

    root = restore_root_logger
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 2
    assert all(isinstance(h.formatter, JSONFormatter) for h in root.handlers)
    assert log_file.exists()
    assert logging.getLogger("motor").level == logging.WARNING
    for handler in root.handlers:
        handler.close()


def test_setup_logging_text(restore_root_logger):
    setup_logging(Settings(LOG_FORMAT="text"))

    root = restore_root_logger
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, TextFormatter)


def test_log_api_response(caplog):
    logger = logging.getLogger("employee_api.access")

    with caplog.at_level(logging.INFO, logger="employee_api.access"):
        log_api_response(logger, "POST", "/api/employee/v1/employees", 201, 3.14159)

    record = caplog.records[-1]
    assert record.getMessage() == "API Response: POST /api/employee/v1/employees - 201 (3.14ms)"
    assert record.duration_ms == 3.14
