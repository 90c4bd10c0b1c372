import json
import logging

from usersvc.core.logging import DevelopmentFormatter, LogContext, StructuredFormatter, get_logger


def make_record(logger_name="usersvc.test", message="hello"):
    return logging.getLogger(logger_name).makeRecord(
        logger_name, logging.INFO, __file__, 10, message, None, None
    )


def test_get_logger_namespaces_names():
    assert get_logger("repositories").name == "usersvc.repositories"
    assert get_logger("usersvc.main").name == "usersvc.main"


def test_structured_formatter_emits_json():
    record = make_record()
    record.request_id = "abc"

    data = json.loads(StructuredFormatter().format(record))
    assert data["message"] == "hello"
    assert data["level"] == "INFO"
    assert data["logger"] == "usersvc.test"
    assert data["request_id"] == "abc"


def test_development_formatter_includes_context():
    record = make_record()
    record.user_id = "42"

    output = DevelopmentFormatter().format(record)
    assert "hello" in output
    assert "user_id=42" in output


def test_log_context_sets_fields_and_restores_factory():
    original = logging.getLogRecordFactory()

    with LogContext(request_id="r-1"):
        record = logging.getLogRecordFactory()("usersvc", logging.INFO, __file__, 1, "x", None, None)
        assert record.request_id == "r-1"

    assert logging.getLogRecordFactory() is original
