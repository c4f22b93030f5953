"""
Logging Tests
-------------
Tests cover:
- call_id scoping and propagation into records
- JSON formatting of structured extras
- Handler installation and file output
- Token never reaching log output
"""

import json
import logging

import pytest
from rich.logging import RichHandler

from eventbrite_v3.core.errors import APIError
from eventbrite_v3.infra.logging import (
    ROOT_LOGGER,
    CallContext,
    CallIdFilter,
    JSONFormatter,
    configure_logging,
    get_call_id,
    get_logger,
)


@pytest.fixture
def restore_root_logger():
    """Put the package logger back the way it was after each test."""
    logger = logging.getLogger(ROOT_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


def make_record(msg: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="eventbrite_v3.test", level=logging.DEBUG, pathname=__file__,
        lineno=1, msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestCallContext:

    def test_scopes_call_id(self):
        assert get_call_id() is None

        with CallContext() as call_id:
            assert call_id.startswith("call_")
            assert get_call_id() == call_id

        assert get_call_id() is None

    def test_nested_contexts_restore(self):
        with CallContext("outer"):
            with CallContext("inner"):
                assert get_call_id() == "inner"
            assert get_call_id() == "outer"

    def test_filter_stamps_record(self):
        record = make_record()

        with CallContext("call_fixed"):
            CallIdFilter().filter(record)

        assert record.call_id == "call_fixed"

    def test_filter_outside_call(self):
        record = make_record()
        CallIdFilter().filter(record)

        assert record.call_id == "-"


class TestJSONFormatter:

    def test_structured_fields(self):
        record = make_record(
            "GET /events/1/ -> 200",
            call_id="call_x", method="GET", path="/events/1/",
            status_code=200, elapsed_ms=12.5,
        )

        entry = json.loads(JSONFormatter().format(record))

        assert entry["message"] == "GET /events/1/ -> 200"
        assert entry["level"] == "DEBUG"
        assert entry["call_id"] == "call_x"
        assert entry["method"] == "GET"
        assert entry["status_code"] == 200
        assert entry["elapsed_ms"] == 12.5
        assert "error" not in entry


class TestConfigureLogging:

    def test_console_handler(self, restore_root_logger):
        logger = configure_logging(level=logging.DEBUG)

        assert logger.name == ROOT_LOGGER
        assert logger.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_reconfigure_replaces_handlers(self, restore_root_logger):
        configure_logging()
        logger = configure_logging()

        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1

    def test_file_output(self, restore_root_logger, tmp_path):
        configure_logging(level=logging.DEBUG, log_dir=str(tmp_path), console=False, file=True)

        with CallContext("call_file"):
            get_logger("api.client").debug("written", extra={"path": "/x/"})
        for handler in restore_root_logger.handlers:
            handler.flush()

        lines = (tmp_path / "eventbrite.log").read_text().splitlines()
        entry = json.loads(lines[-1])
        assert entry["message"] == "written"
        assert entry["call_id"] == "call_file"
        assert entry["logger"] == "eventbrite_v3.api.client"
        assert entry["path"] == "/x/"

    def test_get_logger_prefix(self):
        assert get_logger("api.client").name == "eventbrite_v3.api.client"
        assert get_logger("eventbrite_v3.core").name == "eventbrite_v3.core"


class TestTokenNotLogged:

    @pytest.mark.asyncio
    async def test_debug_output_has_no_token(self, client, recorder, caplog):
        recorder.respond_with(404, {"error": "NOT_FOUND", "status_code": 404})

        with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER):
            async with client:
                with pytest.raises(APIError):
                    await client.get_json("/events/1/")
                await client.post_json("/events/")
                await client.delete_json("/events/1/")

        assert caplog.records
        assert "abc123" not in caplog.text
