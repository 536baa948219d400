"""Unit tests for FlokiLogger and verbosity mapping."""

import io
import logging

import pytest

from floki.services.logging import TRACE, FlokiLogger, NullLogger, verbosity_to_level


@pytest.mark.parametrize(
    ("verbose", "level"),
    [(0, "warning"), (1, "info"), (2, "debug"), (3, "trace"), (7, "trace")],
)
def test_verbosity_to_level(verbose, level) -> None:
    assert verbosity_to_level(verbose) == level


class TestFlokiLogger:
    def test_warning_level_hides_info(self) -> None:
        stream = io.StringIO()
        logger = FlokiLogger(name="floki.test.warning", level="warning", stream=stream)

        logger.info("hidden")
        logger.warning("shown %s", "here")

        assert stream.getvalue() == "[WARNING] shown here\n"

    def test_trace_level_shows_everything(self) -> None:
        stream = io.StringIO()
        logger = FlokiLogger(name="floki.test.trace", level="trace", stream=stream)

        logger.trace("content")
        logger.debug("detail")

        assert stream.getvalue() == "[TRACE] content\n[DEBUG] detail\n"

    def test_set_level(self) -> None:
        stream = io.StringIO()
        logger = FlokiLogger(name="floki.test.set", level="error", stream=stream)

        logger.set_level("debug")

        assert logger.level == logging.DEBUG

    def test_unknown_level_defaults_to_warning(self) -> None:
        logger = FlokiLogger(name="floki.test.unknown", level="loud", stream=io.StringIO())

        assert logger.level == logging.WARNING

    def test_trace_is_below_debug(self) -> None:
        assert TRACE < logging.DEBUG
        assert logging.getLevelName(TRACE) == "TRACE"


def test_null_logger_accepts_everything() -> None:
    logger = NullLogger()
    logger.trace("x")
    logger.debug("x")
    logger.info("x")
    logger.warning("x")
    logger.error("x")
    logger.set_level("debug")
