import logging
from collections.abc import Iterator

import pytest

from faulthint.logging.logger import LOGGER_NAME, Log


@pytest.fixture()
def fresh_log() -> Iterator[logging.Logger]:
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    previous = Log._handler
    if previous is not None:
        logger.removeHandler(previous)
    Log._handler = None
    try:
        yield logger
    finally:
        if Log._handler is not None:
            logger.removeHandler(Log._handler)
        if previous is not None:
            logger.addHandler(previous)
        Log._handler = previous
        logger.setLevel(level)


class TestConfigure:
    def test_tagged_stderr_handler(self, fresh_log: logging.Logger) -> None:
        Log.configure("debug")

        assert fresh_log.level == logging.DEBUG
        assert Log._handler in fresh_log.handlers
        record = logging.LogRecord(LOGGER_NAME, logging.WARNING, __file__, 1, "skipped", None, None)
        assert Log._handler.format(record).startswith("[faulthint] ")

    def test_repeated_configure_keeps_one_handler(self, fresh_log: logging.Logger) -> None:
        Log.configure("INFO")
        Log.configure("WARNING")

        assert fresh_log.handlers.count(Log._handler) == 1
        assert fresh_log.level == logging.WARNING


class TestException:
    def test_attaches_traceback(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger=LOGGER_NAME):
            try:
                raise RuntimeError("presenter broke")
            except RuntimeError:
                Log.exception("Failed to explain fatal error")

        (record,) = caplog.records
        assert record.levelno == logging.ERROR
        assert record.exc_info is not None
        assert record.exc_info[0] is RuntimeError
