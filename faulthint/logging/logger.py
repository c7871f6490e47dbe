import logging
import sys

LOGGER_NAME = "faulthint"
LOG_FORMAT = "[faulthint] %(asctime)s %(levelname)s %(message)s"


class Log:
    """Diagnostics of the hint engine itself, kept apart from the hints.

    Hints are rendered by the presenter; this logger only reports on the
    engine (skipped providers, chosen resolver tier, pipeline failures).
    It writes to stderr with a ``[faulthint]`` tag so its lines cannot be
    mistaken for the program's own output.
    """

    _logger: logging.Logger = logging.getLogger(LOGGER_NAME)
    _handler: logging.Handler | None = None

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach the tagged stderr handler once."""
        cls._logger.setLevel(log_level.upper())
        if cls._handler is None:
            cls._handler = logging.StreamHandler(sys.stderr)
            cls._handler.setFormatter(logging.Formatter(LOG_FORMAT))
            cls._logger.addHandler(cls._handler)

    @classmethod
    def info(cls, message: str) -> None:
        cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls._logger.warning(message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls._logger.debug(message)

    @classmethod
    def exception(cls, message: str) -> None:
        """Log at ERROR with the active exception's traceback attached."""
        cls._logger.exception(message)
