import logging
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager

# PDF parsing and HTTP client libraries log every object and request at DEBUG.
_NOISY_LOGGERS = ("pdfminer", "pdfplumber", "httpx", "httpcore", "openai", "multipart")


class Log:
    """Centralized logging for the backend and the client CLI."""

    _logger: logging.Logger = logging.getLogger("resume_ai")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler.

        Safe to call more than once; the app factory and the CLI both call it.
        """
        cls._logger.setLevel(log_level.upper())
        cls._logger.propagate = False
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)

    @classmethod
    def exception(cls, message: str, **kwargs: object) -> None:
        """Log at ERROR with the active exception's traceback."""
        cls._logger.exception(message, extra=kwargs)

    @classmethod
    @contextmanager
    def timed(cls, operation: str) -> Iterator[None]:
        """Log how long the wrapped block took, whether it succeeded or raised."""
        started = time.perf_counter()
        outcome = "failed"
        try:
            yield
            outcome = "finished"
        finally:
            elapsed = time.perf_counter() - started
            cls._logger.info(f"{operation} {outcome} in {elapsed:.2f}s")
