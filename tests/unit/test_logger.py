import logging
from collections.abc import Iterator

import pytest

from resume_ai.logging.logger import Log


@pytest.fixture()
def records() -> Iterator[list[logging.LogRecord]]:
    captured: list[logging.LogRecord] = []

    class _Collector(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            captured.append(record)

    handler = _Collector()
    logger = logging.getLogger("resume_ai")
    logger.addHandler(handler)
    Log.configure("DEBUG")
    yield captured
    logger.removeHandler(handler)


class TestConfigure:
    def test_sets_level(self) -> None:
        Log.configure("warning")
        assert logging.getLogger("resume_ai").level == logging.WARNING
        Log.configure("INFO")

    def test_quiets_pdf_parser(self) -> None:
        Log.configure("DEBUG")
        assert logging.getLogger("pdfminer").level == logging.WARNING

    def test_repeated_configure_keeps_one_stdout_handler(self) -> None:
        Log.configure("INFO")
        Log.configure("INFO")
        stream_handlers = [
            h for h in logging.getLogger("resume_ai").handlers
            if type(h) is logging.StreamHandler
        ]
        assert len(stream_handlers) == 1


class TestTimed:
    def test_logs_success(self, records: list[logging.LogRecord]) -> None:
        with Log.timed("score analysis"):
            pass
        assert records[-1].getMessage().startswith("score analysis finished in ")

    def test_logs_failure_and_reraises(self, records: list[logging.LogRecord]) -> None:
        with pytest.raises(ValueError), Log.timed("score analysis"):
            raise ValueError("boom")
        assert records[-1].getMessage().startswith("score analysis failed in ")
