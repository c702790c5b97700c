"""Provider failures surface as the generic 500 body after bounded retry."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from resume_ai.analysis.analyzer import ResumeAnalyzer
from resume_ai.analysis.exceptions import (
    ProviderPermanentError,
    ProviderTimeoutError,
    ProviderTransientError,
)
from resume_ai.api.app import create_app
from resume_ai.config.settings import Settings
from resume_ai.extraction.factory import TextExtractorFactory
from resume_ai.processor.processor import Processor
from resume_ai.uploads.storage import TemporaryUploadStore
from resume_ai.uploads.validator import UploadValidator

SERVER_ERROR = {"error": "Something went wrong on the server."}


def _app_with_client(settings: Settings, client: MagicMock) -> TestClient:
    analyzer = ResumeAnalyzer(
        client=client,
        model="test-model",
        max_attempts=3,
        retry_backoff_seconds=0.5,
        sleep=lambda _seconds: None,
    )
    processor = Processor(
        validator=UploadValidator(settings.allowed_mime_types, settings.max_upload_bytes),
        store=TemporaryUploadStore(Path(settings.upload_dir)),
        extractors=TextExtractorFactory.create(settings),
        analyzer=analyzer,
    )
    return TestClient(create_app(settings, processor=processor), raise_server_exceptions=False)


@pytest.mark.integration
class TestProviderFailures:
    def test_provider_throws_returns_generic_500(
        self, example_settings: Settings, sample_pdf_bytes: bytes, upload_dir: Path
    ) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = ProviderPermanentError("invalid API key")
        http = _app_with_client(example_settings, client)

        response = http.post(
            "/analyze", files={"file": ("cv.pdf", sample_pdf_bytes, "application/pdf")}
        )

        assert response.status_code == 500
        assert response.json() == SERVER_ERROR
        assert client.create_chat_completion.call_count == 1
        assert list(upload_dir.glob("*")) == []

    def test_timeouts_retried_up_to_limit(
        self, example_settings: Settings, sample_pdf_bytes: bytes, upload_dir: Path
    ) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = ProviderTimeoutError("AI provider timed out")
        http = _app_with_client(example_settings, client)

        response = http.post(
            "/analyze/score", files={"file": ("cv.pdf", sample_pdf_bytes, "application/pdf")}
        )

        assert response.status_code == 500
        assert response.json() == SERVER_ERROR
        assert client.create_chat_completion.call_count == 3
        assert list(upload_dir.glob("*")) == []

    def test_transient_error_then_success(
        self, example_settings: Settings, sample_pdf_bytes: bytes
    ) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = [
            ProviderTransientError("AI provider API error (503)"),
            "Candidate has 5 years experience",
        ]
        http = _app_with_client(example_settings, client)

        response = http.post(
            "/analyze", files={"file": ("cv.pdf", sample_pdf_bytes, "application/pdf")}
        )

        assert response.status_code == 200
        assert response.json() == {"output": "Candidate has 5 years experience"}

    def test_schema_violation_is_500(
        self, example_settings: Settings, sample_pdf_bytes: bytes
    ) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = '{"score": 140, "summary": "x"}'
        http = _app_with_client(example_settings, client)

        response = http.post(
            "/analyze/score", files={"file": ("cv.pdf", sample_pdf_bytes, "application/pdf")}
        )

        assert response.status_code == 500
        assert response.json() == SERVER_ERROR
        assert client.create_chat_completion.call_count == 1
