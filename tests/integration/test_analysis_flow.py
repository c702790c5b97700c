"""End-to-end tests for the backend pipeline.

Uses the example provider so no network calls are made.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from resume_ai.analysis.example_client_adapter import ExampleClientAdapter
from resume_ai.api.app import create_app
from resume_ai.config.settings import Settings

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.mark.integration
class TestAnalyzeFlow:
    def test_pdf_analysis_returns_provider_text(
        self, app_client: TestClient, sample_pdf_bytes: bytes, upload_dir: Path
    ) -> None:
        response = app_client.post(
            "/analyze", files={"file": ("cv.pdf", sample_pdf_bytes, "application/pdf")}
        )
        assert response.status_code == 200
        assert response.json() == {"output": ExampleClientAdapter.DEFAULT_TEXT}
        assert list(upload_dir.glob("*")) == []

    def test_docx_analysis(
        self, app_client: TestClient, sample_docx_bytes: bytes, upload_dir: Path
    ) -> None:
        response = app_client.post(
            "/analyze", files={"file": ("cv.docx", sample_docx_bytes, DOCX_MIME)}
        )
        assert response.status_code == 200
        assert response.json()["output"] == ExampleClientAdapter.DEFAULT_TEXT
        assert list(upload_dir.glob("*")) == []

    def test_score(self, app_client: TestClient, sample_pdf_bytes: bytes) -> None:
        response = app_client.post(
            "/analyze/score", files={"file": ("cv.pdf", sample_pdf_bytes, "application/pdf")}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["score"] == 72
        assert body["skillsDetected"] == ["Python"]
        assert set(body) == {"score", "summary", "strengths", "improvements", "skillsDetected"}

    def test_interview_prep(self, app_client: TestClient, sample_pdf_bytes: bytes) -> None:
        response = app_client.post(
            "/generate-interview-prep",
            files={"file": ("cv.pdf", sample_pdf_bytes, "application/pdf")},
        )
        assert response.status_code == 200
        assert set(response.json()) == {
            "detected_skills",
            "technical_questions",
            "project_deep_dive",
            "behavioral_scenarios",
            "skill_gaps",
        }


@pytest.mark.integration
class TestRejectedUploads:
    def test_text_file_rejected_before_disk(
        self, app_client: TestClient, upload_dir: Path
    ) -> None:
        response = app_client.post(
            "/analyze", files={"file": ("notes.txt", b"hello", "text/plain")}
        )
        assert response.status_code == 415
        assert "text/plain" in response.json()["error"]
        assert not upload_dir.exists()

    def test_disguised_pdf_rejected(self, app_client: TestClient) -> None:
        response = app_client.post(
            "/analyze", files={"file": ("cv.pdf", b"MZ\x90\x00 not a pdf", "application/pdf")}
        )
        assert response.status_code == 400
        assert "does not match" in response.json()["error"]

    def test_empty_file_rejected(self, app_client: TestClient) -> None:
        response = app_client.post(
            "/analyze", files={"file": ("cv.pdf", b"", "application/pdf")}
        )
        assert response.status_code == 400

    def test_blank_pdf_is_unprocessable(
        self, app_client: TestClient, empty_pdf_bytes: bytes, upload_dir: Path
    ) -> None:
        response = app_client.post(
            "/analyze", files={"file": ("blank.pdf", empty_pdf_bytes, "application/pdf")}
        )
        assert response.status_code == 422
        assert "No text could be extracted" in response.json()["error"]
        assert list(upload_dir.glob("*")) == []

    def test_oversized_pdf_is_413(
        self, example_settings: Settings, sample_pdf_bytes: bytes, upload_dir: Path
    ) -> None:
        settings = example_settings.model_copy(update={"max_upload_bytes": 512})
        client = TestClient(create_app(settings))
        response = client.post(
            "/analyze", files={"file": ("cv.pdf", sample_pdf_bytes, "application/pdf")}
        )
        assert len(sample_pdf_bytes) > 512
        assert response.status_code == 413
        assert not upload_dir.exists()
