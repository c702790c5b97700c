"""HTTP client for the resume analysis backend."""

from typing import Any

import httpx

from resume_ai.analysis.exceptions import ProviderResponseError
from resume_ai.analysis.models import AnalysisResult, TextAnalysis
from resume_ai.analysis.validator import validate_interview_prep, validate_score
from resume_ai.client.exceptions import BackendError
from resume_ai.logging.logger import Log
from resume_ai.processor.models import AnalysisKind

ENDPOINTS: dict[AnalysisKind, str] = {
    AnalysisKind.TEXT: "/analyze",
    AnalysisKind.SCORE: "/analyze/score",
    AnalysisKind.INTERVIEW_PREP: "/generate-interview-prep",
}


class BackendClient:
    """Submits one file per call and validates the response against the endpoint's schema."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 120,
        transport: httpx.BaseTransport | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        if http_client is None:
            http_client = httpx.Client(
                base_url=base_url,
                timeout=timeout_seconds,
                transport=transport,
            )
        self._client = http_client

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "BackendClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def submit(
        self,
        kind: AnalysisKind,
        content: bytes,
        filename: str,
        mime_type: str,
    ) -> AnalysisResult:
        """POST the file as multipart form field ``file`` and parse the result.

        Raises:
            BackendError: on transport failure, non-2xx status, or a body that
                does not match the endpoint's contract.
        """
        path = ENDPOINTS[kind]
        Log.info(f"Submitting {filename} ({mime_type}, {len(content)} bytes) to {path}")
        try:
            response = self._client.post(path, files={"file": (filename, content, mime_type)})
        except httpx.HTTPError as exc:
            raise BackendError(f"Could not reach backend: {exc}") from exc

        if response.is_error:
            raise BackendError(
                f"Backend returned {response.status_code}: {self._error_message(response)}",
                status_code=response.status_code,
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise BackendError(f"Backend returned invalid JSON: {exc}") from exc
        if not isinstance(body, dict):
            raise BackendError("Backend response must be a JSON object")
        return self._parse(kind, body)

    @staticmethod
    def _parse(kind: AnalysisKind, body: dict[str, Any]) -> AnalysisResult:
        try:
            if kind is AnalysisKind.SCORE:
                return validate_score(body)
            if kind is AnalysisKind.INTERVIEW_PREP:
                return validate_interview_prep(body)
        except ProviderResponseError as exc:
            raise BackendError(f"Backend response does not match contract: {exc}") from exc
        output = body.get("output")
        if not isinstance(output, str):
            raise BackendError("Backend response does not match contract: 'output' must be a string")
        return TextAnalysis(output=output)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or response.reason_phrase
        if isinstance(body, dict) and isinstance(body.get("error"), str):
            return body["error"]
        return response.reason_phrase
