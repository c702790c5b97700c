"""Upload session state for one analysis view.

States: idle -> file-selected -> submitting -> (result-shown | error-shown).
Selecting a new file from result-shown or error-shown returns to file-selected.
"""

import threading
from collections.abc import Collection
from enum import Enum
from typing import Protocol

from resume_ai.analysis.models import AnalysisResult
from resume_ai.client.exceptions import (
    BackendError,
    FileRejectedError,
    NoFileSelectedError,
    SubmissionInProgressError,
)
from resume_ai.logging.logger import Log
from resume_ai.processor.models import AnalysisKind
from resume_ai.uploads.media_types import (
    DOC_MIME_TYPE,
    DOCX_MIME_TYPE,
    EXTENSIONS,
    PDF_MIME_TYPE,
)

PDF_ONLY: frozenset[str] = frozenset({PDF_MIME_TYPE})
RESUME_DOCUMENTS: frozenset[str] = frozenset({PDF_MIME_TYPE, DOC_MIME_TYPE, DOCX_MIME_TYPE})

FAILURE_MESSAGES: dict[AnalysisKind, str] = {
    AnalysisKind.TEXT: "An error occurred during analysis.",
    AnalysisKind.SCORE: "Analysis failed",
    AnalysisKind.INTERVIEW_PREP: "Generation failed",
}


class SessionState(str, Enum):
    IDLE = "idle"
    FILE_SELECTED = "file-selected"
    SUBMITTING = "submitting"
    RESULT_SHOWN = "result-shown"
    ERROR_SHOWN = "error-shown"


class Submitter(Protocol):
    def submit(
        self,
        kind: AnalysisKind,
        content: bytes,
        filename: str,
        mime_type: str,
    ) -> AnalysisResult: ...


def rejection_message(allowed_mime_types: Collection[str]) -> str:
    """User-facing message for a file outside the allow-list, e.g. 'Only PDF allowed'."""
    labels = sorted(EXTENSIONS.get(t, t).lstrip(".").upper() for t in allowed_mime_types)
    if len(labels) == 1:
        return f"Only {labels[0]} allowed"
    return f"Only {', '.join(labels[:-1])} or {labels[-1]} files allowed"


class AnalysisSession:
    """Holds the selected file and the outcome of at most one in-flight request."""

    def __init__(
        self,
        backend: Submitter,
        kind: AnalysisKind = AnalysisKind.TEXT,
        allowed_mime_types: Collection[str] = PDF_ONLY,
    ) -> None:
        self._backend = backend
        self._kind = kind
        self._allowed = frozenset(allowed_mime_types)
        self._lock = threading.Lock()
        self.state = SessionState.IDLE
        self.filename: str | None = None
        self.mime_type: str | None = None
        self._content: bytes | None = None
        self.result: AnalysisResult | None = None
        self.error: str | None = None

    @property
    def kind(self) -> AnalysisKind:
        return self._kind

    @property
    def in_flight(self) -> bool:
        return self.state is SessionState.SUBMITTING

    @property
    def can_submit(self) -> bool:
        """True when a file is selected and no request is outstanding."""
        return self._content is not None and not self.in_flight

    def select_file(self, content: bytes, filename: str, mime_type: str) -> None:
        """Select a file by its declared media type.

        Raises:
            FileRejectedError: if the media type is not allowed; the session is unchanged.
            SubmissionInProgressError: if a request is outstanding.
        """
        with self._lock:
            if self.in_flight:
                raise SubmissionInProgressError("Wait for the current request to finish")
            if mime_type.lower() not in self._allowed:
                Log.info(f"Rejected {filename}: media type {mime_type!r} not allowed")
                raise FileRejectedError(rejection_message(self._allowed))
            self._content = content
            self.filename = filename
            self.mime_type = mime_type
            self.result = None
            self.error = None
            self.state = SessionState.FILE_SELECTED

    def submit(self) -> AnalysisResult | None:
        """Send the selected file to the backend.

        Returns the validated result, or None when the request failed; the
        failure message is then available in ``error``.

        Raises:
            NoFileSelectedError: if no file has been selected.
            SubmissionInProgressError: if another request is outstanding.
        """
        with self._lock:
            if self._content is None or self.filename is None or self.mime_type is None:
                raise NoFileSelectedError("Upload a resume first")
            if self.in_flight:
                raise SubmissionInProgressError("A request is already in progress")
            self.state = SessionState.SUBMITTING
            self.error = None
            content, filename, mime_type = self._content, self.filename, self.mime_type

        try:
            result = self._backend.submit(self._kind, content, filename, mime_type)
        except BackendError as exc:
            Log.error(f"Submission of {filename} failed: {exc}")
            self._fail()
            return None
        except Exception:
            self._fail()
            raise

        with self._lock:
            self.result = result
            self.state = SessionState.RESULT_SHOWN
        return result

    def _fail(self) -> None:
        with self._lock:
            self.result = None
            self.error = FAILURE_MESSAGES[self._kind]
            self.state = SessionState.ERROR_SHOWN
