class ClientError(Exception):
    """Base exception for the resume analysis client."""


class FileRejectedError(ClientError):
    """Raised when a selected file's declared media type is not on the allow-list."""


class NoFileSelectedError(ClientError):
    """Raised when submitting without a selected file."""


class SubmissionInProgressError(ClientError):
    """Raised when a request is already outstanding for the session."""


class BackendError(ClientError):
    """Raised when the backend is unreachable, fails, or returns a malformed body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
