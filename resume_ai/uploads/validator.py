"""Validates an upload against the allow-list, size limit and content sniffing."""

from collections.abc import Collection

from resume_ai.uploads.exceptions import (
    ContentMismatchError,
    EmptyUploadError,
    UnsupportedMediaTypeError,
    UploadTooLargeError,
)
from resume_ai.uploads.media_types import content_matches
from resume_ai.uploads.models import Upload


class UploadValidator:
    """Checks an Upload before any bytes reach disk or the provider."""

    def __init__(self, allowed_mime_types: Collection[str], max_upload_bytes: int) -> None:
        self._allowed = frozenset(t.lower() for t in allowed_mime_types)
        self._max_bytes = max_upload_bytes

    def validate(self, upload: Upload) -> None:
        """Raise an UploadError subclass if the upload must be rejected."""
        if upload.size_bytes == 0:
            raise EmptyUploadError(f"Uploaded file '{upload.filename}' is empty")
        if upload.size_bytes > self._max_bytes:
            raise UploadTooLargeError(
                f"Uploaded file is {upload.size_bytes} bytes (max {self._max_bytes})"
            )
        mime_type = upload.mime_type.lower()
        if mime_type not in self._allowed:
            raise UnsupportedMediaTypeError(
                f"Media type '{upload.mime_type}' is not allowed. "
                f"Choose from: {sorted(self._allowed)}"
            )
        if not content_matches(mime_type, upload.content):
            raise ContentMismatchError(
                f"File content does not match declared media type '{upload.mime_type}'"
            )
