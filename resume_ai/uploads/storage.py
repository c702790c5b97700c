from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from resume_ai.logging.logger import Log
from resume_ai.uploads.media_types import extension_for
from resume_ai.uploads.models import Upload


def upload_file_path(upload_root: Path, upload_id: str, mime_type: str) -> Path:
    """Build path to a stored upload: {upload_root}/{upload_id}{ext}"""
    return upload_root / f"{upload_id}{extension_for(mime_type)}"


class TemporaryUploadStore:
    """Writes uploads to local disk for the lifetime of one request."""

    def __init__(self, upload_root: Path) -> None:
        self._upload_root = upload_root

    @contextmanager
    def stored(self, upload: Upload) -> Iterator[Path]:
        """Persist ``upload`` and yield its path; the file is removed on every exit path."""
        self._upload_root.mkdir(parents=True, exist_ok=True)
        path = upload_file_path(self._upload_root, upload.id, upload.mime_type)
        try:
            path.write_bytes(upload.content)
            Log.debug(f"Stored upload {upload.id} at {path} ({upload.size_bytes} bytes)")
            yield path
        finally:
            path.unlink(missing_ok=True)
            Log.debug(f"Removed temporary upload {upload.id}")

    @staticmethod
    def load(path: Path) -> bytes:
        """Read stored upload bytes back from disk.

        Raises:
            FileNotFoundError: if the file does not exist at ``path``.
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return path.read_bytes()
