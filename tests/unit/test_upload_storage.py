from pathlib import Path

import pytest

from resume_ai.uploads.models import Upload
from resume_ai.uploads.storage import TemporaryUploadStore, upload_file_path


def _upload(upload_id: str = "abc-123") -> Upload:
    return Upload(content=b"%PDF test content", mime_type="application/pdf", filename="cv.pdf", id=upload_id)


class TestUploadFilePath:
    def test_builds_path_from_id_and_extension(self, tmp_path: Path) -> None:
        path = upload_file_path(tmp_path, "abc-123", "application/pdf")
        assert path == tmp_path / "abc-123.pdf"


class TestStored:
    def test_writes_file_for_duration_of_block(self, tmp_path: Path) -> None:
        store = TemporaryUploadStore(tmp_path / "uploads")
        with store.stored(_upload()) as path:
            assert path.read_bytes() == b"%PDF test content"
            assert path.name == "abc-123.pdf"

    def test_removes_file_after_success(self, tmp_path: Path) -> None:
        store = TemporaryUploadStore(tmp_path)
        with store.stored(_upload()) as path:
            pass
        assert not path.exists()

    def test_removes_file_after_failure(self, tmp_path: Path) -> None:
        store = TemporaryUploadStore(tmp_path)
        with pytest.raises(RuntimeError):
            with store.stored(_upload()) as path:
                raise RuntimeError("provider failed")
        assert not path.exists()
        assert list(tmp_path.iterdir()) == []

    def test_generated_ids_do_not_collide(self, tmp_path: Path) -> None:
        store = TemporaryUploadStore(tmp_path)
        first = Upload(b"%PDF a", "application/pdf", "cv.pdf")
        second = Upload(b"%PDF b", "application/pdf", "cv.pdf")
        with store.stored(first) as p1, store.stored(second) as p2:
            assert p1 != p2
            assert p1.read_bytes() == b"%PDF a"
            assert p2.read_bytes() == b"%PDF b"


class TestLoad:
    def test_returns_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "x.pdf"
        path.write_bytes(b"%PDF other")
        assert TemporaryUploadStore.load(path) == b"%PDF other"

    def test_raises_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="missing"):
            TemporaryUploadStore.load(tmp_path / "missing.pdf")
