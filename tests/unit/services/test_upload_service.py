"""Tests for storing multipart uploads on disk."""

import io
import time
from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi import UploadFile

from app.core.errors import FileTooLarge, InternalError, UploadError
from app.services.upload_service import UploadHandler


def _upload(data: bytes, filename: str = "cv.pdf") -> UploadFile:
    return UploadFile(file=io.BytesIO(data), filename=filename)


class TestSave:
    def test_no_file(self, uploads):
        assert uploads.save(None, "contact") is None

    def test_empty_filename_means_no_file(self, uploads):
        assert uploads.save(_upload(b"", filename=""), "contact") is None

    def test_stored_name_and_url(self, uploads):
        stored = uploads.save(_upload(b"%PDF-1.4"), "contact")

        assert stored.filename.startswith("contact-")
        assert stored.filename.endswith("-cv.pdf")
        timestamp = stored.filename[len("contact-"):-len("-cv.pdf")]
        assert timestamp.isdigit() and len(timestamp) == 13
        assert stored.url == f"/uploads/{stored.filename}"
        assert stored.original_name == "cv.pdf"
        assert stored.size_bytes == 8
        assert (uploads.upload_dir / stored.filename).read_bytes() == b"%PDF-1.4"

    def test_file_at_limit_is_accepted(self, uploads):
        stored = uploads.save(_upload(b"x" * 1024), "portfolio")
        assert stored.size_bytes == 1024

    def test_oversized_file_is_rejected_before_writing(self, uploads):
        with pytest.raises(FileTooLarge) as exc_info:
            uploads.save(_upload(b"x" * 1025), "contact")
        assert exc_info.value.status_code == 413
        assert "File too large" in exc_info.value.detail
        assert not uploads.upload_dir.exists() or not any(uploads.upload_dir.iterdir())

    def test_too_large_message_names_limit(self, tmp_path):
        handler = UploadHandler(tmp_path, "/uploads", max_bytes=1024 * 1024)
        with pytest.raises(FileTooLarge) as exc_info:
            handler.save(_upload(b"x" * (1024 * 1024 + 1)), "contact")
        assert exc_info.value.detail == "File too large (max 1MB)"

    def test_directory_parts_are_dropped(self, uploads):
        stored = uploads.save(_upload(b"data", filename="../../etc/passwd"), "contact")
        assert stored.original_name == "passwd"
        assert (uploads.upload_dir / stored.filename).exists()

    def test_windows_paths_are_dropped(self, uploads):
        stored = uploads.save(_upload(b"data", filename="C:\\Users\\ada\\cv.pdf"), "contact")
        assert stored.original_name == "cv.pdf"

    def test_unusable_name(self, uploads):
        with pytest.raises(UploadError):
            uploads.save(_upload(b"data", filename="../.."), "contact")

    def test_url_is_quoted(self, uploads):
        stored = uploads.save(_upload(b"data", filename="my cv.pdf"), "contact")
        assert stored.url.endswith("-my%20cv.pdf")
        assert stored.original_name == "my cv.pdf"

    def test_same_name_twice_gets_distinct_files(self, uploads):
        first = uploads.save(_upload(b"one"), "contact")
        second = uploads.save(_upload(b"two"), "contact")
        assert first.filename != second.filename
        assert (uploads.upload_dir / first.filename).read_bytes() == b"one"
        assert (uploads.upload_dir / second.filename).read_bytes() == b"two"

    def test_concurrent_saves_in_one_millisecond_never_share_a_file(self, uploads, monkeypatch):
        monkeypatch.setattr(time, "time", lambda: 1_760_000_000.0)
        payloads = [f"upload {n}".encode() for n in range(16)]

        with ThreadPoolExecutor(max_workers=16) as pool:
            stored = list(pool.map(lambda data: uploads.save(_upload(data), "contact"), payloads))

        assert len({s.filename for s in stored}) == len(payloads)
        for data, saved in zip(payloads, stored):
            assert (uploads.upload_dir / saved.filename).read_bytes() == data

    def test_unwritable_directory(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_bytes(b"")
        handler = UploadHandler(blocker, "/uploads", max_bytes=1024)
        with pytest.raises(InternalError) as exc_info:
            handler.save(_upload(b"data"), "contact")
        assert exc_info.value.status_code == 500


class TestDelete:
    def test_delete_removes_file(self, uploads):
        stored = uploads.save(_upload(b"data"), "contact")
        uploads.delete(stored)
        assert not (uploads.upload_dir / stored.filename).exists()

    def test_delete_missing_file_is_safe(self, uploads):
        stored = uploads.save(_upload(b"data"), "contact")
        uploads.delete(stored)
        uploads.delete(stored)


class TestCleanFilename:
    @pytest.mark.parametrize("raw, expected", [
        ("cv.pdf", "cv.pdf"),
        ("  cv.pdf ", "cv.pdf"),
        ("dir/sub/cv.pdf", "cv.pdf"),
        (".hidden", "hidden"),
        ("..", ""),
    ])
    def test_clean_filename(self, raw, expected):
        assert UploadHandler.clean_filename(raw) == expected
