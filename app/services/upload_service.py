"""
Upload handler.

Stores one uploaded file per request under
``<upload_dir>/<prefix>-<epoch millis>-<original name>`` and returns the
public URL it is served from.  The stream is read in chunks and
rejected as soon as it exceeds the size cap, before anything is
written to disk.
"""

import time
from pathlib import Path
from typing import Optional
from urllib.parse import quote

from fastapi import UploadFile

from app.core.errors import FileTooLarge, InternalError, UploadError
from app.core.log import logger
from app.schemas.upload import StoredUpload

CHUNK_SIZE = 64 * 1024


class UploadHandler:
    """Persists multipart file uploads to a local directory."""

    def __init__(self, upload_dir: str | Path, url_prefix: str, max_bytes: int):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = "/" + url_prefix.strip("/")
        self.max_bytes = max_bytes

    def save(self, upload: Optional[UploadFile], prefix: str) -> Optional[StoredUpload]:
        """
        Store an uploaded file.

        Args:
            upload: The multipart file, or None when the form carried none
            prefix: Filename prefix naming what the file belongs to

        Returns:
            The stored file, or None when no file was sent

        Raises:
            FileTooLarge: The file exceeds ``max_bytes``
            UploadError: The filename is unusable
            InternalError: The file could not be written
        """
        if upload is None or not upload.filename:
            return None

        original_name = self.clean_filename(upload.filename)
        if not original_name:
            raise UploadError("Invalid file name")

        data = self._read_capped(upload)

        try:
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            path = self._write_new(prefix, original_name, data)
        except OSError:
            logger.exception("Failed to write upload %r to %s", original_name, self.upload_dir)
            raise InternalError("Failed to store uploaded file")

        logger.info("Stored upload %s (%d bytes)", path.name, len(data))
        return StoredUpload(url=f"{self.url_prefix}/{quote(path.name)}", original_name=original_name,
                            filename=path.name, size_bytes=len(data))

    def delete(self, stored: StoredUpload) -> None:
        """Remove a stored file, e.g. when the record it belonged to was not saved."""
        (self.upload_dir / stored.filename).unlink(missing_ok=True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _read_capped(self, upload: UploadFile) -> bytes:
        chunks: list[bytes] = []
        total = 0
        upload.file.seek(0)
        while True:
            chunk = upload.file.read(CHUNK_SIZE)
            if not chunk:
                break
            total += len(chunk)
            if total > self.max_bytes:
                logger.warning("Rejected upload %r: larger than %d bytes", upload.filename, self.max_bytes)
                raise FileTooLarge(f"File too large (max {_format_size(self.max_bytes)})")
            chunks.append(chunk)
        return b"".join(chunks)

    def _write_new(self, prefix: str, original_name: str, data: bytes) -> Path:
        timestamp = int(time.time() * 1000)
        while True:
            path = self.upload_dir / f"{prefix}-{timestamp}-{original_name}"
            # Exclusive create claims the name; a taken name moves to the next millisecond
            try:
                handle = path.open("xb")
            except FileExistsError:
                timestamp += 1
                continue
            with handle:
                handle.write(data)
            return path

    @staticmethod
    def clean_filename(filename: str) -> str:
        """Drop any directory part a client put in the filename."""
        name = filename.replace("\\", "/").rsplit("/", 1)[-1]
        return name.strip().lstrip(".")


def _format_size(size_bytes: int) -> str:
    if size_bytes >= 1024 * 1024 and size_bytes % (1024 * 1024) == 0:
        return f"{size_bytes // (1024 * 1024)}MB"
    return f"{size_bytes} bytes"
