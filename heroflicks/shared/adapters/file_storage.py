"""
Local File Storage Adapter

Places uploaded PDFs and covers on local disk.

Placement Policy:
=================
- Accepted media types: application/pdf and image/*
- Stored name: sanitized base name + "-<epoch millis>-<random>" + original extension
      "Spider Man #1.pdf" → "Spider_Man__1-1760869800000-482913377.pdf"
- Returned path: "<UPLOAD_DIR>/<stored name>", relative when UPLOAD_DIR is
- Files larger than UPLOAD_MAX_BYTES are rejected and the partial file removed

Disk writes run in Starlette's threadpool so the event loop never blocks.

Usage:
======
    storage = LocalFileStorage(settings.UPLOAD_DIR, settings.UPLOAD_MAX_BYTES)

    storage.ensure_allowed(upload)
    stored = await storage.save(upload)
    ...
    await storage.delete(stored.path)
"""

import os
import random
import re
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from heroflicks.config.settings import settings
from heroflicks.shared.core.exceptions import FileTooLargeError, InvalidFileTypeError
from heroflicks.shared.core.logging import get_logger


logger = get_logger("heroflicks.storage")

CHUNK_SIZE = 1024 * 1024

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9_.-]")


@dataclass(frozen=True)
class StoredFile:
    """A placed file: the path stored in the database and its size."""

    path: str
    size: int


class LocalFileStorage:
    """File placement on the local filesystem."""

    def __init__(self, upload_dir: Optional[str] = None, max_bytes: Optional[int] = None) -> None:
        self.upload_dir = upload_dir or settings.UPLOAD_DIR
        self.max_bytes = max_bytes or settings.UPLOAD_MAX_BYTES

    # ═══════════════════════════════════════════════════════════════════════════
    # POLICY
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def is_allowed(content_type: Optional[str]) -> bool:
        if not content_type:
            return False
        return content_type == "application/pdf" or content_type.startswith("image/")

    def ensure_allowed(self, upload: UploadFile) -> None:
        """
        Raises:
            InvalidFileTypeError: If the file is neither a PDF nor an image
        """
        if not self.is_allowed(upload.content_type):
            raise InvalidFileTypeError(upload.content_type)

    @staticmethod
    def build_filename(original_name: Optional[str]) -> str:
        """Collision-resistant stored name that keeps the original extension."""
        base, extension = os.path.splitext(os.path.basename(original_name or "file"))
        sanitized = _UNSAFE_CHARS.sub("_", base) or "file"
        millis = int(time.time() * 1000)
        suffix = random.randint(0, 10**9)
        return f"{sanitized}-{millis}-{suffix}{extension}"

    # ═══════════════════════════════════════════════════════════════════════════
    # PLACEMENT
    # ═══════════════════════════════════════════════════════════════════════════

    async def save(self, upload: UploadFile) -> StoredFile:
        """
        Validate and write an upload to disk.

        Raises:
            InvalidFileTypeError: Unsupported media type
            FileTooLargeError: Larger than max_bytes
        """
        self.ensure_allowed(upload)
        filename = self.build_filename(upload.filename)
        path = f"{self.upload_dir.rstrip('/')}/{filename}"

        await upload.seek(0)
        size = await run_in_threadpool(self._write, upload.file, Path(path))

        logger.info(
            "File stored",
            path=path,
            size=size,
            content_type=upload.content_type,
        )
        return StoredFile(path=path, size=size)

    def _write(self, source: BinaryIO, destination: Path) -> int:
        destination.parent.mkdir(parents=True, exist_ok=True)
        written = 0
        with destination.open("wb") as target:
            while chunk := source.read(CHUNK_SIZE):
                written += len(chunk)
                if written > self.max_bytes:
                    break
                target.write(chunk)
        if written > self.max_bytes:
            destination.unlink(missing_ok=True)
            raise FileTooLargeError(self.max_bytes)
        return written

    async def delete(self, path: str) -> bool:
        """Remove a placed file. Returns False if it was not there."""
        return await run_in_threadpool(self._unlink, Path(path))

    @staticmethod
    def _unlink(path: Path) -> bool:
        if not path.exists():
            return False
        path.unlink()
        return True

    @staticmethod
    def resolve(path: str) -> Optional[Path]:
        """Existing file for a stored path, or None."""
        candidate = Path(path)
        return candidate if candidate.is_file() else None
