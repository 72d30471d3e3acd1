"""Photo Store — content store for uploaded planet photos on the local filesystem.

Invariants:
    - Filenames are generated here, never taken from the client
    - A rejected upload (type or size) leaves nothing on disk
    - Disk IO runs in the threadpool, never on the event loop

Design Decisions:
    - Filename = uuid4 + epoch millis + extension from content type
    - remove() of a missing file is a no-op (used for link-failure cleanup)
"""

import logging
import mimetypes
import os
import time
import uuid
from typing import BinaryIO

from fastapi import UploadFile
from starlette.concurrency import run_in_threadpool

from planet_api.core.errors import (
    PhotoStorageError, PhotoTooLargeError, UnsupportedPhotoTypeError,
)

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024

_EXTENSIONS = {"image/jpeg": ".jpg", "image/png": ".png"}


def generate_photo_filename(content_type: str) -> str:
    ext = _EXTENSIONS.get(content_type) or mimetypes.guess_extension(content_type) or ""
    return f"{uuid.uuid4()}-{int(time.time() * 1000)}{ext}"


def _copy_limited(src: BinaryIO, dest_path: str, max_bytes: int) -> int:
    """Copy src to dest_path; returns bytes written or -1 once max_bytes is exceeded."""
    written = 0
    with open(dest_path, "wb") as dest:
        while chunk := src.read(CHUNK_SIZE):
            written += len(chunk)
            if written > max_bytes:
                return -1
            dest.write(chunk)
    return written


class LocalPhotoStore:
    """Writes photos under a single directory, addressed by generated filename."""

    def __init__(
        self, directory: str, allowed_types: list[str], max_bytes: int,
    ):
        self.directory = directory
        self.allowed_types = list(allowed_types)
        self.max_bytes = max_bytes

    def ensure_directory(self) -> None:
        os.makedirs(self.directory, exist_ok=True)

    def is_writable(self) -> bool:
        """True when new photos can be written (readiness)."""
        return os.path.isdir(self.directory) and os.access(self.directory, os.W_OK)

    def path_for(self, filename: str) -> str:
        return os.path.join(self.directory, os.path.basename(filename))

    async def save(self, upload: UploadFile) -> str:
        """Validate and persist an upload; returns the generated filename."""
        content_type = (upload.content_type or "").split(";")[0].strip().lower()
        if content_type not in self.allowed_types:
            raise UnsupportedPhotoTypeError(upload.content_type, self.allowed_types)

        filename = generate_photo_filename(content_type)
        path = self.path_for(filename)
        try:
            await run_in_threadpool(self.ensure_directory)
            await upload.seek(0)
            written = await run_in_threadpool(
                _copy_limited, upload.file, path, self.max_bytes,
            )
        except OSError as e:
            logger.error(f"Failed to write photo {filename}: {e}")
            await self.remove(filename)
            raise PhotoStorageError("write")

        if written < 0:
            await self.remove(filename)
            raise PhotoTooLargeError(self.max_bytes)

        logger.info(
            f"Stored photo ({written} bytes)",
            extra={"photo_filename": filename},
        )
        return filename

    async def remove(self, filename: str) -> None:
        path = self.path_for(filename)
        try:
            await run_in_threadpool(os.remove, path)
        except FileNotFoundError:
            return
        except OSError as e:
            logger.error(f"Failed to remove photo {filename}: {e}")
            raise PhotoStorageError("remove")
        logger.info("Removed photo", extra={"photo_filename": filename})
