from __future__ import annotations

import logging
import secrets
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from rentassist.config import Settings

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 64 * 1024
_MAX_EXTENSION_LENGTH = 10


class UploadRejectedError(ValueError):
    def __init__(self, slot: str, reason: str, *, status_code: int = 400):
        self.slot = slot
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"{slot}: {reason}")


@dataclass
class PendingUpload:
    slot: str
    original_filename: str
    content_type: str
    size: int
    stream: BinaryIO


def _measure(stream: BinaryIO) -> int:
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(0)
    return size


def _extension(filename: str) -> str:
    suffix = Path(filename).suffix.lower()
    if not suffix or len(suffix) > _MAX_EXTENSION_LENGTH or not suffix[1:].isalnum():
        return ""
    return suffix


class UploadStore:
    """Flat directory of uploaded identity-document images."""

    def __init__(
        self,
        directory: Path,
        *,
        max_bytes: int = 5 * 1024 * 1024,
        allowed_content_types: list[str] | None = None,
    ):
        self.directory = Path(directory)
        self.max_bytes = max_bytes
        self.allowed_content_types = allowed_content_types or ["image/*"]

    @classmethod
    def from_settings(cls, settings: Settings) -> UploadStore:
        return cls(
            settings.upload_dir,
            max_bytes=settings.max_upload_bytes,
            allowed_content_types=settings.allowed_upload_type_list,
        )

    def _content_type_allowed(self, content_type: str) -> bool:
        content_type = content_type.split(";", 1)[0].strip().lower()
        for pattern in self.allowed_content_types:
            if pattern.endswith("/*"):
                if content_type.startswith(pattern[:-1]):
                    return True
            elif content_type == pattern:
                return True
        return False

    def inspect(
        self,
        slot: str,
        *,
        filename: str | None,
        content_type: str | None,
        stream: BinaryIO | None,
    ) -> PendingUpload | None:
        """Check one slot without writing anything; None means nothing was submitted."""
        if stream is None:
            return None
        size = _measure(stream)
        if not filename and size == 0:
            return None
        if size > self.max_bytes:
            raise UploadRejectedError(
                slot,
                f"file exceeds the {self.max_bytes} byte limit",
                status_code=413,
            )
        if size == 0:
            raise UploadRejectedError(slot, "file is empty")
        if not self._content_type_allowed(content_type or ""):
            raise UploadRejectedError(slot, "file must be an image")
        return PendingUpload(
            slot=slot,
            original_filename=filename or "",
            content_type=content_type or "",
            size=size,
            stream=stream,
        )

    def generate_filename(self, original_filename: str) -> str:
        stamp = int(time.time() * 1000)
        return f"{stamp}-{secrets.token_hex(8)}{_extension(original_filename)}"

    def save(self, pending: PendingUpload) -> str:
        self.directory.mkdir(parents=True, exist_ok=True)
        while True:
            filename = self.generate_filename(pending.original_filename)
            target = self.directory / filename
            try:
                handle = target.open("xb")
            except FileExistsError:
                continue
            break

        pending.stream.seek(0)
        with handle:
            while chunk := pending.stream.read(_CHUNK_SIZE):
                handle.write(chunk)
        logger.info("Stored %s upload as %s (%d bytes)", pending.slot, filename, pending.size)
        return filename

    def discard(self, filenames: list[str]) -> None:
        for filename in filenames:
            try:
                self.path_for(filename).unlink(missing_ok=True)
            except (OSError, ValueError):
                logger.warning("Could not remove orphaned upload %s", filename, exc_info=True)

    def path_for(self, filename: str) -> Path:
        base = self.directory.resolve()
        candidate = (base / filename).resolve()
        if candidate.parent != base:
            raise ValueError(f"invalid upload filename: {filename!r}")
        return candidate
