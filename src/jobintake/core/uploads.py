from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping, Sequence
from pathlib import Path
from typing import BinaryIO

from fastapi import UploadFile

from jobintake.types import StoredFile, UploadBatch, UploadFieldRule

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES: frozenset[str] = frozenset(
    {
        "application/pdf",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "image/jpeg",
        "image/png",
    }
)

APPLICATION_UPLOAD_FIELDS: tuple[UploadFieldRule, ...] = (
    UploadFieldRule(name="resume", max_count=3),
    UploadFieldRule(name="coverLetter", max_count=3),
    UploadFieldRule(name="portfolio", max_count=5),
)

DEFAULT_MAX_FILE_BYTES = 5 * 1024 * 1024
CHUNK_SIZE = 64 * 1024
MAX_NAME_ATTEMPTS = 1000

INVALID_TYPE_MESSAGE = "Invalid file type. Only PDF/DOC/DOCX/JPEG/PNG allowed"
FILE_TOO_LARGE_MESSAGE = "File too large"
UNEXPECTED_FIELD_MESSAGE = "Unexpected field"


class UploadRejected(Exception):
    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


def safe_basename(filename: str) -> str:
    """Strip any directory part a client put into the filename."""
    name = filename.replace("\\", "/").rsplit("/", 1)[-1].strip()
    if name in {"", ".", ".."}:
        return "upload"
    return name


class UploadGate:
    """Validates multipart files by field, type and size, then writes them to disk.

    Type and count checks run for the whole request before anything is written.
    Size is enforced while streaming; an oversized file removes every file
    already stored for the same request, so a rejected request leaves nothing
    behind.
    """

    def __init__(
        self,
        upload_dir: Path,
        max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
        allowed_types: Iterable[str] = ALLOWED_MIME_TYPES,
        fields: Sequence[UploadFieldRule] = APPLICATION_UPLOAD_FIELDS,
        clock: Callable[[], float] = time.time,
    ):
        self.upload_dir = Path(upload_dir)
        self.max_file_bytes = max_file_bytes
        self.allowed_types = frozenset(allowed_types)
        self.rules = {rule.name: rule for rule in fields}
        self.clock = clock

    def allows(self, content_type: str | None) -> bool:
        return (content_type or "") in self.allowed_types

    def stored_name(self, original_name: str, stamp: int | None = None) -> str:
        if stamp is None:
            stamp = int(self.clock() * 1000)
        return f"{stamp}-{safe_basename(original_name)}"

    def accept(self, files: Mapping[str, Sequence[UploadFile]]) -> UploadBatch:
        pending = self._select(files)
        stamp = int(self.clock() * 1000)
        batch = UploadBatch()
        try:
            for field, upload in pending:
                batch.files.append(self._store(field, upload, stamp))
        except Exception:
            self.discard(batch)
            raise
        return batch

    def discard(self, batch: UploadBatch) -> None:
        for path in batch.paths():
            path.unlink(missing_ok=True)
        if batch.files:
            logger.info("Discarded %d uploaded file(s)", len(batch.files))

    def _select(self, files: Mapping[str, Sequence[UploadFile]]) -> list[tuple[str, UploadFile]]:
        selected: list[tuple[str, UploadFile]] = []
        for field, uploads in files.items():
            supplied = [upload for upload in uploads if upload.filename]
            if not supplied:
                continue

            rule = self.rules.get(field)
            if rule is None or len(supplied) > rule.max_count:
                logger.warning("Rejected upload: unexpected field %s (%d file(s))", field, len(supplied))
                raise UploadRejected(UNEXPECTED_FIELD_MESSAGE, field=field)

            for upload in supplied:
                if not self.allows(upload.content_type):
                    logger.warning(
                        "Rejected upload %r in %s: content type %s", upload.filename, field, upload.content_type
                    )
                    raise UploadRejected(INVALID_TYPE_MESSAGE, field=field)
                if upload.size is not None and upload.size > self.max_file_bytes:
                    logger.warning("Rejected upload %r in %s: %d bytes", upload.filename, field, upload.size)
                    raise UploadRejected(FILE_TOO_LARGE_MESSAGE, field=field)
                selected.append((field, upload))
        return selected

    def _reserve(self, original_name: str, stamp: int) -> tuple[Path, BinaryIO]:
        # Existing files are never overwritten; a taken name moves to the next millisecond.
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        for offset in range(MAX_NAME_ATTEMPTS):
            target = self.upload_dir / self.stored_name(original_name, stamp + offset)
            try:
                return target, target.open("xb")
            except FileExistsError:
                continue
        raise FileExistsError(f"no free upload name for {original_name!r}")

    def _store(self, field: str, upload: UploadFile, stamp: int) -> StoredFile:
        original_name = upload.filename or ""
        upload.file.seek(0)
        target, handle = self._reserve(original_name, stamp)

        written = 0
        with handle:
            while chunk := upload.file.read(CHUNK_SIZE):
                written += len(chunk)
                if written > self.max_file_bytes:
                    break
                handle.write(chunk)

        if written > self.max_file_bytes:
            target.unlink(missing_ok=True)
            logger.warning("Rejected upload %r in %s: exceeds %d bytes", original_name, field, self.max_file_bytes)
            raise UploadRejected(FILE_TOO_LARGE_MESSAGE, field=field)

        return StoredFile(
            field=field,
            original_name=original_name,
            filename=target.name,
            path=target,
            content_type=upload.content_type or "",
            size=written,
        )
