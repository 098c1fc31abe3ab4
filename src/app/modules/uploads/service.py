"""
Upload Service

Validates and stores uploaded files in the local upload directory under a
random name.
"""

import asyncio
import logging
import secrets
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

from app.core.config import settings
from app.modules.shared import ServiceError

logger = logging.getLogger(__name__)

ALLOWED_MIME_TYPES: dict[str, str] = {
    "application/pdf": ".pdf",
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "application/msword": ".doc",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
}

CHUNK_SIZE = 1024 * 1024


class FileTooLargeError(ServiceError):
    def __init__(self, limit: int):
        super().__init__(
            message=f"File exceeds the {limit // (1024 * 1024)} MB limit",
            error_code="FILE_TOO_LARGE",
            status_code=413,
        )


class UnsupportedFileTypeError(ServiceError):
    def __init__(self, mime_type: str | None):
        super().__init__(
            message=f"Unsupported file type: {mime_type or 'unknown'}. Allowed: PDF, JPEG, PNG, DOC, DOCX",
            error_code="UNSUPPORTED_FILE_TYPE",
            status_code=400,
        )


@dataclass
class StoredFile:
    filename: str
    original_name: str
    path: str
    url: str
    size: int
    mime_type: str


async def _read_limited(file: UploadFile, limit: int) -> bytes:
    """Read the upload, stopping as soon as it exceeds ``limit`` bytes."""
    chunks: list[bytes] = []
    size = 0
    while chunk := await file.read(CHUNK_SIZE):
        size += len(chunk)
        if size > limit:
            raise FileTooLargeError(limit)
        chunks.append(chunk)
    return b"".join(chunks)


async def store_upload(file: UploadFile) -> StoredFile:
    """
    Validate and save an uploaded file.

    Raises:
        UnsupportedFileTypeError: If the content type is not allowed
        FileTooLargeError: If the file exceeds max_upload_bytes
    """
    mime_type = file.content_type
    if mime_type not in ALLOWED_MIME_TYPES:
        logger.warning(f"Rejected upload '{file.filename}' with type {mime_type}")
        raise UnsupportedFileTypeError(mime_type)

    content = await _read_limited(file, settings.max_upload_bytes)

    filename = f"{secrets.token_hex(16)}{ALLOWED_MIME_TYPES[mime_type]}"
    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / filename

    await asyncio.to_thread(path.write_bytes, content)
    logger.info(f"Stored upload {filename} ({len(content)} bytes, {mime_type})")

    return StoredFile(
        filename=filename,
        original_name=file.filename or filename,
        path=str(path),
        url=f"/uploads/{filename}",
        size=len(content),
        mime_type=mime_type,
    )
