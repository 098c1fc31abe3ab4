"""
Unit tests for upload validation and storage.
"""

from io import BytesIO

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from app.core.config import settings
from app.modules.uploads.service import (
    FileTooLargeError,
    UnsupportedFileTypeError,
    store_upload,
)


def _upload(content: bytes, filename: str, content_type: str) -> UploadFile:
    return UploadFile(
        file=BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "upload_dir", str(tmp_path))
    return tmp_path


class TestStoreUpload:
    @pytest.mark.asyncio
    async def test_stores_pdf_under_random_name(self, upload_dir):
        stored = await store_upload(_upload(b"%PDF-1.4 test", "my cv.pdf", "application/pdf"))

        assert stored.filename.endswith(".pdf")
        assert stored.filename != "my cv.pdf"
        assert stored.original_name == "my cv.pdf"
        assert stored.url == f"/uploads/{stored.filename}"
        assert stored.size == len(b"%PDF-1.4 test")
        assert (upload_dir / stored.filename).read_bytes() == b"%PDF-1.4 test"

    @pytest.mark.asyncio
    async def test_two_uploads_get_distinct_names(self, upload_dir):
        first = await store_upload(_upload(b"a", "id.png", "image/png"))
        second = await store_upload(_upload(b"b", "id.png", "image/png"))

        assert first.filename != second.filename

    @pytest.mark.asyncio
    async def test_rejects_unsupported_type(self, upload_dir):
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            await store_upload(_upload(b"#!/bin/sh", "run.sh", "text/x-shellscript"))

        assert exc_info.value.status_code == 400
        assert list(upload_dir.iterdir()) == []

    @pytest.mark.asyncio
    async def test_rejects_oversized_file(self, upload_dir, monkeypatch):
        monkeypatch.setattr(settings, "max_upload_bytes", 10)

        with pytest.raises(FileTooLargeError) as exc_info:
            await store_upload(_upload(b"x" * 11, "big.pdf", "application/pdf"))

        assert exc_info.value.status_code == 413
        assert list(upload_dir.iterdir()) == []
