"""
Upload Router

Endpoints:
- POST /upload - Store a file (multipart ``file``, optional ``document_type``)

When ``document_type`` is given and the caller has an applicant profile,
the file is also recorded as one of their documents.
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.auth import get_current_user
from app.core.database import get_db
from app.modules.applicants import repository as applicants_repository
from app.modules.applicants import service as applicants_service
from app.modules.uploads import service
from app.modules.users import User

logger = logging.getLogger(__name__)

router = APIRouter()


class UploadResponse(BaseModel):
    filename: str
    url: str
    size: int
    mime_type: str
    document_recorded: bool = False


@router.post("", response_model=UploadResponse)
async def upload_file(
    file: UploadFile = File(...),
    document_type: str | None = Form(None, max_length=50),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> UploadResponse:
    stored = await service.store_upload(file)

    recorded = False
    if document_type and await applicants_repository.get_by_user_id(db, user.id):
        await applicants_service.attach_document(
            db,
            user.id,
            document_type=document_type,
            file_name=stored.original_name,
            file_path=stored.url,
            file_size=stored.size,
            mime_type=stored.mime_type,
        )
        recorded = True

    return UploadResponse(
        filename=stored.filename,
        url=stored.url,
        size=stored.size,
        mime_type=stored.mime_type,
        document_recorded=recorded,
    )
