"""
Document API endpoints.

Routes: POST /api/documents, GET /api/documents, GET /api/documents/{id},
GET /api/documents/{id}/chunks, DELETE /api/documents?id=...
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from knowledge_qa.config import Settings
from knowledge_qa.database.service import DocumentService
from knowledge_qa.exceptions import DocumentNotFoundError, InvalidInputError

from .deps import get_document_service, get_settings
from .schemas import (
    ChunkInfo,
    ChunkListResponse,
    DeleteResponse,
    DocumentDetail,
    DocumentDetailResponse,
    DocumentInfo,
    DocumentListResponse,
    ErrorResponse,
    UploadResponse,
)

router = APIRouter(
    prefix="/api/documents",
    tags=["documents"],
    responses={code: {"model": ErrorResponse} for code in (400, 404, 500)},
)

logger = logging.getLogger(__name__)


async def read_text_upload(file: Optional[UploadFile], max_size: int) -> str:
    """Read an uploaded file as UTF-8 text, rejecting anything that is not a small text file."""
    if file is None:
        raise InvalidInputError("No file provided", field="file")

    if not (file.content_type or "").startswith("text/"):
        raise InvalidInputError("Only text files are allowed", field="file")

    raw = await file.read(max_size + 1)
    if len(raw) > max_size:
        raise InvalidInputError(
            f"File is too large (max {max_size // (1024 * 1024)}MB)", field="file"
        )

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidInputError("File is not valid UTF-8 text", field="file") from e

    if not content.strip():
        raise InvalidInputError("File is empty", field="file")

    if "\x00" in content:
        raise InvalidInputError("File contains binary data", field="file")

    return content


@router.post("", status_code=201, response_model=UploadResponse)
async def upload_document(
    file: Optional[UploadFile] = File(default=None),
    name: str = Form(default=""),
    settings: Settings = Depends(get_settings),
    document_service: DocumentService = Depends(get_document_service),
):
    """Upload a text document; it is stored and chunked immediately."""
    content = await read_text_upload(file, settings.maximum_file_size)

    document_name = name.strip() or (file.filename if file and file.filename else "untitled")
    document = await document_service.upload_document(document_name, content)

    return UploadResponse(document=DocumentInfo.model_validate(document))


@router.get("", response_model=DocumentListResponse)
async def list_documents(document_service: DocumentService = Depends(get_document_service)):
    """List documents, newest first."""
    documents = await document_service.list_documents()
    return DocumentListResponse(documents=[DocumentInfo.model_validate(d) for d in documents])


@router.get("/{document_id}", response_model=DocumentDetailResponse)
async def get_document(
    document_id: str, document_service: DocumentService = Depends(get_document_service)
):
    document = await document_service.get_document(document_id)
    if document is None:
        raise DocumentNotFoundError(document_id)
    return DocumentDetailResponse(document=DocumentDetail.model_validate(document))


@router.get("/{document_id}/chunks", response_model=ChunkListResponse)
async def get_document_chunks(
    document_id: str, document_service: DocumentService = Depends(get_document_service)
):
    if await document_service.get_document(document_id) is None:
        raise DocumentNotFoundError(document_id)
    chunks = await document_service.get_document_chunks(document_id)
    return ChunkListResponse(chunks=[ChunkInfo.model_validate(c) for c in chunks])


@router.delete("", response_model=DeleteResponse)
async def delete_document(
    id: Optional[str] = None,
    document_service: DocumentService = Depends(get_document_service),
):
    """Delete a document and its chunks."""
    if not id:
        raise InvalidInputError("Document ID is required", field="id")

    if not await document_service.delete_document(id):
        raise DocumentNotFoundError(id)

    return DeleteResponse(message="Document deleted")
