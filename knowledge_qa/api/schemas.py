from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict

from knowledge_qa.retrieval import SourceChunk


class DocumentInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    uploaded_at: datetime
    word_count: int


class DocumentDetail(DocumentInfo):
    content: str


class ChunkInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    document_id: str
    chunk_index: int
    content: str


class UploadResponse(BaseModel):
    success: bool = True
    document: DocumentInfo


class DocumentListResponse(BaseModel):
    success: bool = True
    documents: List[DocumentInfo]


class DocumentDetailResponse(BaseModel):
    success: bool = True
    document: DocumentDetail


class ChunkListResponse(BaseModel):
    success: bool = True
    chunks: List[ChunkInfo]


class DeleteResponse(BaseModel):
    success: bool = True
    message: str


class QuestionRequest(BaseModel):
    # Type is checked by normalize_question so a non-string answers 400, not 422
    question: Any = None


class SourceInfo(BaseModel):
    document_id: str
    chunk_index: int
    preview: str

    @classmethod
    def from_chunk(cls, chunk: SourceChunk, preview_length: int) -> "SourceInfo":
        preview = chunk.content[:preview_length]
        if len(chunk.content) > preview_length:
            preview += "..."
        return cls(document_id=chunk.document_id, chunk_index=chunk.chunk_index, preview=preview)


class AnswerResponse(BaseModel):
    success: bool = True
    answer: str
    sources: List[SourceInfo]


class ErrorResponse(BaseModel):
    error: str
    details: Optional[dict] = None
