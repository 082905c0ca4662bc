from typing import List, Optional

from knowledge_qa.config import Settings
from knowledge_qa.logger import AppLogger
from knowledge_qa.retrieval import chunk_document, count_words

from ..models import Document, DocumentChunk
from ..repositories import DocumentChunkRepository, DocumentRepository


class DocumentService:
    def __init__(
        self,
        settings: Settings,
        repo: DocumentRepository,
        chunk_repo: DocumentChunkRepository,
        logger: AppLogger,
    ):
        self.repo = repo
        self.chunk_repo = chunk_repo
        self.chunk_size = settings.chunk_size
        self.logger = logger.get_logger(__name__)

    async def upload_document(self, name: str, content: str) -> Document:
        """
        Store a new document and its chunks.

        The chunks are derived from `content` here and written in the same
        transaction as the document row, so a document never exists without them.
        """
        text_chunks = chunk_document(content, self.chunk_size)

        document = Document(
            name=name,
            content=content,
            word_count=count_words(content),
            chunks=[
                DocumentChunk(chunk_index=idx, content=text)
                for idx, text in enumerate(text_chunks)
            ],
        )
        doc = await self.repo.create(document)

        self.logger.info(
            f"🆕 Stored document {doc.id} ({name}): {doc.word_count} words, "
            f"{len(text_chunks)} chunks"
        )
        return doc

    async def list_documents(self) -> List[Document]:
        return await self.repo.list_all()

    async def get_document(self, document_id: str) -> Optional[Document]:
        return await self.repo.get_by_id(document_id)

    async def delete_document(self, document_id: str) -> bool:
        """Delete a document and all of its chunks. Returns False if it did not exist."""
        deleted = await self.repo.delete(document_id)
        if deleted:
            self.logger.info(f"🗑️ Deleted document {document_id} and its chunks.")
        else:
            self.logger.info(f"📄 Document {document_id} not found, nothing deleted.")
        return deleted

    async def get_document_chunks(self, document_id: str) -> List[DocumentChunk]:
        """Get all chunks for a document, ordered by chunk_index."""
        return await self.chunk_repo.get_by_document_id(document_id)

    async def get_all_chunks(self) -> List[DocumentChunk]:
        """Get all chunks across all documents, for searching."""
        return await self.chunk_repo.list_all()

    async def count_documents(self) -> int:
        return await self.repo.count()

    async def total_word_count(self) -> int:
        return await self.repo.total_word_count()
