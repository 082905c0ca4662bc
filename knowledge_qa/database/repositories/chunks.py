from typing import List

from sqlalchemy import select

from ..connection import Database
from ..models import DocumentChunk


class DocumentChunkRepository:
    def __init__(self, db: Database):
        self.db = db

    async def get_by_document_id(self, document_id: str) -> List[DocumentChunk]:
        """Get all chunks for a document."""
        async with self.db.get_session() as session:
            result = await session.execute(
                select(DocumentChunk)
                .where(DocumentChunk.document_id == document_id)
                .order_by(DocumentChunk.chunk_index)
            )
            return list(result.scalars().all())

    async def list_all(self) -> List[DocumentChunk]:
        """Get every chunk, grouped by document and in chunk order."""
        async with self.db.get_session() as session:
            result = await session.execute(
                select(DocumentChunk).order_by(
                    DocumentChunk.document_id, DocumentChunk.chunk_index
                )
            )
            return list(result.scalars().all())
