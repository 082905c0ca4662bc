from typing import List, Optional

from sqlalchemy import delete, func, select

from ..connection import Database
from ..models import Document, DocumentChunk


class DocumentRepository:
    def __init__(self, db: Database):
        self.db = db

    async def create(self, document: Document) -> Document:
        """Insert a document together with the chunks attached to it, in one transaction."""
        async with self.db.get_session() as session:
            session.add(document)
            await session.flush()
            return document

    async def get_by_id(self, document_id: str) -> Optional[Document]:
        async with self.db.get_session() as session:
            result = await session.execute(select(Document).where(Document.id == document_id))
            return result.scalars().first()

    async def list_all(self) -> List[Document]:
        async with self.db.get_session() as session:
            stmt = select(Document).order_by(Document.uploaded_at.desc())
            result = await session.execute(stmt)
            return list(result.scalars().all())

    async def delete(self, document_id: str) -> bool:
        """Delete a document and its chunks. Returns False if the document did not exist."""
        async with self.db.get_session() as session:
            await session.execute(
                delete(DocumentChunk).where(DocumentChunk.document_id == document_id)
            )
            result = await session.execute(delete(Document).where(Document.id == document_id))
            return (result.rowcount or 0) > 0

    async def count(self) -> int:
        async with self.db.get_session() as session:
            result = await session.execute(select(func.count()).select_from(Document))
            return result.scalar() or 0

    async def total_word_count(self) -> int:
        async with self.db.get_session() as session:
            result = await session.execute(select(func.sum(Document.word_count)))
            return result.scalar() or 0
