import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from ..base import Base, UTCDateTime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Document(Base):
    __tablename__ = "documents"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String, nullable=False)
    content = Column(Text, nullable=False)
    uploaded_at = Column(UTCDateTime, nullable=False, default=utc_now, index=True)
    word_count = Column(Integer, nullable=False, default=0)

    # Relationship
    chunks = relationship(
        "DocumentChunk",
        back_populates="document",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="DocumentChunk.chunk_index",
    )
