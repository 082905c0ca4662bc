import uuid

from sqlalchemy import Column, String, Text

from ..base import Base, UTCDateTime
from .documents import utc_now


class Conversation(Base):
    """Question/answer history. Created with the schema; nothing reads or writes it yet."""

    __tablename__ = "conversations"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    sources = Column(Text, nullable=False)  # JSON-encoded source list
    created_at = Column(UTCDateTime, nullable=False, default=utc_now)
