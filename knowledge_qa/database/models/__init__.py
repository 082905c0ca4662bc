from .chunks import DocumentChunk
from .conversations import Conversation
from .documents import Document

__all__ = ["Conversation", "Document", "DocumentChunk"]
