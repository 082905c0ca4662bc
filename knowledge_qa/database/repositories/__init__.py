from .chunks import DocumentChunkRepository
from .documents import DocumentRepository

__all__ = ["DocumentChunkRepository", "DocumentRepository"]
