from dataclasses import dataclass
from typing import Generic, TypeVar


@dataclass(frozen=True)
class SourceChunk:
    """A chunk detached from its database session, used as model context and as a source."""

    document_id: str
    chunk_index: int
    content: str

    @classmethod
    def from_model(cls, chunk) -> "SourceChunk":
        return cls(
            document_id=str(chunk.document_id),
            chunk_index=int(chunk.chunk_index),
            content=str(chunk.content),
        )


T = TypeVar("T")


@dataclass(frozen=True)
class ScoredChunk(Generic[T]):
    chunk: T
    score: int
