from .chunker import CHUNK_SIZE, chunk_document, count_words
from .relevance import DEFAULT_TOP_K, find_relevant_chunks, rank_chunks, score_chunk
from .types import ScoredChunk, SourceChunk

__all__ = [
    "CHUNK_SIZE",
    "DEFAULT_TOP_K",
    "ScoredChunk",
    "SourceChunk",
    "chunk_document",
    "count_words",
    "find_relevant_chunks",
    "rank_chunks",
    "score_chunk",
]
