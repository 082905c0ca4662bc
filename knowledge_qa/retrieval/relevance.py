"""
Keyword-overlap relevance scoring.

A chunk's score is the number of question words (lower-cased, split on whitespace,
duplicates kept) that appear anywhere inside the lower-cased chunk text. Matching is
plain substring containment, so "cat" also matches "catalog".
"""

from typing import List, Sequence, TypeVar

from .types import ScoredChunk

DEFAULT_TOP_K = 3

ChunkT = TypeVar("ChunkT")


def query_words(question: str) -> List[str]:
    return question.lower().split()


def score_chunk(words: Sequence[str], content: str) -> int:
    content_lower = content.lower()
    return sum(1 for word in words if word in content_lower)


def rank_chunks(question: str, all_chunks: Sequence[ChunkT]) -> List[ScoredChunk[ChunkT]]:
    """
    Score every chunk and sort by score, highest first.

    The sort is stable: chunks with equal scores keep the order they were given in
    (for chunks loaded from storage that is document id, then chunk index).
    """
    words = query_words(question)
    scored = [
        ScoredChunk(chunk=chunk, score=score_chunk(words, chunk.content)) for chunk in all_chunks
    ]
    return sorted(scored, key=lambda item: item.score, reverse=True)


def find_relevant_chunks(
    question: str, all_chunks: Sequence[ChunkT], top_k: int = DEFAULT_TOP_K
) -> List[ChunkT]:
    """
    Return at most `top_k` chunks, best match first.

    Zero-score chunks are not filtered out; callers that need "no relevant
    information" detection should use `rank_chunks` and drop zero scores.
    """
    return [item.chunk for item in rank_chunks(question, all_chunks)[: max(top_k, 0)]]
