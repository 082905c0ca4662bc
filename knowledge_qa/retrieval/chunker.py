from typing import List

CHUNK_SIZE = 500  # Words per chunk


def split_words(content: str) -> List[str]:
    """Split on runs of whitespace, dropping empty tokens."""
    return content.split()


def count_words(content: str) -> int:
    return len(split_words(content))


def chunk_document(content: str, chunk_size: int = CHUNK_SIZE) -> List[str]:
    """
    Split document text into consecutive windows of `chunk_size` words.

    Every window but the last holds exactly `chunk_size` words; each window is
    re-joined with single spaces. Never returns an empty list: if no window can
    be formed the original content is returned as the only chunk.

    Args:
        content (str): Full document text.
        chunk_size (int): Words per chunk.

    Returns:
        List[str]: Chunks in document order.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    words = split_words(content)
    chunks = [
        " ".join(words[start : start + chunk_size]) for start in range(0, len(words), chunk_size)
    ]

    return chunks if chunks else [content]
