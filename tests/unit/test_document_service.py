from datetime import timedelta

import pytest
from knowledge_qa.database.repositories import DocumentChunkRepository, DocumentRepository
from knowledge_qa.database.service import DocumentService

# ============================================================================
# UPLOAD TESTS
# ============================================================================


@pytest.mark.asyncio
async def test_upload_document_stores_document_and_chunks(document_service):
    """
    Test uploading a short document.

    Verifies that:
    - An id and upload timestamp are assigned
    - word_count is the whitespace-separated word count
    - A single chunk holding the whole text is stored
    """
    # 1. ARRANGE
    content = "The cat sat on the mat. The dog ran in the park."

    # 2. ACT
    doc = await document_service.upload_document("pets.txt", content)

    # 3. ASSERT
    assert doc.id
    assert doc.uploaded_at is not None
    assert doc.name == "pets.txt"
    assert doc.word_count == 12

    chunks = await document_service.get_document_chunks(doc.id)
    assert len(chunks) == 1
    assert chunks[0].chunk_index == 0
    assert chunks[0].content == content


@pytest.mark.asyncio
async def test_upload_long_document_is_split_in_order(document_service):
    content = " ".join(f"w{i}" for i in range(1200))

    doc = await document_service.upload_document("long.txt", content)
    chunks = await document_service.get_document_chunks(doc.id)

    assert doc.word_count == 1200
    assert [c.chunk_index for c in chunks] == [0, 1, 2]
    assert [len(c.content.split()) for c in chunks] == [500, 500, 200]
    assert " ".join(c.content for c in chunks) == content


@pytest.mark.asyncio
async def test_upload_uses_configured_chunk_size(database, settings_factory, mock_logger):
    service = DocumentService(
        settings=settings_factory(chunk_size=2),
        repo=DocumentRepository(database),
        chunk_repo=DocumentChunkRepository(database),
        logger=mock_logger,
    )

    doc = await service.upload_document("small.txt", "a b c d e")
    chunks = await service.get_document_chunks(doc.id)

    assert [c.content for c in chunks] == ["a b", "c d", "e"]


# ============================================================================
# READ TESTS
# ============================================================================


@pytest.mark.asyncio
async def test_list_documents_newest_first(document_service):
    first = await document_service.upload_document("first.txt", "alpha")
    second = await document_service.upload_document("second.txt", "beta")

    documents = await document_service.list_documents()

    assert [d.id for d in documents] == [second.id, first.id]


@pytest.mark.asyncio
async def test_uploaded_at_keeps_utc_after_reload(document_service):
    """
    Verifies that:
    - Timestamps read back from storage are timezone-aware UTC
    - They equal the value returned by the upload
    """
    doc = await document_service.upload_document("a.txt", "hello world")

    listed = (await document_service.list_documents())[0]
    fetched = await document_service.get_document(doc.id)

    assert listed.uploaded_at.tzinfo is not None
    assert listed.uploaded_at.utcoffset() == timedelta(0)
    assert listed.uploaded_at == doc.uploaded_at
    assert fetched.uploaded_at == doc.uploaded_at


@pytest.mark.asyncio
async def test_get_document(document_service):
    doc = await document_service.upload_document("a.txt", "hello world")

    found = await document_service.get_document(doc.id)

    assert found is not None
    assert found.content == "hello world"
    assert await document_service.get_document("missing") is None


@pytest.mark.asyncio
async def test_get_all_chunks_grouped_by_document(document_service):
    doc_a = await document_service.upload_document("a.txt", "a1 a2 a3")
    doc_b = await document_service.upload_document("b.txt", "b1")

    chunks = await document_service.get_all_chunks()

    assert sorted({c.document_id for c in chunks}) == sorted([doc_a.id, doc_b.id])
    keys = [(c.document_id, c.chunk_index) for c in chunks]
    assert keys == sorted(keys)


@pytest.mark.asyncio
async def test_counts_on_empty_store(document_service):
    assert await document_service.count_documents() == 0
    assert await document_service.total_word_count() == 0
    assert await document_service.get_all_chunks() == []


@pytest.mark.asyncio
async def test_counts(document_service):
    await document_service.upload_document("a.txt", "one two three")
    await document_service.upload_document("b.txt", "four five")

    assert await document_service.count_documents() == 2
    assert await document_service.total_word_count() == 5


# ============================================================================
# DELETE TESTS
# ============================================================================


@pytest.mark.asyncio
async def test_delete_document_removes_chunks(document_service):
    """
    Verifies that:
    - The document and all of its chunks are gone
    - Other documents are untouched
    - A second delete reports that nothing was removed
    """
    # 1. ARRANGE
    doomed = await document_service.upload_document("doomed.txt", " ".join(["word"] * 1100))
    kept = await document_service.upload_document("kept.txt", "stays here")

    # 2. ACT
    deleted = await document_service.delete_document(doomed.id)

    # 3. ASSERT
    assert deleted is True
    assert await document_service.get_document(doomed.id) is None
    assert await document_service.get_document_chunks(doomed.id) == []

    remaining = await document_service.get_all_chunks()
    assert [c.document_id for c in remaining] == [kept.id]

    assert await document_service.delete_document(doomed.id) is False


@pytest.mark.asyncio
async def test_delete_unknown_document(document_service):
    assert await document_service.delete_document("missing") is False
