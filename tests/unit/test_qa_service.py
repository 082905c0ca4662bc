from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest
from knowledge_qa.exceptions import InvalidInputError, QuotaExceededError
from knowledge_qa.retrieval import SourceChunk
from knowledge_qa.services import AnswerResult, QAService, normalize_question
from knowledge_qa.services.qa_service import NO_DOCUMENTS_ANSWER, NO_RELEVANT_ANSWER


def stored_chunk(document_id, chunk_index, content):
    return SimpleNamespace(document_id=document_id, chunk_index=chunk_index, content=content)


@pytest.fixture
def mock_document_service():
    service = Mock()
    service.get_all_chunks = AsyncMock(return_value=[])
    return service


@pytest.fixture
def mock_synthesizer():
    synthesizer = Mock()

    async def _generate(question, chunks):
        return AnswerResult(answer="synthesized", sources=chunks)

    synthesizer.generate_answer = AsyncMock(side_effect=_generate)
    return synthesizer


@pytest.fixture
def qa_service(test_settings, mock_logger, mock_document_service, mock_synthesizer):
    return QAService(
        settings=test_settings,
        logger=mock_logger,
        document_service=mock_document_service,
        synthesizer=mock_synthesizer,
    )


# ============================================================================
# ANSWER_QUESTION TESTS
# ============================================================================


@pytest.mark.asyncio
async def test_no_documents_returns_canned_answer(qa_service, mock_synthesizer):
    result = await qa_service.answer_question("anything?")

    assert result.answer == NO_DOCUMENTS_ANSWER
    assert result.sources == []
    mock_synthesizer.generate_answer.assert_not_called()


@pytest.mark.asyncio
async def test_no_overlap_returns_canned_answer(
    qa_service, mock_document_service, mock_synthesizer
):
    mock_document_service.get_all_chunks.return_value = [
        stored_chunk("d1", 0, "apples and pears"),
    ]

    result = await qa_service.answer_question("zebra")

    assert result.answer == NO_RELEVANT_ANSWER
    assert result.sources == []
    mock_synthesizer.generate_answer.assert_not_called()


@pytest.mark.asyncio
async def test_answer_uses_top_ranked_chunks(qa_service, mock_document_service, mock_synthesizer):
    """
    Test the successful path.

    Verifies that:
    - At most retrieval_top_k chunks are sent, best match first
    - Ties keep storage order ("do" also matches inside "dog")
    - Zero-score chunks are never sent
    - The synthesizer answer and sources are returned
    """
    # 1. ARRANGE
    mock_document_service.get_all_chunks.return_value = [
        stored_chunk("d1", 0, "the dog ran in the park"),
        stored_chunk("d1", 1, "nothing here matches"),
        stored_chunk("d2", 0, "the cat sat on the mat, the cat slept"),
        stored_chunk("d3", 0, "a cat"),
    ]

    # 2. ACT
    result = await qa_service.answer_question("what did the cat do")

    # 3. ASSERT
    question, chunks = mock_synthesizer.generate_answer.call_args.args
    assert question == "what did the cat do"
    assert all(isinstance(c, SourceChunk) for c in chunks)
    assert [(c.document_id, c.chunk_index) for c in chunks] == [("d1", 0), ("d2", 0), ("d3", 0)]
    assert result.answer == "synthesized"
    assert result.sources == chunks


@pytest.mark.asyncio
async def test_zero_score_chunks_are_dropped_from_top_k(
    qa_service, mock_document_service, mock_synthesizer
):
    mock_document_service.get_all_chunks.return_value = [
        stored_chunk("d1", 0, "unrelated"),
        stored_chunk("d2", 0, "the cat"),
        stored_chunk("d3", 0, "also unrelated"),
    ]

    await qa_service.answer_question("cat")

    _, chunks = mock_synthesizer.generate_answer.call_args.args
    assert [c.document_id for c in chunks] == ["d2"]


@pytest.mark.asyncio
async def test_synthesizer_errors_propagate(qa_service, mock_document_service, mock_synthesizer):
    mock_document_service.get_all_chunks.return_value = [stored_chunk("d1", 0, "cat")]
    mock_synthesizer.generate_answer.side_effect = QuotaExceededError()

    with pytest.raises(QuotaExceededError):
        await qa_service.answer_question("cat")


# ============================================================================
# NORMALIZE_QUESTION TESTS
# ============================================================================


def test_normalize_question_trims():
    assert normalize_question("  what is it?  ", 2000) == "what is it?"


@pytest.mark.parametrize("value", [None, 42, ["q"], {"q": 1}])
def test_normalize_question_rejects_non_strings(value):
    with pytest.raises(InvalidInputError, match="must be a string"):
        normalize_question(value, 2000)


@pytest.mark.parametrize("value", ["", "   ", "\n\t"])
def test_normalize_question_rejects_blank(value):
    with pytest.raises(InvalidInputError, match="cannot be empty"):
        normalize_question(value, 2000)


def test_normalize_question_length_limit():
    assert normalize_question("x" * 2000, 2000) == "x" * 2000

    with pytest.raises(InvalidInputError, match="too long") as exc_info:
        normalize_question("x" * 2001, 2000)

    assert exc_info.value.details == {"field": "question"}
