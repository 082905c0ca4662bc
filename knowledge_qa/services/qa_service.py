import time
from dataclasses import dataclass, field
from typing import List

from knowledge_qa.config import Settings
from knowledge_qa.database.service import DocumentService
from knowledge_qa.exceptions import InvalidInputError
from knowledge_qa.logger import AppLogger
from knowledge_qa.retrieval import SourceChunk, rank_chunks

from .answer_synthesizer import AnswerSynthesizer

NO_DOCUMENTS_ANSWER = "No documents are currently uploaded. Please upload some documents first."
NO_RELEVANT_ANSWER = (
    "I could not find relevant information in the uploaded documents to answer your question."
)


@dataclass
class QAResult:
    answer: str
    sources: List[SourceChunk] = field(default_factory=list)


def normalize_question(question: object, max_length: int) -> str:
    """Trim the question and check it is a non-empty string of at most `max_length` characters."""
    if not isinstance(question, str):
        raise InvalidInputError("Question is required and must be a string", field="question")

    trimmed = question.strip()
    if not trimmed:
        raise InvalidInputError("Question cannot be empty", field="question")

    if len(trimmed) > max_length:
        raise InvalidInputError(
            f"Question is too long (max {max_length} characters)", field="question"
        )

    return trimmed


class QAService:
    def __init__(
        self,
        settings: Settings,
        logger: AppLogger,
        document_service: DocumentService,
        synthesizer: AnswerSynthesizer,
    ):
        self.logger = logger.get_logger(__name__)
        self.document_service = document_service
        self.synthesizer = synthesizer
        self.top_k = settings.retrieval_top_k

    async def answer_question(self, question: str) -> QAResult:
        start_time = time.time()
        self.logger.info(f"[QAService] Question: {question}")

        # 1) Load every chunk
        chunks = [SourceChunk.from_model(c) for c in await self.document_service.get_all_chunks()]
        if not chunks:
            self.logger.info("[QAService] No documents uploaded.")
            return QAResult(answer=NO_DOCUMENTS_ANSWER)

        # 2) Rank by keyword overlap, keep the top K that share at least one word
        ranked = rank_chunks(question, chunks)[: self.top_k]
        relevant = [item.chunk for item in ranked if item.score > 0]
        if not relevant:
            self.logger.info(f"[QAService] No relevant chunks among {len(chunks)}.")
            return QAResult(answer=NO_RELEVANT_ANSWER)

        self.logger.info(
            f"[QAService] Selected {len(relevant)} of {len(chunks)} chunks "
            f"(scores: {[item.score for item in ranked if item.score > 0]})"
        )

        # 3) Synthesize
        result = await self.synthesizer.generate_answer(question, relevant)

        processing_time = (time.time() - start_time) * 1000
        self.logger.info(f"[QAService] ✅ Answered in {processing_time:.0f} ms")

        return QAResult(answer=result.answer, sources=list(result.sources))
