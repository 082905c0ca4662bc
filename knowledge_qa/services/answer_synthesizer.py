from dataclasses import dataclass
from typing import Callable, Sequence

from knowledge_qa.config import Settings
from knowledge_qa.llm import LLMProvider, classify_llm_error
from knowledge_qa.logger import AppLogger
from knowledge_qa.retrieval import SourceChunk

SYSTEM_PROMPT = (
    "You are a helpful AI assistant that answers questions based on provided documents.\n"
    "Answer using ONLY the information in the provided documents.\n"
    "Always cite which documents you used to answer the question.\n"
    "If you cannot find the answer in the provided documents, say so clearly.\n"
    "Keep answers concise and well-structured."
)

FALLBACK_ANSWER = "Unable to generate answer"


@dataclass(frozen=True)
class AnswerResult:
    answer: str
    sources: Sequence[SourceChunk]


def build_context(chunks: Sequence[SourceChunk]) -> str:
    """Label each chunk with its 1-based rank and owning document, blank line between chunks."""
    return "\n\n".join(
        f"[Source {idx} - Doc: {chunk.document_id}]\n{chunk.content}"
        for idx, chunk in enumerate(chunks, start=1)
    )


def build_user_prompt(question: str, context: str) -> str:
    return (
        f"Based on the following documents:\n\n"
        f"{context}\n\n"
        f"Please answer this question: {question}\n\n"
        f"Important: Cite which specific document(s) you used to answer this."
    )


class AnswerSynthesizer:
    """
    Turns a question and its ranked chunks into an answer from the language model.

    The returned sources are exactly the chunks that were sent as context, in the same
    order. Which of them the model actually relied on is not verified.
    """

    def __init__(
        self,
        settings: Settings,
        logger: AppLogger,
        llm_factory: Callable[[], LLMProvider],
    ):
        self.logger = logger.get_logger(__name__)
        self.llm_factory = llm_factory
        self.max_tokens = settings.llm_max_tokens
        self.model_name = settings.llm_model_name

    async def generate_answer(
        self, question: str, relevant_chunks: Sequence[SourceChunk]
    ) -> AnswerResult:
        """
        Ask the model to answer `question` from `relevant_chunks`.

        Args:
            question (str): The user's question, passed to the model verbatim.
            relevant_chunks (Sequence[SourceChunk]): Context chunks, most relevant first.

        Returns:
            AnswerResult: The answer text (or a fixed fallback when the model returned
                nothing) and `relevant_chunks` unchanged as sources.

        Raises:
            QuotaExceededError, AuthenticationFailedError, MisconfiguredCredentialsError:
                When the failure can be classified.
            Exception: Any other failure, re-raised unchanged.
        """
        user_prompt = build_user_prompt(question, build_context(relevant_chunks))

        try:
            llm = self.llm_factory()
            self.logger.info(
                f"[AnswerSynthesizer] Asking {llm.provider_name} ({self.model_name}) "
                f"with {len(relevant_chunks)} sources..."
            )
            text = await llm.complete(SYSTEM_PROMPT, user_prompt, self.max_tokens)
        except Exception as e:
            classified = classify_llm_error(e)
            if classified is None:
                self.logger.error(f"❌ LLM call failed: {e}")
                raise
            self.logger.error(f"❌ LLM call failed ({type(classified).__name__}): {e}")
            if classified is e:
                raise
            raise classified from e

        return AnswerResult(answer=text or FALLBACK_ANSWER, sources=relevant_chunks)
