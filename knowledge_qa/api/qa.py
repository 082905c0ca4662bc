"""
Question answering endpoint.

Routes: POST /api/qa
"""

import logging

from fastapi import APIRouter, Depends

from knowledge_qa.config import Settings
from knowledge_qa.exceptions import KnowledgeQAError, LLMServiceError
from knowledge_qa.services import QAService, normalize_question

from .deps import get_qa_service, get_settings
from .schemas import AnswerResponse, ErrorResponse, QuestionRequest, SourceInfo

router = APIRouter(
    prefix="/api/qa",
    tags=["qa"],
    responses={code: {"model": ErrorResponse} for code in (400, 401, 429, 500)},
)

logger = logging.getLogger(__name__)


@router.post("", response_model=AnswerResponse)
async def ask_question(
    request: QuestionRequest,
    settings: Settings = Depends(get_settings),
    qa_service: QAService = Depends(get_qa_service),
):
    """Answer a question from the uploaded documents, citing the chunks used as context."""
    question = normalize_question(request.question, settings.max_question_length)

    try:
        result = await qa_service.answer_question(question)
    except KnowledgeQAError:
        raise
    except Exception as e:
        logger.exception("❌ Answer generation failed")
        raise LLMServiceError("Failed to generate answer", {"reason": str(e)}) from e

    return AnswerResponse(
        answer=result.answer,
        sources=[
            SourceInfo.from_chunk(source, settings.source_preview_length)
            for source in result.sources
        ],
    )
