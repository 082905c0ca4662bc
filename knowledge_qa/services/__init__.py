from .answer_synthesizer import AnswerResult, AnswerSynthesizer
from .health_service import HealthReport, HealthService
from .qa_service import QAResult, QAService, normalize_question

__all__ = [
    "AnswerResult",
    "AnswerSynthesizer",
    "HealthReport",
    "HealthService",
    "QAResult",
    "QAService",
    "normalize_question",
]
