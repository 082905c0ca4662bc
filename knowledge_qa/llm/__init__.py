from .base import LLMProvider
from .errors import classify_llm_error
from .factory import get_llm_provider

__all__ = ["LLMProvider", "classify_llm_error", "get_llm_provider"]
