from .anthropic_provider import AnthropicProvider
from .dummy_provider import DummyProvider
from .gemini_provider import GeminiProvider
from .openai_provider import OpenAIProvider

__all__ = [
    "AnthropicProvider",
    "DummyProvider",
    "GeminiProvider",
    "OpenAIProvider",
]
