from knowledge_qa.config import CREDENTIAL_ENV_VAR, Settings
from knowledge_qa.exceptions import MisconfiguredCredentialsError
from knowledge_qa.logger import AppLogger

from .base import LLMProvider
from .provider import (
    AnthropicProvider,
    DummyProvider,
    GeminiProvider,
    OpenAIProvider,
)


def get_llm_provider(settings: Settings, logger: AppLogger) -> LLMProvider:
    """
    Factory function to retrieve the LLM provider selected in the application settings.

    Args:
        settings (Settings): Provider name, API key, base URL, model name and timeout.
        logger (AppLogger): The application logger instance.

    Returns:
        LLMProvider: An instance of the selected provider class. Unknown provider names
            fall back to DummyProvider.

    Raises:
        MisconfiguredCredentialsError: If a remote provider is selected but LLM_API_KEY
            is not set.
    """

    _logger = logger.get_logger(__name__)

    provider = settings.llm_provider.lower()
    _logger.info(f"🧠 [Factory] Selected LLM Provider: {provider}")

    # Map provider names to their classes
    provider_map = {
        "openai": OpenAIProvider,
        "gemini": GeminiProvider,
        "anthropic": AnthropicProvider,
    }

    if provider in provider_map:
        if not settings.llm_api_key:
            _logger.error(f"❌ [Factory] {provider} selected but {CREDENTIAL_ENV_VAR} is missing")
            raise MisconfiguredCredentialsError(CREDENTIAL_ENV_VAR)

        return provider_map[provider](
            base_url=settings.llm_base_url,
            api_key=settings.llm_api_key,
            model=settings.llm_model_name,
            timeout=settings.llm_timeout,
        )

    return DummyProvider()
