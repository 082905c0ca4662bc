from abc import ABC, abstractmethod
from typing import Optional


class LLMProvider(ABC):
    """
    All LLM providers (OpenAI-compatible, Anthropic, Gemini, Dummy) inherit from this base class.

    Providers make exactly one request per call and let errors from the client library
    propagate; classifying those errors is the caller's job.
    """

    @abstractmethod
    async def complete(
        self, system_prompt: str, user_prompt: str, max_tokens: int
    ) -> Optional[str]:
        """
        Send a system/user message pair and return the text of the first completion.

        Args:
            system_prompt (str): Instructions for the model.
            user_prompt (str): The user turn, including any context.
            max_tokens (int): Upper bound on generated tokens.

        Returns:
            Optional[str]: The completion text, or None when the service returned none.
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """
        Returns the name of the provider as a string.

        Returns:
            str: The name of the provider.
        """
        pass
