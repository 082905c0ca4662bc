from typing import List, Optional

from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionMessageParam

from ..base import LLMProvider


class OpenAIProvider(LLMProvider):
    """Chat completions against OpenAI or any OpenAI-compatible endpoint (set `base_url`)."""

    def __init__(self, base_url: str | None, api_key: str, model: str, timeout: float) -> None:
        # Single attempt: the client's automatic retries are disabled
        self.client = AsyncOpenAI(
            base_url=base_url, api_key=api_key, timeout=timeout, max_retries=0
        )
        self.model = model

    async def complete(
        self, system_prompt: str, user_prompt: str, max_tokens: int
    ) -> Optional[str]:
        messages: List[ChatCompletionMessageParam] = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

        response = await self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            max_tokens=max_tokens,
        )

        if not response or not response.choices:
            return None

        return response.choices[0].message.content

    @property
    def provider_name(self) -> str:
        return "openai"
