from typing import Optional

from anthropic import AsyncAnthropic

from ..base import LLMProvider


class AnthropicProvider(LLMProvider):
    def __init__(self, base_url: str | None, api_key: str, model: str, timeout: float) -> None:
        self.client = AsyncAnthropic(
            base_url=base_url, api_key=api_key, timeout=timeout, max_retries=0
        )
        self.model = model

    async def complete(
        self, system_prompt: str, user_prompt: str, max_tokens: int
    ) -> Optional[str]:
        response = await self.client.messages.create(
            model=self.model,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
            max_tokens=max_tokens,
        )

        if not response or not response.content:
            return None

        text = "".join(block.text for block in response.content if block.type == "text")
        return text or None

    @property
    def provider_name(self) -> str:
        return "anthropic"
