from typing import Optional

from google.genai import Client
from google.genai.types import GenerateContentConfig, HttpOptions

from ..base import LLMProvider


class GeminiProvider(LLMProvider):
    def __init__(self, base_url: str | None, api_key: str, model: str, timeout: float) -> None:
        self.client = Client(
            api_key=api_key,
            http_options=HttpOptions(
                base_url=base_url,
                timeout=int(timeout * 1000),  # milliseconds
            ),
        ).aio
        self.model = model

    async def complete(
        self, system_prompt: str, user_prompt: str, max_tokens: int
    ) -> Optional[str]:
        response = await self.client.models.generate_content(
            model=self.model,
            contents=user_prompt,
            config=GenerateContentConfig(
                system_instruction=system_prompt,
                max_output_tokens=max_tokens,
            ),
        )

        if not response:
            return None

        return response.text

    @property
    def provider_name(self) -> str:
        return "gemini"
