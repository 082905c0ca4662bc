from typing import Optional

from ..base import LLMProvider


class DummyProvider(LLMProvider):
    async def complete(
        self, system_prompt: str, user_prompt: str, max_tokens: int
    ) -> Optional[str]:
        source_count = user_prompt.count("[Source ")
        return (
            "🤖 [DUMMY AI]: No real model is connected.\n"
            f"📚 Number of sources supplied: {source_count}\n"
            "⚠️ Configure the LLM_PROVIDER setting to get real answers."
        )

    @property
    def provider_name(self) -> str:
        return "dummy"
