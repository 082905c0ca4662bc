from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPPORTED_LLM_PROVIDERS = {"openai", "gemini", "anthropic", "dummy"}

# Environment variable holding the LLM credential
CREDENTIAL_ENV_VAR = "LLM_API_KEY"


class Settings(BaseSettings):
    """Application configuration settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = Field(default="development", pattern="^(development|production)$")
    log_level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    database_url: str = Field(default="sqlite+aiosqlite:///./data/knowledge.db")

    llm_provider: str = Field(default="openai")
    llm_base_url: Optional[str] = Field(default=None)
    llm_api_key: Optional[str] = Field(default=None)
    llm_model_name: str = Field(default="gpt-4o-mini")
    llm_timeout: float = Field(default=60.0)
    llm_max_tokens: int = Field(default=1024)

    chunk_size: int = Field(default=500, gt=0)
    retrieval_top_k: int = Field(default=3, gt=0)

    maximum_file_size: int = Field(default=10 * 1024 * 1024)  # 10 MB
    max_question_length: int = Field(default=2000)
    source_preview_length: int = Field(default=200)

    @model_validator(mode="after")
    def normalize_provider(self) -> "Settings":
        """Normalize the LLM provider name.

        A missing API key is not an error here: the service still starts so the
        health endpoint can report the misconfiguration.
        """
        v = self.llm_provider.lower()
        if v not in SUPPORTED_LLM_PROVIDERS:
            raise ValueError(f"Unsupported LLM_PROVIDER: {self.llm_provider}")

        self.llm_provider = v
        if self.llm_api_key is not None and not self.llm_api_key.strip():
            self.llm_api_key = None
        return self


settings = Settings()
