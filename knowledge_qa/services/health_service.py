from datetime import datetime, timezone
from typing import Callable, Literal, Tuple

from pydantic import BaseModel, Field

from knowledge_qa.config import CREDENTIAL_ENV_VAR, Settings
from knowledge_qa.database import Database
from knowledge_qa.database.service import DocumentService
from knowledge_qa.exceptions import StorageError
from knowledge_qa.llm import LLMProvider
from knowledge_qa.logger import AppLogger

PLACEHOLDER_API_KEYS = {"your-key-here", "your-api-key", "changeme", "replace-me", "xxx"}


class ServiceStatus(BaseModel):
    database: str = "unknown"
    llm: str = "unknown"
    app: str = "running"


class HealthStats(BaseModel):
    documents_count: int = 0
    total_words: int = 0


class HealthReport(BaseModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: Literal["healthy", "degraded", "unhealthy"] = "healthy"
    services: ServiceStatus = Field(default_factory=ServiceStatus)
    stats: HealthStats = Field(default_factory=HealthStats)

    @property
    def http_status(self) -> int:
        return 503 if self.services.database == "failed" else 200


class HealthService:
    """
    Aggregates the state of the database and the LLM configuration.

    The LLM check only inspects configuration (key present, not an obvious placeholder,
    client construction succeeds). It never calls the remote service.
    """

    def __init__(
        self,
        settings: Settings,
        logger: AppLogger,
        database: Database,
        document_service: DocumentService,
        llm_factory: Callable[[], LLMProvider],
    ):
        self.settings = settings
        self.logger = logger.get_logger(__name__)
        self.database = database
        self.document_service = document_service
        self.llm_factory = llm_factory

    def check_llm_configuration(self) -> Tuple[bool, str]:
        if self.settings.llm_provider == "dummy":
            return True, "connected"

        api_key = self.settings.llm_api_key
        if not api_key:
            self.logger.warning(f"{CREDENTIAL_ENV_VAR} environment variable not set")
            return False, f"failed - missing {CREDENTIAL_ENV_VAR}"

        if api_key.strip().lower() in PLACEHOLDER_API_KEYS:
            self.logger.warning(f"Invalid {CREDENTIAL_ENV_VAR} - appears to be a placeholder value")
            return False, "failed - invalid credentials"

        try:
            self.llm_factory()
        except Exception as e:
            self.logger.error(f"LLM client construction failed: {e}")
            return False, "failed - invalid credentials"

        return True, "connected"

    async def check(self) -> HealthReport:
        report = HealthReport()

        try:
            if not self.database.is_connected:
                await self.database.connect()
            report.stats.documents_count = await self.document_service.count_documents()
            report.stats.total_words = await self.document_service.total_word_count()
            report.services.database = "connected"
        except StorageError as e:
            self.logger.error(f"Database health check failed: {e}")
            report.services.database = "failed"

        llm_ok, report.services.llm = self.check_llm_configuration()

        failures = [report.services.database == "failed", not llm_ok]
        if all(failures):
            report.status = "unhealthy"
        elif any(failures):
            report.status = "degraded"

        return report
