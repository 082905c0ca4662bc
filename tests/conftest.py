from unittest.mock import Mock

import pytest
import pytest_asyncio

from knowledge_qa.config import Settings
from knowledge_qa.database import Database
from knowledge_qa.database.repositories import DocumentChunkRepository, DocumentRepository
from knowledge_qa.database.service import DocumentService


def make_settings(tmp_path, **overrides) -> Settings:
    """Settings isolated from the developer's environment and .env file."""
    values = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'knowledge.db'}",
        "llm_provider": "dummy",
        "llm_api_key": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def mock_logger():
    logger = Mock()
    logger.get_logger.return_value = Mock()
    return logger


@pytest.fixture
def settings_factory(tmp_path):
    """Build Settings with overrides, pointing at a fresh SQLite file under tmp_path."""

    def _factory(**overrides) -> Settings:
        return make_settings(tmp_path, **overrides)

    return _factory


@pytest.fixture
def test_settings(settings_factory) -> Settings:
    return settings_factory()


@pytest_asyncio.fixture
async def database(test_settings, mock_logger):
    db = Database(settings=test_settings, logger=mock_logger)
    await db.connect()
    yield db
    await db.disconnect()


@pytest.fixture
def document_service(database, test_settings, mock_logger) -> DocumentService:
    return DocumentService(
        settings=test_settings,
        repo=DocumentRepository(database),
        chunk_repo=DocumentChunkRepository(database),
        logger=mock_logger,
    )
