from unittest.mock import patch

import pytest
from dependency_injector import providers
from knowledge_qa.containers import Container
from knowledge_qa.database import Database
from knowledge_qa.database.service import DocumentService
from knowledge_qa.llm.provider import DummyProvider
from knowledge_qa.services import AnswerSynthesizer, HealthService, QAService


@pytest.fixture
def container(test_settings):
    container = Container()
    container.config.override(providers.Object(test_settings))
    return container


def test_container_provider_types(container):
    """Shared state is singleton, request-scoped services are factories."""
    assert isinstance(container.database, providers.Singleton)
    assert isinstance(container.llm_client, providers.Singleton)
    assert isinstance(container.document_service, providers.Factory)
    assert isinstance(container.qa_service, providers.Factory)
    assert isinstance(container.health_service, providers.Factory)


def test_container_database_is_shared(container, test_settings):
    database = container.database()

    assert isinstance(database, Database)
    assert container.database() is database
    assert database.db_url == test_settings.database_url


def test_container_builds_services(container):
    assert isinstance(container.document_service(), DocumentService)
    assert isinstance(container.answer_synthesizer(), AnswerSynthesizer)
    assert isinstance(container.qa_service(), QAService)
    assert isinstance(container.health_service(), HealthService)


def test_container_llm_client_is_lazy_and_shared(container):
    synthesizer = container.answer_synthesizer()

    llm = synthesizer.llm_factory()

    assert isinstance(llm, DummyProvider)
    assert synthesizer.llm_factory() is llm
    assert container.llm_client() is llm


@patch("knowledge_qa.llm.provider.openai_provider.AsyncOpenAI")
def test_container_llm_provider(mock_openai, settings_factory):
    container = Container()
    container.config.override(
        providers.Object(settings_factory(llm_provider="openai", llm_api_key="test-key"))
    )

    llm = container.llm_client()

    assert llm.provider_name == "openai"
    mock_openai.assert_called_once()
