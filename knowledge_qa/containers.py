from dependency_injector import containers, providers

from knowledge_qa.config import settings
from knowledge_qa.database import Database
from knowledge_qa.database.repositories import DocumentChunkRepository, DocumentRepository
from knowledge_qa.database.service import DocumentService
from knowledge_qa.llm import get_llm_provider
from knowledge_qa.logger import AppLogger
from knowledge_qa.services import AnswerSynthesizer, HealthService, QAService


class Container(containers.DeclarativeContainer):
    config = providers.Object(settings)

    app_logger = providers.Singleton(AppLogger, settings=config)

    database = providers.Singleton(Database, settings=config, logger=app_logger)

    document_repository = providers.Factory(DocumentRepository, db=database)

    chunk_repository = providers.Factory(DocumentChunkRepository, db=database)

    document_service = providers.Factory(
        DocumentService,
        settings=config,
        repo=document_repository,
        chunk_repo=chunk_repository,
        logger=app_logger,
    )

    # Created on first use and reused; a missing API key raises at that point, not at startup
    llm_client = providers.Singleton(get_llm_provider, settings=config, logger=app_logger)

    answer_synthesizer = providers.Factory(
        AnswerSynthesizer,
        settings=config,
        logger=app_logger,
        llm_factory=llm_client.provider,
    )

    qa_service = providers.Factory(
        QAService,
        settings=config,
        logger=app_logger,
        document_service=document_service,
        synthesizer=answer_synthesizer,
    )

    health_service = providers.Factory(
        HealthService,
        settings=config,
        logger=app_logger,
        database=database,
        document_service=document_service,
        llm_factory=llm_client.provider,
    )
