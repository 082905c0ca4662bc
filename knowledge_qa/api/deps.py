from fastapi import Depends, Request

from knowledge_qa.config import Settings
from knowledge_qa.containers import Container
from knowledge_qa.database import Database
from knowledge_qa.database.service import DocumentService
from knowledge_qa.services import HealthService, QAService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_settings(container: Container = Depends(get_container)) -> Settings:
    return container.config()


async def get_database(container: Container = Depends(get_container)) -> Database:
    """Resolve the shared database, connecting on first use if startup could not."""
    database = container.database()
    if not database.is_connected:
        await database.connect()
    return database


def get_document_service(
    container: Container = Depends(get_container),
    _: Database = Depends(get_database),
) -> DocumentService:
    return container.document_service()


def get_qa_service(
    container: Container = Depends(get_container),
    _: Database = Depends(get_database),
) -> QAService:
    return container.qa_service()


def get_health_service(container: Container = Depends(get_container)) -> HealthService:
    return container.health_service()
