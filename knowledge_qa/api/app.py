import contextlib
import logging
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from knowledge_qa.containers import Container
from knowledge_qa.exceptions import InvalidInputError, KnowledgeQAError, StorageError

from . import documents, health, qa
from .schemas import ErrorResponse

logger = logging.getLogger(__name__)


async def handle_app_error(request: Request, exc: KnowledgeQAError) -> JSONResponse:
    if isinstance(exc, StorageError):
        # Storage internals are logged where they happen; callers get a generic failure
        body = ErrorResponse(error="Storage failure", details={"message": exc.message})
    else:
        body = ErrorResponse(error=exc.message, details=exc.details or None)

    if isinstance(exc, InvalidInputError):
        logger.warning(f"Rejected request to {request.url.path}: {exc}")
    elif not isinstance(exc, StorageError):
        logger.error(f"Request to {request.url.path} failed: {exc}")

    return JSONResponse(body.model_dump(), status_code=exc.status_code)


def create_app(container: Container) -> FastAPI:
    """Build the FastAPI application around an already configured DI container."""

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database = container.database()
        try:
            await database.connect()
        except StorageError as e:
            # Requests retry the connection; /api/health reports the failure meanwhile
            logger.error(f"❌ Database unavailable at startup: {e}")
        yield
        await database.disconnect()

    app = FastAPI(
        title="Knowledge Q&A API",
        description="Upload text documents and ask questions about them",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(KnowledgeQAError, handle_app_error)  # type: ignore[arg-type]

    app.include_router(documents.router)
    app.include_router(qa.router)
    app.include_router(health.router)

    return app
