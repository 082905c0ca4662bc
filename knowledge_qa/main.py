import uvicorn

from knowledge_qa.api import create_app
from knowledge_qa.containers import Container


def serve():
    # 1. Create DI Container
    container = Container()

    # 2. Resolve settings and logging
    settings = container.config()

    app_logger = container.app_logger()
    app_logger.setup()

    logger = app_logger.get_logger(__name__)

    # 3. Build the HTTP application; the database connects in its lifespan
    app = create_app(container)

    logger.info("🚀 Knowledge Q&A Service starting...")
    logger.info(f"   -> Active LLM: {settings.llm_provider} ({settings.llm_model_name})")
    logger.info(f"   -> Database: {settings.database_url}")

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    try:
        serve()
    except KeyboardInterrupt:
        pass  # Graceful exit on Ctrl+C
