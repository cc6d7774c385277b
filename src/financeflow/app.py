from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from financeflow.api.routes import categorize, health, transactions, whatsapp
from financeflow.core import settings
from financeflow.logger import get_logger, setup_logging
from financeflow.manager import CategorizerService

logger = get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing services...")
        settings.log_environment()

        app.state.service = CategorizerService()

        logger.info("Services initialized.")
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="Finance Flow", lifespan=lifespan)

    app.include_router(health.router)
    app.include_router(categorize.router)
    app.include_router(transactions.router)
    app.include_router(whatsapp.router)

    return app


app = create_app()
