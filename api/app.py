"""FastAPI application comparing repository-style and session-style data access."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from api.core.config import get_settings
from api.core.logs import setup_logging
from api.db.create_tables import create_all
from api.routers import entities as entities_router
from api.services.bulk_loader import BulkLoader
from api.services.lookup_service import LookupService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    settings = get_settings()
    if settings.auto_create_schema:
        try:
            create_all()
        except SQLAlchemyError:
            logger.exception("schema_create_failed")
            raise
    logger.info("startup app_env=%s batch_size=%s", settings.app_env, settings.bulk_batch_size)
    yield


setup_logging()

app = FastAPI(title="Entity Access API", lifespan=lifespan)

app.state.lookup_service = LookupService()
app.state.bulk_loader = BulkLoader()

app.include_router(entities_router.router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn."""
    return app
