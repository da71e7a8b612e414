import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog.core.config import settings
from catalog.core.logging import setup_logging

setup_logging(settings.log_level)

from catalog.api.middleware.cors import setup_cors
from catalog.api.middleware.request_id import RequestIdMiddleware
from catalog.api.responses import register_exception_handlers
from catalog.api.routes import brands, health
from catalog.api.routes.health import VERSION
from catalog.core.database import dispose_engine

logger = logging.getLogger(__name__)

try:
    settings.validate_secrets()
except ValueError as e:
    logger.critical("Secret validation failed: %s", e)
    raise SystemExit(f"FATAL: {e}") from e


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Brand catalog API starting")
    yield
    await dispose_engine()


app = FastAPI(
    title="Brand Catalog API",
    version=VERSION,
    debug=settings.debug,
    lifespan=lifespan,
)

register_exception_handlers(app)
setup_cors(app)
app.add_middleware(RequestIdMiddleware)

app.include_router(health.router, prefix="/api")
app.include_router(brands.router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root():
    return {
        "message": "Brand Catalog API",
        "version": VERSION,
        "status": "running",
        "endpoints": {
            "health": "/api/health",
            "brands": "/api/brands",
        },
    }
