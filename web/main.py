"""FastAPI application - geo stats API."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from app.container import container
from settings import GEO_SYNC_ENABLED, LOG_LEVEL
from settings.logging import setup_logging
from web.api import admin, geo
from web.api.errors import NotFoundError, ValidationError


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(level=LOG_LEVEL, to_file=True)
    container.init()
    await container.geo.warm_cache()
    if GEO_SYNC_ENABLED:
        await container.geo_sync.start()
    logger.info("Geo API started")
    try:
        yield
    finally:
        await container.dispose()
        logger.info("Geo API stopped")


def create_app() -> FastAPI:
    app = FastAPI(title="geo-pulse", version="0.1.0", lifespan=lifespan)
    app.include_router(geo.router)
    app.include_router(admin.router)

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError):
        return JSONResponse({"success": False, "error": exc.message}, status_code=400)

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return JSONResponse({"success": False, "error": exc.message}, status_code=404)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
