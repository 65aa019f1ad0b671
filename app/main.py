# app/main.py
import logging
import os
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.api.router import api_router, root_router
from app.core.config import settings
from app.core.errors import ConversionError
from app.core.logging import setup_logging
from app.domain.services.conversion_service import ConversionService
from app.domain.services.market_commentary import MarketCommentaryProvider
from app.infra.cache.rate_cache import RateCache
from app.infra.clients.frankfurter import FrankfurterClient

logger = logging.getLogger(__name__)


def build_conversion_service() -> ConversionService:
    return ConversionService(
        rate_provider=FrankfurterClient(),
        commentary=MarketCommentaryProvider(),
        cache=RateCache(ttl_seconds=settings.RATE_CACHE_TTL_SECONDS),
    )


def create_app(conversion_service: Optional[ConversionService] = None) -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
    )
    app.state.started_at = time.monotonic()
    app.state.conversion_service = conversion_service or build_conversion_service()

    # CORS: origen fijo en producción, abierto en desarrollo
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ConversionError, _conversion_error_handler)

    # Routers
    app.include_router(api_router)
    app.include_router(root_router)

    @app.on_event("startup")
    async def on_startup() -> None:
        logger.info(f"🚀 {settings.PROJECT_NAME} escuchando en puerto {settings.PORT}")
        logger.info(f"Environment: {settings.ENVIRONMENT}")
        if not settings.GEMINI_API_KEY:
            logger.warning("GEMINI_API_KEY no configurada; se usará el análisis interno.")

    # Frontend estático (después de los routers para no taparlos)
    if os.path.isdir(settings.STATIC_DIR):
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

    return app


def _conversion_error_handler(request: Request, exc: ConversionError):
    if exc.status_code >= 500:
        logger.error(f"❌ Conversion Error: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


app = create_app()
