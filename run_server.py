#!/usr/bin/env python3
import logging
import os

import uvicorn

from app.core.config import settings
from app.core.logging import setup_logging


setup_logging()
logger = logging.getLogger("run_server")


def get_ssl_params() -> dict:
    """TLS opcional: solo si ambos archivos configurados existen."""
    key, cert = settings.SSL_KEYFILE, settings.SSL_CERTFILE
    if not (key and cert and os.path.isfile(key) and os.path.isfile(cert)):
        logger.warning(f"{settings.PROJECT_NAME}: iniciando en HTTP (sin certificados SSL).")
        return {}
    logger.info(f"{settings.PROJECT_NAME}: usando certificados SSL {cert} para HTTPS.")
    return {"ssl_keyfile": key, "ssl_certfile": cert}


def main() -> None:
    params = get_ssl_params()
    protocolo = "https" if params else "http"
    logger.info(f"FX Server en {protocolo}://{settings.HOST}:{settings.PORT}")

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=not settings.is_production,
        log_level=settings.LOG_LEVEL.lower(),
        **params,
    )


if __name__ == "__main__":
    main()
