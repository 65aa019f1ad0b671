# app/api/deps.py
from fastapi import Request

from app.domain.services.conversion_service import ConversionService


def get_conversion_service(request: Request) -> ConversionService:
    """Dependencia FastAPI: servicio compartido creado en create_app()."""
    return request.app.state.conversion_service
