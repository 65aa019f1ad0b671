# app/api/endpoints/convert.py
from dataclasses import asdict

from fastapi import APIRouter, Depends

from app.api.deps import get_conversion_service
from app.domain.services.conversion_service import ConversionService
from app.schemas.conversion_schemas import ConversionRequest, ConversionResponse, ErrorResponse

router = APIRouter(tags=["convert"])


@router.post(
    "/convert",
    response_model=ConversionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def convertir(
    data: ConversionRequest,
    service: ConversionService = Depends(get_conversion_service),
):
    # Errores de dominio los traduce el handler registrado en app.main
    resultado = service.convert(data.amount, data.from_currency, data.to_currency)
    return asdict(resultado)
