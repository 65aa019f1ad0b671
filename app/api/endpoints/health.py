# app/api/endpoints/health.py
import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from app.api.deps import get_conversion_service
from app.domain.services.conversion_service import ConversionService
from app.schemas.health_schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(
    request: Request,
    service: ConversionService = Depends(get_conversion_service),
):
    return HealthResponse(
        status="OK",
        uptime=round(time.monotonic() - request.app.state.started_at, 3),
        timestamp=datetime.now(timezone.utc).isoformat(),
        cacheStats=service.cache.stats(),
    )
