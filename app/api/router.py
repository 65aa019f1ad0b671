# app/api/router.py
from fastapi import APIRouter

from app.api.endpoints.convert import router as convert_router
from app.api.endpoints.health import router as health_router


api_router = APIRouter(prefix="/api")
api_router.include_router(convert_router)

# /health queda en la raíz
root_router = APIRouter()
root_router.include_router(health_router)
