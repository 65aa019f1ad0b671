# app/schemas/health_schemas.py
from pydantic import BaseModel


class CacheStats(BaseModel):
    hits: int
    misses: int
    keys: int
    ttl: int


class HealthResponse(BaseModel):
    status: str
    uptime: float
    timestamp: str
    cacheStats: CacheStats
