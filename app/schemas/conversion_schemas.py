# app/schemas/conversion_schemas.py
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class ConversionRequest(BaseModel):
    # amount se valida en el servicio para responder INV-AMT (no 422)
    amount: Any = Field(None, examples=[100])
    from_currency: Optional[str] = Field(None, examples=["USD"])
    to_currency: Optional[str] = Field(None, examples=["EUR"])


class ConversionResponse(BaseModel):
    from_currency: Optional[str]
    to_currency: Optional[str]
    amount: float
    rate: float
    converted_amount: str
    analysis: str
    timestamp: datetime
    cached: bool
    source: str


class ErrorResponse(BaseModel):
    error: str
    code: str
