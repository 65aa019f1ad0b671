# app/domain/entities/quote.py
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RateQuote:
    """Tasa + análisis capturados en un fetch en vivo."""

    rate: float
    analysis: str
    timestamp: datetime


@dataclass(frozen=True)
class ConversionResult:
    from_currency: str
    to_currency: str
    amount: float
    rate: float
    converted_amount: str
    analysis: str
    timestamp: datetime
    cached: bool
    source: str
