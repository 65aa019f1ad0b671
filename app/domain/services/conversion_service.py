# app/domain/services/conversion_service.py
import logging
import math
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Protocol

from app.core.errors import InvalidAmount
from app.domain.entities.quote import ConversionResult, RateQuote
from app.domain.services.market_commentary import MarketCommentaryProvider
from app.infra.cache.rate_cache import RateCache

logger = logging.getLogger(__name__)

RATE_DISPLAY_DECIMALS = 4
_CENTS = Decimal("0.01")


class RateProvider(Protocol):
    source: str

    def fetch_rate(self, base: str, target: str) -> float:
        ...


def parse_amount(amount) -> float:
    """Valida el monto: numérico (o string numérico), finito y > 0."""
    if amount is None or isinstance(amount, bool):
        raise InvalidAmount(amount)
    if isinstance(amount, str) and not amount.strip():
        raise InvalidAmount(amount)
    try:
        value = float(amount)
    except (TypeError, ValueError, OverflowError):
        raise InvalidAmount(amount) from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidAmount(amount)
    return value


def format_converted(amount: float, rate: float) -> str:
    """amount * rate redondeado (half-up) a exactamente 2 decimales."""
    with localcontext() as ctx:
        # producto exacto (dos floats de 17 dígitos) y luego entero + 2 decimales
        ctx.prec = 40
        value = Decimal(str(amount)) * Decimal(str(rate))
        ctx.prec = max(40, value.adjusted() + 4)
        return str(value.quantize(_CENTS, rounding=ROUND_HALF_UP))


class ConversionService:
    """
    Orquesta una conversión: valida, consulta cache y, si no hay entrada
    vigente, trae la tasa en vivo, obtiene el análisis y guarda el par.
    """

    def __init__(
        self,
        rate_provider: RateProvider,
        commentary: MarketCommentaryProvider,
        cache: Optional[RateCache] = None,
    ):
        self.rate_provider = rate_provider
        self.commentary = commentary
        self.cache = cache or RateCache()

    def convert(self, amount, base: str, target: str) -> ConversionResult:
        value = parse_amount(amount)

        # 1. Cache (la clave es el par tal cual llega)
        cached = self.cache.get(base, target)
        if cached is not None:
            logger.info(f"✅ Usando tasa en cache {base}->{target}")
            return ConversionResult(
                from_currency=base,
                to_currency=target,
                amount=value,
                rate=cached.rate,
                converted_amount=format_converted(value, cached.rate),
                analysis=cached.analysis,
                timestamp=cached.timestamp,
                cached=True,
                source=self.rate_provider.source,
            )

        # 2. Tasa en vivo (UpstreamUnavailable se propaga)
        rate = self.rate_provider.fetch_rate(base, target)
        analysis = self.commentary.get_analysis(base, target, rate)

        converted = format_converted(value, rate)
        quote = RateQuote(rate=rate, analysis=analysis, timestamp=datetime.now(timezone.utc))
        self.cache.put(base, target, quote)

        return ConversionResult(
            from_currency=base,
            to_currency=target,
            amount=value,
            rate=round(rate, RATE_DISPLAY_DECIMALS),
            converted_amount=converted,
            analysis=analysis,
            timestamp=quote.timestamp,
            cached=False,
            source=self.rate_provider.source,
        )
