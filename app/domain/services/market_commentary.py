# app/domain/services/market_commentary.py
import logging
from typing import Callable, Optional

from app.domain.services.commentary_synthesizer import synthesize
from app.infra.clients.gemini import GeminiClient

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = (
    "As senior financial analyst at Global FX, provide concise professional "
    "analysis (60-80 words) about {base} to {target} exchange trends. Include:\n"
    "- Key economic drivers\n"
    "- Recent central bank impact\n"
    "- Short-term technical outlook\n"
    "Current rate: 1 {base} = {rate} {target}.\n"
    "Use professional tone, avoid speculation."
)


def build_prompt(base: str, target: str, rate) -> str:
    return PROMPT_TEMPLATE.format(base=base, target=target, rate=rate)


class MarketCommentaryProvider:
    """
    Obtiene el análisis de mercado desde Gemini.

    Si la llamada falla por cualquier motivo (sin API key, timeout, cuota,
    respuesta vacía, red) se registra el error y se devuelve el análisis
    generado por el sintetizador. No hay reintentos.
    """

    def __init__(
        self,
        client: Optional[GeminiClient] = None,
        fallback: Callable[[str, str, object], str] = synthesize,
    ):
        self.client = client or GeminiClient()
        self.fallback = fallback

    def get_analysis(self, base: str, target: str, rate) -> str:
        try:
            text = self.client.generate(build_prompt(base, target, rate))
            if not text or not text.strip():
                raise ValueError("Empty response from Gemini")
            return text.strip()
        except Exception as e:
            logger.warning(f"⚠️ Gemini no disponible ({base}->{target}), usando análisis interno: {e}")
            return self.fallback(base, target, rate)
