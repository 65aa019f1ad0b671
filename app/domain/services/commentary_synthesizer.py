# app/domain/services/commentary_synthesizer.py
import math
from types import MappingProxyType
from typing import Mapping, Tuple, Union

from app.core.errors import InvalidRate


# code -> (fuerza, drivers)
CURRENCY_PROFILES: Mapping[str, Tuple[str, Tuple[str, ...]]] = MappingProxyType({
    "USD": ("strong", ("Fed policy", "economic growth", "safe-haven demand")),
    "EUR": ("moderate", ("ECB policy", "energy prices", "manufacturing data")),
    "GBP": ("moderate", ("BoE decisions", "Brexit impacts", "services sector")),
    "JPY": ("weak", ("BoJ ultra-loose policy", "trade balance", "risk sentiment")),
    "AUD": ("commodity-linked", ("China demand", "commodity prices", "RBA stance")),
})

DEFAULT_PROFILE: Tuple[str, Tuple[str, ...]] = (
    "neutral",
    ("interest rates", "economic data", "geopolitical factors"),
)


def currency_profile(code: str) -> Tuple[str, Tuple[str, ...]]:
    return CURRENCY_PROFILES.get(code, DEFAULT_PROFILE)


def _parse_rate(rate: Union[float, int, str]) -> float:
    if isinstance(rate, bool):
        raise InvalidRate(f"Rate must be numeric, got {rate!r}")
    try:
        value = float(rate)
    except (TypeError, ValueError) as exc:
        raise InvalidRate(f"Rate must be numeric, got {rate!r}") from exc
    if not math.isfinite(value):
        raise InvalidRate(f"Rate must be finite, got {rate!r}")
    return value


def trend_label(rate: Union[float, int, str]) -> str:
    return "strengthening" if _parse_rate(rate) > 1 else "weakening"


def outlook_label(base: str, target: str) -> str:
    base_strength, _ = currency_profile(base)
    target_strength, _ = currency_profile(target)
    if base_strength == "strong" and target_strength != "strong":
        return "bullish"
    return "neutral"


def synthesize(base: str, target: str, rate: Union[float, int, str]) -> str:
    """
    Genera un análisis de mercado determinístico a partir del par y la tasa.

    Es el fallback cuando Gemini no está disponible. No tiene efectos
    secundarios; solo falla si la tasa no es un número finito (InvalidRate).
    """
    trend = trend_label(rate)
    outlook = outlook_label(base, target)
    _, base_drivers = currency_profile(base)
    _, target_drivers = currency_profile(target)

    return (
        f"The {base} is currently {trend} against {target} at 1:{rate}. "
        f"Key drivers include {' and '.join(base_drivers[:2])} for {base} "
        f"and {' and '.join(target_drivers[:2])} for {target}. "
        f"Short-term outlook appears {outlook}, though traders should monitor "
        f"upcoming economic releases for confirmation. This automated analysis "
        f"is based on typical market drivers for these currencies."
    )
