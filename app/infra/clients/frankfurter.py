# app/infra/clients/frankfurter.py
import logging
import math
from typing import Optional

import requests

from app.core.config import settings
from app.core.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)


class FrankfurterClient:
    """Consulta la tasa en vivo de un par en la API de Frankfurter."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url or settings.RATE_PROVIDER_URL
        self.timeout_seconds = timeout_seconds or settings.RATE_PROVIDER_TIMEOUT_SECONDS
        self.source = settings.RATE_PROVIDER_NAME
        self.session = session or requests.Session()

    def fetch_rate(self, base: str, target: str) -> float:
        """
        Devuelve `rates[target]` para `?from=base&to=target`.

        Cualquier fallo (HTTP, red, JSON o tasa ausente) se traduce a
        UpstreamUnavailable, con el status HTTP del proveedor si existe.
        """
        logger.info(f"🔄 Consultando tasa {base}->{target} en {self.source}")
        try:
            r = self.session.get(
                self.base_url,
                params={"from": base, "to": target},
                timeout=self.timeout_seconds,
            )
            r.raise_for_status()
            data = r.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"Error HTTP del proveedor de tasas ({status}): {e}")
            raise UpstreamUnavailable(status, str(e)) from e
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error al obtener tasa de cambio: {e}")
            raise UpstreamUnavailable(None, str(e)) from e

        try:
            rate = float(data["rates"][target])
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Respuesta sin tasa para {target}: {data!r}")
            raise UpstreamUnavailable(None, f"No rate for {target}") from e

        if not math.isfinite(rate) or rate <= 0:
            raise UpstreamUnavailable(None, f"Invalid rate for {target}: {rate}")

        logger.info(f"📈 Tasa {base}->{target}: {rate}")
        return rate
