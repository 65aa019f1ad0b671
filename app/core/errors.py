# app/core/errors.py
from typing import Optional


class ConversionError(Exception):
    """Error de dominio expuesto al cliente con un código estable."""

    status_code: int = 500
    code: str = "SRV-500"
    message: str = "Conversion service unavailable"

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code}


class InvalidAmount(ConversionError):
    status_code = 400
    code = "INV-AMT"
    message = "Invalid amount"

    def __init__(self, amount=None):
        self.amount = amount
        super().__init__(f"{self.message}: {amount!r}")


class UpstreamUnavailable(ConversionError):
    """El proveedor de tasas falló; se propaga su status HTTP si se conoce."""

    def __init__(self, upstream_status: Optional[int] = None, detail: str = ""):
        self.upstream_status = upstream_status
        self.status_code = upstream_status or 500
        self.code = f"SRV-{self.status_code:03d}"
        self.detail = detail
        super().__init__(detail or self.message)


class InvalidRate(ValueError):
    """La tasa recibida no es un número finito."""
