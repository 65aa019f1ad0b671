# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Metadatos
    PROJECT_NAME: str = "FX Conversion API"
    PROJECT_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"

    # Servidor
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Proveedor de tasas (Frankfurter)
    RATE_PROVIDER_URL: str = "https://api.frankfurter.app/latest"
    RATE_PROVIDER_NAME: str = "Frankfurter.app"
    RATE_PROVIDER_TIMEOUT_SECONDS: float = 10.0

    # Cache de tasas + análisis (10 minutos)
    RATE_CACHE_TTL_SECONDS: int = 600

    # Gemini (análisis de mercado)
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-1.5-flash"
    GEMINI_TIMEOUT_SECONDS: float = 15.0

    # CORS / estáticos
    CORS_PRODUCTION_ORIGIN: str = "https://yourdomain.com"
    STATIC_DIR: str = "public"

    # TLS (si usas HTTPS directo)
    SSL_KEYFILE: str | None = None
    SSL_CERTFILE: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def cors_origins(self) -> list[str]:
        if self.is_production:
            return [self.CORS_PRODUCTION_ORIGIN]
        return ["*"]


settings = Settings()
