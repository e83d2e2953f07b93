"""
Configuration management using Pydantic BaseSettings.
All values can be overridden via USER_SERVICE_* environment variables or a .env file.
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    port: int = 8001
    service_name: str = "user-service"
    environment: str = "development"

    # ── Observability ──────────────────────────────────────────────────────
    tracing_enabled: bool = True
    otel_exporter_otlp_endpoint: str = "http://jaeger:4317"

    class Config:
        env_prefix = "USER_SERVICE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
