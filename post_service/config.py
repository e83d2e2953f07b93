"""
Configuration management using Pydantic BaseSettings.
All values can be overridden via POST_SERVICE_* environment variables or a .env file.
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    port: int = 8002
    service_name: str = "post-service"
    environment: str = "development"

    # ── User Service (author existence check) ──────────────────────────────
    user_service_url: str = "http://user-service:8001"
    user_service_timeout: float = 5.0    # seconds; no retry on failure

    # ── Observability ──────────────────────────────────────────────────────
    tracing_enabled: bool = True
    otel_exporter_otlp_endpoint: str = "http://jaeger:4317"

    class Config:
        env_prefix = "POST_SERVICE_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
