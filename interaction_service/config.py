from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    port: int = 8004
    service_name: str = "interaction-service"
    environment: str = "development"
    tracing_enabled: bool = True
    otel_exporter_otlp_endpoint: str = "http://jaeger:4317"

    class Config:
        env_prefix = "INTERACTION_SERVICE_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
