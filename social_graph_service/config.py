from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    port: int = 8003
    service_name: str = "social-graph-service"
    environment: str = "development"
    tracing_enabled: bool = True
    otel_exporter_otlp_endpoint: str = "http://jaeger:4317"

    class Config:
        env_prefix = "SOCIAL_GRAPH_SERVICE_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
