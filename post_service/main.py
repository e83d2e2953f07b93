"""
Post Service: entry point.

Startup sequence:
  1. Configure OTel tracing (→ Jaeger via OTLP), including outbound httpx spans
  2. Start the async HTTP client for the user service
  3. Expose Prometheus /metrics endpoint
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from prometheus_client import make_asgi_app

from post_service.clients.user_client import user_client
from post_service.config import settings
from post_service.routers import posts
from social_common.telemetry import LOG_FORMAT, instrument_app, setup_tracing

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage startup and shutdown of the user service connection."""
    logger.info("Starting %s (env=%s)", settings.service_name, settings.environment)

    if settings.tracing_enabled:
        setup_tracing(
            settings.service_name,
            settings.environment,
            settings.otel_exporter_otlp_endpoint,
        )
        HTTPXClientInstrumentor().instrument()

    await user_client.start()
    logger.info("User service client → %s", settings.user_service_url)
    yield

    logger.info("Shutting down...")
    await user_client.stop()


app = FastAPI(
    title="Post Service",
    description="Post records; creation is gated on the author existing in the user service.",
    version="1.0.0",
    lifespan=lifespan,
)

# ── Routers ────────────────────────────────────────────────────────────────
app.include_router(posts.router, prefix="/posts", tags=["Posts"])

# ── Prometheus metrics endpoint ────────────────────────────────────────────
app.mount("/metrics", make_asgi_app())

# ── OTel FastAPI instrumentation ──────────────────────────────────────────
instrument_app(app)


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok", "service": settings.service_name}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
