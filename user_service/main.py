"""
User Service: owns user profile records, keyed by user id.

Endpoints:
  POST /users/          — register a profile (username must be unused)
  PUT  /users/{id}      — update name / bio / avatar / cover
  GET  /users/{id}      — fetch a profile (also the post service's author check)

Leaf service: makes no outbound calls.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, status
from opentelemetry import trace
from prometheus_client import Counter, make_asgi_app

from social_common.telemetry import LOG_FORMAT, instrument_app, setup_tracing
from user_service.config import settings
from user_service.schemas import ProfileUpdate, UserProfile, UserRegister
from user_service.store import ProfileNotFound, UserStore, UsernameTaken, get_store

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

# ── Prometheus ─────────────────────────────────────────────────────────────
USER_REGISTRATIONS_TOTAL = Counter(
    "user_registrations_total",
    "Registration attempts by outcome",
    ["outcome"],  # 'created' or 'username_taken'
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting %s (env=%s)", settings.service_name, settings.environment)
    if settings.tracing_enabled:
        setup_tracing(
            settings.service_name,
            settings.environment,
            settings.otel_exporter_otlp_endpoint,
        )
    yield
    logger.info("Shutting down...")


app = FastAPI(title="User Service", version="1.0.0", lifespan=lifespan)
instrument_app(app)
app.mount("/metrics", make_asgi_app())


@app.post("/users/", response_model=UserProfile, status_code=status.HTTP_201_CREATED, tags=["Users"])
async def register_user(body: UserRegister, store: UserStore = Depends(get_store)):
    with tracer.start_as_current_span("register_user") as span:
        span.set_attribute("user.id", body.id)
        try:
            profile = store.register(body)
        except UsernameTaken as exc:
            USER_REGISTRATIONS_TOTAL.labels(outcome="username_taken").inc()
            logger.info("Registration rejected for id %s: %s", body.id, exc)
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))

        USER_REGISTRATIONS_TOTAL.labels(outcome="created").inc()
        logger.info("Registered user %s (id=%s)", profile.username, profile.id)
        return profile


@app.put("/users/{user_id}", response_model=UserProfile, tags=["Users"])
async def update_profile(user_id: str, body: ProfileUpdate, store: UserStore = Depends(get_store)):
    with tracer.start_as_current_span("update_profile"):
        try:
            profile = store.update(user_id, body)
        except ProfileNotFound as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

        logger.info("Updated profile %s", user_id)
        return profile


@app.get("/users/{user_id}", response_model=UserProfile, tags=["Users"])
async def get_user(user_id: str, store: UserStore = Depends(get_store)):
    profile = store.get(user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="User not found")
    return profile


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok", "service": settings.service_name}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
