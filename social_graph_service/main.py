"""
Social Graph Service: follower / following edges between user ids.

  POST /users/follow             — add an edge (idempotent)
  POST /users/unfollow           — remove an edge (no-op if absent)
  GET  /users/{id}/followers     — who follows this user
  GET  /users/{id}/following     — who this user follows

User ids are not validated against the user service.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, status
from opentelemetry import trace
from prometheus_client import Counter, make_asgi_app

from social_common.telemetry import LOG_FORMAT, instrument_app, setup_tracing
from social_graph_service.config import settings
from social_graph_service.schemas import FollowersResponse, FollowingResponse, FollowRequest
from social_graph_service.store import GraphStore, get_store

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

GRAPH_EDGE_OPS_TOTAL = Counter(
    "social_graph_edges_total",
    "Follow graph mutations",
    ["operation"],  # 'follow' or 'unfollow'
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


app = FastAPI(title="Social Graph Service", version="1.0.0", lifespan=lifespan)
instrument_app(app)
app.mount("/metrics", make_asgi_app())


@app.post("/users/follow", status_code=status.HTTP_204_NO_CONTENT, tags=["Graph"])
async def follow_user(body: FollowRequest, store: GraphStore = Depends(get_store)):
    with tracer.start_as_current_span("follow_user"):
        store.follow(body.follower_id, body.followee_id)
        GRAPH_EDGE_OPS_TOTAL.labels(operation="follow").inc()
        logger.info("%s followed %s", body.follower_id, body.followee_id)


@app.post("/users/unfollow", status_code=status.HTTP_204_NO_CONTENT, tags=["Graph"])
async def unfollow_user(body: FollowRequest, store: GraphStore = Depends(get_store)):
    with tracer.start_as_current_span("unfollow_user"):
        store.unfollow(body.follower_id, body.followee_id)
        GRAPH_EDGE_OPS_TOTAL.labels(operation="unfollow").inc()
        logger.info("%s unfollowed %s", body.follower_id, body.followee_id)


@app.get("/users/{user_id}/followers", response_model=FollowersResponse, tags=["Graph"])
async def list_followers(user_id: str, store: GraphStore = Depends(get_store)):
    return FollowersResponse(user_id=user_id, followers=sorted(store.get_followers(user_id)))


@app.get("/users/{user_id}/following", response_model=FollowingResponse, tags=["Graph"])
async def list_following(user_id: str, store: GraphStore = Depends(get_store)):
    return FollowingResponse(user_id=user_id, following=sorted(store.get_following(user_id)))


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok", "service": settings.service_name}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
