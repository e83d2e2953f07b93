"""
Interaction Service: likes and comments on posts.

  POST /posts/{id}/like       — like a post (idempotent)
  POST /posts/{id}/unlike     — remove a like (no-op if absent)
  GET  /posts/{id}/likes      — users who liked the post
  POST /posts/{id}/comments   — append a comment
  GET  /posts/{id}/comments   — comments in the order they were added
"""
import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, status
from opentelemetry import trace
from prometheus_client import Counter, make_asgi_app

from interaction_service.config import settings
from interaction_service.schemas import Comment, CommentCreate, LikeRequest, LikesResponse
from interaction_service.store import InteractionStore, get_store
from social_common.telemetry import LOG_FORMAT, instrument_app, setup_tracing

logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

INTERACTIONS_TOTAL = Counter(
    "interactions_total",
    "Likes, unlikes and comments received",
    ["kind"],
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


app = FastAPI(title="Interaction Service", version="1.0.0", lifespan=lifespan)
instrument_app(app)
app.mount("/metrics", make_asgi_app())


@app.post("/posts/{post_id}/like", status_code=status.HTTP_204_NO_CONTENT, tags=["Likes"])
async def like_post(post_id: str, body: LikeRequest, store: InteractionStore = Depends(get_store)):
    """Like a post. Liking twice leaves a single like."""
    with tracer.start_as_current_span("like_post") as span:
        span.set_attribute("post.id", post_id)
        store.like(body.user_id, post_id)
        INTERACTIONS_TOTAL.labels(kind="like").inc()
        logger.info("%s liked post %s", body.user_id, post_id)


@app.post("/posts/{post_id}/unlike", status_code=status.HTTP_204_NO_CONTENT, tags=["Likes"])
async def unlike_post(post_id: str, body: LikeRequest, store: InteractionStore = Depends(get_store)):
    with tracer.start_as_current_span("unlike_post") as span:
        span.set_attribute("post.id", post_id)
        store.unlike(body.user_id, post_id)
        INTERACTIONS_TOTAL.labels(kind="unlike").inc()
        logger.info("%s unliked post %s", body.user_id, post_id)


@app.get("/posts/{post_id}/likes", response_model=LikesResponse, tags=["Likes"])
async def get_likes(post_id: str, store: InteractionStore = Depends(get_store)):
    likes = sorted(store.get_likes(post_id))
    return LikesResponse(post_id=post_id, likes=likes, like_count=len(likes))


@app.post(
    "/posts/{post_id}/comments",
    response_model=Comment,
    status_code=status.HTTP_201_CREATED,
    tags=["Comments"],
)
async def add_comment(post_id: str, body: CommentCreate, store: InteractionStore = Depends(get_store)):
    with tracer.start_as_current_span("add_comment") as span:
        comment = store.add_comment(body.user_id, post_id, body.content)
        span.set_attribute("comment.id", comment.id)
        INTERACTIONS_TOTAL.labels(kind="comment").inc()
        logger.info("Comment %s added to post %s", comment.id, post_id)
        return comment


@app.get("/posts/{post_id}/comments", response_model=list[Comment], tags=["Comments"])
async def get_comments(post_id: str, store: InteractionStore = Depends(get_store)):
    return store.get_comments(post_id)


@app.get("/health", tags=["Health"])
async def health():
    return {"status": "ok", "service": settings.service_name}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
