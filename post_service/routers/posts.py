"""
Post endpoints:
  POST /posts/       — create a post (author must exist in the user service)
  GET  /posts/       — list all posts
  GET  /posts/{id}   — fetch a single post
"""
import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status
from opentelemetry import trace
from prometheus_client import Counter, Histogram

from post_service.clients.user_client import (
    UpstreamUnavailable,
    UserServiceClient,
    get_user_client,
)
from post_service.schemas import Post, PostCreate
from post_service.store import PostStore, get_store

logger = logging.getLogger(__name__)
router = APIRouter()
tracer = trace.get_tracer(__name__)

POSTS_CREATED_TOTAL = Counter(
    "posts_created_total",
    "Total number of posts admitted",
)

AUTHOR_CHECKS_TOTAL = Counter(
    "post_author_checks_total",
    "Author existence checks by result",
    ["result"],  # 'admitted' | 'not_found' | 'upstream_error'
)

USER_CHECK_LATENCY = Histogram(
    "user_check_latency_seconds",
    "Latency of the user service existence check",
    buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 5.0],
)


@router.post("/", response_model=Post, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: PostCreate,
    store: PostStore = Depends(get_store),
    users: UserServiceClient = Depends(get_user_client),
):
    """
    Two phases, no lock held between them:

    1. Check: await the user service for the author's profile. Other
       requests to this service may run while this call is outstanding.
    2. Commit: mint an id from (author, timestamp) and store the post.

    The check can be stale by the time the commit runs; a profile removed in
    between would leave the post with a dangling author.
    """
    with tracer.start_as_current_span("create_post") as span:
        span.set_attribute("post.author", body.author)

        t0 = time.perf_counter()
        try:
            author = await users.get_user(body.author)
        except UpstreamUnavailable as exc:
            AUTHOR_CHECKS_TOTAL.labels(result="upstream_error").inc()
            logger.warning("Post rejected for %s: %s", body.author, exc)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
            )
        finally:
            USER_CHECK_LATENCY.observe(time.perf_counter() - t0)

        if author is None:
            AUTHOR_CHECKS_TOTAL.labels(result="not_found").inc()
            logger.info("Post rejected: user %s does not exist", body.author)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="User does not exist. Please register first.",
            )

        AUTHOR_CHECKS_TOTAL.labels(result="admitted").inc()
        post = store.create(body.author, body.content)

        span.set_attribute("post.id", post.id)
        POSTS_CREATED_TOTAL.inc()
        logger.info("Post created: %s by user %s", post.id, post.author)
        return post


@router.get("/", response_model=list[Post])
async def list_posts(store: PostStore = Depends(get_store)):
    return store.list()


@router.get("/{post_id}", response_model=Post)
async def get_post(post_id: str, store: PostStore = Depends(get_store)):
    post = store.get(post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post
