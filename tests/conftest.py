import os

# Tracing is configured in each app's lifespan; keep it off even if a test
# enters the lifespan.
for _prefix in ("USER", "POST", "SOCIAL_GRAPH", "INTERACTION"):
    os.environ.setdefault(f"{_prefix}_SERVICE_TRACING_ENABLED", "false")

import httpx
import pytest
from fastapi.testclient import TestClient

from interaction_service.main import app as interaction_app
from interaction_service.store import InteractionStore
from interaction_service.store import get_store as get_interaction_store
from post_service.clients.user_client import UserServiceClient, get_user_client
from post_service.main import app as post_app
from post_service.store import PostStore
from post_service.store import get_store as get_post_store
from social_graph_service.main import app as graph_app
from social_graph_service.store import GraphStore
from social_graph_service.store import get_store as get_graph_store
from user_service.main import app as user_app
from user_service.store import UserStore
from user_service.store import get_store as get_user_store

USER_SERVICE_BASE_URL = "http://user-service"


def make_user_client(transport: httpx.AsyncBaseTransport) -> UserServiceClient:
    return UserServiceClient(
        http=httpx.AsyncClient(transport=transport, base_url=USER_SERVICE_BASE_URL)
    )


@pytest.fixture
def user_store() -> UserStore:
    return UserStore()


@pytest.fixture
def user_api(user_store):
    user_app.dependency_overrides[get_user_store] = lambda: user_store
    yield TestClient(user_app)
    user_app.dependency_overrides.clear()


@pytest.fixture
def post_store() -> PostStore:
    return PostStore()


@pytest.fixture
def post_app_with(post_store):
    """Returns a function that wires the post app to a given user client."""

    def _wire(users: UserServiceClient):
        post_app.dependency_overrides[get_post_store] = lambda: post_store
        post_app.dependency_overrides[get_user_client] = lambda: users
        return post_app

    yield _wire
    post_app.dependency_overrides.clear()


@pytest.fixture
def post_api(post_app_with, user_api):
    """Post service talking to the real user service app, in process."""
    users = make_user_client(httpx.ASGITransport(app=user_app))
    return TestClient(post_app_with(users))


@pytest.fixture
def graph_store() -> GraphStore:
    return GraphStore()


@pytest.fixture
def graph_api(graph_store):
    graph_app.dependency_overrides[get_graph_store] = lambda: graph_store
    yield TestClient(graph_app)
    graph_app.dependency_overrides.clear()


@pytest.fixture
def interaction_store() -> InteractionStore:
    return InteractionStore()


@pytest.fixture
def interaction_api(interaction_store):
    interaction_app.dependency_overrides[get_interaction_store] = lambda: interaction_store
    yield TestClient(interaction_app)
    interaction_app.dependency_overrides.clear()


def register(api: TestClient, user_id: str, username: str, **extra) -> httpx.Response:
    payload = {"id": user_id, "username": username, "name": user_id.title(), "bio": ""}
    payload.update(extra)
    return api.post("/users/", json=payload)
