"""
User service client, the post service's only outbound dependency.

Before a post is admitted, its author must exist:
  GET {user_service_url}/users/{author}
    200 → profile (author exists)
    404 → None    (author never registered; body detail "User not found")

Anything else (connection error, timeout, 5xx, a body that is not a profile)
is raised as UpstreamUnavailable. Failures are surfaced immediately; there is
no retry and no fallback.
"""
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from post_service.config import settings
from post_service.schemas import AuthorProfile

logger = logging.getLogger(__name__)

# Body the user service sends with a 404 for an unregistered id
USER_NOT_FOUND_DETAIL = "User not found"


class UpstreamUnavailable(Exception):
    """The user service could not answer the existence check."""


class UserServiceClient:
    def __init__(self, http: Optional[httpx.AsyncClient] = None) -> None:
        self._http = http

    async def start(self) -> None:
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=settings.user_service_url,
                timeout=settings.user_service_timeout,
            )

    async def stop(self) -> None:
        if self._http:
            await self._http.aclose()
            self._http = None

    async def get_user(self, user_id: str) -> Optional[AuthorProfile]:
        if self._http is None:
            raise RuntimeError("User service client not started; call start() at startup")

        try:
            resp = await self._http.get(f"/users/{quote(user_id, safe='')}")
        except httpx.HTTPError as exc:
            raise UpstreamUnavailable(f"Failed to call user service: {exc!r}") from exc

        if resp.status_code == httpx.codes.NOT_FOUND and _is_missing_user(resp):
            return None
        if resp.is_error:
            raise UpstreamUnavailable(
                f"Failed to call user service: HTTP {resp.status_code}"
            )

        try:
            return AuthorProfile.model_validate(resp.json())
        except ValueError as exc:
            # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors
            raise UpstreamUnavailable(
                f"Failed to decode user service response: {exc}"
            ) from exc


def _is_missing_user(resp: httpx.Response) -> bool:
    """A 404 from a route that does not exist (wrong base URL, path prefix) is not "absent"."""
    try:
        return resp.json().get("detail") == USER_NOT_FOUND_DETAIL
    except (ValueError, AttributeError):
        return False


# Singleton
user_client = UserServiceClient()


def get_user_client() -> UserServiceClient:
    return user_client
