"""
User id validation and identifier minting for posts and comments.

Ids have the form "{owner_id}-{timestamp_ns}". Two calls that read the same
clock value (same author, same instant) would otherwise mint the same key and
the second write would silently replace the first, so the minter hands out
strictly increasing timestamps: a clock reading at or below the last one
issued is bumped to last + 1.
"""
import time
from typing import Annotated, Callable

from pydantic import Field

# User ids travel as a URL path segment on the post service's author check,
# so they are limited to characters that survive routing unchanged.
USER_ID_PATTERN = r"^[A-Za-z0-9_-]+$"

UserId = Annotated[str, Field(min_length=1, max_length=128, pattern=USER_ID_PATTERN)]


class IdMinter:
    def __init__(self, clock: Callable[[], int] = time.time_ns) -> None:
        self._clock = clock
        self._last = 0

    def next_timestamp(self) -> int:
        now = self._clock()
        if now <= self._last:
            now = self._last + 1
        self._last = now
        return now

    def mint(self, owner_id: str) -> tuple[str, int]:
        """Return (id, timestamp) for a new record owned by `owner_id`."""
        ts = self.next_timestamp()
        return f"{owner_id}-{ts}", ts
