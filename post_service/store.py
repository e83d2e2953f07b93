"""
In-memory post store, keyed by minted post id.

Posts are immutable once stored. Ids come from an IdMinter, so two posts
created by the same author within one clock tick still get distinct keys.
"""
from typing import Optional

from post_service.schemas import Post
from social_common.ids import IdMinter

POST_SCHEMA_VERSION = 1


class PostStore:
    def __init__(self, minter: Optional[IdMinter] = None) -> None:
        self._posts: dict[str, Post] = {}
        self._minter = minter or IdMinter()

    def create(self, author: str, content: str) -> Post:
        post_id, ts = self._minter.mint(author)
        post = Post(
            id=post_id,
            author=author,
            content=content,
            timestamp=ts,
            version=POST_SCHEMA_VERSION,
        )
        self._posts[post_id] = post
        return post

    def list(self) -> list[Post]:
        return list(self._posts.values())

    def get(self, post_id: str) -> Optional[Post]:
        return self._posts.get(post_id)

    def __len__(self) -> int:
        return len(self._posts)


# Singleton
post_store = PostStore()


def get_store() -> PostStore:
    """FastAPI dependency that yields the process-wide post store."""
    return post_store
