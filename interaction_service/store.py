"""
Per-post likes (a set of user ids) and comments (an append-only list).

Post ids are taken as given: nothing here asks the post service whether the
post exists, so likes and comments can hang off an unknown id.
"""
from collections import defaultdict
from typing import Optional

from interaction_service.schemas import Comment
from social_common.ids import IdMinter


class InteractionStore:
    def __init__(self, minter: Optional[IdMinter] = None) -> None:
        self._likes: defaultdict[str, set[str]] = defaultdict(set)
        self._comments: defaultdict[str, list[Comment]] = defaultdict(list)
        self._minter = minter or IdMinter()

    def like(self, user_id: str, post_id: str) -> None:
        self._likes[post_id].add(user_id)

    def unlike(self, user_id: str, post_id: str) -> None:
        if post_id in self._likes:
            self._likes[post_id].discard(user_id)

    def get_likes(self, post_id: str) -> set[str]:
        return set(self._likes.get(post_id, ()))

    def add_comment(self, user_id: str, post_id: str, content: str) -> Comment:
        comment_id, ts = self._minter.mint(user_id)
        comment = Comment(
            id=comment_id,
            post_id=post_id,
            author=user_id,
            content=content,
            timestamp=ts,
        )
        self._comments[post_id].append(comment)
        return comment

    def get_comments(self, post_id: str) -> list[Comment]:
        return list(self._comments.get(post_id, ()))


# Singleton
interaction_store = InteractionStore()


def get_store() -> InteractionStore:
    return interaction_store
