"""
Mirrored adjacency store for the follow graph.

Every edge is kept twice (followee in following[follower], follower in
followers[followee]) so both directions are a single dict lookup. follow()
and unfollow() touch both sides in one synchronous call; there is no point
at which only one side is written.
"""
from collections import defaultdict


class GraphStore:
    def __init__(self) -> None:
        self._followers: defaultdict[str, set[str]] = defaultdict(set)
        self._following: defaultdict[str, set[str]] = defaultdict(set)

    def follow(self, follower_id: str, followee_id: str) -> None:
        # Self-follow is not rejected.
        self._following[follower_id].add(followee_id)
        self._followers[followee_id].add(follower_id)

    def unfollow(self, follower_id: str, followee_id: str) -> None:
        if follower_id in self._following:
            self._following[follower_id].discard(followee_id)
        if followee_id in self._followers:
            self._followers[followee_id].discard(follower_id)

    def get_followers(self, user_id: str) -> set[str]:
        # .get() so lookups of unknown users don't create empty entries
        return set(self._followers.get(user_id, ()))

    def get_following(self, user_id: str) -> set[str]:
        return set(self._following.get(user_id, ()))


# Singleton
graph_store = GraphStore()


def get_store() -> GraphStore:
    return graph_store
