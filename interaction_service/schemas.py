"""
Pydantic request / response schemas for likes and comments.
"""
from pydantic import BaseModel

from social_common.ids import UserId


class LikeRequest(BaseModel):
    user_id: UserId


class LikesResponse(BaseModel):
    post_id: str
    likes: list[str]
    like_count: int


class CommentCreate(BaseModel):
    user_id: UserId
    content: str


class Comment(BaseModel):
    id: str
    post_id: str
    author: str
    content: str
    timestamp: int      # nanoseconds since epoch
