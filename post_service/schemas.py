"""
Pydantic request / response schemas for the post service.
"""
from typing import Optional

from pydantic import BaseModel

from social_common.ids import UserId


class PostCreate(BaseModel):
    author: UserId
    content: str


class Post(BaseModel):
    id: str
    author: str
    content: str
    timestamp: int      # nanoseconds since epoch
    version: int = 1


class AuthorProfile(BaseModel):
    """
    The slice of the user service's profile record this service reads.
    Unknown fields in the upstream response are ignored.
    """
    id: str
    name: str
    bio: str = ""
    avatar_url: Optional[str] = None
