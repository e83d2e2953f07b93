"""
Pydantic request / response schemas for the user profile service.
"""
from typing import Optional

from pydantic import BaseModel, Field

from social_common.ids import UserId


class UserProfile(BaseModel):
    id: str
    username: str
    name: str
    bio: str
    avatar_url: Optional[str] = None
    cover_url: Optional[str] = None


class UserRegister(BaseModel):
    id: UserId
    username: str = Field(..., min_length=1)
    name: str
    bio: str = ""
    avatar_url: Optional[str] = None
    cover_url: Optional[str] = None


class ProfileUpdate(BaseModel):
    """Mutable profile fields. `id` and `username` are fixed at registration."""
    name: str
    bio: str = ""
    avatar_url: Optional[str] = None
    cover_url: Optional[str] = None
