from pydantic import BaseModel

from social_common.ids import UserId


class FollowRequest(BaseModel):
    follower_id: UserId
    followee_id: UserId


class FollowersResponse(BaseModel):
    user_id: str
    followers: list[str]


class FollowingResponse(BaseModel):
    user_id: str
    following: list[str]
