"""Like-related Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .common import RequestModel

LikeableType = Literal["thread", "post", "comment"]


class LikeToggle(RequestModel):
    """Schema for toggling a like on a thread, post or comment."""

    likeable_id: int = Field(..., description="Identifier of the liked entity")
    likeable_type: LikeableType = Field(..., description='"thread", "post" or "comment"')


class LikeResponse(BaseModel):
    """Schema for a stored like."""

    id: int
    user_id: str
    likeable_id: int
    likeable_type: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LikeToggleResponse(BaseModel):
    """Outcome of a toggle: ``liked`` is the state after the call."""

    liked: bool
    message: str
    like: LikeResponse | None = None


class LikeSummary(BaseModel):
    """Like count of an entity and whether the caller has liked it."""

    likeable_id: int
    likeable_type: str
    count: int
    liked: bool
