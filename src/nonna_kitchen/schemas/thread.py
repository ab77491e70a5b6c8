"""Thread-related Pydantic schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .common import RequestModel


class ThreadCreate(RequestModel):
    """Schema for creating a new thread."""

    region: str = Field(..., min_length=1, description="Free-text geography tag")
    scope: Literal["country", "state"] = Field(..., description="Geography level of the region")
    category: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)


class ThreadResponse(BaseModel):
    """Schema for thread information returned by the API."""

    id: int
    region: str
    scope: str
    category: str
    title: str
    content: str
    user_id: str
    author_name: str | None
    view_count: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ThreadListItem(ThreadResponse):
    """Thread row in a listing, with its like count."""

    like_count: int = 0
