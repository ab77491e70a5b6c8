"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import RequestModel


class PostCreate(RequestModel):
    """Schema for replying to a thread or to another post."""

    thread_id: int = Field(..., description="Thread the reply belongs to")
    parent_post_id: int | None = Field(None, description="Parent post ID for nested replies")
    content: str | None = Field(None, description="Reply text")
    attachments: list[str] | None = Field(None, description="Uploaded attachment URLs")


class PostUpdate(RequestModel):
    """Schema for editing the text of an existing post."""

    content: str = Field(..., min_length=1)


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    thread_id: int
    parent_post_id: int | None
    user_id: str
    author_name: str
    content: str
    attachments: list[str] | None = None
    depth: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
