"""Recipe comment Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import RequestModel


class RecipeCommentCreate(RequestModel):
    """Schema for commenting on a recipe or replying to a comment."""

    recipe_id: int
    parent_comment_id: int | None = None
    content: str = Field(..., min_length=1)


class RecipeCommentUpdate(RequestModel):
    """Schema for editing a comment."""

    content: str = Field(..., min_length=1)


class RecipeCommentResponse(BaseModel):
    """Schema for a single comment."""

    id: int
    recipe_id: int
    parent_comment_id: int | None
    user_id: str
    author_name: str | None
    content: str
    depth: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RecipeCommentNode(RecipeCommentResponse):
    """Comment together with its nested replies."""

    replies: list[RecipeCommentNode] = Field(default_factory=list)


class RecipeCommentTree(BaseModel):
    """Root comments of a recipe and the total number of comments."""

    comments: list[RecipeCommentNode]
    count: int
