"""Conversation and message Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import RequestModel


class ConversationCreate(RequestModel):
    """Schema for opening (or finding) the conversation with another user."""

    target_user_id: str = Field(..., min_length=1, description="Identifier of the other user")
    target_user_name: str | None = Field(None, description="Display name of the other user")


class ConversationResponse(BaseModel):
    """Schema for conversation information returned by the API."""

    id: int
    user1_id: str
    user1_name: str | None
    user2_id: str
    user2_name: str | None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MessageCreate(RequestModel):
    """Schema for sending a message; content or an attachment is required."""

    conversation_id: int
    content: str | None = None
    attachment_url: str | None = None
    attachment_type: str | None = None


class MessageResponse(BaseModel):
    """Schema for message information returned by the API."""

    id: int
    conversation_id: int
    sender_id: str
    content: str | None
    attachment_url: str | None
    attachment_type: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
