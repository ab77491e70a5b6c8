"""Conversation endpoints for one-to-one messaging."""

from fastapi import APIRouter

from nonna_kitchen.models import Conversation
from nonna_kitchen.schemas.conversation import ConversationCreate, ConversationResponse
from nonna_kitchen.services import conversations as conversation_service

from ..dependencies import CurrentIdentityDep, SessionDep

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.get("/", response_model=list[ConversationResponse])
async def list_conversations(db: SessionDep, current_user: CurrentIdentityDep) -> list[Conversation]:
    """List the caller's conversations, most recently active first."""
    return conversation_service.list_conversations(db, user=current_user)


@router.post("/", response_model=ConversationResponse)
async def open_conversation(
    payload: ConversationCreate,
    db: SessionDep,
    current_user: CurrentIdentityDep,
) -> Conversation:
    """Return the conversation with the target user, creating it if needed."""
    return conversation_service.get_or_create_conversation(
        db,
        user=current_user,
        target_user_id=payload.target_user_id,
        target_user_name=payload.target_user_name,
    )
