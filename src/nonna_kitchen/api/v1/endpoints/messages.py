"""Message endpoints for one-to-one conversations."""

from fastapi import APIRouter, HTTPException, Query, status

from nonna_kitchen.models import Message
from nonna_kitchen.schemas.conversation import MessageCreate, MessageResponse
from nonna_kitchen.services import conversations as conversation_service
from nonna_kitchen.services.realtime import conversation_room

from ..dependencies import CurrentIdentityDep, RelayClientDep, SessionDep

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get("/", response_model=list[MessageResponse])
async def list_messages(
    db: SessionDep,
    current_user: CurrentIdentityDep,
    conversation_id: int | None = Query(None, description="Conversation to read"),
) -> list[Message]:
    """List the messages of a conversation the caller takes part in."""
    if not conversation_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Conversation ID required",
        )
    return conversation_service.list_messages(
        db, user=current_user, conversation_id=conversation_id
    )


@router.post("/", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    payload: MessageCreate,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    relay: RelayClientDep,
) -> MessageResponse:
    """Send a message and push it to the conversation's realtime room."""
    message = conversation_service.send_message(
        db,
        sender=current_user,
        conversation_id=payload.conversation_id,
        content=payload.content,
        attachment_url=payload.attachment_url,
        attachment_type=payload.attachment_type,
    )
    body = MessageResponse.model_validate(message)
    await relay.publish_quietly(
        conversation_room(message.conversation_id),
        "message.created",
        body.model_dump(mode="json"),
    )
    return body
