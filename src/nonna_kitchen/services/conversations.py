"""One-to-one conversations and their messages."""
from __future__ import annotations

import logging

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity
from nonna_kitchen.db.time import utcnow
from nonna_kitchen.models import Conversation, Message
from nonna_kitchen.services.errors import Forbidden, NotFound, ValidationFailed

logger = logging.getLogger(__name__)


def normalize_pair(user_a: str, user_b: str) -> tuple[str, str]:
    """Return the pair with the lexicographically smaller id first."""
    return (user_a, user_b) if user_a < user_b else (user_b, user_a)


def _is_real_name(name: str | None, user_id: str) -> bool:
    # Older rows stored the user id when no display name was known.
    return bool(name) and name != user_id


def _fill_missing_names(
    conversation: Conversation,
    names: dict[str, str | None],
) -> bool:
    changed = False
    for id_attr, name_attr in (("user1_id", "user1_name"), ("user2_id", "user2_name")):
        user_id = getattr(conversation, id_attr)
        candidate = names.get(user_id)
        current = getattr(conversation, name_attr)
        if _is_real_name(candidate, user_id) and not _is_real_name(current, user_id):
            setattr(conversation, name_attr, candidate)
            changed = True
    return changed


def _find_conversation(db: Session, user1_id: str, user2_id: str) -> Conversation | None:
    return db.scalars(
        select(Conversation).where(
            Conversation.user1_id == user1_id,
            Conversation.user2_id == user2_id,
        )
    ).first()


def get_or_create_conversation(
    db: Session,
    *,
    user: Identity,
    target_user_id: str,
    target_user_name: str | None = None,
) -> Conversation:
    """Return the single conversation between ``user`` and ``target_user_id``.

    The lookup uses the normalised pair so either participant finds the same
    row. A creation that loses a race against the other participant falls
    back to the row that won.
    """
    if not target_user_id:
        raise ValidationFailed("Target User ID required")
    if user.id == target_user_id:
        raise ValidationFailed("Cannot chat with yourself")

    user1_id, user2_id = normalize_pair(user.id, target_user_id)
    names: dict[str, str | None] = {
        user.id: user.display_name or user.id,
        target_user_id: target_user_name or None,
    }

    conversation = _find_conversation(db, user1_id, user2_id)
    if conversation is None:
        candidate = Conversation(
            user1_id=user1_id,
            user1_name=names[user1_id],
            user2_id=user2_id,
            user2_name=names[user2_id],
        )
        try:
            with db.begin_nested():
                db.add(candidate)
        except IntegrityError:
            logger.info("Conversation %s/%s created concurrently; re-reading", user1_id, user2_id)
            conversation = _find_conversation(db, user1_id, user2_id)
            if conversation is None:
                raise
        else:
            db.commit()
            db.refresh(candidate)
            return candidate

    if _fill_missing_names(conversation, names):
        db.commit()
        db.refresh(conversation)
    return conversation


def list_conversations(db: Session, *, user: Identity) -> list[Conversation]:
    """Return the caller's conversations, most recently active first."""
    stmt = (
        select(Conversation)
        .where(or_(Conversation.user1_id == user.id, Conversation.user2_id == user.id))
        .order_by(Conversation.updated_at.desc(), Conversation.id.desc())
    )
    return list(db.scalars(stmt))


def get_conversation_for_participant(
    db: Session,
    *,
    user: Identity,
    conversation_id: int,
) -> Conversation:
    """Fetch a conversation, requiring ``user`` to take part in it."""
    conversation = db.get(Conversation, conversation_id)
    if conversation is None:
        raise NotFound("Conversation not found")
    if not conversation.has_participant(user.id):
        raise Forbidden("Forbidden")
    return conversation


def send_message(
    db: Session,
    *,
    sender: Identity,
    conversation_id: int,
    content: str | None = None,
    attachment_url: str | None = None,
    attachment_type: str | None = None,
) -> Message:
    """Append a message to a conversation and bump its activity timestamp."""
    if not conversation_id:
        raise ValidationFailed("Conversation ID required")
    if not content and not attachment_url:
        raise ValidationFailed("Message must have content or attachment")

    conversation = get_conversation_for_participant(
        db, user=sender, conversation_id=conversation_id
    )

    now = utcnow()
    message = Message(
        conversation_id=conversation.id,
        sender_id=sender.id,
        content=content or None,
        attachment_url=attachment_url or None,
        attachment_type=attachment_type or None,
        created_at=now,
    )
    db.add(message)
    conversation.updated_at = now
    db.commit()
    db.refresh(message)
    return message


def list_messages(db: Session, *, user: Identity, conversation_id: int) -> list[Message]:
    """Return the messages of a conversation in chronological order."""
    conversation = get_conversation_for_participant(
        db, user=user, conversation_id=conversation_id
    )
    stmt = (
        select(Message)
        .where(Message.conversation_id == conversation.id)
        .order_by(Message.created_at.asc(), Message.id.asc())
    )
    return list(db.scalars(stmt))
