"""Models describing conversations and the messages exchanged in them."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from nonna_kitchen.db.session import Base
from nonna_kitchen.db.time import utcnow


class Conversation(Base):
    """Private conversation between exactly two users.

    The pair is stored normalised: ``user1_id`` is always the lexicographically
    smaller identifier, so one row exists per unordered pair.
    """

    __tablename__ = "conversations"
    __table_args__ = (
        UniqueConstraint("user1_id", "user2_id", name="uq_conversations_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user1_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    user1_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    user2_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    user2_name: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    # Bumped on every new message so conversation lists sort by recency.
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)

    def has_participant(self, user_id: str) -> bool:
        """Return True if ``user_id`` is one of the two participants."""
        return user_id in (self.user1_id, self.user2_id)


class Message(Base):
    """Append-only message within a conversation."""

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    conversation_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    sender_id: Mapped[str] = mapped_column(Text, nullable=False)

    # At least one of content / attachment_url is set.
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    attachment_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    attachment_type: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
