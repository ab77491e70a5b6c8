"""Models capturing likes on threads, posts and comments."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from nonna_kitchen.db.session import Base
from nonna_kitchen.db.time import utcnow

LIKEABLE_TYPES = ("thread", "post", "comment")


class Like(Base):
    """Per-user like on a likeable entity.

    The target is polymorphic (``likeable_type`` + ``likeable_id``) so there is
    no foreign key; rows are cleaned up by the services that delete targets.
    """

    __tablename__ = "likes"
    __table_args__ = (
        # One like per user per target; the authoritative guard against racing toggles.
        UniqueConstraint("user_id", "likeable_id", "likeable_type", name="uq_likes_user_target"),
        CheckConstraint(
            "likeable_type IN ('thread', 'post', 'comment')",
            name="ck_likes_likeable_type",
        ),
        Index("ix_likes_target", "likeable_type", "likeable_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    likeable_id: Mapped[int] = mapped_column(Integer, nullable=False)
    likeable_type: Mapped[str] = mapped_column(String(16), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
