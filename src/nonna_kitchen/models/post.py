"""SQLAlchemy models for posts and related attributes."""

from datetime import datetime

from sqlalchemy import JSON, CheckConstraint, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from nonna_kitchen.db.session import Base
from nonna_kitchen.db.time import utcnow


class Post(Base):
    """Reply to a thread or to another post.

    Depth is 0 for a direct reply to the thread and ``parent.depth + 1``
    otherwise.
    """

    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint("depth >= 0", name="ck_posts_depth_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    thread_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Parent chain for nested replies; direct thread replies have parent_post_id = NULL.
    parent_post_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )

    user_id: Mapped[str] = mapped_column(Text, nullable=False)
    author_name: Mapped[str] = mapped_column(Text, nullable=False, default="--")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # Attachment URLs uploaded directly to object storage by the client.
    attachments: Mapped[list[str] | None] = mapped_column(JSON, nullable=True)

    depth: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
