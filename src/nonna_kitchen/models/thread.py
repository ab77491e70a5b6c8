"""SQLAlchemy models for regional discussion threads."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nonna_kitchen.db.session import Base
from nonna_kitchen.db.time import utcnow

THREAD_SCOPES = ("country", "state")


class Thread(Base):
    """Root-level discussion container tagged with a geography.

    Threads are the entry point of the community forum; replies hang off
    them as ``Post`` rows.
    """

    __tablename__ = "threads"
    __table_args__ = (
        CheckConstraint("scope IN ('country', 'state')", name="ck_threads_scope"),
        Index("ix_threads_region_scope", "region", "scope"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    region: Mapped[str] = mapped_column(Text, nullable=False)
    scope: Mapped[str] = mapped_column(String(16), nullable=False)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    title: Mapped[str] = mapped_column(String(120), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    user_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    # Snapshot of the author's display name at creation time.
    author_name: Mapped[str | None] = mapped_column(Text, nullable=True)

    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
