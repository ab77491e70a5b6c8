"""Models recording verified print payments."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from nonna_kitchen.db.session import Base
from nonna_kitchen.db.time import utcnow

# Payment-intent states reported by the payment provider.
PAYMENT_STATUSES = (
    "processing",
    "succeeded",
    "requires_payment_method",
    "requires_action",
    "requires_capture",
    "canceled",
)


class Payment(Base):
    """Payment confirmed by the payment provider."""

    __tablename__ = "payments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    # Amount in minor currency units (cents).
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False)
    # Provider payment-intent identifier; one payment row per intent.
    provider_reference: Mapped[str | None] = mapped_column(Text, nullable=True, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
