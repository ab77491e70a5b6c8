"""Print payment Pydantic schemas."""

from pydantic import BaseModel, Field

from .common import RequestModel


class CheckoutRequest(RequestModel):
    """Schema for starting a print checkout."""

    success_url: str = Field(..., min_length=1)
    cancel_url: str = Field(..., min_length=1)


class CheckoutResponse(BaseModel):
    """Hosted checkout page the client should redirect to."""

    url: str


class PaymentVerifyRequest(RequestModel):
    """Schema for confirming a completed checkout session."""

    session_id: str = Field(..., min_length=1)


class PaymentVerifyResponse(BaseModel):
    """Result of a successful verification."""

    message: str
    payment_intent_id: str
    amount: int
