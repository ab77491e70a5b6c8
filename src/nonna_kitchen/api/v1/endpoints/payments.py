"""Print payment endpoints."""

import logging

from fastapi import APIRouter, HTTPException, status

from nonna_kitchen.schemas.payment import (
    CheckoutRequest,
    CheckoutResponse,
    PaymentVerifyRequest,
    PaymentVerifyResponse,
)
from nonna_kitchen.services.payments import PaymentError, verify_checkout

from ..dependencies import CurrentIdentityDep, PaymentClientDep, SessionDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/checkout", response_model=CheckoutResponse)
async def create_checkout(
    payload: CheckoutRequest,
    current_user: CurrentIdentityDep,
    client: PaymentClientDep,
) -> CheckoutResponse:
    """Start a hosted checkout for a recipe print."""
    try:
        session = await client.create_checkout_session(
            user_id=current_user.id,
            success_url=payload.success_url,
            cancel_url=payload.cancel_url,
        )
    except PaymentError as err:
        logger.error("Checkout for %s failed: %s", current_user.id, err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create checkout session",
        ) from err
    return CheckoutResponse(url=session.url)


@router.post(
    "/verify",
    response_model=PaymentVerifyResponse,
    status_code=status.HTTP_201_CREATED,
)
async def verify_payment(
    payload: PaymentVerifyRequest,
    db: SessionDep,
    current_user: CurrentIdentityDep,
    client: PaymentClientDep,
) -> PaymentVerifyResponse:
    """Record the payment of a completed checkout session."""
    try:
        payment = await verify_checkout(
            db, client=client, user=current_user, session_id=payload.session_id
        )
    except PaymentError as err:
        logger.error("Verifying checkout %s failed: %s", payload.session_id, err)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Payment verification error",
        ) from err
    return PaymentVerifyResponse(
        message="Payment recorded successfully",
        payment_intent_id=payment.provider_reference or "",
        amount=payment.amount,
    )
