"""Shared API dependencies for authentication and collaborator clients."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from nonna_kitchen.core.security import Identity, InvalidTokenError, decode_identity
from nonna_kitchen.db.session import get_db
from nonna_kitchen.services.access import ClaimsRoleChecker, RoleChecker
from nonna_kitchen.services.moderation import ModerationGate, get_moderation_gate
from nonna_kitchen.services.payments import PaymentClient, get_payment_client
from nonna_kitchen.services.realtime import RelayClient, get_relay_client
from nonna_kitchen.services.translation import TranslationClient, get_translation_client

# Missing credentials are reported as 401 by get_current_identity.
bearer_scheme = HTTPBearer(auto_error=False)

BearerDep = Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)]

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def _unauthorized(detail: str = "Unauthorized") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_identity(credentials: BearerDep) -> Identity:
    """Resolve the caller from the bearer token.

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    if credentials is None:
        raise _unauthorized()
    try:
        return decode_identity(credentials.credentials)
    except InvalidTokenError as err:
        raise _unauthorized("Could not validate credentials") from err


def get_optional_identity(credentials: BearerDep) -> Identity | None:
    """Resolve the caller when a token is present; anonymous otherwise."""
    if credentials is None:
        return None
    try:
        return decode_identity(credentials.credentials)
    except InvalidTokenError as err:
        raise _unauthorized("Could not validate credentials") from err


def get_role_checker() -> RoleChecker:
    return ClaimsRoleChecker()


def get_moderation_gate_dep() -> ModerationGate:
    """Return the shared moderation gate."""
    return get_moderation_gate()


def get_relay_client_dep() -> RelayClient:
    """Return the shared realtime relay client."""
    return get_relay_client()


def get_translation_client_dep() -> TranslationClient:
    """Return the shared translation client."""
    return get_translation_client()


def get_payment_client_dep() -> PaymentClient:
    """Return the shared payment client."""
    return get_payment_client()


CurrentIdentityDep = Annotated[Identity, Depends(get_current_identity)]
OptionalIdentityDep = Annotated[Identity | None, Depends(get_optional_identity)]
RoleCheckerDep = Annotated[RoleChecker, Depends(get_role_checker)]
ModerationGateDep = Annotated[ModerationGate, Depends(get_moderation_gate_dep)]
RelayClientDep = Annotated[RelayClient, Depends(get_relay_client_dep)]
TranslationClientDep = Annotated[TranslationClient, Depends(get_translation_client_dep)]
PaymentClientDep = Annotated[PaymentClient, Depends(get_payment_client_dep)]
