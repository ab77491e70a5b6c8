"""Identity tokens issued by the external identity provider.

The identity provider signs HS256 JWTs with a secret shared with this
service. Only the claims below are read; everything else about users lives
with the provider.
"""
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from nonna_kitchen.core.settings import settings


class InvalidTokenError(ValueError):
    """Raised when a bearer token cannot be turned into an identity."""


@dataclass(frozen=True)
class Identity:
    """Authenticated caller as described by the identity provider."""

    id: str
    display_name: str | None = None
    email: str | None = None
    roles: frozenset[str] = field(default_factory=frozenset)


def decode_identity(token: str) -> Identity:
    """Validate ``token`` and return the identity it describes.

    Raises:
        InvalidTokenError: If the signature, expiry or subject is invalid.
    """
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise InvalidTokenError("Could not validate credentials") from err

    subject = payload.get("sub")
    if not subject or not isinstance(subject, str):
        raise InvalidTokenError("Could not validate credentials")

    roles = payload.get("roles") or []
    if isinstance(roles, str):
        roles = [roles]

    return Identity(
        id=subject,
        display_name=payload.get("name") or None,
        email=payload.get("email") or None,
        roles=frozenset(str(role) for role in roles),
    )


def create_access_token(
    subject: str,
    *,
    display_name: str | None = None,
    email: str | None = None,
    roles: Iterable[str] = (),
) -> str:
    """Create a token in the identity provider's format.

    Used by tooling and tests; production tokens come from the provider.
    """
    to_encode: dict[str, object] = {"sub": subject}
    if display_name:
        to_encode["name"] = display_name
    if email:
        to_encode["email"] = email
    role_list = list(roles)
    if role_list:
        to_encode["roles"] = role_list
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt
