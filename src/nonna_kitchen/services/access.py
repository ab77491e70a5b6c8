"""Ownership and role checks shared by the domain services."""

from __future__ import annotations

from typing import Protocol

from nonna_kitchen.core.security import Identity
from nonna_kitchen.core.settings import settings
from nonna_kitchen.services.errors import Forbidden


class RoleChecker(Protocol):
    """Capability check against the identity provider's role assignments."""

    def has_role(self, identity: Identity, role: str) -> bool:
        ...


class ClaimsRoleChecker:
    """Role checker that trusts the ``roles`` claim of the identity token."""

    def has_role(self, identity: Identity, role: str) -> bool:
        return role in identity.roles


def is_admin(identity: Identity | None, checker: RoleChecker) -> bool:
    """Return True if ``identity`` holds the configured admin role."""
    if identity is None:
        return False
    return checker.has_role(identity, settings.admin_role)


def ensure_owner(owner_id: str | None, identity: Identity) -> None:
    """Raise ``Forbidden`` unless ``identity`` owns the resource."""
    if owner_id is None or owner_id != identity.id:
        raise Forbidden("Forbidden")


def ensure_owner_or_admin(
    owner_id: str | None,
    identity: Identity,
    checker: RoleChecker,
) -> None:
    """Raise ``Forbidden`` unless ``identity`` owns the resource or is an admin."""
    if owner_id is not None and owner_id == identity.id:
        return
    if is_admin(identity, checker):
        return
    raise Forbidden("Forbidden")


def ensure_admin(identity: Identity, checker: RoleChecker) -> None:
    """Raise ``Forbidden`` unless ``identity`` is an admin."""
    if not is_admin(identity, checker):
        raise Forbidden("Admin permission required")
