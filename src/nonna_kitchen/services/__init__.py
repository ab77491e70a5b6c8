"""Business logic services for the Nonna Kitchen application."""

from .access import ClaimsRoleChecker, RoleChecker
from .errors import Forbidden, NotFound, ServiceError, ValidationFailed
from .moderation import ModerationGate
from .payments import PaymentClient
from .realtime import RelayClient
from .translation import TranslationClient

__all__ = [
    "ClaimsRoleChecker",
    "RoleChecker",
    "ServiceError",
    "ValidationFailed",
    "NotFound",
    "Forbidden",
    "ModerationGate",
    "PaymentClient",
    "RelayClient",
    "TranslationClient",
]
