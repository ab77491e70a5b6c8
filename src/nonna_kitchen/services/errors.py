"""Exceptions raised by the domain services.

The API layer maps these onto HTTP responses; services never build
responses themselves.
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    """Base class for domain failures that carry a client-facing message."""

    status_code = 500

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ValidationFailed(ServiceError):
    """Input violated a domain constraint (length, depth, moderation)."""

    status_code = 400


class NotFound(ServiceError):
    """A referenced entity does not exist."""

    status_code = 404


class Forbidden(ServiceError):
    """The caller is authenticated but may not act on the resource."""

    status_code = 403
