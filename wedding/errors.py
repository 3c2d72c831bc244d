"""
Domain errors raised by the services and mapped to HTTP responses in the app.
"""

from __future__ import annotations


class WeddingError(Exception):
    """Base error carrying the HTTP status and a guest-facing detail."""

    status_code = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class ValidationFailedError(WeddingError):
    status_code = 400


class InvalidCodeError(WeddingError):
    status_code = 401


class AccessDeniedError(WeddingError):
    status_code = 403


class NotFoundError(WeddingError):
    status_code = 404


class ConflictError(WeddingError):
    status_code = 409


class LimitReachedError(ConflictError):
    """Raised when a guest has no photo slots left."""
