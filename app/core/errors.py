"""
Domain error types raised by services.

Each error carries a user-facing message and the HTTP status it maps to; the
application registers one handler that renders them as {success, message}.
"""

from fastapi import status


class HallPointError(Exception):
    """Base class for errors that map to a client-visible HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class UnauthorizedError(HallPointError):
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(HallPointError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(HallPointError):
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(HallPointError):
    """Missing required fields or an invalid value in the request."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateVoteError(ValidationError):
    """The voter already liked this upcoming meal."""


class DuplicateRequestError(ValidationError):
    """The user already requested this meal."""


class InternalFaultError(HallPointError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class PaymentNotConfiguredError(HallPointError):
    """Raised when a payment intent is requested but STRIPE_SECRET_KEY is missing."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class PaymentProviderError(HallPointError):
    """Raised when Stripe is unreachable or rejects the request."""

    status_code = status.HTTP_502_BAD_GATEWAY
