"""
Exceptions raised by stripe-objects.

SDK failures surface as ``StripeError`` carrying a classification so callers
can decide whether a retry is worthwhile. Retrying itself is left to them.
"""
from enum import Enum
from typing import Optional

import stripe
import structlog

logger = structlog.get_logger(__name__)


class StripeErrorType(Enum):
    """Classification of Stripe errors."""

    TRANSIENT = "transient"
    PERMANENT = "permanent"
    RATE_LIMIT = "rate_limit"


class StripeError(Exception):
    """Base exception for Stripe-related errors."""

    def __init__(
        self,
        message: str,
        error_type: StripeErrorType,
        original_error: Optional[Exception] = None,
    ):
        """
        Initialize Stripe error.

        Args:
            message: Error message
            error_type: Classification of error
            original_error: Original Stripe exception
        """
        super().__init__(message)
        self.error_type = error_type
        self.original_error = original_error

    @property
    def is_retryable(self) -> bool:
        """Whether the failure may succeed when repeated."""
        return self.error_type is not StripeErrorType.PERMANENT


class WebhookError(Exception):
    """Raised when webhook verification or processing fails."""

    pass


class ConfigurationError(Exception):
    """Raised when a required Stripe setting is missing."""

    pass


def classify_error(error: Exception) -> StripeErrorType:
    """
    Classify a Stripe SDK error.

    Args:
        error: Exception raised by the Stripe SDK

    Returns:
        StripeErrorType: Error classification
    """
    if isinstance(error, stripe.RateLimitError):
        return StripeErrorType.RATE_LIMIT
    elif isinstance(error, (stripe.APIConnectionError, stripe.APIError)):
        return StripeErrorType.TRANSIENT
    elif isinstance(
        error,
        (
            stripe.CardError,
            stripe.InvalidRequestError,
            stripe.AuthenticationError,
            stripe.PermissionError,
        ),
    ):
        return StripeErrorType.PERMANENT
    else:
        # Unknown errors are treated as transient
        return StripeErrorType.TRANSIENT


def wrap_stripe_error(error: Exception, method: Optional[str] = None) -> StripeError:
    """
    Log an SDK error and convert it to ``StripeError``.

    Args:
        error: Exception raised by the Stripe SDK
        method: Method identifier of the failed call

    Returns:
        StripeError: Classified error, ready to raise
    """
    error_type = classify_error(error)

    logger.error(
        "stripe_api_error",
        method=method,
        error_type=error_type.value,
        error_code=getattr(error, "code", None),
        error_message=str(error),
    )

    return StripeError(
        message=str(error),
        error_type=error_type,
        original_error=error,
    )
