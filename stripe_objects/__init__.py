"""Typed Stripe objects, per-resource services and an offline fake client."""
from .building import ObjectBuilder, StripeBuilder
from .client import build_client
from .errors import ConfigurationError, StripeError, StripeErrorType, WebhookError
from .facade import Stripe
from .webhooks import StripeWebhookHelper, WebhookHandler

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "ObjectBuilder",
    "Stripe",
    "StripeBuilder",
    "StripeError",
    "StripeErrorType",
    "StripeWebhookHelper",
    "WebhookError",
    "WebhookHandler",
    "build_client",
]
