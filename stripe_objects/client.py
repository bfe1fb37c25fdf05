"""Construction of the real ``stripe.StripeClient`` from settings."""
from typing import Optional

import stripe
import structlog

from stripe_objects.config import Settings, get_settings
from stripe_objects.errors import ConfigurationError

logger = structlog.get_logger(__name__)


def build_client(settings: Optional[Settings] = None) -> stripe.StripeClient:
    """
    Create a Stripe client from configured credentials.

    Args:
        settings: Settings to read the secret key from (cached settings if omitted)

    Returns:
        stripe.StripeClient: Client bound to the secret key

    Raises:
        ConfigurationError: If no secret key is configured
    """
    settings = settings or get_settings()

    if not settings.stripe_secret_key:
        raise ConfigurationError(
            "Stripe secret key is not configured. Set STRIPE_SECRET_KEY."
        )

    if settings.stripe_api_version:
        client = stripe.StripeClient(
            settings.stripe_secret_key,
            stripe_version=settings.stripe_api_version,
        )
    else:
        client = stripe.StripeClient(settings.stripe_secret_key)

    logger.info(
        "stripe_client_initialized",
        api_version=settings.stripe_api_version,
        test_mode=settings.is_test_mode,
    )

    return client
