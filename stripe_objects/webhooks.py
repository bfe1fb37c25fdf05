"""
Stripe webhook verification and event routing.

Signature checking is delegated to ``stripe.Webhook``; this module adds
header lookup, parsing into ``StripeWebhookEvent`` and per-type handlers.
"""
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Union

import stripe
import structlog

from stripe_objects.config import get_settings
from stripe_objects.errors import ConfigurationError, WebhookError
from stripe_objects.objects.webhook import StripeWebhookEvent, construct_event

logger = structlog.get_logger(__name__)

SIGNATURE_HEADER = "Stripe-Signature"

EventHandler = Callable[[StripeWebhookEvent], Any]


class StripeWebhookHelper:
    """Static helpers for reading webhook requests."""

    @staticmethod
    def construct_event(
        payload: Union[str, bytes], signature: str, secret: str
    ) -> stripe.Event:
        """Verify ``signature`` and return the SDK event (raises ``WebhookError``)."""
        return construct_event(payload, signature, secret)

    @staticmethod
    def get_signature_header(headers: Mapping) -> str:
        """Value of the Stripe-Signature header, or an empty string."""
        wanted = SIGNATURE_HEADER.lower()
        for name, value in headers.items():
            if str(name).lower() == wanted:
                return value
        return ""


class WebhookHandler:
    """
    Verifies webhook requests and routes events to registered handlers.

    Example:
        handler = WebhookHandler(secret="whsec_...")
        handler.register_handler("invoice.paid", on_invoice_paid)
        result = handler.handle(request.body, request.headers["Stripe-Signature"])
    """

    def __init__(self, secret: Optional[str] = None):
        """
        Initialize webhook handler.

        Args:
            secret: Endpoint signing secret (configured secret if omitted)
        """
        self.secret = secret
        self.event_handlers: Dict[str, EventHandler] = {}

    def _signing_secret(self) -> str:
        secret = self.secret or get_settings().stripe_webhook_secret
        if not secret:
            raise ConfigurationError(
                "Stripe webhook secret is not configured. Set STRIPE_WEBHOOK_SECRET."
            )
        return secret

    def register_handler(self, event_type: str, handler: EventHandler) -> None:
        """
        Register a handler for a specific event type.

        Args:
            event_type: Stripe event type (e.g., 'payment_intent.succeeded')
            handler: Callable receiving the parsed ``StripeWebhookEvent``
        """
        self.event_handlers[event_type] = handler
        logger.info("webhook_handler_registered", event_type=event_type)

    def verify(self, payload: Union[str, bytes], signature: str) -> StripeWebhookEvent:
        """
        Verify a request and parse its event.

        Raises:
            WebhookError: If signature verification fails
        """
        return StripeWebhookEvent.from_request(payload, signature, self._signing_secret())

    def process_event(self, event: StripeWebhookEvent) -> Dict[str, Any]:
        """
        Route a verified event to its handler.

        Returns:
            Dict[str, Any]: Processing result

        Raises:
            WebhookError: If the handler raises
        """
        logger.info(
            "processing_webhook_event",
            event_id=event.id,
            event_type=event.type,
        )

        handler = self.event_handlers.get(event.type or "")
        if handler is None:
            logger.info("webhook_no_handler", event_id=event.id, event_type=event.type)
            return {
                "status": "no_handler",
                "event_id": event.id,
                "event_type": event.type,
            }

        try:
            result = handler(event)
        except Exception as e:
            logger.error(
                "webhook_processing_error",
                event_id=event.id,
                event_type=event.type,
                error=str(e),
                exc_info=True,
            )
            raise WebhookError(f"Event processing failed: {str(e)}") from e

        logger.info("webhook_event_processed", event_id=event.id, event_type=event.type)
        return {
            "status": "success",
            "event_id": event.id,
            "event_type": event.type,
            "result": result,
        }

    def handle(self, payload: Union[str, bytes], signature: str) -> Dict[str, Any]:
        """Verify a raw request, then process its event."""
        return self.process_event(self.verify(payload, signature))
