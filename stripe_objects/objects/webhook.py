"""Webhook endpoints and received webhook events."""
from typing import Any, Dict, List, Optional, Union

import stripe
import structlog
from pydantic import model_validator

from stripe_objects.errors import WebhookError
from stripe_objects.objects.base import Metadata, StripeModel, Timestamp, to_plain
from stripe_objects.objects.invoice import StripeInvoice
from stripe_objects.objects.payment import StripePaymentIntent

logger = structlog.get_logger(__name__)


def construct_event(
    payload: Union[str, bytes], signature: str, secret: str
) -> stripe.Event:
    """
    Verify a webhook signature and construct the event.

    Args:
        payload: Raw request body
        signature: Stripe-Signature header value
        secret: Endpoint signing secret

    Returns:
        stripe.Event: Verified Stripe event

    Raises:
        WebhookError: If the signature or payload is invalid
    """
    try:
        event = stripe.Webhook.construct_event(
            payload=payload,
            sig_header=signature,
            secret=secret,
        )
    except stripe.SignatureVerificationError as e:
        logger.error("webhook_signature_verification_failed", error=str(e))
        raise WebhookError(f"Invalid webhook signature: {str(e)}") from e
    except ValueError as e:
        logger.error("webhook_payload_invalid", error=str(e))
        raise WebhookError(f"Invalid webhook payload: {str(e)}") from e

    logger.info(
        "webhook_signature_verified",
        event_id=event.id,
        event_type=event.type,
    )

    return event


class StripeWebhookEndpoint(StripeModel):
    """A URL Stripe delivers events to."""

    service = "StripeWebhookEndpointService"

    id: Optional[str] = None
    url: Optional[str] = None
    enabled_events: Optional[List[str]] = None
    description: Optional[str] = None
    disabled: Optional[bool] = None
    secret: Optional[str] = None
    status: Optional[str] = None
    api_version: Optional[str] = None
    metadata: Optional[Metadata] = None
    created: Optional[Timestamp] = None
    livemode: Optional[bool] = None

    read_only_fields = StripeModel.read_only_fields | {"secret", "status"}


class StripeWebhookEvent(StripeModel):
    """
    A received webhook event.

    ``data`` holds the event's object: a ``StripeInvoice`` for ``invoice.*``
    events, a ``StripePaymentIntent`` for ``payment_intent.*`` events and a
    plain dict for every other type.
    """

    id: Optional[str] = None
    type: Optional[str] = None
    data: Any = None
    created: Optional[Timestamp] = None
    livemode: Optional[bool] = None
    api_version: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def parse_data_object(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        payload = data.get("data")
        if isinstance(payload, dict) and "object" in payload:
            payload = payload["object"]
        if isinstance(payload, dict):
            event_type = data.get("type") or ""
            if event_type.startswith("invoice."):
                payload = StripeInvoice.from_stripe_object(payload)
            elif event_type.startswith("payment_intent."):
                payload = StripePaymentIntent.from_stripe_object(payload)
        return {**data, "data": payload}

    @classmethod
    def from_stripe_event(cls, event: Any) -> "StripeWebhookEvent":
        return cls.from_stripe_object(event)

    @classmethod
    def from_request(
        cls, payload: Union[str, bytes], signature: str, secret: str
    ) -> "StripeWebhookEvent":
        """Verify a raw webhook request and parse its event."""
        return cls.from_stripe_event(construct_event(payload, signature, secret))

    def as_invoice(self) -> Optional[StripeInvoice]:
        return self.data if isinstance(self.data, StripeInvoice) else None

    def as_payment_intent(self) -> Optional[StripePaymentIntent]:
        return self.data if isinstance(self.data, StripePaymentIntent) else None

    def as_raw(self) -> Optional[Dict[str, Any]]:
        return self.data if isinstance(self.data, dict) else None

    def to_dict(self) -> Dict[str, Any]:
        result = self.model_dump(mode="json", exclude_none=True, exclude={"data"})
        if isinstance(self.data, StripeModel):
            result["data"] = {"object": self.data.to_dict()}
        elif self.data is not None:
            result["data"] = {"object": to_plain(self.data)}
        return result
