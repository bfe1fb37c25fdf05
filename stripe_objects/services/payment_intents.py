"""Payment intent operations."""
from typing import Any, Dict, List, Optional

import structlog

from stripe_objects.objects import StripePaymentIntent
from stripe_objects.services.base import StripeService

logger = structlog.get_logger(__name__)


class StripePaymentIntentService(StripeService):
    """Drive payment intents through confirmation, capture and cancellation."""

    resource = "payment_intents"

    def create(self, payment_intent: StripePaymentIntent) -> StripePaymentIntent:
        created = StripePaymentIntent.from_stripe_object(
            self._request("create", payment_intent.to_params())
        )
        logger.info(
            "payment_intent_created",
            payment_intent_id=created.id,
            status=created.status.value if created.status else None,
        )
        return created

    def get(self, payment_intent_id: str) -> StripePaymentIntent:
        return StripePaymentIntent.from_stripe_object(
            self._request("retrieve", payment_intent_id)
        )

    def update(
        self, payment_intent_id: str, payment_intent: StripePaymentIntent
    ) -> StripePaymentIntent:
        return StripePaymentIntent.from_stripe_object(
            self._request("update", payment_intent_id, payment_intent.to_params())
        )

    def confirm(
        self, payment_intent_id: str, params: Optional[Dict[str, Any]] = None
    ) -> StripePaymentIntent:
        confirmed = StripePaymentIntent.from_stripe_object(
            self._request("confirm", payment_intent_id, dict(params or {}))
        )
        logger.info(
            "payment_intent_confirmed",
            payment_intent_id=payment_intent_id,
            status=confirmed.status.value if confirmed.status else None,
        )
        return confirmed

    def cancel(
        self, payment_intent_id: str, params: Optional[Dict[str, Any]] = None
    ) -> StripePaymentIntent:
        logger.info("payment_intent_canceled", payment_intent_id=payment_intent_id)
        return StripePaymentIntent.from_stripe_object(
            self._request("cancel", payment_intent_id, dict(params or {}))
        )

    def capture(
        self, payment_intent_id: str, params: Optional[Dict[str, Any]] = None
    ) -> StripePaymentIntent:
        logger.info("payment_intent_captured", payment_intent_id=payment_intent_id)
        return StripePaymentIntent.from_stripe_object(
            self._request("capture", payment_intent_id, dict(params or {}))
        )

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripePaymentIntent]:
        return self._request_list(StripePaymentIntent, params)

    def search(
        self, query: str, params: Optional[Dict[str, Any]] = None
    ) -> List[StripePaymentIntent]:
        return self._request_search(StripePaymentIntent, query, params)
