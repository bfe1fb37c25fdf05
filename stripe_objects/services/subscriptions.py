"""Subscription operations."""
from typing import Any, Dict, List, Optional

import structlog

from stripe_objects.objects import StripeSubscription
from stripe_objects.services.base import StripeService

logger = structlog.get_logger(__name__)


class StripeSubscriptionService(StripeService):
    """Create, change and cancel subscriptions."""

    resource = "subscriptions"

    def create(self, subscription: StripeSubscription) -> StripeSubscription:
        created = StripeSubscription.from_stripe_object(
            self._request("create", subscription.to_params())
        )
        logger.info(
            "stripe_subscription_created",
            subscription_id=created.id,
            customer_id=created.customer,
            status=created.status.value if created.status else None,
        )
        return created

    def get(self, subscription_id: str) -> StripeSubscription:
        return StripeSubscription.from_stripe_object(self._request("retrieve", subscription_id))

    def update(self, subscription_id: str, subscription: StripeSubscription) -> StripeSubscription:
        return StripeSubscription.from_stripe_object(
            self._request("update", subscription_id, subscription.to_params())
        )

    def cancel(
        self, subscription_id: str, params: Optional[Dict[str, Any]] = None
    ) -> StripeSubscription:
        """Cancel immediately."""
        logger.info("stripe_subscription_canceled", subscription_id=subscription_id)
        return StripeSubscription.from_stripe_object(
            self._request("cancel", subscription_id, dict(params or {}))
        )

    def cancel_at_period_end(self, subscription_id: str) -> StripeSubscription:
        """Keep the subscription until the current period ends, then cancel."""
        return StripeSubscription.from_stripe_object(
            self._request("update", subscription_id, {"cancel_at_period_end": True})
        )

    def resume(self, subscription_id: str) -> StripeSubscription:
        """Undo a pending ``cancel_at_period_end``."""
        return StripeSubscription.from_stripe_object(
            self._request("update", subscription_id, {"cancel_at_period_end": False})
        )

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripeSubscription]:
        return self._request_list(StripeSubscription, params)

    def search(
        self, query: str, params: Optional[Dict[str, Any]] = None
    ) -> List[StripeSubscription]:
        return self._request_search(StripeSubscription, query, params)
