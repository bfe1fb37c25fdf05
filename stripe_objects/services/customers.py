"""Customer operations."""
from typing import Any, Dict, List, Optional

import structlog

from stripe_objects.objects import StripeCustomer
from stripe_objects.services.base import StripeService

logger = structlog.get_logger(__name__)


class StripeCustomerService(StripeService):
    """Create, read, update, delete and search customers."""

    resource = "customers"

    def create(self, customer: StripeCustomer) -> StripeCustomer:
        created = StripeCustomer.from_stripe_object(self._request("create", customer.to_params()))
        logger.info("stripe_customer_created", customer_id=created.id)
        return created

    def get(self, customer_id: str) -> StripeCustomer:
        return StripeCustomer.from_stripe_object(self._request("retrieve", customer_id))

    def update(self, customer_id: str, customer: StripeCustomer) -> StripeCustomer:
        updated = StripeCustomer.from_stripe_object(
            self._request("update", customer_id, customer.to_params())
        )
        logger.info("stripe_customer_updated", customer_id=customer_id)
        return updated

    def delete(self, customer_id: str) -> bool:
        """Delete a customer; returns Stripe's ``deleted`` flag."""
        deleted = self._deleted(self._request("delete", customer_id))
        logger.info("stripe_customer_deleted", customer_id=customer_id, deleted=deleted)
        return deleted

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripeCustomer]:
        return self._request_list(StripeCustomer, params)

    def search(self, query: str, params: Optional[Dict[str, Any]] = None) -> List[StripeCustomer]:
        """Search customers with Stripe's search query language, e.g. ``email:'a@b.c'``."""
        return self._request_search(StripeCustomer, query, params)
