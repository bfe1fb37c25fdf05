"""Price operations."""
from typing import Any, Dict, List, Optional

import structlog

from stripe_objects.objects import StripePrice
from stripe_objects.objects.base import parse_list
from stripe_objects.services.base import StripeService

logger = structlog.get_logger(__name__)


class StripePriceService(StripeService):
    """
    Manage prices.

    Prices cannot be deleted and their amounts cannot change; ``update`` only
    sends the mutable fields and retiring a price means archiving it.
    """

    resource = "prices"

    def create(self, price: StripePrice) -> StripePrice:
        created = StripePrice.from_stripe_object(self._request("create", price.to_params()))
        logger.info("stripe_price_created", price_id=created.id, product_id=created.product)
        return created

    def get(self, price_id: str) -> StripePrice:
        return StripePrice.from_stripe_object(self._request("retrieve", price_id))

    def update(self, price_id: str, price: StripePrice) -> StripePrice:
        params = price.to_params(*StripePrice.immutable_fields)
        return StripePrice.from_stripe_object(self._request("update", price_id, params))

    def archive(self, price_id: str) -> StripePrice:
        return StripePrice.from_stripe_object(
            self._request("update", price_id, {"active": False})
        )

    def reactivate(self, price_id: str) -> StripePrice:
        return StripePrice.from_stripe_object(
            self._request("update", price_id, {"active": True})
        )

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripePrice]:
        return self._request_list(StripePrice, params)

    def list_by_product(
        self, product_id: str, params: Optional[Dict[str, Any]] = None
    ) -> List[StripePrice]:
        return self._request_list(StripePrice, {**(params or {}), "product": product_id})

    def search(self, query: str, params: Optional[Dict[str, Any]] = None) -> List[StripePrice]:
        return self._request_search(StripePrice, query, params)

    def get_by_lookup_key(self, lookup_key: str) -> Optional[StripePrice]:
        """First price with ``lookup_key``, or None."""
        prices = parse_list(StripePrice, self._request("list", {"lookup_keys": [lookup_key]}))
        return prices[0] if prices else None
