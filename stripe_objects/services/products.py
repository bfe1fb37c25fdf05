"""Product operations."""
from typing import Any, Dict, List, Optional

import structlog

from stripe_objects.objects import StripeProduct
from stripe_objects.services.base import StripeService

logger = structlog.get_logger(__name__)


class StripeProductService(StripeService):
    """Manage products, including archiving via the ``active`` flag."""

    resource = "products"

    def create(self, product: StripeProduct) -> StripeProduct:
        created = StripeProduct.from_stripe_object(self._request("create", product.to_params()))
        logger.info("stripe_product_created", product_id=created.id)
        return created

    def get(self, product_id: str) -> StripeProduct:
        return StripeProduct.from_stripe_object(self._request("retrieve", product_id))

    def update(self, product_id: str, product: StripeProduct) -> StripeProduct:
        return StripeProduct.from_stripe_object(
            self._request("update", product_id, product.to_params())
        )

    def delete(self, product_id: str) -> bool:
        return self._deleted(self._request("delete", product_id))

    def archive(self, product_id: str) -> StripeProduct:
        logger.info("stripe_product_archived", product_id=product_id)
        return StripeProduct.from_stripe_object(
            self._request("update", product_id, {"active": False})
        )

    def reactivate(self, product_id: str) -> StripeProduct:
        logger.info("stripe_product_reactivated", product_id=product_id)
        return StripeProduct.from_stripe_object(
            self._request("update", product_id, {"active": True})
        )

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripeProduct]:
        return self._request_list(StripeProduct, params)

    def search(self, query: str, params: Optional[Dict[str, Any]] = None) -> List[StripeProduct]:
        return self._request_search(StripeProduct, query, params)
