"""Webhook endpoint operations."""
from typing import Any, Dict, List, Optional

import structlog

from stripe_objects.objects import StripeWebhookEndpoint
from stripe_objects.services.base import StripeService

logger = structlog.get_logger(__name__)


class StripeWebhookEndpointService(StripeService):
    """Register, update, list and remove webhook endpoints."""

    resource = "webhook_endpoints"

    def create(self, endpoint: StripeWebhookEndpoint) -> StripeWebhookEndpoint:
        """Register an endpoint; only the returned object carries its signing secret."""
        created = StripeWebhookEndpoint.from_stripe_object(
            self._request("create", endpoint.to_params())
        )
        logger.info("webhook_endpoint_created", endpoint_id=created.id, url=created.url)
        return created

    def get(self, endpoint_id: str) -> StripeWebhookEndpoint:
        return StripeWebhookEndpoint.from_stripe_object(self._request("retrieve", endpoint_id))

    def update(self, endpoint_id: str, endpoint: StripeWebhookEndpoint) -> StripeWebhookEndpoint:
        return StripeWebhookEndpoint.from_stripe_object(
            self._request("update", endpoint_id, endpoint.to_params("api_version"))
        )

    def delete(self, endpoint_id: str) -> StripeWebhookEndpoint:
        logger.info("webhook_endpoint_deleted", endpoint_id=endpoint_id)
        return StripeWebhookEndpoint.from_stripe_object(self._request("delete", endpoint_id))

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripeWebhookEndpoint]:
        return self._request_list(StripeWebhookEndpoint, params)
