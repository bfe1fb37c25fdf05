"""
Shared plumbing for the per-resource services.

Services call the SDK through ``StripeService._request`` so that every call
is logged the same way and SDK failures reach callers as the classified
``StripeError``.
"""
from typing import Any, Dict, List, Optional, Type

import stripe
import structlog

from stripe_objects.client import build_client
from stripe_objects.config import Settings
from stripe_objects.errors import wrap_stripe_error
from stripe_objects.objects.base import ModelT, parse_list, to_plain

logger = structlog.get_logger(__name__)


class StripeService:
    """
    Base class for resource services.

    Args:
        client: ``stripe.StripeClient`` or a compatible fake; built from
            settings when omitted
        settings: Settings used to build the client
    """

    resource: str = ""

    def __init__(self, client: Optional[Any] = None, settings: Optional[Settings] = None):
        self.stripe = client if client is not None else build_client(settings)

    def _request(self, action: str, *args: Any) -> Any:
        """
        Call ``<resource>.<action>`` on the client.

        Args:
            action: SDK method name, e.g. ``retrieve``
            *args: Positional arguments for the SDK method

        Returns:
            Any: Raw SDK response

        Raises:
            StripeError: If the SDK raises
        """
        method = f"{self.resource}.{action}"
        logger.debug("stripe_request", method=method)

        try:
            return getattr(getattr(self.stripe, self.resource), action)(*args)
        except stripe.StripeError as e:
            raise wrap_stripe_error(e, method=method) from e

    def _request_list(self, model: Type[ModelT], params: Optional[Dict[str, Any]] = None) -> List[ModelT]:
        return parse_list(model, self._request("list", dict(params or {})))

    def _request_search(
        self, model: Type[ModelT], query: str, params: Optional[Dict[str, Any]] = None
    ) -> List[ModelT]:
        return parse_list(model, self._request("search", {**(params or {}), "query": query}))

    @staticmethod
    def _deleted(response: Any) -> bool:
        return bool(to_plain(response).get("deleted", False))
