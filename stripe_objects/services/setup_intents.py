"""Setup intent operations."""
from typing import Any, Dict, List, Optional

from stripe_objects.objects import StripeSetupIntent
from stripe_objects.services.base import StripeService


class StripeSetupIntentService(StripeService):
    """Create, update, confirm and cancel setup intents."""

    resource = "setup_intents"

    def create(self, setup_intent: StripeSetupIntent) -> StripeSetupIntent:
        return StripeSetupIntent.from_stripe_object(
            self._request("create", setup_intent.to_params())
        )

    def get(self, setup_intent_id: str) -> StripeSetupIntent:
        return StripeSetupIntent.from_stripe_object(self._request("retrieve", setup_intent_id))

    def update(self, setup_intent_id: str, setup_intent: StripeSetupIntent) -> StripeSetupIntent:
        return StripeSetupIntent.from_stripe_object(
            self._request("update", setup_intent_id, setup_intent.to_params())
        )

    def confirm(
        self, setup_intent_id: str, params: Optional[Dict[str, Any]] = None
    ) -> StripeSetupIntent:
        return StripeSetupIntent.from_stripe_object(
            self._request("confirm", setup_intent_id, dict(params or {}))
        )

    def cancel(
        self, setup_intent_id: str, params: Optional[Dict[str, Any]] = None
    ) -> StripeSetupIntent:
        return StripeSetupIntent.from_stripe_object(
            self._request("cancel", setup_intent_id, dict(params or {}))
        )

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripeSetupIntent]:
        return self._request_list(StripeSetupIntent, params)
