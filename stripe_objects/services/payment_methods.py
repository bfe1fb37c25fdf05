"""Payment method operations."""
from typing import Any, Dict, List, Optional, Union

import structlog

from stripe_objects.enums import PaymentMethodType
from stripe_objects.objects import StripePaymentMethod
from stripe_objects.services.base import StripeService

logger = structlog.get_logger(__name__)


class StripePaymentMethodService(StripeService):
    """Create payment methods and attach them to customers."""

    resource = "payment_methods"

    def create(self, payment_method: StripePaymentMethod) -> StripePaymentMethod:
        return StripePaymentMethod.from_stripe_object(
            self._request("create", payment_method.to_params())
        )

    def get(self, payment_method_id: str) -> StripePaymentMethod:
        return StripePaymentMethod.from_stripe_object(
            self._request("retrieve", payment_method_id)
        )

    def update(
        self, payment_method_id: str, payment_method: StripePaymentMethod
    ) -> StripePaymentMethod:
        # The type of an existing payment method is fixed
        return StripePaymentMethod.from_stripe_object(
            self._request("update", payment_method_id, payment_method.to_params("type"))
        )

    def attach(self, payment_method_id: str, customer_id: str) -> StripePaymentMethod:
        logger.info(
            "payment_method_attached",
            payment_method_id=payment_method_id,
            customer_id=customer_id,
        )
        return StripePaymentMethod.from_stripe_object(
            self._request("attach", payment_method_id, {"customer": customer_id})
        )

    def detach(self, payment_method_id: str) -> StripePaymentMethod:
        logger.info("payment_method_detached", payment_method_id=payment_method_id)
        return StripePaymentMethod.from_stripe_object(self._request("detach", payment_method_id))

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripePaymentMethod]:
        return self._request_list(StripePaymentMethod, params)

    def get_all_for_customer(
        self,
        customer_id: str,
        type: Union[PaymentMethodType, str] = PaymentMethodType.CARD,
    ) -> List[StripePaymentMethod]:
        method_type = type.value if isinstance(type, PaymentMethodType) else type
        return self._request_list(
            StripePaymentMethod, {"customer": customer_id, "type": method_type}
        )
