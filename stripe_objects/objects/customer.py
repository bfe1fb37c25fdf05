"""Customer objects."""
from typing import Any, Optional

from pydantic import model_validator

from stripe_objects.objects.base import Metadata, StripeModel, Timestamp
from stripe_objects.objects.support import StripeAddress, StripeShipping


class StripeCustomer(StripeModel):
    """A Stripe customer."""

    service = "StripeCustomerService"

    id: Optional[str] = None
    address: Optional[StripeAddress] = None
    description: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    shipping: Optional[StripeShipping] = None
    metadata: Optional[Metadata] = None
    balance: Optional[int] = None
    currency: Optional[str] = None
    created: Optional[Timestamp] = None
    livemode: Optional[bool] = None

    read_only_fields = StripeModel.read_only_fields | {"currency"}

    @model_validator(mode="before")
    @classmethod
    def drop_incomplete_shipping(cls, data: Any) -> Any:
        """Stripe requires both address and name for shipping."""
        if isinstance(data, dict):
            shipping = data.get("shipping")
            if isinstance(shipping, dict) and not (shipping.get("address") and shipping.get("name")):
                data = {**data, "shipping": None}
        return data
