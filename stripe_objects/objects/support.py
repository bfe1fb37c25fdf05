"""Address-like objects embedded in customers, shipping and payment methods."""
from typing import Optional

from stripe_objects.objects.base import StripeModel


class StripeAddress(StripeModel):
    """Postal address."""

    line1: Optional[str] = None
    line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None


class StripeShipping(StripeModel):
    """Shipping recipient and destination."""

    address: Optional[StripeAddress] = None
    name: Optional[str] = None
    phone: Optional[str] = None


class StripeBillingDetails(StripeModel):
    """Billing contact attached to a payment method."""

    address: Optional[StripeAddress] = None
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
