"""Payment intents, setup intents and payment methods."""
from typing import Any, Dict, List, Optional

from stripe_objects.enums import (
    PaymentIntentCaptureMethod,
    PaymentIntentConfirmationMethod,
    PaymentIntentSetupFutureUsage,
    PaymentIntentStatus,
    PaymentMethodType,
    SetupIntentStatus,
    SetupIntentUsage,
)
from stripe_objects.objects.base import ExpandableId, Metadata, StripeModel, Timestamp
from stripe_objects.objects.support import StripeBillingDetails


class StripePaymentIntent(StripeModel):
    """An attempt to collect a payment."""

    service = "StripePaymentIntentService"

    id: Optional[str] = None
    amount: Optional[int] = None
    amount_capturable: Optional[int] = None
    amount_received: Optional[int] = None
    currency: Optional[str] = None
    customer: Optional[ExpandableId] = None
    description: Optional[str] = None
    invoice: Optional[ExpandableId] = None
    payment_method: Optional[ExpandableId] = None
    status: Optional[PaymentIntentStatus] = None
    capture_method: Optional[PaymentIntentCaptureMethod] = None
    confirmation_method: Optional[PaymentIntentConfirmationMethod] = None
    setup_future_usage: Optional[PaymentIntentSetupFutureUsage] = None
    created: Optional[Timestamp] = None
    client_secret: Optional[str] = None
    last_payment_error: Optional[Dict[str, Any]] = None
    payment_method_types: Optional[List[str]] = None
    metadata: Optional[Metadata] = None
    livemode: Optional[bool] = None

    read_only_fields = StripeModel.read_only_fields | {
        "amount_capturable",
        "amount_received",
        "client_secret",
        "invoice",
        "last_payment_error",
        "status",
    }

    @property
    def is_succeeded(self) -> bool:
        return self.status == PaymentIntentStatus.SUCCEEDED


class StripeSetupIntent(StripeModel):
    """An attempt to save a payment method for later use."""

    service = "StripeSetupIntentService"

    id: Optional[str] = None
    customer: Optional[ExpandableId] = None
    description: Optional[str] = None
    payment_method: Optional[ExpandableId] = None
    status: Optional[SetupIntentStatus] = None
    usage: Optional[SetupIntentUsage] = None
    created: Optional[Timestamp] = None
    client_secret: Optional[str] = None
    last_setup_error: Optional[Dict[str, Any]] = None
    payment_method_types: Optional[List[str]] = None
    metadata: Optional[Metadata] = None
    livemode: Optional[bool] = None

    read_only_fields = StripeModel.read_only_fields | {
        "client_secret",
        "last_setup_error",
        "status",
    }


class StripePaymentMethod(StripeModel):
    """A saved payment instrument."""

    service = "StripePaymentMethodService"

    id: Optional[str] = None
    type: Optional[PaymentMethodType] = None
    customer: Optional[ExpandableId] = None
    created: Optional[Timestamp] = None
    billing_details: Optional[StripeBillingDetails] = None
    card: Optional[Dict[str, Any]] = None
    us_bank_account: Optional[Dict[str, Any]] = None
    metadata: Optional[Metadata] = None
    livemode: Optional[bool] = None

    # Attachment goes through attach/detach, not create
    read_only_fields = StripeModel.read_only_fields | {"customer"}
