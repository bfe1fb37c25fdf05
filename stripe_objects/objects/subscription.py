"""Subscriptions and their items."""
from typing import Annotated, List, Optional

from pydantic import BeforeValidator

from stripe_objects.enums import CollectionMethod, ProrationBehavior, SubscriptionStatus
from stripe_objects.objects.base import (
    ExpandableId,
    Metadata,
    StripeModel,
    Timestamp,
    unwrap_list,
)


class StripeBillingCycleAnchorConfig(StripeModel):
    """Fixed calendar position for the billing cycle anchor."""

    day_of_month: Optional[int] = None
    month: Optional[int] = None
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None


class StripeSubscriptionItem(StripeModel):
    """One price line of a subscription."""

    id: Optional[str] = None
    price: Optional[ExpandableId] = None
    quantity: Optional[int] = None
    current_period_start: Optional[Timestamp] = None
    current_period_end: Optional[Timestamp] = None
    metadata: Optional[Metadata] = None


class StripeSubscription(StripeModel):
    """A customer's subscription to one or more prices."""

    service = "StripeSubscriptionService"

    id: Optional[str] = None
    customer: Optional[ExpandableId] = None
    status: Optional[SubscriptionStatus] = None
    current_period_start: Optional[Timestamp] = None
    current_period_end: Optional[Timestamp] = None
    cancel_at: Optional[Timestamp] = None
    canceled_at: Optional[Timestamp] = None
    trial_start: Optional[Timestamp] = None
    trial_end: Optional[Timestamp] = None
    items: Optional[Annotated[List[StripeSubscriptionItem], BeforeValidator(unwrap_list)]] = None
    default_payment_method: Optional[ExpandableId] = None
    metadata: Optional[Metadata] = None
    currency: Optional[str] = None
    collection_method: Optional[CollectionMethod] = None
    billing_cycle_anchor: Optional[Timestamp] = None
    billing_cycle_anchor_config: Optional[StripeBillingCycleAnchorConfig] = None
    cancel_at_period_end: Optional[bool] = None
    days_until_due: Optional[int] = None
    description: Optional[str] = None
    proration_behavior: Optional[ProrationBehavior] = None
    created: Optional[Timestamp] = None
    livemode: Optional[bool] = None

    read_only_fields = StripeModel.read_only_fields | {
        "status",
        "current_period_start",
        "current_period_end",
        "canceled_at",
        "trial_start",
    }

    @property
    def is_active(self) -> bool:
        return self.status in (SubscriptionStatus.ACTIVE, SubscriptionStatus.TRIALING)
