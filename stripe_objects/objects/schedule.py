"""Subscription schedules, their phases and phase items."""
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BeforeValidator

from stripe_objects.enums import (
    CollectionMethod,
    SubscriptionScheduleEndBehavior,
    SubscriptionScheduleProrationBehavior,
    SubscriptionScheduleStatus,
)
from stripe_objects.objects.base import (
    ExpandableId,
    Metadata,
    StripeModel,
    Timestamp,
    unwrap_list,
)


class StripePhaseItem(StripeModel):
    """A price billed during a schedule phase."""

    price: Optional[ExpandableId] = None
    quantity: Optional[int] = 1
    metadata: Optional[Metadata] = None


class StripeSubscriptionSchedulePhase(StripeModel):
    """
    One period of a subscription schedule.

    Also used for a schedule's ``default_settings``, which share the phase
    shape without dates or items.
    """

    start_date: Optional[Union[Timestamp, Literal["now"]]] = None
    end_date: Optional[Timestamp] = None
    items: Optional[Annotated[List[StripePhaseItem], BeforeValidator(unwrap_list)]] = None
    iterations: Optional[int] = None
    proration_behavior: Optional[SubscriptionScheduleProrationBehavior] = None
    trial_period_days: Optional[int] = None
    trial_end: Optional[Timestamp] = None
    default_payment_method: Optional[ExpandableId] = None
    default_tax_rates: Optional[List[Any]] = None
    collection_method: Optional[CollectionMethod] = None
    currency: Optional[str] = None
    invoice_settings: Optional[Dict[str, Any]] = None
    metadata: Optional[Metadata] = None


class StripeSubscriptionSchedule(StripeModel):
    """Planned sequence of changes to a subscription."""

    service = "StripeSubscriptionScheduleService"

    id: Optional[str] = None
    canceled_at: Optional[Timestamp] = None
    completed_at: Optional[Timestamp] = None
    created: Optional[Timestamp] = None
    customer: Optional[ExpandableId] = None
    default_settings: Optional[StripeSubscriptionSchedulePhase] = None
    end_behavior: Optional[SubscriptionScheduleEndBehavior] = None
    livemode: Optional[bool] = None
    metadata: Optional[Metadata] = None
    phases: Optional[List[StripeSubscriptionSchedulePhase]] = None
    released_at: Optional[Timestamp] = None
    released_subscription: Optional[ExpandableId] = None
    status: Optional[SubscriptionScheduleStatus] = None
    subscription: Optional[ExpandableId] = None
    test_clock: Optional[ExpandableId] = None

    read_only_fields = StripeModel.read_only_fields | {
        "canceled_at",
        "completed_at",
        "released_at",
        "released_subscription",
        "status",
        "subscription",
        "test_clock",
    }

    def add_phase(self, item: StripePhaseItem) -> "StripeSubscriptionSchedule":
        """Return a copy with a new phase billing ``item`` appended."""
        phase = StripeSubscriptionSchedulePhase(items=[item])
        return self.with_fields(phases=[*(self.phases or []), phase])
