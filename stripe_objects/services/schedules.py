"""Subscription schedule operations."""
from typing import Any, Dict, List, Optional

import structlog

from stripe_objects.objects import StripeSubscriptionSchedule
from stripe_objects.objects.base import parse_list
from stripe_objects.services.base import StripeService

logger = structlog.get_logger(__name__)


class StripeSubscriptionScheduleService(StripeService):
    """Manage subscription schedules."""

    resource = "subscription_schedules"

    def create(self, schedule: StripeSubscriptionSchedule) -> StripeSubscriptionSchedule:
        created = StripeSubscriptionSchedule.from_stripe_object(
            self._request("create", schedule.to_params())
        )
        logger.info("stripe_subscription_schedule_created", schedule_id=created.id)
        return created

    def get(self, schedule_id: str) -> StripeSubscriptionSchedule:
        return StripeSubscriptionSchedule.from_stripe_object(
            self._request("retrieve", schedule_id)
        )

    def update(
        self, schedule_id: str, schedule: StripeSubscriptionSchedule
    ) -> StripeSubscriptionSchedule:
        # The customer of an existing schedule cannot change
        return StripeSubscriptionSchedule.from_stripe_object(
            self._request("update", schedule_id, schedule.to_params("customer"))
        )

    def cancel(
        self,
        schedule_id: str,
        invoice_now: Optional[bool] = None,
        prorate: Optional[bool] = None,
    ) -> StripeSubscriptionSchedule:
        params: Dict[str, Any] = {}
        if invoice_now is not None:
            params["invoice_now"] = invoice_now
        if prorate is not None:
            params["prorate"] = prorate
        logger.info("stripe_subscription_schedule_canceled", schedule_id=schedule_id)
        return StripeSubscriptionSchedule.from_stripe_object(
            self._request("cancel", schedule_id, params)
        )

    def release(
        self, schedule_id: str, preserve_cancel_date: Optional[bool] = None
    ) -> StripeSubscriptionSchedule:
        """Detach the schedule, leaving its subscription in place."""
        params: Dict[str, Any] = {}
        if preserve_cancel_date is not None:
            params["preserve_cancel_date"] = preserve_cancel_date
        logger.info("stripe_subscription_schedule_released", schedule_id=schedule_id)
        return StripeSubscriptionSchedule.from_stripe_object(
            self._request("release", schedule_id, params)
        )

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripeSubscriptionSchedule]:
        return self._request_list(StripeSubscriptionSchedule, params)

    def for_subscription(self, subscription_id: str) -> Optional[StripeSubscriptionSchedule]:
        """The schedule managing ``subscription_id``, or None."""
        schedules = parse_list(
            StripeSubscriptionSchedule,
            self._request("list", {"subscription": subscription_id}),
        )
        return schedules[0] if schedules else None

    def from_subscription(self, subscription_id: str) -> StripeSubscriptionSchedule:
        """Create a schedule that takes over an existing subscription."""
        return StripeSubscriptionSchedule.from_stripe_object(
            self._request("create", {"from_subscription": subscription_id})
        )
