"""
Single entry point bundling every service around one client.

    stripe = Stripe()                       # real client from settings
    stripe = Stripe.fake({"customers.*": StripeFixtures.customer()})
    customer = stripe.customers.get("cus_123")
"""
from functools import cached_property
from typing import Any, List, Optional

from stripe_objects.building import StripeBuilder
from stripe_objects.client import build_client
from stripe_objects.config import Settings
from stripe_objects.objects import (
    StripeCustomer,
    StripeFinancialConnection,
    StripeWebhookEndpoint,
)
from stripe_objects.services import (
    StripeCustomerService,
    StripeInvoiceService,
    StripePaymentIntentService,
    StripePaymentMethodService,
    StripePriceService,
    StripeProductService,
    StripeSetupIntentService,
    StripeSubscriptionScheduleService,
    StripeSubscriptionService,
    StripeWebhookEndpointService,
)
from stripe_objects.testing.fake_client import FakeStripeClient


class Stripe:
    """
    Services sharing one Stripe client.

    Args:
        client: ``stripe.StripeClient`` or ``FakeStripeClient``; built from
            settings when omitted
        settings: Settings used to build the client
    """

    def __init__(self, client: Optional[Any] = None, settings: Optional[Settings] = None):
        self.client = client if client is not None else build_client(settings)

    @classmethod
    def fake(cls, fakes: Optional[dict] = None) -> "Stripe":
        """Facade over a fresh ``FakeStripeClient`` holding ``fakes``."""
        return cls(client=FakeStripeClient(fakes))

    @cached_property
    def customers(self) -> StripeCustomerService:
        return StripeCustomerService(client=self.client)

    @cached_property
    def products(self) -> StripeProductService:
        return StripeProductService(client=self.client)

    @cached_property
    def prices(self) -> StripePriceService:
        return StripePriceService(client=self.client)

    @cached_property
    def subscriptions(self) -> StripeSubscriptionService:
        return StripeSubscriptionService(client=self.client)

    @cached_property
    def subscription_schedules(self) -> StripeSubscriptionScheduleService:
        return StripeSubscriptionScheduleService(client=self.client)

    @cached_property
    def payment_intents(self) -> StripePaymentIntentService:
        return StripePaymentIntentService(client=self.client)

    @cached_property
    def setup_intents(self) -> StripeSetupIntentService:
        return StripeSetupIntentService(client=self.client)

    @cached_property
    def payment_methods(self) -> StripePaymentMethodService:
        return StripePaymentMethodService(client=self.client)

    @cached_property
    def invoices(self) -> StripeInvoiceService:
        return StripeInvoiceService(client=self.client)

    @cached_property
    def webhook_endpoints(self) -> StripeWebhookEndpointService:
        return StripeWebhookEndpointService(client=self.client)

    @staticmethod
    def builder() -> StripeBuilder:
        return StripeBuilder()

    @staticmethod
    def customer(**fields: Any) -> StripeCustomer:
        return StripeCustomer(**fields)

    @staticmethod
    def webhook(url: str, events: Optional[List[str]] = None) -> StripeWebhookEndpoint:
        """Endpoint definition for ``url`` listening to ``events`` (all events by default)."""
        return StripeWebhookEndpoint(url=url, enabled_events=events or ["*"])

    @staticmethod
    def financial_connection(
        customer: str, permissions: Optional[List[str]] = None
    ) -> StripeFinancialConnection:
        if permissions is None:
            return StripeFinancialConnection(customer=customer)
        return StripeFinancialConnection(customer=customer, permissions=permissions)
