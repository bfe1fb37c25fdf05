"""
Fluent builders for Stripe objects.

    customer = (
        StripeBuilder().customer()
        .with_email("ada@example.com")
        .with_name("Ada Lovelace")
        .build()
    )
"""
from typing import Any, Callable, Dict, Generic, Type

from stripe_objects.objects import (
    StripeAddress,
    StripeBankAccount,
    StripeBillingCycleAnchorConfig,
    StripeCustomUnitAmount,
    StripeCustomer,
    StripeFinancialConnection,
    StripePaymentIntent,
    StripePaymentMethod,
    StripePhaseItem,
    StripePrice,
    StripeProduct,
    StripeProductTier,
    StripeRecurring,
    StripeSetupIntent,
    StripeShipping,
    StripeSubscription,
    StripeSubscriptionItem,
    StripeSubscriptionSchedule,
    StripeSubscriptionSchedulePhase,
    StripeTransactionRefresh,
    StripeWebhookEndpoint,
)
from stripe_objects.objects.base import ModelT


class ObjectBuilder(Generic[ModelT]):
    """Collects field values, then validates them into ``model`` on ``build``."""

    def __init__(self, model: Type[ModelT]):
        self._model = model
        self._fields: Dict[str, Any] = {}

    def set(self, **fields: Any) -> "ObjectBuilder[ModelT]":
        unknown = set(fields) - set(self._model.model_fields)
        if unknown:
            raise AttributeError(
                f"{self._model.__name__} has no field(s): {', '.join(sorted(unknown))}"
            )
        self._fields.update(fields)
        return self

    def __getattr__(self, name: str) -> Callable[[Any], "ObjectBuilder[ModelT]"]:
        if not name.startswith("with_"):
            raise AttributeError(name)
        field = name[len("with_"):]
        if field not in self._model.model_fields:
            raise AttributeError(f"{self._model.__name__} has no field '{field}'")

        def _setter(value: Any) -> "ObjectBuilder[ModelT]":
            self._fields[field] = value
            return self

        return _setter

    def build(self, **overrides: Any) -> ModelT:
        return self._model(**{**self._fields, **overrides})


class StripeBuilder:
    """Entry point returning one builder per Stripe object type."""

    def customer(self) -> ObjectBuilder[StripeCustomer]:
        return ObjectBuilder(StripeCustomer)

    def address(self) -> ObjectBuilder[StripeAddress]:
        return ObjectBuilder(StripeAddress)

    def shipping(self) -> ObjectBuilder[StripeShipping]:
        return ObjectBuilder(StripeShipping)

    def product(self) -> ObjectBuilder[StripeProduct]:
        return ObjectBuilder(StripeProduct)

    def price(self) -> ObjectBuilder[StripePrice]:
        return ObjectBuilder(StripePrice)

    def recurring(self) -> ObjectBuilder[StripeRecurring]:
        return ObjectBuilder(StripeRecurring)

    def tier(self) -> ObjectBuilder[StripeProductTier]:
        return ObjectBuilder(StripeProductTier)

    def custom_unit_amount(self) -> ObjectBuilder[StripeCustomUnitAmount]:
        return ObjectBuilder(StripeCustomUnitAmount)

    def subscription(self) -> ObjectBuilder[StripeSubscription]:
        return ObjectBuilder(StripeSubscription)

    def subscription_item(self) -> ObjectBuilder[StripeSubscriptionItem]:
        return ObjectBuilder(StripeSubscriptionItem)

    def billing_cycle_anchor_config(self) -> ObjectBuilder[StripeBillingCycleAnchorConfig]:
        return ObjectBuilder(StripeBillingCycleAnchorConfig)

    def subscription_schedule(self) -> ObjectBuilder[StripeSubscriptionSchedule]:
        return ObjectBuilder(StripeSubscriptionSchedule)

    def phase(self) -> ObjectBuilder[StripeSubscriptionSchedulePhase]:
        return ObjectBuilder(StripeSubscriptionSchedulePhase)

    def phase_item(self) -> ObjectBuilder[StripePhaseItem]:
        return ObjectBuilder(StripePhaseItem)

    def payment_intent(self) -> ObjectBuilder[StripePaymentIntent]:
        return ObjectBuilder(StripePaymentIntent)

    def setup_intent(self) -> ObjectBuilder[StripeSetupIntent]:
        return ObjectBuilder(StripeSetupIntent)

    def payment_method(self) -> ObjectBuilder[StripePaymentMethod]:
        return ObjectBuilder(StripePaymentMethod)

    def webhook_endpoint(self) -> ObjectBuilder[StripeWebhookEndpoint]:
        return ObjectBuilder(StripeWebhookEndpoint)

    def bank_account(self) -> ObjectBuilder[StripeBankAccount]:
        return ObjectBuilder(StripeBankAccount)

    def transaction_refresh(self) -> ObjectBuilder[StripeTransactionRefresh]:
        return ObjectBuilder(StripeTransactionRefresh)

    def financial_connection(self) -> ObjectBuilder[StripeFinancialConnection]:
        return ObjectBuilder(StripeFinancialConnection)
