"""Typed, immutable views of Stripe API objects."""
from .base import StripeModel, parse_list, to_plain
from .customer import StripeCustomer
from .financial_connections import (
    StripeBankAccount,
    StripeFinancialConnection,
    StripeTransactionRefresh,
)
from .invoice import StripeInvoice, StripeInvoiceLineItem
from .payment import StripePaymentIntent, StripePaymentMethod, StripeSetupIntent
from .product import (
    StripeCustomUnitAmount,
    StripePrice,
    StripeProduct,
    StripeProductTier,
    StripeProductTierCollection,
    StripeRecurring,
)
from .schedule import (
    StripePhaseItem,
    StripeSubscriptionSchedule,
    StripeSubscriptionSchedulePhase,
)
from .subscription import (
    StripeBillingCycleAnchorConfig,
    StripeSubscription,
    StripeSubscriptionItem,
)
from .support import StripeAddress, StripeBillingDetails, StripeShipping
from .webhook import StripeWebhookEndpoint, StripeWebhookEvent

__all__ = [
    "StripeAddress",
    "StripeBankAccount",
    "StripeBillingCycleAnchorConfig",
    "StripeBillingDetails",
    "StripeCustomUnitAmount",
    "StripeCustomer",
    "StripeFinancialConnection",
    "StripeInvoice",
    "StripeInvoiceLineItem",
    "StripeModel",
    "StripePaymentIntent",
    "StripePaymentMethod",
    "StripePhaseItem",
    "StripePrice",
    "StripeProduct",
    "StripeProductTier",
    "StripeProductTierCollection",
    "StripeRecurring",
    "StripeSetupIntent",
    "StripeShipping",
    "StripeSubscription",
    "StripeSubscriptionItem",
    "StripeSubscriptionSchedule",
    "StripeSubscriptionSchedulePhase",
    "StripeTransactionRefresh",
    "StripeWebhookEndpoint",
    "StripeWebhookEvent",
    "parse_list",
    "to_plain",
]
