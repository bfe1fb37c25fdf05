"""Per-resource services returning typed Stripe objects."""
from .base import StripeService
from .customers import StripeCustomerService
from .invoices import StripeInvoiceService
from .payment_intents import StripePaymentIntentService
from .payment_methods import StripePaymentMethodService
from .prices import StripePriceService
from .products import StripeProductService
from .schedules import StripeSubscriptionScheduleService
from .setup_intents import StripeSetupIntentService
from .subscriptions import StripeSubscriptionService
from .webhook_endpoints import StripeWebhookEndpointService

__all__ = [
    "StripeCustomerService",
    "StripeInvoiceService",
    "StripePaymentIntentService",
    "StripePaymentMethodService",
    "StripePriceService",
    "StripeProductService",
    "StripeService",
    "StripeSetupIntentService",
    "StripeSubscriptionScheduleService",
    "StripeSubscriptionService",
    "StripeWebhookEndpointService",
]
