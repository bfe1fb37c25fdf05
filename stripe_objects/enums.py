"""Enumerations of Stripe wire values."""
from enum import Enum


class BillingScheme(str, Enum):
    """How a price computes the amount for each unit."""

    PER_UNIT = "per_unit"
    TIERED = "tiered"


class CollectionMethod(str, Enum):
    """How Stripe collects payment for invoices."""

    CHARGE_AUTOMATICALLY = "charge_automatically"
    SEND_INVOICE = "send_invoice"


class InvoiceBillingReason(str, Enum):
    """Why an invoice was created."""

    AUTOMATIC_PENDING_INVOICE_ITEM_INVOICE = "automatic_pending_invoice_item_invoice"
    MANUAL = "manual"
    QUOTE_ACCEPT = "quote_accept"
    SUBSCRIPTION = "subscription"
    SUBSCRIPTION_CREATE = "subscription_create"
    SUBSCRIPTION_CYCLE = "subscription_cycle"
    SUBSCRIPTION_THRESHOLD = "subscription_threshold"
    SUBSCRIPTION_UPDATE = "subscription_update"
    UPCOMING = "upcoming"


class InvoiceStatus(str, Enum):
    """Invoice lifecycle status."""

    DRAFT = "draft"
    OPEN = "open"
    PAID = "paid"
    UNCOLLECTIBLE = "uncollectible"
    VOID = "void"


class PaymentIntentCaptureMethod(str, Enum):
    """When funds are captured for a payment intent."""

    AUTOMATIC = "automatic"
    AUTOMATIC_ASYNC = "automatic_async"
    MANUAL = "manual"


class PaymentIntentConfirmationMethod(str, Enum):
    """Who confirms a payment intent."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"


class PaymentIntentSetupFutureUsage(str, Enum):
    """Intended future use of the payment method."""

    ON_SESSION = "on_session"
    OFF_SESSION = "off_session"


class PaymentIntentStatus(str, Enum):
    """Payment intent lifecycle status."""

    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    REQUIRES_CAPTURE = "requires_capture"
    CANCELED = "canceled"
    SUCCEEDED = "succeeded"


class PaymentMethodType(str, Enum):
    """Supported payment method types."""

    ACSS_DEBIT = "acss_debit"
    AFFIRM = "affirm"
    AFTERPAY_CLEARPAY = "afterpay_clearpay"
    ALIPAY = "alipay"
    AMAZON_PAY = "amazon_pay"
    AU_BECS_DEBIT = "au_becs_debit"
    BACS_DEBIT = "bacs_debit"
    BANCONTACT = "bancontact"
    BLIK = "blik"
    BOLETO = "boleto"
    CARD = "card"
    CARD_PRESENT = "card_present"
    CASHAPP = "cashapp"
    CUSTOMER_BALANCE = "customer_balance"
    EPS = "eps"
    FPX = "fpx"
    GIROPAY = "giropay"
    GRABPAY = "grabpay"
    IDEAL = "ideal"
    INTERAC_PRESENT = "interac_present"
    KLARNA = "klarna"
    KONBINI = "konbini"
    LINK = "link"
    MOBILEPAY = "mobilepay"
    MULTIBANCO = "multibanco"
    OXXO = "oxxo"
    P24 = "p24"
    PAYNOW = "paynow"
    PAYPAL = "paypal"
    PIX = "pix"
    PROMPTPAY = "promptpay"
    REVOLUT_PAY = "revolut_pay"
    SEPA_DEBIT = "sepa_debit"
    SOFORT = "sofort"
    SWISH = "swish"
    TWINT = "twint"
    US_BANK_ACCOUNT = "us_bank_account"
    WECHAT_PAY = "wechat_pay"
    ZIP = "zip"


class PriceType(str, Enum):
    """One-off or recurring price."""

    ONE_TIME = "one_time"
    RECURRING = "recurring"


class ProrationBehavior(str, Enum):
    """How prorations are handled on subscription changes."""

    CREATE_PRORATIONS = "create_prorations"
    NONE = "none"
    ALWAYS_INVOICE = "always_invoice"


# Schedules accept the same values as subscriptions
SubscriptionScheduleProrationBehavior = ProrationBehavior


class RecurringAggregateUsage(str, Enum):
    """Aggregation of metered usage over a period."""

    SUM = "sum"
    LAST_DURING_PERIOD = "last_during_period"
    LAST_EVER = "last_ever"
    MAX = "max"


class RecurringInterval(str, Enum):
    """Billing frequency of a recurring price."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


class RecurringUsageType(str, Enum):
    """Licensed (per seat) or metered usage."""

    METERED = "metered"
    LICENSED = "licensed"


class SetupIntentStatus(str, Enum):
    """Setup intent lifecycle status."""

    REQUIRES_PAYMENT_METHOD = "requires_payment_method"
    REQUIRES_CONFIRMATION = "requires_confirmation"
    REQUIRES_ACTION = "requires_action"
    PROCESSING = "processing"
    CANCELED = "canceled"
    SUCCEEDED = "succeeded"


class SetupIntentUsage(str, Enum):
    """Intended use of the payment method being set up."""

    ON_SESSION = "on_session"
    OFF_SESSION = "off_session"


class SubscriptionScheduleEndBehavior(str, Enum):
    """What happens to the subscription when a schedule ends."""

    RELEASE = "release"
    CANCEL = "cancel"


class SubscriptionScheduleStatus(str, Enum):
    """Subscription schedule lifecycle status."""

    NOT_STARTED = "not_started"
    ACTIVE = "active"
    COMPLETED = "completed"
    RELEASED = "released"
    CANCELED = "canceled"


class SubscriptionStatus(str, Enum):
    """Subscription lifecycle status."""

    INCOMPLETE = "incomplete"
    INCOMPLETE_EXPIRED = "incomplete_expired"
    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    UNPAID = "unpaid"
    PAUSED = "paused"


class TaxBehavior(str, Enum):
    """Whether a price includes tax."""

    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"
    UNSPECIFIED = "unspecified"


class TiersMode(str, Enum):
    """How tiered pricing applies to quantity."""

    GRADUATED = "graduated"
    VOLUME = "volume"
