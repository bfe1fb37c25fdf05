"""
Realistic Stripe API payloads for tests.

Every fixture returns a fresh dict shaped like the API response for that
resource, with a new random id. ``overrides`` replace top-level keys only;
nested dicts are swapped wholesale, never merged.
"""
import random
import string
import time
from typing import Any, Callable, Dict, List, Optional

Payload = Dict[str, Any]

_ID_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase

# Seconds in the 30 day period used for subscription periods
_PERIOD = 2592000


def random_string(length: int = 16) -> str:
    return "".join(random.choices(_ID_ALPHABET, k=length))


def random_id(prefix: str, length: int = 24) -> str:
    return f"{prefix}_{random_string(length)}"


def _merge(defaults: Payload, overrides: Optional[Payload]) -> Payload:
    return {**defaults, **(overrides or {})}


def _list(url: str, items: Optional[List[Payload]], overrides: Optional[Payload]) -> Payload:
    return _merge(
        {
            "object": "list",
            "data": list(items or []),
            "has_more": False,
            "url": url,
        },
        overrides,
    )


class StripeFixtures:
    """Factory of Stripe response payloads keyed by resource kind."""

    @staticmethod
    def customer(overrides: Optional[Payload] = None) -> Payload:
        return _merge(
            {
                "id": random_id("cus"),
                "object": "customer",
                "address": None,
                "balance": 0,
                "created": int(time.time()),
                "currency": "usd",
                "default_source": None,
                "delinquent": False,
                "description": "Test Customer",
                "discount": None,
                "email": "test@example.com",
                "invoice_prefix": random_string(8),
                "invoice_settings": {
                    "custom_fields": None,
                    "default_payment_method": None,
                    "footer": None,
                    "rendering_options": None,
                },
                "livemode": False,
                "metadata": {},
                "name": "Test Customer",
                "phone": None,
                "preferred_locales": [],
                "shipping": None,
                "tax_exempt": "none",
                "test_clock": None,
            },
            overrides,
        )

    @staticmethod
    def product(overrides: Optional[Payload] = None) -> Payload:
        now = int(time.time())
        return _merge(
            {
                "id": random_id("prod"),
                "object": "product",
                "active": True,
                "attributes": [],
                "created": now,
                "default_price": None,
                "description": "Test Product",
                "images": [],
                "livemode": False,
                "metadata": {},
                "name": "Test Product",
                "package_dimensions": None,
                "shippable": None,
                "statement_descriptor": None,
                "tax_code": None,
                "type": "service",
                "unit_label": None,
                "updated": now,
                "url": None,
            },
            overrides,
        )

    @staticmethod
    def price(overrides: Optional[Payload] = None) -> Payload:
        return _merge(
            {
                "id": random_id("price"),
                "object": "price",
                "active": True,
                "billing_scheme": "per_unit",
                "created": int(time.time()),
                "currency": "usd",
                "custom_unit_amount": None,
                "livemode": False,
                "lookup_key": None,
                "metadata": {},
                "nickname": None,
                "product": random_id("prod"),
                "recurring": {
                    "aggregate_usage": None,
                    "interval": "month",
                    "interval_count": 1,
                    "trial_period_days": None,
                    "usage_type": "licensed",
                },
                "tax_behavior": "unspecified",
                "tiers_mode": None,
                "transform_quantity": None,
                "type": "recurring",
                "unit_amount": 1000,
                "unit_amount_decimal": "1000",
            },
            overrides,
        )

    @staticmethod
    def subscription(overrides: Optional[Payload] = None) -> Payload:
        now = int(time.time())
        subscription_id = random_id("sub")
        return _merge(
            {
                "id": subscription_id,
                "object": "subscription",
                "application": None,
                "application_fee_percent": None,
                "automatic_tax": {"enabled": False},
                "billing_cycle_anchor": now,
                "billing_cycle_anchor_config": None,
                "billing_thresholds": None,
                "cancel_at": None,
                "cancel_at_period_end": False,
                "canceled_at": None,
                "cancellation_details": {
                    "comment": None,
                    "feedback": None,
                    "reason": None,
                },
                "collection_method": "charge_automatically",
                "created": now,
                "currency": "usd",
                "current_period_end": now + _PERIOD,
                "current_period_start": now,
                "customer": random_id("cus"),
                "days_until_due": None,
                "default_payment_method": None,
                "default_source": None,
                "default_tax_rates": [],
                "description": None,
                "discount": None,
                "ended_at": None,
                "items": _list(
                    "/v1/subscription_items",
                    [
                        {
                            "id": random_id("si"),
                            "object": "subscription_item",
                            "billing_thresholds": None,
                            "created": now,
                            "metadata": {},
                            "price": StripeFixtures.price(),
                            "quantity": 1,
                            "subscription": subscription_id,
                            "tax_rates": [],
                        }
                    ],
                    None,
                ),
                "latest_invoice": None,
                "livemode": False,
                "metadata": {},
                "next_pending_invoice_item_invoice": None,
                "on_behalf_of": None,
                "pause_collection": None,
                "payment_settings": {
                    "payment_method_options": None,
                    "payment_method_types": None,
                    "save_default_payment_method": "off",
                },
                "pending_invoice_item_interval": None,
                "pending_setup_intent": None,
                "pending_update": None,
                "proration_behavior": "create_prorations",
                "schedule": None,
                "start_date": now,
                "status": "active",
                "test_clock": None,
                "transfer_data": None,
                "trial_end": None,
                "trial_settings": {
                    "end_behavior": {"missing_payment_method": "create_invoice"},
                },
                "trial_start": None,
            },
            overrides,
        )

    @staticmethod
    def subscription_schedule(overrides: Optional[Payload] = None) -> Payload:
        now = int(time.time())
        return _merge(
            {
                "id": random_id("sub_sched"),
                "object": "subscription_schedule",
                "canceled_at": None,
                "completed_at": None,
                "created": now,
                "customer": random_id("cus"),
                "default_settings": {
                    "application_fee_percent": None,
                    "automatic_tax": {"enabled": False},
                    "billing_cycle_anchor": "automatic",
                    "billing_thresholds": None,
                    "collection_method": "charge_automatically",
                    "default_payment_method": None,
                    "default_source": None,
                    "default_tax_rates": [],
                    "description": None,
                    "invoice_settings": {
                        "account_tax_ids": None,
                        "custom_fields": None,
                        "days_until_due": None,
                        "default_payment_method": None,
                        "footer": None,
                        "issuer": None,
                        "rendering_options": None,
                    },
                    "on_behalf_of": None,
                    "transfer_data": None,
                },
                "end_behavior": "release",
                "livemode": False,
                "metadata": {},
                "phases": [
                    {
                        "add_invoice_items": [],
                        "application_fee_percent": None,
                        "automatic_tax": {"enabled": False},
                        "billing_cycle_anchor": None,
                        "billing_thresholds": None,
                        "collection_method": None,
                        "coupon": None,
                        "currency": "usd",
                        "default_payment_method": None,
                        "default_tax_rates": [],
                        "description": None,
                        "discounts": [],
                        "end_date": now + _PERIOD,
                        "invoice_settings": None,
                        "items": [
                            {
                                "billing_thresholds": None,
                                "metadata": {},
                                "plan": None,
                                "price": random_id("price"),
                                "quantity": 1,
                                "tax_rates": [],
                            }
                        ],
                        "iterations": None,
                        "metadata": {},
                        "on_behalf_of": None,
                        "proration_behavior": "create_prorations",
                        "start_date": now,
                        "transfer_data": None,
                        "trial_end": None,
                    }
                ],
                "released_at": None,
                "released_subscription": None,
                "status": "not_started",
                "subscription": None,
                "test_clock": None,
            },
            overrides,
        )

    @staticmethod
    def payment_intent(overrides: Optional[Payload] = None) -> Payload:
        intent_id = random_id("pi")
        return _merge(
            {
                "id": intent_id,
                "object": "payment_intent",
                "amount": 2000,
                "amount_capturable": 0,
                "amount_received": 0,
                "automatic_payment_methods": {"enabled": True},
                "canceled_at": None,
                "cancellation_reason": None,
                "capture_method": "automatic",
                "client_secret": f"{intent_id}_secret_{random_string(24)}",
                "confirmation_method": "automatic",
                "created": int(time.time()),
                "currency": "usd",
                "customer": None,
                "description": None,
                "invoice": None,
                "last_payment_error": None,
                "latest_charge": None,
                "livemode": False,
                "metadata": {},
                "next_action": None,
                "payment_method": None,
                "payment_method_types": ["card"],
                "receipt_email": None,
                "setup_future_usage": None,
                "shipping": None,
                "statement_descriptor": None,
                "status": "requires_payment_method",
            },
            overrides,
        )

    @staticmethod
    def setup_intent(overrides: Optional[Payload] = None) -> Payload:
        intent_id = random_id("seti")
        return _merge(
            {
                "id": intent_id,
                "object": "setup_intent",
                "application": None,
                "cancellation_reason": None,
                "client_secret": f"{intent_id}_secret_{random_string(24)}",
                "created": int(time.time()),
                "customer": None,
                "description": None,
                "last_setup_error": None,
                "latest_attempt": None,
                "livemode": False,
                "metadata": {},
                "next_action": None,
                "payment_method": None,
                "payment_method_types": ["card"],
                "status": "requires_payment_method",
                "usage": "off_session",
            },
            overrides,
        )

    @staticmethod
    def payment_method(overrides: Optional[Payload] = None) -> Payload:
        return _merge(
            {
                "id": random_id("pm"),
                "object": "payment_method",
                "billing_details": {
                    "address": {
                        "city": None,
                        "country": None,
                        "line1": None,
                        "line2": None,
                        "postal_code": None,
                        "state": None,
                    },
                    "email": None,
                    "name": None,
                    "phone": None,
                },
                "card": {
                    "brand": "visa",
                    "country": "US",
                    "exp_month": 12,
                    "exp_year": 2034,
                    "fingerprint": random_string(16),
                    "funding": "credit",
                    "last4": "4242",
                },
                "created": int(time.time()),
                "customer": None,
                "livemode": False,
                "metadata": {},
                "type": "card",
            },
            overrides,
        )

    @staticmethod
    def invoice_line_item(overrides: Optional[Payload] = None) -> Payload:
        return _merge(
            {
                "id": random_id("il"),
                "object": "line_item",
                "amount": 1000,
                "currency": "usd",
                "description": "1 × Test Product (at $10.00 / month)",
                "discountable": True,
                "livemode": False,
                "metadata": {},
                "period": {
                    "end": int(time.time()) + _PERIOD,
                    "start": int(time.time()),
                },
                "price": StripeFixtures.price(),
                "proration": False,
                "quantity": 1,
                "subscription": None,
                "type": "subscription",
                "unit_amount": 1000,
            },
            overrides,
        )

    @staticmethod
    def invoice(overrides: Optional[Payload] = None) -> Payload:
        now = int(time.time())
        invoice_id = random_id("in")
        return _merge(
            {
                "id": invoice_id,
                "object": "invoice",
                "account_country": "US",
                "amount_due": 1000,
                "amount_paid": 0,
                "amount_remaining": 1000,
                "attempt_count": 0,
                "attempted": False,
                "billing_reason": "subscription_create",
                "collection_method": "charge_automatically",
                "created": now,
                "currency": "usd",
                "customer": random_id("cus"),
                "customer_email": "test@example.com",
                "description": None,
                "due_date": None,
                "hosted_invoice_url": None,
                "invoice_pdf": None,
                "lines": _list(
                    f"/v1/invoices/{invoice_id}/lines",
                    [StripeFixtures.invoice_line_item()],
                    None,
                ),
                "livemode": False,
                "metadata": {},
                "number": None,
                "paid": False,
                "payment_intent": None,
                "period_end": now,
                "period_start": now,
                "status": "draft",
                "subscription": None,
                "subtotal": 1000,
                "tax": None,
                "total": 1000,
            },
            overrides,
        )

    @staticmethod
    def webhook_endpoint(overrides: Optional[Payload] = None) -> Payload:
        return _merge(
            {
                "id": random_id("we"),
                "object": "webhook_endpoint",
                "api_version": None,
                "application": None,
                "created": int(time.time()),
                "description": None,
                "enabled_events": ["*"],
                "livemode": False,
                "metadata": {},
                "secret": f"whsec_{random_string(32)}",
                "status": "enabled",
                "url": "https://example.com/stripe/webhook",
            },
            overrides,
        )

    @staticmethod
    def bank_account(overrides: Optional[Payload] = None) -> Payload:
        return _merge(
            {
                "id": random_id("ba"),
                "object": "bank_account",
                "account_holder_name": "Test Account",
                "account_holder_type": "individual",
                "account_type": "checking",
                "bank_name": "STRIPE TEST BANK",
                "country": "US",
                "currency": "usd",
                "customer": random_id("cus"),
                "fingerprint": random_string(16),
                "last4": "6789",
                "metadata": {},
                "routing_number": "110000000",
                "status": "verified",
            },
            overrides,
        )

    @staticmethod
    def financial_connections_account(overrides: Optional[Payload] = None) -> Payload:
        now = int(time.time())
        return _merge(
            {
                "id": random_id("fca"),
                "object": "financial_connections.account",
                "account_holder": {
                    "customer": random_id("cus"),
                    "type": "customer",
                },
                "balance": {
                    "as_of": now,
                    "current": {"usd": 10000},
                    "type": "cash",
                },
                "balance_refresh": None,
                "category": "cash",
                "created": now,
                "display_name": "Test Bank Account",
                "institution_name": "Test Bank",
                "last4": "6789",
                "livemode": False,
                "ownership": None,
                "permissions": ["balances", "transactions"],
                "status": "active",
                "subcategory": "checking",
                "supported_payment_method_types": ["us_bank_account"],
            },
            overrides,
        )

    @staticmethod
    def customer_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/customers", items, overrides)

    @staticmethod
    def product_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/products", items, overrides)

    @staticmethod
    def price_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/prices", items, overrides)

    @staticmethod
    def subscription_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/subscriptions", items, overrides)

    @staticmethod
    def subscription_schedule_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/subscription_schedules", items, overrides)

    @staticmethod
    def payment_intent_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/payment_intents", items, overrides)

    @staticmethod
    def setup_intent_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/setup_intents", items, overrides)

    @staticmethod
    def payment_method_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/payment_methods", items, overrides)

    @staticmethod
    def invoice_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/invoices", items, overrides)

    @staticmethod
    def webhook_endpoint_list(
        items: Optional[List[Payload]] = None, overrides: Optional[Payload] = None
    ) -> Payload:
        return _list("/v1/webhook_endpoints", items, overrides)

    @staticmethod
    def deleted(id: str, object: str = "customer") -> Payload:
        """Response of a delete call."""
        return {"id": id, "object": object, "deleted": True}

    @staticmethod
    def error(type: str = "card_error", message: str = "Your card was declined.") -> Payload:
        """Error envelope as returned with a 4xx status."""
        return {
            "error": {
                "type": type,
                "message": message,
                "code": "card_declined",
            }
        }

    @classmethod
    def generate(cls, kind: str, overrides: Optional[Payload] = None) -> Payload:
        """
        Build the fixture for ``kind`` by name.

        Raises:
            ValueError: If ``kind`` names no fixture
        """
        factory = FIXTURE_KINDS.get(kind)
        if factory is None:
            raise ValueError(
                f"Unknown fixture kind '{kind}'. Expected one of: {sorted(FIXTURE_KINDS)}"
            )
        return factory(overrides)


FIXTURE_KINDS: Dict[str, Callable[[Optional[Payload]], Payload]] = {
    "customer": StripeFixtures.customer,
    "product": StripeFixtures.product,
    "price": StripeFixtures.price,
    "subscription": StripeFixtures.subscription,
    "subscription_schedule": StripeFixtures.subscription_schedule,
    "payment_intent": StripeFixtures.payment_intent,
    "setup_intent": StripeFixtures.setup_intent,
    "payment_method": StripeFixtures.payment_method,
    "invoice": StripeFixtures.invoice,
    "invoice_line_item": StripeFixtures.invoice_line_item,
    "webhook_endpoint": StripeFixtures.webhook_endpoint,
    "bank_account": StripeFixtures.bank_account,
    "financial_connections_account": StripeFixtures.financial_connections_account,
}
