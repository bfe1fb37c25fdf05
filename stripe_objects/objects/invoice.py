"""Invoices and invoice line items."""
from typing import Annotated, Any, List, Optional

from pydantic import BeforeValidator, model_validator

from stripe_objects.enums import CollectionMethod, InvoiceBillingReason, InvoiceStatus
from stripe_objects.objects.base import (
    ExpandableId,
    Metadata,
    StripeModel,
    Timestamp,
    extract_id,
    unwrap_list,
)


class StripeInvoiceLineItem(StripeModel):
    """A line on an invoice."""

    id: Optional[str] = None
    description: Optional[str] = None
    currency: Optional[str] = None
    amount: Optional[int] = None
    quantity: Optional[int] = None
    unit_amount: Optional[int] = None
    price_id: Optional[str] = None
    product_id: Optional[str] = None
    subscription: Optional[ExpandableId] = None
    proration: Optional[bool] = None
    metadata: Optional[Metadata] = None

    @model_validator(mode="before")
    @classmethod
    def flatten_price(cls, data: Any) -> Any:
        """Lift ``price.id`` and ``price.product`` onto the line."""
        if isinstance(data, dict) and "price" in data:
            data = dict(data)
            price = data.pop("price")
            if isinstance(price, dict):
                data.setdefault("price_id", price.get("id"))
                data.setdefault("product_id", extract_id(price.get("product")))
            elif isinstance(price, str):
                data.setdefault("price_id", price)
        return data


class StripeInvoice(StripeModel):
    """A statement of amounts owed by a customer."""

    service = "StripeInvoiceService"

    id: Optional[str] = None
    number: Optional[str] = None
    customer: Optional[ExpandableId] = None
    subscription: Optional[ExpandableId] = None
    status: Optional[InvoiceStatus] = None
    billing_reason: Optional[InvoiceBillingReason] = None
    collection_method: Optional[CollectionMethod] = None
    currency: Optional[str] = None
    amount_due: Optional[int] = None
    amount_paid: Optional[int] = None
    amount_remaining: Optional[int] = None
    subtotal: Optional[int] = None
    total: Optional[int] = None
    tax: Optional[int] = None
    paid: Optional[bool] = None
    attempted: Optional[bool] = None
    attempt_count: Optional[int] = None
    hosted_invoice_url: Optional[str] = None
    invoice_pdf: Optional[str] = None
    payment_intent: Optional[ExpandableId] = None
    created: Optional[Timestamp] = None
    due_date: Optional[Timestamp] = None
    period_start: Optional[Timestamp] = None
    period_end: Optional[Timestamp] = None
    lines: Optional[Annotated[List[StripeInvoiceLineItem], BeforeValidator(unwrap_list)]] = None
    metadata: Optional[Metadata] = None
    livemode: Optional[bool] = None

    @property
    def is_paid(self) -> bool:
        return self.status == InvoiceStatus.PAID
