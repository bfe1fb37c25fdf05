"""Invoice operations."""
from typing import Any, Dict, List, Optional

import structlog

from stripe_objects.objects import StripeInvoice
from stripe_objects.services.base import StripeService

logger = structlog.get_logger(__name__)


class StripeInvoiceService(StripeService):
    """Read invoices and move them through finalization and payment."""

    resource = "invoices"

    def get(self, invoice_id: str) -> StripeInvoice:
        return StripeInvoice.from_stripe_object(self._request("retrieve", invoice_id))

    def list(self, params: Optional[Dict[str, Any]] = None) -> List[StripeInvoice]:
        return self._request_list(StripeInvoice, params)

    def finalize(self, invoice_id: str, params: Optional[Dict[str, Any]] = None) -> StripeInvoice:
        logger.info("stripe_invoice_finalized", invoice_id=invoice_id)
        return StripeInvoice.from_stripe_object(
            self._request("finalize_invoice", invoice_id, dict(params or {}))
        )

    def pay(self, invoice_id: str, params: Optional[Dict[str, Any]] = None) -> StripeInvoice:
        logger.info("stripe_invoice_paid", invoice_id=invoice_id)
        return StripeInvoice.from_stripe_object(
            self._request("pay", invoice_id, dict(params or {}))
        )

    def send(self, invoice_id: str) -> StripeInvoice:
        logger.info("stripe_invoice_sent", invoice_id=invoice_id)
        return StripeInvoice.from_stripe_object(self._request("send_invoice", invoice_id))

    def void(self, invoice_id: str) -> StripeInvoice:
        logger.info("stripe_invoice_voided", invoice_id=invoice_id)
        return StripeInvoice.from_stripe_object(self._request("void_invoice", invoice_id))
