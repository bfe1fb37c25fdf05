"""Financial Connections accounts and session requests."""
from typing import Any, Dict, List, Optional

from pydantic import Field

from stripe_objects.objects.base import ExpandableId, StripeModel, Timestamp


class StripeTransactionRefresh(StripeModel):
    """Status of the most recent transaction refresh."""

    id: Optional[str] = None
    last_attempted_at: Optional[Timestamp] = None
    next_refresh_available_at: Optional[Timestamp] = None
    status: Optional[str] = None


class StripeBankAccount(StripeModel):
    """A bank account linked through Financial Connections."""

    id: Optional[str] = None
    category: Optional[str] = None
    created: Optional[Timestamp] = None
    display_name: Optional[str] = None
    institution_name: Optional[str] = None
    last4: Optional[str] = None
    livemode: Optional[bool] = None
    permissions: List[str] = Field(default_factory=list)
    subscriptions: List[str] = Field(default_factory=list)
    supported_payment_method_types: List[str] = Field(default_factory=list)
    status: Optional[str] = None
    subcategory: Optional[str] = None
    transaction_refresh: Optional[StripeTransactionRefresh] = None


class StripeFinancialConnection(StripeModel):
    """Request to link a customer's bank accounts."""

    customer: ExpandableId
    permissions: List[str] = Field(default_factory=lambda: ["transactions"])

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to ``financial_connections.sessions.create`` parameters."""
        return {
            "account_holder": {
                "type": "customer",
                "customer": self.customer,
            },
            "permissions": list(self.permissions),
        }
