"""Products, prices and the pricing structures embedded in prices."""
from typing import Any, ClassVar, Dict, FrozenSet, Iterator, List, Literal, Optional, Union

from pydantic import ConfigDict, Field, RootModel

from stripe_objects.enums import (
    BillingScheme,
    PriceType,
    RecurringAggregateUsage,
    RecurringInterval,
    RecurringUsageType,
    TaxBehavior,
    TiersMode,
)
from stripe_objects.objects.base import ExpandableId, Metadata, StripeModel, Timestamp


class StripeProduct(StripeModel):
    """A sellable product."""

    service = "StripeProductService"

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    active: Optional[bool] = None
    images: Optional[List[str]] = None
    metadata: Optional[Metadata] = None
    default_price: Optional[ExpandableId] = None
    tax_code: Optional[ExpandableId] = None
    unit_label: Optional[str] = None
    url: Optional[str] = None
    shippable: Optional[bool] = None
    package_dimensions: Optional[Dict[str, Any]] = None
    statement_descriptor: Optional[str] = None
    created: Optional[Timestamp] = None
    updated: Optional[Timestamp] = None
    livemode: Optional[bool] = None

    read_only_fields = StripeModel.read_only_fields | {"updated"}


class StripeRecurring(StripeModel):
    """Billing frequency of a recurring price."""

    interval: Optional[RecurringInterval] = None
    interval_count: Optional[int] = None
    trial_period_days: Optional[int] = None
    usage_type: Optional[RecurringUsageType] = None
    aggregate_usage: Optional[RecurringAggregateUsage] = None


class StripeCustomUnitAmount(StripeModel):
    """Bounds for customer-chosen amounts."""

    minimum: Optional[int] = None
    maximum: Optional[int] = None
    preset: Optional[int] = None


class StripeProductTier(StripeModel):
    """
    One pricing tier.

    ``up_to`` is the inclusive upper quantity, or ``"inf"`` for the last
    tier. Responses report the last tier as ``None``.
    """

    up_to: Optional[Union[int, Literal["inf"]]] = None
    unit_amount: Optional[int] = None
    unit_amount_decimal: Optional[str] = None
    flat_amount: Optional[int] = None
    flat_amount_decimal: Optional[str] = None

    @property
    def is_infinite(self) -> bool:
        return self.up_to == "inf"


class StripeProductTierCollection(RootModel[List[StripeProductTier]]):
    """Ordered, immutable list of pricing tiers."""

    model_config = ConfigDict(frozen=True)

    root: List[StripeProductTier] = Field(default_factory=list)

    def __iter__(self) -> Iterator[StripeProductTier]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> StripeProductTier:
        return self.root[index]

    def add_tier(
        self,
        up_to: Union[int, str],
        unit_amount: Optional[int] = None,
        unit_amount_decimal: Optional[str] = None,
        flat_amount: Optional[int] = None,
        flat_amount_decimal: Optional[str] = None,
    ) -> "StripeProductTierCollection":
        """Return a collection with one more tier appended."""
        tier = StripeProductTier(
            up_to=up_to,
            unit_amount=unit_amount,
            unit_amount_decimal=unit_amount_decimal,
            flat_amount=flat_amount,
            flat_amount_decimal=flat_amount_decimal,
        )
        return type(self)([*self.root, tier])

    def up_to(self, limit: int) -> "StripeProductTierCollection":
        """Tiers ending at or below ``limit``, plus the infinite tier."""
        return type(self)(
            [
                tier
                for tier in self.root
                if tier.is_infinite or (isinstance(tier.up_to, int) and tier.up_to <= limit)
            ]
        )

    def infinite_tier(self) -> Optional[StripeProductTier]:
        return next((tier for tier in self.root if tier.is_infinite), None)

    def with_flat_amounts(self) -> "StripeProductTierCollection":
        return type(self)(
            [
                tier
                for tier in self.root
                if tier.flat_amount is not None or tier.flat_amount_decimal is not None
            ]
        )

    def with_unit_amounts(self) -> "StripeProductTierCollection":
        return type(self)(
            [
                tier
                for tier in self.root
                if tier.unit_amount is not None or tier.unit_amount_decimal is not None
            ]
        )

    def to_list(self) -> List[Dict[str, Any]]:
        """Serialize to the ``tiers`` request parameter."""
        return [tier.to_dict() for tier in self.root]


class StripePrice(StripeModel):
    """A price attached to a product."""

    service = "StripePriceService"

    id: Optional[str] = None
    product: Optional[ExpandableId] = None
    active: Optional[bool] = None
    currency: Optional[str] = None
    unit_amount: Optional[int] = None
    unit_amount_decimal: Optional[str] = None
    type: Optional[PriceType] = None
    billing_scheme: Optional[BillingScheme] = None
    recurring: Optional[StripeRecurring] = None
    nickname: Optional[str] = None
    metadata: Optional[Metadata] = None
    lookup_key: Optional[str] = None
    tiers: Optional[StripeProductTierCollection] = None
    tiers_mode: Optional[TiersMode] = None
    transform_quantity: Optional[Dict[str, Any]] = None
    custom_unit_amount: Optional[StripeCustomUnitAmount] = None
    tax_behavior: Optional[TaxBehavior] = None
    created: Optional[Timestamp] = None
    livemode: Optional[bool] = None

    # Stripe rejects these on update; a new price is needed instead
    immutable_fields: ClassVar[FrozenSet[str]] = frozenset(
        {
            "product",
            "currency",
            "unit_amount",
            "unit_amount_decimal",
            "type",
            "billing_scheme",
            "recurring",
            "tiers",
            "tiers_mode",
            "transform_quantity",
            "custom_unit_amount",
        }
    )
