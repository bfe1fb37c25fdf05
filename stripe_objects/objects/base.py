"""
Base model and parsing helpers shared by every Stripe object.

Stripe returns ``stripe.StripeObject`` trees whose shape varies with
expansion: a reference such as ``customer`` is an id string unless the
request expanded it, lists arrive wrapped in ``{"object": "list", ...}``
envelopes, and times are unix timestamps. The annotated types here absorb
those variations so each model can be parsed straight from the wire dict.
"""
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, List, Optional, Type, TypeVar

import stripe
from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

ModelT = TypeVar("ModelT", bound="StripeModel")


def to_plain(value: Any) -> Any:
    """
    Recursively convert ``StripeObject`` trees to plain dicts and lists.

    SDK objects are dicts up to stripe 14 and plain objects from 15 on, so
    they are unpacked through ``to_dict()`` rather than the mapping protocol.

    Args:
        value: StripeObject, mapping, sequence or scalar

    Returns:
        Any: Equivalent structure built from dict, list and scalars
    """
    if isinstance(value, stripe.StripeObject):
        return to_plain(value.to_dict())
    if isinstance(value, Mapping):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    return value


def extract_id(value: Any) -> Any:
    """Collapse an expandable reference to its id."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        return value.get("id")
    return getattr(value, "id", value)


def unwrap_list(value: Any) -> Any:
    """Return the ``data`` items of a list envelope, or the value unchanged."""
    if isinstance(value, Mapping) and ("data" in value or value.get("object") == "list"):
        return value.get("data") or []
    return value


def _to_datetime(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    if isinstance(value, str) and value.isdigit():
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    return value


# Unix timestamp on the wire, aware UTC datetime in Python
Timestamp = Annotated[
    datetime,
    BeforeValidator(_to_datetime),
    PlainSerializer(lambda v: int(v.timestamp()), return_type=int),
]

# Id string, whether or not the reference was expanded
ExpandableId = Annotated[str, BeforeValidator(extract_id)]

Metadata = Dict[str, Any]


class StripeModel(BaseModel):
    """
    Immutable typed view of a Stripe API object.

    Subclasses declare wire-named fields. Unknown wire keys are ignored so a
    newer API version never breaks parsing.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Fields Stripe assigns itself; never sent on create or update
    read_only_fields: ClassVar[FrozenSet[str]] = frozenset(
        {"id", "object", "created", "livemode"}
    )

    # Class name in ``stripe_objects.services`` backing get() and save()
    service: ClassVar[Optional[str]] = None

    @classmethod
    def make(cls: Type[ModelT], **fields: Any) -> ModelT:
        """Construct and validate an instance from keyword fields."""
        return cls(**fields)

    @classmethod
    def from_stripe_object(cls: Type[ModelT], obj: Any) -> ModelT:
        """
        Parse a Stripe API response.

        Args:
            obj: ``stripe.StripeObject`` or mapping with wire keys

        Returns:
            Parsed model instance
        """
        return cls.model_validate(to_plain(obj))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a wire dict, dropping unset fields."""
        return self.model_dump(mode="json", exclude_none=True)

    def to_params(self, *exclude: str) -> Dict[str, Any]:
        """
        Serialize to request parameters for create or update calls.

        Args:
            *exclude: Extra field names to leave out

        Returns:
            Dict[str, Any]: Wire dict without read-only or excluded fields
        """
        dropped = self.read_only_fields.union(exclude)
        return {key: value for key, value in self.to_dict().items() if key not in dropped}

    def with_fields(self: ModelT, **changes: Any) -> ModelT:
        """Return a validated copy with ``changes`` applied."""
        return type(self)(**{**dict(self), **changes})

    @classmethod
    def _bound_service(cls, client: Optional[Any] = None, settings: Optional[Any] = None) -> Any:
        if cls.service is None:
            raise NotImplementedError(f"{cls.__name__} has no service")
        # Deferred: the services package imports these models
        from stripe_objects import services

        return getattr(services, cls.service)(client=client, settings=settings)

    @classmethod
    def get(
        cls: Type[ModelT],
        object_id: str,
        client: Optional[Any] = None,
        settings: Optional[Any] = None,
    ) -> ModelT:
        """
        Retrieve an object by id through its service.

        Args:
            object_id: Stripe id, e.g. ``cus_123``
            client: ``stripe.StripeClient`` or a compatible fake
            settings: Settings used to build a client when none is given

        Raises:
            NotImplementedError: If the object has no service
        """
        return cls._bound_service(client, settings).get(object_id)

    def save(self: ModelT, client: Optional[Any] = None, settings: Optional[Any] = None) -> ModelT:
        """
        Create the object when it has no id, otherwise update it.

        Returns:
            The object as Stripe returned it; ``self`` is left unchanged

        Raises:
            NotImplementedError: If the object has no service or cannot be
                created through it
        """
        bound = self._bound_service(client, settings)
        if not hasattr(bound, "create"):
            raise NotImplementedError(f"{type(self).__name__} cannot be saved")
        object_id = getattr(self, "id", None)
        if object_id is None:
            return bound.create(self)
        return bound.update(object_id, self)


def parse_list(model: Type[ModelT], response: Any) -> List[ModelT]:
    """Parse every item of a list response."""
    return [model.from_stripe_object(item) for item in unwrap_list(to_plain(response))]
