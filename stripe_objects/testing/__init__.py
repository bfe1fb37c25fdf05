"""Offline test doubles for code that talks to Stripe."""
from .assertions import assert_called, assert_called_times, assert_not_called
from .coercion import CoercionError, coerce, infer_object_type
from .fake_client import FakeNotRegisteredError, FakeStripeClient, FakeStripeService
from .fixtures import StripeFixtures
from .methods import StripeMethod
from .recorder import CallRecorder

__all__ = [
    "CallRecorder",
    "CoercionError",
    "FakeNotRegisteredError",
    "FakeStripeClient",
    "FakeStripeService",
    "StripeFixtures",
    "StripeMethod",
    "assert_called",
    "assert_called_times",
    "assert_not_called",
    "coerce",
    "infer_object_type",
]
