"""Logging setup for stripe-objects."""
from .logging import AppContext, add_stripe_call_fields, build_processors, setup_logging

__all__ = ["AppContext", "add_stripe_call_fields", "build_processors", "setup_logging"]
