"""
Structured logging configuration.

Library modules log through ``structlog.get_logger(__name__)`` with snake_case
event names, and every SDK call carries ``method="<resource>.<action>"``.
Applications call ``setup_logging`` once to render those events as JSON on
stdout with the call split into ``resource`` and ``action`` fields.
"""
import logging
import sys
from typing import Any, Dict, List, Optional

import structlog
from pythonjsonlogger import jsonlogger

from stripe_objects.config import Settings, get_settings

EventDict = Dict[str, Any]


class AppContext:
    """Processor stamping each event with the configured app name and environment."""

    def __init__(self, settings: Settings):
        self.app_name = settings.app_name
        self.app_env = settings.app_env

    def __call__(self, logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("app_name", self.app_name)
        event_dict.setdefault("app_env", self.app_env)
        return event_dict


def add_stripe_call_fields(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Split a ``method`` such as ``payment_intents.confirm`` into its parts.

    Nested resources keep their path, so ``financial_connections.accounts.list``
    yields resource ``financial_connections.accounts`` and action ``list``.
    Fields the caller bound explicitly are left alone.
    """
    method = event_dict.get("method")
    if isinstance(method, str) and "." in method:
        resource, action = method.rsplit(".", 1)
        event_dict.setdefault("resource", resource)
        event_dict.setdefault("action", action)
    return event_dict


def build_processors(settings: Settings) -> List[Any]:
    """Processor chain used by ``setup_logging``, ending in the JSON renderer."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        add_stripe_call_fields,
        AppContext(settings),
        structlog.processors.JSONRenderer(),
    ]


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure structlog and the root logger for JSON output.

    Args:
        settings: Source of the log level and app context (cached settings if omitted)
    """
    settings = settings or get_settings()

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "@timestamp", "levelname": "level", "name": "logger"},
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    # The SDK logs every request at DEBUG
    logging.getLogger("stripe").setLevel(max(logging.INFO, root_logger.level))

    structlog.get_logger(__name__).info(
        "logging_configured", log_level=settings.log_level, app_env=settings.app_env
    )
