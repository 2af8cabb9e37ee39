"""Logging configuration using structlog.

Every event carries an ISO timestamp and its level. Output is one JSON
object per line unless ``DEBUG`` is set, in which case the console
renderer is used.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import EventDict, Processor

from treasury.config.settings import Settings, get_settings

REDACTED = "[redacted]"

# Event keys whose values must never reach the log output
SECRET_KEYS = frozenset({"private_key", "treasury_private_key", "raw_transaction"})

# Chatty per-request loggers of the HTTP stack under web3
NOISY_LOGGERS = ("web3.providers", "aiohttp.access", "urllib3")


def redact_secrets(_logger: Any, _method_name: str, event_dict: EventDict) -> EventDict:
    """Replace values of secret-bearing keys in the event."""
    for key in SECRET_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    return event_dict


def build_processors(settings: Settings) -> list[Processor]:
    """Processor chain for the given settings, renderer last."""
    renderer: Processor = (
        structlog.dev.ConsoleRenderer()
        if settings.debug
        else structlog.processors.JSONRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
        renderer,
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the standard library loggers."""
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level)

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # web3 and uvicorn log through the standard library
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )
    if not settings.debug:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
