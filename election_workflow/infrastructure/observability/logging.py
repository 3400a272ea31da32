"""Structured logging configuration with structlog.

Election services log through structlog. Call configure_structlog() once
at startup to pick the output format; until then structlog's defaults
apply, which is what tests capture against.

Every entry written inside an election_scope() carries the election_id,
and every service logger is pre-bound with its service and component:

    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "voter_added",
        "election_id": "uuid",
        "service": "ElectionService",
        "component": "election",
        "voter_id": "0x01"
    }

Usage:
    from election_workflow.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON lines
    configure_structlog(environment="development", log_level="DEBUG")
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from election_workflow.infrastructure.observability.context import (
    election_context_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _resolve_log_level(log_level: str | None) -> int:
    """Map a level name to its logging constant.

    An explicit log_level wins over the LOG_LEVEL environment variable.
    Unknown names fall back to INFO.
    """
    level_name = (log_level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    level = getattr(logging, level_name, None)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(
    environment: str = "production", log_level: str | None = None
) -> None:
    """Configure structlog for the election services.

    Args:
        environment: 'production' for JSON lines, anything else for
                    colored console output.
        log_level: Minimum level name (e.g. "WARNING"); read from
                   LOG_LEVEL when omitted.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, election_context_processor),
        structlog.processors.StackInfoRenderer(),
    ]

    if environment == "production":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            _resolve_log_level(log_level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "election"
) -> structlog.BoundLogger:
    """Logger bound with the service and component names.

    Application services get theirs through LoggingMixin._init_logger.
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
