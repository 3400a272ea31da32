"""Observability infrastructure for structured logging and election context.

Usage:
    from election_workflow.infrastructure.observability import (
        configure_structlog,
        election_scope,
    )

    # At startup
    configure_structlog(environment="production")

    # Around election operations
    with election_scope(election_id):
        ...
"""

from election_workflow.infrastructure.observability.context import (
    election_context_processor,
    election_scope,
    get_election_id,
)
from election_workflow.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "election_context_processor",
    "election_scope",
    "get_election_id",
    "get_logger_for_service",
]
