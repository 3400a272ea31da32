"""Base service logging mixin.

This module provides the LoggingMixin class for standardized structured
logging across all application services.

Usage:
    from election_workflow.application.services.base import LoggingMixin

    class MyService(LoggingMixin):
        def __init__(self, dependency: SomePort) -> None:
            self._dependency = dependency
            self._init_logger()  # Initialize structured logger

        async def do_something(self) -> None:
            log = self._log_operation("do_something", item_id="123")
            log.info("operation_started")
            # ... do work ...
            log.info("operation_completed")
"""

import structlog

from election_workflow.infrastructure.observability.context import get_election_id
from election_workflow.infrastructure.observability.logging import (
    get_logger_for_service,
)


class LoggingMixin:
    """Mixin providing structured logging for services.

    The logger is bound with:
    - service: The class name of the service
    - component: The component type (default: "election")

    Each operation gets:
    - operation: The name of the operation being performed
    - election_id: From context, when an election scope is active
    - Any additional context passed to _log_operation()

    Attributes:
        _log: The structlog BoundLogger for this service instance.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "election") -> None:
        """Initialize the logger with service name binding.

        Should be called in __init__ after setting up dependencies.

        Args:
            component: The component type for log categorization.
        """
        self._log = get_logger_for_service(self.__class__.__name__, component)

    def _log_operation(
        self,
        operation: str,
        **context: object,
    ) -> structlog.BoundLogger:
        """Create operation-scoped logger with election context.

        Args:
            operation: Name of the operation being performed.
            **context: Additional context to bind to the logger.

        Returns:
            BoundLogger with operation and election context.

        Example:
            log = self._log_operation("add_voter", voter_id=voter_id)
            log.info("add_voter_started")
        """
        election_id = get_election_id()
        if election_id:
            context.setdefault("election_id", election_id)
        return self._log.bind(operation=operation, **context)
