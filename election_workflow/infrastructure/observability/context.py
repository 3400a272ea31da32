"""Election log context management.

Election services run many elections in one process. The election being
operated on is tracked in a context variable so that every log entry
emitted while handling a call carries its election_id, including entries
from code that never saw the election directly.

Usage:
    # In services
    with election_scope(election_id):
        log.info("voter_registered")

    # In structlog configuration
    processors = [..., election_context_processor, ...]
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any
from uuid import UUID

# Default is empty string to avoid None type issues
_election_id: ContextVar[str] = ContextVar("election_id", default="")


def get_election_id() -> str:
    """Get the election ID bound to the current context.

    Returns:
        The current election ID or empty string if not set.
    """
    return _election_id.get()


@contextmanager
def election_scope(election_id: UUID | str) -> Iterator[None]:
    """Bind election_id for the duration of a with-block.

    The previous value is restored on exit, so scopes nest.
    """
    token = _election_id.set(str(election_id))
    try:
        yield
    finally:
        _election_id.reset(token)


def election_context_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor to add election_id to every log entry.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with election_id added when one is bound.
    """
    election_id = get_election_id()
    if election_id:
        event_dict.setdefault("election_id", election_id)
    return event_dict
