"""Event emission errors for election operations.

Events are emitted before an operation's new state is committed. When
emission fails, the state change is discarded and this error is raised
so that no mutation happens without its notification.
"""

from __future__ import annotations

from uuid import UUID

from election_workflow.domain.exceptions import ElectionError


class EventEmissionError(ElectionError):
    """Raised when an election event could not be emitted.

    The operation that produced the event has NOT been committed.

    Attributes:
        election_id: Election the event belongs to.
        event_type: Type string of the event that failed.
        cause: The underlying exception from the emitter.
    """

    def __init__(
        self,
        election_id: UUID,
        event_type: str,
        cause: Exception,
    ) -> None:
        """Initialize event emission error.

        Args:
            election_id: Election the event belongs to.
            event_type: Type string of the event that failed.
            cause: The underlying exception from event emission.
        """
        self.election_id = election_id
        self.event_type = event_type
        self.cause = cause
        super().__init__(
            f"Failed to emit {event_type} for election {election_id}: {cause}"
        )
