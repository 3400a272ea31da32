"""Stub implementation of ElectionEventEmitterPort for testing.

This stub captures emitted events for test assertions without
requiring a real event log.

Usage in tests:
    stub = ElectionEventEmitterStub()
    service = ElectionService(election, event_emitter=stub)

    await service.add_voter(admin_id, "0xabc")

    assert len(stub.emitted_events) == 1
    assert stub.emitted_events[0].voter_id == "0xabc"

    # Simulate a delivery failure
    stub.should_fail = True
    with pytest.raises(EventEmissionError):
        await service.add_voter(admin_id, "0xdef")
"""

from __future__ import annotations

from election_workflow.application.ports.election_event_emitter import (
    ElectionEventEmitterPort,
)
from election_workflow.domain.events.election import ElectionEvent


class ElectionEventEmitterStub(ElectionEventEmitterPort):
    """Stub implementation for testing election event emission.

    Attributes:
        emitted_events: All successfully emitted events, in order.
        should_fail: If True, emit raises RuntimeError.
        fail_exception: If set, emit raises this exception.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty state."""
        self.emitted_events: list[ElectionEvent] = []
        self.should_fail: bool = False
        self.fail_exception: Exception | None = None

    async def emit(self, event: ElectionEvent) -> None:
        """Capture the event for test assertions.

        Raises:
            Exception: If fail_exception is set or should_fail is True.
        """
        if self.fail_exception is not None:
            raise self.fail_exception

        if self.should_fail:
            raise RuntimeError("Simulated election event emission failure")

        self.emitted_events.append(event)

    def events_of_type(self, event_type: str) -> list[ElectionEvent]:
        """Return captured events whose event_type matches."""
        return [e for e in self.emitted_events if e.event_type == event_type]

    def reset(self) -> None:
        """Clear captured events and failure flags."""
        self.emitted_events.clear()
        self.should_fail = False
        self.fail_exception = None
