"""Election Event Emitter Port.

This module defines the protocol for delivering election notifications to
the external observer (event log, ledger, message bus, ...).

Contract:
- emit() is awaited before the operation's new state is committed
- emit() raising means the operation fails and nothing is committed
- Events are delivered in the order the operations were serialized
"""

from __future__ import annotations

from typing import Protocol

from election_workflow.domain.events.election import ElectionEvent


class ElectionEventEmitterPort(Protocol):
    """Protocol for election event emission.

    Example:
        emitter = ElectionEventEmitterStub()
        service = ElectionService(election, event_emitter=emitter)
        await service.add_voter(admin_id, "0xabc")
        assert emitter.emitted_events[0].voter_id == "0xabc"
    """

    async def emit(self, event: ElectionEvent) -> None:
        """Deliver one election event to the observer.

        Args:
            event: VoterRegistered, ProposalRegistered, Voted or
                   WorkflowStatusChange payload.

        Raises:
            Exception: Any delivery failure. The caller discards the
                       pending state change.
        """
        ...
