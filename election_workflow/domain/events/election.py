"""Election event payloads.

This module defines the four notifications emitted by election operations:
- VoterRegisteredEvent: a voter was added to the whitelist
- ProposalRegisteredEvent: a proposal was appended to the registry
- VotedEvent: a voter cast their ballot
- WorkflowStatusChangeEvent: the workflow status moved

Each event is emitted in the same call that performed the mutation, and
only when the mutation succeeds.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union
from uuid import UUID

from election_workflow.domain.models.workflow_status import WorkflowStatus

VOTER_REGISTERED_EVENT_TYPE: str = "election.voter.registered"
PROPOSAL_REGISTERED_EVENT_TYPE: str = "election.proposal.registered"
VOTED_EVENT_TYPE: str = "election.vote.cast"
WORKFLOW_STATUS_CHANGE_EVENT_TYPE: str = "election.workflow.status_changed"

# Schema version for election events
ELECTION_EVENT_SCHEMA_VERSION: str = "1.0.0"


@dataclass(frozen=True, eq=True)
class VoterRegisteredEvent:
    """Payload for a voter added to the whitelist.

    Attributes:
        election_id: Election the voter was registered in.
        voter_id: Identity of the new voter.
    """

    election_id: UUID
    voter_id: str

    @property
    def event_type(self) -> str:
        return VOTER_REGISTERED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        """Convert payload to dict for event storage.

        Returns:
            Dict representation including schema_version.
        """
        return {
            "event_type": self.event_type,
            "election_id": str(self.election_id),
            "voter_id": self.voter_id,
            "schema_version": ELECTION_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class ProposalRegisteredEvent:
    """Payload for a proposal appended to the registry.

    Attributes:
        election_id: Election the proposal belongs to.
        proposal_id: Index of the new proposal.
    """

    election_id: UUID
    proposal_id: int

    @property
    def event_type(self) -> str:
        return PROPOSAL_REGISTERED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "election_id": str(self.election_id),
            "proposal_id": self.proposal_id,
            "schema_version": ELECTION_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class VotedEvent:
    """Payload for a ballot cast by a voter.

    Attributes:
        election_id: Election the vote was cast in.
        voter_id: Identity of the voter.
        proposal_id: Proposal that received the vote.
    """

    election_id: UUID
    voter_id: str
    proposal_id: int

    @property
    def event_type(self) -> str:
        return VOTED_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "election_id": str(self.election_id),
            "voter_id": self.voter_id,
            "proposal_id": self.proposal_id,
            "schema_version": ELECTION_EVENT_SCHEMA_VERSION,
        }


@dataclass(frozen=True, eq=True)
class WorkflowStatusChangeEvent:
    """Payload for a workflow status change.

    The serialized form carries both the status name and its lifecycle
    ordinal, so consumers keyed on numeric status codes can still read it.

    Attributes:
        election_id: Election whose status changed.
        previous_status: Status before the change.
        new_status: Status after the change.
    """

    election_id: UUID
    previous_status: WorkflowStatus
    new_status: WorkflowStatus

    @property
    def event_type(self) -> str:
        return WORKFLOW_STATUS_CHANGE_EVENT_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "event_type": self.event_type,
            "election_id": str(self.election_id),
            "previous_status": self.previous_status.value,
            "previous_status_code": self.previous_status.ordinal,
            "new_status": self.new_status.value,
            "new_status_code": self.new_status.ordinal,
            "schema_version": ELECTION_EVENT_SCHEMA_VERSION,
        }


ElectionEvent = Union[
    VoterRegisteredEvent,
    ProposalRegisteredEvent,
    VotedEvent,
    WorkflowStatusChangeEvent,
]
