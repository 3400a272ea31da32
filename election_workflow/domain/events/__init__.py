"""Election domain events."""

from election_workflow.domain.events.election import (
    ELECTION_EVENT_SCHEMA_VERSION,
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTED_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    WORKFLOW_STATUS_CHANGE_EVENT_TYPE,
    ElectionEvent,
    ProposalRegisteredEvent,
    VotedEvent,
    VoterRegisteredEvent,
    WorkflowStatusChangeEvent,
)

__all__: list[str] = [
    "ELECTION_EVENT_SCHEMA_VERSION",
    "PROPOSAL_REGISTERED_EVENT_TYPE",
    "VOTED_EVENT_TYPE",
    "VOTER_REGISTERED_EVENT_TYPE",
    "WORKFLOW_STATUS_CHANGE_EVENT_TYPE",
    "ElectionEvent",
    "ProposalRegisteredEvent",
    "VotedEvent",
    "VoterRegisteredEvent",
    "WorkflowStatusChangeEvent",
]
