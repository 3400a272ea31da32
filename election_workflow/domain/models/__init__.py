"""Election domain models."""

from election_workflow.domain.models.election import GENESIS_DESCRIPTION, Election
from election_workflow.domain.models.proposal import Proposal, ProposalRegistry
from election_workflow.domain.models.voter import (
    ZERO_IDENTITY,
    Voter,
    VoterRegistry,
    is_valid_identity,
)
from election_workflow.domain.models.workflow_status import (
    INITIAL_STATUS,
    STATUS_TRANSITION_MATRIX,
    WorkflowStatus,
)

__all__: list[str] = [
    "Election",
    "GENESIS_DESCRIPTION",
    "INITIAL_STATUS",
    "Proposal",
    "ProposalRegistry",
    "STATUS_TRANSITION_MATRIX",
    "Voter",
    "VoterRegistry",
    "WorkflowStatus",
    "ZERO_IDENTITY",
    "is_valid_identity",
]
