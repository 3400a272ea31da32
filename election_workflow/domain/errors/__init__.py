"""Domain errors for the election workflow.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ElectionError.
"""

from election_workflow.domain.errors.access import (
    ADMIN_REQUIRED_MESSAGE,
    VOTER_REQUIRED_MESSAGE,
    UnauthorizedError,
)
from election_workflow.domain.errors.event_emission import EventEmissionError
from election_workflow.domain.errors.registry import (
    AlreadyExistsError,
    AlreadyVotedError,
    ElectionAlreadyExistsError,
    ElectionNotFoundError,
    InvalidArgumentError,
    NotFoundError,
    ProposalNotFoundError,
    VoterAlreadyRegisteredError,
)
from election_workflow.domain.errors.workflow import (
    InvalidPhaseError,
    StatusOverrideDisabledError,
)

__all__: list[str] = [
    "ADMIN_REQUIRED_MESSAGE",
    "VOTER_REQUIRED_MESSAGE",
    "AlreadyExistsError",
    "AlreadyVotedError",
    "ElectionAlreadyExistsError",
    "ElectionNotFoundError",
    "EventEmissionError",
    "InvalidArgumentError",
    "InvalidPhaseError",
    "NotFoundError",
    "ProposalNotFoundError",
    "StatusOverrideDisabledError",
    "UnauthorizedError",
    "VoterAlreadyRegisteredError",
]
