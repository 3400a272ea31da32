"""Workflow status state machine for an election.

State Machine:
    RegisteringVoters -> ProposalsRegistrationStarted
    ProposalsRegistrationStarted -> ProposalsRegistrationEnded
    ProposalsRegistrationEnded -> VotingSessionStarted
    VotingSessionStarted -> VotingSessionEnded
    VotingSessionEnded -> VotesTallied

Terminal State:
    VotesTallied has no outgoing transition.

Transitions only move forward by exactly one step. The administrative
override (Election.with_forced_status) is the single way around this
matrix and is gated by configuration in the service layer.
"""

from __future__ import annotations

from enum import Enum


class WorkflowStatus(Enum):
    """Phase of the election lifecycle, in lifecycle order."""

    REGISTERING_VOTERS = "RegisteringVoters"
    PROPOSALS_REGISTRATION_STARTED = "ProposalsRegistrationStarted"
    PROPOSALS_REGISTRATION_ENDED = "ProposalsRegistrationEnded"
    VOTING_SESSION_STARTED = "VotingSessionStarted"
    VOTING_SESSION_ENDED = "VotingSessionEnded"
    VOTES_TALLIED = "VotesTallied"

    @property
    def ordinal(self) -> int:
        """Return the 0-based position of this status in the lifecycle."""
        return _LIFECYCLE_ORDER.index(self)

    def is_terminal(self) -> bool:
        """Check if no further transition is defined out of this status."""
        return self is WorkflowStatus.VOTES_TALLIED

    def valid_transitions(self) -> frozenset[WorkflowStatus]:
        """Get valid forward transitions from this status.

        Returns:
            Frozenset of statuses this status can transition to.
            Empty set for the terminal status.
        """
        return STATUS_TRANSITION_MATRIX.get(self, frozenset())

    @classmethod
    def from_ordinal(cls, ordinal: int) -> WorkflowStatus:
        """Look up a status by its lifecycle position.

        Raises:
            ValueError: If ordinal is outside the lifecycle.
        """
        if not 0 <= ordinal < len(_LIFECYCLE_ORDER):
            raise ValueError(f"Unknown workflow status ordinal: {ordinal}")
        return _LIFECYCLE_ORDER[ordinal]


_LIFECYCLE_ORDER: tuple[WorkflowStatus, ...] = tuple(WorkflowStatus)

INITIAL_STATUS: WorkflowStatus = WorkflowStatus.REGISTERING_VOTERS

# Each status maps to its single successor
STATUS_TRANSITION_MATRIX: dict[WorkflowStatus, frozenset[WorkflowStatus]] = {
    current: frozenset({successor})
    for current, successor in zip(_LIFECYCLE_ORDER, _LIFECYCLE_ORDER[1:])
}
STATUS_TRANSITION_MATRIX[WorkflowStatus.VOTES_TALLIED] = frozenset()

# Failure message for each transition, keyed by the target status
TRANSITION_FAILURE_MESSAGES: dict[WorkflowStatus, str] = {
    WorkflowStatus.PROPOSALS_REGISTRATION_STARTED: (
        "Registering proposals cant be started now"
    ),
    WorkflowStatus.PROPOSALS_REGISTRATION_ENDED: (
        "Registering proposals havent started yet"
    ),
    WorkflowStatus.VOTING_SESSION_STARTED: (
        "Registering proposals phase is not finished"
    ),
    WorkflowStatus.VOTING_SESSION_ENDED: "Voting session havent started yet",
    WorkflowStatus.VOTES_TALLIED: "Current status is not voting session ended",
}
