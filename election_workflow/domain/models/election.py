"""Election aggregate.

An Election owns exactly one voter registry, one proposal registry, one
workflow status and the administrator identity. The aggregate is a frozen
dataclass: every operation validates its preconditions and returns a new
Election, so a failed operation can never leave a partial mutation behind.

Phase gates:
- with_voter: RegisteringVoters
- with_proposal: ProposalsRegistrationStarted
- with_vote: VotingSessionStarted
- with_tally: VotingSessionEnded
- with_status: forward by exactly one step

Access checks (administrator, registered voter) are the caller's job;
see AccessGate in the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from uuid import UUID, uuid4

from election_workflow.domain.errors.access import (
    VOTER_REQUIRED_MESSAGE,
    UnauthorizedError,
)
from election_workflow.domain.errors.registry import (
    AlreadyVotedError,
    InvalidArgumentError,
    ProposalNotFoundError,
)
from election_workflow.domain.errors.workflow import InvalidPhaseError
from election_workflow.domain.models.proposal import (
    DEFAULT_MAX_DESCRIPTION_LENGTH,
    Proposal,
    ProposalRegistry,
)
from election_workflow.domain.models.voter import (
    VoterRegistry,
    is_valid_identity,
)
from election_workflow.domain.models.workflow_status import (
    INITIAL_STATUS,
    TRANSITION_FAILURE_MESSAGES,
    WorkflowStatus,
)
from election_workflow.domain.services.tally import select_winning_proposal

GENESIS_DESCRIPTION = "GENESIS"

VOTER_REGISTRATION_CLOSED_MESSAGE = "Voters registration is not open yet"
PROPOSALS_CLOSED_MESSAGE = "Proposals are not allowed yet"
VOTING_CLOSED_MESSAGE = "Voting session havent started yet"
NOT_TALLIED_MESSAGE = "Votes have not been tallied yet"


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class Election:
    """Immutable snapshot of one election.

    Attributes:
        election_id: Unique identifier of the election.
        admin_id: Administrator identity, fixed at creation.
        status: Current workflow status.
        voters: Registry of whitelisted voters.
        proposals: Registry of submitted proposals.
        winning_proposal_id: Winner, set once votes are tallied.
        created_at: Creation timestamp (UTC).
    """

    election_id: UUID
    admin_id: str
    status: WorkflowStatus = field(default=INITIAL_STATUS)
    voters: VoterRegistry = field(default_factory=VoterRegistry)
    proposals: ProposalRegistry = field(default_factory=ProposalRegistry)
    winning_proposal_id: int | None = field(default=None)
    created_at: datetime = field(default_factory=_utc_now)

    def __post_init__(self) -> None:
        """Validate election fields."""
        if not is_valid_identity(self.admin_id):
            raise InvalidArgumentError("Administrator cant have invalid address")
        if self.winning_proposal_id is not None and not self.proposals.contains(
            self.winning_proposal_id
        ):
            raise ValueError("Winning proposal must reference an existing proposal")

    def __hash__(self) -> int:
        """Hash based on election_id (registries are compared by eq)."""
        return hash(self.election_id)

    @classmethod
    def create(cls, admin_id: str, election_id: UUID | None = None) -> Election:
        """Create a new election in the RegisteringVoters status.

        Args:
            admin_id: Administrator identity.
            election_id: Identifier to use; a fresh uuid4 when omitted.

        Raises:
            InvalidArgumentError: If admin_id is the zero/empty identity.
        """
        return cls(election_id=election_id or uuid4(), admin_id=admin_id)

    def is_admin(self, caller_id: str) -> bool:
        return caller_id == self.admin_id

    def require_status(self, required: WorkflowStatus, message: str) -> None:
        """Fail unless the election is in the required status.

        Raises:
            InvalidPhaseError: If status differs from required.
        """
        if self.status is not required:
            raise InvalidPhaseError(
                message, current_status=self.status, required_status=required
            )

    def with_voter(self, voter_id: str) -> Election:
        """Create new election with voter_id added to the whitelist.

        Raises:
            InvalidPhaseError: Outside RegisteringVoters.
            InvalidArgumentError: If voter_id is the zero/empty identity.
            VoterAlreadyRegisteredError: If voter_id is already registered.
        """
        self.require_status(
            WorkflowStatus.REGISTERING_VOTERS, VOTER_REGISTRATION_CLOSED_MESSAGE
        )
        return replace(self, voters=self.voters.with_voter(voter_id))

    def with_proposal(
        self,
        description: str,
        submitted_by: str,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
    ) -> Election:
        """Create new election with a proposal appended.

        The new proposal's id is ``self.proposals.next_id``.

        Raises:
            InvalidPhaseError: Outside ProposalsRegistrationStarted.
            InvalidArgumentError: If description is empty or too long.
        """
        self.require_status(
            WorkflowStatus.PROPOSALS_REGISTRATION_STARTED, PROPOSALS_CLOSED_MESSAGE
        )
        return replace(
            self,
            proposals=self.proposals.with_proposal(
                description, submitted_by, max_description_length
            ),
        )

    def with_vote(self, voter_id: str, proposal_id: int) -> Election:
        """Create new election where voter_id has voted for proposal_id.

        Checks run in this order: registered, already voted, phase,
        proposal exists.

        Raises:
            UnauthorizedError: If voter_id is not a registered voter.
            AlreadyVotedError: If the voter has already voted.
            InvalidPhaseError: Outside VotingSessionStarted.
            ProposalNotFoundError: If proposal_id is out of range.
        """
        voter = self.voters.get(voter_id)
        if voter is None or not voter.is_registered:
            raise UnauthorizedError(voter_id, VOTER_REQUIRED_MESSAGE)
        if voter.has_voted:
            raise AlreadyVotedError(voter_id, voter.voted_proposal_id)
        self.require_status(WorkflowStatus.VOTING_SESSION_STARTED, VOTING_CLOSED_MESSAGE)
        proposals = self.proposals.with_vote(proposal_id)
        return replace(
            self,
            voters=self.voters.with_vote(voter_id, proposal_id),
            proposals=proposals,
        )

    def with_status(self, new_status: WorkflowStatus) -> Election:
        """Create new election advanced to new_status.

        Only the single forward step out of the current status is accepted.

        Raises:
            InvalidPhaseError: If new_status is not the current status's successor.
        """
        if new_status not in self.status.valid_transitions():
            message = TRANSITION_FAILURE_MESSAGES.get(
                new_status,
                f"Invalid workflow transition: {self.status.value} -> {new_status.value}",
            )
            raise InvalidPhaseError(message, current_status=self.status)
        return replace(self, status=new_status)

    def with_forced_status(self, new_status: WorkflowStatus) -> Election:
        """Create new election set directly to new_status.

        Bypasses the transition matrix. Registries and the tally result are
        kept as they are.
        """
        return replace(self, status=new_status)

    def with_genesis_proposal(self) -> Election:
        """Create new election with the GENESIS placeholder proposal appended."""
        return self.with_proposal(GENESIS_DESCRIPTION, self.admin_id)

    def with_tally(self) -> Election:
        """Create new election with votes tallied and status VotesTallied.

        Raises:
            InvalidPhaseError: Outside VotingSessionEnded.
        """
        tallied = self.with_status(WorkflowStatus.VOTES_TALLIED)
        return replace(
            tallied, winning_proposal_id=select_winning_proposal(self.proposals)
        )

    def winner_id(self) -> int:
        """Return the winning proposal id.

        Raises:
            InvalidPhaseError: Before VotesTallied is reached.
            ProposalNotFoundError: If the tally found no proposals.
        """
        self.require_status(WorkflowStatus.VOTES_TALLIED, NOT_TALLIED_MESSAGE)
        if self.winning_proposal_id is None:
            raise ProposalNotFoundError(None, len(self.proposals))
        return self.winning_proposal_id

    def winning_proposal(self) -> Proposal:
        """Return the winning proposal record (same rules as winner_id)."""
        return self.proposals.get(self.winner_id())
