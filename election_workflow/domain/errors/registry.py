"""Registry errors for voters, proposals, votes and elections.

These errors cover malformed input and registry invariants:
- InvalidArgumentError: empty identity, empty or oversized description
- AlreadyExistsError: duplicate voter or election registration
- AlreadyVotedError: second vote by the same voter
- NotFoundError: unknown proposal or election
"""

from __future__ import annotations

from uuid import UUID

from election_workflow.domain.exceptions import ElectionError


class InvalidArgumentError(ElectionError):
    """Raised when an operation receives malformed input."""


class AlreadyExistsError(ElectionError):
    """Raised when registering something that is already registered."""


class VoterAlreadyRegisteredError(AlreadyExistsError):
    """Raised when the administrator adds the same voter twice.

    Attributes:
        voter_id: Identity that is already on the voter registry.
    """

    def __init__(self, voter_id: str) -> None:
        self.voter_id = voter_id
        super().__init__("Already registered")


class ElectionAlreadyExistsError(AlreadyExistsError):
    """Raised when creating an election with an identifier already in use."""

    def __init__(self, election_id: UUID) -> None:
        self.election_id = election_id
        super().__init__(f"Election already exists: {election_id}")


class AlreadyVotedError(ElectionError):
    """Raised when a voter tries to vote a second time.

    Attributes:
        voter_id: The voter that already cast a ballot.
        voted_proposal_id: Proposal the voter originally voted for.
    """

    def __init__(self, voter_id: str, voted_proposal_id: int | None) -> None:
        self.voter_id = voter_id
        self.voted_proposal_id = voted_proposal_id
        super().__init__("You have already voted")


class NotFoundError(ElectionError):
    """Raised when a referenced entity does not exist."""


class ProposalNotFoundError(NotFoundError):
    """Raised when a proposal id does not index an existing proposal.

    Attributes:
        proposal_id: The requested proposal id.
        proposal_count: Number of proposals registered at the time of the call.
    """

    def __init__(self, proposal_id: int | None, proposal_count: int) -> None:
        self.proposal_id = proposal_id
        self.proposal_count = proposal_count
        super().__init__("Proposal not found")


class ElectionNotFoundError(NotFoundError):
    """Raised when no election is registered under the given identifier."""

    def __init__(self, election_id: UUID) -> None:
        self.election_id = election_id
        super().__init__(f"Election not found: {election_id}")
