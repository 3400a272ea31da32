"""Voter domain model and voter registry.

A voter is created once by the administrator during voter registration
and is never deleted. Its participation fields change exactly once, when
the voter casts a ballot.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace

from election_workflow.domain.errors.access import (
    VOTER_REQUIRED_MESSAGE,
    UnauthorizedError,
)
from election_workflow.domain.errors.registry import (
    AlreadyVotedError,
    InvalidArgumentError,
    VoterAlreadyRegisteredError,
)

ZERO_IDENTITY: str = "0x" + "0" * 40

INVALID_IDENTITY_MESSAGE = "Voters cant have invalid address"

_ZERO_ADDRESS_PATTERN = re.compile(r"^0[xX]0+$")


def is_valid_identity(identity: str) -> bool:
    """Check that an identity is not the zero/empty identity.

    Empty strings, whitespace-only strings and all-zero hex addresses
    (``0x0``, ``0x000...000``) are rejected.
    """
    stripped = identity.strip()
    if not stripped:
        return False
    return _ZERO_ADDRESS_PATTERN.match(stripped) is None


@dataclass(frozen=True, eq=True)
class Voter:
    """A whitelisted participant of an election.

    Attributes:
        voter_id: Identity of the voter (unique key in the registry).
        is_registered: Whether the voter is on the whitelist.
        has_voted: Whether the voter has already cast a ballot.
        voted_proposal_id: Proposal the voter voted for, if any.
    """

    voter_id: str
    is_registered: bool = True
    has_voted: bool = False
    voted_proposal_id: int | None = None

    def __post_init__(self) -> None:
        """Validate voter fields."""
        if self.has_voted and self.voted_proposal_id is None:
            raise ValueError("A voter who has voted must reference a proposal")

    def with_vote(self, proposal_id: int) -> Voter:
        """Create new voter record marked as having voted.

        Raises:
            AlreadyVotedError: If the voter has already voted.
        """
        if self.has_voted:
            raise AlreadyVotedError(self.voter_id, self.voted_proposal_id)
        return replace(self, has_voted=True, voted_proposal_id=proposal_id)


@dataclass(frozen=True, eq=True)
class VoterRegistry:
    """Immutable mapping from voter identity to voter record.

    Every mutation returns a new registry; the receiver is left unchanged.
    """

    voters: dict[str, Voter] = field(default_factory=dict)

    def __hash__(self) -> int:
        """Hash over the voter records; dict order does not matter."""
        return hash(frozenset(self.voters.items()))

    def __len__(self) -> int:
        return len(self.voters)

    def __contains__(self, voter_id: object) -> bool:
        return voter_id in self.voters

    def get(self, voter_id: str) -> Voter | None:
        """Retrieve a voter by identity, None if not registered."""
        return self.voters.get(voter_id)

    def is_registered(self, voter_id: str) -> bool:
        voter = self.voters.get(voter_id)
        return voter is not None and voter.is_registered

    def identities(self) -> list[str]:
        """Return registered identities in registration order."""
        return list(self.voters)

    def with_voter(self, voter_id: str) -> VoterRegistry:
        """Create new registry with an additional registered voter.

        Args:
            voter_id: Identity to whitelist.

        Returns:
            New VoterRegistry containing the voter.

        Raises:
            InvalidArgumentError: If voter_id is the zero/empty identity.
            VoterAlreadyRegisteredError: If voter_id is already registered.
        """
        if not is_valid_identity(voter_id):
            raise InvalidArgumentError(INVALID_IDENTITY_MESSAGE)
        if voter_id in self.voters:
            raise VoterAlreadyRegisteredError(voter_id)
        return VoterRegistry(voters={**self.voters, voter_id: Voter(voter_id=voter_id)})

    def with_vote(self, voter_id: str, proposal_id: int) -> VoterRegistry:
        """Create new registry where voter_id has voted for proposal_id.

        Raises:
            UnauthorizedError: If voter_id is not a registered voter.
            AlreadyVotedError: If the voter has already voted.
        """
        voter = self.voters.get(voter_id)
        if voter is None or not voter.is_registered:
            raise UnauthorizedError(voter_id, VOTER_REQUIRED_MESSAGE)
        return VoterRegistry(
            voters={**self.voters, voter_id: voter.with_vote(proposal_id)}
        )
