"""Proposal domain model and proposal registry.

Proposal identifiers are their 0-based insertion index. They are stable
and contiguous: proposals are only ever appended, never removed or
reordered, and a description never changes once submitted.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from election_workflow.domain.errors.registry import (
    InvalidArgumentError,
    ProposalNotFoundError,
)

EMPTY_DESCRIPTION_MESSAGE = "Vous ne pouvez pas ne rien proposer"

DEFAULT_MAX_DESCRIPTION_LENGTH: int = 10_000


@dataclass(frozen=True, eq=True)
class Proposal:
    """A proposal submitted by a registered voter.

    Attributes:
        proposal_id: Index of the proposal in the registry.
        description: Non-empty proposal text.
        submitted_by: Identity of the submitter.
        vote_count: Number of votes received so far.
    """

    proposal_id: int
    description: str
    submitted_by: str
    vote_count: int = 0

    def __post_init__(self) -> None:
        """Validate proposal fields."""
        if self.proposal_id < 0:
            raise ValueError(f"proposal_id must be non-negative, got {self.proposal_id}")
        if self.vote_count < 0:
            raise ValueError(f"vote_count must be non-negative, got {self.vote_count}")

    def with_vote(self) -> Proposal:
        """Create new proposal with one more vote."""
        return replace(self, vote_count=self.vote_count + 1)


@dataclass(frozen=True, eq=True)
class ProposalRegistry:
    """Immutable ordered sequence of proposals."""

    proposals: tuple[Proposal, ...] = ()

    def __len__(self) -> int:
        return len(self.proposals)

    def __iter__(self) -> Iterator[Proposal]:
        return iter(self.proposals)

    @property
    def next_id(self) -> int:
        """Identifier the next appended proposal will receive."""
        return len(self.proposals)

    def contains(self, proposal_id: int) -> bool:
        return 0 <= proposal_id < len(self.proposals)

    def get(self, proposal_id: int) -> Proposal:
        """Retrieve a proposal by id.

        Raises:
            ProposalNotFoundError: If proposal_id is negative or out of range.
        """
        if not self.contains(proposal_id):
            raise ProposalNotFoundError(proposal_id, len(self.proposals))
        return self.proposals[proposal_id]

    def with_proposal(
        self,
        description: str,
        submitted_by: str,
        max_description_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
    ) -> ProposalRegistry:
        """Create new registry with a proposal appended at the next index.

        Args:
            description: Proposal text.
            submitted_by: Identity of the submitting voter.
            max_description_length: Upper bound on the description length.

        Returns:
            New ProposalRegistry with the proposal appended.

        Raises:
            InvalidArgumentError: If description is empty or too long.
        """
        if not description:
            raise InvalidArgumentError(EMPTY_DESCRIPTION_MESSAGE)
        if len(description) > max_description_length:
            raise InvalidArgumentError(
                f"Proposal description exceeds maximum length of "
                f"{max_description_length} characters"
            )
        proposal = Proposal(
            proposal_id=self.next_id,
            description=description,
            submitted_by=submitted_by,
        )
        return ProposalRegistry(proposals=self.proposals + (proposal,))

    def with_vote(self, proposal_id: int) -> ProposalRegistry:
        """Create new registry where proposal_id has one more vote.

        Raises:
            ProposalNotFoundError: If proposal_id is out of range.
        """
        voted = self.get(proposal_id).with_vote()
        proposals = list(self.proposals)
        proposals[proposal_id] = voted
        return ProposalRegistry(proposals=tuple(proposals))
