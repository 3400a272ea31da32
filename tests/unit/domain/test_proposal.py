"""Unit tests for Proposal and ProposalRegistry domain models."""

import pytest

from election_workflow.domain.errors import (
    InvalidArgumentError,
    NotFoundError,
    ProposalNotFoundError,
)
from election_workflow.domain.models.proposal import Proposal, ProposalRegistry

VOTER = "0x" + "1" * 40


class TestProposal:
    """Tests for Proposal domain model."""

    def test_creation(self) -> None:
        proposal = Proposal(proposal_id=0, description="P0", submitted_by=VOTER)
        assert proposal.vote_count == 0
        assert proposal.description == "P0"

    def test_is_frozen(self) -> None:
        proposal = Proposal(proposal_id=0, description="P0", submitted_by=VOTER)
        with pytest.raises(AttributeError):
            proposal.description = "changed"  # type: ignore[misc]

    def test_negative_vote_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="vote_count must be non-negative"):
            Proposal(proposal_id=0, description="P0", submitted_by=VOTER, vote_count=-1)

    def test_negative_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="proposal_id must be non-negative"):
            Proposal(proposal_id=-1, description="P0", submitted_by=VOTER)

    def test_with_vote_increments(self) -> None:
        proposal = Proposal(proposal_id=0, description="P0", submitted_by=VOTER)
        assert proposal.with_vote().with_vote().vote_count == 2
        assert proposal.vote_count == 0


class TestProposalRegistry:
    """Tests for ProposalRegistry."""

    def test_ids_are_contiguous_from_zero(self) -> None:
        registry = ProposalRegistry()
        for description in ["P0", "P1", "P2"]:
            registry = registry.with_proposal(description, VOTER)

        assert [p.proposal_id for p in registry] == [0, 1, 2]
        assert [p.description for p in registry] == ["P0", "P1", "P2"]
        assert registry.next_id == 3

    def test_empty_description_rejected(self) -> None:
        with pytest.raises(
            InvalidArgumentError, match="Vous ne pouvez pas ne rien proposer"
        ):
            ProposalRegistry().with_proposal("", VOTER)

    def test_description_length_limit(self) -> None:
        registry = ProposalRegistry().with_proposal("x" * 5, VOTER, max_description_length=5)
        assert len(registry) == 1

        with pytest.raises(InvalidArgumentError, match="maximum length of 5"):
            registry.with_proposal("x" * 6, VOTER, max_description_length=5)

    @pytest.mark.parametrize("proposal_id", [-1, 1, 10])
    def test_get_out_of_range_raises(self, proposal_id: int) -> None:
        registry = ProposalRegistry().with_proposal("P0", VOTER)
        with pytest.raises(ProposalNotFoundError, match="Proposal not found") as exc_info:
            registry.get(proposal_id)

        assert isinstance(exc_info.value, NotFoundError)
        assert exc_info.value.proposal_id == proposal_id
        assert exc_info.value.proposal_count == 1

    def test_with_vote_only_touches_target(self) -> None:
        registry = (
            ProposalRegistry()
            .with_proposal("P0", VOTER)
            .with_proposal("P1", VOTER)
            .with_vote(1)
        )
        assert registry.get(0).vote_count == 0
        assert registry.get(1).vote_count == 1

    def test_with_vote_unknown_raises(self) -> None:
        with pytest.raises(ProposalNotFoundError):
            ProposalRegistry().with_vote(0)
