"""Vote tally for a closed voting session.

Tie-break policy: when several proposals share the greatest vote count,
the one with the lowest index (the earliest submitted) wins. A tie is
not an error.
"""

from __future__ import annotations

from collections.abc import Iterable

from election_workflow.domain.models.proposal import Proposal


def select_winning_proposal(proposals: Iterable[Proposal]) -> int | None:
    """Select the proposal with the strictly greatest vote count.

    Proposals are scanned in index order and the leader only changes when a
    later proposal has strictly more votes, so the lowest index among the
    maximal proposals wins.

    Args:
        proposals: Proposals in index order.

    Returns:
        The winning proposal id, or None when there are no proposals.

    Example:
        >>> ps = [Proposal(0, "a", "x", 2), Proposal(1, "b", "y", 2)]
        >>> select_winning_proposal(ps)
        0
    """
    winner: Proposal | None = None
    for proposal in proposals:
        if winner is None or proposal.vote_count > winner.vote_count:
            winner = proposal
    return winner.proposal_id if winner is not None else None
