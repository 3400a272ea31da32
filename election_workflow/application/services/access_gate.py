"""Access gate for election operations.

Decides whether the caller of an operation is the administrator or a
registered voter. Caller identity is always passed explicitly; there is
no ambient caller context. The gate has no side effects.
"""

from __future__ import annotations

from election_workflow.domain.errors.access import (
    ADMIN_REQUIRED_MESSAGE,
    VOTER_REQUIRED_MESSAGE,
    UnauthorizedError,
)
from election_workflow.domain.models.election import Election
from election_workflow.domain.models.voter import Voter


class AccessGate:
    """Caller identity checks against one election snapshot."""

    def require_admin(self, election: Election, caller_id: str) -> None:
        """Fail unless caller_id is the election's administrator.

        Raises:
            UnauthorizedError: If caller_id is not the administrator.
        """
        if not election.is_admin(caller_id):
            raise UnauthorizedError(caller_id, ADMIN_REQUIRED_MESSAGE)

    def require_registered_voter(self, election: Election, caller_id: str) -> Voter:
        """Fail unless caller_id is a registered voter of the election.

        Returns:
            The caller's voter record.

        Raises:
            UnauthorizedError: If caller_id is not on the voter registry.
        """
        voter = election.voters.get(caller_id)
        if voter is None or not voter.is_registered:
            raise UnauthorizedError(caller_id, VOTER_REQUIRED_MESSAGE)
        return voter
