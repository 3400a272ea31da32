"""Access errors raised by the caller identity checks."""

from __future__ import annotations

from election_workflow.domain.exceptions import ElectionError

ADMIN_REQUIRED_MESSAGE = "Ownable: caller is not the owner"
VOTER_REQUIRED_MESSAGE = "You're not a voter"


class UnauthorizedError(ElectionError):
    """Raised when the caller fails an access check.

    Attributes:
        caller_id: Identity that attempted the operation.
    """

    def __init__(self, caller_id: str, message: str) -> None:
        self.caller_id = caller_id
        super().__init__(message)
