"""Workflow phase errors for the election state machine.

Every mutating operation is legal in exactly one workflow status. Calling it
in any other status raises InvalidPhaseError and leaves the election
untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from election_workflow.domain.exceptions import ElectionError

if TYPE_CHECKING:
    from election_workflow.domain.models.workflow_status import WorkflowStatus


class InvalidPhaseError(ElectionError):
    """Raised when an operation is illegal in the current workflow status.

    Attributes:
        current_status: Status the election was in when the call was made.
        required_status: Status the operation needs, if there is exactly one.
    """

    def __init__(
        self,
        message: str,
        current_status: WorkflowStatus,
        required_status: WorkflowStatus | None = None,
    ) -> None:
        """Initialize invalid phase error.

        Args:
            message: Human-readable error description.
            current_status: Current workflow status of the election.
            required_status: Status in which the operation is legal (optional).
        """
        self.current_status = current_status
        self.required_status = required_status
        super().__init__(message)


class StatusOverrideDisabledError(InvalidPhaseError):
    """Raised when the direct status override is called while disabled.

    The override bypasses the forward-only transition matrix and is only
    available when the election config explicitly allows it.
    """

    def __init__(
        self,
        current_status: WorkflowStatus,
        requested_status: WorkflowStatus,
    ) -> None:
        self.requested_status = requested_status
        super().__init__(
            f"Workflow status override is disabled: cannot set "
            f"{requested_status.value} from {current_status.value}",
            current_status=current_status,
        )
