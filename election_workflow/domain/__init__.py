"""
Domain layer - Pure business logic for the election workflow.

This layer contains:
- Domain models (Election, Voter, Proposal, WorkflowStatus)
- Domain events (election notifications)
- Domain services (vote tally)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or config.
Only stdlib and typing imports are allowed.
"""

from election_workflow.domain.exceptions import ElectionError
from election_workflow.domain.models import Election, WorkflowStatus

__all__: list[str] = [
    "ElectionError",
    "Election",
    "WorkflowStatus",
]
