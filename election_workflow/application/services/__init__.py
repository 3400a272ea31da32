"""Application services for the election workflow."""

from election_workflow.application.services.access_gate import AccessGate
from election_workflow.application.services.election_directory_service import (
    ElectionDirectoryService,
)
from election_workflow.application.services.election_service import ElectionService

__all__: list[str] = [
    "AccessGate",
    "ElectionDirectoryService",
    "ElectionService",
]
