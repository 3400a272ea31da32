"""Builders for election services in a known phase.

advance_to() only uses the regular forward transitions, so a test that
starts from its result exercises the same path production code does.
"""

from __future__ import annotations

from election_workflow.application.services.election_service import ElectionService
from election_workflow.config.election_config import ElectionConfig
from election_workflow.domain.models.election import Election
from election_workflow.domain.models.workflow_status import WorkflowStatus
from election_workflow.infrastructure.stubs import ElectionEventEmitterStub

ADMIN = "0x" + "a" * 40
VOTER_1 = "0x" + "1" * 40
VOTER_2 = "0x" + "2" * 40
VOTER_3 = "0x" + "3" * 40
VOTER_4 = "0x" + "4" * 40
OUTSIDER = "0x" + "f" * 40

_FORWARD_STEPS = {
    WorkflowStatus.REGISTERING_VOTERS: ElectionService.start_proposals_registering,
    WorkflowStatus.PROPOSALS_REGISTRATION_STARTED: ElectionService.end_proposals_registering,
    WorkflowStatus.PROPOSALS_REGISTRATION_ENDED: ElectionService.start_voting_session,
    WorkflowStatus.VOTING_SESSION_STARTED: ElectionService.end_voting_session,
    WorkflowStatus.VOTING_SESSION_ENDED: ElectionService.tally_votes,
}


def make_service(
    config: ElectionConfig | None = None,
    emitter: ElectionEventEmitterStub | None = None,
) -> tuple[ElectionService, ElectionEventEmitterStub]:
    """Create a fresh election administered by ADMIN."""
    emitter = emitter or ElectionEventEmitterStub()
    service = ElectionService(
        Election.create(ADMIN),
        event_emitter=emitter,
        config=config,
    )
    return service, emitter


async def advance_to(service: ElectionService, target: WorkflowStatus) -> None:
    """Step the election forward until it reaches target.

    Raises:
        ValueError: If target is behind the current status.
    """
    if target.ordinal < service.election.status.ordinal:
        raise ValueError(
            f"Cannot go back from {service.election.status.value} to {target.value}"
        )
    while service.election.status is not target:
        step = _FORWARD_STEPS[service.election.status]
        await step(service, ADMIN)
