"""Unit tests for ElectionDirectoryService.

Elections are independent: each one has its own administrator, registries
and workflow status, and is looked up by id.
"""

from __future__ import annotations

import asyncio
from uuid import uuid4

import pytest
from structlog.testing import capture_logs

from election_workflow.application.services.election_directory_service import (
    ElectionDirectoryService,
)
from election_workflow.config.election_config import ElectionConfig
from election_workflow.domain.errors import (
    ElectionAlreadyExistsError,
    ElectionNotFoundError,
    InvalidArgumentError,
)
from election_workflow.domain.models.voter import ZERO_IDENTITY
from election_workflow.domain.models.workflow_status import WorkflowStatus
from election_workflow.infrastructure.stubs import ElectionEventEmitterStub
from tests.helpers import ADMIN, VOTER_1, VOTER_2


@pytest.fixture
def directory(emitter: ElectionEventEmitterStub) -> ElectionDirectoryService:
    """Create an empty directory sharing the emitter stub."""
    return ElectionDirectoryService(event_emitter=emitter)


class TestCreateElection:
    """Tests for create_election."""

    @pytest.mark.asyncio
    async def test_new_election_is_registering_voters(
        self, directory: ElectionDirectoryService
    ) -> None:
        """A new election starts empty in RegisteringVoters."""
        service = await directory.create_election(ADMIN)

        assert service.admin_id == ADMIN
        assert await service.get_workflow_status() is WorkflowStatus.REGISTERING_VOTERS
        assert len(service.election.proposals) == 0
        assert directory.get_election(service.election_id) is service

    @pytest.mark.asyncio
    async def test_creation_emits_nothing(
        self, directory: ElectionDirectoryService, emitter: ElectionEventEmitterStub
    ) -> None:
        await directory.create_election(ADMIN)
        assert emitter.emitted_events == []

    @pytest.mark.asyncio
    async def test_explicit_id(self, directory: ElectionDirectoryService) -> None:
        election_id = uuid4()
        service = await directory.create_election(ADMIN, election_id=election_id)
        assert service.election_id == election_id

    @pytest.mark.asyncio
    async def test_duplicate_id_rejected(self, directory: ElectionDirectoryService) -> None:
        election_id = uuid4()
        await directory.create_election(ADMIN, election_id=election_id)

        with pytest.raises(ElectionAlreadyExistsError):
            await directory.create_election(VOTER_1, election_id=election_id)

        assert directory.get_election(election_id).admin_id == ADMIN

    @pytest.mark.asyncio
    async def test_zero_admin_rejected(self, directory: ElectionDirectoryService) -> None:
        with pytest.raises(InvalidArgumentError):
            await directory.create_election(ZERO_IDENTITY)

        assert directory.list_election_ids() == []

    @pytest.mark.asyncio
    async def test_config_is_shared(self, emitter: ElectionEventEmitterStub) -> None:
        """Elections inherit the directory's configuration."""
        directory = ElectionDirectoryService(
            event_emitter=emitter,
            config=ElectionConfig(seed_genesis_proposal=True),
        )
        service = await directory.create_election(ADMIN)
        await service.start_proposals_registering(ADMIN)

        assert len(service.election.proposals) == 1

    @pytest.mark.asyncio
    async def test_creation_logged(self, emitter: ElectionEventEmitterStub) -> None:
        with capture_logs() as cap_logs:
            directory = ElectionDirectoryService(event_emitter=emitter)
            service = await directory.create_election(ADMIN)

        created = [e for e in cap_logs if e["event"] == "election_created"]
        assert len(created) == 1
        assert created[0]["election_id"] == str(service.election_id)
        assert created[0]["service"] == "ElectionDirectoryService"

    @pytest.mark.asyncio
    async def test_zero_admin_rejection_logged(
        self, emitter: ElectionEventEmitterStub
    ) -> None:
        with capture_logs() as cap_logs:
            directory = ElectionDirectoryService(event_emitter=emitter)
            with pytest.raises(InvalidArgumentError):
                await directory.create_election(ZERO_IDENTITY)

        rejected = [e for e in cap_logs if e["event"] == "create_election_rejected"]
        assert len(rejected) == 1
        assert rejected[0]["log_level"] == "warning"
        assert rejected[0]["error_type"] == "InvalidArgumentError"
        assert rejected[0]["admin_id"] == ZERO_IDENTITY
        assert not any(e["event"] == "election_created" for e in cap_logs)


class TestLookup:
    """Tests for get_election and list_election_ids."""

    def test_unknown_election(self, directory: ElectionDirectoryService) -> None:
        with pytest.raises(ElectionNotFoundError):
            directory.get_election(uuid4())

    @pytest.mark.asyncio
    async def test_ids_in_creation_order(self, directory: ElectionDirectoryService) -> None:
        first = await directory.create_election(ADMIN)
        second = await directory.create_election(VOTER_1)

        assert directory.list_election_ids() == [first.election_id, second.election_id]

    @pytest.mark.asyncio
    async def test_concurrent_creation(self, directory: ElectionDirectoryService) -> None:
        services = await asyncio.gather(
            *(directory.create_election(ADMIN) for _ in range(10))
        )
        assert len(set(directory.list_election_ids())) == 10
        assert {s.election_id for s in services} == set(directory.list_election_ids())


class TestIsolation:
    """Elections do not share state."""

    @pytest.mark.asyncio
    async def test_registries_are_independent(
        self, directory: ElectionDirectoryService, emitter: ElectionEventEmitterStub
    ) -> None:
        first = await directory.create_election(ADMIN)
        second = await directory.create_election(VOTER_2)

        await first.add_voter(ADMIN, VOTER_1)
        await second.start_proposals_registering(VOTER_2)

        assert first.election.voters.is_registered(VOTER_1)
        assert not second.election.voters.is_registered(VOTER_1)
        assert first.election.status is WorkflowStatus.REGISTERING_VOTERS
        assert second.election.status is WorkflowStatus.PROPOSALS_REGISTRATION_STARTED
        assert {e.election_id for e in emitter.emitted_events} == {
            first.election_id,
            second.election_id,
        }
