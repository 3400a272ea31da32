"""Unit tests for StructlogEventEmitter."""

from uuid import uuid4

import pytest
from prometheus_client import CollectorRegistry
from structlog.testing import capture_logs

from election_workflow.domain.events import (
    ELECTION_EVENT_SCHEMA_VERSION,
    PROPOSAL_REGISTERED_EVENT_TYPE,
    VOTED_EVENT_TYPE,
    WORKFLOW_STATUS_CHANGE_EVENT_TYPE,
    ProposalRegisteredEvent,
    VotedEvent,
    WorkflowStatusChangeEvent,
)
from election_workflow.domain.models.workflow_status import WorkflowStatus
from election_workflow.infrastructure.adapters import StructlogEventEmitter
from election_workflow.infrastructure.monitoring import ElectionMetricsCollector


@pytest.fixture
def metrics() -> ElectionMetricsCollector:
    """Collector on its own registry so counts start at zero."""
    return ElectionMetricsCollector(registry=CollectorRegistry())


class TestStructlogEventEmitter:
    """Tests for the structlog-backed emitter."""

    @pytest.mark.asyncio
    async def test_emit_writes_one_entry(self, metrics: ElectionMetricsCollector) -> None:
        election_id = uuid4()
        with capture_logs() as cap_logs:
            emitter = StructlogEventEmitter(metrics=metrics)
            await emitter.emit(
                WorkflowStatusChangeEvent(
                    election_id,
                    WorkflowStatus.REGISTERING_VOTERS,
                    WorkflowStatus.PROPOSALS_REGISTRATION_STARTED,
                )
            )

        assert len(cap_logs) == 1
        entry = cap_logs[0]
        assert entry["event"] == "election_event"
        assert entry["log_level"] == "info"
        assert entry["component"] == "election_event_emitter"
        assert entry["event_type"] == WORKFLOW_STATUS_CHANGE_EVENT_TYPE
        assert entry["election_id"] == str(election_id)
        assert entry["new_status"] == "ProposalsRegistrationStarted"
        assert entry["new_status_code"] == 1
        assert entry["schema_version"] == ELECTION_EVENT_SCHEMA_VERSION

    @pytest.mark.asyncio
    async def test_counts_events_per_type(self, metrics: ElectionMetricsCollector) -> None:
        emitter = StructlogEventEmitter(metrics=metrics)
        election_id = uuid4()
        for proposal_id in range(3):
            await emitter.emit(ProposalRegisteredEvent(election_id, proposal_id))
        await emitter.emit(VotedEvent(election_id, "0x01", 0))

        assert metrics.get_events_emitted(PROPOSAL_REGISTERED_EVENT_TYPE) == 3.0
        assert metrics.get_events_emitted(VOTED_EVENT_TYPE) == 1.0
        assert metrics.get_events_emitted(WORKFLOW_STATUS_CHANGE_EVENT_TYPE) == 0.0

    @pytest.mark.asyncio
    async def test_defaults_to_process_collector(self) -> None:
        from election_workflow.infrastructure.monitoring import get_metrics_collector

        emitter = StructlogEventEmitter()
        before = get_metrics_collector().get_events_emitted(VOTED_EVENT_TYPE)

        await emitter.emit(VotedEvent(uuid4(), "0x01", 0))

        assert get_metrics_collector().get_events_emitted(VOTED_EVENT_TYPE) == before + 1
