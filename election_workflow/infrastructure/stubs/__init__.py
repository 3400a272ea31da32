"""In-memory stub implementations of application ports for testing."""

from election_workflow.infrastructure.stubs.election_event_emitter_stub import (
    ElectionEventEmitterStub,
)

__all__: list[str] = ["ElectionEventEmitterStub"]
