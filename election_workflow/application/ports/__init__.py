"""Application ports - interfaces implemented by infrastructure adapters."""

from election_workflow.application.ports.election_event_emitter import (
    ElectionEventEmitterPort,
)

__all__: list[str] = ["ElectionEventEmitterPort"]
