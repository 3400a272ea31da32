"""Concrete adapters for application ports."""

from election_workflow.infrastructure.adapters.structlog_event_emitter import (
    StructlogEventEmitter,
)

__all__: list[str] = ["StructlogEventEmitter"]
