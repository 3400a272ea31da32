"""Election event emitter backed by structured logging.

Concrete implementation of ElectionEventEmitterPort that:
1. Writes each election event as one structured log entry
2. Counts delivered events in Prometheus, per event type

Deployments ship the log entries to their log pipeline, which acts as the
election's event log.
"""

from __future__ import annotations

import structlog

from election_workflow.application.ports.election_event_emitter import (
    ElectionEventEmitterPort,
)
from election_workflow.domain.events.election import ElectionEvent
from election_workflow.infrastructure.monitoring.metrics import (
    ElectionMetricsCollector,
    get_metrics_collector,
)

logger = structlog.get_logger(__name__)


class StructlogEventEmitter(ElectionEventEmitterPort):
    """Event emitter writing election events to structlog.

    Usage:
        emitter = StructlogEventEmitter()
        directory = ElectionDirectoryService(event_emitter=emitter)
    """

    def __init__(self, metrics: ElectionMetricsCollector | None = None) -> None:
        """Initialize the event emitter.

        Args:
            metrics: Collector to count events in; the process-wide one
                     when omitted.
        """
        self._log = logger.bind(component="election_event_emitter")
        self._metrics = metrics or get_metrics_collector()

    async def emit(self, event: ElectionEvent) -> None:
        """Write the event as a structured log entry and count it.

        The entry's fields are exactly the event's to_dict() payload; the
        log event name is ``election_event``.
        """
        self._log.info("election_event", **event.to_dict())
        self._metrics.increment_events_emitted(event.event_type)
