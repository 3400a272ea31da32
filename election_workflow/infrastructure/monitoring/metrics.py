"""Prometheus metrics for election event delivery.

Operational counters only: how many election events each emitter has
delivered, labelled by event type. Election outcomes (winners, vote
counts) are never exported as metrics.

Labels:
- event_type: one of the election.* event type strings
- environment: deployment environment (ENVIRONMENT, default development)
"""

import os
import threading

from prometheus_client import CollectorRegistry, Counter

# Thread lock for singleton initialization
_collector_lock = threading.Lock()


class ElectionMetricsCollector:
    """Collects and manages election Prometheus metrics.

    Attributes:
        election_events_emitted_total: Counter of delivered election events.
    """

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics collector.

        Args:
            registry: Optional custom registry for testing isolation.
        """
        self._registry = registry or CollectorRegistry()
        self._environment = os.environ.get("ENVIRONMENT", "development")

        self.election_events_emitted_total = Counter(
            name="election_events_emitted_total",
            documentation="Total election events delivered to the event log",
            labelnames=["event_type", "environment"],
            registry=self._registry,
        )

    def increment_events_emitted(self, event_type: str) -> None:
        """Count one delivered event of event_type."""
        self.election_events_emitted_total.labels(
            event_type=event_type,
            environment=self._environment,
        ).inc()

    def get_events_emitted(self, event_type: str) -> float:
        """Current counter value for event_type (0.0 when never emitted)."""
        value = self._registry.get_sample_value(
            "election_events_emitted_total",
            {"event_type": event_type, "environment": self._environment},
        )
        return value or 0.0

    def get_registry(self) -> CollectorRegistry:
        """Get the collector registry.

        Returns:
            The Prometheus collector registry.
        """
        return self._registry


# Singleton instance
_metrics_collector: ElectionMetricsCollector | None = None


def get_metrics_collector() -> ElectionMetricsCollector:
    """Get the process-wide ElectionMetricsCollector (thread-safe)."""
    global _metrics_collector
    if _metrics_collector is None:
        with _collector_lock:
            if _metrics_collector is None:
                _metrics_collector = ElectionMetricsCollector()
    return _metrics_collector


def reset_metrics_collector() -> None:
    """Reset the singleton collector (for testing only)."""
    global _metrics_collector
    with _collector_lock:
        _metrics_collector = None
