"""Prometheus metrics for election services."""

from election_workflow.infrastructure.monitoring.metrics import (
    ElectionMetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)

__all__: list[str] = [
    "ElectionMetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]
