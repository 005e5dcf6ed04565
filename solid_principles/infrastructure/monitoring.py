"""Run metrics using Prometheus."""
import logging

from prometheus_client import CollectorRegistry, Counter, generate_latest

logger = logging.getLogger(__name__)

# Dedicated registry so the exposition only carries example metrics
metrics_registry = CollectorRegistry()

example_runs_total = Counter(
    'solid_example_runs_total',
    'Total number of example driver runs',
    ['example', 'variant'],
    registry=metrics_registry,
)


def track_example_run(example: str, variant: str, enabled: bool = True) -> None:
    """
    Track one example driver run.

    Args:
        example: Example name
        variant: "corrected" or "violation"
        enabled: Whether metrics are enabled
    """
    if not enabled:
        return
    example_runs_total.labels(example=example, variant=variant).inc()


def render_metrics() -> str:
    """Render collected metrics in the Prometheus text format."""
    return generate_latest(metrics_registry).decode("utf-8")
