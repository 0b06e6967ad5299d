"""Core protocols for dependency injection."""

from maxcon_exporter.core.protocols.instance_catalog import InstanceCatalog
from maxcon_exporter.core.protocols.metric_publisher import MetricPublisher
from maxcon_exporter.core.protocols.metrics_renderer import MetricsRenderer

__all__ = [
    "InstanceCatalog",
    "MetricPublisher",
    "MetricsRenderer",
]
