"""Metric publisher adapters."""

from maxcon_exporter.adapters.metric_publisher.fake import FakeMetricPublisher
from maxcon_exporter.adapters.metric_publisher.prometheus import (
    PrometheusMaxConnectionsPublisher,
)

__all__ = ["PrometheusMaxConnectionsPublisher", "FakeMetricPublisher"]
