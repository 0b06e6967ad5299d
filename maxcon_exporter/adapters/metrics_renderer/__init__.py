"""Metrics renderer adapters."""

from maxcon_exporter.adapters.metrics_renderer.fake import FakeMetricsRenderer
from maxcon_exporter.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer", "FakeMetricsRenderer"]
