"""Prometheus text exposition of the exporter's registry."""

from prometheus_client import CollectorRegistry, generate_latest

from maxcon_exporter.core.protocols.metrics_renderer import MetricsRenderer

# Text format 0.0.4.  Pinned so a prometheus-client upgrade cannot change
# what scrapers are told.
PROMETHEUS_TEXT_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


class PrometheusMetricsRenderer(MetricsRenderer):
    """Serializes ``aws_custom_rds_max_connections`` and its registry neighbours."""

    def __init__(self, registry: CollectorRegistry) -> None:
        self._registry = registry

    @property
    def content_type(self) -> str:
        return PROMETHEUS_TEXT_CONTENT_TYPE

    def generate(self) -> bytes:
        return generate_latest(self._registry)
