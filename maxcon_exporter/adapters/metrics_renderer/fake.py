"""Canned ``/metrics`` body for server tests."""

from maxcon_exporter.core.protocols.metrics_renderer import MetricsRenderer


class FakeMetricsRenderer(MetricsRenderer):
    """Returns ``body`` on every scrape and counts the scrapes."""

    def __init__(self, body: bytes = b"# no instances\n") -> None:
        self.body = body
        self.generate_calls: int = 0

    @property
    def content_type(self) -> str:
        return "text/plain"

    def generate(self) -> bytes:
        self.generate_calls += 1
        return self.body
