"""What the HTTP server needs to answer a scrape of ``/metrics``."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class MetricsRenderer(Protocol):
    """Turns the current max_connections snapshot into a response body."""

    @property
    def content_type(self) -> str:
        """Value for the ``Content-Type`` header of ``/metrics``."""
        ...

    def generate(self) -> bytes:
        """Return the exposition text for every metric the exporter owns."""
        ...
