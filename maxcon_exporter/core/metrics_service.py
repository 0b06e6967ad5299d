"""Prometheus-backed metrics service.

Composes the publisher, the renderer, the HTTP server and the poller behind a
single lifecycle API so ``main.py`` and tests deal with one object instead of
four components.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from maxcon_exporter.core.protocols.instance_catalog import InstanceCatalog
from maxcon_exporter.core.protocols.metric_publisher import MetricPublisher
from maxcon_exporter.core.protocols.metrics_renderer import MetricsRenderer

if TYPE_CHECKING:
    from maxcon_exporter.api.metrics_server import MetricsServer
    from maxcon_exporter.core.poller import MaxConnectionsPoller


class PrometheusMetricsService:
    """Facade that owns the publisher and the background services.

    ``_renderer`` and ``_catalog`` are private: they are implementation
    details of the server and the poller respectively.
    """

    publisher: MetricPublisher

    def __init__(
        self,
        catalog: InstanceCatalog,
        publisher: MetricPublisher,
        renderer: MetricsRenderer,
    ) -> None:
        self.publisher = publisher
        self._catalog = catalog
        self._renderer = renderer
        self._server: Optional[MetricsServer] = None
        self._poller: Optional[MaxConnectionsPoller] = None

    @property
    def poller(self) -> Optional[MaxConnectionsPoller]:
        return self._poller

    async def start(
        self,
        *,
        host: str,
        port: int,
        interval: float,
        poll_on_startup: bool = True,
    ) -> None:
        """Start the metrics server, then the poller."""
        from maxcon_exporter.api.metrics_server import MetricsServer
        from maxcon_exporter.core.poller import MaxConnectionsPoller

        self._poller = MaxConnectionsPoller(
            catalog=self._catalog,
            publisher=self.publisher,
            interval=interval,
            poll_on_startup=poll_on_startup,
        )
        self._server = MetricsServer(self._renderer, port, host, poller=self._poller)
        await self._server.start()
        await self._poller.start()

    async def stop(self) -> None:
        """Stop poller then server (reverse start order)."""
        try:
            if self._poller:
                await self._poller.stop()
        finally:
            if self._server:
                await self._server.stop()
