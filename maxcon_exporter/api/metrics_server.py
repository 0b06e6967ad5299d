"""aiohttp server exposing ``/metrics`` and ``/health``."""

from typing import Optional

from aiohttp import web

from maxcon_exporter.core.logging import logger
from maxcon_exporter.core.poller import MaxConnectionsPoller
from maxcon_exporter.core.protocols.metrics_renderer import MetricsRenderer


class MetricsServer:
    """Async HTTP server serving the rendered registry for Prometheus scrapes.

    ``/health`` reports 503 when the most recent polling cycle failed, so an
    orchestrator can tell a stale exporter from a healthy one.
    """

    def __init__(
        self,
        renderer: MetricsRenderer,
        port: int = 8080,
        host: str = "0.0.0.0",
        poller: Optional[MaxConnectionsPoller] = None,
    ):
        """Initialize the metrics server.

        Args:
            renderer: Serializes the registry into the scrape format.
            port: The port to listen on.
            host: The host to listen on.
            poller: Poller whose state backs ``/health``; health is always OK without one.
        """
        self.renderer = renderer
        self.port = port
        self.host = host
        self.poller = poller
        self.app = web.Application()
        self.app.add_routes(
            [
                web.get("/metrics", self.handle_metrics),
                web.get("/health", self.handle_health),
            ]
        )
        self.runner: Optional[web.AppRunner] = None
        self.site: Optional[web.TCPSite] = None
        self.logger = logger.with_context(operation="metrics_server")

    async def handle_metrics(self, request: web.Request) -> web.Response:
        """Render every registered collector."""
        body = self.renderer.generate()
        response = web.Response(body=body)
        # aiohttp rejects a charset inside content_type, so set the header directly.
        response.headers["Content-Type"] = self.renderer.content_type
        return response

    async def handle_health(self, request: web.Request) -> web.Response:
        """Report whether the most recent polling cycle succeeded."""
        if self.poller is None:
            return web.json_response({"status": "ok"})

        last_success = self.poller.last_success
        payload = {
            "status": "ok" if self.poller.healthy else "degraded",
            "last_success": last_success.isoformat() if last_success else None,
            "consecutive_failures": self.poller.consecutive_failures,
        }
        return web.json_response(payload, status=200 if self.poller.healthy else 503)

    async def start(self) -> None:
        """Start the AIOHTTP server."""
        self.runner = web.AppRunner(self.app)
        await self.runner.setup()
        self.site = web.TCPSite(self.runner, host=self.host, port=self.port)
        await self.site.start()
        self.logger.info(f"Metrics server listening on http://{self.host}:{self.port}/metrics")

    async def stop(self) -> None:
        """Stops the server gracefully."""
        if self.site:
            await self.site.stop()
        if self.runner:
            await self.runner.cleanup()
