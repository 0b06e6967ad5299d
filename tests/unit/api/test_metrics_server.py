"""Unit tests for the metrics HTTP server handlers."""

import json

import pytest
from aiohttp.test_utils import make_mocked_request
from prometheus_client import CollectorRegistry

from maxcon_exporter.adapters.instance_catalog import FakeInstanceCatalog
from maxcon_exporter.adapters.instance_catalog.fake import catalog_unavailable
from maxcon_exporter.adapters.metric_publisher import FakeMetricPublisher
from maxcon_exporter.adapters.metrics_renderer import FakeMetricsRenderer, PrometheusMetricsRenderer
from maxcon_exporter.api.metrics_server import MetricsServer
from maxcon_exporter.core.poller import MaxConnectionsPoller


class TestHandleMetrics:
    @pytest.mark.asyncio
    async def test_returns_renderer_body_and_content_type(self):
        fake = FakeMetricsRenderer()
        server = MetricsServer(fake)
        request = make_mocked_request("GET", "/metrics")

        response = await server.handle_metrics(request)

        assert response.status == 200
        assert response.body == b"# no instances\n"
        assert response.headers["Content-Type"] == "text/plain"
        assert fake.generate_calls == 1

    @pytest.mark.asyncio
    async def test_prometheus_renderer_advertises_text_format_0_0_4(self):
        server = MetricsServer(PrometheusMetricsRenderer(CollectorRegistry()))
        request = make_mocked_request("GET", "/metrics")

        response = await server.handle_metrics(request)

        assert response.headers["Content-Type"] == "text/plain; version=0.0.4; charset=utf-8"

    def test_routes(self):
        server = MetricsServer(FakeMetricsRenderer())

        paths = {route.resource.canonical for route in server.app.router.routes()}
        assert {"/metrics", "/health"} <= paths


class TestHandleHealth:
    @pytest.mark.asyncio
    async def test_ok_without_poller(self):
        server = MetricsServer(FakeMetricsRenderer())

        response = await server.handle_health(make_mocked_request("GET", "/health"))

        assert response.status == 200
        assert json.loads(response.text) == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_ok_after_successful_cycle(self):
        catalog = FakeInstanceCatalog()
        catalog.seed_instance("a", "db.r5.large", raw_max_connections="1800")
        poller = MaxConnectionsPoller(catalog, FakeMetricPublisher())
        await poller._tick()
        server = MetricsServer(FakeMetricsRenderer(), poller=poller)

        response = await server.handle_health(make_mocked_request("GET", "/health"))
        body = json.loads(response.text)

        assert response.status == 200
        assert body["status"] == "ok"
        assert body["last_success"] is not None
        assert body["consecutive_failures"] == 0

    @pytest.mark.asyncio
    async def test_degraded_after_failed_cycle(self):
        catalog = FakeInstanceCatalog()
        catalog.set_error(catalog_unavailable())
        poller = MaxConnectionsPoller(catalog, FakeMetricPublisher())
        await poller._tick()
        server = MetricsServer(FakeMetricsRenderer(), poller=poller)

        response = await server.handle_health(make_mocked_request("GET", "/health"))
        body = json.loads(response.text)

        assert response.status == 503
        assert body == {"status": "degraded", "last_success": None, "consecutive_failures": 1}
