"""Runner for the max_connections exporter."""

import asyncio
import signal
import sys

from prometheus_client import CollectorRegistry

from maxcon_exporter.adapters.instance_catalog import RdsInstanceCatalog
from maxcon_exporter.adapters.metric_publisher import PrometheusMaxConnectionsPublisher
from maxcon_exporter.adapters.metrics_renderer import PrometheusMetricsRenderer
from maxcon_exporter.core.config import Settings, load_settings
from maxcon_exporter.core.exceptions import ConfigError
from maxcon_exporter.core.logging import LoggerConfigurator
from maxcon_exporter.core.logging import logger as global_logger
from maxcon_exporter.core.metrics_service import PrometheusMetricsService


def build_service(settings: Settings) -> PrometheusMetricsService:
    """Wire the production adapters around one shared registry."""
    registry = CollectorRegistry()
    return PrometheusMetricsService(
        catalog=RdsInstanceCatalog(region_name=settings.AWS_REGION),
        publisher=PrometheusMaxConnectionsPublisher(registry=registry),
        renderer=PrometheusMetricsRenderer(registry),
    )


async def main(settings: Settings) -> None:
    """Run the metrics server and the poller until SIGINT or SIGTERM."""
    logger = global_logger.with_context(operation="runner")
    service = build_service(settings)

    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop_event.set)

    await service.start(
        host=settings.METRICS_HOST,
        port=settings.METRICS_PORT,
        interval=settings.AWS_API_INTERVAL,
        poll_on_startup=settings.POLL_ON_STARTUP,
    )
    logger.info(f"Exporter started, polling RDS every {settings.AWS_API_INTERVAL}s")

    try:
        await stop_event.wait()
    finally:
        logger.info("Shutdown requested... stopping")
        await service.stop()


def run() -> None:
    """Console-script entry point."""
    try:
        settings = load_settings()
    except ConfigError as e:
        LoggerConfigurator.setup()
        global_logger.error(f"Failed to read configuration: {e}")
        sys.exit(1)

    LoggerConfigurator.setup(level=settings.LOG_LEVEL, local=settings.LOCAL_DEVELOPMENT)
    asyncio.run(main(settings))


if __name__ == "__main__":
    run()
