"""Unit tests for the process entry point."""

import logging
from unittest.mock import patch

import pytest

from maxcon_exporter import main as main_module
from maxcon_exporter.adapters.instance_catalog import RdsInstanceCatalog
from maxcon_exporter.adapters.metric_publisher import PrometheusMaxConnectionsPublisher
from maxcon_exporter.core.config import load_settings


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestRun:
    def test_invalid_interval_exits_non_zero(self, monkeypatch):
        monkeypatch.setenv("AWS_API_INTERVAL", "five minutes")

        with patch.object(main_module.asyncio, "run") as run_loop:
            with pytest.raises(SystemExit) as exc_info:
                main_module.run()

        assert exc_info.value.code == 1
        run_loop.assert_not_called()

    def test_unknown_log_level_exits_non_zero(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        with patch.object(main_module.asyncio, "run") as run_loop:
            with pytest.raises(SystemExit) as exc_info:
                main_module.run()

        assert exc_info.value.code == 1
        run_loop.assert_not_called()

    def test_valid_settings_start_the_loop(self, monkeypatch):
        monkeypatch.setenv("AWS_API_INTERVAL", "60")

        with patch.object(main_module.asyncio, "run") as run_loop:
            main_module.run()

        run_loop.assert_called_once()
        run_loop.call_args[0][0].close()


class TestBuildService:
    def test_wires_production_adapters(self):
        settings = load_settings(AWS_REGION="us-east-1")

        service = main_module.build_service(settings)

        assert isinstance(service.publisher, PrometheusMaxConnectionsPublisher)
        assert isinstance(service._catalog, RdsInstanceCatalog)
        assert service.poller is None
