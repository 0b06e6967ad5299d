"""Logging setup for the exporter.

``ContextualLogger`` carries key/value dimensions (instance identifier,
operation, ...) and renders them after the message so every line can be
grepped by dimension.  Use ``logger.with_context(...)`` to derive a logger
with extra dimensions.
"""

import logging
import sys
from typing import Any, MutableMapping, Optional

_LOCAL_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DEFAULT_FORMAT = "time=%(asctime)s level=%(levelname)s logger=%(name)s msg=%(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that appends its dimensions to every message."""

    def __init__(self, logger: logging.Logger, dimensions: Optional[dict[str, Any]] = None):
        super().__init__(logger, dimensions or {})
        self.dimensions: dict[str, Any] = dict(dimensions or {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, Any]:
        if self.dimensions:
            rendered = " ".join(f"{key}={value}" for key, value in self.dimensions.items())
            msg = f"{msg} [{rendered}]"
        return msg, kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with the given dimensions merged in."""
        merged = {**self.dimensions, **dimensions}
        return ContextualLogger(self.logger, merged)


class LoggerConfigurator:
    """Configures the process-wide logging handlers."""

    @classmethod
    def setup(cls, level: str = "INFO", local: bool = False) -> None:
        """Install a single stream handler on the root logger.

        Calling it again replaces the previous handler, so tests and the
        entry point can both call it safely.
        """
        root = logging.getLogger()
        for handler in list(root.handlers):
            if getattr(handler, "_maxcon_exporter", False):
                root.removeHandler(handler)

        handler = logging.StreamHandler(sys.stdout)
        handler._maxcon_exporter = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(_LOCAL_FORMAT if local else _DEFAULT_FORMAT))
        root.addHandler(handler)
        root.setLevel(level)

        # botocore is very chatty at INFO.
        logging.getLogger("botocore").setLevel(logging.WARNING)
        logging.getLogger("aiohttp.access").setLevel(logging.WARNING)

    @staticmethod
    def configure_logger(
        name: str, dimensions: Optional[dict[str, Any]] = None
    ) -> ContextualLogger:
        """Return a ``ContextualLogger`` for ``name`` with optional dimensions."""
        return ContextualLogger(logging.getLogger(name), dimensions)


logger = LoggerConfigurator.configure_logger("maxcon_exporter")
