"""Exception hierarchy for the max_connections exporter.

Startup errors (``ConfigError``) end the process.  ``CatalogFetchError`` aborts
a single polling cycle.  Everything under ``InstanceSkipped`` is recovered
locally: the instance is left out of ``/metrics`` and the batch continues.
"""

from typing import Optional


class MaxConnectionsExporterError(Exception):
    """Base class for all exporter errors."""


class ConfigError(MaxConnectionsExporterError):
    """Raised when a configuration setting is missing or malformed."""


class CatalogFetchError(MaxConnectionsExporterError):
    """Raised when the RDS management API cannot be queried."""

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} failed: {message}")


class InstanceSkipped(MaxConnectionsExporterError):
    """Base class for reasons an instance is left out of the published set."""

    def __init__(
        self,
        message: str,
        *,
        instance_identifier: Optional[str] = None,
        instance_class: Optional[str] = None,
    ) -> None:
        self.instance_identifier = instance_identifier
        self.instance_class = instance_class
        super().__init__(message)


class UnsupportedEngine(InstanceSkipped):
    """The instance engine does not use the literal-or-LEAST convention."""

    def __init__(self, engine: str, **kwargs) -> None:
        self.engine = engine
        super().__init__(f"engine {engine!r} is not supported", **kwargs)


class ZeroLimit(InstanceSkipped):
    """Resolution produced the 0 sentinel ("could not determine")."""

    def __init__(self, raw_value: str, **kwargs) -> None:
        self.raw_value = raw_value
        super().__init__(f"max_connections could not be determined from {raw_value!r}", **kwargs)


class MaxConnectionsResolutionError(InstanceSkipped):
    """Raised when a raw parameter value cannot be turned into a limit."""


class UnsupportedInstanceClass(MaxConnectionsResolutionError):
    """The formula matched but the instance class is not in the limit table."""

    def __init__(
        self,
        instance_class: str,
        divisor: Optional[int] = None,
        cap: Optional[int] = None,
        **kwargs,
    ) -> None:
        self.divisor = divisor
        self.cap = cap
        kwargs.setdefault("instance_class", instance_class)
        message = f"instance class {instance_class!r} is not supported"
        if divisor is not None or cap is not None:
            message += f" (LEAST formula divisor={divisor}, cap={cap})"
        super().__init__(message, **kwargs)
