"""MetricPublisher protocol for the published max_connections set.

The publisher owns the only shared mutable state of the exporter: the set of
records visible on ``/metrics``.  It is replaced wholesale once per cycle so a
scrape never observes a half-updated set.
"""

from typing import Protocol, Sequence, runtime_checkable

from maxcon_exporter.domains.max_connections.types import InstanceRecord


@runtime_checkable
class MetricPublisher(Protocol):
    """Protocol for publishing resolved instance records."""

    @property
    def records(self) -> tuple[InstanceRecord, ...]:
        """The currently published records."""
        ...

    def replace_all(self, records: Sequence[InstanceRecord]) -> None:
        """Atomically replace the published set with ``records``.

        Args:
            records: Records from one polling cycle.  Instances missing here
                disappear from the next scrape.
        """
        ...
