"""Fake MetricPublisher for testing.

Records every ``replace_all()`` call so tests can assert on the published
set without reaching into prometheus-client internals.
"""

from typing import Sequence

from maxcon_exporter.domains.max_connections.types import InstanceRecord


class FakeMetricPublisher:
    """In-memory spy implementing the MetricPublisher protocol.

    Usage:
        fake = FakeMetricPublisher()
        fake.replace_all([record])
        assert fake.records == (record,)
    """

    def __init__(self) -> None:
        self.batches: list[tuple[InstanceRecord, ...]] = []
        self._records: tuple[InstanceRecord, ...] = ()

    @property
    def records(self) -> tuple[InstanceRecord, ...]:
        return self._records

    def replace_all(self, records: Sequence[InstanceRecord]) -> None:
        self._records = tuple(records)
        self.batches.append(self._records)

    # -- test helpers --

    @property
    def replace_count(self) -> int:
        return len(self.batches)

    def label_sets(self) -> list[dict[str, str]]:
        """Labels of the currently published records."""
        return [record.labels for record in self._records]

    def clear(self) -> None:
        """Reset all recorded state."""
        self.batches.clear()
        self._records = ()
