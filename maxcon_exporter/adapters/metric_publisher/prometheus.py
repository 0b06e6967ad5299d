"""Prometheus implementation of the MetricPublisher protocol.

A custom collector on a caller-supplied CollectorRegistry.  Each cycle builds
a new immutable tuple of records and swaps it in with a single assignment, so
a scrape renders either the previous set or the new one, never a mix.  The
resolved limit is a label value and the sample value is always 1.
"""

from typing import Iterator, Sequence

from prometheus_client import CollectorRegistry
from prometheus_client.core import GaugeMetricFamily, Metric

from maxcon_exporter.core.logging import logger
from maxcon_exporter.core.protocols.metric_publisher import MetricPublisher
from maxcon_exporter.domains.max_connections.types import InstanceRecord

NAMESPACE = "aws_custom"
SUBSYSTEM = "rds"
NAME = "max_connections"
METRIC_NAME = f"{NAMESPACE}_{SUBSYSTEM}_{NAME}"
METRIC_HELP = "Max Connections of RDS"
LABEL_NAMES = ("instance_identifier", "instance_class", "max_connections")


class PrometheusMaxConnectionsPublisher(MetricPublisher):
    """Prometheus-backed publisher for ``aws_custom_rds_max_connections``."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self._registry = registry or CollectorRegistry()
        self._records: tuple[InstanceRecord, ...] = ()
        self._registry.register(self)

    @property
    def records(self) -> tuple[InstanceRecord, ...]:
        return self._records

    # -- MetricPublisher protocol method --

    def replace_all(self, records: Sequence[InstanceRecord]) -> None:
        published: dict[tuple[str, ...], InstanceRecord] = {}
        for record in records:
            if record.max_connections <= 0:
                logger.warning(
                    f"Refusing to publish non-positive max_connections for "
                    f"{record.instance_identifier}: {record.max_connections}"
                )
                continue
            published.setdefault(_label_values(record), record)

        self._records = tuple(published.values())

    # -- prometheus_client collector interface --

    def describe(self) -> Iterator[Metric]:
        yield self._family()

    def collect(self) -> Iterator[Metric]:
        snapshot = self._records
        family = self._family()
        for record in snapshot:
            family.add_metric(list(_label_values(record)), 1)
        yield family

    @staticmethod
    def _family() -> GaugeMetricFamily:
        return GaugeMetricFamily(METRIC_NAME, METRIC_HELP, labels=list(LABEL_NAMES))


def _label_values(record: InstanceRecord) -> tuple[str, ...]:
    labels = record.labels
    return tuple(labels[name] for name in LABEL_NAMES)
