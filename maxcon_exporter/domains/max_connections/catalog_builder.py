"""Turn catalog entries into publishable instance records.

Per-instance problems (unsupported engine, unknown instance class, zero
limit) are logged and the instance is skipped; they never abort the batch.
"""

from typing import Iterable

from maxcon_exporter.core.exceptions import (
    MaxConnectionsResolutionError,
    UnsupportedEngine,
    ZeroLimit,
)
from maxcon_exporter.core.logging import ContextualLogger
from maxcon_exporter.core.logging import logger as global_logger
from maxcon_exporter.domains.max_connections.resolver import resolve
from maxcon_exporter.domains.max_connections.types import CatalogEntry, InstanceRecord

# Engines whose max_connections is either a literal or LEAST({DBInstanceClassMemory/n},cap).
SUPPORTED_ENGINES = frozenset({"postgres", "aurora-postgresql"})


def build_records(
    entries: Iterable[CatalogEntry],
    logger: ContextualLogger | None = None,
) -> list[InstanceRecord]:
    """Resolve every supported entry, keeping catalog order."""
    log = (logger or global_logger).with_context(operation="build_records")
    records: list[InstanceRecord] = []

    for entry in entries:
        entry_log = log.with_context(
            instance_identifier=entry.instance_identifier,
            instance_class=entry.instance_class,
        )
        try:
            records.append(_build_record(entry))
        except (UnsupportedEngine, ZeroLimit) as e:
            entry_log.info(f"skip: {e}")
        except MaxConnectionsResolutionError as e:
            entry_log.warning(f"skip: failed to get max connections: {e}")

    return records


def _build_record(entry: CatalogEntry) -> InstanceRecord:
    ids = {
        "instance_identifier": entry.instance_identifier,
        "instance_class": entry.instance_class,
    }
    if entry.engine not in SUPPORTED_ENGINES:
        raise UnsupportedEngine(entry.engine, **ids)

    try:
        limit = resolve(entry.raw_max_connections, entry.instance_class)
    except MaxConnectionsResolutionError as e:
        e.instance_identifier = entry.instance_identifier
        raise

    if limit == 0:
        raise ZeroLimit(entry.raw_max_connections, **ids)

    return InstanceRecord(
        instance_identifier=entry.instance_identifier,
        instance_class=entry.instance_class,
        engine=entry.engine,
        max_connections=limit,
    )
