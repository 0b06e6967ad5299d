"""max_connections resolution: limit table, classifier, resolver and record builder."""

from maxcon_exporter.domains.max_connections.catalog_builder import (
    SUPPORTED_ENGINES,
    build_records,
)
from maxcon_exporter.domains.max_connections.classifier import classify
from maxcon_exporter.domains.max_connections.limit_table import INSTANCE_CLASS_LIMITS, lookup
from maxcon_exporter.domains.max_connections.resolver import resolve
from maxcon_exporter.domains.max_connections.types import (
    CatalogEntry,
    ClassifiedExpression,
    DbInstance,
    ExpressionKind,
    InstanceRecord,
)

__all__ = [
    "INSTANCE_CLASS_LIMITS",
    "SUPPORTED_ENGINES",
    "CatalogEntry",
    "ClassifiedExpression",
    "DbInstance",
    "ExpressionKind",
    "InstanceRecord",
    "build_records",
    "classify",
    "lookup",
    "resolve",
]
