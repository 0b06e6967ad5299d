"""Types for max_connections resolution."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ExpressionKind(str, Enum):
    """How a raw ``max_connections`` parameter value was recognized."""

    LITERAL = "literal"
    FORMULA = "formula"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ClassifiedExpression:
    """Result of classifying a raw parameter value.

    ``value`` is set for literals only.  ``divisor`` and ``cap`` are the
    numbers captured from a ``LEAST({DBInstanceClassMemory/<divisor>},<cap>)``
    formula.  The limit always comes from the table; they only appear in the
    error raised for an untabulated class.
    """

    kind: ExpressionKind
    value: Optional[int] = None
    divisor: Optional[int] = None
    cap: Optional[int] = None


@dataclass(frozen=True)
class DbInstance:
    """One DB instance as listed by the RDS API."""

    instance_identifier: str
    instance_class: str
    engine: str
    parameter_group_names: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CatalogEntry:
    """A DB instance joined with the raw value of its ``max_connections`` parameter."""

    instance_identifier: str
    instance_class: str
    engine: str
    raw_max_connections: str


@dataclass(frozen=True)
class InstanceRecord:
    """A resolved instance, ready to be published.  ``max_connections`` is always > 0."""

    instance_identifier: str
    instance_class: str
    engine: str
    max_connections: int

    @property
    def labels(self) -> dict[str, str]:
        """Label set used on the ``aws_custom_rds_max_connections`` gauge."""
        return {
            "instance_identifier": self.instance_identifier,
            "instance_class": self.instance_class,
            "max_connections": str(self.max_connections),
        }
