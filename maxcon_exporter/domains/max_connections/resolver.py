"""Resolve a raw ``max_connections`` value into a connection limit."""

from maxcon_exporter.core.exceptions import UnsupportedInstanceClass
from maxcon_exporter.domains.max_connections import limit_table
from maxcon_exporter.domains.max_connections.classifier import classify
from maxcon_exporter.domains.max_connections.types import ExpressionKind


def resolve(raw: str, instance_class: str) -> int:
    """Return the effective ``max_connections`` for an instance.

    A literal is returned as-is, even when it is 0.  A LEAST formula is looked
    up by instance class.  Unrecognized values (including ``""``) yield the 0
    sentinel; the caller decides whether to publish.

    Raises:
        UnsupportedInstanceClass: the formula matched but the class is not
            tabulated.  The formula's divisor and cap are carried in the error.
    """
    expression = classify(raw)

    if expression.kind is ExpressionKind.LITERAL:
        return expression.value
    if expression.kind is ExpressionKind.FORMULA:
        try:
            return limit_table.lookup(instance_class)
        except UnsupportedInstanceClass as e:
            raise UnsupportedInstanceClass(
                instance_class,
                divisor=expression.divisor,
                cap=expression.cap,
                instance_identifier=e.instance_identifier,
            ) from e
    return 0
