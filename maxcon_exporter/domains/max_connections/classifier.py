"""Classification of raw ``max_connections`` parameter values.

Examples of raw values returned by ``DescribeDBParameters``:

    RDS / Aurora PostgreSQL: "LEAST({DBInstanceClassMemory/9531392},5000)"
    Aurora MySQL: "GREATEST({log(DBInstanceClassMemory/805306368)*45},{log(...)*1000})"
    RDS MySQL: "{DBInstanceClassMemory/12582880}"
    Explicitly set: "1800"
"""

import re
from typing import Optional

from maxcon_exporter.domains.max_connections.types import ClassifiedExpression, ExpressionKind

# ASCII digits only: "١٨٠٠" is not a number to the RDS API.
LEAST_FORMULA_PATTERN = re.compile(r"LEAST\(\{DBInstanceClassMemory/(\d+)\},(\d+)\)", re.ASCII)
DIGIT_RUN_PATTERN = re.compile(r"\d+", re.ASCII)


def classify(raw: str) -> ClassifiedExpression:
    """Classify ``raw`` as a LEAST formula, a literal, or unrecognized.

    The formula check runs first.  Anything else containing digits is a
    literal, and the first digit run wins: ``"abc12de34"`` is ``12``.  A digit
    run too long to convert is unrecognized rather than an error.
    """
    formula = LEAST_FORMULA_PATTERN.search(raw)
    if formula:
        return ClassifiedExpression(
            kind=ExpressionKind.FORMULA,
            divisor=_to_int(formula.group(1)),
            cap=_to_int(formula.group(2)),
        )

    digits = DIGIT_RUN_PATTERN.search(raw)
    if digits:
        value = _to_int(digits.group(0))
        if value is not None:
            return ClassifiedExpression(kind=ExpressionKind.LITERAL, value=value)

    return ClassifiedExpression(kind=ExpressionKind.UNRECOGNIZED)


def _to_int(digits: str) -> Optional[int]:
    # int() refuses strings above sys.get_int_max_str_digits().
    try:
        return int(digits)
    except ValueError:
        return None
