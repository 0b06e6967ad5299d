"""Unit tests for resolve()."""

import pytest

from maxcon_exporter.core.exceptions import (
    MaxConnectionsResolutionError,
    UnsupportedInstanceClass,
)
from maxcon_exporter.domains.max_connections.limit_table import INSTANCE_CLASS_LIMITS
from maxcon_exporter.domains.max_connections.resolver import resolve

POSTGRES_DEFAULT = "LEAST({DBInstanceClassMemory/9531392},5000)"


class TestResolve:
    def test_formula_on_r5_large(self):
        assert resolve(POSTGRES_DEFAULT, "db.r5.large") == 1800

    @pytest.mark.parametrize("instance_class, expected", sorted(INSTANCE_CLASS_LIMITS.items()))
    def test_formula_matches_table_for_every_class(self, instance_class, expected):
        assert resolve(POSTGRES_DEFAULT, instance_class) == expected

    def test_formula_on_unknown_class_raises(self):
        with pytest.raises(UnsupportedInstanceClass):
            resolve(POSTGRES_DEFAULT, "db.unknown.size")

    def test_unsupported_class_is_a_resolution_error(self):
        with pytest.raises(MaxConnectionsResolutionError):
            resolve(POSTGRES_DEFAULT, "db.r6g.large")

    def test_literal_overrides_table(self):
        assert resolve("3300", "db.r5.xlarge") == 3300

    @pytest.mark.parametrize("instance_class", ["db.r5.large", "db.unknown.size", ""])
    def test_literal_is_independent_of_class(self, instance_class):
        assert resolve("1234", instance_class) == 1234

    def test_literal_zero_is_returned(self):
        assert resolve("0", "db.r5.large") == 0

    @pytest.mark.parametrize("instance_class", ["db.r5.large", "db.unknown.size"])
    def test_empty_value_returns_zero(self, instance_class):
        assert resolve("", instance_class) == 0

    def test_unrecognized_value_returns_zero(self):
        assert resolve("DBInstanceClassMemory", "db.r5.large") == 0

    def test_unknown_class_error_carries_formula(self):
        with pytest.raises(UnsupportedInstanceClass, match="divisor=9531392, cap=5000") as exc_info:
            resolve(POSTGRES_DEFAULT, "db.unknown.size")

        assert exc_info.value.instance_class == "db.unknown.size"
        assert exc_info.value.divisor == 9531392
        assert exc_info.value.cap == 5000

    def test_non_ascii_digits_return_zero(self):
        assert resolve("١٨٠٠", "db.r5.large") == 0

    def test_oversized_literal_returns_zero(self):
        assert resolve("9" * 5000, "db.r5.large") == 0

    def test_oversized_formula_still_uses_table(self):
        raw = "LEAST({DBInstanceClassMemory/" + "9" * 5000 + "},5000)"
        assert resolve(raw, "db.r5.large") == 1800
