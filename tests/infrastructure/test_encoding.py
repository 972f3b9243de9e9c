"""Unit tests for JSON encoding of stored values."""

from decimal import Decimal

import pytest

from catalog.infrastructure.encoding import to_json


class TestToJson:

    def test_integral_decimal_becomes_int(self):
        assert to_json({"price": Decimal("10")}) == '{"price": 10}'

    def test_fractional_decimal_becomes_float(self):
        assert to_json({"price": Decimal("9.99")}) == '{"price": 9.99}'

    def test_nested_values(self):
        assert to_json([{"dims": [Decimal("1.5"), Decimal("2")]}]) == '[{"dims": [1.5, 2]}]'

    def test_unknown_types_still_fail(self):
        with pytest.raises(TypeError, match="not JSON serializable"):
            to_json({"when": object()})
