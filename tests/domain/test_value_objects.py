"""Unit tests for numeric parsing and display formatting."""

from decimal import Decimal

import pytest

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.value_objects import format_amount, parse_decimal


class TestParseDecimal:

    def test_from_string(self):
        assert parse_decimal("25.99") == Decimal("25.99")

    def test_from_int(self):
        assert parse_decimal(10) == Decimal("10")

    def test_from_float_uses_string_form(self):
        assert parse_decimal(0.1) == Decimal("0.1")

    def test_decimal_passes_through(self):
        value = Decimal("1.5")
        assert parse_decimal(value) is value

    def test_surrounding_whitespace_ignored(self):
        assert parse_decimal(" 3 ") == Decimal("3")

    def test_negative_and_large_values_accepted(self):
        assert parse_decimal("-4") == Decimal("-4")
        assert parse_decimal("1.5") == Decimal("1.5")

    @pytest.mark.parametrize("raw", ["abc", "", "1,5", "NaN", "Infinity"])
    def test_non_numbers_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid price"):
            parse_decimal(raw, field="price")


class TestFormatAmount:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("93.00", "93"),
            ("80.0", "80"),
            ("115.0", "115"),
            ("75.400", "75.4"),
            ("0.1", "0.1"),
            ("0", "0"),
            ("0.00", "0"),
            ("-50.0", "-50"),
            ("12.5", "12.5"),
        ],
    )
    def test_trailing_zeros_dropped(self, value, expected):
        assert format_amount(Decimal(value)) == expected

    def test_rounded_to_six_significant_digits(self):
        assert format_amount(Decimal("4.63002275620123046875")) == "4.63002"
        assert format_amount(Decimal("6.4541243491353166015625")) == "6.45412"

    def test_compounding_never_lengthens_output(self):
        price = Decimal("19.99")
        for _ in range(30):
            price *= Decimal("1") - Decimal("0.15")
            assert len(format_amount(price).replace(".", "").lstrip("0")) <= 6

    def test_large_values_not_in_exponent_form(self):
        assert format_amount(Decimal("1250000")) == "1250000"
