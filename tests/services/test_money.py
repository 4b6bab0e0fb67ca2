import pytest
from decimal import Decimal

from fxform.core.config import NumberFormat
from fxform.services.money import format_amount, round2


class TestRound2:
    """Tests for two-decimal rounding."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("91.80327868852459016393442623"), Decimal("91.80")),
            (Decimal("0.005"), Decimal("0.01")),
            (Decimal("2.675"), Decimal("2.68")),
            (Decimal("10"), Decimal("10.00")),
        ],
    )
    def test_half_up(self, value, expected):
        assert round2(value) == expected


class TestFormatAmount:
    """Tests for N2 rendering under a configurable convention."""

    def test_pt_br(self):
        fmt = NumberFormat()

        assert format_amount(Decimal("1234567.891"), fmt) == "1.234.567,89"
        assert format_amount(Decimal("0"), fmt) == "0,00"
        assert format_amount(Decimal("91.8032"), fmt) == "91,80"

    def test_en_us(self):
        fmt = NumberFormat(decimal_separator=".", group_separator=",")

        assert format_amount(Decimal("1234.5"), fmt) == "1,234.50"

    def test_custom_group_separator(self):
        fmt = NumberFormat(decimal_separator=",", group_separator=" ")

        assert format_amount(Decimal("9876.5"), fmt) == "9 876,50"


class TestLargeMagnitudes:
    """Tests for values at and beyond the 28-digit default precision."""

    def test_round2_27_digit_integer(self):
        value = Decimal("1" + "0" * 26)

        assert round2(value) == value

    def test_round2_carry_past_precision(self):
        """
        Test that rounding up adds a digit without raising.
        """
        assert round2(Decimal("9" * 27 + ".999")) == Decimal("1" + "0" * 27)

    def test_round2_half_up_on_40_digits(self):
        assert round2(Decimal("1" * 40 + ".005")) == Decimal("1" * 40 + ".01")

    def test_format_27_digit_amount(self):
        text = format_amount(Decimal("1" + "0" * 26), NumberFormat())

        assert text == "100" + ".000" * 8 + ",00"
