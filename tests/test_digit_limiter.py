"""
Tests del limitador de dígitos significativos

Verifica:
1. Truncamiento hacia cero y redondeo mitad hacia arriba
2. Cero, infinito y NaN
3. Magnitudes muy grandes y muy pequeñas
4. Idempotencia y cota del truncamiento
"""

from decimal import Decimal

import pytest

from decimal_value import INFINITY
from digit_limiter import LimitMethod, limit, round_half_up, truncate
from simulation_errors import InvalidDigitCount

METHODS = [LimitMethod.TRUNCATION, LimitMethod.ROUNDING]

SAMPLE_VALUES = [
    "3.14159",
    "-2.675",
    "0.000123456",
    "9.99",
    "-9.95",
    "123456789",
    "0.5",
    "1E-30",
    "7.77777E+45",
    "0." + "9" * 60,
]


class TestTruncate:
    """Truncamiento: nunca redondea hacia arriba en magnitud"""

    def test_drops_trailing_digits(self) -> None:
        assert truncate(Decimal("3.14159"), 3) == Decimal("3.14")
        assert truncate(Decimal("2.999"), 2) == Decimal("2.9")

    def test_negative_values_move_toward_zero(self) -> None:
        assert truncate(Decimal("-2.675"), 3) == Decimal("-2.67")
        assert truncate(Decimal("-0.0999"), 1) == Decimal("-0.09")

    def test_cut_above_decimal_point(self) -> None:
        """Con exponente mayor que n la posición de corte es negativa"""
        assert truncate(Decimal("123456789"), 3) == Decimal("123000000")
        assert truncate(Decimal("98765.4321"), 1) == Decimal("90000")

    def test_small_magnitudes(self) -> None:
        assert truncate(Decimal("0.000123456"), 2) == Decimal("0.00012")
        assert truncate(Decimal("1.23456E-300"), 3) == Decimal("1.23E-300")

    def test_value_already_short_is_unchanged(self) -> None:
        assert truncate(Decimal("0.1"), 5) == Decimal("0.1")


class TestRoundHalfUp:
    """Redondeo: la mitad se aleja del cero"""

    def test_rounds_up_at_half(self) -> None:
        assert round_half_up(Decimal("2.675"), 3) == Decimal("2.68")
        assert round_half_up(Decimal("2.5"), 1) == Decimal("3")
        assert round_half_up(Decimal("0.125"), 2) == Decimal("0.13")

    def test_rounds_down_below_half(self) -> None:
        assert round_half_up(Decimal("2.6749"), 3) == Decimal("2.67")
        assert round_half_up(Decimal("3.14159"), 3) == Decimal("3.14")

    def test_negative_ties_move_away_from_zero(self) -> None:
        assert round_half_up(Decimal("-2.5"), 1) == Decimal("-3")
        assert round_half_up(Decimal("-2.675"), 3) == Decimal("-2.68")

    def test_carry_adds_a_digit(self) -> None:
        assert round_half_up(Decimal("9.99"), 2) == Decimal("10")
        assert round_half_up(Decimal("0.0999"), 2) == Decimal("0.1")

    def test_huge_magnitudes_keep_exponent(self) -> None:
        assert round_half_up(Decimal("9.99E+100"), 2) == Decimal("1E+101")
        assert round_half_up(Decimal("4.4449E+500"), 3) == Decimal("4.44E+500")

    def test_more_digits_than_working_precision(self) -> None:
        value = Decimal("1." + "9" * 99)
        assert round_half_up(value, 80) == Decimal(2)
        assert truncate(value, 80) == Decimal("1." + "9" * 79)


class TestSpecialValues:
    """Cero, centinela infinito y NaN"""

    @pytest.mark.parametrize("method", METHODS)
    @pytest.mark.parametrize("digits", [1, 3, 50, 120])
    def test_zero_returns_exact_zero(self, method, digits) -> None:
        for text in ("0", "-0", "0.000", "0E+10"):
            result = limit(Decimal(text), digits, method)
            assert result == 0
            assert not result.is_signed()

    @pytest.mark.parametrize("method", METHODS)
    def test_infinity_stays_infinite(self, method) -> None:
        result = limit(INFINITY, 3, method)
        assert result.is_infinite()
        assert result > 0
        assert limit(-INFINITY, 3, method) == -INFINITY

    @pytest.mark.parametrize("method", METHODS)
    def test_nan_passes_through(self, method) -> None:
        assert limit(Decimal("NaN"), 3, method).is_nan()


class TestProperties:
    """Idempotencia y cota del truncamiento"""

    @pytest.mark.parametrize("method", METHODS)
    @pytest.mark.parametrize("text", SAMPLE_VALUES)
    @pytest.mark.parametrize("digits", [1, 2, 3, 7])
    def test_idempotent(self, method, text, digits) -> None:
        once = limit(Decimal(text), digits, method)
        assert limit(once, digits, method) == once

    @pytest.mark.parametrize("text", SAMPLE_VALUES)
    @pytest.mark.parametrize("digits", [1, 2, 3, 7])
    def test_truncation_never_increases_magnitude(self, text, digits) -> None:
        value = Decimal(text)
        assert abs(truncate(value, digits)) <= abs(value)

    @pytest.mark.parametrize("text", SAMPLE_VALUES)
    def test_result_has_at_most_n_significant_digits(self, text) -> None:
        result = truncate(Decimal(text), 3)
        significant = "".join(map(str, result.as_tuple().digits)).strip("0")
        assert len(significant) <= 3


class TestLimitMethod:
    """Etiquetas aceptadas para el método"""

    @pytest.mark.parametrize(
        "label", ["Truncamiento", "truncamento", "Truncamento", "TRUNCATION", " truncamiento "]
    )
    def test_truncation_labels(self, label) -> None:
        assert LimitMethod.coerce(label) is LimitMethod.TRUNCATION

    @pytest.mark.parametrize("label", ["Redondeo", "Arredondamento", "rounding"])
    def test_rounding_labels(self, label) -> None:
        assert LimitMethod.coerce(label) is LimitMethod.ROUNDING

    def test_enum_passes_through(self) -> None:
        assert LimitMethod.coerce(LimitMethod.ROUNDING) is LimitMethod.ROUNDING

    @pytest.mark.parametrize("label", ["floor", "", None, 1])
    def test_unknown_label(self, label) -> None:
        with pytest.raises(ValueError):
            LimitMethod.coerce(label)

    def test_limit_accepts_labels(self) -> None:
        assert limit(Decimal("2.675"), 3, "Arredondamento") == Decimal("2.68")


class TestInvalidDigits:
    """El limitador rechaza cantidades de dígitos no positivas"""

    @pytest.mark.parametrize("digits", [0, -2, 1.5, True])
    def test_rejected(self, digits) -> None:
        with pytest.raises(InvalidDigitCount):
            limit(Decimal("1.5"), digits, LimitMethod.ROUNDING)
