"""
Тесты для модуля IEEE-754 декомпозиции

Проверяет:
1. decompose (frexp) на нуле, normal, subnormal и границах
2. Целочисленную форму significand_and_exponent
3. Отказ на ±inf и NaN
4. Совпадение с math.frexp на произвольных double
"""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from floatpp.core.math.ieee754 import (
    MIN_EXPONENT,
    TWO52,
    Decomposed,
    UnsupportedValue,
    bits_to_double,
    decompose,
    double_to_bits,
    significand_and_exponent,
)

SMALLEST_SUBNORMAL = bits_to_double(0x0000000000000001)
LARGEST_SUBNORMAL = bits_to_double(0x000FFFFFFFFFFFFF)
SMALLEST_NORMAL = bits_to_double(0x0010000000000000)
LARGEST_NORMAL = bits_to_double(0x7FEFFFFFFFFFFFFF)

finite_floats = st.floats(allow_nan=False, allow_infinity=False)
finite_bit_patterns = st.integers(min_value=0, max_value=0x7FEFFFFFFFFFFFFF).map(bits_to_double)


# =============================================================================
# ТЕСТЫ BIT ACCESS
# =============================================================================


class TestBitAccess:
    """Тесты double_to_bits / bits_to_double"""

    def test_known_patterns(self) -> None:
        """Известные битовые образы"""
        assert double_to_bits(1.0) == 0x3FF0000000000000
        assert double_to_bits(-2.0) == 0xC000000000000000
        assert double_to_bits(-0.0) == 0x8000000000000000
        assert bits_to_double(0x3FF0000000000000) == 1.0

    def test_boundary_values(self) -> None:
        """Границы диапазонов"""
        assert SMALLEST_SUBNORMAL == 5e-324
        assert LARGEST_SUBNORMAL == 2.225073858507201e-308
        assert SMALLEST_NORMAL == 2.2250738585072014e-308
        assert LARGEST_NORMAL == 1.7976931348623157e308


# =============================================================================
# ТЕСТЫ DECOMPOSE
# =============================================================================


class TestDecompose:
    """Тесты decompose"""

    def test_zero(self) -> None:
        """Ноль не зависит от знака"""
        assert decompose(0.0) == Decomposed(0.0, 0)
        assert decompose(-0.0) == Decomposed(0.0, 0)

    def test_one(self) -> None:
        """1.0 = 0.5 * 2**1"""
        assert decompose(1.0) == (0.5, 1)

    def test_negative_one(self) -> None:
        """Знак сохраняется во fraction"""
        assert decompose(-1.0) == (-0.5, 1)

    def test_small_denormalized_number(self) -> None:
        """Наименьший subnormal"""
        assert decompose(SMALLEST_SUBNORMAL) == (0.5, -1073)

    def test_large_denormalized_number(self) -> None:
        """Наибольший subnormal"""
        assert decompose(LARGEST_SUBNORMAL) == (0.9999999999999998, -1022)

    def test_small_normalized_number(self) -> None:
        """Наименьший normal"""
        assert decompose(SMALLEST_NORMAL) == (0.5, -1021)

    def test_large_normalized_number(self) -> None:
        """Наибольший normal"""
        assert decompose(LARGEST_NORMAL) == (0.9999999999999999, 1024)

    def test_subnormal_fraction_is_exact(self) -> None:
        """Subnormal с несколькими значащими битами раскладывается точно"""
        value = bits_to_double(0x0000000000000003)
        assert decompose(value) == (0.75, -1072)
        assert decompose(-value) == (-0.75, -1072)

    def test_fields_are_named(self) -> None:
        """Результат — NamedTuple с полями fraction/exponent"""
        result = decompose(6.0)
        assert result.fraction == 0.75
        assert result.exponent == 3

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_non_finite_rejected(self, value: float) -> None:
        """±inf и NaN вызывают UnsupportedValue"""
        with pytest.raises(UnsupportedValue):
            decompose(value)

    def test_unsupported_value_is_value_error(self) -> None:
        """UnsupportedValue — подкласс ValueError"""
        assert issubclass(UnsupportedValue, ValueError)

    @given(finite_floats)
    def test_matches_math_frexp(self, value: float) -> None:
        """Совпадение с math.frexp"""
        assert decompose(value) == math.frexp(value)

    @given(finite_bit_patterns)
    def test_reconstructs_value(self, value: float) -> None:
        """fraction * 2**exponent == value, |fraction| ∈ [1/2, 1)"""
        fraction, exponent = decompose(value)
        assert math.ldexp(fraction, exponent) == value
        if value != 0.0:
            assert 0.5 <= abs(fraction) < 1.0


# =============================================================================
# ТЕСТЫ SIGNIFICAND AND EXPONENT
# =============================================================================


class TestSignificandAndExponent:
    """Тесты целочисленной формы"""

    def test_one(self) -> None:
        """1.0 = 2**52 * 2**-52"""
        assert significand_and_exponent(1.0) == (TWO52, -52)

    def test_sign_dropped(self) -> None:
        """Мантисса всегда положительна"""
        assert significand_and_exponent(-1.0) == (TWO52, -52)

    def test_smallest_subnormal(self) -> None:
        """Subnormal сохраняет уменьшенную точность"""
        assert significand_and_exponent(SMALLEST_SUBNORMAL) == (1, MIN_EXPONENT)

    def test_largest_subnormal(self) -> None:
        """Наибольший subnormal: 52 значащих бита"""
        assert significand_and_exponent(LARGEST_SUBNORMAL) == (TWO52 - 1, MIN_EXPONENT)

    def test_smallest_normal(self) -> None:
        """Наименьший normal: порядок ровно MIN_EXPONENT"""
        assert significand_and_exponent(SMALLEST_NORMAL) == (TWO52, MIN_EXPONENT)

    def test_zero_rejected(self) -> None:
        """У нуля нет мантиссы"""
        with pytest.raises(ValueError, match="Zero"):
            significand_and_exponent(0.0)

    def test_inf_rejected(self) -> None:
        """±inf вызывает UnsupportedValue"""
        with pytest.raises(UnsupportedValue):
            significand_and_exponent(math.inf)

    @given(finite_bit_patterns.filter(lambda x: x != 0.0))
    def test_exact(self, value: float) -> None:
        """significand * 2**exponent == |value|"""
        significand, exponent = significand_and_exponent(value)
        assert 0 < significand < 2 * TWO52
        assert exponent >= MIN_EXPONENT
        assert math.ldexp(float(significand), exponent) == abs(value)
