"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Границы представлений фиксированной ширины
2. NaN/Inf проверки
3. Ограничение диапазоном и насыщение
4. Усечение до младших бит (two's complement)
5. Корректное однократное округление к binary32/binary64
"""

import math
from decimal import Decimal

import pytest

from safenum.core.math.numerical_safeguards import (
    FLOAT32_MAX,
    FLOAT32_OVERFLOW_THRESHOLD,
    INT8_MAX,
    INT8_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    clamp,
    exact_to_float32,
    exact_to_float64,
    is_float32_exact,
    is_valid_float,
    round_to_float32,
    saturating_truncate,
    signed_bounds,
    wrap_to_bits,
)

# =============================================================================
# ТЕСТЫ ГРАНИЦ
# =============================================================================


class TestBounds:
    """Тесты констант и signed_bounds"""

    def test_integer_constants(self) -> None:
        """Константы совпадают с two's complement границами"""
        assert (INT8_MIN, INT8_MAX) == (-128, 127)
        assert (INT32_MIN, INT32_MAX) == (-2147483648, 2147483647)
        assert (INT64_MIN, INT64_MAX) == (-9223372036854775808, 9223372036854775807)

    def test_float32_max(self) -> None:
        """FLOAT32_MAX — наибольшее конечное binary32"""
        assert FLOAT32_MAX == 3.4028234663852886e38

    def test_signed_bounds(self) -> None:
        """signed_bounds для стандартных ширин"""
        assert signed_bounds(8) == (-128, 127)
        assert signed_bounds(16) == (-32768, 32767)
        assert signed_bounds(64) == (INT64_MIN, INT64_MAX)

    def test_invalid_bits_raises(self) -> None:
        """Неположительная ширина вызывает ошибку"""
        with pytest.raises(ValueError, match="bits must be positive"):
            signed_bounds(0)


# =============================================================================
# ТЕСТЫ NaN/Inf
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_normal_values_valid(self) -> None:
        """Обычные значения валидны"""
        assert is_valid_float(0.0)
        assert is_valid_float(-1.0)
        assert is_valid_float(FLOAT32_MAX)

    def test_nan_invalid(self) -> None:
        """NaN невалиден"""
        assert not is_valid_float(float("nan"))

    def test_inf_invalid(self) -> None:
        """Inf невалиден"""
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ CLAMP И WRAP
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_value_within_range_unchanged(self) -> None:
        """Значение внутри диапазона не изменяется"""
        assert clamp(5, 0, 10) == 5

    def test_value_below_min(self) -> None:
        """Значение ниже минимума → минимум"""
        assert clamp(-1, 0, 65535) == 0

    def test_value_above_max(self) -> None:
        """Значение выше максимума → максимум"""
        assert clamp(200, -128, 127) == 127

    def test_missing_bounds(self) -> None:
        """Отсутствующая граница не ограничивает"""
        assert clamp(10**30, 0, None) == 10**30
        assert clamp(-(10**30), None, 0) == -(10**30)


class TestWrapToBits:
    """Тесты для wrap_to_bits"""

    def test_in_range_unchanged(self) -> None:
        """Значения внутри диапазона не изменяются"""
        assert wrap_to_bits(0, 8) == 0
        assert wrap_to_bits(127, 8) == 127
        assert wrap_to_bits(-128, 8) == -128

    def test_overflow_wraps(self) -> None:
        """Переполнение заворачивается, а не насыщается"""
        assert wrap_to_bits(200, 8) == -56
        assert wrap_to_bits(128, 8) == -128
        assert wrap_to_bits(255, 8) == -1
        assert wrap_to_bits(-129, 8) == 127

    def test_wide_values(self) -> None:
        """Большие целые сохраняют только младшие биты"""
        assert wrap_to_bits(2**31, 32) == INT32_MIN
        assert wrap_to_bits(2**100 + 300, 8) == 44
        assert wrap_to_bits(2**64 + 7, 64) == 7

    def test_invalid_bits_raises(self) -> None:
        with pytest.raises(ValueError, match="bits must be positive"):
            wrap_to_bits(1, -8)


class TestSaturatingTruncate:
    """Тесты для saturating_truncate"""

    def test_truncates_toward_zero(self) -> None:
        """Дробная часть отбрасывается в сторону нуля"""
        assert saturating_truncate(2.9, 32) == 2
        assert saturating_truncate(-2.9, 32) == -2

    def test_saturates(self) -> None:
        """Значения за границами насыщаются"""
        assert saturating_truncate(1e20, 32) == INT32_MAX
        assert saturating_truncate(-1e20, 32) == INT32_MIN
        assert saturating_truncate(1e30, 64) == INT64_MAX
        assert saturating_truncate(-1e30, 64) == INT64_MIN

    def test_non_finite_raises(self) -> None:
        """NaN/Inf не имеют целой части"""
        with pytest.raises(ValueError, match="finite"):
            saturating_truncate(float("nan"), 32)
        with pytest.raises(ValueError, match="finite"):
            saturating_truncate(float("inf"), 64)


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundToFloat32:
    """Тесты для round_to_float32"""

    def test_exact_values_unchanged(self) -> None:
        """Точно представимые значения не изменяются"""
        assert round_to_float32(0.5) == 0.5
        assert round_to_float32(-1024.25) == -1024.25
        assert round_to_float32(FLOAT32_MAX) == FLOAT32_MAX

    def test_rounds_to_nearest(self) -> None:
        """0.1 округляется к ближайшему binary32"""
        assert round_to_float32(0.1) == 0.10000000149011612

    def test_just_above_max_rounds_down(self) -> None:
        """Значение между MAX и порогом переполнения округляется к MAX"""
        assert round_to_float32(FLOAT32_MAX + 2.0**102) == FLOAT32_MAX

    def test_overflow_becomes_infinity(self) -> None:
        """Переполнение даёт ±inf, а не исключение"""
        assert round_to_float32(FLOAT32_OVERFLOW_THRESHOLD) == math.inf
        assert round_to_float32(1e39) == math.inf
        assert round_to_float32(-1e39) == -math.inf

    def test_non_finite_unchanged(self) -> None:
        """NaN и ±inf возвращаются как есть"""
        assert math.isnan(round_to_float32(float("nan")))
        assert round_to_float32(float("-inf")) == -math.inf


class TestIsFloat32Exact:
    """Тесты для is_float32_exact"""

    def test_exact(self) -> None:
        assert is_float32_exact(0.5)
        assert is_float32_exact(FLOAT32_MAX)
        assert is_float32_exact(float("nan"))
        assert is_float32_exact(float("inf"))

    def test_not_exact(self) -> None:
        assert not is_float32_exact(0.1)
        assert not is_float32_exact(1e39)


class TestExactToFloat32:
    """Тесты для exact_to_float32"""

    def test_small_integers_exact(self) -> None:
        """Целые до 2**24 представимы точно"""
        assert exact_to_float32(0) == 0.0
        assert exact_to_float32(16777216) == 16777216.0
        assert exact_to_float32(-12345) == -12345.0

    def test_ties_to_even(self) -> None:
        """Половина шага округляется к чётной мантиссе"""
        assert exact_to_float32(16777217) == 16777216.0
        assert exact_to_float32(16777219) == 16777220.0

    def test_no_double_rounding(self) -> None:
        """
        Округление однократное.

        Через float64 значение сначала теряет младшую единицу, затем попадает
        ровно на середину и округляется вниз; точное округление идёт вверх.
        """
        value = (1 << 60) + (1 << 36) + 1
        assert exact_to_float32(value) == float((1 << 60) + (1 << 37))
        assert round_to_float32(float(value)) == float(1 << 60)

    def test_wide_integer_not_rounded_to_context(self) -> None:
        """Целые длиннее точности Decimal-контекста (28 цифр) округляются точно"""
        value = (1 << 100) + (1 << 76) + 1
        assert exact_to_float32(value) == float((1 << 100) + (1 << 77))
        assert exact_to_float32(-value) == -float((1 << 100) + (1 << 77))

    def test_decimal(self) -> None:
        """Decimal округляется так же, как соответствующий float"""
        assert exact_to_float32(Decimal("0.1")) == 0.10000000149011612
        assert exact_to_float32(Decimal("-2.5")) == -2.5

    def test_max_exact(self) -> None:
        assert exact_to_float32(int(FLOAT32_MAX)) == FLOAT32_MAX

    def test_overflow_and_underflow(self) -> None:
        """Переполнение → ±inf, исчезающе малые значения → 0"""
        assert exact_to_float32(Decimal("1E+39")) == math.inf
        assert exact_to_float32(-(10**50)) == -math.inf
        assert exact_to_float32(Decimal("1E-50")) == 0.0

    def test_subnormal(self) -> None:
        """Наименьшее субнормальное binary32 представимо"""
        smallest = Decimal(2.0**-149)
        assert exact_to_float32(smallest) == 2.0**-149


class TestExactToFloat64:
    """Тесты для exact_to_float64"""

    def test_rounding(self) -> None:
        assert exact_to_float64(2**53 + 1) == 9007199254740992.0
        assert exact_to_float64(Decimal("0.1")) == 0.1

    def test_overflow_becomes_infinity(self) -> None:
        """int за пределами float64 даёт ±inf вместо OverflowError"""
        assert exact_to_float64(10**400) == math.inf
        assert exact_to_float64(-(10**400)) == -math.inf
        assert exact_to_float64(Decimal("1E+400")) == math.inf
