"""
Тесты для ValueRange и ValueRangeComparison

Проверяет:
1. Предопределённые диапазоны представлений
2. Валидацию порядка границ и immutability (frozen Pydantic)
3. is_equal_or_superset_of / supports_all_values_of
4. Вспомогательные предикаты ValueRangeComparison
"""

import math
from decimal import Decimal

import pytest
from pydantic import ValidationError

from safenum.core.domain.representation import Representation
from safenum.core.domain.value_range import (
    BIG_DECIMAL_RANGE,
    BIG_INT_RANGE,
    CHAR16_RANGE,
    FLOAT32_RANGE,
    FLOAT64_RANGE,
    INT8_RANGE,
    INT16_RANGE,
    INT32_RANGE,
    INT64_RANGE,
    ValueRange,
    ValueRangeComparison,
    range_of,
)
from safenum.core.math.numerical_safeguards import FLOAT32_MAX, FLOAT64_MAX

# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ДИАПАЗОНЫ
# =============================================================================


class TestPredefinedRanges:
    """Диапазоны представлений каталога"""

    def test_integer_range(self) -> None:
        """Целые диапазоны: Decimal-границы и границы в собственном типе"""
        assert INT8_RANGE.min_value == Decimal(-128)
        assert INT8_RANGE.max_value == Decimal(127)
        assert INT8_RANGE.min_in_own_type == -128
        assert isinstance(INT8_RANGE.max_in_own_type, int)
        assert not INT8_RANGE.supports_decimals
        assert not INT8_RANGE.has_infinity_and_nan

    def test_float_range_bounds_exact(self) -> None:
        """Границы float-диапазонов — точное двоичное значение"""
        assert FLOAT32_RANGE.max_value == Decimal(FLOAT32_MAX)
        assert FLOAT32_RANGE.min_value == Decimal(-FLOAT32_MAX)
        assert FLOAT64_RANGE.max_value == Decimal(FLOAT64_MAX)
        assert isinstance(FLOAT32_RANGE.max_in_own_type, float)
        assert FLOAT32_RANGE.supports_decimals
        assert FLOAT32_RANGE.has_infinity_and_nan

    def test_unbounded_ranges(self) -> None:
        """BIG_INT и BIG_DECIMAL не ограничены"""
        assert BIG_INT_RANGE.min_value is None
        assert BIG_INT_RANGE.max_value is None
        assert not BIG_INT_RANGE.is_bounded
        assert BIG_DECIMAL_RANGE.supports_decimals
        assert not BIG_DECIMAL_RANGE.has_infinity_and_nan

    def test_char16_range(self) -> None:
        assert CHAR16_RANGE.min_in_own_type == 0
        assert CHAR16_RANGE.max_in_own_type == 65535

    def test_range_of_auxiliary(self) -> None:
        """Атомарные представления имеют диапазон базового целого"""
        assert range_of(Representation.ATOMIC_INT32) is INT32_RANGE
        assert range_of(Representation.ATOMIC_INT64) is INT64_RANGE
        assert range_of(Representation.INT16) is INT16_RANGE


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


class TestValueRangeValidation:
    """Валидация и immutability модели"""

    def test_min_above_max_rejected(self) -> None:
        """min_value > max_value отклоняется"""
        with pytest.raises(ValidationError, match="exceeds"):
            ValueRange(
                min_value=Decimal(1),
                max_value=Decimal(0),
                supports_decimals=False,
                has_infinity_and_nan=False,
            )

    def test_required_fields(self) -> None:
        with pytest.raises(ValidationError):
            ValueRange(min_value=Decimal(0))

    def test_frozen(self) -> None:
        """Диапазон не изменяется после создания"""
        with pytest.raises(ValidationError):
            INT8_RANGE.max_value = Decimal(1000)

    def test_single_sided_bounds(self) -> None:
        """Одна граница допустима"""
        value_range = ValueRange(
            min_value=Decimal(0), supports_decimals=False, has_infinity_and_nan=False
        )
        assert value_range.is_bounded
        assert value_range.max_value is None


# =============================================================================
# СРАВНЕНИЕ ДИАПАЗОНОВ
# =============================================================================


class TestRangeContainment:
    """is_equal_or_superset_of и supports_all_values_of"""

    def test_integer_widening(self) -> None:
        assert INT32_RANGE.is_equal_or_superset_of(INT8_RANGE)
        assert INT32_RANGE.is_equal_or_superset_of(INT32_RANGE)
        assert not INT8_RANGE.is_equal_or_superset_of(INT32_RANGE)
        assert not INT8_RANGE.is_equal_or_superset_of(CHAR16_RANGE)

    def test_unbounded_is_superset_of_everything(self) -> None:
        """BIG_INT ⊇ FLOAT64 по величине (дроби игнорируются)"""
        assert BIG_INT_RANGE.is_equal_or_superset_of(FLOAT64_RANGE)
        assert not FLOAT64_RANGE.is_equal_or_superset_of(BIG_INT_RANGE)

    def test_float_vs_integer(self) -> None:
        assert FLOAT32_RANGE.is_equal_or_superset_of(INT64_RANGE)
        assert not INT64_RANGE.is_equal_or_superset_of(FLOAT32_RANGE)
        assert not FLOAT32_RANGE.is_equal_or_superset_of(FLOAT64_RANGE)

    def test_supports_all_values_considers_special_values(self) -> None:
        """±inf/NaN источника требуют их поддержки в цели"""
        assert not BIG_INT_RANGE.supports_all_values_of(FLOAT64_RANGE)
        assert not BIG_DECIMAL_RANGE.supports_all_values_of(FLOAT32_RANGE)
        assert FLOAT64_RANGE.supports_all_values_of(FLOAT32_RANGE)
        assert FLOAT64_RANGE.supports_all_values_of(INT64_RANGE)

    def test_supports_all_values_ignores_decimals(self) -> None:
        """Дробная часть не учитывается"""
        assert BIG_INT_RANGE.supports_all_values_of(BIG_DECIMAL_RANGE)
        assert BIG_DECIMAL_RANGE.supports_all_values_of(BIG_INT_RANGE)


# =============================================================================
# VALUE RANGE COMPARISON
# =============================================================================


class TestValueRangeComparison:
    """Предикаты результата сравнения"""

    def test_error_for_non_finite(self) -> None:
        assert ValueRangeComparison.error_for_non_finite(1.5) is None
        assert (
            ValueRangeComparison.error_for_non_finite(math.nan)
            is ValueRangeComparison.UNSUPPORTED_NAN
        )
        assert (
            ValueRangeComparison.error_for_non_finite(math.inf)
            is ValueRangeComparison.UNSUPPORTED_POSITIVE_INFINITY
        )
        assert (
            ValueRangeComparison.error_for_non_finite(-math.inf)
            is ValueRangeComparison.UNSUPPORTED_NEGATIVE_INFINITY
        )

    def test_too_small_and_too_large(self) -> None:
        """-inf насыщается как слишком малое, +inf как слишком большое"""
        assert ValueRangeComparison.BELOW_MINIMUM.is_too_small
        assert ValueRangeComparison.UNSUPPORTED_NEGATIVE_INFINITY.is_too_small
        assert ValueRangeComparison.ABOVE_MAXIMUM.is_too_large
        assert ValueRangeComparison.UNSUPPORTED_POSITIVE_INFINITY.is_too_large
        assert not ValueRangeComparison.UNSUPPORTED_NAN.is_too_small
        assert not ValueRangeComparison.UNSUPPORTED_NAN.is_too_large
        assert not ValueRangeComparison.WITHIN_RANGE.is_too_large

    def test_unsupported_predicates(self) -> None:
        assert ValueRangeComparison.UNSUPPORTED_NAN.is_unsupported_non_finite
        assert not ValueRangeComparison.UNSUPPORTED_NAN.is_unsupported_infinity
        assert ValueRangeComparison.UNSUPPORTED_NEGATIVE_INFINITY.is_unsupported_infinity
        assert not ValueRangeComparison.ABOVE_MAXIMUM.is_unsupported_non_finite

    def test_string_values(self) -> None:
        """str Enum: значение совпадает с именем"""
        assert ValueRangeComparison("WITHIN_RANGE") is ValueRangeComparison.WITHIN_RANGE
        assert len(ValueRangeComparison) == 6
