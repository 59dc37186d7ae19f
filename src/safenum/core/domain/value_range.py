"""
ValueRange — диапазон значений числового представления

Immutable Pydantic модель, описывающая множество значений представления:
- min_value / max_value как Decimal (None = граница отсутствует)
- поддержка дробной части
- наличие специальных значений ±inf и NaN

Также содержит результат сравнения числа с диапазоном (ValueRangeComparison)
и предопределённые диапазоны всех представлений каталога.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Если обе границы заданы: min_value <= max_value
2. Границы float32/float64 точные (Decimal из двоичного значения)
3. BIG_INT и BIG_DECIMAL не ограничены и не имеют ±inf/NaN
"""

import math
from decimal import Decimal
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, model_validator

from safenum.core.domain.representation import Representation
from safenum.core.math.numerical_safeguards import (
    CHAR16_MAX,
    CHAR16_MIN,
    FLOAT32_MAX,
    FLOAT64_MAX,
    INT8_MAX,
    INT8_MIN,
    INT16_MAX,
    INT16_MIN,
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
)


# =============================================================================
# РЕЗУЛЬТАТ СРАВНЕНИЯ
# =============================================================================


class ValueRangeComparison(str, Enum):
    """Результат сравнения числа с диапазоном представления"""

    # Число представимо без потери величины
    WITHIN_RANGE = "WITHIN_RANGE"
    BELOW_MINIMUM = "BELOW_MINIMUM"
    ABOVE_MAXIMUM = "ABOVE_MAXIMUM"
    # Специальные значения, которые целевое представление не поддерживает
    UNSUPPORTED_POSITIVE_INFINITY = "UNSUPPORTED_POSITIVE_INFINITY"
    UNSUPPORTED_NEGATIVE_INFINITY = "UNSUPPORTED_NEGATIVE_INFINITY"
    UNSUPPORTED_NAN = "UNSUPPORTED_NAN"

    @staticmethod
    def error_for_non_finite(value: float) -> "ValueRangeComparison | None":
        """
        Ошибка сравнения для неконечного float.

        Args:
            value: Значение float32/float64

        Returns:
            UNSUPPORTED_* для NaN/±inf, None для конечного значения

        Examples:
            >>> ValueRangeComparison.error_for_non_finite(1.5) is None
            True
            >>> ValueRangeComparison.error_for_non_finite(float("-inf"))
            <ValueRangeComparison.UNSUPPORTED_NEGATIVE_INFINITY: 'UNSUPPORTED_NEGATIVE_INFINITY'>
        """
        if math.isfinite(value):
            return None
        if math.isnan(value):
            return ValueRangeComparison.UNSUPPORTED_NAN
        if value > 0:
            return ValueRangeComparison.UNSUPPORTED_POSITIVE_INFINITY
        return ValueRangeComparison.UNSUPPORTED_NEGATIVE_INFINITY

    @property
    def is_too_small(self) -> bool:
        """Слишком малое конечное значение или неподдерживаемая -inf"""
        return self in (
            ValueRangeComparison.BELOW_MINIMUM,
            ValueRangeComparison.UNSUPPORTED_NEGATIVE_INFINITY,
        )

    @property
    def is_too_large(self) -> bool:
        """Слишком большое конечное значение или неподдерживаемая +inf"""
        return self in (
            ValueRangeComparison.ABOVE_MAXIMUM,
            ValueRangeComparison.UNSUPPORTED_POSITIVE_INFINITY,
        )

    @property
    def is_unsupported_infinity(self) -> bool:
        return self in (
            ValueRangeComparison.UNSUPPORTED_POSITIVE_INFINITY,
            ValueRangeComparison.UNSUPPORTED_NEGATIVE_INFINITY,
        )

    @property
    def is_unsupported_non_finite(self) -> bool:
        return self.is_unsupported_infinity or self is ValueRangeComparison.UNSUPPORTED_NAN


# =============================================================================
# VALUE RANGE MODEL
# =============================================================================


class ValueRange(BaseModel):
    """
    Диапазон значений представления.

    Immutable модель (frozen=True). Границы хранятся дважды: как Decimal
    (для сравнения) и в собственном типе представления (для насыщения).
    """

    min_value: Decimal | None = Field(
        default=None, description="Минимальное значение (None = без ограничения)"
    )
    max_value: Decimal | None = Field(
        default=None, description="Максимальное значение (None = без ограничения)"
    )
    min_in_own_type: int | float | None = Field(
        default=None, description="Минимальное конечное значение в собственном типе"
    )
    max_in_own_type: int | float | None = Field(
        default=None, description="Максимальное конечное значение в собственном типе"
    )
    supports_decimals: bool = Field(..., description="Поддержка дробной части")
    has_infinity_and_nan: bool = Field(..., description="Наличие ±inf и NaN")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_bounds_order(self) -> "ValueRange":
        """Проверка min_value <= max_value"""
        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            raise ValueError(
                f"min_value {self.min_value} exceeds max_value {self.max_value}"
            )
        return self

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def for_integer_bounds(cls, min_value: int, max_value: int) -> "ValueRange":
        """Диапазон целого представления: без дробей, без ±inf/NaN"""
        return cls(
            min_value=Decimal(min_value),
            max_value=Decimal(max_value),
            min_in_own_type=min_value,
            max_in_own_type=max_value,
            supports_decimals=False,
            has_infinity_and_nan=False,
        )

    @classmethod
    def for_floating_bounds(cls, max_value: float) -> "ValueRange":
        """Симметричный диапазон float-представления с ±inf/NaN"""
        return cls(
            min_value=Decimal(-max_value),
            max_value=Decimal(max_value),
            min_in_own_type=-max_value,
            max_in_own_type=max_value,
            supports_decimals=True,
            has_infinity_and_nan=True,
        )

    @classmethod
    def unbounded(cls, supports_decimals: bool) -> "ValueRange":
        """Неограниченный диапазон (целые/десятичные произвольной точности)"""
        return cls(supports_decimals=supports_decimals, has_infinity_and_nan=False)

    # -------------------------------------------------------------------------
    # Сравнение диапазонов
    # -------------------------------------------------------------------------

    @property
    def is_bounded(self) -> bool:
        return self.min_value is not None or self.max_value is not None

    def is_equal_or_superset_of(self, other: "ValueRange") -> bool:
        """
        Проверка, что этот диапазон содержит все значения другого по величине.

        Поддержка дробей и специальных значений игнорируется: диапазон
        BIG_INT считается надмножеством FLOAT64.

        Args:
            other: Сравниваемый диапазон

        Returns:
            True если self.min <= other.min и self.max >= other.max
            (None трактуется как -inf для min и +inf для max)
        """
        if self.min_value is not None:
            if other.min_value is None or self.min_value > other.min_value:
                return False
        if self.max_value is not None:
            if other.max_value is None or self.max_value < other.max_value:
                return False
        return True

    def supports_all_values_of(self, other: "ValueRange") -> bool:
        """
        Проверка, что каждое значение другого диапазона представимо без потери величины.

        В отличие от is_equal_or_superset_of учитывает ±inf и NaN:
        BIG_INT не поддерживает все значения FLOAT64.
        """
        return self.is_equal_or_superset_of(other) and (
            self.has_infinity_and_nan or not other.has_infinity_and_nan
        )


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ ДИАПАЗОНЫ
# =============================================================================

INT8_RANGE: Final[ValueRange] = ValueRange.for_integer_bounds(INT8_MIN, INT8_MAX)
INT16_RANGE: Final[ValueRange] = ValueRange.for_integer_bounds(INT16_MIN, INT16_MAX)
INT32_RANGE: Final[ValueRange] = ValueRange.for_integer_bounds(INT32_MIN, INT32_MAX)
INT64_RANGE: Final[ValueRange] = ValueRange.for_integer_bounds(INT64_MIN, INT64_MAX)
FLOAT32_RANGE: Final[ValueRange] = ValueRange.for_floating_bounds(FLOAT32_MAX)
FLOAT64_RANGE: Final[ValueRange] = ValueRange.for_floating_bounds(FLOAT64_MAX)
BIG_INT_RANGE: Final[ValueRange] = ValueRange.unbounded(supports_decimals=False)
BIG_DECIMAL_RANGE: Final[ValueRange] = ValueRange.unbounded(supports_decimals=True)
CHAR16_RANGE: Final[ValueRange] = ValueRange.for_integer_bounds(CHAR16_MIN, CHAR16_MAX)

_RANGES: Final[dict[Representation, ValueRange]] = {
    Representation.INT8: INT8_RANGE,
    Representation.INT16: INT16_RANGE,
    Representation.INT32: INT32_RANGE,
    Representation.INT64: INT64_RANGE,
    Representation.FLOAT32: FLOAT32_RANGE,
    Representation.FLOAT64: FLOAT64_RANGE,
    Representation.BIG_INT: BIG_INT_RANGE,
    Representation.BIG_DECIMAL: BIG_DECIMAL_RANGE,
    Representation.CHAR16: CHAR16_RANGE,
    # Атомарные счётчики имеют диапазон своего базового целого
    Representation.ATOMIC_INT32: INT32_RANGE,
    Representation.ATOMIC_INT64: INT64_RANGE,
}


def range_of(representation: Representation) -> ValueRange:
    """Диапазон значений представления"""
    return _RANGES[representation]
