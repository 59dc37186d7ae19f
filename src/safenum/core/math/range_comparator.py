"""
Range Comparator — сравнение числа с диапазоном представления

Алгоритм compare_to_range(value, value_range):
1. float NaN → UNSUPPORTED_NAN
2. float ±inf → UNSUPPORTED_POSITIVE_INFINITY / UNSUPPORTED_NEGATIVE_INFINITY
   (исключение float → float обрабатывается вызывающей стороной)
3. Иначе значение точно продвигается до Decimal и сравнивается с границами:
   ниже min → BELOW_MINIMUM, выше max → ABOVE_MAXIMUM, иначе WITHIN_RANGE

Для диапазонов без дробной части сравнивается целая часть значения
(усечение к нулю): 127.9 помещается в INT8, -128.7 тоже.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Продвижение до Decimal точное (Decimal(float) хранит двоичное значение)
2. Отсутствующая граница не ограничивает значение с этой стороны
3. Вспомогательные представления должны быть развёрнуты до вызова
"""

from decimal import ROUND_DOWN, Decimal

from safenum.core.domain.numeric_value import NumericValue, UnsupportedRepresentationError
from safenum.core.domain.value_range import ValueRange, ValueRangeComparison


def to_decimal(value: NumericValue) -> Decimal:
    """
    Точное продвижение конечного значения до Decimal.

    Args:
        value: Значение основного (не вспомогательного) представления

    Returns:
        Decimal с тем же математическим значением

    Raises:
        UnsupportedRepresentationError: Если представление вспомогательное
        ValueError: Если float не конечен
    """
    representation = value.representation
    if representation.is_auxiliary:
        raise UnsupportedRepresentationError(
            f"{representation.value} must be unwrapped before promotion to Decimal"
        )

    number = value.value
    if isinstance(number, Decimal):
        return number
    if representation.is_floating and ValueRangeComparison.error_for_non_finite(number) is not None:
        raise ValueError(f"Cannot promote non-finite value {number} to Decimal")
    return Decimal(number)


def compare_to_bounds(
    magnitude: Decimal,
    min_value: Decimal | None,
    max_value: Decimal | None,
) -> ValueRangeComparison:
    """
    Сравнение величины с границами [min_value, max_value] (включительно).

    Examples:
        >>> compare_to_bounds(Decimal(200), Decimal(-128), Decimal(127))
        <ValueRangeComparison.ABOVE_MAXIMUM: 'ABOVE_MAXIMUM'>
        >>> compare_to_bounds(Decimal(-5), None, None)
        <ValueRangeComparison.WITHIN_RANGE: 'WITHIN_RANGE'>
    """
    if min_value is not None and magnitude < min_value:
        return ValueRangeComparison.BELOW_MINIMUM
    if max_value is not None and magnitude > max_value:
        return ValueRangeComparison.ABOVE_MAXIMUM
    return ValueRangeComparison.WITHIN_RANGE


def compare_to_range(value: NumericValue, value_range: ValueRange) -> ValueRangeComparison:
    """
    Сравнение значения с диапазоном.

    Args:
        value: Значение основного представления
        value_range: Диапазон целевого представления

    Returns:
        Результат сравнения (6 вариантов ValueRangeComparison)
    """
    if value.representation.is_floating:
        error = ValueRangeComparison.error_for_non_finite(value.value)
        if error is not None:
            return error

    magnitude = to_decimal(value)
    if not value_range.supports_decimals:
        magnitude = magnitude.to_integral_value(rounding=ROUND_DOWN)

    return compare_to_bounds(magnitude, value_range.min_value, value_range.max_value)
