"""
Conversions — усекающие конверсии между основными представлениями

Усекающая конверсия ведёт себя как приведение типа в языках с числами
фиксированной ширины: границы не проверяются, переполнение заворачивается.

Целевые целые фиксированной ширины:
- из целых: младшие биты (two's complement)
- из BIG_DECIMAL: целая часть (усечение к нулю), затем младшие биты
- из конечного float: усечение к нулю с насыщением к INT32
  (INT64 для цели INT64), затем младшие биты для INT8/INT16
- NaN → 0, +inf → максимум цели, -inf → минимум цели

Целевые float32/float64: ближайшее значение (round-half-even), переполнение → ±inf.

Целевые BIG_INT/BIG_DECIMAL: конечные значения переводятся точно
(BIG_INT усекает к нулю), NaN и ±inf → 0.
"""

import math
from decimal import Decimal
from typing import Callable

from safenum.core.domain.numeric_value import NumericValue, UnsupportedRepresentationError
from safenum.core.domain.representation import Representation
from safenum.core.math.numerical_safeguards import (
    exact_to_float32,
    exact_to_float64,
    is_valid_float,
    round_to_float32,
    saturating_truncate,
    signed_bounds,
    wrap_to_bits,
)


# =============================================================================
# ЦЕЛЫЕ ФИКСИРОВАННОЙ ШИРИНЫ
# =============================================================================


def _to_fixed_width_int(source: NumericValue, bits: int) -> int:
    number = source.value

    if source.representation.is_floating:
        if math.isnan(number):
            return 0
        if math.isinf(number):
            low, high = signed_bounds(bits)
            return high if number > 0 else low
        # Насыщение к INT32/INT64, узкие типы затем заворачиваются
        return wrap_to_bits(saturating_truncate(number, 64 if bits == 64 else 32), bits)

    return wrap_to_bits(int(number), bits)


# =============================================================================
# ПЛАВАЮЩАЯ ТОЧКА
# =============================================================================


def _to_float32(source: NumericValue) -> float:
    if source.representation.is_floating:
        return round_to_float32(source.value)
    return exact_to_float32(source.value)


def _to_float64(source: NumericValue) -> float:
    if source.representation.is_floating:
        return source.value
    return exact_to_float64(source.value)


# =============================================================================
# ПРОИЗВОЛЬНАЯ ТОЧНОСТЬ
# =============================================================================


def _to_big_int(source: NumericValue) -> int:
    number = source.value
    if source.representation.is_floating and not is_valid_float(number):
        return 0
    return int(number)


def _to_big_decimal(source: NumericValue) -> Decimal:
    number = source.value
    if source.representation.is_floating and not is_valid_float(number):
        return Decimal(0)
    return Decimal(number)


# =============================================================================
# ДИСПЕТЧЕРИЗАЦИЯ
# =============================================================================

_TRUNCATORS: dict[Representation, Callable[[NumericValue], int | float | Decimal]] = {
    Representation.INT8: lambda source: _to_fixed_width_int(source, 8),
    Representation.INT16: lambda source: _to_fixed_width_int(source, 16),
    Representation.INT32: lambda source: _to_fixed_width_int(source, 32),
    Representation.INT64: lambda source: _to_fixed_width_int(source, 64),
    Representation.FLOAT32: _to_float32,
    Representation.FLOAT64: _to_float64,
    Representation.BIG_INT: _to_big_int,
    Representation.BIG_DECIMAL: _to_big_decimal,
}


def convert_truncating(target: Representation, source: NumericValue) -> NumericValue:
    """
    Усекающая конверсия значения основного представления в target.

    Args:
        target: Основное целевое представление
        source: Значение основного (развёрнутого) представления

    Returns:
        Новое значение представления target

    Raises:
        UnsupportedRepresentationError: Если target или source вспомогательные

    Examples:
        >>> convert_truncating(Representation.INT8, NumericValue.int32(200)).value
        -56
        >>> convert_truncating(Representation.INT32, NumericValue.float64(float("nan"))).value
        0
    """
    if source.representation.is_auxiliary:
        raise UnsupportedRepresentationError(
            f"Source {source.representation.value} must be unwrapped before conversion"
        )
    truncator = _TRUNCATORS.get(target)
    if truncator is None:
        raise UnsupportedRepresentationError(
            f"No truncating conversion to {target.value}"
        )
    return NumericValue(target, truncator(source))


def zero_of(target: Representation) -> NumericValue:
    """Ноль в собственном типе основного представления"""
    return convert_truncating(target, NumericValue.int32(0))
