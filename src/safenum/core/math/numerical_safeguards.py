"""
Numerical Safeguards — примитивы безопасной работы с числами фиксированной ширины

Модуль содержит низкоуровневые операции, на которых строятся все конверсии:
- Границы представлений (целые 8/16/32/64 бит, float32/float64, char16)
- NaN/Inf проверки
- Ограничение значения диапазоном (clamp) и насыщение
- Усечение до младших бит (two's complement wrap-around)
- Корректное округление к binary32 (round-half-even)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции детерминированы и не зависят от платформы
2. Округление к float32 выполняется ровно один раз (без двойного округления)
3. Переполнение float32 даёт ±inf, а не исключение
"""

import math
import struct
from decimal import Decimal
from fractions import Fraction
from typing import Final

# =============================================================================
# ГРАНИЦЫ ЦЕЛЫХ ПРЕДСТАВЛЕНИЙ
# =============================================================================

INT8_MIN: Final[int] = -(2**7)
INT8_MAX: Final[int] = 2**7 - 1

INT16_MIN: Final[int] = -(2**15)
INT16_MAX: Final[int] = 2**15 - 1

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Беззнаковый 16-битный "символ"
CHAR16_MIN: Final[int] = 0
CHAR16_MAX: Final[int] = 2**16 - 1


# =============================================================================
# ГРАНИЦЫ ПРЕДСТАВЛЕНИЙ С ПЛАВАЮЩЕЙ ТОЧКОЙ
# =============================================================================

# Количество хранимых бит мантиссы binary32 (без скрытой единицы)
FLOAT32_MANTISSA_BITS: Final[int] = 23

# Минимальная нормализованная экспонента binary32
FLOAT32_MIN_EXPONENT: Final[int] = -126

# Наибольшее конечное значение binary32: (2 - 2**-23) * 2**127
FLOAT32_MAX: Final[float] = (2.0 - 2.0**-23) * 2.0**127

# Наибольшее конечное значение binary64
FLOAT64_MAX: Final[float] = 1.7976931348623157e308

# Порог переполнения binary32: значения с модулем >= порога округляются к inf
FLOAT32_OVERFLOW_THRESHOLD: Final[float] = 2.0**128 - 2.0**103

# Модуль меньше половины наименьшего субнормального binary32 округляется к нулю
FLOAT32_UNDERFLOW_THRESHOLD: Final[float] = 2.0**-150

_FLOAT32_MAX_EXACT: Final[Fraction] = Fraction(FLOAT32_MAX)
_FLOAT32_OVERFLOW_DECIMAL: Final[Decimal] = Decimal(FLOAT32_OVERFLOW_THRESHOLD)
_FLOAT32_UNDERFLOW_DECIMAL: Final[Decimal] = Decimal(FLOAT32_UNDERFLOW_THRESHOLD)


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# ОГРАНИЧЕНИЕ И ОБЁРТЫВАНИЕ
# =============================================================================


def clamp(
    value: int | float,
    min_value: int | float | None = None,
    max_value: int | float | None = None,
) -> int | float:
    """
    Ограничение значения в заданном диапазоне.

    Отсутствующая граница означает отсутствие ограничения с этой стороны.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(200, -128, 127)
        127
        >>> clamp(-1, 0, 65535)
        0
        >>> clamp(15, None, 10)
        10
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def signed_bounds(bits: int) -> tuple[int, int]:
    """Границы знакового целого указанной ширины в two's complement."""
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    half = 1 << (bits - 1)
    return -half, half - 1


def wrap_to_bits(value: int, bits: int) -> int:
    """
    Усечение целого до младших `bits` бит со знаком (two's complement).

    Эквивалент приведения типа в языках с целыми фиксированной ширины:
    переполнение не насыщается, а "заворачивается".

    Args:
        value: Произвольное целое
        bits: Ширина целевого представления

    Returns:
        Знаковое целое из диапазона signed_bounds(bits)

    Examples:
        >>> wrap_to_bits(200, 8)
        -56
        >>> wrap_to_bits(-129, 8)
        127
        >>> wrap_to_bits(2**31, 32)
        -2147483648
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    modulus = 1 << bits
    low = value & (modulus - 1)
    if low >= modulus >> 1:
        return low - modulus
    return low


def saturating_truncate(value: float, bits: int) -> int:
    """
    Усечение конечного float к нулю с насыщением к границам `bits`-битного целого.

    Args:
        value: Конечное значение с плавающей точкой
        bits: Ширина целевого целого (32 или 64)

    Returns:
        Целая часть value, ограниченная границами signed_bounds(bits)

    Raises:
        ValueError: Если value равно NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a finite float, got {value}")
    low, high = signed_bounds(bits)
    return clamp(int(value), low, high)


# =============================================================================
# ОКРУГЛЕНИЕ К BINARY32
# =============================================================================


def round_to_float32(value: float) -> float:
    """
    Округление float64 к ближайшему значению binary32 (round-half-even).

    NaN и ±inf возвращаются без изменений. Значения за порогом переполнения
    дают ±inf с сохранением знака.

    Examples:
        >>> round_to_float32(0.5)
        0.5
        >>> round_to_float32(1e39)
        inf
        >>> round_to_float32(0.1)
        0.10000000149011612
    """
    if not is_valid_float(value):
        return value

    if abs(value) >= FLOAT32_OVERFLOW_THRESHOLD:
        return math.copysign(math.inf, value)

    return struct.unpack("<f", struct.pack("<f", value))[0]


def is_float32_exact(value: float) -> bool:
    """Проверка, что float представим в binary32 без потерь (NaN/Inf допустимы)."""
    if math.isnan(value):
        return True
    return round_to_float32(value) == value


def _power_of_two(exponent: int) -> Fraction:
    if exponent >= 0:
        return Fraction(1 << exponent)
    return Fraction(1, 1 << -exponent)


def exact_to_float32(value: int | Decimal) -> float:
    """
    Корректно округлённое значение binary32 для точного числа.

    Вычисление выполняется над рациональным представлением числа, поэтому
    округление происходит один раз (в отличие от пути int → float64 → float32).

    Args:
        value: Целое или конечный Decimal

    Returns:
        Ближайшее значение binary32 (как Python float); ±inf при переполнении

    Examples:
        >>> exact_to_float32(16777217)
        16777216.0
        >>> exact_to_float32(Decimal("1E+39"))
        inf
    """
    # copy_abs() не округляет до точности контекста, в отличие от abs()
    magnitude_decimal = Decimal(value).copy_abs()
    negative = value < 0

    if magnitude_decimal >= _FLOAT32_OVERFLOW_DECIMAL:
        return -math.inf if negative else math.inf
    if magnitude_decimal < _FLOAT32_UNDERFLOW_DECIMAL:
        return -0.0 if negative else 0.0

    magnitude = Fraction(magnitude_decimal)

    # 2**exponent <= magnitude < 2**(exponent + 1)
    exponent = magnitude.numerator.bit_length() - magnitude.denominator.bit_length()
    if magnitude < _power_of_two(exponent):
        exponent -= 1

    # Шаг сетки binary32 для данного порядка (у субнормальных шаг фиксирован)
    ulp_exponent = max(exponent, FLOAT32_MIN_EXPONENT) - FLOAT32_MANTISSA_BITS
    ulp = _power_of_two(ulp_exponent)

    # round() для Fraction использует round-half-even
    rounded = round(magnitude / ulp) * ulp

    if rounded > _FLOAT32_MAX_EXACT:
        result = math.inf
    else:
        result = float(rounded)
    return -result if negative else result


def exact_to_float64(value: int | Decimal) -> float:
    """
    Корректно округлённое значение binary64 для точного числа.

    Переполнение даёт ±inf (int → float в Python бросает OverflowError,
    здесь оно преобразуется в бесконечность со знаком исходного числа).
    """
    if isinstance(value, Decimal):
        return float(value)

    try:
        return float(value)
    except OverflowError:
        # copysign снова привёл бы int к float
        return math.inf if value > 0 else -math.inf
