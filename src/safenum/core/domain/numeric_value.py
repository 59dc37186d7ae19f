"""
NumericValue — число, помеченное своим представлением

Immutable значение: создаётся вызывающей стороной, потребляется одним вызовом
конверсии, результатом конверсии является новый NumericValue (или None).

Payload по представлениям:
- INT8..INT64, CHAR16 → int в границах представления (bool запрещён)
- FLOAT32 → float, точно представимый в binary32 (или NaN/±inf)
- FLOAT64 → float
- BIG_INT → int
- BIG_DECIMAL → конечный Decimal
- ATOMIC_INT32 / ATOMIC_INT64 → AtomicInteger / AtomicLong

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Несоответствие payload и представления — ошибка программиста:
   MalformedValueError бросается при создании значения (fail fast)
2. Значение не изменяется после создания
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from safenum.core.domain.counters import AtomicInteger, AtomicLong
from safenum.core.domain.representation import Representation
from safenum.core.math.numerical_safeguards import (
    CHAR16_MAX,
    CHAR16_MIN,
    is_float32_exact,
    round_to_float32,
    signed_bounds,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MalformedValueError(ValueError):
    """
    Payload не соответствует представлению.

    Нарушение инварианта на стороне вызывающего кода (а не штатная ситуация
    с данными), поэтому не возвращается как значение, а бросается сразу.
    """

    pass


class UnsupportedRepresentationError(LookupError):
    """Внутренняя диспетчеризация встретила представление без обработчика."""

    pass


# =============================================================================
# NUMERIC VALUE
# =============================================================================


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class NumericValue:
    """Число в одном из представлений каталога."""

    representation: Representation
    value: Any

    def __post_init__(self):
        if not isinstance(self.representation, Representation):
            raise MalformedValueError(
                f"Unknown representation tag: {self.representation!r}"
            )
        _VALIDATORS[self.representation](self.representation, self.value)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def int8(cls, value: int) -> "NumericValue":
        return cls(Representation.INT8, value)

    @classmethod
    def int16(cls, value: int) -> "NumericValue":
        return cls(Representation.INT16, value)

    @classmethod
    def int32(cls, value: int) -> "NumericValue":
        return cls(Representation.INT32, value)

    @classmethod
    def int64(cls, value: int) -> "NumericValue":
        return cls(Representation.INT64, value)

    @classmethod
    def float32(cls, value: float) -> "NumericValue":
        """
        Значение float32 из Python float.

        Аргумент округляется к ближайшему binary32, поэтому float32(0.1)
        хранит 0.10000000149011612.
        """
        return cls(Representation.FLOAT32, round_to_float32(float(value)))

    @classmethod
    def float64(cls, value: float) -> "NumericValue":
        return cls(Representation.FLOAT64, value)

    @classmethod
    def big_int(cls, value: int) -> "NumericValue":
        return cls(Representation.BIG_INT, value)

    @classmethod
    def big_decimal(cls, value: Decimal | str | int) -> "NumericValue":
        """Значение BIG_DECIMAL; str и int преобразуются в Decimal без потерь"""
        if isinstance(value, (str, int)) and not isinstance(value, bool):
            value = Decimal(value)
        return cls(Representation.BIG_DECIMAL, value)

    @classmethod
    def char16(cls, value: int | str) -> "NumericValue":
        """Значение CHAR16 из кода символа или из односимвольной строки"""
        if isinstance(value, str):
            if len(value) != 1:
                raise MalformedValueError(
                    f"char16 requires a single character, got {value!r}"
                )
            value = ord(value)
        return cls(Representation.CHAR16, value)

    @classmethod
    def atomic_int32(cls, value: int | AtomicInteger) -> "NumericValue":
        if not isinstance(value, AtomicInteger):
            value = AtomicInteger(value)
        return cls(Representation.ATOMIC_INT32, value)

    @classmethod
    def atomic_int64(cls, value: int | AtomicLong) -> "NumericValue":
        if not isinstance(value, AtomicLong):
            value = AtomicLong(value)
        return cls(Representation.ATOMIC_INT64, value)


# =============================================================================
# ВАЛИДАЦИЯ PAYLOAD
# =============================================================================


def _malformed(representation: Representation, value: Any, reason: str) -> MalformedValueError:
    return MalformedValueError(
        f"Malformed {representation.value} value {value!r}: {reason}"
    )


def _validate_fixed_width_int(representation: Representation, value: Any) -> None:
    if not _is_plain_int(value):
        raise _malformed(representation, value, f"expected int, got {type(value).__name__}")
    low, high = signed_bounds(representation.bits)
    if not low <= value <= high:
        raise _malformed(representation, value, f"outside [{low}, {high}]")


def _validate_char16(representation: Representation, value: Any) -> None:
    if not _is_plain_int(value):
        raise _malformed(representation, value, f"expected int, got {type(value).__name__}")
    if not CHAR16_MIN <= value <= CHAR16_MAX:
        raise _malformed(representation, value, f"outside [{CHAR16_MIN}, {CHAR16_MAX}]")


def _validate_float64(representation: Representation, value: Any) -> None:
    if not isinstance(value, float):
        raise _malformed(representation, value, f"expected float, got {type(value).__name__}")


def _validate_float32(representation: Representation, value: Any) -> None:
    _validate_float64(representation, value)
    if not is_float32_exact(value):
        raise _malformed(representation, value, "not exactly representable as binary32")


def _validate_big_int(representation: Representation, value: Any) -> None:
    if not _is_plain_int(value):
        raise _malformed(representation, value, f"expected int, got {type(value).__name__}")


def _validate_big_decimal(representation: Representation, value: Any) -> None:
    if not isinstance(value, Decimal):
        raise _malformed(representation, value, f"expected Decimal, got {type(value).__name__}")
    if not value.is_finite():
        raise _malformed(representation, value, "Decimal has no infinity or NaN")


def _validate_atomic_int32(representation: Representation, value: Any) -> None:
    if not isinstance(value, AtomicInteger):
        raise _malformed(representation, value, "expected AtomicInteger")


def _validate_atomic_int64(representation: Representation, value: Any) -> None:
    if not isinstance(value, AtomicLong):
        raise _malformed(representation, value, "expected AtomicLong")


_VALIDATORS = {
    Representation.INT8: _validate_fixed_width_int,
    Representation.INT16: _validate_fixed_width_int,
    Representation.INT32: _validate_fixed_width_int,
    Representation.INT64: _validate_fixed_width_int,
    Representation.FLOAT32: _validate_float32,
    Representation.FLOAT64: _validate_float64,
    Representation.BIG_INT: _validate_big_int,
    Representation.BIG_DECIMAL: _validate_big_decimal,
    Representation.CHAR16: _validate_char16,
    Representation.ATOMIC_INT32: _validate_atomic_int32,
    Representation.ATOMIC_INT64: _validate_atomic_int64,
}
