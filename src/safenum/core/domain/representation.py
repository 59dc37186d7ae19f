"""
Representation — закрытый перечень поддерживаемых числовых представлений

Основные представления:
- INT8, INT16, INT32, INT64 — знаковые целые фиксированной ширины
- FLOAT32, FLOAT64 — IEEE-754 binary32/binary64
- BIG_INT, BIG_DECIMAL — целые и десятичные произвольной точности

Вспомогательные представления (разворачиваются к базовому):
- CHAR16 — беззнаковое 16-битное целое ("символ"), базовое INT32
- ATOMIC_INT32 — атомарный счётчик вокруг INT32
- ATOMIC_INT64 — атомарный счётчик вокруг INT64
"""

from enum import Enum


class Representation(str, Enum):
    """Числовое представление (порядок членов — порядок каталога)"""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BIG_INT = "big_int"
    BIG_DECIMAL = "big_decimal"
    CHAR16 = "char16"
    ATOMIC_INT32 = "atomic_int32"
    ATOMIC_INT64 = "atomic_int64"

    @property
    def is_floating(self) -> bool:
        """Представление с плавающей точкой (имеет NaN и ±inf)"""
        return self in (Representation.FLOAT32, Representation.FLOAT64)

    @property
    def is_fixed_width_integer(self) -> bool:
        return self in _FIXED_WIDTH_BITS

    @property
    def is_integral(self) -> bool:
        """Представление без дробной части"""
        return self not in (
            Representation.FLOAT32,
            Representation.FLOAT64,
            Representation.BIG_DECIMAL,
        )

    @property
    def is_primitive(self) -> bool:
        """Одно из шести представлений фиксированной ширины (целые и float)"""
        return self.is_fixed_width_integer or self.is_floating

    @property
    def is_auxiliary(self) -> bool:
        """Вспомогательное представление, разворачиваемое к базовому"""
        return self in _BASE_REPRESENTATIONS

    @property
    def bits(self) -> int | None:
        """Ширина целого фиксированной ширины; None для остальных"""
        return _FIXED_WIDTH_BITS.get(self)

    @property
    def base(self) -> "Representation":
        """
        Базовое представление для разворачивания.

        Для основных представлений возвращает само представление.
        """
        return _BASE_REPRESENTATIONS.get(self, self)


_FIXED_WIDTH_BITS: dict[Representation, int] = {
    Representation.INT8: 8,
    Representation.INT16: 16,
    Representation.INT32: 32,
    Representation.INT64: 64,
}

_BASE_REPRESENTATIONS: dict[Representation, Representation] = {
    Representation.CHAR16: Representation.INT32,
    Representation.ATOMIC_INT32: Representation.INT32,
    Representation.ATOMIC_INT64: Representation.INT64,
}
