"""
Representation Registry — таблица элементов каталога

Реестр строится один раз при импорте модуля и далее только читается:
- элемент каталога для каждого Representation
- таблица разворачивания вспомогательных представлений к базовым
  (CHAR16 → INT32, ATOMIC_INT32 → INT32, ATOMIC_INT64 → INT64)
- разворачивание объектов-счётчиков и аккумуляторов
  (AtomicInteger, AtomicLong, LongAdder/LongAccumulator → INT64,
  DoubleAdder/DoubleAccumulator → FLOAT64)
- соответствие Python-типов представлениям

Таблицы доступны только через MappingProxyType: после построения реестра
записей в них нет, поэтому параллельное чтение не требует блокировок.
"""

import logging
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Callable, Final, Mapping

from safenum.catalogue.entries import (
    AtomicNumberType,
    CharacterNumberType,
    NumberType,
    StandardNumberType,
)
from safenum.core.domain.counters import (
    AtomicInteger,
    AtomicLong,
    DoubleAccumulator,
    DoubleAdder,
    LongAccumulator,
    LongAdder,
)
from safenum.core.domain.numeric_value import MalformedValueError, NumericValue
from safenum.core.domain.representation import Representation

logger = logging.getLogger(__name__)


class RepresentationRegistry:
    """
    Read-only реестр элементов каталога.

    Порядок элементов совпадает с порядком членов Representation.
    """

    def __init__(self):
        self._unwrappers: Mapping[Representation, Callable[[NumericValue], NumericValue]] = (
            MappingProxyType(
                {
                    Representation.CHAR16: lambda value: NumericValue.int32(value.value),
                    Representation.ATOMIC_INT32: lambda value: NumericValue.int32(value.value.get()),
                    Representation.ATOMIC_INT64: lambda value: NumericValue.int64(value.value.get()),
                }
            )
        )
        self._object_unwrappers: Mapping[type, Callable[[Any], NumericValue]] = MappingProxyType(
            {
                AtomicInteger: lambda counter: NumericValue.int32(counter.get()),
                AtomicLong: lambda counter: NumericValue.int64(counter.get()),
                LongAdder: lambda adder: NumericValue.int64(adder.sum()),
                DoubleAdder: lambda adder: NumericValue.float64(adder.sum()),
                LongAccumulator: lambda accumulator: NumericValue.int64(accumulator.get()),
                DoubleAccumulator: lambda accumulator: NumericValue.float64(accumulator.get()),
            }
        )
        self._entries: Mapping[Representation, NumberType] = MappingProxyType(self._build_entries())
        self._python_types: Mapping[type, NumberType] = MappingProxyType(
            {
                int: self._entries[Representation.BIG_INT],
                float: self._entries[Representation.FLOAT64],
                Decimal: self._entries[Representation.BIG_DECIMAL],
                AtomicInteger: self._entries[Representation.ATOMIC_INT32],
                AtomicLong: self._entries[Representation.ATOMIC_INT64],
            }
        )

        logger.debug(
            "Representation registry built: %d entries, %d unwrappable representations",
            len(self._entries),
            len(self._unwrappers),
        )

    def _build_entries(self) -> dict[Representation, NumberType]:
        entries: dict[Representation, NumberType] = {}
        for representation in Representation:
            if not representation.is_auxiliary:
                entries[representation] = StandardNumberType(
                    representation, self.unwrap_to_base_representation
                )

        entries[Representation.CHAR16] = CharacterNumberType(entries[Representation.INT32])
        entries[Representation.ATOMIC_INT32] = AtomicNumberType(
            Representation.ATOMIC_INT32, entries[Representation.INT32], AtomicInteger
        )
        entries[Representation.ATOMIC_INT64] = AtomicNumberType(
            Representation.ATOMIC_INT64, entries[Representation.INT64], AtomicLong
        )

        # Порядок каталога = порядок членов перечисления
        return {representation: entries[representation] for representation in Representation}

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def lookup(self, representation_id: Representation | str) -> NumberType | None:
        """
        Элемент каталога по представлению или его строковому идентификатору.

        Args:
            representation_id: Representation или его значение (например, "int32")

        Returns:
            Элемент каталога или None, если идентификатор неизвестен
        """
        if isinstance(representation_id, Representation):
            return self._entries.get(representation_id)
        try:
            return self._entries.get(Representation(representation_id))
        except ValueError:
            return None

    def from_python_type(self, cls: type) -> NumberType | None:
        """
        Элемент каталога для Python-типа: int → BIG_INT, float → FLOAT64,
        Decimal → BIG_DECIMAL, AtomicInteger/AtomicLong → атомарные представления.
        """
        return self._python_types.get(cls)

    def all_entries(self) -> tuple[NumberType, ...]:
        return tuple(self._entries.values())

    def primitive_entries(self) -> tuple[NumberType, ...]:
        """Элементы шести представлений фиксированной ширины (INT8..FLOAT64)"""
        return tuple(
            entry for representation, entry in self._entries.items() if representation.is_primitive
        )

    # =========================================================================
    # UNWRAP
    # =========================================================================

    def unwrap_to_base_representation(self, value: NumericValue | Any) -> NumericValue:
        """
        Разворачивание вспомогательного значения к базовому представлению.

        Args:
            value: NumericValue любого представления, либо объект-счётчик
                (AtomicInteger, AtomicLong, LongAdder, DoubleAdder,
                LongAccumulator, DoubleAccumulator)

        Returns:
            Значение основного представления; основные значения возвращаются как есть

        Raises:
            MalformedValueError: Если объект не является ни NumericValue, ни счётчиком
        """
        if isinstance(value, NumericValue):
            unwrapper = self._unwrappers.get(value.representation)
            if unwrapper is None:
                return value
            return unwrapper(value)

        object_unwrapper = self._object_unwrappers.get(type(value))
        if object_unwrapper is None:
            raise MalformedValueError(
                f"Cannot unwrap {type(value).__name__}: not a NumericValue or counter"
            )
        return object_unwrapper(value)


# Глобальный экземпляр реестра (строится при импорте, далее только чтение)
REGISTRY: Final[RepresentationRegistry] = RepresentationRegistry()


# =============================================================================
# FUNCTIONS
# =============================================================================


def lookup(representation_id: Representation | str) -> NumberType | None:
    """Элемент каталога из глобального реестра (None для неизвестного id)"""
    return REGISTRY.lookup(representation_id)


def unwrap_to_base_representation(value: NumericValue | Any) -> NumericValue:
    """Разворачивание значения через глобальный реестр"""
    return REGISTRY.unwrap_to_base_representation(value)


def from_python_type(cls: type) -> NumberType | None:
    return REGISTRY.from_python_type(cls)


def all_entries() -> tuple[NumberType, ...]:
    return REGISTRY.all_entries()


def primitive_entries() -> tuple[NumberType, ...]:
    return REGISTRY.primitive_entries()
