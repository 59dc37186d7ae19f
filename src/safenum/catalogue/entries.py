"""
Catalogue Entries — элементы каталога числовых представлений

Каждый элемент связывает представление с его диапазоном и тремя контрактами
конверсии:
- convert_truncating: приведение без проверки границ (переполнение заворачивается)
- convert_to_bounds: насыщение к ближайшей границе
- convert_if_no_loss_of_magnitude: точное значение или None

Реализации:
- StandardNumberType — основные представления (INT8..BIG_DECIMAL)
- CharacterNumberType — CHAR16 поверх элемента INT32
- AtomicNumberType — адаптер счётчика поверх элемента базового целого

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Если цель поддерживает все значения источника (supports_all_values_of),
   сравнение с диапазоном не выполняется: конверсия прямая и без потерь
2. Между float32 и float64 значения NaN/±inf всегда в диапазоне
3. Результат convert_to_bounds для неограниченных целей при ±inf/NaN — ноль
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Callable

from safenum.catalogue.conversions import convert_truncating, zero_of
from safenum.core.domain.counters import AtomicInteger, AtomicLong
from safenum.core.domain.numeric_value import NumericValue
from safenum.core.domain.representation import Representation
from safenum.core.domain.value_range import CHAR16_RANGE, ValueRange, ValueRangeComparison, range_of
from safenum.core.math.numerical_safeguards import CHAR16_MAX, CHAR16_MIN, clamp, is_valid_float
from safenum.core.math.range_comparator import compare_to_bounds, compare_to_range

Unwrapper = Callable[[NumericValue], NumericValue]


# =============================================================================
# БАЗОВЫЙ КЛАСС
# =============================================================================


class NumberType(ABC):
    """
    Элемент каталога: представление, его диапазон и контракты конверсии.

    Все операции чистые: принимают NumericValue любого представления
    (включая вспомогательные) и возвращают новое значение.
    """

    def __init__(self, representation: Representation):
        self._representation = representation

    @property
    def representation(self) -> Representation:
        return self._representation

    @property
    @abstractmethod
    def value_range(self) -> ValueRange:
        """Диапазон значений представления"""

    @abstractmethod
    def compare_to_value_range(self, value: NumericValue) -> ValueRangeComparison:
        """Сравнение значения с диапазоном этого представления"""

    @abstractmethod
    def convert_truncating(self, value: NumericValue) -> NumericValue:
        """Приведение без проверки границ"""

    @abstractmethod
    def convert_to_bounds(self, value: NumericValue) -> NumericValue:
        """Конверсия с насыщением к ближайшей границе"""

    @abstractmethod
    def convert_if_no_loss_of_magnitude(self, value: NumericValue) -> NumericValue | None:
        """Конверсия без потери величины, иначе None"""

    def supports_all_values_of(self, other: "NumberType") -> bool:
        """
        Проверка, что все значения other представимы в этом типе без потери величины.

        Поддержка дробной части не учитывается. Если метод возвращает True,
        convert_if_no_loss_of_magnitude для любого значения other не вернёт None.
        """
        if other is self:
            return True
        return self.value_range.supports_all_values_of(other.value_range)

    def __repr__(self) -> str:
        return f"NumberType[{self._representation.value}]"


# =============================================================================
# ОСНОВНЫЕ ПРЕДСТАВЛЕНИЯ
# =============================================================================


class StandardNumberType(NumberType):
    """Элемент каталога для основного представления"""

    def __init__(self, representation: Representation, unwrap: Unwrapper):
        """
        Args:
            representation: Основное представление (не вспомогательное)
            unwrap: Функция разворачивания вспомогательных значений к базовым
        """
        if representation.is_auxiliary:
            raise ValueError(
                f"{representation.value} is auxiliary; use a wrapper number type"
            )
        super().__init__(representation)
        self._value_range = range_of(representation)
        self._unwrap = unwrap

    @property
    def value_range(self) -> ValueRange:
        return self._value_range

    def compare_to_value_range(self, value: NumericValue) -> ValueRangeComparison:
        source = self._unwrap(value)
        return self._compare_unwrapped(source)

    def convert_truncating(self, value: NumericValue) -> NumericValue:
        return convert_truncating(self._representation, self._unwrap(value))

    def convert_to_bounds(self, value: NumericValue) -> NumericValue:
        source = self._unwrap(value)
        comparison = self._compare_unwrapped(source)
        if comparison is ValueRangeComparison.WITHIN_RANGE:
            return convert_truncating(self._representation, source)
        return self._fallback_for_out_of_range(comparison)

    def convert_if_no_loss_of_magnitude(self, value: NumericValue) -> NumericValue | None:
        source = self._unwrap(value)
        if self._compare_unwrapped(source) is ValueRangeComparison.WITHIN_RANGE:
            return convert_truncating(self._representation, source)
        return None

    def _compare_unwrapped(self, source: NumericValue) -> ValueRangeComparison:
        # 1. Диапазон цели покрывает все значения источника
        if self._value_range.supports_all_values_of(range_of(source.representation)):
            return ValueRangeComparison.WITHIN_RANGE

        # 2. float ↔ float: NaN и ±inf переводятся в соответствующее значение
        if (
            self._representation.is_floating
            and source.representation.is_floating
            and not is_valid_float(source.value)
        ):
            return ValueRangeComparison.WITHIN_RANGE

        # 3. Сравнение величины
        return compare_to_range(source, self._value_range)

    def _fallback_for_out_of_range(self, comparison: ValueRangeComparison) -> NumericValue:
        """
        Значение для результата сравнения, отличного от WITHIN_RANGE.

        Неограниченные цели (BIG_INT, BIG_DECIMAL) сюда попадают только из-за
        NaN/±inf и получают ноль.
        """
        if not self._value_range.is_bounded:
            return zero_of(self._representation)
        if comparison.is_too_small:
            return NumericValue(self._representation, self._value_range.min_in_own_type)
        if comparison.is_too_large:
            return NumericValue(self._representation, self._value_range.max_in_own_type)
        # UNSUPPORTED_NAN
        return zero_of(self._representation)


# =============================================================================
# CHAR16
# =============================================================================


class CharacterNumberType(NumberType):
    """
    CHAR16: беззнаковое 16-битное целое [0, 65535].

    Все операции выполняются через элемент INT32, результат затем
    приводится к диапазону CHAR16.
    """

    def __init__(self, int32_type: NumberType):
        super().__init__(Representation.CHAR16)
        self._int32_type = int32_type

    @property
    def value_range(self) -> ValueRange:
        return CHAR16_RANGE

    def compare_to_value_range(self, value: NumericValue) -> ValueRangeComparison:
        comparison = self._int32_type.compare_to_value_range(value)
        if comparison is not ValueRangeComparison.WITHIN_RANGE:
            return comparison
        code = self._int32_type.convert_truncating(value).value
        return compare_to_bounds(Decimal(code), CHAR16_RANGE.min_value, CHAR16_RANGE.max_value)

    def convert_truncating(self, value: NumericValue) -> NumericValue:
        # Младшие 16 бит: приведение int → char
        code = self._int32_type.convert_truncating(value).value
        return NumericValue.char16(code & CHAR16_MAX)

    def convert_to_bounds(self, value: NumericValue) -> NumericValue:
        code = self._int32_type.convert_to_bounds(value).value
        return NumericValue.char16(clamp(code, CHAR16_MIN, CHAR16_MAX))

    def convert_if_no_loss_of_magnitude(self, value: NumericValue) -> NumericValue | None:
        result = self._int32_type.convert_if_no_loss_of_magnitude(value)
        if result is not None and CHAR16_MIN <= result.value <= CHAR16_MAX:
            return NumericValue.char16(result.value)
        return None


# =============================================================================
# АТОМАРНЫЕ СЧЁТЧИКИ
# =============================================================================


class AtomicNumberType(NumberType):
    """
    Адаптер атомарного счётчика поверх элемента базового целого.

    Диапазон совпадает с базовым; все операции делегируются базовому
    элементу, результат оборачивается в новый счётчик.
    """

    def __init__(
        self,
        representation: Representation,
        base_type: NumberType,
        wrap: Callable[[int], AtomicInteger | AtomicLong],
    ):
        super().__init__(representation)
        self._base_type = base_type
        self._wrap = wrap

    @property
    def base_type(self) -> NumberType:
        return self._base_type

    @property
    def value_range(self) -> ValueRange:
        return self._base_type.value_range

    def compare_to_value_range(self, value: NumericValue) -> ValueRangeComparison:
        return self._base_type.compare_to_value_range(value)

    def convert_truncating(self, value: NumericValue) -> NumericValue:
        return self._rewrap(self._base_type.convert_truncating(value))

    def convert_to_bounds(self, value: NumericValue) -> NumericValue:
        return self._rewrap(self._base_type.convert_to_bounds(value))

    def convert_if_no_loss_of_magnitude(self, value: NumericValue) -> NumericValue | None:
        result = self._base_type.convert_if_no_loss_of_magnitude(value)
        if result is None:
            return None
        return self._rewrap(result)

    def _rewrap(self, base_value: NumericValue) -> NumericValue:
        return NumericValue(self._representation, self._wrap(base_value.value))
