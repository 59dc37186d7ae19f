"""
safenum — безопасная конверсия чисел между представлениями

Три контракта конверсии для каждого целевого представления:
- convert_truncating: приведение типа (переполнение заворачивается)
- convert_to_bounds: насыщение к границам
- convert_if_no_loss_of_magnitude: точное значение или None

Пример:
    >>> from safenum import NumericValue, Representation, lookup
    >>> int16 = lookup(Representation.INT16)
    >>> int16.convert_to_bounds(NumericValue.int32(100000)).value
    32767
    >>> int16.convert_if_no_loss_of_magnitude(NumericValue.int32(100000)) is None
    True
"""

from safenum.catalogue import (
    REGISTRY,
    NumberType,
    RepresentationRegistry,
    all_entries,
    from_python_type,
    lookup,
    primitive_entries,
    unwrap_to_base_representation,
)
from safenum.core.domain import (
    AtomicInteger,
    AtomicLong,
    DoubleAccumulator,
    DoubleAdder,
    LongAccumulator,
    LongAdder,
    MalformedValueError,
    NumericValue,
    Representation,
    UnsupportedRepresentationError,
    ValueRange,
    ValueRangeComparison,
)

__all__ = [
    # Registry
    "REGISTRY",
    "RepresentationRegistry",
    "lookup",
    "unwrap_to_base_representation",
    "from_python_type",
    "all_entries",
    "primitive_entries",
    # Catalogue entries
    "NumberType",
    # Domain
    "Representation",
    "NumericValue",
    "ValueRange",
    "ValueRangeComparison",
    "AtomicInteger",
    "AtomicLong",
    "LongAdder",
    "DoubleAdder",
    "LongAccumulator",
    "DoubleAccumulator",
    # Errors
    "MalformedValueError",
    "UnsupportedRepresentationError",
]
