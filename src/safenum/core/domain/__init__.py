"""
Domain models and value objects.

Contains Representation, ValueRange, NumericValue and the counter wrappers.
"""

from safenum.core.domain.counters import (
    AtomicInteger,
    AtomicLong,
    DoubleAccumulator,
    DoubleAdder,
    LongAccumulator,
    LongAdder,
)
from safenum.core.domain.numeric_value import (
    MalformedValueError,
    NumericValue,
    UnsupportedRepresentationError,
)
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

__all__ = [
    # Representation
    "Representation",
    # Value ranges
    "ValueRange",
    "ValueRangeComparison",
    "range_of",
    "INT8_RANGE",
    "INT16_RANGE",
    "INT32_RANGE",
    "INT64_RANGE",
    "FLOAT32_RANGE",
    "FLOAT64_RANGE",
    "BIG_INT_RANGE",
    "BIG_DECIMAL_RANGE",
    "CHAR16_RANGE",
    # Numeric value
    "NumericValue",
    "MalformedValueError",
    "UnsupportedRepresentationError",
    # Counters
    "AtomicInteger",
    "AtomicLong",
    "LongAdder",
    "DoubleAdder",
    "LongAccumulator",
    "DoubleAccumulator",
]
