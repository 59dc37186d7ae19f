"""
Core math modules для safenum

Примитивы чисел фиксированной ширины. Сравнение с диапазонами —
safenum.core.math.range_comparator (зависит от domain-моделей).
"""

# Numerical Safeguards
from safenum.core.math.numerical_safeguards import (
    # Bounds
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
    # NaN/Inf
    is_float32_exact,
    is_valid_float,
    # Clamping and wrapping
    clamp,
    saturating_truncate,
    signed_bounds,
    wrap_to_bits,
    # Rounding
    exact_to_float32,
    exact_to_float64,
    round_to_float32,
)


__all__ = [
    # Numerical Safeguards — Bounds
    "CHAR16_MAX",
    "CHAR16_MIN",
    "FLOAT32_MAX",
    "FLOAT64_MAX",
    "INT8_MAX",
    "INT8_MIN",
    "INT16_MAX",
    "INT16_MIN",
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    # Numerical Safeguards — NaN/Inf
    "is_float32_exact",
    "is_valid_float",
    # Numerical Safeguards — Clamping and wrapping
    "clamp",
    "saturating_truncate",
    "signed_bounds",
    "wrap_to_bits",
    # Numerical Safeguards — Rounding
    "exact_to_float32",
    "exact_to_float64",
    "round_to_float32",
]
