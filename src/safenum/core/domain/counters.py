"""
Counters — потокобезопасные обёртки-счётчики

Атомарные счётчики (AtomicInteger, AtomicLong) являются payload'ом
вспомогательных представлений ATOMIC_INT32 / ATOMIC_INT64.
Аккумуляторы (LongAdder, DoubleAdder, LongAccumulator, DoubleAccumulator)
не являются представлениями каталога и участвуют только в разворачивании к базовому значению.

Движок конверсий только читает счётчики; изменение защищено собственным
lock каждого объекта.
"""

import threading
from typing import Callable

from safenum.core.math.numerical_safeguards import signed_bounds, wrap_to_bits


# =============================================================================
# АТОМАРНЫЕ СЧЁТЧИКИ
# =============================================================================


class _AtomicCounter:
    """Знаковый целый счётчик фиксированной ширины с wrap-around арифметикой."""

    BITS: int = 32

    def __init__(self, value: int = 0):
        low, high = signed_bounds(self.BITS)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{type(self).__name__} requires an int, got {type(value).__name__}")
        if not low <= value <= high:
            raise ValueError(
                f"{type(self).__name__} value {value} outside [{low}, {high}]"
            )
        self._value = value
        self._lock = threading.Lock()

    def get(self) -> int:
        with self._lock:
            return self._value

    def set(self, value: int) -> None:
        low, high = signed_bounds(self.BITS)
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{type(self).__name__} requires an int, got {type(value).__name__}")
        if not low <= value <= high:
            raise ValueError(
                f"{type(self).__name__} value {value} outside [{low}, {high}]"
            )
        with self._lock:
            self._value = value

    def add_and_get(self, delta: int) -> int:
        """Прибавление с переполнением по модулю 2**BITS."""
        with self._lock:
            self._value = wrap_to_bits(self._value + delta, self.BITS)
            return self._value

    def increment_and_get(self) -> int:
        return self.add_and_get(1)

    def decrement_and_get(self) -> int:
        return self.add_and_get(-1)

    def __int__(self) -> int:
        return self.get()

    def __eq__(self, other: object) -> bool:
        # Сравнение по текущему значению; счётчик изменяем, поэтому без hash
        if type(other) is not type(self):
            return NotImplemented
        return self.get() == other.get()

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get()})"


class AtomicInteger(_AtomicCounter):
    """Атомарный 32-битный счётчик"""

    BITS = 32


class AtomicLong(_AtomicCounter):
    """Атомарный 64-битный счётчик"""

    BITS = 64


# =============================================================================
# АККУМУЛЯТОРЫ
# =============================================================================


class LongAdder:
    """Накопитель целой суммы (64 бит, wrap-around при переполнении)."""

    def __init__(self):
        self._sum = 0
        self._lock = threading.Lock()

    def add(self, delta: int) -> None:
        with self._lock:
            self._sum = wrap_to_bits(self._sum + delta, 64)

    def sum(self) -> int:
        with self._lock:
            return self._sum

    def reset(self) -> None:
        with self._lock:
            self._sum = 0

    def __repr__(self) -> str:
        return f"LongAdder(sum={self.sum()})"


class DoubleAdder:
    """Накопитель суммы float64."""

    def __init__(self):
        self._sum = 0.0
        self._lock = threading.Lock()

    def add(self, delta: float) -> None:
        with self._lock:
            self._sum += float(delta)

    def sum(self) -> float:
        with self._lock:
            return self._sum

    def reset(self) -> None:
        with self._lock:
            self._sum = 0.0

    def __repr__(self) -> str:
        return f"DoubleAdder(sum={self.sum()})"


class LongAccumulator:
    """
    Накопитель целого значения с произвольной функцией свёртки.

    Результат функции заворачивается в 64 бита; reset() возвращает identity.

    Examples:
        >>> accumulator = LongAccumulator(max, -(2**63))
        >>> accumulator.accumulate(7)
        >>> accumulator.get()
        7
    """

    def __init__(self, function: Callable[[int, int], int], identity: int):
        self._function = function
        self._identity = wrap_to_bits(identity, 64)
        self._value = self._identity
        self._lock = threading.Lock()

    def accumulate(self, x: int) -> None:
        with self._lock:
            self._value = wrap_to_bits(self._function(self._value, x), 64)

    def get(self) -> int:
        with self._lock:
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = self._identity

    def __repr__(self) -> str:
        return f"LongAccumulator(value={self.get()})"


class DoubleAccumulator:
    """Накопитель значения float64 с произвольной функцией свёртки."""

    def __init__(self, function: Callable[[float, float], float], identity: float):
        self._function = function
        self._identity = float(identity)
        self._value = self._identity
        self._lock = threading.Lock()

    def accumulate(self, x: float) -> None:
        with self._lock:
            self._value = float(self._function(self._value, float(x)))

    def get(self) -> float:
        with self._lock:
            return self._value

    def reset(self) -> None:
        with self._lock:
            self._value = self._identity

    def __repr__(self) -> str:
        return f"DoubleAccumulator(value={self.get()})"
