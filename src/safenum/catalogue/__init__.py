"""Catalogue — элементы каталога представлений и их реестр.

- NumberType: контракты конверсии (truncating / to_bounds / no loss of magnitude)
- RepresentationRegistry: read-only таблица элементов, строится при импорте
"""

from .entries import AtomicNumberType, CharacterNumberType, NumberType, StandardNumberType
from .registry import (
    REGISTRY,
    RepresentationRegistry,
    all_entries,
    from_python_type,
    lookup,
    primitive_entries,
    unwrap_to_base_representation,
)

__all__ = [
    "NumberType",
    "StandardNumberType",
    "CharacterNumberType",
    "AtomicNumberType",
    "RepresentationRegistry",
    "REGISTRY",
    "lookup",
    "unwrap_to_base_representation",
    "from_python_type",
    "all_entries",
    "primitive_entries",
]
