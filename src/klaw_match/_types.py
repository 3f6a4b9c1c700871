"""Runtime value classification used by the matcher.

The matcher only needs three questions answered about a value:

- is it an indivisible scalar (compared by value),
- is it a structured record (compared field by field),
- what does a record hold under a given field name.
"""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Mapping
from typing import Any, Final

import msgspec

__all__ = ['MISSING', 'is_record', 'is_scalar', 'read_field', 'scalar_equals']

_SCALAR_TYPES: Final = (type(None), bool, int, float, complex, str, bytes, enum.Enum)


class _Missing:
    """Marker for a field that a record does not have."""

    __slots__ = ()

    def __repr__(self) -> str:
        return 'MISSING'

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


def is_scalar(value: Any) -> bool:
    """Return True for values compared as a whole: None, numbers, strings, bytes, enum members."""
    return isinstance(value, _SCALAR_TYPES)


def is_record(value: Any) -> bool:
    """Return True for keyed records: mappings, dataclass instances and msgspec structs."""
    if isinstance(value, Mapping | msgspec.Struct):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def read_field(record: Any, key: str) -> Any:
    """Read a field from a record, returning MISSING when it is absent.

    Mappings are read by item, everything else by attribute.
    """
    if isinstance(record, Mapping):
        return record.get(key, MISSING)
    return getattr(record, key, MISSING)


def scalar_equals(left: Any, right: Any) -> bool:
    """Compare two values for literal equality.

    Plain ``==`` except that a bool never equals a non-bool, so ``True``
    does not match ``1``.
    """
    if left is MISSING or right is MISSING:
        return False
    if isinstance(left, bool) != isinstance(right, bool):
        return False
    return bool(left == right)
