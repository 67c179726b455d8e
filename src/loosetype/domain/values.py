"""Tagged classification of loosely-typed runtime values.

This module defines the ``ABSENT`` sentinel, the `AssociativeMap` container
and the `kind_of` classifier used by every coercion in the package.

A raw value falls into exactly one `ValueKind`:

* ``ABSENT``: ``None`` (null) or ``ABSENT`` (the value was never provided).
* ``SEQUENCE``: a ``list`` or ``tuple``.
* ``ASSOCIATIVE_MAP``: an `AssociativeMap` (keys of any hashable type).
* ``MAPPING``: any other `collections.abc.Mapping` (a plain key-value record).
* ``PRIMITIVE``: everything else (text, numbers, booleans, opaque objects).

Keeping ``None`` and ``ABSENT`` apart matters for numeric and string
conversion (null converts to 0, an absent value does not convert at all),
while the sanitizer treats both as holes to be removed.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeAlias

# pylint: disable=too-few-public-methods


def _get_absent() -> "_AbsentType":
    # Factory used by pickle to retrieve the one true instance.
    return ABSENT


@dataclass(frozen=True)
class _AbsentType:
    """Sentinel for a value that was never provided.

    This is distinct from `None`, which is an explicit null value.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_absent, ())


# Singleton instance
ABSENT = _AbsentType()


class AssociativeMap(dict):
    """A dict marked as an associative map rather than a key-value record.

    Keys may be any hashable value, including ``None``. The sanitizer drops
    entries with null-ish keys from an associative map, while a plain
    mapping keeps its keys untouched.
    """

    def __repr__(self) -> str:
        return f"AssociativeMap({dict.__repr__(self)})"


class ValueKind(Enum):
    """Shape of a raw value, as seen by the coercion functions."""

    ABSENT = "absent"
    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    ASSOCIATIVE_MAP = "associative_map"


RawValue: TypeAlias = Any


def is_nullish(value: RawValue) -> bool:
    """Return True for ``None`` and ``ABSENT``."""
    return value is None or isinstance(value, _AbsentType)


def kind_of(value: RawValue) -> ValueKind:
    """Classify a raw value.

    Args:
        value: Any value.

    Returns:
        The `ValueKind` of ``value``. Text is always primitive, even though
        ``str`` is technically a sequence.
    """
    if is_nullish(value):
        return ValueKind.ABSENT
    if isinstance(value, AssociativeMap):
        return ValueKind.ASSOCIATIVE_MAP
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    return ValueKind.PRIMITIVE


def is_number(value: RawValue) -> bool:
    """Return True for ints and floats, excluding booleans."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)
