"""Recursive removal of null-ish values from nested containers.

``None`` and ``ABSENT`` are holes. How a hole is handled depends on the
container it sits in:

* sequences DROP holes; the result is always a new list and the input is
  never touched;
* mappings REPLACE hole values with a default; the input is mutated;
* associative maps REPLACE hole values and DELETE entries whose key is a
  hole; the input is mutated and returned.

A mapping can additionally be re-homed: copied into a fresh plain ``dict``
so that no behaviour of the caller's mapping type (attribute access,
``__missing__`` hooks, ...) survives when its keys are later used for
dynamic lookups.
"""

import json
import logging
from collections.abc import Mapping, MutableMapping, Sequence

from loosetype.config import DEFAULT_FALLBACK
from loosetype.domain.values import (
    AssociativeMap,
    RawValue,
    ValueKind,
    is_nullish,
    kind_of,
)

__all__ = [
    "parse_json",
    "sanitize_map",
    "sanitize_object",
    "sanitize_sequence",
    "sanitize_value",
]

logger = logging.getLogger(__name__)


def sanitize_sequence(
    seq: Sequence[RawValue],
    default: RawValue = DEFAULT_FALLBACK,
    rehome_mapping: bool = True,
) -> list[RawValue]:
    """Return a copy of ``seq`` with null-ish items removed.

    Nested sequences are sanitized recursively; nested mappings and
    associative maps go through `sanitize_value` (and are mutated in place).

    Args:
        seq: Sequence to sanitize. Never mutated.
        default: Replacement for null-ish values inside nested mappings.
        rehome_mapping: See `sanitize_object`.

    Returns:
        A new list without null-ish items.
    """
    result: list[RawValue] = []
    for item in seq:
        if is_nullish(item):
            continue
        result.append(sanitize_value(item, default, rehome_mapping))
    return result


def sanitize_object(
    obj: Mapping[str, RawValue],
    default: RawValue = DEFAULT_FALLBACK,
    rehome_mapping: bool = True,
) -> dict[str, RawValue] | Mapping[str, RawValue]:
    """Replace null-ish values in a mapping with ``default``.

    The mapping is updated in place (read-only mappings are first copied into
    a ``dict``). Values are sanitized recursively.

    Args:
        obj: Mapping to sanitize.
        default: Replacement for null-ish values.
        rehome_mapping: When True, return a new plain ``dict`` holding the
            sanitized entries instead of the caller's mapping object.

    Returns:
        The sanitized mapping: a new ``dict`` if ``rehome_mapping`` is set,
        otherwise ``obj`` itself.
    """
    if not isinstance(obj, MutableMapping):
        obj = dict(obj)
    for key in list(obj):
        obj[key] = sanitize_value(obj[key], default, rehome_mapping)
    if rehome_mapping:
        return dict(obj.items())
    return obj


def sanitize_map(
    assoc: AssociativeMap,
    default: RawValue = DEFAULT_FALLBACK,
    rehome_mapping: bool = True,
) -> AssociativeMap:
    """Sanitize an associative map in place.

    Entries keyed by a null-ish value are deleted; every other value is
    passed through `sanitize_value`.

    Returns:
        The same ``assoc`` instance.
    """
    for key in list(assoc):
        if is_nullish(key):
            del assoc[key]
            continue
        assoc[key] = sanitize_value(assoc[key], default, rehome_mapping)
    return assoc


def sanitize_value(
    value: RawValue,
    default: RawValue = DEFAULT_FALLBACK,
    rehome_mapping: bool = True,
) -> RawValue:
    """Sanitize any value.

    Args:
        value: Value to sanitize.
        default: Replacement for null-ish values. Defaults to empty text.
        rehome_mapping: See `sanitize_object`. Defaults to True.

    Returns:
        ``default`` for a null-ish value, primitives unchanged, and containers
        sanitized according to their kind.

    Note:
        Mappings and associative maps inside ``value`` are mutated.
    """
    kind = kind_of(value)
    if kind is ValueKind.ABSENT:
        return default
    if kind is ValueKind.PRIMITIVE:
        return value
    if kind is ValueKind.SEQUENCE:
        return sanitize_sequence(value, default, rehome_mapping)
    if kind is ValueKind.ASSOCIATIVE_MAP:
        return sanitize_map(value, default, rehome_mapping)
    return sanitize_object(value, default, rehome_mapping)


def _reject_constant(name: str) -> float:
    # NaN and Infinity are not part of JSON.
    raise ValueError(f"Unexpected constant: {name}")


def parse_json(
    value: RawValue,
    default: RawValue = DEFAULT_FALLBACK,
    rehome_mapping: bool = True,
) -> RawValue:
    """Parse JSON text into a sanitized value.

    Every value is sanitized as it is decoded, so a ``null`` inside an array
    becomes ``default`` (it is replaced rather than dropped, because the
    hole is filled before the array is assembled).

    Args:
        value: JSON text. Anything that is not text is simply passed to
            `sanitize_value`.
        default: Replacement for null values, and the result for text that
            is not valid JSON.
        rehome_mapping: See `sanitize_object`.

    Returns:
        The sanitized, decoded value.
    """
    if not isinstance(value, str):
        return sanitize_value(value, default, rehome_mapping)

    def revive(decoded: RawValue) -> RawValue:
        if isinstance(decoded, list):
            decoded = [default if item is None else revive(item) for item in decoded]
        return sanitize_value(decoded, default, rehome_mapping)

    def revive_object(pairs: list[tuple[str, RawValue]]) -> RawValue:
        return revive({key: revive(item) for key, item in pairs})

    try:
        parsed = json.loads(
            value, object_pairs_hook=revive_object, parse_constant=_reject_constant
        )
    except ValueError as e:
        logger.debug("Falling back to default for invalid JSON: %s", e)
        parsed = default
    else:
        parsed = revive(parsed)
    return sanitize_value(parsed, default, rehome_mapping)
