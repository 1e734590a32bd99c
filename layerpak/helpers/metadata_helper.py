"""
Canonical form and structural equality for layer metadata.

Layer metadata is compared in a single canonical shape regardless of where it
came from (a freshly built dict, a YAML record, a TOML table):

- mappings become ``dict`` with ``str`` keys
- sequences (``list``/``tuple``) become ``list``, order preserved
- scalars (str, int, float, bool, None, date/datetime) are kept as-is

Anything else cannot be represented in a layer record and raises TypeError.
"""

from __future__ import annotations

import datetime
from collections.abc import Mapping
from typing import Any

SCALAR_TYPES: tuple[type, ...] = (str, int, float, bool, type(None), datetime.date)


def canonicalize(value: Any, _path: str = "") -> Any:
    """
    Return a canonical deep copy of ``value``.

    Args:
        value: Metadata value (mapping, sequence or scalar)

    Returns:
        Canonical copy built from fresh dicts and lists

    Raises:
        TypeError: If a mapping key is not a string or a value has an unsupported type
    """
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"non-string key {key!r} at {_path or '<root>'}")
            result[key] = canonicalize(item, f"{_path}.{key}" if _path else key)
        return result
    if isinstance(value, list | tuple):
        return [canonicalize(item, f"{_path}[{i}]") for i, item in enumerate(value)]
    if isinstance(value, SCALAR_TYPES):
        return value
    raise TypeError(f"unsupported metadata value of type {type(value).__name__} at {_path or '<root>'}")


def decode_into_shape(actual: Any, expected: Mapping[str, Any]) -> dict[str, Any]:
    """
    Decode stored metadata into the shape of ``expected``.

    Only keys that ``expected`` declares are decoded; other keys in ``actual``
    carry non-cache data and do not take part in comparison. A key missing from
    ``actual`` stays missing, so the decoded value compares unequal.

    Raises:
        TypeError: If ``actual`` is not a mapping or holds unsupported values
    """
    if actual is None:
        return {}
    if not isinstance(actual, Mapping):
        raise TypeError(f"metadata must be a mapping, got {type(actual).__name__}")

    return {key: canonicalize(actual[key], key) for key in expected if key in actual}


def deep_equal(a: Any, b: Any) -> bool:
    """
    Structural equality over canonical metadata.

    Mappings need equal key sets, sequences are compared element by element,
    and ``bool`` never equals a non-``bool`` (``True != 1``).
    """
    if isinstance(a, Mapping) or isinstance(b, Mapping):
        if not (isinstance(a, Mapping) and isinstance(b, Mapping)):
            return False
        if a.keys() != b.keys():
            return False
        return all(deep_equal(a[k], b[k]) for k in a)

    if isinstance(a, list | tuple) or isinstance(b, list | tuple):
        if not (isinstance(a, list | tuple) and isinstance(b, list | tuple)):
            return False
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b, strict=True))

    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b

    if isinstance(a, str) != isinstance(b, str):
        return False

    return bool(a == b)
