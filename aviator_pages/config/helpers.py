"""Tolerant coercion helpers shared by the content schema loader.

The schema is never validated against a grammar: these helpers turn whatever
YAML produced into the expected shape, falling back to safe defaults.
"""

from __future__ import annotations

import collections.abc as cabc
import math
import typing as typ
from types import MappingProxyType


def _as_mapping(value: object) -> cabc.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, otherwise an empty mapping."""
    if isinstance(value, cabc.Mapping):
        return value
    return {}


def _as_list(value: object) -> list[typ.Any]:
    """Return ``value`` as a list when it is a non-string sequence."""
    if isinstance(value, cabc.Sequence) and not isinstance(value, (str, bytes)):
        return list(value)
    return []


def _text(value: object, default: str = "") -> str:
    """Return a non-empty string form of ``value`` or ``default``."""
    if value is None or value == "":
        return default
    return str(value)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _finite_number(value: object) -> float | None:
    """Return ``value`` when it is a finite int/float (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return value


def _freeze(value: object) -> object:
    """Recursively convert mappings and lists into read-only equivalents."""
    if isinstance(value, cabc.Mapping):
        return MappingProxyType({str(k): _freeze(v) for k, v in value.items()})
    if isinstance(value, cabc.Sequence) and not isinstance(value, (str, bytes)):
        return tuple(_freeze(item) for item in value)
    return value


__all__ = [
    "_as_list",
    "_as_mapping",
    "_finite_number",
    "_freeze",
    "_optional_str",
    "_text",
]
