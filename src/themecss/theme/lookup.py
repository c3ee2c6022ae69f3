"""Nested mapping lookup."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

__all__ = ["deep_get"]


def deep_get(mapping: Mapping[str, Any], keys: Iterable[str], default: Any = None) -> Any:
    """Follow *keys* through nested mappings.

    Returns *default* as soon as a key is missing or an intermediate value
    is not a mapping; no partial result is returned.
    """
    current: Any = mapping
    for key in keys:
        if not isinstance(current, Mapping) or key not in current:
            return default
        current = current[key]
    return current
