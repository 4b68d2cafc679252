"""Recursive merging of request configuration."""

from collections.abc import Mapping
from typing import Any


def deep_merge(base: Any, override: Any, lower_case: bool = False) -> Any:
    """Merge ``override`` on top of ``base`` without mutating either.

    Sequences are concatenated; a non-sequence override is appended as one
    element. Mappings are copied entry by entry; a mapping value in
    ``override`` whose key already holds a mapping or sequence is merged
    recursively, anything else replaces the existing entry. Case folding of
    keys is switched on for the nested ``headers`` mapping.

    Args:
        base: The configuration to start from. ``None`` acts as empty.
        override: The configuration whose entries win on conflict.
        lower_case: If True, string keys of both inputs are lower-cased.

    Returns:
        A new list (for sequence input) or a new dict.
    """
    if isinstance(base, (list, tuple)):
        if override is None:
            return list(base)
        if isinstance(override, (list, tuple)):
            return list(base) + list(override)
        return list(base) + [override]

    out: dict[Any, Any] = {}

    for key, value in _items(base):
        out[_fold(key, lower_case)] = value

    for key, value in _items(override):
        key = _fold(key, lower_case)
        if key in out and isinstance(value, Mapping) and _mergeable(out[key]):
            is_headers = isinstance(key, str) and key.lower() == "headers"
            out[key] = deep_merge(out[key], value, is_headers)
        else:
            out[key] = value

    return out


def _mergeable(existing: Any) -> bool:
    return isinstance(existing, (Mapping, list, tuple))


def _items(config: Any) -> list[tuple[Any, Any]]:
    if not isinstance(config, Mapping):
        return []
    return list(config.items())


def _fold(key: Any, lower_case: bool) -> Any:
    if lower_case and isinstance(key, str):
        return key.lower()
    return key
