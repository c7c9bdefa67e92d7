"""Deep merge with override semantics for layered JSON/INI configuration.

Mappings merge key by key, recursively. Anything else (lists, scalars,
``None``) at a matching key is replaced wholesale by the later layer.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Return a new dict with *override* merged over *base*.

    Neither argument is modified. Nested mappings in the result are fresh
    dicts, so later merges never alias an earlier layer.
    """
    merged: dict[str, Any] = {key: copy_json(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy_json(value)
    return merged


def merge_layers(layers: list[Mapping[str, Any]]) -> dict[str, Any]:
    """Fold *layers* from least to most specific."""
    result: dict[str, Any] = {}
    for layer in layers:
        result = deep_merge(result, layer)
    return result


def copy_json(value: Any) -> Any:
    """Copy nested mappings and lists so the result shares nothing mutable."""
    if isinstance(value, Mapping):
        return {key: copy_json(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [copy_json(item) for item in value]
    return value


def freeze(value: Any) -> Any:
    """Read-only view of *value*: mappings become proxies, lists tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze(item) for item in value)
    return value
