"""Conversion from native Python data to configuration values.

Producers that already hold configuration as plain Python objects (for
example the result of a JSON or YAML parser, or a pydantic model) hand it to
the store through these functions. The reverse direction is
``Value.to_python()`` and ``ConfigMap.to_dict()``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from cfgmap.config_map import ConfigMap
from cfgmap.errors import ConversionError, InvalidKeyError
from cfgmap.utils.path import SEPARATOR
from cfgmap.value import Bool, Float, Int, List, Map, Str, Value

__all__ = ["to_value", "to_config_map"]


def to_value(obj: Any) -> Value:
    """Convert a native Python object into a ``Value``.

    ``bool``, ``int``, ``float`` and ``str`` map to the scalar variants.
    Mappings and pydantic models become ``Map``; lists and tuples become
    ``List``. Existing values and maps are deep-copied so the result never
    shares nodes with its input.

    Raises:
        ConversionError: If the object (or anything nested in it) has no
            value representation.
        InvalidKeyError: If a mapping key is not a string or contains ``/``.
    """
    if isinstance(obj, Value):
        return obj.copy()
    if isinstance(obj, ConfigMap):
        return Map(obj)
    # bool must be tested before int
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return Int(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return Str(obj)
    if isinstance(obj, (Mapping, BaseModel)):
        return Map(to_config_map(obj))
    if isinstance(obj, (list, tuple)):
        return List([to_value(item) for item in obj])
    raise ConversionError(obj)


def to_config_map(data: Mapping[str, Any] | BaseModel, default: str | None = None) -> ConfigMap:
    """Build a ``ConfigMap`` from a mapping or a pydantic model.

    Args:
        data: Top-level configuration. Pydantic models are dumped with
            ``model_dump()`` first.
        default: Default option location for the root map. Nested maps
            are always created without one.

    Returns:
        A new map owning converted copies of every entry.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump()
    if not isinstance(data, Mapping):
        raise ConversionError(data)

    cmap = ConfigMap() if default is None else ConfigMap.with_default(default)
    for key, item in data.items():
        if not isinstance(key, str):
            raise InvalidKeyError(key, "keys must be strings")
        if SEPARATOR in key:
            raise InvalidKeyError(key, f"keys must not contain '{SEPARATOR}'")
        cmap.add(key, to_value(item))
    return cmap
