"""Tagged configuration values.

A ``Value`` is always exactly one of six variants: ``Int``, ``Float``, ``Str``,
``Bool``, ``Map`` and ``List``. The set is closed; the variants are the only
subclasses ``Value`` accepts.

Every variant exposes the same generated query surface, one method per variant
kind::

    value.is_int()        # True only for Int
    value.as_int()        # the int payload, or None
    value.as_int_mut()    # the live Int node (assign to .value), or None
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, ClassVar

from cfgmap.errors import ValueTypeError

if TYPE_CHECKING:
    from cfgmap.conditions import Condition
    from cfgmap.config_map import ConfigMap

__all__ = ["ValueKind", "Value", "Int", "Float", "Str", "Bool", "Map", "List"]


class ValueKind(str, Enum):
    """Discriminator for the value variants."""

    INT = "int"
    FLOAT = "float"
    STR = "str"
    BOOL = "bool"
    MAP = "map"
    LIST = "list"


class Value(ABC):
    """Base of the closed value union. Construct one of the variants instead.

    A tree owns its nodes exclusively: ``Map`` and ``List`` payloads are
    deep-copied on entry, so no node is ever shared between two places and
    no map can end up inside itself.
    """

    __slots__ = ("_value",)

    kind: ClassVar[ValueKind]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"Value variants are closed; cannot subclass as {cls.__name__}")

    def __init__(self, value: Any) -> None:
        self._value = self._check(value)

    @property
    def value(self) -> Any:
        """The variant payload. Assignment re-checks the payload type."""
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        self._value = self._check(new_value)

    @abstractmethod
    def _check(self, value: Any) -> Any:
        """Validate a payload and return the form to store."""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def to_int(self) -> int | None:
        """Return the payload as an int if this is a numeric value.

        Floats are truncated toward zero. Non-finite floats give None.
        """
        if isinstance(self, Int):
            return self._value
        if isinstance(self, Float):
            if not math.isfinite(self._value):
                return None
            return math.trunc(self._value)
        return None

    def to_float(self) -> float | None:
        """Return the payload as a float if this is a numeric value."""
        if isinstance(self, Float):
            return self._value
        if isinstance(self, Int):
            return float(self._value)
        return None

    def check_that(self, condition: Condition) -> bool:
        """Evaluate ``condition`` against this value."""
        return condition.evaluate(self)

    def copy(self) -> Value:
        """Return a deep copy; nested maps and list elements are copied too."""
        return type(self)(self._value)

    def __copy__(self) -> Value:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Value:
        return self.copy()

    def to_python(self) -> Any:
        """Return the payload as plain Python data."""
        return self._value


class Int(Value):
    """A signed integer. ``bool`` is not accepted."""

    __slots__ = ()
    kind = ValueKind.INT

    def _check(self, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueTypeError("Int", "int", value)
        return value


class Float(Value):
    """A double-precision float. Integer payloads are widened."""

    __slots__ = ()
    kind = ValueKind.FLOAT

    def _check(self, value: Any) -> float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueTypeError("Float", "float", value)
        return float(value)


class Str(Value):
    __slots__ = ()
    kind = ValueKind.STR

    def _check(self, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueTypeError("Str", "str", value)
        return value


class Bool(Value):
    __slots__ = ()
    kind = ValueKind.BOOL

    def _check(self, value: Any) -> bool:
        if not isinstance(value, bool):
            raise ValueTypeError("Bool", "bool", value)
        return value


class Map(Value):
    """A nested ``ConfigMap``, owned by this value.

    The map passed in is copied; later changes to the original do not reach
    this value. Use ``as_map()`` to mutate the owned copy.
    """

    __slots__ = ()
    kind = ValueKind.MAP

    def __init__(self, value: ConfigMap | None = None) -> None:
        if value is None:
            from cfgmap.config_map import ConfigMap

            value = ConfigMap()
        super().__init__(value)

    def _check(self, value: Any) -> ConfigMap:
        from cfgmap.config_map import ConfigMap

        if not isinstance(value, ConfigMap):
            raise ValueTypeError("Map", "ConfigMap", value)
        return value.copy()

    def to_python(self) -> dict[str, Any]:
        return self._value.to_dict()


class List(Value):
    """An ordered list of values. Elements may have differing variants.

    Elements are copied on entry.
    """

    __slots__ = ()
    kind = ValueKind.LIST

    def __init__(self, value: list[Value] | tuple[Value, ...] | None = None) -> None:
        super().__init__([] if value is None else value)

    def _check(self, value: Any) -> list[Value]:
        if not isinstance(value, (list, tuple)):
            raise ValueTypeError("List", "list of Value", value)
        for item in value:
            if not isinstance(item, Value):
                raise ValueTypeError("List", "list of Value", item)
        return [item.copy() for item in value]

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self._value]


_VARIANTS: dict[ValueKind, type[Value]] = {
    ValueKind.INT: Int,
    ValueKind.FLOAT: Float,
    ValueKind.STR: Str,
    ValueKind.BOOL: Bool,
    ValueKind.MAP: Map,
    ValueKind.LIST: List,
}


def _make_is(kind: ValueKind, variant: type[Value]) -> Callable[[Value], bool]:
    def is_kind(self: Value) -> bool:
        return self.kind is kind

    is_kind.__name__ = f"is_{kind.value}"
    is_kind.__doc__ = f"Check whether this value is a ``{variant.__name__}``."
    return is_kind


def _make_as(kind: ValueKind, variant: type[Value]) -> Callable[[Value], Any]:
    def as_kind(self: Value) -> Any:
        return self._value if self.kind is kind else None

    as_kind.__name__ = f"as_{kind.value}"
    as_kind.__doc__ = (
        f"Return the payload of a ``{variant.__name__}``, or None for any other variant."
    )
    if kind is ValueKind.LIST:
        as_kind.__doc__ += (
            "\n\nThe returned list is the live payload and is not re-checked on"
            " mutation: append only ``Value`` instances, and never a value that"
            " contains this list. Reassign ``value`` to get checked, copied elements."
        )
    return as_kind


def _make_as_mut(kind: ValueKind, variant: type[Value]) -> Callable[[Value], Any]:
    def as_kind_mut(self: Value) -> Any:
        return self if self.kind is kind else None

    as_kind_mut.__name__ = f"as_{kind.value}_mut"
    as_kind_mut.__doc__ = (
        f"Return this node if it is a ``{variant.__name__}`` so its ``value`` can be "
        "reassigned in place, or None for any other variant."
    )
    return as_kind_mut


def _install_accessors() -> None:
    for kind, variant in _VARIANTS.items():
        for factory in (_make_is, _make_as, _make_as_mut):
            method = factory(kind, variant)
            method.__qualname__ = f"Value.{method.__name__}"
            setattr(Value, method.__name__, method)


_install_accessors()
