"""Conditions: reusable predicates over configuration values.

Conditions are small immutable trees that never hold a reference to the
value they are evaluated against::

    from cfgmap import IsFloat, IsInt, check_that

    is_number = IsInt | IsFloat
    check_that(cmap.get("http/port"), is_number)

``&``, ``|`` and ``~`` build ``And``, ``Or`` and ``Not`` nodes. An absent
lookup result (None) fails every condition, including negations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from cfgmap.value import List, Value, ValueKind

if TYPE_CHECKING:
    from cfgmap.config_map import ConfigMap

__all__ = [
    "Condition",
    "Checkable",
    "check_that",
    "IsKind",
    "IsInt",
    "IsFloat",
    "IsStr",
    "IsBool",
    "IsMap",
    "IsList",
    "IsExactlyInt",
    "IsExactlyFloat",
    "IsExactlyStr",
    "IsExactlyBool",
    "IsExactlyList",
    "IsExactlyMap",
    "IsListWith",
    "IsListWithLength",
    "IsTrue",
    "IsFalse",
    "Constant",
    "Always",
    "Never",
    "And",
    "Or",
    "Not",
]


class Condition(ABC):
    """Base class for all predicates."""

    @abstractmethod
    def evaluate(self, value: Value) -> bool:
        """Evaluate this condition against a present value."""

    def __and__(self, other: Any) -> Condition:
        if not isinstance(other, Condition):
            return NotImplemented
        return And(self, other)

    def __or__(self, other: Any) -> Condition:
        if not isinstance(other, Condition):
            return NotImplemented
        return Or(self, other)

    def __invert__(self) -> Condition:
        return Not(self)

    def __call__(self, value: Value | None) -> bool:
        return check_that(value, self)


@runtime_checkable
class Checkable(Protocol):
    """Anything a condition can be checked against directly."""

    def check_that(self, condition: Condition) -> bool: ...


def check_that(value: Value | None, condition: Condition) -> bool:
    """Evaluate ``condition`` against an optional lookup result.

    Args:
        value: A value, or None when a lookup missed.
        condition: The predicate to evaluate.

    Returns:
        False if ``value`` is None, whatever the condition; otherwise the
        condition's result.
    """
    if value is None:
        return False
    return value.check_that(condition)


# === Type predicates ===


@dataclass(frozen=True)
class IsKind(Condition):
    """Holds when the value is the given variant."""

    kind: ValueKind

    def evaluate(self, value: Value) -> bool:
        return value.kind is self.kind


IsInt = IsKind(ValueKind.INT)
IsFloat = IsKind(ValueKind.FLOAT)
IsStr = IsKind(ValueKind.STR)
IsBool = IsKind(ValueKind.BOOL)
IsMap = IsKind(ValueKind.MAP)
IsList = IsKind(ValueKind.LIST)


# === Exact-value predicates ===


@dataclass(frozen=True)
class IsExactlyInt(Condition):
    """Holds for ``Int(expected)`` only; a float of the same magnitude does not match."""

    expected: int

    def evaluate(self, value: Value) -> bool:
        return value.kind is ValueKind.INT and value.value == self.expected


@dataclass(frozen=True)
class IsExactlyFloat(Condition):
    expected: float

    def evaluate(self, value: Value) -> bool:
        return value.kind is ValueKind.FLOAT and value.value == self.expected


@dataclass(frozen=True)
class IsExactlyStr(Condition):
    expected: str

    def evaluate(self, value: Value) -> bool:
        return value.kind is ValueKind.STR and value.value == self.expected


@dataclass(frozen=True)
class IsExactlyBool(Condition):
    expected: bool

    def evaluate(self, value: Value) -> bool:
        return value.kind is ValueKind.BOOL and value.value is self.expected


@dataclass(frozen=True)
class IsExactlyList(Condition):
    """Holds for a ``List`` whose elements equal ``expected`` in order.

    The expected elements are copied, so later changes to the originals do
    not alter the condition.
    """

    expected: tuple[Value, ...]
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "expected", tuple(item.copy() for item in self.expected))

    def evaluate(self, value: Value) -> bool:
        return value.kind is ValueKind.LIST and value.value == list(self.expected)


@dataclass(frozen=True)
class IsExactlyMap(Condition):
    """Holds for a ``Map`` equal to ``expected``, default prefix included.

    Unlike the other conditions this one is unhashable, as is
    ``IsExactlyList``: both hold mutable values.
    """

    expected: ConfigMap
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "expected", self.expected.copy())

    def evaluate(self, value: Value) -> bool:
        return value.kind is ValueKind.MAP and value.value == self.expected


IsTrue = IsExactlyBool(True)
IsFalse = IsExactlyBool(False)


# === List predicates ===


@dataclass(frozen=True)
class IsListWith(Condition):
    """Holds for a ``List`` whose every element satisfies ``condition``.

    An empty list satisfies any element condition.
    """

    condition: Condition

    def evaluate(self, value: Value) -> bool:
        if not isinstance(value, List):
            return False
        return all(self.condition.evaluate(item) for item in value.value)


@dataclass(frozen=True)
class IsListWithLength(Condition):
    length: int

    def evaluate(self, value: Value) -> bool:
        return isinstance(value, List) and len(value.value) == self.length


# === Constants ===


@dataclass(frozen=True)
class Constant(Condition):
    """Holds (or fails) for every present value."""

    result: bool

    def evaluate(self, value: Value) -> bool:
        return self.result


Always = Constant(True)
Never = Constant(False)


# === Combinators ===


@dataclass(frozen=True)
class And(Condition):
    left: Condition
    right: Condition

    def evaluate(self, value: Value) -> bool:
        return self.left.evaluate(value) and self.right.evaluate(value)


@dataclass(frozen=True)
class Or(Condition):
    left: Condition
    right: Condition

    def evaluate(self, value: Value) -> bool:
        return self.left.evaluate(value) or self.right.evaluate(value)


@dataclass(frozen=True)
class Not(Condition):
    operand: Condition

    def evaluate(self, value: Value) -> bool:
        return not self.operand.evaluate(value)
