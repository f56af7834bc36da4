"""
Untyped value wrapper for submitted form data.

A Node holds one JSON-like payload and offers accessors that read it as a
given primitive type, returning None when the payload does not fit.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

_INT_LITERAL = re.compile(r"^[+-]?\d+$")

_TRUE_STRINGS = frozenset({"true", "yes", "y", "t", "1", "on"})
_FALSE_STRINGS = frozenset({"false", "no", "n", "f", "0", "off"})


class NodeKind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    INT = "int"
    DOUBLE = "double"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def _kind_of(value: Any) -> NodeKind:
    # bool before int: bool subclasses int
    if value is None:
        return NodeKind.NULL
    if isinstance(value, bool):
        return NodeKind.BOOL
    if isinstance(value, int):
        return NodeKind.INT
    if isinstance(value, float):
        return NodeKind.DOUBLE
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    if isinstance(value, dict):
        return NodeKind.OBJECT
    raise TypeError(f"Cannot wrap {type(value).__name__} in a Node")


def _tagged(value: Any) -> tuple:
    """
    Normalised, kind-tagged form of a payload, used for equality and hashing.

    Nested values are tagged too, so [True] and [1] differ while 0.0 and
    -0.0 stay equal with equal hashes.
    """
    kind = _kind_of(value)
    if kind is NodeKind.ARRAY:
        return (kind, tuple(_tagged(item) for item in value))
    if kind is NodeKind.OBJECT:
        return (kind, frozenset((_tagged(k), _tagged(v)) for k, v in value.items()))
    return (kind, value)


@dataclass(frozen=True, slots=True, eq=False)
class Node:
    """
    Immutable untyped value.

    Wraps None, bool, int, float, str, list/tuple or dict, checked all the
    way down. Equality is type-strict at every level, so Node(1) != Node(1.0)
    and Node([True]) != Node([1]).

    Examples:
        Node("hello").as_string()   # "hello"
        Node(4.0).as_int()          # None, doubles are never truncated
        Node("42").as_int()         # 42
        Node(None).as_bool()        # None
    """

    value: Any = None

    def __post_init__(self) -> None:
        _tagged(self.value)

    @classmethod
    def wrap(cls, value: Any) -> Node:
        """Return value if it is already a Node, otherwise wrap it."""
        if isinstance(value, Node):
            return value
        return cls(value)

    @property
    def kind(self) -> NodeKind:
        return _kind_of(self.value)

    @property
    def is_null(self) -> bool:
        return self.value is None

    @property
    def is_integer(self) -> bool:
        """True if the payload is integer-shaped."""
        return self.kind is NodeKind.INT

    @property
    def is_double(self) -> bool:
        """True if the payload is floating-point shaped."""
        return self.kind is NodeKind.DOUBLE

    def as_string(self) -> str | None:
        if self.kind is NodeKind.STRING:
            return self.value
        return None

    def as_int(self) -> int | None:
        """
        Read the payload as an integer.

        Integer payloads and strings holding a base-10 integer literal are
        accepted. Floating-point payloads are never converted.
        """
        kind = self.kind
        if kind is NodeKind.INT:
            return self.value
        if kind is NodeKind.STRING:
            text = self.value.strip()
            if _INT_LITERAL.match(text):
                return int(text)
        return None

    def as_uint(self) -> int | None:
        n = self.as_int()
        if n is None or n < 0:
            return None
        return n

    def as_double(self) -> float | None:
        """Read the payload as a float; integers are widened."""
        kind = self.kind
        if kind in (NodeKind.INT, NodeKind.DOUBLE):
            return float(self.value)
        if kind is NodeKind.STRING:
            try:
                parsed = float(self.value.strip())
            except ValueError:
                return None
            if math.isfinite(parsed):
                return parsed
        return None

    def as_bool(self) -> bool | None:
        kind = self.kind
        if kind is NodeKind.BOOL:
            return self.value
        if kind is NodeKind.INT and self.value in (0, 1):
            return self.value == 1
        if kind is NodeKind.STRING:
            text = self.value.strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Node):
            return _tagged(self.value) == _tagged(other.value)
        return False

    def __hash__(self) -> int:
        return hash(_tagged(self.value))

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
