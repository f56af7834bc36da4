"""
Field validators for formfields.

A field validator checks one already-coerced value. Subclass FieldValidator
to write a rule, or use the factories below which return Predicate instances.
"""

from __future__ import annotations

import operator
import re
from typing import Any, Callable, Generic, TypeVar

from .node import Node
from .types import CheckFn, Err, FieldValidationResult, Ok, ValidationFailed

T = TypeVar("T")


class FieldValidator(Generic[T]):
    """
    Base class for a single validation rule over values of type T.

    Override validate() and return Ok(value) when the value passes, or
    Err([ValidationFailed(message)]) with a message meant for end users.
    The base implementation is a placeholder and always succeeds with an
    empty Node.

    Usage:
        class NotBlank(FieldValidator[str]):
            def validate(self, value: str) -> FieldValidationResult:
                if value.strip():
                    return Ok(value)
                return Err([ValidationFailed("This field cannot be blank.")])
    """

    def validate(self, value: T) -> FieldValidationResult:
        return Ok(Node(None))

    def __call__(self, value: T) -> FieldValidationResult:
        return self.validate(value)


class Predicate(FieldValidator[T]):
    """
    Validator built from a boolean check.

    Usage:
        Predicate(lambda x: x > 0, "Must be positive")
        Predicate(str.isalpha, "Must be alphabetic")
    """

    def __init__(self, check: CheckFn, message: str | None = None):
        self.check = check
        self.message = message or "Please enter a valid value."

    def validate(self, value: T) -> FieldValidationResult:
        if self.check(value):
            return Ok(value)
        return Err([ValidationFailed(self.message)])

    def __repr__(self) -> str:
        return f"Predicate(message={self.message!r})"


def to_validator(v: Any) -> FieldValidator[Any]:
    """
    Coerce a value to a field validator.

    Conversion rules:
        FieldValidator -> pass through
        Callable -> Predicate(check=callable)
    """
    if isinstance(v, FieldValidator):
        return v

    if isinstance(v, type):
        raise TypeError(
            f"Expected a validator instance, got the class {v.__name__}"
        )

    if callable(v):
        return Predicate(v)

    raise TypeError(f"Cannot convert {type(v).__name__} to validator")


def LengthBetween(
    lower: int | None = None, upper: int | None = None, message: str | None = None
) -> Predicate[Any]:
    """
    Validate length is within range (inclusive).

    Usage:
        LengthBetween(1, 10)      # 1 to 10 characters
        LengthBetween(lower=5)    # At least 5
        LengthBetween(upper=20)   # At most 20
    """

    def check(x: Any) -> bool:
        try:
            n = len(x)
        except TypeError:
            return False
        if lower is not None and n < lower:
            return False
        if upper is not None and n > upper:
            return False
        return True

    if message is None:
        if lower is not None and upper is not None:
            message = f"Please enter between {lower} and {upper} characters."
        elif lower is not None:
            message = f"Please enter at least {lower} characters."
        elif upper is not None:
            message = f"Please enter no more than {upper} characters."

    return Predicate(check, message)


def MinLength(n: int, message: str | None = None) -> Predicate[Any]:
    """Validate minimum length."""
    return LengthBetween(lower=n, message=message)


def MaxLength(n: int, message: str | None = None) -> Predicate[Any]:
    """Validate maximum length."""
    return LengthBetween(upper=n, message=message)


def Matches(pattern: str, message: str | None = None) -> Predicate[str]:
    """
    Validate the whole string against a regex pattern.

    Usage:
        Matches(r"[a-z]+")
        Matches(r"\\d{3}-\\d{4}", "Please enter a phone number.")
    """
    compiled = re.compile(pattern)

    def check(x: Any) -> bool:
        return isinstance(x, str) and compiled.fullmatch(x) is not None

    return Predicate(check, message or "Please enter a value in the expected format.")


def InSet(values: set | frozenset | list | tuple, message: str | None = None) -> Predicate[Any]:
    """
    Validate value is one of the allowed choices.

    Usage:
        InSet({"small", "medium", "large"})
    """
    choices = frozenset(values)
    listing = ", ".join(sorted(str(v) for v in choices))
    return Predicate(choices.__contains__, message or f"Please choose one of: {listing}.")


def _compare(op: Callable[[Any, Any], bool], bound: Any, message: str) -> Predicate[Any]:
    return Predicate(lambda x: op(x, bound), message)


def Eq(value: Any, message: str | None = None) -> Predicate[Any]:
    return _compare(operator.eq, value, message or f"Please enter {value}.")


def Gt(value: Any, message: str | None = None) -> Predicate[Any]:
    return _compare(operator.gt, value, message or f"Please enter a value greater than {value}.")


def Gte(value: Any, message: str | None = None) -> Predicate[Any]:
    return _compare(operator.ge, value, message or f"Please enter {value} or more.")


def Lt(value: Any, message: str | None = None) -> Predicate[Any]:
    return _compare(operator.lt, value, message or f"Please enter a value less than {value}.")


def Lte(value: Any, message: str | None = None) -> Predicate[Any]:
    return _compare(operator.le, value, message or f"Please enter {value} or less.")


def Between(
    lower: Any, upper: Any, inclusive: bool = True, message: str | None = None
) -> Predicate[Any]:
    """
    Validate value lies between two bounds.

    Usage:
        Between(1, 10)                   # 1 <= x <= 10
        Between(0, 1, inclusive=False)   # 0 < x < 1
    """
    if inclusive:
        return Predicate(
            lambda x: lower <= x <= upper,
            message or f"Please enter a value from {lower} to {upper}.",
        )
    return Predicate(
        lambda x: lower < x < upper,
        message or f"Please enter a value strictly between {lower} and {upper}.",
    )
