"""
Type definitions for formfields.

Provides a minimal Result type (Ok/Err), the field error kinds and the
result alias returned by validators and fields.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success result containing a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Error result containing an error value."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class FieldError:
    """
    Base for field error kinds.

    New kinds subclass this; consumers that match on kinds should keep a
    fallback branch for kinds they do not know.
    """

    message: str


@dataclass(frozen=True, slots=True)
class ValidationFailed(FieldError):
    """The value failed type coercion or a validator rule."""


# Type aliases
FieldErrors = list[FieldError]
FieldValidationResult = Ok[Any] | Err[FieldErrors]
CheckFn = Callable[[Any], bool]
