"""
Typed form fields.

Each field coerces an untyped Node to its primitive type and, only when that
succeeds, runs its validators in declared order. All validator errors are
collected; a coercion failure reports its own message and nothing else.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, ClassVar, Generic, Protocol, TypeVar, runtime_checkable

from pydantic import NonNegativeInt, StrictInt, StrictStr

from .context import is_strict
from .node import Node
from .types import Err, FieldError, FieldValidationResult, Ok, ValidationFailed
from .validator import FieldValidator, to_validator

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class ValidatableField(Protocol):
    """
    Anything with a display label and a validate() method.

    A fieldset can hold any mix of objects satisfying this protocol.
    """

    label: str

    def validate(self, value: Any) -> FieldValidationResult: ...


class Field(Generic[T]):
    """
    Shared pipeline for the primitive fields.

    Subclasses implement coerce() and set type_hint, the Pydantic type a
    coerced value is checked against on export.
    """

    type_hint: ClassVar[Any] = Any

    def __init__(
        self, *validators: FieldValidator[T] | Callable[[T], bool], label: str = ""
    ):
        self.label = label
        self.validators: tuple[FieldValidator[T], ...] = tuple(
            to_validator(v) for v in validators
        )

    def coerce(self, node: Node) -> Ok[T] | Err[list[FieldError]]:
        raise NotImplementedError

    def validate(self, value: Node | Any) -> FieldValidationResult:
        """
        Coerce then validate a submitted value.

        Returns:
            Ok(Node(coerced)) if coercion and every validator pass
            Err([FieldError, ...]) otherwise, in validator order
        """
        node = Node.wrap(value)
        coerced = self.coerce(node)
        if isinstance(coerced, Err):
            logger.debug(
                "%s %r rejected %r: %s",
                type(self).__name__,
                self.label,
                node,
                coerced.error[0].message,
            )
            return coerced

        typed = coerced.value
        errors: list[FieldError] = []
        for validator in self.validators:
            result = self._run(validator, typed)
            if isinstance(result, Err):
                errors.extend(result.error)

        return Err(errors) if errors else Ok(Node(typed))

    def _run(self, validator: FieldValidator[T], value: T) -> FieldValidationResult:
        try:
            result = validator.validate(value)
            if not isinstance(result, (Ok, Err)):
                raise TypeError(
                    f"{type(validator).__name__}.validate() returned "
                    f"{type(result).__name__}, expected Ok or Err"
                )
            return result
        except Exception as e:
            if is_strict():
                raise
            logger.warning(
                "Validator %r on %s %r raised", validator, type(self).__name__, self.label,
                exc_info=True,
            )
            return Err([ValidationFailed(f"Validation error: {e}")])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(label={self.label!r}, validators={len(self.validators)})"


def _failure(message: str) -> Err[list[FieldError]]:
    return Err([ValidationFailed(message)])


class StringField(Field[str]):
    """A field which receives a str value."""

    type_hint = StrictStr

    def coerce(self, node: Node) -> Ok[str] | Err[list[FieldError]]:
        string = node.as_string()
        if string is None:
            return _failure("Please enter valid text.")
        return Ok(string)


class IntegerField(Field[int]):
    """
    A field which receives an int value.

    Doubles are rejected even when they hold a whole number, so 4.0 fails.
    """

    type_hint = StrictInt

    def coerce(self, node: Node) -> Ok[int] | Err[list[FieldError]]:
        if node.is_double:
            return _failure("Please enter a whole number.")
        n = node.as_int()
        if n is None:
            return _failure("Please enter a whole number.")
        return Ok(n)


class UnsignedIntegerField(Field[int]):
    """A field which receives a non-negative int value."""

    type_hint = NonNegativeInt

    def coerce(self, node: Node) -> Ok[int] | Err[list[FieldError]]:
        message = "Please enter a positive whole number."
        if node.is_double:
            return _failure(message)
        if node.is_integer and node.value < 0:
            return _failure(message)
        n = node.as_uint()
        if n is None:
            return _failure(message)
        return Ok(n)


class DoubleField(Field[float]):
    """A field which receives a float value; ints are widened."""

    type_hint = float

    def coerce(self, node: Node) -> Ok[float] | Err[list[FieldError]]:
        number = node.as_double()
        if number is None:
            return _failure("Please enter a number.")
        return Ok(number)


class BoolField(Field[bool]):
    """
    A field which receives a bool value.

    Never fails coercion: an unchecked checkbox is absent from the submitted
    data, so anything without a boolean reading counts as False.
    """

    type_hint = bool

    def coerce(self, node: Node) -> Ok[bool] | Err[list[FieldError]]:
        flag = node.as_bool()
        return Ok(False if flag is None else flag)
