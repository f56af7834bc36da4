"""
Validation settings, scoped with a context manager.

Settings live in a ContextVar, so each thread and asyncio task sees its own
values and nested contexts restore the outer ones on exit.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Iterator


@dataclass(frozen=True, slots=True)
class ValidationSettings:
    """
    Options read by fields while validating.

    strict: let exceptions raised inside validators (or a validator returning
        something other than Ok/Err) propagate out of Field.validate()
        instead of turning them into a "Validation error: ..." message.
    """

    strict: bool = False


_settings: ContextVar[ValidationSettings] = ContextVar(
    "formfields_settings", default=ValidationSettings()
)


def current_settings() -> ValidationSettings:
    return _settings.get()


def is_strict() -> bool:
    return _settings.get().strict


@contextmanager
def validation_context(*, strict: bool | None = None) -> Iterator[ValidationSettings]:
    """
    Override validation settings for the enclosed block.

    Options left as None keep their current value.

    Example:
        field = IntegerField(Predicate(lambda n: 100 / n > 1, "Too large."))

        field.validate(0)            # Err([ValidationFailed("Validation error: ...")])

        with validation_context(strict=True):
            field.validate(0)        # ZeroDivisionError
    """
    overrides = {} if strict is None else {"strict": strict}
    token = _settings.set(replace(_settings.get(), **overrides))
    try:
        yield _settings.get()
    finally:
        _settings.reset(token)
