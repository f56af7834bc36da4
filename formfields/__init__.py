"""
formfields - typed form field coercion and validation.

Usage:
    from formfields import IntegerField, Gt, Node

    age = IntegerField(Gt(0, "Age must be positive."), label="Age")

    age.validate(Node(36))     # Ok(Node(36))
    age.validate(Node(4.0))    # Err([ValidationFailed("Please enter a whole number.")])
"""

from .context import ValidationSettings, current_settings, is_strict, validation_context
from .fields import (
    BoolField,
    DoubleField,
    Field,
    IntegerField,
    StringField,
    UnsignedIntegerField,
    ValidatableField,
)
from .node import Node, NodeKind
from .schema import to_pydantic
from .types import Err, FieldError, FieldValidationResult, Ok, ValidationFailed
from .validator import (
    Between,
    Eq,
    FieldValidator,
    Gt,
    Gte,
    InSet,
    LengthBetween,
    Lt,
    Lte,
    Matches,
    MaxLength,
    MinLength,
    Predicate,
    to_validator,
)

__all__ = [
    # Untyped values
    "Node",
    "NodeKind",
    # Result types
    "Ok",
    "Err",
    "FieldError",
    "ValidationFailed",
    "FieldValidationResult",
    # Fields
    "ValidatableField",
    "Field",
    "StringField",
    "IntegerField",
    "UnsignedIntegerField",
    "DoubleField",
    "BoolField",
    # Validators
    "FieldValidator",
    "Predicate",
    "to_validator",
    "LengthBetween",
    "MinLength",
    "MaxLength",
    "Matches",
    "InSet",
    "Eq",
    "Gt",
    "Gte",
    "Lt",
    "Lte",
    "Between",
    # Configuration
    "validation_context",
    "is_strict",
    "current_settings",
    "ValidationSettings",
    # Schema
    "to_pydantic",
]
