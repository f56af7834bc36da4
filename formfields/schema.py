"""
Schema export for formfields.

Provides to_pydantic(), which compiles a mapping of fields to a Pydantic
model class that accepts exactly what the fields accept.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Mapping

from pydantic import BeforeValidator
from pydantic import Field as PydanticField
from pydantic import create_model

from .fields import BoolField, Field
from .node import Node
from .types import Err


def to_pydantic(name: str, fields: Mapping[str, Field[Any]]) -> type:
    """
    Compile fields to a Pydantic model.

    Args:
        name: Name of the generated model class
        fields: Mapping of attribute name to field

    Returns:
        A Pydantic BaseModel subclass. Each attribute runs its field's
        validate() first, so coercion rules and validators carry over, and
        field labels become descriptions.

    Usage:
        Signup = to_pydantic("Signup", {
            "username": StringField(label="Username"),
            "age": UnsignedIntegerField(label="Age"),
            "newsletter": BoolField(label="Subscribe"),
        })
        Signup(username="ada", age="36")   # age=36
        Signup(username="ada", age=5.0)    # ValidationError
    """
    definitions: dict[str, Any] = {}

    for key, field in fields.items():
        definitions[key] = _extract_pydantic_field(field)

    return create_model(name, **definitions)


def _run_field(field: Field[Any]) -> Callable[[Any], Any]:
    def run(value: Any) -> Any:
        try:
            node = Node.wrap(value)
        except TypeError as e:
            raise ValueError(str(e)) from e
        result = field.validate(node)
        if isinstance(result, Err):
            raise ValueError("; ".join(e.message for e in result.error))
        return result.value.value

    return run


def _extract_pydantic_field(field: Field[Any]) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from a field."""
    match field:
        case BoolField(label=label):
            default = False
        case Field(label=label):
            default = ...
        case _:
            raise TypeError(f"Cannot export {type(field).__name__} to a Pydantic model")

    hint = Annotated[field.type_hint, BeforeValidator(_run_field(field))]
    return (hint, PydanticField(default, description=label or None))
