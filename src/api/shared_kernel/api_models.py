"""Base pydantic model for the JSON API.

Fields are snake_case in Python and camelCase on the wire; requests may
use either spelling.
"""

from typing import TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from shared_kernel.errors import ValidationError
from shared_kernel.identifiers import EntityId

_IdT = TypeVar("_IdT", bound=EntityId)


class APIModel(BaseModel):
    """Base for every request and response model."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(APIModel):
    """Body for deletes and other writes with nothing to return."""

    success: bool = True


def parse_entity_id(id_type: type[_IdT], value: str, label: str = "ID") -> _IdT:
    """Parse a path id, raising a 400 on malformed input.

    Example:
        product_id = parse_entity_id(ProductId, product_id, "product ID")
    """
    try:
        return id_type.from_string(value)
    except ValueError:
        raise ValidationError(f"Invalid {label} format")
