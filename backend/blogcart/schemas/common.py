"""Shared schema helpers — camelCase wire names over snake_case attributes.

Invariants:
    - Requests accept both the camelCase wire name and the snake_case name
    - Responses always serialize the camelCase wire name

Design Decisions:
    - AliasChoices on validation: response models validate from ORM attributes
      (snake_case) and FastAPI re-validates the dumped dict (camelCase)
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


def wire_field(wire_name: str, attr_name: str, default: Any = ..., **kwargs: Any) -> Any:
    """Field readable as either name, written as the wire name."""
    return Field(
        default,
        validation_alias=AliasChoices(wire_name, attr_name),
        serialization_alias=wire_name,
        **kwargs,
    )


class OrmResponse(BaseModel):
    """Base for response models built from ORM rows."""
    model_config = ConfigDict(from_attributes=True)


class CountResponse(BaseModel):
    """Result of a batch create/update/delete."""
    count: int
