from typing import Annotated, Dict

from pydantic import BaseModel, ConfigDict, JsonValue, StringConstraints

NonEmptyString = Annotated[str, StringConstraints(min_length=1)]
"""Type alias for non-empty strings with minimum length of 1."""

JsonDocument = Dict[str, JsonValue]
"""A schema-agnostic JSON object. Standard JSON requests and responses are passed around as
this type and never inspected beyond (de)serialization."""


class BaseModelWithDocstrings(BaseModel):
    """Base model with the attribute docstrings being extracted to the model JSON schema."""

    model_config = ConfigDict(use_attribute_docstrings=True)
