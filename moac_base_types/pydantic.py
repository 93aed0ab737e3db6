"""Base pydantic classes used to define the models exchanged with a MOAC node."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from .mixins import ModelCustomizationsMixin

Model = TypeVar("Model", bound=BaseModel)


class MoacBaseModel(BaseModel, ModelCustomizationsMixin):
    """Base model for all models exchanged with a MOAC node."""

    @model_validator(mode="before")
    @classmethod
    def drop_null_members(cls, data: Any) -> Any:
        """Treat `null` members as absent so that the fields keep their zero value."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class CamelModel(MoacBaseModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `parent_hash` in a Python model will be represented
    as `parentHash` when it is serialized to json.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )
