"""Base pydantic classes used to define the wire-backed models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from .mixins import ModelCustomizationsMixin


class Web3BaseModel(ModelCustomizationsMixin, BaseModel):
    """Base model for all web3 models."""

    pass


class CamelModel(Web3BaseModel):
    """
    A base model that converts field names to camel case when serializing.

    For example, the field name `cumulative_gas_used` in a Python model will be
    represented as `cumulativeGasUsed` when it is serialized to json.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_default=True,
    )


class WireModel(CamelModel):
    """
    Immutable snapshot decoded from a node response.

    Keys the model does not know are ignored, and `null` values are treated
    like absent keys so that every field falls back to its zero default.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_null_fields(cls, data: Any) -> Any:
        """Remove keys whose value is `null`."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def __str__(self) -> str:
        """Return the wire JSON rendering of the model."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
