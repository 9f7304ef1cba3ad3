"""
Behaviour shared by every web3 pydantic model.
"""

from typing import Any, Literal

from pydantic import BaseModel


class ModelCustomizationsMixin:
    """
    Serialization and repr overrides applied to all web3 models.

    Must come before `BaseModel` in the bases so that its `__repr_args__`
    takes precedence.
    """

    def serialize(
        self,
        mode: Literal["json", "python"],
        by_alias: bool,
        exclude_none: bool = True,
    ) -> dict[str, Any]:
        """
        Dump the model to a dict.

        :param mode: `"json"` renders byte sequences and quantities as hex
            strings; `"python"` keeps the `Data` and `Quantity` objects.
        :param by_alias: Use the wire (camelCase) field names.
        :param exclude_none: Leave out fields that are `None`.
        """
        if not isinstance(self, BaseModel):
            raise TypeError(f"{type(self).__name__} is not a pydantic model")
        return self.model_dump(mode=mode, by_alias=by_alias, exclude_none=exclude_none)

    def __repr_args__(self):
        """
        Show scalar fields through their wire representation.

        Hashes and quantities then read as hex instead of raw `bytes`/`int`
        reprs; nested models, containers, flags and `None` keep their repr.
        """
        for name in self.serialize(mode="python", by_alias=False):
            value = getattr(self, name)
            if isinstance(value, (BaseModel, list, dict, bool)):
                yield name, value
            else:
                yield name, str(value)
