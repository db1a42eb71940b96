from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..errors import ModelValidationError


class KeptnModel(BaseModel):
    """
    Base class of all Keptn api payloads.

    Fields use snake_case names in python and the camelCase names of the api
    as aliases. Models are serialized by alias with unset (None) fields
    omitted, and can be constructed either by field name or by alias.

    `validate_model()` performs the structural check of the api schema: the
    fields listed in `required_fields` must be present, and every model nested
    in a field, or in a list field, is validated recursively. Failures are
    reported with the path of the field, e.g. `stages.2.stageName`.
    """

    model_config = ConfigDict(populate_by_name=True)

    # Fields (python names) that must be present for the model to be valid.
    required_fields: ClassVar[Tuple[str, ...]] = ()

    @classmethod
    def _wire_name(cls, name: str) -> str:
        return cls.model_fields[name].alias or name

    def validate_model(self) -> None:
        for name in self.required_fields:
            value = getattr(self, name)
            if value is None or value == "":
                raise ModelValidationError(self._wire_name(name), "is required")

        for name in type(self).model_fields:
            value = getattr(self, name)
            wire_name = self._wire_name(name)
            if isinstance(value, KeptnModel):
                _validate_nested(value, wire_name)
            elif isinstance(value, list):
                for i, item in enumerate(value):
                    # absent elements are not validated
                    if item is None:
                        continue
                    if isinstance(item, KeptnModel):
                        _validate_nested(item, f"{wire_name}.{i}")

    def to_json(self) -> bytes:
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


def _validate_nested(model: KeptnModel, prefix: str) -> None:
    try:
        model.validate_model()
    except ModelValidationError as e:
        raise e.prefixed(prefix) from None


class Error(KeptnModel):
    """
    The error body returned by the Keptn api for non-2xx responses.
    """

    code: Optional[int] = None
    message: Optional[str] = Field(default=None, alias="message")

    required_fields: ClassVar[Tuple[str, ...]] = ("message",)
