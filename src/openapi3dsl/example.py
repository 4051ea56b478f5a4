from typing import Any, Optional

from pydantic import Field, model_validator

from .base import ObjectExtended
from .validators import check_format, check_mutually_exclusive


class Example(ObjectExtended):
    """
    A `Example Object`_ holds an example value, inline or by url.

    .. _Example Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#example-object
    """

    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    value: Optional[Any] = Field(default=None)
    externalValue: Optional[str] = Field(default=None)

    @model_validator(mode="after")
    def validate_Example(self) -> "Example":
        check_mutually_exclusive(self.given(), "value", "externalValue")
        if self.externalValue is not None:
            check_format(self.externalValue, "url", "externalValue")
        return self
