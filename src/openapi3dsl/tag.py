from typing import Optional

from pydantic import Field, model_validator

from .base import ObjectExtended
from .general import ExternalDocs
from .validators import check_required


class Tag(ObjectExtended):
    """
    Allows adding meta data to a single tag that is used by the Operation Object. It is not mandatory to have a Tag Object per tag used there.

    .. _Tag Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#tag-object
    """

    name: str = Field(...)
    description: Optional[str] = Field(default=None)
    externalDocs: Optional[ExternalDocs] = Field(default=None)

    @model_validator(mode="after")
    def validate_Tag(self) -> "Tag":
        check_required(self.name, "name")
        return self
