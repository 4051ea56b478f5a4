from typing import Annotated, Optional, Union

from pydantic import Field, Tag, Discriminator, model_validator

from .base import ObjectExtended, ObjectBase, ReferenceBase, union_tag
from .validators import check_required, check_format


class ExternalDocs(ObjectExtended):
    """
    An `External Documentation Object`_ references external resources for extended
    documentation.

    .. _External Documentation Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#external-documentation-object
    """

    url: str = Field(...)
    description: Optional[str] = Field(default=None)

    @model_validator(mode="after")
    def validate_ExternalDocs(self) -> "ExternalDocs":
        check_format(self.url, "url", "url")
        return self


class Reference(ObjectBase, ReferenceBase):
    """
    A `Reference Object`_ designates a reference to another node in the specification.
    The target is never resolved.

    .. _Reference Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#reference-object
    """

    ref: str = Field(alias="$ref")

    model_config = dict(
        extra="ignore",  # """This object cannot be extended with additional properties and any properties added SHALL be ignored."""
    )

    @model_validator(mode="after")
    def validate_Reference(self) -> "Reference":
        check_required(self.ref, "$ref")
        check_format(self.ref, "referenceExpression", "$ref")
        return self


def is_reference(value) -> bool:
    return isinstance(value, ReferenceBase) or (isinstance(value, dict) and "$ref" in value)


def _reference_or(name: str):
    def discriminate(value) -> str:
        return union_tag("Reference") if is_reference(value) else union_tag(name)

    return discriminate


def RefOr(name: str):
    """
    Reference or the named object - a value with a $ref is a Reference
    """
    return Annotated[
        Union[Annotated[name, Tag(union_tag(name))], Annotated[Reference, Tag(union_tag("Reference"))]],
        Discriminator(_reference_or(name)),
    ]
