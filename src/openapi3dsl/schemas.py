from typing import Annotated, Union, Any, Optional, NamedTuple, Tuple

from pydantic import Discriminator as Discriminator_, Field, Tag, model_validator

from .base import ObjectExtended, ReadOnlyDict, empty, union_tag
from .errors import MissingRequiredField, ConstraintViolation, MutuallyExclusiveFieldsSet
from .general import ExternalDocs, Reference, RefOr, is_reference
from .validators import check_enum, check_mutually_exclusive, check_range, check_required, check_unique

TYPES = ("array", "boolean", "integer", "number", "object", "string")

COMPOSITIONS = ("allOf", "oneOf", "anyOf", "not")

SchemaOrReference = RefOr("Schema")


def _bool_or_schema(value) -> str:
    if isinstance(value, bool):
        return union_tag("bool")
    return union_tag("Reference") if is_reference(value) else union_tag("Schema")


# additionalProperties: true/false or a schema
BoolOrSchema = Annotated[
    Union[
        Annotated[bool, Tag(union_tag("bool"))],
        Annotated["Schema", Tag(union_tag("Schema"))],
        Annotated[Reference, Tag(union_tag("Reference"))],
    ],
    Discriminator_(_bool_or_schema),
]


class Composition(NamedTuple):
    """
    the composition keyword of a Schema and its subschemas
    """

    mode: str
    schemas: Tuple[SchemaOrReference, ...]


class Discriminator(ObjectExtended):
    """

    .. here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#discriminator-object
    """

    propertyName: str = Field(...)
    mapping: ReadOnlyDict(str, str) = Field(default_factory=empty)

    @model_validator(mode="after")
    def validate_Discriminator(self) -> "Discriminator":
        check_required(self.propertyName, "propertyName")
        return self


class Schema(ObjectExtended):
    """
    The `Schema Object`_ allows the definition of input and output data types.

    Only the shape is checked, data is never validated against a Schema.

    .. _Schema Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#schema-object
    """

    title: Optional[str] = Field(default=None)
    multipleOf: Optional[float] = Field(default=None, gt=0)
    maximum: Optional[float] = Field(default=None)
    exclusiveMaximum: Optional[bool] = Field(default=None)
    minimum: Optional[float] = Field(default=None)
    exclusiveMinimum: Optional[bool] = Field(default=None)
    maxLength: Optional[int] = Field(default=None, ge=0)
    minLength: Optional[int] = Field(default=None, ge=0)
    pattern: Optional[str] = Field(default=None)
    maxItems: Optional[int] = Field(default=None, ge=0)
    minItems: Optional[int] = Field(default=None, ge=0)
    uniqueItems: Optional[bool] = Field(default=None)
    maxProperties: Optional[int] = Field(default=None, ge=0)
    minProperties: Optional[int] = Field(default=None, ge=0)
    required: Tuple[str, ...] = Field(default_factory=tuple)
    enum: Optional[Tuple[Any, ...]] = Field(default=None)

    type: Optional[str] = Field(default=None)
    allOf: Optional[Tuple[SchemaOrReference, ...]] = Field(default=None)
    oneOf: Optional[Tuple[SchemaOrReference, ...]] = Field(default=None)
    anyOf: Optional[Tuple[SchemaOrReference, ...]] = Field(default=None)
    not_: Optional[SchemaOrReference] = Field(default=None, alias="not")
    items: Optional[SchemaOrReference] = Field(default=None)
    properties: ReadOnlyDict(str, SchemaOrReference) = Field(default_factory=empty)
    additionalProperties: Optional[BoolOrSchema] = Field(default=None)
    description: Optional[str] = Field(default=None)
    format: Optional[str] = Field(default=None)
    default: Optional[Any] = Field(default=None)
    nullable: Optional[bool] = Field(default=None)
    discriminator: Optional[Discriminator] = Field(default=None)
    readOnly: Optional[bool] = Field(default=None)
    writeOnly: Optional[bool] = Field(default=None)
    externalDocs: Optional[ExternalDocs] = Field(default=None)
    example: Optional[Any] = Field(default=None)
    deprecated: Optional[bool] = Field(default=None)

    @model_validator(mode="after")
    def validate_Schema(self) -> "Schema":
        check_mutually_exclusive(self.given(), *COMPOSITIONS)
        present = self.provided()
        for i in ("allOf", "oneOf", "anyOf"):
            if i in present and len(present[i]) == 0:
                raise ConstraintViolation(i, f"{i} must not be empty")

        if self.type is not None:
            check_enum(self.type, TYPES, "type")
            if self.type == "array" and self.items is None:
                raise MissingRequiredField("items")

        check_range(self.minimum, self.maximum, "minimum", "maximum")
        check_range(self.minLength, self.maxLength, "minLength", "maxLength")
        check_range(self.minItems, self.maxItems, "minItems", "maxItems")
        check_range(self.minProperties, self.maxProperties, "minProperties", "maxProperties")
        check_unique(self.required, lambda x: x, "required")

        if self.readOnly and self.writeOnly:
            raise MutuallyExclusiveFieldsSet("", ("readOnly", "writeOnly"))
        return self

    @property
    def composition(self) -> Optional[Composition]:
        for mode in COMPOSITIONS:
            if (value := self.provided().get(mode)) is None:
                continue
            return Composition(mode, value if isinstance(value, tuple) else (value,))
        return None
