import enum
from typing import Optional, Any, Tuple

from pydantic import Field, field_validator, model_validator

from .base import ObjectExtended, ReadOnlyDict
from .errors import ConstraintViolation, InvalidEnumValue
from .example import Example  # noqa: F401 - resolves RefOr("Example")
from .general import RefOr
from .media import MediaType, check_content
from .schemas import SchemaOrReference
from .validators import check_enum, check_mutually_exclusive, check_required


class _In(str, enum.Enum):
    query = "query"
    header = "header"
    path = "path"
    cookie = "cookie"


STYLES = {
    _In.path: ("matrix", "label", "simple"),
    _In.query: ("form", "spaceDelimited", "pipeDelimited", "deepObject"),
    _In.header: ("simple",),
    _In.cookie: ("form",),
}


class ParameterBase(ObjectExtended):
    """
    The fields shared by `Parameter Object`_ and `Header Object`_

    .. _Parameter Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#parameter-object
    .. _Header Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#header-object
    """

    description: Optional[str] = Field(default=None)
    required: bool = Field(default=False)
    deprecated: Optional[bool] = Field(default=None)
    allowEmptyValue: Optional[bool] = Field(default=None)

    style: Optional[str] = Field(default=None)
    explode: Optional[bool] = Field(default=None)
    allowReserved: Optional[bool] = Field(default=None)
    schema_: Optional[SchemaOrReference] = Field(default=None, alias="schema")
    example: Optional[Any] = Field(default=None)
    examples: Optional[ReadOnlyDict(str, RefOr("Example"))] = Field(default=None)

    content: Optional[ReadOnlyDict(str, MediaType)] = Field(default=None)

    def _validate_serialization(self, styles: Tuple[str, ...]):
        present = self.given()
        check_mutually_exclusive(present, "schema", "content")
        check_mutually_exclusive(present, "example", "examples")
        if self.style is not None:
            check_enum(self.style, styles, "style")
        if self.content is not None:
            if len(self.content) != 1:
                raise ConstraintViolation("content", "The map MUST only contain one entry")
            check_content(self.content)


class Parameter(ParameterBase):
    name: str = Field(...)
    in_: _In = Field(alias="in")

    @field_validator("in_", mode="before")
    @classmethod
    def validate_Parameter_in(cls, value):
        if isinstance(value, _In):
            return value
        return check_enum(value, [i.value for i in _In], "")

    @model_validator(mode="after")
    def validate_Parameter(self) -> "Parameter":
        check_required(self.name, "name")
        if self.in_ == _In.path and self.required is not True:
            # Parameter must be required since it is in the path
            raise InvalidEnumValue("required", self.required, (True,))
        if self.allowEmptyValue and self.in_ != _In.query:
            raise ConstraintViolation("allowEmptyValue", f"allowEmptyValue is valid for query parameters only, not {self.in_.value}")
        self._validate_serialization(STYLES[self.in_])
        return self

    def identity(self) -> Tuple[str, str]:
        """
        (name, location) - header names are case insensitive
        """
        if self.in_ == _In.header:
            return (self.name.lower(), self.in_.value)
        return (self.name, self.in_.value)


class Header(ParameterBase):
    """

    .. _HeaderObject: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#header-object
    """

    @model_validator(mode="after")
    def validate_Header(self) -> "Header":
        if self.allowEmptyValue:
            raise ConstraintViolation("allowEmptyValue", "allowEmptyValue is not applicable to a header")
        self._validate_serialization(STYLES[_In.header])
        return self
