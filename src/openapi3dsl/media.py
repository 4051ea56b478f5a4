from typing import Optional, Any, Mapping

from pydantic import Field, model_validator

from .base import ObjectExtended, ReadOnlyDict, empty, field_path
from .errors import DuplicateKey
from .example import Example  # noqa: F401 - resolves RefOr("Example")
from .general import RefOr
from .schemas import SchemaOrReference
from .validators import check_format, check_mutually_exclusive


def check_content(content: Mapping[str, Any], path: str = "content") -> None:
    """
    keys of a content map are media types or media type ranges, compared case insensitive
    """
    seen = set()
    for key in content.keys():
        check_format(key, "mediaType", field_path(path, key))
        if (k := key.lower()) in seen:
            raise DuplicateKey(field_path(path, key), key)
        seen.add(k)


class Encoding(ObjectExtended):
    """
    A single encoding definition applied to a single schema property.

    .. _Encoding: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#encoding-object
    """

    contentType: Optional[str] = Field(default=None)
    headers: ReadOnlyDict(str, RefOr("Header")) = Field(default_factory=empty)
    style: Optional[str] = Field(default=None)
    explode: Optional[bool] = Field(default=None)
    allowReserved: Optional[bool] = Field(default=None)


class MediaType(ObjectExtended):
    """
    A `MediaType`_ object provides schema and examples for the media type identified
    by its key.  These are used in a RequestBody object.

    .. _MediaType: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#media-type-object
    """

    schema_: Optional[SchemaOrReference] = Field(default=None, alias="schema")
    example: Optional[Any] = Field(default=None)  # 'any' type
    examples: Optional[ReadOnlyDict(str, RefOr("Example"))] = Field(default=None)
    encoding: ReadOnlyDict(str, Encoding) = Field(default_factory=empty)

    @model_validator(mode="after")
    def validate_MediaType(self) -> "MediaType":
        check_mutually_exclusive(self.given(), "example", "examples")
        return self
