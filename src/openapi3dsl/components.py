from pydantic import Field, model_validator

from .base import ObjectExtended, ReadOnlyDict, empty, field_path
from .example import Example  # noqa: F401
from .general import RefOr
from .parameter import Header, Parameter  # noqa: F401
from .paths import RequestBody, Link, Response, Callback  # noqa: F401
from .schemas import SchemaOrReference
from .validators import check_format

SECTIONS = ("schemas", "responses", "parameters", "examples", "requestBodies", "headers", "links", "callbacks")


class Components(ObjectExtended):
    """
    A `Components Object`_ holds a reusable set of different aspects of the description.

    .. _Components Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#components-object
    """

    schemas: ReadOnlyDict(str, SchemaOrReference) = Field(default_factory=empty)
    responses: ReadOnlyDict(str, RefOr("Response")) = Field(default_factory=empty)
    parameters: ReadOnlyDict(str, RefOr("Parameter")) = Field(default_factory=empty)
    examples: ReadOnlyDict(str, RefOr("Example")) = Field(default_factory=empty)
    requestBodies: ReadOnlyDict(str, RefOr("RequestBody")) = Field(default_factory=empty)
    headers: ReadOnlyDict(str, RefOr("Header")) = Field(default_factory=empty)
    links: ReadOnlyDict(str, RefOr("Link")) = Field(default_factory=empty)
    callbacks: ReadOnlyDict(str, RefOr("Callback")) = Field(default_factory=empty)

    @model_validator(mode="after")
    def validate_Components_names(self) -> "Components":
        for section in SECTIONS:
            for name in getattr(self, section).keys():
                check_format(name, "componentName", field_path(section, name))
        return self
