from typing import Union, List, Mapping, Optional, Any, Iterator, Tuple
import logging

from pydantic import Field, RootModel, field_validator, model_validator

from .base import ObjectExtended, HTTP_METHODS, ReadOnlyDict, empty, field_path
from .errors import DuplicateKey, MissingRequiredField
from .general import ExternalDocs, Reference, RefOr
from .media import MediaType, check_content
from .parameter import Header, Parameter  # noqa: F401 - resolves RefOr("Header"), RefOr("Parameter")
from .servers import Server
from .validators import (
    check_format,
    check_mutually_exclusive,
    check_required,
    check_unique,
    template_names,
)

log = logging.getLogger("openapi3dsl.paths")

ParameterOrReference = RefOr("Parameter")

SecurityRequirement = ReadOnlyDict(str, Tuple[str, ...])


def parameter_identity(p: Union[Parameter, Reference]) -> Tuple[str, str]:
    """
    Parameter objects are identified by name and location, References by their target
    """
    if isinstance(p, Reference):
        return ("$ref", p.ref)
    return p.identity()


class RequestBody(ObjectExtended):
    """
    A `RequestBody`_ object describes a single request body.

    .. _RequestBody: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#request-body-object
    """

    description: Optional[str] = Field(default=None)
    content: ReadOnlyDict(str, MediaType) = Field(...)
    required: bool = Field(default=False)

    @model_validator(mode="after")
    def validate_RequestBody(self) -> "RequestBody":
        check_required(self.content, "content")
        check_content(self.content)
        return self


class Link(ObjectExtended):
    """
    A `Link Object`_ describes a single Link from an API Operation Response to an API Operation Request

    .. _Link Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#link-object
    """

    operationRef: Optional[str] = Field(default=None)
    operationId: Optional[str] = Field(default=None)
    parameters: ReadOnlyDict(str, Any) = Field(default_factory=empty)
    requestBody: Optional[Any] = Field(default=None)
    description: Optional[str] = Field(default=None)
    server: Optional[Server] = Field(default=None)

    @model_validator(mode="after")
    def validate_Link_operation(self) -> "Link":
        # operationId and operationRef are mutually exclusive, one of them must be specified
        check_mutually_exclusive(self.given(), "operationRef", "operationId")
        present = self.provided()
        if "operationRef" not in present and "operationId" not in present:
            raise MissingRequiredField("operationId")
        if self.operationRef is not None:
            check_format(self.operationRef, "referenceExpression", "operationRef")
        return self


class Response(ObjectExtended):
    """
    A `Response Object`_ describes a single response from an API Operation,
    including design-time, static links to operations based on the response.

    .. _Response Object: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#response-object
    """

    description: str = Field(...)
    headers: ReadOnlyDict(str, RefOr("Header")) = Field(default_factory=empty)
    content: ReadOnlyDict(str, MediaType) = Field(default_factory=empty)
    links: ReadOnlyDict(str, RefOr("Link")) = Field(default_factory=empty)

    @model_validator(mode="after")
    def validate_Response(self) -> "Response":
        check_content(self.content)
        return self


class Operation(ObjectExtended):
    """
    An Operation object as defined `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#operation-object
    """

    tags: Optional[Tuple[str, ...]] = Field(default=None)
    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    externalDocs: Optional[ExternalDocs] = Field(default=None)
    operationId: Optional[str] = Field(default=None)
    parameters: Tuple[ParameterOrReference, ...] = Field(default_factory=tuple)
    requestBody: Optional[RefOr("RequestBody")] = Field(default=None)
    responses: ReadOnlyDict(str, RefOr("Response")) = Field(default_factory=empty)
    callbacks: ReadOnlyDict(str, RefOr("Callback")) = Field(default_factory=empty)
    deprecated: Optional[bool] = Field(default=None)
    security: Optional[Tuple[SecurityRequirement, ...]] = Field(default=None)
    servers: Optional[Tuple[Server, ...]] = Field(default=None)

    @field_validator("responses", mode="before")
    @classmethod
    def validate_Operation_status_codes(cls, value):
        # YAML reads 200: as int
        if isinstance(value, Mapping):
            return {str(k): v for k, v in value.items()}
        return value

    @model_validator(mode="after")
    def validate_Operation(self) -> "Operation":
        check_unique(self.parameters, parameter_identity, "parameters")
        for code in self.responses.keys():
            check_format(code, "statusCode", field_path("responses", code))
        return self


class PathItem(ObjectExtended):
    """
    A Path Item, as defined `here`_.
    Describes the operations available on a single path.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#path-item-object
    """

    ref: Optional[str] = Field(default=None, alias="$ref")
    summary: Optional[str] = Field(default=None)
    description: Optional[str] = Field(default=None)
    get: Optional[Operation] = Field(default=None)
    put: Optional[Operation] = Field(default=None)
    post: Optional[Operation] = Field(default=None)
    delete: Optional[Operation] = Field(default=None)
    options: Optional[Operation] = Field(default=None)
    head: Optional[Operation] = Field(default=None)
    patch: Optional[Operation] = Field(default=None)
    trace: Optional[Operation] = Field(default=None)
    servers: Optional[Tuple[Server, ...]] = Field(default=None)
    parameters: Tuple[ParameterOrReference, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def validate_PathItem(self) -> "PathItem":
        if self.ref is not None:
            check_format(self.ref, "referenceExpression", "$ref")
        check_unique(self.parameters, parameter_identity, "parameters")

        shared = frozenset(map(parameter_identity, self.parameters))
        for method, op in self.operations():
            for p in op.parameters:
                if (i := parameter_identity(p)) in shared:
                    log.debug(f"{method} overrides path parameter {i}")
        return self

    def operations(self) -> Iterator[Tuple[str, Operation]]:
        """
        the operations defined, in canonical method order
        """
        for method in HTTP_METHODS:
            if (op := getattr(self, method)) is not None:
                yield method, op

    def effective_parameters(self, method: str) -> List[Union[Parameter, Reference]]:
        """
        the path level parameters merged with the operations parameters, the operation wins
        """
        op: Optional[Operation] = getattr(self, method)
        if op is None:
            raise KeyError(method)
        overrides = frozenset(map(parameter_identity, op.parameters))
        r = [p for p in self.parameters if parameter_identity(p) not in overrides]
        r.extend(op.parameters)
        return r


class Path(PathItem):
    """
    A PathItem at its relative path, the template MUST begin with a slash.

    Templated paths with the same hierarchy but different templated names MUST NOT exist as they are identical.
    """

    template: str = Field(...)

    @model_validator(mode="after")
    def validate_Path(self) -> "Path":
        check_format(self.template, "pathTemplate", "template")
        seen = set()
        for name in template_names(self.template):
            if name in seen:
                raise DuplicateKey("template", name)
            seen.add(name)
        return self


class Callback(RootModel):
    """
    A map of possible out-of band callbacks related to the parent operation.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#callback-object
    """

    model_config = dict(frozen=True)

    root: ReadOnlyDict(str, PathItem)

    @model_validator(mode="after")
    def validate_Callback(self) -> "Callback":
        for expression in self.root.keys():
            check_required(expression, "")
        return self

    def items(self):
        return self.root.items()
