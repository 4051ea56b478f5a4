"""
One factory per document object.

Each factory takes an optional mapping and keyword arguments - keywords win - using either the
OpenAPI names (``in``, ``$ref``, ``schema``, ``not``) or the Python field names (``in_``, ``ref``,
``schema_``, ``not_``), and returns the validated, immutable object::

    api(
        info=info(title="Store", version="1.0.0"),
        paths=[path(template="/pets/{id}", get=operation(operationId="getPet", ...))],
    )

:raises SpecError: the first violated invariant
"""

from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional

from pydantic import ValidationError

from . import log
from .base import spec_error
from .components import Components
from .errors import SpecError
from .example import Example
from .general import ExternalDocs, Reference
from .info import Contact, License, Info
from .media import Encoding, MediaType
from .parameter import Parameter, Header
from .paths import RequestBody, Link, Response, Operation, PathItem, Path, Callback
from .root import Api
from .schemas import Discriminator, Schema
from .servers import ServerVariable, Server
from .tag import Tag


def contact(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Contact:
    """Contact information for the exposed API."""
    return Contact.build(values, **kwargs)


def license(values: Optional[Mapping[str, Any]] = None, **kwargs) -> License:
    """License information for the exposed API."""
    return License.build(values, **kwargs)


def info(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Info:
    """Provides metadata about the API."""
    return Info.build(values, **kwargs)


def server_variable(values: Optional[Mapping[str, Any]] = None, **kwargs) -> ServerVariable:
    """A Server Variable for server URL template substitution."""
    return ServerVariable.build(values, **kwargs)


def server(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Server:
    return Server.build(values, **kwargs)


def external_docs(values: Optional[Mapping[str, Any]] = None, **kwargs) -> ExternalDocs:
    return ExternalDocs.build(values, **kwargs)


def tag(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Tag:
    return Tag.build(values, **kwargs)


def example(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Example:
    return Example.build(values, **kwargs)


def reference(ref: Optional[str] = None, **kwargs) -> Reference:
    """reference("#/components/schemas/Pet")"""
    if ref is not None:
        kwargs["$ref"] = ref
    return Reference.build(None, **kwargs)


def parameter(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Parameter:
    return Parameter.build(values, **kwargs)


def header(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Header:
    return Header.build(values, **kwargs)


def schema(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Schema:
    return Schema.build(values, **kwargs)


def discriminator(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Discriminator:
    return Discriminator.build(values, **kwargs)


def media_type(values: Optional[Mapping[str, Any]] = None, **kwargs) -> MediaType:
    return MediaType.build(values, **kwargs)


def encoding(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Encoding:
    return Encoding.build(values, **kwargs)


def request_body(values: Optional[Mapping[str, Any]] = None, **kwargs) -> RequestBody:
    return RequestBody.build(values, **kwargs)


def response(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Response:
    return Response.build(values, **kwargs)


def link(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Link:
    return Link.build(values, **kwargs)


def operation(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Operation:
    return Operation.build(values, **kwargs)


def callback(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Callback:
    """callback({"{$request.body#/url}": path_item(post=...)})"""
    log.init()
    data = dict(values or {})
    data.update(kwargs)
    try:
        return Callback.model_validate(data)
    except ValidationError as e:
        raise spec_error(e) from e


def path_item(values: Optional[Mapping[str, Any]] = None, **kwargs) -> PathItem:
    return PathItem.build(values, **kwargs)


def path(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Path:
    """
    A relative path to an individual endpoint. The template MUST begin with a slash.
    """
    return Path.build(values, **kwargs)


def components(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Components:
    return Components.build(values, **kwargs)


def api(values: Optional[Mapping[str, Any]] = None, **kwargs) -> Api:
    """
    This is the root document object of the OpenAPI document.

    Runs the document wide checks, advisory findings are available as :attr:`Api.findings`.
    """
    return Api.build(values, **kwargs)


def document(data: Mapping[str, Any]) -> Api:
    """
    build an Api from a parsed OpenAPI document, the paths as Paths Object
    """
    return Api.build(data)


def as_mapping(api: Api) -> Dict[str, Any]:
    """
    the plain data of a document, keyed by the OpenAPI names - the inverse of :func:`document`
    """
    r = {"openapi": api.openapi}
    r.update(api.model_dump(mode="json", by_alias=True, exclude_unset=True))
    paths = dict()
    for p in r.pop("paths", []):
        template = p.pop("template")
        paths[template] = p
    r["paths"] = paths
    return r


class Result(NamedTuple):
    value: Optional[Any]
    error: Optional[SpecError]

    @property
    def ok(self) -> bool:
        return self.error is None


def result(factory: Callable[..., Any], values: Optional[Mapping[str, Any]] = None, **kwargs) -> Result:
    """
    run a factory, returning the failure instead of raising it::

        r = result(info, title="", version="1.0.0")
        assert r.error == MissingRequiredField("title")
    """
    try:
        return Result(factory(values, **kwargs), None)
    except SpecError as e:
        return Result(None, e)
