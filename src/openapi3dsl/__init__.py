from .components import Components
from .example import Example
from .general import ExternalDocs, Reference
from .info import Contact, License, Info
from .media import Encoding, MediaType
from .parameter import Parameter, Header
from .paths import RequestBody, Link, Response, Operation, PathItem, Path, Callback
from .root import Api
from .schemas import Composition, Discriminator, Schema
from .servers import ServerVariable, Server
from .tag import Tag

from .errors import (
    SpecError,
    MissingRequiredField,
    InvalidFormat,
    InvalidEnumValue,
    MutuallyExclusiveFieldsSet,
    DuplicateKey,
    DuplicatePathTemplate,
    DuplicateOperationId,
    ConstraintViolation,
    Finding,
    WarningBase,
    RequestBodyWarning,
    PathParameterWarning,
    ResponsesWarning,
)
from . import dsl

__all__ = [
    "Api",
    "Callback",
    "Components",
    "Composition",
    "Contact",
    "Discriminator",
    "Encoding",
    "Example",
    "ExternalDocs",
    "Header",
    "Info",
    "License",
    "Link",
    "MediaType",
    "Operation",
    "Parameter",
    "Path",
    "PathItem",
    "Reference",
    "RequestBody",
    "Response",
    "Schema",
    "Server",
    "ServerVariable",
    "Tag",
    "SpecError",
    "MissingRequiredField",
    "InvalidFormat",
    "InvalidEnumValue",
    "MutuallyExclusiveFieldsSet",
    "DuplicateKey",
    "DuplicatePathTemplate",
    "DuplicateOperationId",
    "ConstraintViolation",
    "Finding",
    "WarningBase",
    "RequestBodyWarning",
    "PathParameterWarning",
    "ResponsesWarning",
    "dsl",
]


def __init():
    r = dict()
    CLASSES = [
        Components,
        Example,
        ExternalDocs,
        Reference,
        Contact,
        License,
        Info,
        Encoding,
        MediaType,
        Parameter,
        Header,
        RequestBody,
        Link,
        Response,
        Operation,
        PathItem,
        Path,
        Callback,
        Discriminator,
        Schema,
        ServerVariable,
        Server,
        Tag,
        Api,
    ]
    for i in CLASSES:
        r[i.__name__] = i
    for i in CLASSES:
        i.model_rebuild(_types_namespace=r)


__init()
