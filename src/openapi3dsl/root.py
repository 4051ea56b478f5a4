from typing import Any, Iterator, List, Mapping, Optional, Sequence, Tuple, Union
import logging
import warnings

from pydantic import Field, field_validator, model_validator

from .base import ObjectExtended, field_path, join_path
from .components import Components
from .errors import (
    DuplicatePathTemplate,
    DuplicateOperationId,
    Finding,
    PathParameterWarning,
    RequestBodyWarning,
    ResponsesWarning,
)
from .general import ExternalDocs, Reference
from .info import Info
from .parameter import Parameter, _In
from .paths import Path, PathItem, Operation, SecurityRequirement
from .servers import Server
from .tag import Tag
from .validators import check_enum, check_format, check_unique, normalize_template, template_names

log = logging.getLogger("openapi3dsl.Api")

OPENAPI_VERSIONS = ("3.0.0", "3.0.1", "3.0.2", "3.0.3", "3.0.4")

# RFC 7231 does not define semantics for a request body of these
BODILESS = frozenset(["get", "head", "delete", "trace"])


def _walk(location: str, item: PathItem) -> Iterator[Tuple[str, PathItem, str, Operation]]:
    for method, op in item.operations():
        where = join_path(location, method)
        yield where, item, method, op
        for name, callback in op.callbacks.items():
            if isinstance(callback, Reference):
                continue
            for expression, pi in callback.items():
                yield from _walk(join_path(where, field_path("callbacks", name, expression)), pi)


class Api(ObjectExtended):
    """
    This class represents the root of the OpenAPI document, as defined
    in the `OpenAPI Specification`_

    .. _OpenAPI Specification: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#openapi-object
    """

    openapi: str = Field(default="3.0.3")
    info: Info = Field(...)
    servers: Tuple[Server, ...] = Field(default_factory=tuple)
    paths: Tuple[Path, ...] = Field(default_factory=tuple)
    components: Optional[Components] = Field(default=None)
    security: Optional[Tuple[SecurityRequirement, ...]] = Field(default=None)
    tags: Tuple[Tag, ...] = Field(default_factory=tuple)
    externalDocs: Optional[ExternalDocs] = Field(default=None)

    @field_validator("paths", mode="before")
    @classmethod
    def validate_Api_paths(cls, value: Any):
        """
        accept the Paths Object form - {template: PathItem}
        """
        if not isinstance(value, Mapping):
            return value
        r = []
        for template, item in value.items():
            if item is None:
                item = dict()
            elif isinstance(item, PathItem):
                item = {name: getattr(item, name) for name in item.model_fields_set}
            r.append({**item, "template": template})
        return r

    @model_validator(mode="after")
    def validate_Api(self) -> "Api":
        check_format(self.openapi, "semver", "openapi")
        check_enum(self.openapi, OPENAPI_VERSIONS, "openapi")
        check_unique(self.tags, lambda t: t.name, "tags")

        self._validate_path_templates()
        self._validate_operationids()

        for finding in self.findings:
            log.warning(str(finding))
            warnings.warn(str(finding), finding.category, stacklevel=2)
        return self

    def _validate_path_templates(self):
        seen = dict()
        for path in self.paths:
            if (k := normalize_template(path.template)) in seen:
                raise DuplicatePathTemplate(seen[k], path.template)
            seen[k] = path.template

    def _validate_operationids(self):
        seen = dict()
        for location, _, _, op in self.operations():
            if not op.operationId:
                continue
            if (other := seen.get(op.operationId)) is not None:
                raise DuplicateOperationId(op.operationId, other, location)
            seen[op.operationId] = location

    def operations(self) -> Iterator[Tuple[str, PathItem, str, Operation]]:
        """
        every Operation - paths in declaration order, methods in canonical order, callbacks after their operation

        :returns: (location, PathItem, method, Operation)
        """
        for idx, path in enumerate(self.paths):
            yield from _walk(field_path("paths", idx), path)

    def operation(self, operationId: str) -> Operation:
        for _, _, _, op in self.operations():
            if op.operationId == operationId:
                return op
        raise KeyError(operationId)

    def path(self, template: str) -> Path:
        for path in self.paths:
            if path.template == template:
                return path
        raise KeyError(template)

    @property
    def findings(self) -> List[Finding]:
        """
        advisory findings, the document is valid nonetheless
        """
        r = []
        for location, _, method, op in self.operations():
            if op.requestBody is not None and method in BODILESS:
                r.append(
                    Finding(
                        RequestBodyWarning,
                        join_path(location, "requestBody"),
                        f"requestBody on {method} SHALL be ignored by consumers",
                    )
                )
            if not op.responses:
                r.append(Finding(ResponsesWarning, join_path(location, "responses"), "no responses declared"))

        for idx, path in enumerate(self.paths):
            r.extend(self._path_parameter_findings(field_path("paths", idx), path))
        return r

    @staticmethod
    def _path_parameter_findings(location: str, path: Path) -> Iterator[Finding]:
        names = frozenset(template_names(path.template))

        def check(where: str, parameters: Sequence[Union[Parameter, Reference]]):
            declared = frozenset(p.name for p in parameters if isinstance(p, Parameter) and p.in_ == _In.path)
            if r := declared - names:
                yield Finding(
                    PathParameterWarning,
                    where,
                    f"Parameter name{'s' if len(r) > 1 else ''} not found in path: {', '.join(sorted(r))}",
                )
            # a Reference may be any of the missing
            if any(isinstance(p, Reference) for p in parameters):
                return
            if r := names - declared:
                yield Finding(
                    PathParameterWarning,
                    where,
                    f"Parameter name{'s' if len(r) > 1 else ''} not found in parameters: {', '.join(sorted(r))}",
                )

        methods = [method for method, _ in path.operations()]
        if not methods:
            if path.ref is None:
                yield from check(location, path.parameters)
            return
        for method in methods:
            yield from check(join_path(location, method), path.effective_parameters(method))
