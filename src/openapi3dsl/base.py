from types import MappingProxyType
from typing import Annotated, Any, Dict, FrozenSet, Optional, Mapping, Union
import dataclasses
import re

from pydantic import AfterValidator, BaseModel, Field, ValidationError, WrapSerializer, model_serializer, model_validator

from . import log
from .errors import SpecError, MissingRequiredField, ConstraintViolation

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")
"""canonical order used whenever operations are scanned"""

IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


def field_path(*loc: Union[str, int]) -> str:
    """
    dot/bracket notation - paths[2].get.parameters[0]
    """
    r = ""
    for part in loc:
        if isinstance(part, int):
            r += f"[{part}]"
        elif part == "":
            continue
        elif IDENTIFIER.match(part):
            r += f".{part}" if r else part
        else:
            r += f"[{part!r}]"
    return r


def join_path(prefix: str, suffix: str) -> str:
    if not prefix:
        return suffix
    if not suffix or suffix.startswith("["):
        return prefix + suffix
    return f"{prefix}.{suffix}"


UNION_TAG = "ref:"

_union_tags = set()


def union_tag(name: str) -> str:
    """
    the tag of a union member - it shows up in a pydantic error location and is dropped from field paths
    """
    _union_tags.add(name)
    return f"{UNION_TAG}{name}"


def _is_union_tag(part: Union[str, int]) -> bool:
    return isinstance(part, str) and part.startswith(UNION_TAG) and part[len(UNION_TAG) :] in _union_tags


def ReadOnlyDict(key, value):
    """
    Dict[key, value], stored as a read-only mapping
    """
    return Annotated[
        Dict[key, value],
        AfterValidator(lambda v: MappingProxyType(v)),
        WrapSerializer(lambda v, handler: handler(dict(v))),
    ]


def empty() -> Mapping:
    return MappingProxyType(dict())


def spec_error(e: ValidationError) -> SpecError:
    """
    translate the first error of a ValidationError into a structural error kind with a complete field path
    """
    err = e.errors()[0]
    where = field_path(*[i for i in err["loc"] if not _is_union_tag(i)])

    cause = (err.get("ctx") or {}).get("error")
    if isinstance(cause, SpecError):
        if hasattr(cause, "field_path"):
            return dataclasses.replace(cause, field_path=join_path(where, cause.field_path))
        return cause
    if err["type"] == "missing":
        return MissingRequiredField(where)
    if err["type"] == "extra_forbidden":
        return ConstraintViolation(where, "unknown field")
    return ConstraintViolation(where, err["msg"])


class ObjectBase(BaseModel):
    """
    The base class for all document objects.

    Objects are immutable, a "modification" creates a new object.
    """

    model_config = dict(arbitrary_types_allowed=False, extra="forbid", frozen=True, populate_by_name=True)

    @classmethod
    def build(cls, values: Optional[Mapping[str, Any]] = None, **kwargs):
        """
        Validate values and kwargs (kwargs win) into a new object.

        :raises SpecError: the first violated invariant
        """
        log.init()
        data = dict(values or {})
        data.update(kwargs)
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise spec_error(e) from e

    def provided(self) -> Dict[str, Any]:
        """
        the fields given at construction which are not None, by their OpenAPI name
        """
        r = dict()
        for name, info in type(self).model_fields.items():
            if name not in self.model_fields_set:
                continue
            if (value := getattr(self, name)) is None:
                continue
            r[info.alias or name] = value
        return r

    def given(self) -> FrozenSet[str]:
        """
        the fields given at construction, by their OpenAPI name - an explicit None counts as given
        """
        fields = type(self).model_fields
        return frozenset(fields[name].alias or name for name in self.model_fields_set)


class ObjectExtended(ObjectBase):
    extensions: Optional[ReadOnlyDict(str, Any)] = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def validate_ObjectExtended_extensions(cls, values):
        """
        https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#specification-extensions
        """
        if values is None:
            return None
        if not isinstance(values, dict):
            return values
        e = dict()
        r = dict()
        for k, v in values.items():
            if isinstance(k, str) and k.startswith("x-"):
                e[k[2:]] = v
            else:
                r[k] = v
        if len(e):
            if "extensions" in r:
                raise ConstraintViolation("extensions", "extensions given as x- fields and extensions")
            r["extensions"] = e
        return r

    @model_serializer(mode="wrap")
    def serialize_ObjectExtended_extensions(self, handler):
        r = handler(self)
        if isinstance(r, dict) and isinstance(r.get("extensions"), dict):
            e = r.pop("extensions")
            r.update({f"x-{k}": v for k, v in e.items()})
        return r


class ReferenceBase:
    pass

