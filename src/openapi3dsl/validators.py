"""
The checks shared by all constructors.

Every check is a pure function: it returns the checked value or raises one of the
:mod:`openapi3dsl.errors` kinds. Field paths are relative to the object being validated.
"""

from typing import Any, Callable, Collection, Iterable, Hashable, Mapping, Optional, Tuple, TypeVar
import re

import yarl
import email_validator

from .errors import (
    MissingRequiredField,
    InvalidFormat,
    InvalidEnumValue,
    MutuallyExclusiveFieldsSet,
    DuplicateKey,
    ConstraintViolation,
)

T = TypeVar("T")

WILDCARD = "{}"

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
MEDIA_TYPE = re.compile(rf"^(?:\*/\*|{TOKEN}/\*|{TOKEN}/{TOKEN})(?:\s*;\s*{TOKEN}=(?:{TOKEN}|\"[^\"]*\"))*$")

STATUS_CODE = re.compile(r"^(default|[1-5][0-9][0-9]|[1-5]XX)$")

COMPONENT_NAME = re.compile(r"^[a-zA-Z0-9\.\-_]+$")

# FIXME { and } are allowed in parameter name, regex can't handle this e.g. {name}}
PLACEHOLDER = re.compile(r"\{([^{}]*)\}")


def _is_url(value: str) -> bool:
    try:
        url = yarl.URL(value)
    except (ValueError, TypeError):
        return False
    return bool(url.scheme) and bool(url.host)


def _is_email(value: str) -> bool:
    try:
        email_validator.validate_email(value, check_deliverability=False)
    except email_validator.EmailNotValidError:
        return False
    return True


def _is_reference(value: str) -> bool:
    """
    a local JSON pointer (#/components/schemas/Pet) or a URI with an optional pointer fragment
    """
    if not value:
        return False
    if value.startswith("#"):
        return value == "#" or value.startswith("#/")
    try:
        url = yarl.URL(value)
    except (ValueError, TypeError):
        return False
    if not (url.path or url.host):
        return False
    return url.raw_fragment == "" or url.raw_fragment.startswith("/")


def _is_path_template(value: str) -> bool:
    if not value.startswith("/"):
        return False
    stripped = PLACEHOLDER.sub("", value)
    if "{" in stripped or "}" in stripped:
        return False
    return all(len(name) > 0 for name in PLACEHOLDER.findall(value))


FORMATS: Mapping[str, Callable[[str], bool]] = {
    "url": _is_url,
    "email": _is_email,
    "semver": lambda v: SEMVER.match(v) is not None,
    "referenceExpression": _is_reference,
    "pathTemplate": _is_path_template,
    "mediaType": lambda v: MEDIA_TYPE.match(v) is not None,
    "statusCode": lambda v: STATUS_CODE.match(v) is not None,
    "componentName": lambda v: COMPONENT_NAME.match(v) is not None,
}


def is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, Collection)) and len(value) == 0:
        return False
    return True


def check_required(value: T, field: str) -> T:
    if not is_present(value):
        raise MissingRequiredField(field)
    return value


def check_format(value: str, kind: str, field: str) -> str:
    if kind not in FORMATS:
        raise ValueError(f"unknown format {kind}")
    if not isinstance(value, str) or not FORMATS[kind](value):
        raise InvalidFormat(field, kind, value)
    return value


def check_enum(value: T, allowed: Iterable[Any], field: str) -> T:
    allowed = tuple(allowed)
    if value not in allowed:
        raise InvalidEnumValue(field, value, allowed)
    return value


def check_mutually_exclusive(present: Collection[str], *fields: str, path: str = "") -> None:
    """
    at most one of fields may be in present
    """
    given = tuple(f for f in fields if f in present)
    if len(given) > 1:
        raise MutuallyExclusiveFieldsSet(path, given)


def check_unique(items: Iterable[T], key: Callable[[T], Hashable], path: str) -> None:
    """
    report the first repeated key, scanning items in their declared order
    """
    seen = set()
    for idx, item in enumerate(items):
        k = key(item)
        if k in seen:
            raise DuplicateKey(f"{path}[{idx}]", k)
        seen.add(k)


def check_range(lower: Optional[float], upper: Optional[float], field_lower: str, field_upper: str) -> None:
    if lower is None or upper is None:
        return
    if lower > upper:
        raise ConstraintViolation(field_lower, f"{field_lower} ({lower}) exceeds {field_upper} ({upper})")


def template_names(template: str) -> Tuple[str, ...]:
    return tuple(PLACEHOLDER.findall(template))


def normalize_template(template: str) -> Tuple[str, ...]:
    """
    /pets/{id} and /pets/{petId} share the same hierarchy
    """
    return tuple(PLACEHOLDER.sub(WILDCARD, segment) for segment in template.split("/"))


def templates_collide(a: str, b: str) -> bool:
    return normalize_template(a) == normalize_template(b)
