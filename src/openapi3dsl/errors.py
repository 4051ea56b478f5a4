from typing import Any, Tuple
import dataclasses


class ErrorBase(Exception):
    pass


class WarningBase(UserWarning):
    pass


class RequestBodyWarning(WarningBase):
    """
    A requestBody is defined on an HTTP method without defined request body semantics.
    Consumers SHALL ignore it.
    """


class PathParameterWarning(WarningBase):
    """
    The path template placeholders and the path parameters do not match up
    """


class ResponsesWarning(WarningBase):
    """
    An Operation does not declare any response
    """


class SpecError(ErrorBase, ValueError):
    """
    Base for every structural violation found while constructing a document.

    Errors raised by validators carry a field path relative to the object being validated,
    the construction boundary prefixes the location of that object within the document.
    """

    def __str__(self):
        return self.message

    @property
    def message(self) -> str:
        return self.__class__.__name__


@dataclasses.dataclass
class MissingRequiredField(SpecError):
    field_path: str

    @property
    def message(self):
        return f"Missing required field {self.field_path}"


@dataclasses.dataclass
class InvalidFormat(SpecError):
    field_path: str
    kind: str
    value: Any = None

    @property
    def message(self):
        return f"Invalid {self.kind} in {self.field_path}: {self.value!r}"


@dataclasses.dataclass
class InvalidEnumValue(SpecError):
    field_path: str
    got: Any
    allowed: Tuple[Any, ...]

    @property
    def message(self):
        return f"Invalid value {self.got!r} for {self.field_path}, allowed: {', '.join(map(repr, self.allowed))}"


@dataclasses.dataclass
class MutuallyExclusiveFieldsSet(SpecError):
    field_path: str
    fields: Tuple[str, ...]

    @property
    def message(self):
        where = f" in {self.field_path}" if self.field_path else ""
        return f"Mutually exclusive fields {', '.join(self.fields)} set{where}"


@dataclasses.dataclass
class DuplicateKey(SpecError):
    field_path: str
    key: Any

    @property
    def message(self):
        return f"Duplicate key {self.key!r} in {self.field_path}"


@dataclasses.dataclass
class ConstraintViolation(SpecError):
    field_path: str
    reason: str

    @property
    def message(self):
        return f"{self.field_path}: {self.reason}" if self.field_path else self.reason


@dataclasses.dataclass
class DuplicatePathTemplate(SpecError):
    """
    Templated paths with the same hierarchy but different templated names MUST NOT exist as they are identical.
    """

    path_a: str
    path_b: str

    @property
    def message(self):
        return f"Duplicate path template {self.path_b} (same hierarchy as {self.path_a})"


@dataclasses.dataclass
class DuplicateOperationId(SpecError):
    """
    The operationId is not unique
    """

    operation_id: str
    location_a: str
    location_b: str

    @property
    def message(self):
        return f"Duplicate operationId {self.operation_id} in {self.location_a} and {self.location_b}"


@dataclasses.dataclass(frozen=True)
class Finding:
    """
    An advisory finding attached to a successfully constructed document
    """

    category: type
    location: str
    message: str

    def __str__(self):
        return f"{self.location}: {self.message}"
