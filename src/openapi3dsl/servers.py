from typing import Optional, Dict, Mapping, Tuple
import re

from pydantic import Field, model_validator

from .base import ObjectExtended, ReadOnlyDict, empty, field_path
from .errors import MissingRequiredField, ConstraintViolation, InvalidEnumValue
from .validators import check_enum, check_required

VARIABLE = re.compile(r"\{([^\}]+)\}")


class ServerVariable(ObjectExtended):
    """
    A ServerVariable object as defined `here`_.

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#server-variable-object
    """

    enum: Optional[Tuple[str, ...]] = Field(default=None)
    default: str = Field(...)
    description: Optional[str] = Field(default=None)

    @model_validator(mode="after")
    def validate_ServerVariable(self) -> "ServerVariable":
        if self.enum is not None:
            check_required(self.enum, "enum")
            # default value must be in enum
            check_enum(self.default, self.enum, "default")
        return self


class Server(ObjectExtended):
    """
    The Server object, as described `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#server-object
    """

    url: str = Field(...)
    description: Optional[str] = Field(default=None)
    variables: ReadOnlyDict(str, ServerVariable) = Field(default_factory=empty)

    @model_validator(mode="after")
    def validate_server_url_parameters(self) -> "Server":
        check_required(self.url, "url")
        names = VARIABLE.findall(self.url)
        for name in names:
            if name not in self.variables:
                raise MissingRequiredField(field_path("variables", name))
        for name in self.variables.keys():
            if name not in names:
                raise ConstraintViolation(field_path("variables", name), f"Server Variable {name} not used in {self.url}")
        return self

    def validate_parameter_enum(self, parameters: Mapping[str, str]):
        for name, value in parameters.items():
            if (v := self.variables.get(name)) is None:
                raise ConstraintViolation(field_path("variables", name), f"Server Variable {name} unknown")
            if v.enum is not None and value not in v.enum:
                raise InvalidEnumValue(field_path("variables", name), value, tuple(v.enum))

    def createUrl(self, variables: Optional[Mapping[str, str]] = None) -> str:
        """
        expand the url template, using the default of each variable unless given
        """
        variables = variables or dict()
        self.validate_parameter_enum(variables)
        values: Dict[str, str] = dict(map(lambda x: (x[0], x[1].default), self.variables.items()))
        values.update(variables)
        return VARIABLE.sub(lambda m: values[m.group(1)], self.url)
