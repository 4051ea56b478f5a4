from typing import Optional

from pydantic import Field, model_validator

from .base import ObjectExtended
from .validators import check_required, check_format


class Contact(ObjectExtended):
    """
    Contact object belonging to an Info object, as described `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#contact-object
    """

    name: str = Field(...)
    url: Optional[str] = Field(default=None)
    email: str = Field(...)

    @model_validator(mode="after")
    def validate_Contact(self) -> "Contact":
        check_required(self.name, "name")
        if self.url is not None:
            check_format(self.url, "url", "url")
        check_format(self.email, "email", "email")
        return self


class License(ObjectExtended):
    """
    License object belonging to an Info object, as described `here`_

    .. _here: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#license-object
    """

    name: str = Field(...)
    url: Optional[str] = Field(default=None)

    @model_validator(mode="after")
    def validate_License(self) -> "License":
        check_required(self.name, "name")
        if self.url is not None:
            check_format(self.url, "url", "url")
        return self


class Info(ObjectExtended):
    """
    An OpenAPI Info object, as defined in the `OpenAPI Specification`_.

    .. _OpenAPI Specification: https://github.com/OAI/OpenAPI-Specification/blob/main/versions/3.0.3.md#info-object
    """

    title: str = Field(...)
    description: Optional[str] = Field(default=None)
    termsOfService: Optional[str] = Field(default=None)
    contact: Optional[Contact] = Field(default=None)
    license: Optional[License] = Field(default=None)
    version: str = Field(...)

    @model_validator(mode="after")
    def validate_Info(self) -> "Info":
        check_required(self.title, "title")
        check_required(self.version, "version")
        if self.termsOfService is not None:
            check_format(self.termsOfService, "url", "termsOfService")
        return self
