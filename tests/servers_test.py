import pytest

from openapi3dsl import dsl, Server, ServerVariable
from openapi3dsl.errors import MissingRequiredField, InvalidEnumValue, ConstraintViolation


def test_server_variable_missing():
    with pytest.raises(MissingRequiredField) as e:
        dsl.server(url="https://{env}.example.com")
    assert e.value.field_path == "variables.env"


def test_server_variable():
    s = dsl.server(url="https://{env}.example.com", variables={"env": {"default": "api"}})
    assert isinstance(s, Server)
    assert isinstance(s.variables["env"], ServerVariable)
    assert s.createUrl() == "https://api.example.com"


def test_server_variable_unused():
    with pytest.raises(ConstraintViolation) as e:
        dsl.server(url="https://api.example.com", variables={"env": dsl.server_variable(default="api")})
    assert e.value.field_path == "variables.env"


def test_server_relative():
    assert dsl.server(url="/v1").url == "/v1"
    with pytest.raises(MissingRequiredField):
        dsl.server(url="")


def test_server_variable_enum():
    v = dsl.server_variable(enum=["v1", "v2"], default="v1", description="api version")
    assert v.enum == ("v1", "v2")

    with pytest.raises(InvalidEnumValue) as e:
        dsl.server_variable(enum=["v1", "v2"], default="v3")
    assert e.value.field_path == "default"
    assert e.value.allowed == ("v1", "v2")

    with pytest.raises(MissingRequiredField) as e:
        dsl.server_variable(enum=[], default="v3")
    assert e.value.field_path == "enum"

    with pytest.raises(MissingRequiredField) as e:
        dsl.server_variable(enum=["v1"])
    assert e.value.field_path == "default"


def test_server_variable_nested_enum():
    with pytest.raises(InvalidEnumValue) as e:
        dsl.server(url="https://{env}.example.com", variables={"env": {"default": "dev", "enum": ["api", "staging"]}})
    assert e.value.field_path == "variables.env.default"


def test_server_create_url():
    s = dsl.server(
        url="{scheme}://petstore.example.com/{basePath}",
        variables={
            "scheme": {"default": "https", "enum": ["https", "http"]},
            "basePath": {"default": "v1"},
        },
    )
    assert s.createUrl() == "https://petstore.example.com/v1"
    assert s.createUrl({"scheme": "http", "basePath": "v2"}) == "http://petstore.example.com/v2"

    with pytest.raises(InvalidEnumValue):
        s.createUrl({"scheme": "ftp"})

    with pytest.raises(ConstraintViolation):
        s.createUrl({"port": "8443"})


def test_server_read_only_collections():
    s = dsl.server(url="https://{env}.example.com", variables={"env": {"default": "api", "enum": ["api", "staging"]}})
    with pytest.raises(TypeError):
        s.variables["region"] = dsl.server_variable(default="eu")
    with pytest.raises(AttributeError):
        s.variables["env"].enum.append("prod")
