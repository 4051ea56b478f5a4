import pytest

from openapi3dsl import validators
from openapi3dsl.errors import (
    MissingRequiredField,
    InvalidFormat,
    InvalidEnumValue,
    MutuallyExclusiveFieldsSet,
    DuplicateKey,
    ConstraintViolation,
)


@pytest.mark.parametrize("value", [None, "", [], {}])
def test_required_missing(value):
    with pytest.raises(MissingRequiredField) as e:
        validators.check_required(value, "title")
    assert e.value.field_path == "title"


@pytest.mark.parametrize("value", ["Store", [1], {"a": 1}, False, 0])
def test_required_present(value):
    assert validators.check_required(value, "x") == value


@pytest.mark.parametrize(
    "kind, value",
    [
        ("url", "https://example.com/terms"),
        ("url", "http://petstore.swagger.io/v1"),
        ("email", "apiteam@swagger.io"),
        ("semver", "3.0.3"),
        ("semver", "1.0.0-alpha.1+build.5"),
        ("referenceExpression", "#/components/schemas/Pet"),
        ("referenceExpression", "#"),
        ("referenceExpression", "definitions.yaml#/Pet"),
        ("referenceExpression", "https://example.com/schemas/pet.json"),
        ("pathTemplate", "/"),
        ("pathTemplate", "/pets/{petId}/photos/{photo_id}"),
        ("pathTemplate", "/files/{name}.{ext}"),
        ("mediaType", "application/json"),
        ("mediaType", "text/*"),
        ("mediaType", "*/*"),
        ("mediaType", "application/json; charset=utf-8"),
        ("statusCode", "200"),
        ("statusCode", "4XX"),
        ("statusCode", "default"),
        ("componentName", "Pet.v1_x-y"),
    ],
)
def test_format_valid(kind, value):
    assert validators.check_format(value, kind, "f") == value


@pytest.mark.parametrize(
    "kind, value",
    [
        ("url", "not a url"),
        ("url", "/relative/path"),
        ("email", "apiteam"),
        ("email", "apiteam@"),
        ("semver", "3.0"),
        ("semver", "v3.0.0"),
        ("referenceExpression", ""),
        ("referenceExpression", "#components/schemas/Pet"),
        ("referenceExpression", "pet.yaml#Pet"),
        ("pathTemplate", "pets"),
        ("pathTemplate", "/pets/{id"),
        ("pathTemplate", "/pets/{}"),
        ("mediaType", "json"),
        ("mediaType", "application/"),
        ("statusCode", "600"),
        ("statusCode", "2xx"),
        ("componentName", "Pet Store"),
    ],
)
def test_format_invalid(kind, value):
    with pytest.raises(InvalidFormat) as e:
        validators.check_format(value, kind, "f")
    assert e.value.kind == kind
    assert e.value.field_path == "f"
    assert e.value.value == value


def test_format_unknown_kind():
    with pytest.raises(ValueError, match="unknown format"):
        validators.check_format("x", "uuid", "f")


def test_enum():
    assert validators.check_enum("path", ["query", "path"], "in") == "path"
    with pytest.raises(InvalidEnumValue) as e:
        validators.check_enum("body", ["query", "path"], "in")
    assert e.value.got == "body"
    assert e.value.allowed == ("query", "path")
    assert "body" in str(e.value)


def test_mutually_exclusive():
    validators.check_mutually_exclusive({"example": 1}, "example", "examples")
    validators.check_mutually_exclusive({}, "example", "examples")
    with pytest.raises(MutuallyExclusiveFieldsSet) as e:
        validators.check_mutually_exclusive({"oneOf": [], "allOf": [], "type": "x"}, "allOf", "oneOf", "anyOf", "not")
    assert e.value.fields == ("allOf", "oneOf")


def test_unique_first_duplicate():
    items = [("a", "query"), ("b", "query"), ("a", "query"), ("b", "query")]
    with pytest.raises(DuplicateKey) as e:
        validators.check_unique(items, lambda x: x, "parameters")
    assert e.value.field_path == "parameters[2]"
    assert e.value.key == ("a", "query")

    validators.check_unique([("a", "query"), ("a", "path")], lambda x: x, "parameters")


def test_range():
    validators.check_range(1, 2, "minLength", "maxLength")
    validators.check_range(None, 2, "minLength", "maxLength")
    validators.check_range(2, 2, "minLength", "maxLength")
    with pytest.raises(ConstraintViolation) as e:
        validators.check_range(3, 2, "minLength", "maxLength")
    assert e.value.field_path == "minLength"


def test_normalize_template():
    assert validators.normalize_template("/pets/{id}") == ("", "pets", "{}")
    assert validators.templates_collide("/pets/{id}", "/pets/{petId}")
    assert validators.templates_collide("/a/{x}/b/{y}", "/a/{p}/b/{q}")
    assert validators.templates_collide("/files/{name}.json", "/files/{f}.json")
    assert not validators.templates_collide("/pets/{id}", "/pets/mine")
    assert not validators.templates_collide("/pets/{id}", "/pets/{id}/photos")
    assert not validators.templates_collide("/pets", "/pets/")


def test_template_names():
    assert validators.template_names("/pets/{petId}/photos/{photoId}") == ("petId", "photoId")
    assert validators.template_names("/pets") == ()
