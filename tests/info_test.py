import pytest

from openapi3dsl import dsl, Info, Contact
from openapi3dsl.errors import MissingRequiredField, InvalidFormat, MutuallyExclusiveFieldsSet, ConstraintViolation


def test_info_title_empty():
    with pytest.raises(MissingRequiredField) as e:
        dsl.info(title="", version="1.0.0")
    assert e.value.field_path == "title"


def test_info_title_missing():
    with pytest.raises(MissingRequiredField) as e:
        dsl.info(version="1.0.0")
    assert e.value.field_path == "title"


def test_info():
    i = dsl.info(title="Store", version="1.0.0")
    assert isinstance(i, Info)
    assert i.title == "Store"
    assert i.contact is None

    with pytest.raises(MissingRequiredField) as e:
        dsl.info(title="Store", version="")
    assert e.value.field_path == "version"


def test_info_mapping_and_kwargs():
    i = dsl.info({"title": "Store", "version": "0.1"}, version="1.0.0")
    assert i.version == "1.0.0"


def test_info_immutable(store_info):
    with pytest.raises(Exception):
        store_info.title = "Shop"
    other = store_info.model_copy(update={"title": "Shop"})
    assert other.title == "Shop"
    assert store_info.title == "Store"


def test_info_terms_of_service():
    dsl.info(title="Store", version="1", termsOfService="https://example.com/terms")
    with pytest.raises(InvalidFormat) as e:
        dsl.info(title="Store", version="1", termsOfService="terms")
    assert e.value.field_path == "termsOfService"
    assert e.value.kind == "url"


def test_info_nested_contact():
    with pytest.raises(InvalidFormat) as e:
        dsl.info(title="Store", version="1", contact={"name": "Support", "email": "support"})
    assert e.value.field_path == "contact.email"
    assert e.value.kind == "email"


def test_contact():
    c = dsl.contact(name="Support", email="support@example.com", url="https://example.com/support")
    assert isinstance(c, Contact)

    with pytest.raises(InvalidFormat) as e:
        dsl.contact(name="Support", email="support@example.com", url="example")
    assert e.value.field_path == "url"

    with pytest.raises(MissingRequiredField) as e:
        dsl.contact(name="Support")
    assert e.value.field_path == "email"


def test_license():
    assert dsl.license(name="MIT").url is None
    dsl.license(name="MIT", url="https://opensource.org/licenses/MIT")
    with pytest.raises(InvalidFormat):
        dsl.license(name="MIT", url="MIT")
    with pytest.raises(MissingRequiredField):
        dsl.license(name="")


def test_external_docs():
    d = dsl.external_docs(url="https://example.com/docs", description="more")
    assert d.description == "more"
    with pytest.raises(InvalidFormat):
        dsl.external_docs(url="docs")
    with pytest.raises(MissingRequiredField):
        dsl.external_docs(description="more")


def test_tag():
    t = dsl.tag(name="pets", externalDocs=dsl.external_docs(url="https://example.com/pets"))
    assert t.externalDocs.url == "https://example.com/pets"
    with pytest.raises(MissingRequiredField):
        dsl.tag(name="")


def test_example():
    dsl.example(summary="a cat", value={"name": "Tom"})
    dsl.example(externalValue="https://example.com/cat.json")
    with pytest.raises(MutuallyExclusiveFieldsSet) as e:
        dsl.example(value={"name": "Tom"}, externalValue="https://example.com/cat.json")
    assert e.value.fields == ("value", "externalValue")

    with pytest.raises(MutuallyExclusiveFieldsSet) as e:
        dsl.example(value=None, externalValue="https://example.com/cat.json")
    assert e.value.fields == ("value", "externalValue")


def test_reference():
    r = dsl.reference("#/components/schemas/Pet")
    assert r.ref == "#/components/schemas/Pet"
    assert dsl.reference(**{"$ref": "pet.yaml"}).ref == "pet.yaml"

    with pytest.raises(MissingRequiredField) as e:
        dsl.reference("")
    assert e.value.field_path == "$ref"

    with pytest.raises(InvalidFormat) as e:
        dsl.reference("#components")
    assert e.value.kind == "referenceExpression"


def test_extensions():
    i = dsl.info({"title": "Store", "version": "1", "x-audience": "internal"})
    assert i.extensions == {"audience": "internal"}
    with pytest.raises(TypeError):
        i.extensions["audience"] = "public"
    assert i.model_dump(by_alias=True, exclude_unset=True)["x-audience"] == "internal"

    with pytest.raises(ConstraintViolation):
        dsl.info({"title": "Store", "version": "1", "x-audience": "internal", "extensions": {}})


def test_unknown_field():
    with pytest.raises(ConstraintViolation) as e:
        dsl.info(title="Store", version="1", summary="not in 3.0")
    assert e.value.field_path == "summary"
