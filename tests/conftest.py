import copy
from pathlib import Path

import pytest
import yaml

from openapi3dsl import dsl

LOADED_FILES = {}
FIXTURES = Path(__file__).parent / "fixtures"


def _get_parsed_yaml(filename):
    """
    Returns a python dict that is a parsed yaml file from the tests/fixtures
    directory.

    :param filename: The filename to load.  Must exist in tests/fixtures and
                     include extension.
    :type filename: str
    """
    if filename not in LOADED_FILES:
        with (FIXTURES / filename).open() as f:
            LOADED_FILES[filename] = yaml.safe_load(f)

    # documents are modified by some tests
    return copy.deepcopy(LOADED_FILES[filename])


@pytest.fixture
def petstore():
    """
    Provides the petstore.yaml document
    """
    yield _get_parsed_yaml("petstore.yaml")


@pytest.fixture
def with_paths_template_duplicate():
    """
    /pets/{id} and /pets/{petId}
    """
    yield _get_parsed_yaml("paths-template-duplicate.yaml")


@pytest.fixture
def with_paths_operationid_duplicate():
    """
    A document with a duplicate operation ID
    """
    yield _get_parsed_yaml("paths-operationid-duplicate.yaml")


@pytest.fixture
def with_paths_parameter_path_optional():
    """
    A path parameter which is not required
    """
    yield _get_parsed_yaml("paths-parameter-path-optional.yaml")


@pytest.fixture
def with_paths_requestbody_get():
    """
    A GET operation with a requestBody
    """
    yield _get_parsed_yaml("paths-requestbody-get.yaml")


@pytest.fixture
def with_paths_callbacks():
    """
    A callback re-using the operationId of its operation
    """
    yield _get_parsed_yaml("paths-callbacks.yaml")


@pytest.fixture
def store_info():
    return dsl.info(title="Store", version="1.0.0")


@pytest.fixture
def ok():
    return {"200": dsl.response(description="ok")}
