import sys
from pathlib import Path

import pytest

# Ensure the project src directory is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from graphar_schema import (  # noqa: E402
    DataType,
    FileType,
    InfoVersion,
    Property,
    PropertyGroup,
    Type,
)


@pytest.fixture
def version():
    return InfoVersion(1)


@pytest.fixture
def id_property():
    return Property("id", DataType(Type.INT32), True)


@pytest.fixture
def name_properties():
    return [
        Property("firstName", DataType(Type.STRING), False),
        Property("lastName", DataType(Type.STRING), False),
    ]


@pytest.fixture
def group1(id_property):
    return PropertyGroup([id_property], FileType.CSV)


@pytest.fixture
def group2(name_properties):
    return PropertyGroup(name_properties, FileType.ORC)


@pytest.fixture
def creation_date_group():
    return PropertyGroup(
        [Property("creationDate", DataType(Type.STRING), False)], FileType.PARQUET
    )
