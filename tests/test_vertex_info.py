# tests/test_vertex_info.py

from __future__ import annotations

import pytest

from graphar_schema import (
    DataType,
    ErrorKind,
    FileType,
    InvalidChunkIndexError,
    NotFoundError,
    Property,
    PropertyGroup,
    Type,
    VertexInfo,
    VertexInfoBuilder,
)


@pytest.fixture
def person(version):
    return VertexInfo("person", 100, "vertex/person/", version)


def test_new_vertex_info_has_no_groups(person) -> None:
    assert person.label == "person"
    assert person.chunk_size == 100
    assert person.property_groups == ()
    assert person.is_validated()


def test_empty_prefix_defaults_to_label() -> None:
    assert VertexInfo("person", 100).prefix == "person/"


def test_builder_add_property_group_and_queries(version, group1, group2, id_property) -> None:
    builder = VertexInfoBuilder("person", 100, "vertex/person/", version)
    assert builder.add_property_group(group1).ok()
    vertex_info = builder.build().unwrap()

    assert vertex_info.property_groups[0] == group1
    assert vertex_info.contain_property("id")
    assert not vertex_info.contain_property("firstName")
    assert vertex_info.contain_property_group(group1)
    assert not vertex_info.contain_property_group(group2)
    assert vertex_info.is_primary_key("id").value is True
    assert vertex_info.get_property_type("id").value == id_property.type


def test_get_file_path_for_single_property_group(person, group1) -> None:
    vertex_info = person.extend(group1).unwrap()
    assert vertex_info.get_file_path(group1, 0).value == "vertex/person/id/chunk0"
    assert vertex_info.get_file_path(group1, 12).value == "vertex/person/id/chunk12"


def test_get_file_path_for_multi_property_group(person, group2) -> None:
    vertex_info = person.extend(group2).unwrap()
    assert vertex_info.get_file_path(group2, 3).value == (
        "vertex/person/firstName_lastName/chunk3"
    )
    assert vertex_info.get_path_prefix(group2).value == "vertex/person/firstName_lastName/"


def test_get_file_path_errors(person, group1, group2) -> None:
    vertex_info = person.extend(group1).unwrap()

    missing = vertex_info.get_file_path(group2, 0)
    assert not missing.ok()
    assert missing.kind is ErrorKind.NOT_FOUND

    negative = vertex_info.get_file_path(group1, -1)
    assert negative.kind is ErrorKind.INVALID_CHUNK_INDEX
    with pytest.raises(InvalidChunkIndexError):
        negative.unwrap()


def test_extend_does_not_mutate_receiver(person, group1, group2) -> None:
    v1 = person.extend(group1).unwrap()
    v2 = v1.extend(group2).unwrap()

    assert not v1.contain_property_group(group2)
    assert not v1.contain_property("firstName")
    assert v2.contain_property_group(group2)
    assert v2.get_property_group("firstName").value == group2
    assert v2.get_property_group("id").value == group1
    assert v2.is_validated()


def test_duplicate_property_name_is_rejected(person, group1) -> None:
    v1 = person.extend(group1).unwrap()
    clash = PropertyGroup(
        [Property("id", DataType(Type.INT64)), Property("age", DataType(Type.INT32))],
        FileType.PARQUET,
    )

    result = v1.extend(clash)
    assert result.kind is ErrorKind.DUPLICATE_PROPERTY_NAME
    assert v1.property_groups == (group1,)
    assert not v1.contain_property("age")

    builder = v1.to_builder()
    assert builder.add_property_group(clash).kind is ErrorKind.DUPLICATE_PROPERTY_NAME
    assert builder.property_groups == (group1,)


def test_empty_group_is_rejected(person) -> None:
    result = person.extend(PropertyGroup([], FileType.CSV))
    assert result.kind is ErrorKind.EMPTY_GROUP


def test_lookups_on_missing_property_fail(person, group1) -> None:
    vertex_info = person.extend(group1).unwrap()

    primary = vertex_info.is_primary_key("gender")
    assert not primary.ok()
    assert primary.kind is ErrorKind.NOT_FOUND
    with pytest.raises(NotFoundError):
        primary.unwrap()

    assert vertex_info.get_property_type("gender").kind is ErrorKind.NOT_FOUND
    assert vertex_info.get_property_group("gender").kind is ErrorKind.NOT_FOUND


def test_non_primary_property(person, group1, group2) -> None:
    vertex_info = person.extend(group1).unwrap().extend(group2).unwrap()
    assert vertex_info.is_primary_key("firstName").value is False
    assert vertex_info.get_primary_key().value.name == "id"


def test_paths_are_deterministic(version, group1) -> None:
    a = VertexInfo("person", 100, "vertex/person/", version, [group1])
    b = VertexInfo("person", 100, "vertex/person/", version, [group1])
    assert a == b
    assert a.get_file_path(group1, 7).value == a.get_file_path(group1, 7).value
    assert a.get_file_path(group1, 7).value == b.get_file_path(group1, 7).value


def test_validation_rejects_bad_chunk_size_and_duplicates(version, group1, id_property) -> None:
    assert not VertexInfo("person", 0, version=version).is_validated()
    assert not VertexInfo("", 10, version=version).is_validated()

    duplicate = PropertyGroup([id_property], FileType.PARQUET)
    assert not VertexInfo("person", 10, version=version, property_groups=[group1, duplicate]).is_validated()


def test_builder_build_rejects_non_positive_chunk_size() -> None:
    assert VertexInfoBuilder("person", 0).build().kind is ErrorKind.INVALID_CHUNK_SIZE


def test_wrong_typed_fields_are_programmer_errors() -> None:
    with pytest.raises(TypeError):
        VertexInfo("person", "100")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        VertexInfo(None, 100)  # type: ignore[arg-type]


def test_vertex_count_path(person) -> None:
    assert person.get_vertices_num_file_path() == "vertex/person/vertex_count"
