# tests/test_persistence.py

from __future__ import annotations

import pytest
import yaml

from graphar_schema import (
    AdjListType,
    DataType,
    EdgeInfo,
    ErrorKind,
    FileType,
    GraphInfo,
    InfoIOError,
    Property,
    PropertyGroup,
    Type,
    VertexInfo,
)
from graphar_schema.persist import parse_edge_info, parse_graph_document, parse_vertex_info
from graphar_schema.utils import tests_data_path


@pytest.fixture
def person(version, group1, group2):
    return VertexInfo("person", 100, "vertex/person/", version, [group1, group2])


@pytest.fixture
def knows(version, creation_date_group):
    return (
        EdgeInfo("person", "knows", "person", 1024, 100, 100, False, "edge/person_knows_person/", version)
        .extend_adj_list(AdjListType.UNORDERED_BY_SOURCE, FileType.PARQUET)
        .then(lambda e: e.extend_adj_list(AdjListType.ORDERED_BY_DEST, FileType.CSV))
        .then(lambda e: e.extend_property_group(creation_date_group, AdjListType.UNORDERED_BY_SOURCE))
        .unwrap()
    )


class FailingFileSystem:
    def write_bytes(self, path: str, data: bytes) -> None:
        raise InfoIOError(f"read-only: {path}")

    def read_bytes(self, path: str) -> bytes:
        raise OSError("unreachable")


class MemoryFileSystem:
    def __init__(self) -> None:
        self.files = {}

    def write_bytes(self, path: str, data: bytes) -> None:
        self.files[path] = data

    def read_bytes(self, path: str) -> bytes:
        if path not in self.files:
            raise InfoIOError(f"missing {path}")
        return self.files[path]


def test_vertex_dump_layout(person) -> None:
    data = yaml.safe_load(person.dump().unwrap())
    assert data["label"] == "person"
    assert data["chunk_size"] == 100
    assert data["prefix"] == "vertex/person/"
    assert data["version"] == "gar/v1"
    first = data["property_groups"][0]
    assert first["file_type"] == "csv"
    assert first["prefix"] == "id/"
    assert first["properties"] == [{"name": "id", "data_type": "int32", "is_primary": True}]


def test_edge_dump_layout(knows) -> None:
    data = yaml.safe_load(knows.dump().unwrap())
    assert data["directed"] is False
    assert [(a["ordered"], a["aligned_by"]) for a in data["adj_lists"]] == [
        (False, "src"),
        (True, "dst"),
    ]
    assert all("prefix" not in a for a in data["adj_lists"])
    assert data["adj_lists"][0]["property_groups"][0]["properties"][0]["name"] == "creationDate"


def test_vertex_save_and_load_round_trip(tmp_path, person) -> None:
    path = str(tmp_path / "person.vertex.yml")
    assert person.save(path).ok()

    loaded = VertexInfo.load(path).unwrap()
    assert loaded == person
    assert loaded.is_validated()


def test_edge_save_and_load_round_trip(tmp_path, knows) -> None:
    path = f"file://{tmp_path}/nested/knows.edge.yml"
    assert knows.save(path).ok()

    loaded = EdgeInfo.load(path).unwrap()
    assert loaded == knows
    assert loaded.is_validated()


def test_graph_save_and_load_round_trip(tmp_path, version, person, knows) -> None:
    assert person.save(str(tmp_path / "person.vertex.yml")).ok()
    assert knows.save(str(tmp_path / "person_knows_person.edge.yml")).ok()
    graph_info = (
        GraphInfo("ldbc", version, "file:///tmp/ldbc/")
        .extend_vertex(person)
        .then(lambda g: g.extend_edge(knows))
        .unwrap()
        .extend_vertex_info_path("person.vertex.yml")
        .extend_edge_info_path("person_knows_person.edge.yml")
    )
    path = str(tmp_path / "ldbc.graph.yml")
    assert graph_info.save(path).ok()

    loaded = GraphInfo.load(path).unwrap()
    assert loaded == graph_info
    assert loaded.is_validated()


def test_graph_with_no_paths_embeds_children(version, person, knows) -> None:
    fs = MemoryFileSystem()
    graph_info = GraphInfo("g", version, "data/").extend_vertex(person).then(
        lambda g: g.extend_edge(knows)
    ).unwrap()
    assert graph_info.save("mem/g.graph.yml", fs).ok()

    document = yaml.safe_load(fs.files["mem/g.graph.yml"])
    assert document["vertices"][0]["label"] == "person"

    loaded = GraphInfo.load("mem/g.graph.yml", fs).unwrap()
    assert loaded == graph_info


def test_load_fixture_graph_resolves_children() -> None:
    graph_info = GraphInfo.load(str(tests_data_path("ldbc_sample", "ldbc_sample.graph.yml"))).unwrap()

    assert graph_info.name == "ldbc_sample"
    assert graph_info.prefix == "./"
    person = graph_info.get_vertex_info("person").unwrap()
    assert person.get_property_type("id").value == DataType(Type.INT64)
    group = person.get_property_group("gender").unwrap()
    assert person.get_file_path(group, 1).value == "vertex/person/firstName_lastName_gender/chunk1"

    knows = graph_info.get_edge_info("person", "knows", "person").unwrap()
    assert knows.contain_adj_list(AdjListType.ORDERED_BY_SOURCE)
    assert knows.contain_adj_list(AdjListType.ORDERED_BY_DEST)
    assert not knows.contain_adj_list(AdjListType.UNORDERED_BY_SOURCE)
    assert graph_info.is_validated()


def test_graph_without_prefix_uses_document_directory(tmp_path, version) -> None:
    path = tmp_path / "g.graph.yml"
    path.write_text("name: g\nversion: gar/v1\n", encoding="utf-8")
    loaded = GraphInfo.load(str(path)).unwrap()
    assert loaded.prefix == f"{tmp_path}/"


def test_missing_child_file_propagates_io_error(tmp_path) -> None:
    path = tmp_path / "g.graph.yml"
    path.write_text("name: g\nvertices: [nope.vertex.yml]\n", encoding="utf-8")
    assert GraphInfo.load(str(path)).kind is ErrorKind.IO_ERROR


def test_save_surfaces_io_error(person) -> None:
    result = person.save("/anywhere/person.vertex.yml", FailingFileSystem())
    assert result.kind is ErrorKind.IO_ERROR
    assert VertexInfo.load("x.yml", FailingFileSystem()).kind is ErrorKind.IO_ERROR


def test_unsupported_uri_scheme_is_io_error(person) -> None:
    assert person.save("s3://bucket/person.vertex.yml").kind is ErrorKind.IO_ERROR


@pytest.mark.parametrize(
    "text",
    [
        "label: [unterminated",
        "- just\n- a list\n",
        "chunk_size: 100\n",
        "label: p\nchunk_size: ten\n",
        "label: p\nchunk_size: 10\nproperty_groups:\n  - file_type: csv\n    properties:\n      - {name: a, data_type: decimal}\n",
        "label: p\nchunk_size: 10\nproperty_groups:\n  - file_type: avro\n    properties:\n      - {name: a, data_type: int32}\n",
        "label: p\nchunk_size: 10\nversion: gar/v9\n",
    ],
)
def test_malformed_vertex_documents_are_encoding_errors(text: str) -> None:
    assert parse_vertex_info(text).kind is ErrorKind.ENCODING_ERROR


def test_non_positive_chunk_size_in_document() -> None:
    assert parse_vertex_info("label: p\nchunk_size: 0\n").kind is ErrorKind.INVALID_CHUNK_SIZE
    text = (
        "src_label: a\nedge_label: e\ndst_label: b\n"
        "chunk_size: 10\nsrc_chunk_size: -1\ndst_chunk_size: 10\n"
    )
    assert parse_edge_info(text).kind is ErrorKind.INVALID_CHUNK_SIZE


def test_duplicate_adj_list_entry_is_rejected() -> None:
    entry = "  - {ordered: true, aligned_by: src, file_type: csv}\n"
    text = (
        "src_label: a\nedge_label: e\ndst_label: b\n"
        "chunk_size: 10\nsrc_chunk_size: 10\ndst_chunk_size: 10\n"
        "adj_lists:\n" + entry + entry
    )
    assert parse_edge_info(text).kind is ErrorKind.ENCODING_ERROR


def test_adj_list_entry_by_name() -> None:
    text = (
        "src_label: a\nedge_label: e\ndst_label: b\n"
        "chunk_size: 10\nsrc_chunk_size: 10\ndst_chunk_size: 10\n"
        "adj_lists:\n  - {adj_list_type: unordered_by_dest, file_type: orc}\n"
    )
    edge_info = parse_edge_info(text).unwrap()
    assert edge_info.get_file_type(AdjListType.UNORDERED_BY_DEST).value is FileType.ORC


def test_user_defined_and_list_types_survive_round_trip() -> None:
    version_text = "gar/v1 (point)"
    text = (
        "label: place\nchunk_size: 10\n"
        f"version: '{version_text}'\n"
        "property_groups:\n"
        "  - file_type: parquet\n"
        "    properties:\n"
        "      - {name: location, data_type: point}\n"
        "      - {name: tags, data_type: 'list<string>'}\n"
    )
    vertex_info = parse_vertex_info(text).unwrap()
    assert vertex_info.get_property_type("tags").value == DataType.list_of(DataType(Type.STRING))
    assert parse_vertex_info(vertex_info.dump().unwrap()).unwrap() == vertex_info


def test_explicit_group_prefix_survives_round_trip(version) -> None:
    group = PropertyGroup(
        [Property("a", DataType(Type.INT32)), Property("b", DataType(Type.INT32))],
        FileType.CSV,
        prefix="ab/",
    )
    vertex_info = VertexInfo("v", 10, "", version, [group])
    loaded = parse_vertex_info(vertex_info.dump().unwrap()).unwrap()
    assert loaded == vertex_info
    assert loaded.get_file_path(group, 0).value == "v/ab/chunk0"


def test_group_prefix_without_trailing_slash_survives_round_trip(version) -> None:
    group = PropertyGroup([Property("a", DataType(Type.INT32))], FileType.CSV, prefix="custom")
    vertex_info = VertexInfo("v", 10, "", version, [group])

    loaded = parse_vertex_info(vertex_info.dump().unwrap()).unwrap()
    assert loaded == vertex_info
    assert loaded.get_file_path(group, 0).value == "v/custom/chunk0"


def test_graph_document_rejects_bad_entries() -> None:
    assert parse_graph_document("name: g\nvertices: 3\n").kind is ErrorKind.ENCODING_ERROR
    assert parse_graph_document("name: g\nedges: [1]\n").kind is ErrorKind.ENCODING_ERROR
    assert parse_graph_document("vertices: []\n").kind is ErrorKind.ENCODING_ERROR


def test_graph_with_unpathed_children_refuses_to_save(tmp_path, version, person) -> None:
    org = VertexInfo("org", 10, version=version)
    assert person.save(str(tmp_path / "person.vertex.yml")).ok()
    graph_info = (
        GraphInfo("mixed", version, "./")
        .extend_vertex(person)
        .then(lambda g: g.extend_vertex(org))
        .unwrap()
        .extend_vertex_info_path("person.vertex.yml")
    )
    fs = MemoryFileSystem()

    assert graph_info.dump().kind is ErrorKind.ENCODING_ERROR
    assert graph_info.save("mem/mixed.graph.yml", fs).kind is ErrorKind.ENCODING_ERROR
    assert fs.files == {}

    complete = graph_info.to_builder()
    complete.add_vertex_info_path("org.vertex.yml")
    assert complete.build().unwrap().dump().ok()


def test_adj_list_prefix_must_name_its_type() -> None:
    header = (
        "src_label: a\nedge_label: e\ndst_label: b\n"
        "chunk_size: 10\nsrc_chunk_size: 10\ndst_chunk_size: 10\n"
        "adj_lists:\n"
    )
    matching = header + "  - {ordered: true, aligned_by: src, prefix: ordered_by_source/, file_type: csv}\n"
    renamed = header + "  - {ordered: true, aligned_by: src, prefix: by_src/, file_type: csv}\n"
    assert parse_edge_info(matching).ok()
    assert parse_edge_info(renamed).kind is ErrorKind.ENCODING_ERROR
