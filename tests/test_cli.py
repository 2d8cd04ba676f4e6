# tests/test_cli.py

from __future__ import annotations

from typer.testing import CliRunner

from graphar_schema.cli import app
from graphar_schema.utils import tests_data_path

runner = CliRunner()

GRAPH = str(tests_data_path("ldbc_sample", "ldbc_sample.graph.yml"))
DANGLING = str(tests_data_path("ldbc_sample", "dangling.graph.yml"))


def test_inspect_lists_schemas() -> None:
    result = runner.invoke(app, ["inspect", GRAPH])
    assert result.exit_code == 0, result.output
    assert "ldbc_sample" in result.output
    assert "person" in result.output
    assert "ordered_by_source" in result.output


def test_validate_accepts_sample_graph() -> None:
    result = runner.invoke(app, ["validate", GRAPH])
    assert result.exit_code == 0, result.output
    assert "Graph schema is valid" in result.output


def test_validate_reports_dangling_labels() -> None:
    result = runner.invoke(app, ["validate", DANGLING])
    assert result.exit_code == 1
    assert "Unregistered vertex labels" in result.output


def test_paths_for_vertex() -> None:
    result = runner.invoke(app, ["paths", GRAPH, "--vertex", "person", "--chunk", "2"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "vertex/person/id/chunk2",
        "vertex/person/firstName_lastName_gender/chunk2",
    ]


def test_paths_for_edge() -> None:
    result = runner.invoke(
        app,
        ["paths", GRAPH, "--edge", "person,knows,person", "--adj-list", "ordered_by_dest", "--part", "1"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == [
        "edge/person_knows_person/ordered_by_dest/adj_list/part1/chunk0",
        "edge/person_knows_person/ordered_by_dest/offset/chunk0",
        "edge/person_knows_person/ordered_by_dest/creationDate/part1/chunk0",
    ]


def test_paths_for_unknown_vertex_fails() -> None:
    result = runner.invoke(app, ["paths", GRAPH, "--vertex", "comment"])
    assert result.exit_code == 1
    assert "NotFound" in result.output


def test_paths_requires_exactly_one_target() -> None:
    result = runner.invoke(app, ["paths", GRAPH])
    assert result.exit_code != 0
