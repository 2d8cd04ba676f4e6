# tests/test_config_logging.py

from __future__ import annotations

import pytest

from graphar_schema.config import CONFIG_ENV_VAR, get_config, reset_config
from graphar_schema.logging import get_logger, list_active_loggers
from graphar_schema.persist import parse_vertex_info
from graphar_schema.types import FileType, InfoVersion


@pytest.fixture
def fresh_config():
    reset_config()
    yield
    reset_config()


def test_env_override_selects_config_file(tmp_path, monkeypatch, fresh_config) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("debug: true\nschema:\n  file_type: orc\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    cfg = get_config()
    assert cfg.debug is True
    assert cfg.default_file_type == "orc"
    assert cfg.default_version == "gar/v1"
    assert cfg.source == str(path)
    assert get_config() is cfg


def test_schema_defaults_fill_omitted_document_fields(tmp_path, monkeypatch, fresh_config) -> None:
    path = tmp_path / "custom.yml"
    path.write_text("schema:\n  version: gar/v1 (point)\n  file_type: orc\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    text = (
        "label: place\nchunk_size: 10\n"
        "property_groups:\n"
        "  - properties:\n"
        "      - {name: location, data_type: point}\n"
    )
    vertex_info = parse_vertex_info(text).unwrap()
    assert vertex_info.version == InfoVersion(1, ("point",))
    assert vertex_info.property_groups[0].file_type is FileType.ORC


def test_missing_override_file_raises(tmp_path, monkeypatch, fresh_config) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "absent.yml"))
    with pytest.raises(FileNotFoundError):
        get_config()


def test_loggers_live_under_package_namespace() -> None:
    logger = get_logger("tests.sample")
    assert logger.name == "graphar_schema.tests.sample"
    assert get_logger("graphar_schema.info").name == "graphar_schema.info"
    assert "graphar_schema.tests.sample" in list_active_loggers()
