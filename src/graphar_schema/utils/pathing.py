# src/graphar_schema/utils/pathing.py

from __future__ import annotations

import posixpath
from pathlib import Path
from typing import Union
from urllib.parse import urlparse


# This file lives at:
#   <project_root>/src/graphar_schema/utils/pathing.py
_PROJECT_ROOT = Path(__file__).resolve().parents[3]

FILE_SCHEME = "file://"


def project_root() -> Path:
    """
    Return the absolute path to the project root directory.

    The project root is defined as the directory that contains:
      - src/
      - tests/
      - config/
    """
    return _PROJECT_ROOT


def resolve_project_path(relative: Union[str, Path]) -> Path:
    """
    Resolve a path relative to the project root.

    Examples:
        resolve_project_path("config/graphar_schema.yml")
        resolve_project_path(Path("tests") / "data" / "foo.yml")
    """
    return project_root() / Path(relative)


def tests_data_path(*parts: Union[str, Path]) -> Path:
    """
    Return the absolute path to a file under tests/data/.

    Examples:
        tests_data_path("ldbc_sample", "person.vertex.yml")
    """
    return resolve_project_path(Path("tests") / "data" / Path(*parts))


def uri_scheme(location: Union[str, Path]) -> str:
    """Return the URI scheme of ``location`` ("" for plain filesystem paths)."""
    text = str(location)
    if "://" not in text:
        return ""
    return urlparse(text).scheme


def local_path(location: Union[str, Path]) -> Path:
    """
    Convert a plain path or ``file://`` URI into a local Path.

    Raises ValueError for any other scheme.
    """
    text = str(location)
    scheme = uri_scheme(text)
    if not scheme:
        return Path(text)
    if scheme != "file":
        raise ValueError(f"unsupported URI scheme {scheme!r} in {text!r}")
    return Path(text[len(FILE_SCHEME):])


def parent_location(location: Union[str, Path]) -> str:
    """Directory part of a path or URI, always ending with ``/``."""
    text = str(location)
    head = posixpath.dirname(text)
    if not head:
        return "./"
    return head if head.endswith("/") else head + "/"


def join_location(base: Union[str, Path], relative: str) -> str:
    """Resolve ``relative`` against the directory ``base`` (absolute paths and URIs win)."""
    if uri_scheme(relative) or posixpath.isabs(relative):
        return relative
    base_text = str(base)
    if not base_text.endswith("/"):
        base_text += "/"
    return base_text + relative
