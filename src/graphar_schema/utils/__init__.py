# src/graphar_schema/utils/__init__.py

from .pathing import (
    join_location,
    local_path,
    parent_location,
    project_root,
    resolve_project_path,
    tests_data_path,
    uri_scheme,
)

__all__ = [
    "join_location",
    "local_path",
    "parent_location",
    "project_root",
    "resolve_project_path",
    "tests_data_path",
    "uri_scheme",
]
