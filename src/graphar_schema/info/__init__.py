"""
Schema objects: properties, property groups, and vertex/edge/graph schemas.
"""

from __future__ import annotations

from .edge_info import AdjList, EdgeInfo, EdgeInfoBuilder
from .graph_info import GraphInfo, GraphInfoBuilder
from .property import Property, PropertyGroup
from .vertex_info import VertexInfo, VertexInfoBuilder

__all__ = [
    "AdjList",
    "EdgeInfo",
    "EdgeInfoBuilder",
    "GraphInfo",
    "GraphInfoBuilder",
    "Property",
    "PropertyGroup",
    "VertexInfo",
    "VertexInfoBuilder",
]
