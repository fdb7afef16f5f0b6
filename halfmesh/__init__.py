# -*- coding: utf-8 -*-
# Halfmesh/__init__.py

"""
Project: Halfmesh
Date: 10/19/2026

Modules:
--------
- core:     halfedge entities, store, primitive operations, builder and vertex merger.
- checks:   invariant and advisory topology checks over a built structure.
- stats:    topological summary and CSV/JSON export.
- loaders:  meshio-backed file input.
- api:      high-level build pipeline.
"""

from .core import (
    HalfedgeDS,
    Vertex,
    Halfedge,
    Face,
    TopologyError,
    MissingAttributeError,
    NonManifoldConstructionError,
    InvalidLoopError,
)
from .api import build_halfedges, build_from_file

__all__ = [
    "core", "checks", "stats", "loaders", "api",
    "HalfedgeDS", "Vertex", "Halfedge", "Face",
    "TopologyError", "MissingAttributeError", "NonManifoldConstructionError", "InvalidLoopError",
    "build_halfedges", "build_from_file",
]
