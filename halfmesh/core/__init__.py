# -*- coding: utf-8 -*-
# Halfmesh/core/__init__.py

"""
Project: Halfmesh
Date: 10/19/2026

Core Subpackage:
----------------
Halfedge entities, the entity store and the operations that build it.

Modules:
--------
- entities: Vertex / Halfedge / Face with traversal and geometric queries.
- store:    HalfedgeDS arenas, options, loop enumeration.
- ops:      add_vertex / add_edge / add_face (the only mutators).
- builder:  one-pass construction from a triangle soup with an edge reuse map.
- merge:    grid-quantization vertex merger.
- errors:   typed exceptions.
"""

from .entities import Vertex, Halfedge, Face
from .errors import (
    TopologyError,
    MissingAttributeError,
    NonManifoldConstructionError,
    InvalidLoopError,
)
from .merge import compute_vertices_index_array, quantization_multiplier
from .ops import add_vertex, add_edge, add_face
from .store import HalfedgeDS, DEFAULT_OPTIONS

__all__ = [
    "Vertex", "Halfedge", "Face", "HalfedgeDS", "DEFAULT_OPTIONS",
    "add_vertex", "add_edge", "add_face",
    "compute_vertices_index_array", "quantization_multiplier",
    "TopologyError", "MissingAttributeError", "NonManifoldConstructionError", "InvalidLoopError",
]
