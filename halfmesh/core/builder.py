# -*- coding: utf-8 -*-
# Halfmesh/core/builder.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
Build a complete halfedge graph from a triangle soup in one deterministic pass.

Main Tasks:
-----------
    1) Clear the store and validate the position/index buffers.
    2) Merge positions into canonical indices (`merge.compute_vertices_index_array`).
    3) Per triangle side: materialize vertices lazily, resolve the directed halfedge
       through the edge reuse map (a new pair registers both orientations).
    4) Close every non-degenerate triangle with `add_face` (face id = input index).
    5) Attach optional standalone edges through the same reuse map.

Notes:
------
- The vertex and edge maps live only for the duration of one call.
- Triangles collapsing to fewer than 3 distinct vertices skip `add_face`; their remaining
  sides become faceless edges (or an isolated vertex).
- Any TopologyError aborts the build and leaves the store empty.
"""

from typing import Dict, Optional, Tuple
import logging
import numpy as np
from .entities import Vertex, Halfedge
from .errors import MissingAttributeError, TopologyError
from .merge import as_points, compute_vertices_index_array
from .ops import add_vertex, add_edge, add_face

logger = logging.getLogger(__name__)


def _index_buffer(index, n_points: int) -> np.ndarray:
    """Validate an index buffer (or synthesize one) and return it as (T,3) int64."""
    if index is None:
        if n_points % 3 != 0:
            raise ValueError(
                f"Non-indexed geometry needs a multiple of 3 positions, got {n_points}."
            )
        return np.arange(n_points, dtype=np.int64).reshape(-1, 3)

    idx = np.asarray(index, dtype=np.int64).ravel()
    if idx.size % 3 != 0:
        raise ValueError(f"Index buffer length must be a multiple of 3, got {idx.size}.")
    if idx.size and (idx.min() < 0 or idx.max() >= n_points):
        raise ValueError(
            f"Index buffer references positions outside [0, {n_points - 1}] "
            f"(min={int(idx.min())}, max={int(idx.max())})."
        )
    return idx.reshape(-1, 3)


def _edge_buffer(edges, n_points: int) -> np.ndarray:
    """Validate standalone edge pairs and return them as (K,2) int64."""
    e = np.asarray(edges, dtype=np.int64)
    if e.size == 0:
        return e.reshape(0, 2)
    if e.ndim != 2 or e.shape[1] != 2:
        raise ValueError(f"Expected (K, 2) array for edges, got shape {e.shape}.")
    if e.min() < 0 or e.max() >= n_points:
        raise ValueError(f"Edge buffer references positions outside [0, {n_points - 1}].")
    return e


def _resolve_vertex(struct, points: np.ndarray, vertex_map: Dict[int, Vertex], i: int) -> Vertex:
    v = vertex_map.get(i)
    if v is None:
        v = add_vertex(struct, points[i], id=i)
        vertex_map[i] = v
    return v


def _resolve_halfedge(
    struct,
    points: np.ndarray,
    vertex_map: Dict[int, Vertex],
    halfedge_map: Dict[Tuple[int, int], Halfedge],
    i1: int,
    i2: int,
) -> Halfedge:
    """
    Halfedge i1 -> i2 from the reuse map, creating the pair (and both keys) if absent.
    """
    h = halfedge_map.get((i1, i2))
    if h is None:
        v1 = _resolve_vertex(struct, points, vertex_map, i1)
        v2 = _resolve_vertex(struct, points, vertex_map, i2)
        h = add_edge(struct, v1, v2)
        halfedge_map[(i1, i2)] = h
        halfedge_map[(i2, i1)] = h.twin
    return h


def build(struct, positions, index=None, edges=None) -> None:
    """
    Rebuild `struct` from raw geometry.

    Parameters
    ----------
    struct : HalfedgeDS
        Target store; cleared first. Tolerance comes from `struct.options["tolerance"]`.
    positions : array_like
        Flat (3*N,) buffer or (N,3)/(N,2) array of positions.
    index : array_like, optional
        Index buffer (multiple of 3). Without it positions are consecutive triples.
    edges : array_like, optional
        (K,2) position-index pairs of standalone segments (no face).

    Raises
    ------
    MissingAttributeError
        If `positions` is None.
    ValueError
        Malformed buffers or tolerance.
    NonManifoldConstructionError
        A triangle needs a halfedge that already bounds a face, or a closed vertex fan.
    """
    struct.clear()

    if positions is None:
        raise MissingAttributeError("Geometry does not provide position data.")

    points = as_points(positions)
    tris = _index_buffer(index, len(points))
    segs = _edge_buffer(edges, len(points)) if edges is not None else None

    tolerance = float(struct.options.get("tolerance", 1e-10))
    canonical = compute_vertices_index_array(points, tolerance)
    n_merged = int(np.count_nonzero(canonical != np.arange(len(canonical))))
    logger.debug("[build] %d positions, %d merged (tolerance=%g)", len(points), n_merged, tolerance)

    face_vertices = canonical[tris].tolist()

    vertex_map: Dict[int, Vertex] = {}
    halfedge_map: Dict[Tuple[int, int], Halfedge] = {}
    skipped = 0
    face_index: Optional[int] = None

    try:
        for face_index, tri in enumerate(face_vertices):
            if len(set(tri)) < 3:
                skipped += 1
                _attach_degenerate(struct, points, vertex_map, halfedge_map, tri)
                continue

            loop = []
            for i in range(3):
                i1 = tri[i]
                i2 = tri[(i + 1) % 3]
                loop.append(_resolve_halfedge(struct, points, vertex_map, halfedge_map, i1, i2))
            add_face(struct, loop, id=face_index)

        face_index = None
        if segs is not None:
            for a, b in canonical[segs].tolist():
                if a == b:
                    _resolve_vertex(struct, points, vertex_map, a)
                else:
                    _resolve_halfedge(struct, points, vertex_map, halfedge_map, a, b)

    except TopologyError as exc:
        if face_index is None:
            logger.error("[build] aborted while attaching standalone edges: %s", exc)
        else:
            logger.error("[build] aborted at face %d: %s", face_index, exc)
        struct.clear()
        raise

    if skipped:
        logger.warning("[build] %d degenerate triangle(s) skipped (fewer than 3 distinct vertices).", skipped)

    logger.info(
        "[build] %d vertices, %d edges, %d faces",
        len(struct.vertices), len(struct.halfedges) // 2, len(struct.faces),
    )


def _attach_degenerate(struct, points, vertex_map, halfedge_map, tri) -> None:
    """
    Materialize what is left of a collapsed triangle: its non-collapsed sides as faceless
    edges, or a single isolated vertex.
    """
    attached = False
    for i in range(3):
        i1 = tri[i]
        i2 = tri[(i + 1) % 3]
        if i1 != i2:
            _resolve_halfedge(struct, points, vertex_map, halfedge_map, i1, i2)
            attached = True
    if not attached:
        _resolve_vertex(struct, points, vertex_map, tri[0])
