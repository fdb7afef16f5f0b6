# -*- coding: utf-8 -*-
# Halfmesh/loaders/mesh_loader.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
Provide a lightweight `MeshData` container and a `read` function that loads triangle
soups (plus standalone line segments) from any file format `meshio` understands.

Main Tasks:
-----------
    1) Read the mesh with `meshio.read`.
    2) Stack all "triangle" cell blocks into one index buffer.
    3) Stack all "line" cell blocks into a standalone edge buffer.
    4) Ignore other cell types (quads, volumes) with a debug log.

Notes:
------
- Points are kept as given; 2D points are lifted to z=0 by the builder.
- Cell block order is preserved, so face ids follow the file's triangle order.
"""

from typing import Optional
import logging
import numpy as np

logger = logging.getLogger(__name__)


class MeshData:
    """
    Raw geometry ready for `HalfedgeDS.build_from_geometry`.

    Attributes
    ----------
    positions : np.ndarray
        (N,3) array of point coordinates.
    index : np.ndarray
        (T,3) triangle connectivity (possibly empty).
    lines : np.ndarray or None
        (K,2) standalone segments, or None if the file has none.
    path : str
        Source file.
    """

    def __init__(self, positions: np.ndarray, index: np.ndarray, lines: Optional[np.ndarray], path: str):
        self.positions = positions
        self.index = index
        self.lines = lines
        self.path = path

    def __repr__(self) -> str:
        n_lines = 0 if self.lines is None else len(self.lines)
        return f"MeshData(points={len(self.positions)}, triangles={len(self.index)}, lines={n_lines})"


def read(path: str) -> MeshData:
    """
    Load a mesh file into a `MeshData` container.

    Parameters
    ----------
    path : str
        Any file readable by meshio (.obj, .stl, .ply, .vtk, .msh, ...).

    Returns
    -------
    MeshData
    """
    import meshio

    m = meshio.read(path)
    pts = np.asarray(m.points, dtype=float)

    tris = []
    lines = []
    for cb in m.cells:
        t = getattr(cb, "type", None)
        if t == "triangle":
            tris.append(np.asarray(cb.data, dtype=np.int64))
        elif t == "line":
            lines.append(np.asarray(cb.data, dtype=np.int64))
        else:
            logger.debug("[read] ignoring %d '%s' cells in %s", len(cb.data), t, path)

    index = np.vstack(tris) if tris else np.empty((0, 3), dtype=np.int64)
    segs = np.vstack(lines) if lines else None

    logger.info("[read] %s: %d points, %d triangles, %d lines",
                path, len(pts), len(index), 0 if segs is None else len(segs))
    return MeshData(positions=pts, index=index, lines=segs, path=path)
