# -*- coding: utf-8 -*-
# Halfmesh/api.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose
-------
High-level API for building halfedge structures. Ties together the builder, the optional
invariant checks and the file loader behind two entry points.

Main Tasks
----------
    1. build_halfedges: raw buffers -> HalfedgeDS, optionally validated.
    2. build_from_file: meshio-readable file -> HalfedgeDS.
    3. Log a one-line inventory of the result.
"""

from typing import Optional
import logging
from halfmesh.core import HalfedgeDS, TopologyError
from halfmesh.checks import run_checks

logger = logging.getLogger(__name__)


def build_halfedges(
    positions,
    index=None,
    *,
    edges=None,
    tolerance: Optional[float] = None,
    validate: bool = False,
) -> HalfedgeDS:
    """
    Build a halfedge structure from raw geometry.

    Parameters
    ----------
    positions : array_like
        Flat (3*N,) buffer or (N,3) array.
    index : array_like, optional
        Triangle index buffer (multiple of 3).
    edges : array_like, optional
        (K,2) standalone segments.
    tolerance : float, optional
        Vertex merge cell size; DEFAULT_OPTIONS["tolerance"] when None.
    validate : bool, optional
        If True, run the invariant checks and raise on any error-severity failure.

    Returns
    -------
    HalfedgeDS

    Raises
    ------
    MissingAttributeError, NonManifoldConstructionError
        From the builder.
    TopologyError
        If `validate` is set and an invariant rule fails.
    """
    options = {} if tolerance is None else {"tolerance": float(tolerance)}
    struct = HalfedgeDS(options)
    struct.build_from_geometry(positions, index, edges=edges)

    if validate:
        findings = run_checks(struct)
        if not findings["ok"]:
            failed = [rid for rid, f in findings["rules"].items()
                      if f["severity"] == "error" and not f["ok"]]
            raise TopologyError("Built structure violates halfedge invariants.", {"rules": failed})

    logger.info("[build_halfedges] %r", struct)
    return struct


def build_from_file(
    path: str,
    *,
    tolerance: Optional[float] = None,
    validate: bool = False,
) -> HalfedgeDS:
    """
    Read `path` with meshio and build a halfedge structure from its triangles and lines.
    """
    from halfmesh.loaders.mesh_loader import read

    data = read(path)
    return build_halfedges(
        data.positions,
        data.index,
        edges=data.lines,
        tolerance=tolerance,
        validate=validate,
    )
