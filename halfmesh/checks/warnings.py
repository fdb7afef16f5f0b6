# -*- coding: utf-8 -*-
# Halfmesh/checks/warnings.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
WARN-tier rules: advisory topology signals. None of these make a structure invalid; the
builder deliberately supports isolated vertices, wire edges and vertex fans.

Rules:
------
   - isolated_vertices:    vertices without any edge.
   - isolated_edges:       twin pairs with no face on either side forming their own 2-loop.
   - nonmanifold_vertices: vertex rings with more than one gap (several fans meet there).
   - degenerate_faces:     faces whose corner cross product is below `normal_eps`.
"""

from typing import Dict, List
import numpy as np


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict, fixable: bool = False):
    return {
        "id": rule_id,
        "severity": "warn",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:25],
        "details": details or {},
        "fixable": bool(fixable),
    }


def _ring_gaps(v, limit: int) -> int:
    """Number of free incoming halfedges around `v` (bounded ring walk)."""
    start = v.halfedge.twin
    he = start
    gaps = 0
    for _ in range(limit):
        if he.face is None:
            gaps += 1
        he = he.next.twin
        if he is start:
            break
    return gaps


def isolated_vertices(struct, th, cache) -> Dict:
    bad = [v.index for v in struct.vertices if v.halfedge is None]
    return _finding(
        "isolated_vertices",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"note": "Vertices referenced only by fully collapsed triangles or segments."},
    )


def isolated_edges(struct, th, cache) -> Dict:
    """
    Wire edges: both halfedges faceless and each other's next.
    """
    bad = []
    for h in struct.halfedges:
        t = h.twin
        if t is None or h.index > t.index:
            continue
        if h.face is None and t.face is None and h.next is t and t.next is h:
            bad.append((h.vertex.id, t.vertex.id))
    return _finding(
        "isolated_edges",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"note": "Examples are (vertex id, vertex id) pairs."},
    )


def nonmanifold_vertices(struct, th, cache) -> Dict:
    """
    Vertices whose ring has 2+ gaps, i.e. several disconnected fans share the vertex.
    Skipped when the structure has open loops or unpaired halfedges.
    """
    if not cache["all_closed"] or any(h.twin is None for h in struct.halfedges):
        return _finding("nonmanifold_vertices", True, 0, [], {"skipped": "broken next/twin links present"})

    limit = len(struct.halfedges)
    bad = []
    for v in struct.vertices:
        if v.halfedge is not None and _ring_gaps(v, limit) > 1:
            bad.append(v.id)
    return _finding(
        "nonmanifold_vertices",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"note": "Examples are vertex ids."},
    )


def degenerate_faces(struct, th, cache) -> Dict:
    """
    Faces with (near) zero corner cross product; their normal is the zero vector.
    """
    eps = float(th.get("normal_eps", 1e-12))
    bad = []
    for f in struct.faces:
        h = f.halfedge
        a = h.vertex.position
        b = h.next.vertex.position
        c = h.prev.vertex.position
        if float(np.linalg.norm(np.cross(c - b, a - b))) <= eps:
            bad.append(f.id)
    return _finding(
        "degenerate_faces",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"normal_eps": eps},
    )
