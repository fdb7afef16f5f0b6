# -*- coding: utf-8 -*-
# Halfmesh/stats/report.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
Compute a compact topological summary of a built `HalfedgeDS` and return a structured
dictionary ready for export (CSV/JSON) or logging.

Main Tasks:
-----------
    1) `inventory`:
        - Count vertices, halfedges, edges, faces, loops, boundary loops, isolated vertices.
        - Euler characteristic V - E + F and the bounding box of the vertex positions.
    2) `valence`:
        - Degree (edges per vertex) distribution: min/max/mean/std and histogram.
    3) `boundary`:
        - Boundary loop length histogram.

Notes:
------
- Isolated vertices are excluded from the valence distribution (reported in inventory).
- Histograms are returned as {value: frequency}.
"""

from typing import Any, Dict
import numpy as np


def inventory(struct) -> Dict[str, Any]:
    """
    Global counts and bounding box.
    """
    loops = struct.loops()
    n_boundary = sum(1 for h in loops if h.face is None)
    n_v = len(struct.vertices)
    n_e = struct.n_edges
    n_f = len(struct.faces)

    if n_v:
        pts = np.array([v.position for v in struct.vertices], dtype=float)
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        bbox = {
            "xmin": float(lo[0]), "xmax": float(hi[0]),
            "ymin": float(lo[1]), "ymax": float(hi[1]),
            "zmin": float(lo[2]), "zmax": float(hi[2]),
        }
    else:
        bbox = {}

    return {
        "n_vertices": n_v,
        "n_halfedges": len(struct.halfedges),
        "n_edges": n_e,
        "n_faces": n_f,
        "n_loops": len(loops),
        "n_boundary_loops": n_boundary,
        "n_isolated_vertices": sum(1 for v in struct.vertices if v.is_isolated()),
        "euler_characteristic": n_v - n_e + n_f,
        "bbox": bbox,
    }


def valence(struct) -> Dict[str, Any]:
    """
    Vertex degree distribution over non-isolated vertices.
    """
    degrees = np.array([v.degree for v in struct.vertices if not v.is_isolated()], dtype=int)
    if degrees.size == 0:
        return {"min": 0, "max": 0, "mean": 0.0, "std": 0.0, "hist": {}}

    unique, freq = np.unique(degrees, return_counts=True)
    return {
        "min": int(degrees.min()),
        "max": int(degrees.max()),
        "mean": float(degrees.mean()),
        "std": float(degrees.std()),
        "hist": {int(u): int(f) for u, f in zip(unique, freq)},
    }


def boundary(struct) -> Dict[str, Any]:
    lengths = [sum(1 for _ in h.next_loop()) for h in struct.boundary_loops()]
    hist: Dict[int, int] = {}
    for n in lengths:
        hist[n] = hist.get(n, 0) + 1
    return {
        "n_boundary_halfedges": int(sum(lengths)),
        "loop_length_hist": dict(sorted(hist.items())),
    }


def summarize(struct) -> Dict[str, Any]:
    """
    One-shot summary: {"inventory": ..., "valence": ..., "boundary": ..., "options": ...}.
    """
    return {
        "inventory": inventory(struct),
        "valence": valence(struct),
        "boundary": boundary(struct),
        "options": dict(struct.options),
    }
