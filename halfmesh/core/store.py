# -*- coding: utf-8 -*-
# Halfmesh/core/store.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
`HalfedgeDS`: the entity store owning the vertex, halfedge and face arenas, plus the
store-level queries (loop enumeration) consumed by checks, stats and external viewers.

Main Tasks:
-----------
   - Hold options (DEFAULT_OPTIONS deep-merged with user overrides).
   - Own three list arenas; `clear()` resets them in one assignment.
   - `build_from_geometry`: delegate to `core.builder.build`.
   - `loops`: one representative per disjoint `next`-cycle; boundary/face splits.

Notes:
------
   - Callers may only rely on "each live entity is visited exactly once" when iterating.
   - A built structure is read-only; concurrent readers are fine as long as nobody
     rebuilds or clears it meanwhile (no internal locking).
"""

from typing import Any, Dict, List, Optional
import copy
from .entities import Vertex, Halfedge, Face
from .builder import build

DEFAULT_OPTIONS: Dict[str, Any] = {
    "tolerance": 1e-10,
}


def merge_options(base: Dict[str, Any], upd: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Deep-merge two option dicts (right-biased) without mutating either input.
    """
    if not upd:
        return copy.deepcopy(base)
    out = copy.deepcopy(base)
    for k, v in upd.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = merge_options(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


class HalfedgeDS:
    """
    Halfedge data structure.

    Parameters
    ----------
    options : dict, optional
        Overrides for DEFAULT_OPTIONS (currently only "tolerance", the vertex merge cell size).

    Attributes
    ----------
    vertices : list of Vertex
    halfedges : list of Halfedge
    faces : list of Face
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options = merge_options(DEFAULT_OPTIONS, options)
        self.vertices: List[Vertex] = []
        self.halfedges: List[Halfedge] = []
        self.faces: List[Face] = []

    def __repr__(self) -> str:
        return (f"HalfedgeDS(vertices={len(self.vertices)}, halfedges={len(self.halfedges)}, "
                f"faces={len(self.faces)})")

    @property
    def n_edges(self) -> int:
        return len(self.halfedges) // 2

    def build_from_geometry(self, positions, index=None, edges=None) -> "HalfedgeDS":
        """
        Clear and rebuild from a position buffer and optional index/edge buffers.
        See `halfmesh.core.builder.build`.
        """
        build(self, positions, index=index, edges=edges)
        return self

    def clear(self) -> None:
        self.vertices, self.halfedges, self.faces = [], [], []

    # ---- loop enumeration ----
    def loops(self) -> List[Halfedge]:
        """
        One representative halfedge per `next`-cycle (face loops and boundary loops),
        in arena order of the first member found.
        """
        loops: List[Halfedge] = []
        handled = set()
        for halfedge in self.halfedges:
            if halfedge.index in handled:
                continue
            for he in halfedge.next_loop():
                handled.add(he.index)
            loops.append(halfedge)
        return loops

    def boundary_loops(self) -> List[Halfedge]:
        """Representatives of faceless loops (mesh boundaries and wire edges)."""
        return [h for h in self.loops() if h.face is None]

    def face_loops(self) -> List[Halfedge]:
        return [h for h in self.loops() if h.face is not None]
