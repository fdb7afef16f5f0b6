# -*- coding: utf-8 -*-
# Halfmesh/core/ops.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
Primitive operations on a `HalfedgeDS`: the only functions that create entities and wire
their links.

Main Tasks:
-----------
   - add_vertex: allocate an isolated vertex.
   - add_edge:   allocate a twin pair and splice it into both endpoint rings.
   - add_face:   close an ordered loop of free halfedges into a face, relinking vertex
                 rings where two consecutive halfedges are not yet adjacent.

Invariants maintained:
----------------------
   - twin/next/prev symmetry, closed `next` loops, single ring per vertex.
   - Free loops stay free: a face is only ever set on a complete loop.

Notes:
------
   - Repeated `add_edge(v1, v2)` calls create distinct pairs (multi-edges). Twin pairing
     across faces is the builder's job, not this module's.
   - `add_face` validates every halfedge before wiring anything. Ring relinking can still
     fail at a later corner; the builder clears the store in that case.
"""

from typing import Optional, Sequence
import numpy as np
from .entities import Vertex, Halfedge, Face
from .errors import NonManifoldConstructionError, InvalidLoopError


def add_vertex(struct, position, id: Optional[int] = None) -> Vertex:
    """
    Create and store an isolated vertex at `position`.
    """
    v = Vertex(np.array(position, dtype=float).reshape(3), id=id)
    v.index = len(struct.vertices)
    struct.vertices.append(v)
    return v


def _free_incoming(v: Vertex) -> Halfedge:
    """First free incoming halfedge of a non-isolated vertex (raises if the fan is closed)."""
    for he in v.incoming():
        if he.face is None:
            return he
    raise NonManifoldConstructionError(
        "Vertex has no free incoming halfedge; cannot attach a new edge.",
        {"vertex": v.id},
    )


def add_edge(struct, v1: Vertex, v2: Vertex) -> Halfedge:
    """
    Create the twin pair v1->v2 / v2->v1 and return the halfedge starting at v1.

    The new pair is a closed 2-loop when both vertices are isolated; otherwise it is
    inserted after a free incoming halfedge of each non-isolated endpoint:

        in1 -> h1 ... h2 -> out1      (around v1)
        in2 -> h2 ... h1 -> out2      (around v2)

    Raises
    ------
    InvalidLoopError
        If v1 and v2 are the same vertex.
    NonManifoldConstructionError
        If an endpoint has edges but no free incoming halfedge.
    """
    if v1 is v2:
        raise InvalidLoopError("Cannot create an edge from a vertex to itself.", {"vertex": v1.id})

    # Resolve insertion slots before touching anything
    in1 = _free_incoming(v1) if v1.halfedge is not None else None
    in2 = _free_incoming(v2) if v2.halfedge is not None else None

    h1 = Halfedge(v1)
    h2 = Halfedge(v2)
    h1.twin, h2.twin = h2, h1
    h1.next = h1.prev = h2
    h2.next = h2.prev = h1

    if in1 is not None:
        out1 = in1.next
        in1.next, h1.prev = h1, in1
        h2.next, out1.prev = out1, h2
    else:
        v1.halfedge = h1

    if in2 is not None:
        out2 = in2.next
        in2.next, h2.prev = h2, in2
        h1.next, out2.prev = out2, h1
    else:
        v2.halfedge = h2

    for he in (h1, h2):
        he.index = len(struct.halfedges)
        struct.halfedges.append(he)
    return h1


def _make_adjacent(h_in: Halfedge, h_out: Halfedge) -> bool:
    """
    Make `h_out` follow `h_in` around their shared vertex.

    The run of ring entries between them (the patch) is moved behind a free incoming
    halfedge found between `h_out.twin` and `h_in`. Returns False when no such slot exists.
    """
    if h_in.next is h_out:
        return True

    slot = None
    he = h_out.twin
    while he is not h_in:
        if he.face is None:
            slot = he
            break
        he = he.next.twin
    if slot is None:
        return False

    patch_start = h_in.next
    patch_end = h_out.prev
    slot_next = slot.next

    h_in.next, h_out.prev = h_out, h_in
    slot.next, patch_start.prev = patch_start, slot
    patch_end.next, slot_next.prev = slot_next, patch_end
    return True


def add_face(struct, halfedges: Sequence[Halfedge], id: Optional[int] = None) -> Face:
    """
    Bind a face to an ordered cyclic loop of free halfedges.

    Parameters
    ----------
    struct : HalfedgeDS
        Owning store.
    halfedges : sequence of Halfedge
        One halfedge per side with `halfedges[i].twin.vertex is halfedges[i+1].vertex`.
    id : int, optional
        Face identifier (the builder passes the input triangle index).

    Returns
    -------
    Face

    Raises
    ------
    InvalidLoopError
        Fewer than 3 sides, repeated halfedges/vertices, or a broken tail-to-head chain.
    NonManifoldConstructionError
        A halfedge already bounds a face, or a vertex ring has no free slot for the corner.
    """
    loop = list(halfedges)
    n = len(loop)
    if n < 3:
        raise InvalidLoopError("A face needs at least 3 halfedges.", {"sides": n, "face": id})
    if len({he.index for he in loop}) != n:
        raise InvalidLoopError("Face loop repeats a halfedge.", {"face": id})
    if len({he.vertex.index for he in loop}) != n:
        raise InvalidLoopError("Face loop repeats a vertex.", {"face": id})

    for i, curr in enumerate(loop):
        nxt = loop[(i + 1) % n]
        if curr.face is not None:
            raise NonManifoldConstructionError(
                "Halfedge already bounds a face.",
                {"face": id, "bound_to": curr.face.id, "edge": (curr.vertex.id, curr.twin.vertex.id)},
            )
        if curr.twin.vertex is not nxt.vertex:
            raise InvalidLoopError(
                "Consecutive halfedges are not connected tail-to-head.",
                {"face": id, "side": i},
            )

    for i, curr in enumerate(loop):
        nxt = loop[(i + 1) % n]
        if not _make_adjacent(curr, nxt):
            raise NonManifoldConstructionError(
                "Vertex fan has no free slot for the new face corner.",
                {"face": id, "vertex": nxt.vertex.id},
            )

    face = Face(loop[0], id=id)
    for he in loop:
        he.face = face
    face.index = len(struct.faces)
    struct.faces.append(face)
    return face
