# -*- coding: utf-8 -*-
# Halfmesh/core/entities.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
Entity types of the halfedge graph: `Vertex`, `Halfedge` and `Face`, together with the
read-only traversal and geometric queries that external consumers rely on.

Main Tasks:
-----------
   - Vertex: position, integer id, one outgoing halfedge; ring iterators around the vertex.
   - Halfedge: origin vertex, twin, next/prev and owning face; loop iterators.
   - Face: one bounding halfedge; loop access, normal and front/back test.

Conventions:
------------
   - Destination of a halfedge is `h.twin.vertex`.
   - A halfedge with `face is None` is *free* (it lies on a boundary loop).
   - Vertex ring order: for an incoming halfedge `h` of `v`, the next incoming halfedge
     is `h.next.twin`. Outgoing order is the twin of that sequence.
   - `index` is the entity's slot in its store arena; it is set by the primitive ops.

Notes:
------
   - Traversals never mutate the graph; generators are restartable by calling again.
   - Iterators assume the structural invariants hold (closed loops, single vertex ring).
"""

from typing import Iterator, List, Optional
import numpy as np


class Vertex:
    """
    Graph vertex: canonical id, 3D position and one outgoing halfedge (None if isolated).
    """

    __slots__ = ("id", "position", "halfedge", "index")

    def __init__(self, position: np.ndarray, id: Optional[int] = None):
        self.id = id
        self.position = position
        self.halfedge: Optional["Halfedge"] = None
        self.index = -1

    def __repr__(self) -> str:
        return f"Vertex(id={self.id}, position={self.position.tolist()})"

    # ---- predicates ----
    def is_isolated(self) -> bool:
        """True if no edge is attached to the vertex."""
        return self.halfedge is None

    def is_free(self) -> bool:
        """True if a new edge can be attached (isolated, or at least one free incoming halfedge)."""
        if self.halfedge is None:
            return True
        return any(h.face is None for h in self.incoming())

    def is_boundary(self) -> bool:
        """True if the vertex has edges and lies on at least one boundary loop."""
        return self.halfedge is not None and self.is_free()

    # ---- ring iterators ----
    def incoming(self) -> Iterator["Halfedge"]:
        """
        Yield every halfedge ending at this vertex, in ring order.
        """
        if self.halfedge is None:
            return
        start = self.halfedge.twin
        he = start
        while True:
            yield he
            he = he.next.twin
            if he is start:
                break

    def outgoing(self) -> Iterator["Halfedge"]:
        """
        Yield every halfedge starting at this vertex, in ring order.
        """
        for he in self.incoming():
            yield he.twin

    def free_incoming(self) -> List["Halfedge"]:
        """Free (faceless) incoming halfedges; one per gap between fans."""
        return [he for he in self.incoming() if he.face is None]

    @property
    def degree(self) -> int:
        """Number of edges attached to the vertex."""
        return sum(1 for _ in self.incoming())

    def halfedge_to(self, other: "Vertex") -> Optional["Halfedge"]:
        """First outgoing halfedge whose destination is `other`, or None."""
        for he in self.outgoing():
            if he.twin.vertex is other:
                return he
        return None

    def is_connected_to(self, other: "Vertex") -> bool:
        return self.halfedge_to(other) is not None


class Halfedge:
    """
    Oriented edge from `vertex` towards `twin.vertex`.
    """

    __slots__ = ("vertex", "twin", "next", "prev", "face", "index")

    def __init__(self, vertex: Vertex):
        self.vertex = vertex
        self.twin: Optional["Halfedge"] = None
        self.next: Optional["Halfedge"] = None
        self.prev: Optional["Halfedge"] = None
        self.face: Optional["Face"] = None
        self.index = -1

    def __repr__(self) -> str:
        dest = self.twin.vertex.id if self.twin is not None else None
        return f"Halfedge({self.vertex.id}->{dest}, face={None if self.face is None else self.face.id})"

    @property
    def destination(self) -> Vertex:
        return self.twin.vertex

    def is_free(self) -> bool:
        return self.face is None

    def is_boundary(self) -> bool:
        """Alias of `is_free`: a faceless halfedge lies on a boundary loop."""
        return self.is_free()

    def next_loop(self) -> Iterator["Halfedge"]:
        """
        Yield the halfedges of this loop following `next`, starting (and ending before)
        this halfedge. Works for face loops and boundary loops alike.
        """
        he = self
        while True:
            yield he
            he = he.next
            if he is self:
                break

    def prev_loop(self) -> Iterator["Halfedge"]:
        """Mirror of `next_loop` following `prev`."""
        he = self
        while True:
            yield he
            he = he.prev
            if he is self:
                break


class Face:
    """
    Polygon bounded by the `next`-loop of `halfedge`.
    """

    __slots__ = ("id", "halfedge", "index")

    def __init__(self, halfedge: Halfedge, id: Optional[int] = None):
        self.id = id
        self.halfedge = halfedge
        self.index = -1

    def __repr__(self) -> str:
        return f"Face(id={self.id}, vertices={[v.id for v in self.vertices()]})"

    def halfedges(self) -> Iterator[Halfedge]:
        return self.halfedge.next_loop()

    def vertices(self) -> List[Vertex]:
        return [he.vertex for he in self.halfedge.next_loop()]

    @property
    def n_sides(self) -> int:
        return sum(1 for _ in self.halfedge.next_loop())

    def has_vertex(self, vertex: Vertex) -> bool:
        return any(he.vertex is vertex for he in self.halfedge.next_loop())

    def get_normal(self) -> np.ndarray:
        """
        Unit normal from three vertices of the loop (h, h.next, h.prev).

        Computed as (c - b) x (a - b) with a = h.vertex, b = h.next.vertex,
        c = h.prev.vertex, i.e. counter-clockwise winding faces the normal.
        Returns the zero vector for degenerate (collinear) corners.
        """
        h = self.halfedge
        a = h.vertex.position
        b = h.next.vertex.position
        c = h.prev.vertex.position
        n = np.cross(c - b, a - b)
        length = float(np.linalg.norm(n))
        if length > 0.0:
            return n / length
        return np.zeros(3, dtype=float)

    def is_front(self, point) -> bool:
        """
        True if `point` lies on the side the normal points to (points on the plane count
        as front).
        """
        p = np.asarray(point, dtype=float)
        return float(np.dot(p - self.halfedge.vertex.position, self.get_normal())) >= 0.0
