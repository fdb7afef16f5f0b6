"""
Primitive operations: add_vertex / add_edge / add_face on a bare store.

Run: python -m pytest tests/test_ops.py -v
"""

import numpy as np
import pytest

from halfmesh.core import (
    HalfedgeDS,
    InvalidLoopError,
    NonManifoldConstructionError,
    add_edge,
    add_face,
    add_vertex,
)


def _loop(h):
    return list(h.next_loop())


def _triangle_edges(struct):
    v0 = add_vertex(struct, [0, 0, 0], id=0)
    v1 = add_vertex(struct, [1, 0, 0], id=1)
    v2 = add_vertex(struct, [0, 1, 0], id=2)
    ab = add_edge(struct, v0, v1)
    bc = add_edge(struct, v1, v2)
    ca = add_edge(struct, v2, v0)
    return (v0, v1, v2), (ab, bc, ca)


# =============================================================================
# add_vertex
# =============================================================================

def test_add_vertex_is_isolated_and_indexed():
    s = HalfedgeDS()
    v = add_vertex(s, (1, 2, 3), id=7)
    assert s.vertices == [v]
    assert v.index == 0
    assert v.id == 7
    assert v.is_isolated()
    assert v.is_free()
    assert not v.is_boundary()
    assert v.degree == 0
    np.testing.assert_array_equal(v.position, [1.0, 2.0, 3.0])


# =============================================================================
# add_edge
# =============================================================================

def test_edge_between_isolated_vertices_is_a_two_loop():
    s = HalfedgeDS()
    a = add_vertex(s, [0, 0, 0])
    b = add_vertex(s, [1, 0, 0])
    h = add_edge(s, a, b)

    assert len(s.halfedges) == 2
    assert h.vertex is a and h.destination is b
    assert h.twin.twin is h
    assert h.next is h.twin and h.prev is h.twin
    assert h.twin.next is h
    assert h.face is None and h.twin.face is None
    assert a.halfedge is h and b.halfedge is h.twin
    assert [he.index for he in s.halfedges] == [0, 1]


def test_repeated_edge_creates_parallel_pair():
    s = HalfedgeDS()
    a = add_vertex(s, [0, 0, 0])
    b = add_vertex(s, [1, 0, 0])
    h1 = add_edge(s, a, b)
    h2 = add_edge(s, a, b)

    assert h1 is not h2
    assert len(s.halfedges) == 4
    assert a.degree == 2 and b.degree == 2
    # two 2-loops, each made of one halfedge of each pair
    assert len(s.loops()) == 2
    assert all(len(_loop(rep)) == 2 for rep in s.loops())


def test_edge_splices_into_existing_boundary_loop():
    s = HalfedgeDS()
    a = add_vertex(s, [0, 0, 0])
    b = add_vertex(s, [1, 0, 0])
    c = add_vertex(s, [2, 0, 0])
    ab = add_edge(s, a, b)
    bc = add_edge(s, b, c)

    assert ab.next is bc
    assert len(s.loops()) == 1
    assert len(_loop(ab)) == 4
    assert b.degree == 2


def test_self_edge_rejected():
    s = HalfedgeDS()
    a = add_vertex(s, [0, 0, 0])
    with pytest.raises(InvalidLoopError):
        add_edge(s, a, a)
    assert s.halfedges == []


def test_edge_into_closed_fan_rejected(tetrahedron):
    v = tetrahedron.vertices[0]
    n_before = len(tetrahedron.halfedges)
    w = add_vertex(tetrahedron, [5, 5, 5])

    assert not v.is_free()
    with pytest.raises(NonManifoldConstructionError):
        add_edge(tetrahedron, v, w)
    assert len(tetrahedron.halfedges) == n_before
    assert w.is_isolated()


# =============================================================================
# add_face
# =============================================================================

def test_face_from_three_edges():
    s = HalfedgeDS()
    (v0, v1, v2), (ab, bc, ca) = _triangle_edges(s)
    f = add_face(s, [ab, bc, ca], id=11)

    assert s.faces == [f]
    assert f.id == 11 and f.index == 0
    assert f.n_sides == 3
    assert [v.id for v in f.vertices()] == [0, 1, 2]
    assert all(he.face is f for he in (ab, bc, ca))
    assert all(he.twin.face is None for he in (ab, bc, ca))

    boundary = s.boundary_loops()
    assert len(boundary) == 1
    assert len(_loop(boundary[0])) == 3


def test_face_needs_three_sides():
    s = HalfedgeDS()
    a = add_vertex(s, [0, 0, 0])
    b = add_vertex(s, [1, 0, 0])
    h = add_edge(s, a, b)
    with pytest.raises(InvalidLoopError, match="at least 3"):
        add_face(s, [h, h.twin])


def test_face_rejects_repeated_halfedge():
    s = HalfedgeDS()
    _, (ab, bc, _ca) = _triangle_edges(s)
    with pytest.raises(InvalidLoopError, match="repeats a halfedge"):
        add_face(s, [ab, bc, ab])


def test_face_rejects_broken_chain():
    s = HalfedgeDS()
    a = add_vertex(s, [0, 0, 0])
    b = add_vertex(s, [1, 0, 0])
    c = add_vertex(s, [0, 1, 0])
    d = add_vertex(s, [1, 1, 0])
    ab = add_edge(s, a, b)
    bc = add_edge(s, b, c)
    da = add_edge(s, d, a)
    with pytest.raises(InvalidLoopError, match="tail-to-head"):
        add_face(s, [ab, bc, da])
    assert s.faces == []


def test_face_rejects_bound_halfedge():
    s = HalfedgeDS()
    _, (ab, bc, ca) = _triangle_edges(s)
    add_face(s, [ab, bc, ca], id=0)
    with pytest.raises(NonManifoldConstructionError) as exc:
        add_face(s, [ab, bc, ca], id=1)
    assert exc.value.context["bound_to"] == 0
    assert len(s.faces) == 1


def test_opposite_face_closes_edges_without_boundary():
    s = HalfedgeDS()
    _, (ab, bc, ca) = _triangle_edges(s)
    add_face(s, [ab, bc, ca], id=0)
    add_face(s, [ca.twin, bc.twin, ab.twin], id=1)

    assert s.boundary_loops() == []
    assert len(s.face_loops()) == 2


def test_face_sealing_a_shared_vertex_rejected(bowtie):
    # back side of triangle O,A,B would close O's ring around one fan only
    o, a, b = bowtie.vertices[0], bowtie.vertices[1], bowtie.vertices[2]
    links = [(h.next, h.prev, h.face) for h in bowtie.halfedges]
    loop = [a.halfedge_to(o), o.halfedge_to(b), b.halfedge_to(a)]

    with pytest.raises(NonManifoldConstructionError, match="no free slot") as exc:
        add_face(bowtie, loop)
    assert exc.value.context["vertex"] == 0
    assert len(bowtie.faces) == 2
    assert [(h.next, h.prev, h.face) for h in bowtie.halfedges] == links
