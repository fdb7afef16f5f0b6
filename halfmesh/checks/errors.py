# -*- coding: utf-8 -*-
# Halfmesh/checks/errors.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
ERROR-tier rules: the structural invariants every built halfedge graph must satisfy.
Each rule inspects a read-only `HalfedgeDS` and returns one normalized finding.

Inputs/Contracts:
-----------------
- `struct` : HalfedgeDS (not mutated)
- `th`     : dict of thresholds/options; unknown keys are ignored.
- `cache`  : dict from `helpers.precompute_cache(struct, th)`.

Finding Schema:
---------------
    {
      "id": "<rule_id>",
      "severity": "error",
      "ok": bool,
      "count": int,
      "examples": [...],      # halfedge/face/vertex arena indices, capped
      "details": {...},
      "fixable": False,       # the builder never repairs topology
    }
"""

from collections import Counter
from typing import Dict, List
from .helpers import walk_next


def _finding(rule_id: str, ok: bool, count: int, examples: List, details: Dict, fixable: bool = False):
    return {
        "id": rule_id,
        "severity": "error",
        "ok": bool(ok),
        "count": int(count),
        "examples": examples[:25],
        "details": details or {},
        "fixable": bool(fixable),
    }


# ------------------------------------------------------------------------------------
# 1) twin_symmetry
# ------------------------------------------------------------------------------------
def twin_symmetry(struct, th, cache) -> Dict:
    """
    h.twin exists, is a different stored halfedge, and h.twin.twin is h.
    """
    known = cache["known"]
    bad = []
    for h in struct.halfedges:
        t = h.twin
        if t is None or t is h or id(t) not in known or t.twin is not h:
            bad.append(h.index)
    return _finding(
        "twin_symmetry",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"note": "Every halfedge must be paired with a distinct, opposite twin."},
    )


# ------------------------------------------------------------------------------------
# 2) next_prev_symmetry
# ------------------------------------------------------------------------------------
def next_prev_symmetry(struct, th, cache) -> Dict:
    """
    h.next.prev is h and h.prev.next is h.
    """
    bad = []
    for h in struct.halfedges:
        if h.next is None or h.prev is None or h.next.prev is not h or h.prev.next is not h:
            bad.append(h.index)
    return _finding(
        "next_prev_symmetry",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"note": "next/prev must be mutual inverses."},
    )


# ------------------------------------------------------------------------------------
# 3) loop_closure
# ------------------------------------------------------------------------------------
def loop_closure(struct, th, cache) -> Dict:
    """
    Following `next` from any halfedge returns to it within the halfedge count.
    """
    bad = [rep.index for rep, _members, closed in cache["loops"] if not closed]
    return _finding(
        "loop_closure",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"note": "Examples are halfedges whose next-chain never returns."},
    )


# ------------------------------------------------------------------------------------
# 4) face_consistency
# ------------------------------------------------------------------------------------
def face_consistency(struct, th, cache) -> Dict:
    """
    Every halfedge of a face loop points to that face, and the face owns exactly the
    halfedges of its loop (side count matches).
    """
    limit = len(struct.halfedges)
    known = cache["known"]
    owned = Counter(id(h.face) for h in struct.halfedges if h.face is not None)

    bad = []
    for f in struct.faces:
        if f.halfedge is None or id(f.halfedge) not in known:
            bad.append(f.index)
            continue
        members, closed = walk_next(f.halfedge, limit)
        if not closed or any(m.face is not f for m in members) or owned[id(f)] != len(members):
            bad.append(f.index)

    stray = [h.index for h in struct.halfedges if h.face is not None and id(h.face) not in known]
    return _finding(
        "face_consistency",
        ok=not bad and not stray,
        count=len(bad) + len(stray),
        examples=bad,
        details={"stray_halfedges": stray[:25]},
    )


# ------------------------------------------------------------------------------------
# 5) vertex_outgoing
# ------------------------------------------------------------------------------------
def vertex_outgoing(struct, th, cache) -> Dict:
    """
    A vertex's outgoing-halfedge reference, if present, is stored and starts at the vertex.
    """
    known = cache["known"]
    bad = []
    for v in struct.vertices:
        h = v.halfedge
        if h is not None and (id(h) not in known or h.vertex is not v):
            bad.append(v.index)
    return _finding(
        "vertex_outgoing",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"note": "Examples are vertex arena indices."},
    )


# ------------------------------------------------------------------------------------
# 6) loop_partition
# ------------------------------------------------------------------------------------
def loop_partition(struct, th, cache) -> Dict:
    """
    `loops()` reports every halfedge exactly once. Requires closed loops; skipped otherwise.
    """
    if not cache["all_closed"]:
        return _finding(
            "loop_partition",
            ok=True,
            count=0,
            examples=[],
            details={"skipped": "open next-chains present (see loop_closure)"},
        )

    seen = Counter()
    for rep in struct.loops():
        for he in rep.next_loop():
            seen[he.index] += 1
    bad = [h.index for h in struct.halfedges if seen[h.index] != 1]
    return _finding(
        "loop_partition",
        ok=not bad,
        count=len(bad),
        examples=bad,
        details={"n_loops": len(cache["loops"])},
    )
