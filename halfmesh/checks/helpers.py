# -*- coding: utf-8 -*-
# Halfmesh/checks/helpers.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
One-time precomputations shared by all checks. The walks here are bounded so that a
corrupted structure (open `next` chains) is reported instead of looping forever.

Main Tasks:
-----------
- walk_next: bounded `next` walk returning (members, closed).
- precompute_cache: loop membership for every halfedge, plus an arena-membership set.

Cache layout:
-------------
    * loops:       [(representative, [members...], closed), ...] in arena order.
    * loop_of:     {halfedge.index: position in `loops`}.
    * all_closed:  bool.
    * known:       set of id(entity) for halfedges/faces/vertices living in the arenas.
"""

from typing import Any, Dict, List, Tuple


def walk_next(start, limit: int) -> Tuple[List[Any], bool]:
    """
    Follow `next` from `start` for at most `limit` steps.
    Returns the visited halfedges and whether the walk came back to `start`.
    """
    members = [start]
    he = start.next
    steps = 0
    while he is not start:
        if he is None or steps >= limit:
            return members, False
        members.append(he)
        he = he.next
        steps += 1
    return members, True


def precompute_cache(struct, th: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build loop membership once for a validation pass.
    """
    limit = len(struct.halfedges)
    loops = []
    loop_of: Dict[int, int] = {}
    all_closed = True

    for h in struct.halfedges:
        if h.index in loop_of:
            continue
        members, closed = walk_next(h, limit)
        all_closed = all_closed and closed
        slot = len(loops)
        for m in members:
            # First loop claiming a halfedge wins; duplicates surface in loop_partition
            loop_of.setdefault(m.index, slot)
        loops.append((h, members, closed))

    known = set(id(e) for e in struct.halfedges)
    known.update(id(e) for e in struct.faces)
    known.update(id(e) for e in struct.vertices)

    return {
        "loops": loops,
        "loop_of": loop_of,
        "all_closed": all_closed,
        "known": known,
    }
