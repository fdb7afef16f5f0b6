# -*- coding: utf-8 -*-
# Halfmesh/core/errors.py


"""
Project: Halfmesh
Date: 10/19/2026

Purpose
-------
Provide typed exceptions for the halfedge construction layer with compact, context-aware
messages so that builder, primitive operations and validation report failures uniformly.

Main Tasks
----------
    1. Define TopologyError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: MissingAttributeError, NonManifoldConstructionError,
       InvalidLoopError.
    3. Supply _format_context helper and expose public names via __all__.

Notes
-----
- Context is optional; long values are truncated for readability.
- Input-shape problems (wrong buffer lengths, bad tolerance) stay plain ValueError.
"""

__all__ = [
    "TopologyError",
    "MissingAttributeError",
    "NonManifoldConstructionError",
    "InvalidLoopError",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    parts = []
    for k in sorted(ctx.keys()):
        sv = repr(ctx[k])
        if len(sv) > 120:
            sv = sv[:117] + "..."
        parts.append("{}={}".format(k, sv))
    return " | " + ", ".join(parts)


class TopologyError(Exception):
    """
    Base class for all errors raised while building or validating a halfedge structure.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"face": 12, "vertex": 4}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super().__init__(message)

    def __str__(self):
        base = super().__str__()
        return base + _format_context(self.context)


class MissingAttributeError(TopologyError):
    """
    Required position data was not supplied to the builder.
    """


class NonManifoldConstructionError(TopologyError):
    """
    The requested configuration cannot be represented:
      - a halfedge would have to bound two faces (edge shared with the same orientation,
        or three or more faces on one edge)
      - a vertex fan is closed and has no free slot for a new edge or face corner
    """


class InvalidLoopError(TopologyError):
    """
    Caller contract violations of the primitive operations:
      - an edge from a vertex to itself
      - a face loop with fewer than 3 sides, repeated halfedges or repeated vertices
      - consecutive halfedges that are not connected tail-to-head
    """
