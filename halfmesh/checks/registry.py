# -*- coding: utf-8 -*-
# Halfmesh/checks/registry.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
Central registry of structure validation rules. Each rule is defined once here with its
metadata (id, function, severity), providing a single source of truth for execution order
and selection.

Main Tasks:
-----------
   - Bind rule functions from `errors.py` and `warnings.py` into `RuleSpec` objects.
   - Populate `REGISTRY` (id -> spec) and `RULES_ORDER` (deterministic ordering).
   - Provide a filter function for enabling/disabling rules.

Notes:
------
   - Duplicates are disallowed: adding a rule with an existing id raises ValueError.
   - Severity is constrained to {"error", "warn"}.
"""


from dataclasses import dataclass
from typing import Callable, Dict, List, Optional
from . import errors as _err
from . import warnings as _wrn


@dataclass(frozen=True)
class RuleSpec:
    id: str
    fn: Callable  # signature: fn(struct, thresholds_dict, cache_dict) -> finding_dict
    severity: str  # "error" | "warn"


REGISTRY: Dict[str, RuleSpec] = {}

def _add(spec: RuleSpec) -> None:
    if spec.id in REGISTRY:
        raise ValueError(f"Duplicate rule id in registry: {spec.id}")
    if spec.severity not in ("error", "warn"):
        raise ValueError(f"Invalid severity for {spec.id}: {spec.severity}")
    REGISTRY[spec.id] = spec


# Errors (invariant violations)
_add(RuleSpec("twin_symmetry",      _err.twin_symmetry,      "error"))
_add(RuleSpec("next_prev_symmetry", _err.next_prev_symmetry, "error"))
_add(RuleSpec("loop_closure",       _err.loop_closure,       "error"))
_add(RuleSpec("face_consistency",   _err.face_consistency,   "error"))
_add(RuleSpec("vertex_outgoing",    _err.vertex_outgoing,    "error"))
_add(RuleSpec("loop_partition",     _err.loop_partition,     "error"))

# Warnings (advisories)
_add(RuleSpec("isolated_vertices",    _wrn.isolated_vertices,    "warn"))
_add(RuleSpec("isolated_edges",       _wrn.isolated_edges,       "warn"))
_add(RuleSpec("nonmanifold_vertices", _wrn.nonmanifold_vertices, "warn"))
_add(RuleSpec("degenerate_faces",     _wrn.degenerate_faces,     "warn"))


# Links first; loop-level rules rely on them
RULES_ORDER: List[str] = [
    "twin_symmetry",
    "next_prev_symmetry",
    "loop_closure",
    "face_consistency",
    "vertex_outgoing",
    "loop_partition",
    "isolated_vertices",
    "isolated_edges",
    "nonmanifold_vertices",
    "degenerate_faces",
]


SEVERITY = {
    "error": [rid for rid, spec in REGISTRY.items() if spec.severity == "error"],
    "warn":  [rid for rid, spec in REGISTRY.items() if spec.severity == "warn"],
}


def get_enabled_ids(enabled_map: Optional[Dict[str, bool]]) -> List[str]:
    """
    Filter RULES_ORDER with a rule_id -> bool map (absent ids default to enabled).
    """
    if not enabled_map:
        return list(RULES_ORDER)
    return [rid for rid in RULES_ORDER if enabled_map.get(rid, True)]
