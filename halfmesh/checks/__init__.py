# -*- coding: utf-8 -*-
# Halfmesh/checks/__init__.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
Public API for validating a built `HalfedgeDS` and returning normalized findings suitable
for CLI/CI consumption.

Main Tasks
----------
   - Provide defaults (`DEFAULTS`) for enable/disable policy and thresholds.
   - Orchestrate registry-defined rules over the structure and a shared cache.
   - Aggregate findings and compute a top-level `ok` status.

Returned Schema:
----------------
{
  "ok": bool,
  "rules": { <rule_id>: finding_dict, ... },
  "meta": {
    "n_vertices": int, "n_halfedges": int, "n_faces": int,
    "thresholds": dict, "enabled": dict
  }
}
"""


from typing import Dict, Any, Optional
import copy
import logging
from halfmesh.core.store import merge_options as _deep_merge
from .helpers import precompute_cache
from .registry import REGISTRY, RULES_ORDER, get_enabled_ids

logger = logging.getLogger(__name__)


# -------------------------
# Defaults (policy)
# -------------------------
DEFAULTS: Dict[str, Any] = {
    "enabled": {
        # errors
        "twin_symmetry": True,
        "next_prev_symmetry": True,
        "loop_closure": True,
        "face_consistency": True,
        "vertex_outgoing": True,
        "loop_partition": True,
        # warnings
        "isolated_vertices": True,
        "isolated_edges": True,
        "nonmanifold_vertices": True,
        "degenerate_faces": True,
    },
    "thresholds": {
        "normal_eps": 1e-12,
    },
}


def _meta(struct, cfg):
    return {
        "n_vertices": len(struct.vertices),
        "n_halfedges": len(struct.halfedges),
        "n_faces": len(struct.faces),
        "thresholds": copy.deepcopy(cfg.get("thresholds", {})),
        "enabled": copy.deepcopy(cfg.get("enabled", {})),
    }


def run_checks(struct, config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Run all enabled rules (per registry order) against a built structure.

    Parameters
    ----------
    struct : HalfedgeDS
        Structure to validate (read-only).
    config : dict, optional
        Overrides for `DEFAULTS` with the same structure (keys: "enabled", "thresholds").

    Returns
    -------
    dict
        Payload with keys:
          - "ok": bool: False iff any ERROR-severity rule fails.
          - "rules": dict: rule_id -> finding dict.
          - "meta": dict: structure sizes, thresholds, enabled map.
    """
    cfg = _deep_merge(DEFAULTS, config or {})
    thresholds = cfg.get("thresholds", {})
    cache = precompute_cache(struct, thresholds)

    results: Dict[str, Any] = {}
    for rid in get_enabled_ids(cfg.get("enabled")):
        spec = REGISTRY.get(rid)
        if spec is None:
            continue
        finding = spec.fn(struct, thresholds, cache)
        finding["severity"] = spec.severity
        finding["id"] = rid
        results[rid] = finding

    ok = all(f.get("ok", False) for rid, f in results.items() if REGISTRY[rid].severity == "error")
    failed = [rid for rid, f in results.items() if not f["ok"]]
    if failed:
        logger.info("[run_checks] rules reporting issues: %s", ", ".join(failed))

    return {
        "ok": ok,
        "rules": results,
        "meta": _meta(struct, cfg),
    }


__all__ = ["DEFAULTS", "run_checks", "REGISTRY", "RULES_ORDER"]
