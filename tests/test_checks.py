"""
Invariant checks: clean structures pass, corrupted links are reported, advisories flagged.

Run: python -m pytest tests/test_checks.py -v
"""

import pytest

from halfmesh.checks import DEFAULTS, RULES_ORDER, run_checks
from halfmesh.checks.registry import REGISTRY, SEVERITY, get_enabled_ids
from halfmesh.core import HalfedgeDS


def _failing(findings):
    return sorted(rid for rid, f in findings["rules"].items() if not f["ok"])


# =============================================================================
# Registry / config
# =============================================================================

def test_registry_matches_defaults():
    assert set(REGISTRY) == set(RULES_ORDER) == set(DEFAULTS["enabled"])
    assert RULES_ORDER[:6] == SEVERITY["error"]


def test_get_enabled_ids_defaults_to_all():
    assert get_enabled_ids(None) == RULES_ORDER
    assert "loop_closure" not in get_enabled_ids({"loop_closure": False})


# =============================================================================
# Clean structures
# =============================================================================

@pytest.mark.parametrize("name", ["quad", "tetrahedron", "bowtie"])
def test_built_structures_pass_error_rules(name, request):
    struct = request.getfixturevalue(name)
    findings = run_checks(struct)
    assert findings["ok"]
    assert list(findings["rules"]) == RULES_ORDER
    for rid in SEVERITY["error"]:
        f = findings["rules"][rid]
        assert f["ok"], rid
        assert f["severity"] == "error"
        assert f["id"] == rid


def test_meta(quad):
    meta = run_checks(quad, {"thresholds": {"normal_eps": 1e-6}})["meta"]
    assert (meta["n_vertices"], meta["n_halfedges"], meta["n_faces"]) == (4, 10, 2)
    assert meta["thresholds"]["normal_eps"] == 1e-6
    assert meta["enabled"]["twin_symmetry"] is True


def test_disabled_rule_is_not_reported(bowtie):
    findings = run_checks(bowtie, {"enabled": {"nonmanifold_vertices": False}})
    assert "nonmanifold_vertices" not in findings["rules"]
    assert findings["ok"]


def test_defaults_not_mutated(quad):
    run_checks(quad, {"thresholds": {"normal_eps": 0.5}})
    assert DEFAULTS["thresholds"]["normal_eps"] == 1e-12


# =============================================================================
# Advisories
# =============================================================================

def test_bowtie_flags_shared_vertex(bowtie):
    f = run_checks(bowtie)["rules"]["nonmanifold_vertices"]
    assert not f["ok"]
    assert f["severity"] == "warn"
    assert f["examples"] == [0]


def test_isolated_vertex_and_wire_edge():
    pts = [[0, 0, 0], [1, 0, 0], [5, 5, 5]]
    s = HalfedgeDS().build_from_geometry(pts, [2, 2, 2], edges=[[0, 1]])
    findings = run_checks(s)

    assert findings["ok"]
    assert _failing(findings) == ["isolated_edges", "isolated_vertices"]
    assert findings["rules"]["isolated_edges"]["examples"] == [(0, 1)]
    assert findings["rules"]["isolated_vertices"]["count"] == 1


def test_collinear_face_flagged_degenerate():
    s = HalfedgeDS().build_from_geometry([[0, 0, 0], [1, 0, 0], [2, 0, 0]], [0, 1, 2])
    findings = run_checks(s)
    assert findings["ok"]
    assert findings["rules"]["degenerate_faces"]["examples"] == [0]


# =============================================================================
# Corruption
# =============================================================================

def test_broken_twin_reported(quad):
    quad.halfedges[0].twin = quad.halfedges[2]
    findings = run_checks(quad)
    f = findings["rules"]["twin_symmetry"]

    assert not findings["ok"]
    assert not f["ok"]
    assert 0 in f["examples"]


def test_open_next_chain_reported(quad):
    boundary = quad.boundary_loops()[0]
    boundary.next = None
    findings = run_checks(quad)

    assert not findings["ok"]
    assert not findings["rules"]["loop_closure"]["ok"]
    assert not findings["rules"]["next_prev_symmetry"]["ok"]
    assert findings["rules"]["loop_partition"]["details"].get("skipped")
    assert findings["rules"]["nonmanifold_vertices"]["details"].get("skipped")


def test_face_pointer_mismatch_reported(quad):
    f0, f1 = quad.faces
    next(iter(f0.halfedges())).face = f1
    findings = run_checks(quad)
    f = findings["rules"]["face_consistency"]
    assert not f["ok"]
    assert set(f["examples"]) == {0, 1}


def test_foreign_vertex_halfedge_reported(quad):
    a, b = quad.vertices[0], quad.vertices[1]
    a.halfedge = b.halfedge
    f = run_checks(quad)["rules"]["vertex_outgoing"]
    assert not f["ok"]
    assert f["examples"] == [0]


def test_nested_override_keeps_other_keys(quad):
    from halfmesh.core.store import merge_options

    base = {"enabled": {"a": True, "b": True}, "thresholds": {"normal_eps": 1e-12}}
    merged = merge_options(base, {"enabled": {"b": False}})
    assert merged == {"enabled": {"a": True, "b": False}, "thresholds": {"normal_eps": 1e-12}}
    assert base["enabled"]["b"] is True

    meta = run_checks(quad, {"enabled": {"isolated_edges": False}})["meta"]
    assert meta["enabled"]["isolated_edges"] is False
    assert meta["enabled"]["twin_symmetry"] is True
    assert meta["thresholds"] == {"normal_eps": 1e-12}
