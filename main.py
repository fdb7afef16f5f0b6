# -*- coding: utf-8 -*-
# Halfmesh/main.py

"""
End-to-end driver:
  1) Read a triangle mesh (any meshio format)
  2) Build the halfedge structure
  3) Run invariant checks (hard stop on errors) and persist the report
  4) Topological summary -> CSV/JSON

Usage:
  python main.py [mesh_path] [tolerance]
"""

import os
import logging
import json
import sys

from pathlib import Path
from halfmesh.api import build_from_file
from halfmesh.checks import run_checks
from halfmesh.stats.report import summarize
from halfmesh.stats.export import write_summary_csv, write_summary_json
from halfmesh.core import TopologyError


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Halfmesh")

    mesh_path = sys.argv[1] if len(sys.argv) > 1 else "mesh/surface.obj"
    tolerance = float(sys.argv[2]) if len(sys.argv) > 2 else None

    out_dir = "stats"
    os.makedirs(out_dir, exist_ok=True)

    # ------------------------------------------------------------------
    # 1-2) Read + build
    # ------------------------------------------------------------------
    try:
        struct = build_from_file(mesh_path, tolerance=tolerance)
    except TopologyError as e:
        print(f"❌ Halfedge construction failed: {e}", file=sys.stderr)
        sys.exit(1)
    log.info("Built: %r", struct)

    # ------------------------------------------------------------------
    # 3) Invariant checks (hard stop on errors)
    # ------------------------------------------------------------------
    CHECKS_CONFIG = None  # or e.g. {"enabled": {"isolated_edges": False}}

    findings = run_checks(struct, CHECKS_CONFIG)

    report_path = Path(out_dir) / (Path(mesh_path).stem + ".checks.json")
    report_path.write_text(json.dumps(findings, indent=2))

    if not findings["ok"]:
        failures = []
        for rid, f in findings["rules"].items():
            if f.get("severity") == "error" and not f.get("ok", True):
                failures.append((rid, int(f.get("count", 0)), f.get("examples", [])[:3]))

        lines = [
            "❌ Halfedge validation failed. The following error checks did not pass:",
            *(f"  - {rid}: count={cnt}"
              + (f", examples={examples}" if examples else "")
              for rid, cnt, examples in failures),
            f"➡ See full report: {report_path}",
        ]
        print("\n".join(lines), file=sys.stderr)
        sys.exit(1)

    print(f"✅ Halfedge checks passed. Report: {report_path}")

    # ------------------------------------------------------------------
    # 4) Summary
    # ------------------------------------------------------------------
    summary = summarize(struct)
    log.info("Summary:\n%s", summary)

    csv_path = write_summary_csv(summary, os.path.join(out_dir, "summary.csv"))
    json_path = write_summary_json(summary, os.path.join(out_dir, "summary.json"))

    print("Stats written:")
    print(" - CSV :", csv_path)
    print(" - JSON:", json_path)
