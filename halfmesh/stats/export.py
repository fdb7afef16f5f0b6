# -*- coding: utf-8 -*-
# Halfmesh/stats/export.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
Export summary and check payloads (nested dictionaries/lists) as CSV or JSON. Nested
structures are flattened into "dot.path.key" rows for CSV; numpy scalars are unwrapped.

Main Tasks:
-----------
    1. Flatten nested dictionaries into ("dot.path.key", value) rows.
    2. Export as:
        - CSV: 2-column "key,value" table.
        - JSON: indented JSON.
"""

from typing import Any, Dict, List, Tuple
import csv
import json
import os
import numpy as np


def _is_scalar(x: Any) -> bool:
    return isinstance(x, (str, bool, int, float, np.generic))


def _json_default(o: Any) -> Any:
    if isinstance(o, np.generic):
        return o.item()
    if isinstance(o, np.ndarray):
        return o.tolist()
    return str(o)


def _to_json_str(x: Any) -> str:
    return json.dumps(x, default=_json_default, ensure_ascii=False)


def _flatten(prefix: str, obj: Any, out: List[Tuple[str, Any]]) -> None:
    """
    Recursively flatten `obj` into (key_path, value) rows.

    Scalars are kept; dicts recurse over sorted keys joined with '.'; everything else
    (lists, tuples, arrays) is stored as a JSON string.
    """
    if _is_scalar(obj):
        out.append((prefix, obj.item() if isinstance(obj, np.generic) else obj))
        return

    if isinstance(obj, dict):
        for k in sorted(obj.keys(), key=str):
            key = str(k)
            _flatten(key if prefix == "" else f"{prefix}.{key}", obj[k], out)
        return

    out.append((prefix, _to_json_str(obj)))


def _ensure_folder(path: str) -> None:
    folder = os.path.dirname(os.path.abspath(path))
    if folder and not os.path.exists(folder):
        os.makedirs(folder, exist_ok=True)


def flatten(summary: Dict[str, Any]) -> List[Tuple[str, Any]]:
    """Public wrapper around the flattener; returns the rows written by `write_summary_csv`."""
    rows: List[Tuple[str, Any]] = []
    _flatten("", summary, rows)
    return rows


def write_summary_csv(summary: Dict[str, Any], path: str) -> str:
    """
    Write a summary dictionary to a 2-column CSV file ("key,value"); returns `path`.
    """
    rows = flatten(summary)
    _ensure_folder(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["key", "value"])
        for k, v in rows:
            w.writerow([k, v])
    return path


def write_summary_json(summary: Dict[str, Any], path: str, indent: int = 2) -> str:
    """
    Write a summary dictionary to a JSON file; returns `path`.
    """
    _ensure_folder(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=indent, default=_json_default, ensure_ascii=False)
    return path
