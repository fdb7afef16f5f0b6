# -*- coding: utf-8 -*-
# Halfmesh/stats/__init__.py

"""
Project: Halfmesh
Date: 10/19/2026

Modules:
--------
- report:    one-shot topological summary of a built structure.
- export:    saving summaries as CSV/JSON.
"""

from .report import summarize
from .export import write_summary_csv, write_summary_json

__all__ = ["report", "export", "summarize", "write_summary_csv", "write_summary_json"]
