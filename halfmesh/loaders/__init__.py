# -*- coding: utf-8 -*-
# Halfmesh/loaders/__init__.py

"""
Project: Halfmesh
Date: 10/19/2026

Loaders Subpackage:
-------------------
File input for the builder.

Modules:
--------
- mesh_loader: meshio-backed reader returning positions, triangle index and line segments.
"""

__all__ = ["mesh_loader"]
