# -*- coding: utf-8 -*-
# Halfmesh/core/merge.py

"""
Project: Halfmesh
Date: 10/19/2026

Purpose:
--------
Vertex merger: map raw positions to canonical vertex indices by grid quantization.

Main Tasks:
-----------
   - Derive the quantization multiplier 10^ceil(log10(1/tolerance)).
   - Round every component half-up on that grid and hash the rounded triple.
   - First occurrence of a key becomes canonical; later equal keys reuse it.

Notes:
------
   - This is cell equality, not a distance test: two points closer than `tolerance` that
     straddle a cell boundary are NOT merged, and points exactly one cell apart never are.
   - Rounding is half-up (floor(x*m + 0.5)); -0.0 and 0.0 share a cell.
"""

from typing import Dict, Tuple
import math
import numpy as np


def quantization_multiplier(tolerance: float) -> float:
    """
    Grid scale for a given tolerance: 10 ** ceil(log10(1 / tolerance)).

    Raises
    ------
    ValueError
        If `tolerance` is not a finite positive number.
    """
    tol = float(tolerance)
    if not math.isfinite(tol) or tol <= 0.0:
        raise ValueError(f"tolerance must be a finite positive number (got {tolerance!r}).")
    # round() absorbs float noise in log10 so that exact powers of ten stay exact
    decimals = math.ceil(round(math.log10(1.0 / tol), 9))
    return float(10.0 ** decimals)


def as_points(positions) -> np.ndarray:
    """
    Coerce a flat buffer (3*N,) or an (N,3)/(N,2) array into an (N,3) float array.
    XY input is lifted to z=0.
    """
    pts = np.asarray(positions, dtype=float)
    if pts.ndim == 1:
        if pts.size % 3 != 0:
            raise ValueError(f"Flat position buffer length must be a multiple of 3, got {pts.size}.")
        return pts.reshape(-1, 3)
    if pts.ndim != 2 or pts.shape[1] not in (2, 3):
        raise ValueError(f"Expected (N, 3) or (N, 2) array for positions, got shape {pts.shape}.")
    if pts.shape[1] == 2:
        pts3 = np.zeros((pts.shape[0], 3), dtype=float)
        pts3[:, :2] = pts
        return pts3
    return pts


def compute_vertices_index_array(positions, tolerance: float = 1e-10) -> np.ndarray:
    """
    Canonical index of every input position.

    Parameters
    ----------
    positions : array_like
        Flat (3*N,) buffer or (N,3) array of coordinates.
    tolerance : float
        Quantization cell size.

    Returns
    -------
    np.ndarray
        (N,) int64 array; entry i is the index of the first position sharing i's cell.
        Already-unique input yields the identity permutation.
    """
    pts = as_points(positions)
    mult = quantization_multiplier(tolerance)

    # + 0.0 folds -0.0 into 0.0 so that both land in the same key
    cells = np.floor(pts * mult + 0.5) + 0.0

    seen: Dict[Tuple[float, float, float], int] = {}
    out = np.empty(len(cells), dtype=np.int64)
    for i, key in enumerate(map(tuple, cells.tolist())):
        out[i] = seen.setdefault(key, i)
    return out
