# -*- coding: utf-8 -*-
# Clipxus/planar/topology/_validation.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 11/10/2025 (Updated: 10/19/2026)

Purpose:
--------
Point-array guards shared by boxes, polylines, polygon factories and the loop
predicates, so malformed input fails with the same `ValueError` everywhere.
"""

from typing import Optional
import numpy as np


def _assert_xy(points: Optional[np.ndarray], check_finite: bool = False) -> None:
    """
    Raise `ValueError` unless `points` is an (N, 2) array (finite when `check_finite`).
    """
    if points is None:
        raise ValueError("No geometry provided (points is None).")
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError(f"Expected (N, 2) array for points, got shape {points.shape}.")
    if check_finite:
        bad = ~np.isfinite(points)
        if bad.any():
            raise ValueError(f"Non-finite coordinates detected at indices: {np.argwhere(bad).tolist()}")


def _as_xy(points, min_points: int = 1) -> np.ndarray:
    """
    Coerce to a finite float64 (N, 2) array with at least `min_points` rows.

    Raises
    ------
    ValueError
        If the array is malformed, non-finite, or too short.
    """
    P = np.asarray(points, dtype=np.float64)
    _assert_xy(P, check_finite=True)
    if P.shape[0] < min_points:
        raise ValueError(f"Need at least {min_points} points, got {P.shape[0]}.")
    return P


def _is_exactly_closed(points: np.ndarray, tol: float) -> bool:
    # first == last within an absolute tolerance
    return points.shape[0] >= 2 and bool(np.allclose(points[0], points[-1], atol=tol, rtol=0.0))
