# -*- coding: utf-8 -*-
# Clipxus/planar/topology/loop.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 8/31/2025 (Updated: 10/19/2026)

Purpose:
--------
Checks on *sampled* rings, i.e. (N, 2) arrays produced by `ContinuousCurve.sample`
or handed to `polygon(...)`. The clipper never relies on them internally; they exist
to canonicalize polygon input and to verify clip results independently of the curve
algebra (a clipped boundary must wind once around points of domain ∩ box).

Main Tasks:
-----------
   1. Closure: `is_closed`, `ensure_closed`.
   2. Shoelace area and the CW/CCW label derived from its sign.
   3. `close_and_orient` for polygon factories (inside on the left means CCW).
   4. `winding_number` / `total_winding` for point-in-region checks over several rings.

Notes:
------
   - Rings may be given open (last -> first implied) or explicitly closed.
   - Nothing here mutates its input.
"""

from typing import Iterable
import numpy as np
from ._validation import _assert_xy, _is_exactly_closed

_TWO_PI = 2.0 * np.pi


def is_closed(points: np.ndarray, tol: float = 1e-9) -> bool:
    """True when the last sample repeats the first within `tol` (absolute)."""
    _assert_xy(points)
    return _is_exactly_closed(points, tol)


def ensure_closed(points: np.ndarray, tol: float = 1e-9) -> np.ndarray:
    """
    Return `points` itself when already closed, else a copy with the first sample
    appended.
    """
    if is_closed(points, tol):
        return points
    return np.concatenate((points, points[:1]), axis=0)


def signed_area(points_closed: np.ndarray) -> float:
    """
    Shoelace area of a ring; positive for CCW traversal.

    An explicit closing sample contributes a zero-length edge, so open and closed
    inputs give the same value.

    Raises
    ------
    ValueError
        If fewer than 3 samples are given.
    """
    _assert_xy(points_closed)
    if len(points_closed) < 3:
        raise ValueError("Need at least 3 points to compute area.")
    nxt = np.roll(points_closed, -1, axis=0)
    cross = points_closed[:, 0] * nxt[:, 1] - nxt[:, 0] * points_closed[:, 1]
    return 0.5 * float(np.sum(cross))


def orientation(points_closed: np.ndarray) -> str:
    """"CCW" for positive area; degenerate (zero-area) rings count as "CW"."""
    return "CCW" if signed_area(points_closed) > 0.0 else "CW"


def close_and_orient(points: np.ndarray,
                     desired: str = "CCW",
                     tol_close: float = 1e-9) -> np.ndarray:
    """
    Closed ring with the requested orientation.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) samples, open or closed.
    desired : {"CCW", "CW"}
        Target orientation. Domains bounded by the ring lie on its left for "CCW".
    tol_close : float
        Closure tolerance.

    Returns
    -------
    np.ndarray
        The closed ring; reversed (same start vertex kept last) only when needed.
    """
    if desired not in ("CCW", "CW"):
        raise ValueError("desired must be 'CCW' or 'CW'.")
    ring = ensure_closed(points, tol=tol_close)
    if orientation(ring) != desired:
        ring = ensure_closed(ring[-2::-1], tol=tol_close)
    return ring


def winding_number(points: np.ndarray, point) -> int:
    """
    Winding number of a sampled ring around `point`.

    The ring is treated as implicitly closed (last -> first). The result is the net
    number of counter-clockwise turns made by the vector from `point` to a traveller
    on the ring; it is meaningless for points lying on the ring itself.

    Parameters
    ----------
    points : np.ndarray
        (N, 2) array of ring samples, N >= 3.
    point : array-like
        Query point (x, y).

    Returns
    -------
    int
        Signed number of turns (positive for CCW rings around the point).
    """
    _assert_xy(points)
    if points.shape[0] < 3:
        raise ValueError("Need at least 3 points to compute a winding number.")
    q = np.asarray(point, dtype=np.float64)
    rel = points - q
    ang = np.arctan2(rel[:, 1], rel[:, 0])
    d = np.diff(np.append(ang, ang[0]))
    # each step is the shortest signed turn between consecutive samples
    d = (d + np.pi) % _TWO_PI - np.pi
    return int(round(float(np.sum(d)) / _TWO_PI))


def total_winding(loops: Iterable[np.ndarray], point) -> int:
    """Sum of `winding_number` over several rings (e.g., all rings of a boundary)."""
    return sum(winding_number(L, point) for L in loops)
