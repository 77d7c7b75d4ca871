# -*- coding: utf-8 -*-
# Clipxus/planar/curves/polyline.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 8/31/2025 (Updated: 10/19/2026)

Purpose:
--------
Polygonal curves: open `Polyline` and closed `LinearRing`.

Parameterization:
-----------------
   - Segment i joins vertex i to vertex i+1 and owns parameters [i, i+1].
   - Polyline: t in [0, N-1]. LinearRing: t in [0, N) with the closing segment N-1 -> 0;
     parameter N folds back to 0.

Notes:
------
   - Vertex arrays are validated with the shared (N, 2) guards and stored read-only.
   - A ring given with a repeated closing vertex is stored without it.
   - Inside tests use the corner rule at vertices (convex: both sides, reflex: either).
"""

from typing import List
import math
import numpy as np

from ..config import DEFAULT_TOL
from ..core.numeric import as_point, reach
from ..topology._validation import _as_xy, _is_exactly_closed
from ..topology.loop import signed_area
from .base import ContinuousCurve, CurveKind, piecewise_signed_distance, unique_points
from .lines import segment

__all__ = ["Polyline", "LinearRing", "polyline", "linear_ring"]


# -----------------------
# Shared helpers (vertex arrays)
# -----------------------
def _freeze(V: np.ndarray) -> np.ndarray:
    V = np.array(V, dtype=np.float64)
    V.flags.writeable = False
    return V


def _n_segments(V: np.ndarray, closed: bool) -> int:
    return V.shape[0] if closed else V.shape[0] - 1


def _locate(V: np.ndarray, t: float, closed: bool):
    """(segment index, fraction along it) for parameter t."""
    m = _n_segments(V, closed)
    if closed:
        t = t % m
    i = min(max(int(math.floor(t)), 0), m - 1)
    return i, t - i


def _point(V: np.ndarray, t: float, closed: bool) -> np.ndarray:
    i, u = _locate(V, t, closed)
    a = V[i]
    b = V[(i + 1) % V.shape[0]]
    return a + u * (b - a)


def _segment_direction(V: np.ndarray, t: float, closed: bool) -> np.ndarray:
    i, _ = _locate(V, t, closed)
    return V[(i + 1) % V.shape[0]] - V[i]


def _nearest(V: np.ndarray, p: np.ndarray, closed: bool):
    """Yield (parameter, distance) of the nearest point on every segment."""
    n = V.shape[0]
    for i in range(_n_segments(V, closed)):
        a, b = V[i], V[(i + 1) % n]
        ab = b - a
        L2 = float(ab @ ab)
        u = 0.0 if L2 == 0.0 else min(max(float((p - a) @ ab) / L2, 0.0), 1.0)
        yield i + u, float(np.linalg.norm(a + u * ab - p))


def _pieces(V: np.ndarray, closed: bool) -> list:
    n = V.shape[0]
    out = []
    for i in range(_n_segments(V, closed)):
        a, b = V[i], V[(i + 1) % n]
        if np.any(a != b):
            out.append(segment(a, b))
    return out


def _sub_vertices(V: np.ndarray, a: float, b: float, closed: bool) -> np.ndarray:
    """Vertices of the portion [a, b] (b may exceed the period for closed rings)."""
    n = V.shape[0]
    pts = [_point(V, a, closed)]
    for k in range(int(math.floor(a)) + 1, int(math.ceil(b))):
        pts.append(V[k % n])
    pts.append(_point(V, b, closed))
    return np.array(pts)


def _intersections(V: np.ndarray, closed: bool, line, tol: float) -> List[np.ndarray]:
    found = []
    for seg in _pieces(V, closed):
        found.extend(seg.intersections(line, tol))
    return unique_points(found, tol)


def _length(V: np.ndarray, closed: bool) -> float:
    P = np.vstack((V, V[:1])) if closed else V
    return float(np.sum(np.linalg.norm(np.diff(P, axis=0), axis=1)))


# -----------------------
# Curves
# -----------------------
class Polyline(ContinuousCurve):
    """
    Open polygonal chain through `vertices` ((N, 2), N >= 2).
    """

    def __init__(self, vertices):
        self._v = _freeze(_as_xy(vertices, min_points=2))

    @property
    def vertices(self) -> np.ndarray:
        return self._v

    @property
    def kind(self) -> CurveKind:
        return CurveKind.POLYLINE

    @property
    def t0(self) -> float:
        return 0.0

    @property
    def t1(self) -> float:
        return float(self._v.shape[0] - 1)

    def point_at(self, t: float) -> np.ndarray:
        return _point(self._v, t, False)

    def tangent(self, t: float) -> np.ndarray:
        return _segment_direction(self._v, t, False)

    def position_of(self, point, tol: float = DEFAULT_TOL) -> float:
        p = as_point(point)
        eps = reach(tol, p)
        for t, d in _nearest(self._v, p, False):
            if d <= eps:
                return t
        return math.nan

    def project(self, point) -> float:
        p = as_point(point)
        return min(_nearest(self._v, p, False), key=lambda td: td[1])[0]

    def intersections(self, line, tol: float = DEFAULT_TOL) -> List[np.ndarray]:
        return _intersections(self._v, False, line, tol)

    def signed_distance(self, point) -> float:
        return piecewise_signed_distance(_pieces(self._v, False), point, closed=False)

    def sub_curve(self, t0: float, t1: float) -> "Polyline":
        if t0 > t1:
            raise ValueError("Open curve cannot wrap: sub_curve({}, {}).".format(t0, t1))
        t0, t1 = max(t0, self.t0), min(t1, self.t1)
        return Polyline(_sub_vertices(self._v, t0, t1, False))

    def reversed(self) -> "Polyline":
        return Polyline(self._v[::-1])

    def transform(self, trans) -> "Polyline":
        return Polyline(trans.apply(self._v))

    def sample(self, n: int = 200, extent: float = 10.0) -> np.ndarray:
        return self._v.copy()

    def length(self, n: int = 0) -> float:
        return _length(self._v, False)


class LinearRing(ContinuousCurve):
    """
    Closed polygonal loop through `vertices` ((N, 2), N >= 3, closing vertex optional).
    Counter-clockwise rings bound their interior.
    """

    def __init__(self, vertices, tol: float = 0.0):
        V = _as_xy(vertices, min_points=3)
        if _is_exactly_closed(V, tol):
            V = V[:-1]
        if V.shape[0] < 3:
            raise ValueError("A ring needs at least 3 distinct vertices.")
        self._v = _freeze(V)

    @property
    def vertices(self) -> np.ndarray:
        return self._v

    @property
    def kind(self) -> CurveKind:
        return CurveKind.POLYLINE

    @property
    def t0(self) -> float:
        return 0.0

    @property
    def t1(self) -> float:
        return float(self._v.shape[0])

    @property
    def is_closed(self) -> bool:
        return True

    def point_at(self, t: float) -> np.ndarray:
        return _point(self._v, t, True)

    def tangent(self, t: float) -> np.ndarray:
        return _segment_direction(self._v, t, True)

    def position_of(self, point, tol: float = DEFAULT_TOL) -> float:
        p = as_point(point)
        eps = reach(tol, p)
        for t, d in _nearest(self._v, p, True):
            if d <= eps:
                return 0.0 if t >= self.t1 else t
        return math.nan

    def project(self, point) -> float:
        p = as_point(point)
        t = min(_nearest(self._v, p, True), key=lambda td: td[1])[0]
        return 0.0 if t >= self.t1 else t

    def intersections(self, line, tol: float = DEFAULT_TOL) -> List[np.ndarray]:
        return _intersections(self._v, True, line, tol)

    def signed_distance(self, point) -> float:
        return piecewise_signed_distance(_pieces(self._v, True), point, closed=True)

    def sub_curve(self, t0: float, t1: float) -> Polyline:
        """Open portion from t0 to t1; t0 > t1 runs across vertex 0."""
        if t0 > t1:
            t1 += self.t1
        return Polyline(_sub_vertices(self._v, t0, t1, True))

    def reversed(self) -> "LinearRing":
        return LinearRing(np.vstack((self._v[:1], self._v[:0:-1])))

    def transform(self, trans) -> "LinearRing":
        return LinearRing(trans.apply(self._v))

    def sample(self, n: int = 200, extent: float = 10.0) -> np.ndarray:
        return np.vstack((self._v, self._v[:1]))

    def length(self, n: int = 0) -> float:
        return _length(self._v, True)

    def area(self) -> float:
        """Signed enclosed area (positive for CCW rings)."""
        return signed_area(self._v)


# -----------------------
# Factories
# -----------------------
def polyline(points) -> Polyline:
    return Polyline(points)


def linear_ring(points) -> LinearRing:
    return LinearRing(points)
