# -*- coding: utf-8 -*-
# Clipxus/planar/curves/parabola.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 9/2/2025 (Updated: 10/19/2026)

Purpose:
--------
Parabola arcs `ParabolaArc`, naturally unbounded in both directions.

Parameterization:
-----------------
   - Local frame: vertex `vertex`, symmetry axis rotated by `theta`.
   - Local point at t: (s * t, a * t²) with traversal sense s = ±1, t in [start, end].
   - Inside (left of the traversal) of the full parabola: s * (y - a x²) > 0 in local
     coordinates.

Notes:
------
   - Nearest points solve 2a² X³ + (1 - 2a y) X - x = 0 for the local abscissa X.
   - Only similarities keep the parameterization affine in t, so other affine maps
     are rejected.
"""

from dataclasses import dataclass
from typing import List
import math
import numpy as np

from ..config import DEFAULT_TOL
from ..core.numeric import as_point, real_roots, reach, rotation_matrix, solve_quadratic
from .base import ContinuousCurve, CurveKind, keep_common, smooth_signed_distance

__all__ = ["ParabolaArc", "parabola", "parabola_arc"]


@dataclass(frozen=True, eq=False)
class ParabolaArc(ContinuousCurve):
    """
    Arc of the parabola y = a x² (local frame) traversed with sense `sense`.

    Raises
    ------
    ValueError
        If `a` is zero or not finite, `sense` is not ±1, or the bounds are invalid.
    """
    vertex: np.ndarray
    a: float
    theta: float = 0.0
    start: float = -math.inf
    end: float = math.inf
    sense: float = 1.0

    def __post_init__(self):
        v = as_point(self.vertex).copy()
        v.flags.writeable = False
        a = float(self.a)
        if not math.isfinite(a) or a == 0.0:
            raise ValueError("Parabola coefficient must be finite and non-zero (got {}).".format(a))
        if self.sense not in (1.0, -1.0):
            raise ValueError("Parabola sense must be +1 or -1.")
        if math.isnan(self.start) or math.isnan(self.end) or self.start > self.end:
            raise ValueError("Invalid parabola bounds [{}, {}].".format(self.start, self.end))
        object.__setattr__(self, "vertex", v)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "theta", float(self.theta))
        object.__setattr__(self, "start", float(self.start))
        object.__setattr__(self, "end", float(self.end))
        object.__setattr__(self, "sense", float(self.sense))
        object.__setattr__(self, "_R", rotation_matrix(self.theta))

    @property
    def kind(self) -> CurveKind:
        return CurveKind.PARABOLA_ARC

    @property
    def t0(self) -> float:
        return self.start

    @property
    def t1(self) -> float:
        return self.end

    def point_at(self, t: float) -> np.ndarray:
        return self.vertex + self._R @ np.array([self.sense * t, self.a * t * t])

    def tangent(self, t: float) -> np.ndarray:
        return self._R @ np.array([self.sense, 2.0 * self.a * t])

    def _local(self, p: np.ndarray) -> np.ndarray:
        return self._R.T @ (p - self.vertex)

    def _clamp(self, t: float) -> float:
        return min(max(t, self.start), self.end)

    def position_of(self, point, tol: float = DEFAULT_TOL) -> float:
        p = as_point(point)
        x, _ = self._local(p)
        t = self._clamp(self.sense * x)
        if np.linalg.norm(self.point_at(t) - p) > reach(tol, p):
            return math.nan
        return t

    def project(self, point) -> float:
        p = as_point(point)
        x, y = self._local(p)
        a = self.a
        ts = [self._clamp(self.sense * X)
              for X in real_roots([2.0 * a * a, 0.0, 1.0 - 2.0 * a * y, -x])]
        ts += [t for t in (self.start, self.end) if math.isfinite(t)]
        if not ts:
            ts = [self._clamp(self.sense * x)]
        dists = [np.linalg.norm(self.point_at(t) - p) for t in ts]
        return ts[int(np.argmin(dists))]

    def intersections(self, line, tol: float = DEFAULT_TOL) -> List[np.ndarray]:
        ox, oy = self._local(line.origin)
        dx, dy = self._R.T @ line.direction
        a = self.a
        roots = solve_quadratic(a * dx * dx, 2.0 * a * ox * dx - dy, a * ox * ox - oy)
        return keep_common(self, line, [line.point_at(s) for s in roots], tol)

    def signed_distance(self, point) -> float:
        if math.isfinite(self.start) or math.isfinite(self.end):
            return smooth_signed_distance(self, point)
        p = as_point(point)
        d = self.distance(p)
        x, y = self._local(p)
        return -d if self.sense * (y - self.a * x * x) > 0.0 else d

    def sub_curve(self, t0: float, t1: float) -> "ParabolaArc":
        if t0 > t1:
            raise ValueError("Open curve cannot wrap: sub_curve({}, {}).".format(t0, t1))
        return ParabolaArc(self.vertex, self.a, self.theta,
                           max(t0, self.start), min(t1, self.end), self.sense)

    def reversed(self) -> "ParabolaArc":
        return ParabolaArc(self.vertex, self.a, self.theta, -self.end, -self.start, -self.sense)

    def transform(self, trans) -> "ParabolaArc":
        """
        Image under a similarity. The local abscissa scales by k, so a -> a / k
        (sign flipped for indirect maps) and the bounds scale by k.

        Raises
        ------
        ValueError
            If `trans` is not a similarity.
        """
        if not trans.is_similarity():
            raise ValueError("Parabola arcs support similarity transforms only.")
        k = trans.similarity_factor()
        M = (trans.linear / k) @ self._R
        a = self.a / k
        if np.linalg.det(M) < 0.0:
            M = M @ np.diag([1.0, -1.0])
            a = -a
        theta = math.atan2(M[1, 0], M[0, 0])
        return ParabolaArc(trans.apply(self.vertex), a, theta,
                           k * self.start, k * self.end, self.sense)


# -----------------------
# Factories
# -----------------------
def parabola(vertex, a: float, theta: float = 0.0) -> ParabolaArc:
    """Full parabola y = a x² in the frame (vertex, theta), traversed towards +x."""
    return ParabolaArc(vertex, a, theta)


def parabola_arc(vertex, a: float, theta: float, t0: float, t1: float) -> ParabolaArc:
    return ParabolaArc(vertex, a, theta, t0, t1)
