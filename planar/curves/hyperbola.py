# -*- coding: utf-8 -*-
# Clipxus/planar/curves/hyperbola.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 9/3/2025 (Updated: 10/19/2026)

Purpose:
--------
Arcs of one branch of a hyperbola, `HyperbolaBranchArc`.

Parameterization:
-----------------
   - Local frame: centre `center`, transverse axis rotated by `theta`.
   - Local point at t: (a cosh t, s * b sinh t), s = ±1, t in [start, end] (hyperbolic angle).
   - The branch bounds the convex region C = {x > 0, x²/a² - y²/b² > 1}. With s = +1 the
     branch runs upwards and the inside (left) is the complement of C; with s = -1 the
     inside is C.

Notes:
------
   - Nearest points solve a quartic in u = exp(t); only positive roots are kept.
   - Like parabolas, only similarities are accepted as transforms.
"""

from dataclasses import dataclass
from typing import List
import math
import numpy as np

from ..config import DEFAULT_TOL
from ..core.numeric import as_point, real_roots, reach, rotation_matrix, solve_quadratic
from .base import ContinuousCurve, CurveKind, keep_common, smooth_signed_distance

__all__ = ["HyperbolaBranchArc", "hyperbola_branch"]


@dataclass(frozen=True, eq=False)
class HyperbolaBranchArc(ContinuousCurve):
    """
    Arc of the right branch of x²/a² - y²/b² = 1 (local frame).

    Raises
    ------
    ValueError
        If a semi-axis is not finite and positive, `sense` is not ±1, or the bounds
        are invalid.
    """
    center: np.ndarray
    a: float
    b: float
    theta: float = 0.0
    start: float = -math.inf
    end: float = math.inf
    sense: float = 1.0

    def __post_init__(self):
        c = as_point(self.center).copy()
        c.flags.writeable = False
        a, b = float(self.a), float(self.b)
        if not (math.isfinite(a) and math.isfinite(b)) or a <= 0.0 or b <= 0.0:
            raise ValueError("Hyperbola semi-axes must be finite and > 0 (got {}, {}).".format(a, b))
        if self.sense not in (1.0, -1.0):
            raise ValueError("Hyperbola sense must be +1 or -1.")
        if math.isnan(self.start) or math.isnan(self.end) or self.start > self.end:
            raise ValueError("Invalid hyperbola bounds [{}, {}].".format(self.start, self.end))
        object.__setattr__(self, "center", c)
        object.__setattr__(self, "a", a)
        object.__setattr__(self, "b", b)
        object.__setattr__(self, "theta", float(self.theta))
        object.__setattr__(self, "start", float(self.start))
        object.__setattr__(self, "end", float(self.end))
        object.__setattr__(self, "sense", float(self.sense))
        object.__setattr__(self, "_R", rotation_matrix(self.theta))

    @property
    def kind(self) -> CurveKind:
        return CurveKind.HYPERBOLA_ARC

    @property
    def t0(self) -> float:
        return self.start

    @property
    def t1(self) -> float:
        return self.end

    def point_at(self, t: float) -> np.ndarray:
        local = np.array([self.a * math.cosh(t), self.sense * self.b * math.sinh(t)])
        return self.center + self._R @ local

    def tangent(self, t: float) -> np.ndarray:
        return self._R @ np.array([self.a * math.sinh(t), self.sense * self.b * math.cosh(t)])

    def _local(self, p: np.ndarray) -> np.ndarray:
        return self._R.T @ (p - self.center)

    def _clamp(self, t: float) -> float:
        return min(max(t, self.start), self.end)

    def position_of(self, point, tol: float = DEFAULT_TOL) -> float:
        p = as_point(point)
        _, y = self._local(p)
        t = self._clamp(math.asinh(self.sense * y / self.b))
        if np.linalg.norm(self.point_at(t) - p) > reach(tol, p):
            return math.nan
        return t

    def project(self, point) -> float:
        p = as_point(point)
        x, y = self._local(p)
        a, b = self.a, self.b
        py = self.sense * y
        c2 = a * a + b * b
        coeffs = [c2, -2.0 * (a * x + b * py), 0.0, 2.0 * (a * x - b * py), -c2]
        ts = [self._clamp(math.log(u)) for u in real_roots(coeffs) if u > 0.0]
        ts.append(self._clamp(math.asinh(py / b)))
        ts += [t for t in (self.start, self.end) if math.isfinite(t)]
        dists = [np.linalg.norm(self.point_at(t) - p) for t in ts]
        return ts[int(np.argmin(dists))]

    def intersections(self, line, tol: float = DEFAULT_TOL) -> List[np.ndarray]:
        ox, oy = self._local(line.origin)
        dx, dy = self._R.T @ line.direction
        ia2, ib2 = 1.0 / (self.a * self.a), 1.0 / (self.b * self.b)
        roots = solve_quadratic(dx * dx * ia2 - dy * dy * ib2,
                                2.0 * (ox * dx * ia2 - oy * dy * ib2),
                                ox * ox * ia2 - oy * oy * ib2 - 1.0)
        # the other branch is rejected by position_of inside keep_common
        return keep_common(self, line, [line.point_at(s) for s in roots], tol)

    def _in_convex_region(self, p: np.ndarray) -> bool:
        x, y = self._local(p)
        return x > 0.0 and (x / self.a) ** 2 - (y / self.b) ** 2 > 1.0

    def signed_distance(self, point) -> float:
        if math.isfinite(self.start) or math.isfinite(self.end):
            return smooth_signed_distance(self, point)
        p = as_point(point)
        d = self.distance(p)
        inside = self._in_convex_region(p) == (self.sense < 0.0)
        return -d if inside else d

    def sub_curve(self, t0: float, t1: float) -> "HyperbolaBranchArc":
        if t0 > t1:
            raise ValueError("Open curve cannot wrap: sub_curve({}, {}).".format(t0, t1))
        return HyperbolaBranchArc(self.center, self.a, self.b, self.theta,
                                  max(t0, self.start), min(t1, self.end), self.sense)

    def reversed(self) -> "HyperbolaBranchArc":
        return HyperbolaBranchArc(self.center, self.a, self.b, self.theta,
                                  -self.end, -self.start, -self.sense)

    def transform(self, trans) -> "HyperbolaBranchArc":
        """
        Image under a similarity: semi-axes scale by k, the parameter is unchanged and
        an indirect map flips the traversal sense.

        Raises
        ------
        ValueError
            If `trans` is not a similarity.
        """
        if not trans.is_similarity():
            raise ValueError("Hyperbola arcs support similarity transforms only.")
        k = trans.similarity_factor()
        M = (trans.linear / k) @ self._R
        sense = self.sense
        if np.linalg.det(M) < 0.0:
            M = M @ np.diag([1.0, -1.0])
            sense = -sense
        theta = math.atan2(M[1, 0], M[0, 0])
        return HyperbolaBranchArc(trans.apply(self.center), k * self.a, k * self.b, theta,
                                  self.start, self.end, sense)


def hyperbola_branch(center, a: float, b: float, theta: float = 0.0,
                     sense: float = 1.0) -> HyperbolaBranchArc:
    """Full right branch of x²/a² - y²/b² = 1 in the frame (center, theta)."""
    return HyperbolaBranchArc(center, a, b, theta, sense=sense)
