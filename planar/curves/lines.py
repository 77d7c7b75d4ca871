# -*- coding: utf-8 -*-
# Clipxus/planar/curves/lines.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 8/24/2025 (Updated: 10/19/2026)

Purpose:
--------
Straight curves: segments, rays and infinite lines share one representation,
point(t) = origin + t * direction over [start, end], where either bound may be infinite.

Main Tasks:
-----------
   1. `LineArc` with exact projection, inversion and line-line intersection.
   2. Factories: `segment`, `ray`, `straight_line`, `line_through`.

Notes:
------
   - The kind (segment / ray / line) follows from which bounds are finite.
   - Affine maps keep the parameter unchanged, so every transform is supported.
"""

from dataclasses import dataclass
from typing import List
import math
import numpy as np

from ..config import DEFAULT_TOL
from ..core.numeric import as_point, cross, reach
from .base import ContinuousCurve, CurveKind, smooth_signed_distance

__all__ = ["LineArc", "segment", "ray", "straight_line", "line_through"]


@dataclass(frozen=True, eq=False)
class LineArc(ContinuousCurve):
    """
    Straight curve origin + t * direction, t in [start, end].

    Raises
    ------
    ValueError
        If the direction is zero, a bound is NaN, or start > end.
    """
    origin: np.ndarray
    direction: np.ndarray
    start: float = -math.inf
    end: float = math.inf

    def __post_init__(self):
        o = as_point(self.origin).copy()
        d = as_point(self.direction).copy()
        if not (np.isfinite(o).all() and np.isfinite(d).all()):
            raise ValueError("Line origin and direction must be finite.")
        if float(d @ d) == 0.0:
            raise ValueError("Line direction must be non-zero.")
        if math.isnan(self.start) or math.isnan(self.end) or self.start > self.end:
            raise ValueError("Invalid line bounds [{}, {}].".format(self.start, self.end))
        o.flags.writeable = False
        d.flags.writeable = False
        object.__setattr__(self, "origin", o)
        object.__setattr__(self, "direction", d)
        object.__setattr__(self, "start", float(self.start))
        object.__setattr__(self, "end", float(self.end))

    @property
    def kind(self) -> CurveKind:
        lo, hi = math.isfinite(self.start), math.isfinite(self.end)
        if lo and hi:
            return CurveKind.SEGMENT
        if lo or hi:
            return CurveKind.RAY
        return CurveKind.LINE

    @property
    def t0(self) -> float:
        return self.start

    @property
    def t1(self) -> float:
        return self.end

    def point_at(self, t: float) -> np.ndarray:
        return self.origin + t * self.direction

    def tangent(self, t: float) -> np.ndarray:
        return self.direction.copy()

    def _raw_param(self, p: np.ndarray) -> float:
        d = self.direction
        return float((p - self.origin) @ d) / float(d @ d)

    def project(self, point) -> float:
        t = self._raw_param(as_point(point))
        return min(max(t, self.start), self.end)

    def position_of(self, point, tol: float = DEFAULT_TOL) -> float:
        p = as_point(point)
        t = self.project(p)
        if np.linalg.norm(self.point_at(t) - p) > reach(tol, p):
            return math.nan
        return t

    def line_params(self, line: "LineArc"):
        """
        Parameters (t on self, s on `line`) of the crossing of the supporting lines,
        or None when they are parallel.
        """
        d1, d2 = self.direction, line.direction
        den = cross(d1, d2)
        if abs(den) <= 1e-14 * np.linalg.norm(d1) * np.linalg.norm(d2):
            return None
        w = line.origin - self.origin
        return cross(w, d2) / den, cross(w, d1) / den

    def intersections(self, line, tol: float = DEFAULT_TOL) -> List[np.ndarray]:
        ts = self.line_params(line)
        if ts is None:
            return []
        t, s = ts
        p = self.point_at(t)
        eps = reach(tol, p)
        dt = eps / np.linalg.norm(self.direction)
        ds = eps / np.linalg.norm(line.direction)
        if not (self.start - dt <= t <= self.end + dt):
            return []
        if not (line.start - ds <= s <= line.end + ds):
            return []
        return [p]

    def signed_distance(self, point) -> float:
        if self.kind is CurveKind.LINE:
            p = as_point(point)
            d = self.direction
            return -cross(d, p - self.origin) / float(np.linalg.norm(d))
        return smooth_signed_distance(self, point)

    def sub_curve(self, t0: float, t1: float) -> "LineArc":
        if t0 > t1:
            raise ValueError("Open curve cannot wrap: sub_curve({}, {}).".format(t0, t1))
        return LineArc(self.origin, self.direction, max(t0, self.start), min(t1, self.end))

    def reversed(self) -> "LineArc":
        return LineArc(self.origin, -self.direction, -self.end, -self.start)

    def transform(self, trans) -> "LineArc":
        return LineArc(trans.apply(self.origin), trans.apply_vector(self.direction),
                       self.start, self.end)

    def length(self, n: int = 2) -> float:
        if not self.is_bounded():
            return super().length(n)
        return float(np.linalg.norm(self.direction)) * (self.end - self.start)


# -----------------------
# Factories
# -----------------------
def segment(p1, p2) -> LineArc:
    """Segment from p1 (t=0) to p2 (t=1)."""
    a = as_point(p1)
    return LineArc(a, as_point(p2) - a, 0.0, 1.0)


def ray(origin, direction) -> LineArc:
    """Ray starting at `origin` (t=0) and running along `direction`."""
    return LineArc(origin, direction, 0.0, math.inf)


def straight_line(point, direction) -> LineArc:
    """Infinite line through `point`; its inside is the half-plane on the left."""
    return LineArc(point, direction)


def line_through(p1, p2) -> LineArc:
    """Infinite line through p1 (t=0) and p2 (t=1)."""
    a = as_point(p1)
    return LineArc(a, as_point(p2) - a)
