# -*- coding: utf-8 -*-
# Clipxus/planar/curves/base.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 11/28/2025 (Updated: 10/19/2026)

Purpose:
--------
Abstract interface shared by every planar curve, plus the free functions the concrete
curve kinds reuse (signed distance, corner rule, sampling, intersection filtering).

Abstract Classes:
-----------------
- ContinuousCurve: parametric, continuous, oriented curve over [t0, t1]
  (bounds possibly infinite). The inside is the side to the LEFT of the traversal.

Notes:
------
- Every concrete curve subclasses `ContinuousCurve` directly and is immutable;
  `sub_curve`, `reversed` and `transform` return new values.
- `CurveKind` is the closed set of concrete kinds; callers dispatch on it instead of
  isinstance checks when a concrete representation matters.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, List, Sequence
import math
import numpy as np

from ..config import DEFAULT_TOL
from ..errors import UnboundedClipError
from ..core.numeric import as_point, cross, reach


class CurveKind(Enum):
    SEGMENT = "segment"
    RAY = "ray"
    LINE = "line"
    CIRCLE_ARC = "circle_arc"
    ELLIPSE_ARC = "ellipse_arc"
    PARABOLA_ARC = "parabola_arc"
    HYPERBOLA_ARC = "hyperbola_arc"
    POLYLINE = "polyline"
    COMPOSITE = "composite"


class ContinuousCurve(ABC):
    """
    Abstract base class for continuous oriented curves.

    Concrete kinds provide the parameterization (`t0`, `t1`, `point_at`, `tangent`),
    the inversions (`position_of`, `project`), line intersections and the structural
    operations (`sub_curve`, `reversed`, `transform`). Distance, inside tests, sampling
    and end points are derived here.
    """

    # --------------------
    # Parameterization
    # --------------------
    @property
    @abstractmethod
    def kind(self) -> CurveKind:
        pass

    @property
    @abstractmethod
    def t0(self) -> float:
        """Lower parameter bound (may be -inf)."""
        pass

    @property
    @abstractmethod
    def t1(self) -> float:
        """Upper parameter bound (may be +inf)."""
        pass

    @property
    def is_closed(self) -> bool:
        return False

    @abstractmethod
    def point_at(self, t: float) -> np.ndarray:
        pass

    @abstractmethod
    def tangent(self, t: float) -> np.ndarray:
        """Derivative of `point_at` (not normalized)."""
        pass

    # --------------------
    # Inversion / intersection
    # --------------------
    @abstractmethod
    def position_of(self, point, tol: float = DEFAULT_TOL) -> float:
        """
        Parameter of `point` on the curve, or NaN if it is farther than `tol` from it.
        """
        pass

    @abstractmethod
    def project(self, point) -> float:
        """Parameter of the curve point nearest to `point`."""
        pass

    @abstractmethod
    def intersections(self, line, tol: float = DEFAULT_TOL) -> List[np.ndarray]:
        """
        Intersection points with a straight curve (`LineArc` of any kind).

        Tangential contacts are reported once; overlapping collinear pieces are not
        reported.
        """
        pass

    # --------------------
    # Structural
    # --------------------
    @abstractmethod
    def sub_curve(self, t0: float, t1: float) -> "ContinuousCurve":
        """
        Portion between parameters t0 and t1. For closed curves t0 > t1 selects the
        portion that runs across the parameter seam.
        """
        pass

    @abstractmethod
    def reversed(self) -> "ContinuousCurve":
        """Same point set traversed backwards (inside and outside swap)."""
        pass

    @abstractmethod
    def transform(self, trans) -> "ContinuousCurve":
        pass

    # --------------------
    # Derived queries
    # --------------------
    def is_bounded(self) -> bool:
        return math.isfinite(self.t0) and math.isfinite(self.t1)

    def first_point(self) -> np.ndarray:
        if not math.isfinite(self.t0):
            raise UnboundedClipError("Curve has no first point", {"kind": self.kind.value})
        return self.point_at(self.t0)

    def last_point(self) -> np.ndarray:
        if not math.isfinite(self.t1):
            raise UnboundedClipError("Curve has no last point", {"kind": self.kind.value})
        return self.point_at(self.t1)

    def distance(self, point) -> float:
        p = as_point(point)
        return float(np.linalg.norm(p - self.point_at(self.project(p))))

    def signed_distance(self, point) -> float:
        """Distance to the curve, negative when `point` is on the inside (left)."""
        return smooth_signed_distance(self, point)

    def is_inside(self, point) -> bool:
        return self.signed_distance(point) < 0.0

    def sample(self, n: int = 200, extent: float = 10.0) -> np.ndarray:
        """
        (n, 2) points evenly spaced in parameter. Infinite bounds are replaced by a
        window of half-width `extent` around the finite end (or around 0).
        """
        return np.array([self.point_at(t) for t in sample_params(self.t0, self.t1, n, extent)])

    def length(self, n: int = 2000) -> float:
        """Arc length (polygonal approximation with `n` samples unless overridden)."""
        if not self.is_bounded():
            raise UnboundedClipError("Length of an unbounded curve", {"kind": self.kind.value})
        P = self.sample(n)
        return float(np.sum(np.linalg.norm(np.diff(P, axis=0), axis=1)))

    def __repr__(self) -> str:
        return "<{} kind={} t=[{:g}, {:g}]{}>".format(
            type(self).__name__, self.kind.value, self.t0, self.t1,
            " closed" if self.is_closed else "")


# -----------------------
# Shared free functions
# -----------------------
def smooth_signed_distance(curve: ContinuousCurve, point) -> float:
    """
    Signed distance via the nearest point Q: negative if `point` lies to the left of
    the tangent at Q.
    """
    p = as_point(point)
    t = curve.project(p)
    q = curve.point_at(t)
    d = float(np.linalg.norm(p - q))
    if d == 0.0:
        return 0.0
    return -d if cross(curve.tangent(t), p - q) > 0.0 else d


def corner_inside(first: ContinuousCurve, second: ContinuousCurve, point) -> bool:
    """
    Inside test at the joint where `first` ends and `second` starts.

    At a convex joint (left turn) the point must be inside both pieces; at a reflex
    joint inside either one suffices.
    """
    in1 = first.signed_distance(point) < 0.0
    in2 = second.signed_distance(point) < 0.0
    turn = cross(first.tangent(first.t1), second.tangent(second.t0))
    if turn > 0.0:
        return in1 and in2
    return in1 or in2


def piecewise_signed_distance(pieces: Sequence[ContinuousCurve], point, closed: bool) -> float:
    """
    Signed distance to a chain of pieces: the nearest piece decides, except when two
    consecutive pieces are equally near, in which case the corner rule applies.
    """
    p = as_point(point)
    n = len(pieces)
    dists = [c.distance(p) for c in pieces]
    i = int(np.argmin(dists))
    dmin = dists[i]
    if dmin == 0.0:
        return 0.0
    eps = 1e-12 * max(1.0, dmin)
    for j in (i - 1, i + 1):
        if closed:
            j %= n
        elif j < 0 or j >= n:
            continue
        if j == i or abs(dists[j] - dmin) > eps:
            continue
        prev_, next_ = (j, i) if (j + 1) % n == i else (i, j)
        return -dmin if corner_inside(pieces[prev_], pieces[next_], p) else dmin
    return pieces[i].signed_distance(p)


def sample_params(t0: float, t1: float, n: int, extent: float) -> np.ndarray:
    """Evenly spaced parameters over [t0, t1] with infinite ends windowed by `extent`."""
    if n < 2:
        raise ValueError("Need at least 2 samples.")
    a, b = t0, t1
    if math.isinf(a) and math.isinf(b):
        a, b = -extent, extent
    elif math.isinf(a):
        a = b - 2.0 * extent
    elif math.isinf(b):
        b = a + 2.0 * extent
    return np.linspace(a, b, n)


def keep_common(curve: ContinuousCurve, line, points: Iterable[np.ndarray], tol: float) -> List[np.ndarray]:
    """Keep candidate points lying on both `curve` and `line`, dropping duplicates."""
    out: List[np.ndarray] = []
    for p in points:
        if math.isnan(curve.position_of(p, tol)) or math.isnan(line.position_of(p, tol)):
            continue
        out.append(np.asarray(p, dtype=np.float64))
    return unique_points(out, tol)


def unique_points(points: Iterable[np.ndarray], tol: float) -> List[np.ndarray]:
    """Drop points lying within `tol` of an earlier one (order preserved)."""
    out: List[np.ndarray] = []
    for p in points:
        eps = reach(tol, p)
        if all(np.linalg.norm(p - q) > eps for q in out):
            out.append(p)
    return out
