# -*- coding: utf-8 -*-
# Clipxus/planar/curves/polycurve.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 9/5/2025 (Updated: 10/19/2026)

Purpose:
--------
`PolyCurve`: a continuous chain of heterogeneous curves, open or closed. Reconstructed
clip rings are closed PolyCurves interleaving clipped fragments and outline portions.

Parameterization:
-----------------
   - Child i owns [i, i+1]; its own parameter range is mapped onto that unit slot with
     `to_unit` / `from_unit` (arctangent maps for infinite bounds).
   - Open chains: t in [0, n]. Closed chains: t in [0, n) and n folds back to 0.

Notes:
------
   - Consecutive children must meet within the joining tolerance; only the first child
     of an open chain may start at infinity and only the last may end there.
"""

from typing import List, Sequence
import math
import numpy as np

from ..config import DEFAULT_TOL
from ..core.numeric import as_point, from_unit, reach, to_unit
from .base import ContinuousCurve, CurveKind, piecewise_signed_distance, unique_points

__all__ = ["PolyCurve"]


class PolyCurve(ContinuousCurve):
    """
    Chain of continuous curves.

    Parameters
    ----------
    curves : Sequence[ContinuousCurve]
        Children in traversal order (at least one).
    closed : bool
        Whether the chain closes back on its first point.
    tol : float
        Joining tolerance (scaled by point magnitude) between consecutive children.

    Raises
    ------
    ValueError
        If the chain is empty, not continuous, or unbounded where it must not be.
    """

    def __init__(self, curves: Sequence[ContinuousCurve], closed: bool = False, tol: float = 1e-6):
        children = tuple(curves)
        if not children:
            raise ValueError("PolyCurve needs at least one child curve.")
        for c in children:
            if not isinstance(c, ContinuousCurve):
                raise ValueError("PolyCurve children must be ContinuousCurve, got {!r}.".format(type(c)))
        n = len(children)
        for i, c in enumerate(children):
            if (i > 0 or closed) and not math.isfinite(c.t0):
                raise ValueError("Only the first child of an open chain may start at infinity.")
            if (i < n - 1 or closed) and not math.isfinite(c.t1):
                raise ValueError("Only the last child of an open chain may end at infinity.")
        joints = [(children[i], children[i + 1]) for i in range(n - 1)]
        if closed:
            joints.append((children[-1], children[0]))
        for prev, nxt in joints:
            p, q = prev.last_point(), nxt.first_point()
            if np.linalg.norm(p - q) > reach(tol, p, q):
                raise ValueError("PolyCurve children are not contiguous: {} -> {}.".format(p, q))
        self._children = children
        self._closed = bool(closed)

    @property
    def children(self):
        return self._children

    def __len__(self) -> int:
        return len(self._children)

    @property
    def kind(self) -> CurveKind:
        return CurveKind.COMPOSITE

    @property
    def t0(self) -> float:
        return 0.0

    @property
    def t1(self) -> float:
        return float(len(self._children))

    @property
    def is_closed(self) -> bool:
        return self._closed

    def is_bounded(self) -> bool:
        return all(c.is_bounded() for c in self._children)

    def _locate(self, t: float):
        n = len(self._children)
        if self._closed:
            t = t % n
        i = min(max(int(math.floor(t)), 0), n - 1)
        c = self._children[i]
        return c, from_unit(t - i, c.t0, c.t1)

    def point_at(self, t: float) -> np.ndarray:
        c, tc = self._locate(t)
        return c.point_at(tc)

    def tangent(self, t: float) -> np.ndarray:
        c, tc = self._locate(t)
        return c.tangent(tc)

    def first_point(self) -> np.ndarray:
        return self._children[0].first_point()

    def last_point(self) -> np.ndarray:
        return self._children[-1].last_point()

    def position_of(self, point, tol: float = DEFAULT_TOL) -> float:
        p = as_point(point)
        n = len(self._children)
        for i, c in enumerate(self._children):
            tc = c.position_of(p, tol)
            if math.isnan(tc):
                continue
            t = i + to_unit(tc, c.t0, c.t1)
            return 0.0 if (self._closed and t >= n) else t
        return math.nan

    def project(self, point) -> float:
        p = as_point(point)
        best_t, best_d = 0.0, math.inf
        for i, c in enumerate(self._children):
            tc = c.project(p)
            d = float(np.linalg.norm(c.point_at(tc) - p))
            if d < best_d:
                best_t, best_d = i + to_unit(tc, c.t0, c.t1), d
        if self._closed and best_t >= len(self._children):
            best_t = 0.0
        return best_t

    def distance(self, point) -> float:
        p = as_point(point)
        return min(c.distance(p) for c in self._children)

    def intersections(self, line, tol: float = DEFAULT_TOL) -> List[np.ndarray]:
        found = []
        for c in self._children:
            found.extend(c.intersections(line, tol))
        return unique_points(found, tol)

    def signed_distance(self, point) -> float:
        return piecewise_signed_distance(self._children, point, closed=self._closed)

    def _pieces(self, a: float, b: float) -> List[ContinuousCurve]:
        n = len(self._children)
        a, b = min(max(a, 0.0), n), min(max(b, 0.0), n)
        i0 = min(int(math.floor(a)), n - 1)
        i1 = max(i0, min(int(math.ceil(b)) - 1, n - 1))
        out = []
        for i in range(i0, i1 + 1):
            c = self._children[i]
            lo = from_unit(a - i, c.t0, c.t1) if i == i0 else c.t0
            hi = from_unit(b - i, c.t0, c.t1) if i == i1 else c.t1
            out.append(c if (lo == c.t0 and hi == c.t1) else c.sub_curve(lo, hi))
        return out

    def sub_curve(self, t0: float, t1: float) -> "PolyCurve":
        if t0 > t1:
            if not self._closed:
                raise ValueError("Open curve cannot wrap: sub_curve({}, {}).".format(t0, t1))
            pieces = self._pieces(t0, self.t1) if t0 < self.t1 else []
            if t1 > 0.0 or not pieces:
                pieces += self._pieces(0.0, t1)
        else:
            pieces = self._pieces(t0, t1)
        return PolyCurve(pieces, closed=False)

    def reversed(self) -> "PolyCurve":
        return PolyCurve([c.reversed() for c in reversed(self._children)], closed=self._closed)

    def transform(self, trans) -> "PolyCurve":
        return PolyCurve([c.transform(trans) for c in self._children], closed=self._closed)

    def sample(self, n: int = 200, extent: float = 10.0) -> np.ndarray:
        per = max(2, n // len(self._children))
        return np.vstack([c.sample(per, extent) for c in self._children])

    def length(self, n: int = 2000) -> float:
        return float(sum(c.length() for c in self._children))
