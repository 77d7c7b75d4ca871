# -*- coding: utf-8 -*-
# Clipxus/planar/core/box.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 7/15/2025 (Updated: 10/19/2026)

Purpose:
--------
Axis-aligned clip rectangle (`Box`) and the canonical parameterization of its outline
(`BoxBoundary`) that the clipper and the boundary reconstructor share.

Main Tasks:
-----------
   1. Validate bounds and answer inclusive containment queries.
   2. Expose corners, edges (as segments) and the outline ring in a fixed CCW order.
   3. Map outline points to positions in [0, 4) and back.
   4. Bounding-box algebra: union, intersection, image under an affine transform.

Outline convention:
-------------------
   - Corners in order: (xmin, ymin), (xmax, ymin), (xmax, ymax), (xmin, ymax).
   - Edge i runs from corner i to corner i+1 and owns positions [i, i+1).
   - Corner k sits at position exactly k; position 4 folds back to 0.
   - Points farther than the tolerance from the outline have no position (NaN).
"""

from dataclasses import dataclass
from typing import Optional
import math
import numpy as np

from ..config import DEFAULT_TOL
from ..errors import UnboundedClipError
from ..topology._validation import _as_xy
from .numeric import as_point, reach
from .transform import AffineTransform

__all__ = ["Box", "BoxBoundary"]


@dataclass(frozen=True)
class Box:
    """
    Axis-aligned rectangle [xmin, xmax] x [ymin, ymax]. Bounds may be infinite.

    Raises
    ------
    ValueError
        If a bound is NaN or the bounds are inverted.
    """
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    def __post_init__(self):
        vals = (self.xmin, self.xmax, self.ymin, self.ymax)
        if any(math.isnan(float(v)) for v in vals):
            raise ValueError("Box bounds must not be NaN: {}".format(vals))
        if self.xmin > self.xmax or self.ymin > self.ymax:
            raise ValueError("Inverted box bounds: {}".format(vals))
        for name, v in zip(("xmin", "xmax", "ymin", "ymax"), vals):
            object.__setattr__(self, name, float(v))

    # --------------------
    # Constructors
    # --------------------
    @classmethod
    def from_points(cls, points) -> "Box":
        """Smallest box enclosing an (N, 2) point array."""
        P = _as_xy(points, min_points=1)
        return cls(float(P[:, 0].min()), float(P[:, 0].max()),
                   float(P[:, 1].min()), float(P[:, 1].max()))

    # --------------------
    # Scalars
    # --------------------
    def is_bounded(self) -> bool:
        return all(math.isfinite(v) for v in (self.xmin, self.xmax, self.ymin, self.ymax))

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def center(self) -> np.ndarray:
        self._require_bounded("center")
        return np.array([0.5 * (self.xmin + self.xmax), 0.5 * (self.ymin + self.ymax)])

    def as_tuple(self):
        return (self.xmin, self.xmax, self.ymin, self.ymax)

    # --------------------
    # Queries
    # --------------------
    def contains(self, point, tol: float = 0.0) -> bool:
        """Inclusive containment, widened by `tol` on every side."""
        x, y = as_point(point)
        return (self.xmin - tol <= x <= self.xmax + tol) and (self.ymin - tol <= y <= self.ymax + tol)

    def offset(self, point) -> float:
        """Largest excess of `point` over the bounds: <= 0 inside, > 0 outside."""
        x, y = as_point(point)
        return max(self.xmin - x, x - self.xmax, self.ymin - y, y - self.ymax)

    def vertices(self) -> np.ndarray:
        """(4, 2) corner array in outline order (CCW from (xmin, ymin))."""
        self._require_bounded("vertices")
        return np.array([
            [self.xmin, self.ymin],
            [self.xmax, self.ymin],
            [self.xmax, self.ymax],
            [self.xmin, self.ymax],
        ], dtype=np.float64)

    def edges(self) -> list:
        """The four outline edges as segments; edge i maps t in [0, 1] to position i + t."""
        from ..curves.lines import segment
        V = self.vertices()
        return [segment(V[i], V[(i + 1) % 4]) for i in range(4)]

    def boundary(self, tol: float = DEFAULT_TOL) -> "BoxBoundary":
        return BoxBoundary(self, tol)

    def as_ring(self):
        """The outline as a counter-clockwise `LinearRing` (interior on the left)."""
        from ..curves.polyline import LinearRing
        return LinearRing(self.vertices())

    # --------------------
    # Box algebra
    # --------------------
    def union(self, other: "Box") -> "Box":
        return Box(min(self.xmin, other.xmin), max(self.xmax, other.xmax),
                   min(self.ymin, other.ymin), max(self.ymax, other.ymax))

    def intersection(self, other: "Box") -> Optional["Box"]:
        """Overlap of two boxes, or None when they are disjoint."""
        xmin, xmax = max(self.xmin, other.xmin), min(self.xmax, other.xmax)
        ymin, ymax = max(self.ymin, other.ymin), min(self.ymax, other.ymax)
        if xmin > xmax or ymin > ymax:
            return None
        return Box(xmin, xmax, ymin, ymax)

    def transform(self, trans: AffineTransform) -> "Box":
        """Bounding box of the transformed corners."""
        return Box.from_points(trans.apply(self.vertices()))

    def _require_bounded(self, what: str) -> None:
        if not self.is_bounded():
            raise UnboundedClipError("Box {} requires finite bounds".format(what),
                                     {"box": self.as_tuple()})


class BoxBoundary:
    """
    Outline of a bounded `Box` parameterized over [0, 4).

    Parameters
    ----------
    box : Box
        Bounded box.
    tol : float
        Distance within which a point counts as lying on the outline.

    Raises
    ------
    UnboundedClipError
        If `box` has an infinite bound.
    """

    def __init__(self, box: Box, tol: float = DEFAULT_TOL):
        box._require_bounded("outline")
        self.box = box
        self.tol = float(tol)
        self._corners = box.vertices()
        self._corners.flags.writeable = False

    def corner(self, k: int) -> np.ndarray:
        """Corner with position k (taken modulo 4)."""
        return self._corners[int(k) % 4].copy()

    @staticmethod
    def edge_index(t: float) -> int:
        """Index of the edge owning position `t` (folded into [0, 4))."""
        return int(math.floor(t % 4.0)) % 4

    def _local(self, i: int, x: float, y: float):
        """(distance to edge i, local coordinate in [0, 1] along edge i)."""
        b = self.box
        w, h = b.width, b.height
        if i == 0:
            u = (x - b.xmin) / w if w > 0.0 else 0.0
            off = abs(y - b.ymin)
        elif i == 1:
            u = (y - b.ymin) / h if h > 0.0 else 0.0
            off = abs(x - b.xmax)
        elif i == 2:
            u = (b.xmax - x) / w if w > 0.0 else 0.0
            off = abs(y - b.ymax)
        else:
            u = (b.ymax - y) / h if h > 0.0 else 0.0
            off = abs(x - b.xmin)
        L = w if i in (0, 2) else h
        u_c = min(max(u, 0.0), 1.0)
        along = abs(u - u_c) * L
        return math.hypot(off, along), u_c

    def position(self, point, tol: Optional[float] = None) -> float:
        """
        Outline position of `point` in [0, 4), or NaN if the point is off the outline.

        The nearest edge wins; ties go to the lower edge index, so corner k is reported
        as exactly k.
        """
        p = as_point(point)
        eps = reach(self.tol if tol is None else tol, p)
        best_i, best_d, best_u = -1, math.inf, 0.0
        for i in range(4):
            d, u = self._local(i, p[0], p[1])
            if d < best_d:
                best_i, best_d, best_u = i, d, u
        if best_d > eps:
            return math.nan
        t = best_i + best_u
        return 0.0 if t >= 4.0 else t

    def point_at(self, t: float) -> np.ndarray:
        """Outline point at position `t` (any real, folded modulo 4)."""
        tf = t % 4.0
        i = min(int(math.floor(tf)), 3)
        u = tf - i
        a = self._corners[i]
        b = self._corners[(i + 1) % 4]
        return a + u * (b - a)
