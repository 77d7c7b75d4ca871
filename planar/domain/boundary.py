# -*- coding: utf-8 -*-
# Clipxus/planar/domain/boundary.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 7/12/2025 (Updated: 10/19/2026)

Purpose
-------
`Boundary`: an ordered set of continuous oriented curves (rings, unbounded curves)
that together bound a planar domain.

Main Tasks
----------
    1. Signed distance and inside test (the nearest component decides).
    2. Structural operations returning new boundaries (reverse, transform, clip).
    3. Sampling for plotting and verification.

Notes
-----
- An empty boundary bounds the empty domain: nothing is inside.
- Clipping delegates to `planar.clip.boundary_clip.clip_boundary`.
"""

from typing import Iterable, List
import math
import numpy as np

from ..config import DEFAULT_TOL
from ..core.numeric import as_point
from ..curves.base import ContinuousCurve

__all__ = ["Boundary"]


class Boundary:
    """
    Immutable collection of continuous oriented curves.

    Raises
    ------
    ValueError
        If an element is not a `ContinuousCurve`.
    """

    def __init__(self, curves: Iterable[ContinuousCurve] = ()):
        items = tuple(curves)
        for c in items:
            if not isinstance(c, ContinuousCurve):
                raise ValueError("Boundary items must be ContinuousCurve, got {!r}.".format(type(c)))
        self._curves = items

    @property
    def curves(self):
        return self._curves

    def __iter__(self):
        return iter(self._curves)

    def __len__(self) -> int:
        return len(self._curves)

    def __getitem__(self, i: int) -> ContinuousCurve:
        return self._curves[i]

    def __repr__(self) -> str:
        return "Boundary({} curve(s): {})".format(
            len(self._curves), ", ".join(c.kind.value for c in self._curves))

    # --------------------
    # Metric queries
    # --------------------
    def signed_distance(self, point) -> float:
        """Signed distance of the nearest component (negative inside); +inf if empty."""
        p = as_point(point)
        best = math.inf
        for c in self._curves:
            d = c.signed_distance(p)
            if abs(d) < abs(best):
                best = d
        return best

    def distance(self, point) -> float:
        p = as_point(point)
        return min((c.distance(p) for c in self._curves), default=math.inf)

    def is_inside(self, point) -> bool:
        return self.signed_distance(point) < 0.0

    def is_bounded(self) -> bool:
        return all(c.is_bounded() for c in self._curves)

    # --------------------
    # Structural
    # --------------------
    def reversed(self) -> "Boundary":
        return Boundary(c.reversed() for c in reversed(self._curves))

    def transform(self, trans) -> "Boundary":
        return Boundary(c.transform(trans) for c in self._curves)

    def clip(self, box, tol: float = DEFAULT_TOL) -> "Boundary":
        from ..clip.boundary_clip import clip_boundary
        return clip_boundary(self, box, tol=tol)

    def sample(self, n: int = 200, extent: float = 10.0) -> List[np.ndarray]:
        """One (M, 2) sample array per component."""
        return [c.sample(n, extent) for c in self._curves]
