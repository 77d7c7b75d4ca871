# -*- coding: utf-8 -*-
# Clipxus/planar/domain/domain.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 7/12/2025 (Updated: 10/19/2026)

Purpose
-------
`Domain`: the planar region on the inside (left) of a `Boundary`, plus factories for
common domains (half-plane, disk, ellipse, polygon).

Notes
-----
- Boundary points belong to the domain (signed distance <= 0).
- An indirect transform flips every curve's orientation, so the image boundary is
  reversed to keep the image region on the inside.
"""


from ..config import DEFAULT_TOL
from ..curves.ellipse import circle, ellipse
from ..curves.lines import straight_line
from ..curves.polyline import LinearRing
from ..topology.loop import close_and_orient
from ..topology._validation import _as_xy
from .boundary import Boundary

__all__ = ["Domain", "half_plane", "disk", "ellipse_domain", "polygon"]


class Domain:
    """
    Region bounded by `boundary`.

    Parameters
    ----------
    boundary : Boundary or iterable of ContinuousCurve
    """

    def __init__(self, boundary):
        self.boundary = boundary if isinstance(boundary, Boundary) else Boundary(boundary)

    def __repr__(self) -> str:
        return "Domain({!r})".format(self.boundary)

    def contains(self, point) -> bool:
        return self.boundary.signed_distance(point) <= 0.0

    def distance(self, point) -> float:
        """0 inside the domain, distance to the boundary outside."""
        return max(self.boundary.signed_distance(point), 0.0)

    def is_bounded(self) -> bool:
        return self.boundary.is_bounded()

    def complement(self) -> "Domain":
        return Domain(self.boundary.reversed())

    def transform(self, trans) -> "Domain":
        b = self.boundary.transform(trans)
        if not trans.is_direct():
            b = b.reversed()
        return Domain(b)

    def clip(self, box, tol: float = DEFAULT_TOL) -> "Domain":
        return Domain(self.boundary.clip(box, tol=tol))


# -----------------------
# Factories
# -----------------------
def half_plane(point, direction) -> Domain:
    """Half-plane on the left of the line through `point` along `direction`."""
    return Domain([straight_line(point, direction)])


def disk(center, radius: float) -> Domain:
    return Domain([circle(center, radius)])


def ellipse_domain(center, r1: float, r2: float, theta: float = 0.0) -> Domain:
    return Domain([ellipse(center, r1, r2, theta)])


def polygon(vertices) -> Domain:
    """Polygon whose ring is closed and oriented CCW whatever the input order."""
    V = _as_xy(vertices, min_points=3)
    ring = close_and_orient(V, "CCW", tol_close=DEFAULT_TOL)
    return Domain([LinearRing(ring, tol=DEFAULT_TOL)])
