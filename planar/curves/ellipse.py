# -*- coding: utf-8 -*-
# Clipxus/planar/curves/ellipse.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 9/2/2025 (Updated: 10/19/2026)

Purpose:
--------
Circles, ellipses and their arcs as a single kind, `EllipseArc`.

Parameterization:
-----------------
   - Local frame: centre `center`, major/minor semi-axes `r1`/`r2`, axis rotation `theta`.
   - Angle at parameter t: start + sign(extent) * t, t in [0, |extent|].
   - Point: center + R(theta) @ (r1 cos(angle), r2 sin(angle)).
   - |extent| = 2π means a full (closed) curve; positive extent runs CCW.

Notes:
------
   - Nearest points solve the classic quartic in u = tan(angle/2) with numpy.roots.
   - Any affine transform maps an ellipse arc onto an ellipse arc; the new axes come
     from the SVD of the transformed frame.
"""

from dataclasses import dataclass
from typing import List
import math
import numpy as np

from ..config import DEFAULT_TOL
from ..core.numeric import TWO_PI, as_point, format_angle, real_roots, reach, rotation_matrix, solve_quadratic
from .base import ContinuousCurve, CurveKind, keep_common, smooth_signed_distance

__all__ = ["EllipseArc", "circle", "circle_arc", "ellipse", "ellipse_arc"]

_CLOSED_EPS = 1e-12


@dataclass(frozen=True, eq=False)
class EllipseArc(ContinuousCurve):
    """
    Elliptic (or circular) arc, possibly a full closed ellipse.

    Raises
    ------
    ValueError
        If a semi-axis is not finite and positive, or |extent| exceeds 2π.
    """
    center: np.ndarray
    r1: float
    r2: float
    theta: float = 0.0
    start: float = 0.0
    extent: float = TWO_PI

    def __post_init__(self):
        c = as_point(self.center).copy()
        c.flags.writeable = False
        r1, r2 = float(self.r1), float(self.r2)
        if not (math.isfinite(r1) and math.isfinite(r2)) or r1 <= 0.0 or r2 <= 0.0:
            raise ValueError("Ellipse semi-axes must be finite and > 0 (got {}, {}).".format(r1, r2))
        ext = float(self.extent)
        if not math.isfinite(ext) or abs(ext) > TWO_PI + 1e-9:
            raise ValueError("Arc extent must lie in [-2π, 2π] (got {}).".format(ext))
        if abs(ext) >= TWO_PI - _CLOSED_EPS:
            ext = math.copysign(TWO_PI, ext)
        object.__setattr__(self, "center", c)
        object.__setattr__(self, "r1", r1)
        object.__setattr__(self, "r2", r2)
        object.__setattr__(self, "theta", float(self.theta))
        object.__setattr__(self, "start", float(self.start))
        object.__setattr__(self, "extent", ext)
        object.__setattr__(self, "_R", rotation_matrix(self.theta))

    # --------------------
    # Parameterization
    # --------------------
    @property
    def kind(self) -> CurveKind:
        if abs(self.r1 - self.r2) <= 1e-12 * max(self.r1, self.r2):
            return CurveKind.CIRCLE_ARC
        return CurveKind.ELLIPSE_ARC

    @property
    def t0(self) -> float:
        return 0.0

    @property
    def t1(self) -> float:
        return abs(self.extent)

    @property
    def is_closed(self) -> bool:
        return abs(self.extent) >= TWO_PI

    @property
    def _sgn(self) -> float:
        return -1.0 if self.extent < 0.0 else 1.0

    def angle_at(self, t: float) -> float:
        return self.start + self._sgn * t

    def point_at(self, t: float) -> np.ndarray:
        a = self.angle_at(t)
        return self.center + self._R @ np.array([self.r1 * math.cos(a), self.r2 * math.sin(a)])

    def tangent(self, t: float) -> np.ndarray:
        a = self.angle_at(t)
        return self._sgn * (self._R @ np.array([-self.r1 * math.sin(a), self.r2 * math.cos(a)]))

    def _local(self, p: np.ndarray) -> np.ndarray:
        return self._R.T @ (p - self.center)

    def _param_of_angle(self, angle: float) -> float:
        return format_angle(self._sgn * (angle - self.start))

    # --------------------
    # Inversion / intersection
    # --------------------
    def position_of(self, point, tol: float = DEFAULT_TOL) -> float:
        p = as_point(point)
        x, y = self._local(p)
        t = self._param_of_angle(math.atan2(y / self.r2, x / self.r1))
        T = self.t1
        if not self.is_closed and t > T:
            # outside the arc: snap to the nearer end in angle
            t = T if (t - T) < (TWO_PI - t) else 0.0
        if np.linalg.norm(self.point_at(t) - p) > reach(tol, p):
            return math.nan
        return t

    def project(self, point) -> float:
        p = as_point(point)
        x, y = self._local(p)
        a, b = self.r1, self.r2
        k = b * b - a * a
        coeffs = [b * y, -2.0 * k + 2.0 * a * x, 0.0, 2.0 * k + 2.0 * a * x, -b * y]
        angles = [2.0 * math.atan(u) for u in real_roots(coeffs)]
        angles += [math.pi, math.atan2(y / b, x / a)]
        ts = [self._param_of_angle(phi) for phi in angles]
        if not self.is_closed:
            ts = [t for t in ts if t <= self.t1] + [0.0, self.t1]
        dists = [np.linalg.norm(self.point_at(t) - p) for t in ts]
        return ts[int(np.argmin(dists))]

    def intersections(self, line, tol: float = DEFAULT_TOL) -> List[np.ndarray]:
        radii = np.array([self.r1, self.r2])
        O = self._local(line.origin) / radii
        D = (self._R.T @ line.direction) / radii
        roots = solve_quadratic(float(D @ D), 2.0 * float(O @ D), float(O @ O) - 1.0)
        return keep_common(self, line, [line.point_at(s) for s in roots], tol)

    def signed_distance(self, point) -> float:
        if not self.is_closed:
            return smooth_signed_distance(self, point)
        p = as_point(point)
        d = self.distance(p)
        x, y = self._local(p)
        inside_ellipse = (x / self.r1) ** 2 + (y / self.r2) ** 2 < 1.0
        return -d if inside_ellipse == (self.extent > 0.0) else d

    # --------------------
    # Structural
    # --------------------
    def sub_curve(self, t0: float, t1: float) -> "EllipseArc":
        T = self.t1
        if t0 > t1:
            if not self.is_closed:
                raise ValueError("Open arc cannot wrap: sub_curve({}, {}).".format(t0, t1))
            ext = (T - t0) + t1
        else:
            if not self.is_closed:
                t0, t1 = max(t0, 0.0), min(t1, T)
            ext = t1 - t0
        return EllipseArc(self.center, self.r1, self.r2, self.theta,
                          self.angle_at(t0), self._sgn * ext)

    def reversed(self) -> "EllipseArc":
        return EllipseArc(self.center, self.r1, self.r2, self.theta,
                          self.start + self.extent, -self.extent)

    def transform(self, trans) -> "EllipseArc":
        """
        Image under any affine map: M = A R(theta) diag(r1, r2) = U S W with U a
        rotation; the angles are carried through W.
        """
        M = trans.linear @ self._R @ np.diag([self.r1, self.r2])
        U, S, Vt = np.linalg.svd(M)
        flip = np.diag([1.0, -1.0])
        if np.linalg.det(U) < 0.0:
            U = U @ flip
            Vt = flip @ Vt
        theta = math.atan2(U[1, 0], U[0, 0])
        b = math.atan2(Vt[1, 0], Vt[0, 0])
        if np.linalg.det(Vt) > 0.0:
            start, extent = self.start + b, self.extent
        else:
            start, extent = b - self.start, -self.extent
        return EllipseArc(trans.apply(self.center), float(S[0]), float(S[1]), theta, start, extent)

    def length(self, n: int = 2000) -> float:
        if self.kind is CurveKind.CIRCLE_ARC:
            return self.r1 * abs(self.extent)
        return super().length(n)


# -----------------------
# Factories
# -----------------------
def circle(center, radius: float, direct: bool = True) -> EllipseArc:
    """Full circle; CCW (interior inside) when `direct`, CW otherwise."""
    return EllipseArc(center, radius, radius, 0.0, 0.0, TWO_PI if direct else -TWO_PI)


def circle_arc(center, radius: float, start: float, extent: float) -> EllipseArc:
    return EllipseArc(center, radius, radius, 0.0, start, extent)


def ellipse(center, r1: float, r2: float, theta: float = 0.0, direct: bool = True) -> EllipseArc:
    return EllipseArc(center, r1, r2, theta, 0.0, TWO_PI if direct else -TWO_PI)


def ellipse_arc(center, r1: float, r2: float, theta: float, start: float, extent: float) -> EllipseArc:
    return EllipseArc(center, r1, r2, theta, start, extent)
