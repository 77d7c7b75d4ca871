# -*- coding: utf-8 -*-
# Clipxus/planar/core/numeric.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 8/21/2025 (Updated: 10/19/2026)

Purpose:
--------
Private numerical utilities shared by the curve, box and clipping modules.

Main Tasks:
-----------
    1. Point coercion and tiny vector helpers (cross product, unit, angles).
    2. Angle bookkeeping on the circle (formatting to [0, 2π), containment in an arc).
    3. Polynomial root helpers (stable quadratic, real roots of higher degree).
    4. Parameter helpers for possibly-infinite intervals (unit-segment maps, interior pick).

Notes:
------
   - Pure NumPy/math; no logging, plotting, or file I/O.
   - Tolerances are explicit arguments; nothing here reads global state.
"""

from typing import List, Sequence
import math
import numpy as np

TWO_PI = 2.0 * math.pi

__all__ = [
    "TWO_PI",
    "as_point",
    "cross",
    "unit",
    "rotation_matrix",
    "horizontal_angle",
    "format_angle",
    "contains_angle",
    "solve_quadratic",
    "real_roots",
    "to_unit",
    "from_unit",
    "choose_position",
    "reach",
]


# ---------- points / vectors ----------

def as_point(p) -> np.ndarray:
    """
    Coerce `p` into a float64 array of shape (2,).

    Raises
    ------
    ValueError
        If `p` does not hold exactly two numbers.
    """
    arr = np.asarray(p, dtype=np.float64)
    if arr.shape != (2,):
        raise ValueError("Expected a 2D point (x, y), got shape {}.".format(arr.shape))
    return arr


def cross(u, v) -> float:
    """z-component of the cross product u × v."""
    return float(u[0] * v[1] - u[1] * v[0])


def unit(v: np.ndarray) -> np.ndarray:
    """
    Return the unit vector in the direction of `v`. If ||v||=0, return `v` unchanged.
    """
    n = float(np.linalg.norm(v))
    if n == 0.0:
        return v
    return v / n


def rotation_matrix(theta: float) -> np.ndarray:
    """(2, 2) counter-clockwise rotation by `theta` radians."""
    c, s = math.cos(theta), math.sin(theta)
    return np.array([[c, -s], [s, c]])


def horizontal_angle(v) -> float:
    """Angle of vector `v` with the +x axis, in [0, 2π)."""
    return format_angle(math.atan2(float(v[1]), float(v[0])))


def format_angle(angle: float) -> float:
    """Fold an angle into [0, 2π)."""
    a = math.fmod(angle, TWO_PI)
    if a < 0.0:
        a += TWO_PI
    # fmod can return exactly 2π after the shift for tiny negative inputs
    if a >= TWO_PI:
        a = 0.0
    return a


def contains_angle(start: float, extent: float, angle: float, tol: float = 0.0) -> bool:
    """
    True if `angle` lies on the arc that starts at `start` and sweeps `extent`
    (positive = counter-clockwise). `tol` is an angular tolerance.
    """
    if abs(extent) >= TWO_PI - tol:
        return True
    if extent >= 0.0:
        d = format_angle(angle - start)
    else:
        d = format_angle(start - angle)
    ext = abs(extent)
    return d <= ext + tol or d >= TWO_PI - tol


# ---------- polynomial roots ----------

def solve_quadratic(a: float, b: float, c: float, tol: float = 1e-12) -> List[float]:
    """
    Real roots of a·x² + b·x + c = 0, sorted ascending.

    - Degenerates to the linear case when |a| is negligible w.r.t. |b| and |c|.
    - A discriminant within `tol` (relative) of zero yields one double root.
    - Uses the cancellation-free form x = q/a, c/q.
    """
    scale = max(abs(a), abs(b), abs(c))
    if scale == 0.0:
        return []
    if abs(a) <= tol * scale:
        if abs(b) <= tol * scale:
            return []
        return [-c / b]
    disc = b * b - 4.0 * a * c
    if abs(disc) <= tol * max(b * b, abs(4.0 * a * c)):
        return [-b / (2.0 * a)]
    if disc < 0.0:
        return []
    sq = math.sqrt(disc)
    q = -0.5 * (b + math.copysign(sq, b))
    r1 = q / a
    r2 = c / q if q != 0.0 else r1
    return sorted((r1, r2))


def real_roots(coeffs: Sequence[float], tol: float = 1e-9) -> List[float]:
    """
    Real roots of the polynomial with `coeffs` (highest degree first), via numpy.roots.

    Leading near-zero coefficients are stripped; roots whose imaginary part is small
    relative to their magnitude are kept as real.
    """
    c = np.asarray(coeffs, dtype=np.float64)
    scale = float(np.max(np.abs(c))) if c.size else 0.0
    if scale == 0.0:
        return []
    nz = np.nonzero(np.abs(c) > 1e-14 * scale)[0]
    c = c[nz[0]:]
    if c.size < 2:
        return []
    roots = np.roots(c)
    out = []
    for r in roots:
        if abs(r.imag) <= tol * max(1.0, abs(r.real)):
            out.append(float(r.real))
    return sorted(out)


# ---------- parameter intervals ----------

def to_unit(t: float, t0: float, t1: float) -> float:
    """
    Map t ∈ [t0, t1] (bounds possibly infinite) monotonically onto [0, 1].
    Infinite sides use an arctangent map.
    """
    if t <= t0:
        return 0.0
    if t >= t1:
        return 1.0
    if math.isinf(t0) and math.isinf(t1):
        return math.atan(t) / math.pi + 0.5
    if math.isinf(t0):
        return math.atan(t - t1) * 2.0 / math.pi + 1.0
    if math.isinf(t1):
        return math.atan(t - t0) * 2.0 / math.pi
    return (t - t0) / (t1 - t0)


def from_unit(u: float, t0: float, t1: float) -> float:
    """Inverse of `to_unit`."""
    if u <= 0.0:
        return t0
    if u >= 1.0:
        return t1
    if math.isinf(t0) and math.isinf(t1):
        return math.tan((u - 0.5) * math.pi)
    if math.isinf(t0):
        return math.tan((u - 1.0) * math.pi / 2.0) + t1
    if math.isinf(t1):
        return math.tan(u * math.pi / 2.0) + t0
    return u * (t1 - t0) + t0


def choose_position(t0: float, t1: float) -> float:
    """
    Pick an arbitrary parameter strictly between t0 and t1; either bound may be infinite.
    """
    if math.isinf(t0):
        if math.isinf(t1):
            return 0.0
        return t1 - 10.0
    if math.isinf(t1):
        return t0 + 10.0
    return 0.5 * (t0 + t1)


def reach(tol: float, *points) -> float:
    """
    Absolute tolerance scaled by the magnitude of the given points (never below `tol`).
    Keeps on-curve tests meaningful far away from the origin.
    """
    m = 1.0
    for p in points:
        m = max(m, float(np.max(np.abs(p))))
    return tol * m
