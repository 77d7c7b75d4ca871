# -*- coding: utf-8 -*-
# Clipxus/planar/core/transform.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 9/2/2025 (Updated: 10/19/2026)

Purpose:
--------
Immutable 2D affine transforms stored as a 3x3 homogeneous NumPy matrix.

Main Tasks:
-----------
   1. Factories: identity, translation, rotation, scaling, homothecy, shear,
      line/point reflection.
   2. Composition (`compose`, `then`) and inversion.
   3. Application to single points and (N, 2) point arrays.
   4. Classification predicates (direct, isometry, similarity, identity).

Conventions:
------------
   - Points are column vectors: p' = M @ [x, y, 1]^T.
   - `a.then(b)` applies `a` first, then `b` (i.e. matrix b.M @ a.M).
"""

from typing import Optional
import math
import numpy as np

from .numeric import as_point

__all__ = ["AffineTransform"]


class AffineTransform:
    """
    2D affine map x' = A x + b.

    Parameters
    ----------
    matrix : array-like
        Either a (3, 3) homogeneous matrix whose last row is [0, 0, 1], or a (2, 3)
        matrix [[a, b, tx], [c, d, ty]].
    """

    __slots__ = ("_m",)

    def __init__(self, matrix):
        m = np.asarray(matrix, dtype=np.float64)
        if m.shape == (2, 3):
            m = np.vstack((m, [0.0, 0.0, 1.0]))
        if m.shape != (3, 3):
            raise ValueError("Expected a (3,3) or (2,3) matrix, got shape {}.".format(m.shape))
        if not np.allclose(m[2], [0.0, 0.0, 1.0]):
            raise ValueError("Last row of an affine matrix must be [0, 0, 1].")
        if not np.isfinite(m).all():
            raise ValueError("Affine matrix must be finite.")
        m = m.copy()
        m.flags.writeable = False
        self._m = m

    # --------------------
    # Factories
    # --------------------
    @classmethod
    def identity(cls) -> "AffineTransform":
        return cls(np.eye(3))

    @classmethod
    def translation(cls, dx: float, dy: float) -> "AffineTransform":
        return cls([[1.0, 0.0, dx], [0.0, 1.0, dy]])

    @classmethod
    def rotation(cls, angle: float, center=None) -> "AffineTransform":
        """Counter-clockwise rotation by `angle` radians about `center` (default origin)."""
        c, s = math.cos(angle), math.sin(angle)
        rot = cls([[c, -s, 0.0], [s, c, 0.0]])
        return _about(rot, center)

    @classmethod
    def scaling(cls, sx: float, sy: Optional[float] = None, center=None) -> "AffineTransform":
        if sy is None:
            sy = sx
        return _about(cls([[sx, 0.0, 0.0], [0.0, sy, 0.0]]), center)

    @classmethod
    def homothecy(cls, center, factor: float) -> "AffineTransform":
        return cls.scaling(factor, factor, center=center)

    @classmethod
    def shear(cls, shx: float, shy: float) -> "AffineTransform":
        return cls([[1.0, shx, 0.0], [shy, 1.0, 0.0]])

    @classmethod
    def line_reflection(cls, point, direction) -> "AffineTransform":
        """Reflection about the line through `point` with direction `direction`."""
        d = as_point(direction)
        n2 = float(d @ d)
        if n2 == 0.0:
            raise ValueError("Reflection line direction must be non-zero.")
        dx, dy = d
        a = (dx * dx - dy * dy) / n2
        b = 2.0 * dx * dy / n2
        return _about(cls([[a, b, 0.0], [b, -a, 0.0]]), point)

    @classmethod
    def point_reflection(cls, center) -> "AffineTransform":
        return cls.scaling(-1.0, -1.0, center=center)

    # --------------------
    # Accessors / algebra
    # --------------------
    @property
    def matrix(self) -> np.ndarray:
        """Read-only (3, 3) homogeneous matrix."""
        return self._m

    @property
    def linear(self) -> np.ndarray:
        """(2, 2) linear part A."""
        return self._m[:2, :2]

    @property
    def offset(self) -> np.ndarray:
        """Translation part b."""
        return self._m[:2, 2]

    def compose(self, other: "AffineTransform") -> "AffineTransform":
        """Return self ∘ other (apply `other` first, then `self`)."""
        return AffineTransform(self._m @ other._m)

    def then(self, other: "AffineTransform") -> "AffineTransform":
        """Return other ∘ self (apply `self` first, then `other`)."""
        return other.compose(self)

    def inverse(self) -> "AffineTransform":
        det = self.determinant()
        if abs(det) < 1e-300:
            raise ValueError("Affine transform is singular and cannot be inverted.")
        return AffineTransform(np.linalg.inv(self._m))

    def determinant(self) -> float:
        return float(np.linalg.det(self.linear))

    # --------------------
    # Application
    # --------------------
    def apply(self, points) -> np.ndarray:
        """
        Transform a single point (shape (2,)) or a point array (shape (N, 2)).
        """
        P = np.asarray(points, dtype=np.float64)
        if P.shape == (2,):
            return self.linear @ P + self.offset
        if P.ndim != 2 or P.shape[1] != 2:
            raise ValueError("Expected (2,) or (N,2) array, got shape {}.".format(P.shape))
        return P @ self.linear.T + self.offset

    def apply_vector(self, v) -> np.ndarray:
        """Transform a direction vector (translation ignored)."""
        return self.linear @ as_point(v)

    # --------------------
    # Predicates
    # --------------------
    def is_direct(self) -> bool:
        """True if orientation is preserved (positive determinant)."""
        return self.determinant() > 0.0

    def is_identity(self, tol: float = 1e-12) -> bool:
        return bool(np.allclose(self._m, np.eye(3), atol=tol, rtol=0.0))

    def is_similarity(self, tol: float = 1e-12) -> bool:
        """True if the linear part is a scaled orthogonal matrix."""
        A = self.linear
        g = A.T @ A
        k = 0.5 * (g[0, 0] + g[1, 1])
        if k <= 0.0:
            return False
        return abs(g[0, 0] - g[1, 1]) <= tol * k and abs(g[0, 1]) <= tol * k

    def is_isometry(self, tol: float = 1e-12) -> bool:
        A = self.linear
        return bool(np.allclose(A.T @ A, np.eye(2), atol=tol, rtol=0.0))

    def similarity_factor(self) -> float:
        """Uniform scale factor of a similarity (sqrt of |det|)."""
        return math.sqrt(abs(self.determinant()))

    def __eq__(self, other) -> bool:
        if not isinstance(other, AffineTransform):
            return NotImplemented
        return bool(np.allclose(self._m, other._m, atol=1e-12, rtol=0.0))

    def __hash__(self):
        return hash(tuple(np.round(self._m, 12).ravel()))

    def __repr__(self) -> str:
        a = self._m
        return "AffineTransform([[{:g}, {:g}, {:g}], [{:g}, {:g}, {:g}]])".format(
            a[0, 0], a[0, 1], a[0, 2], a[1, 0], a[1, 1], a[1, 2])


def _about(trans: AffineTransform, center) -> AffineTransform:
    """Conjugate a linear map so that it fixes `center` instead of the origin."""
    if center is None:
        return trans
    c = as_point(center)
    to_origin = AffineTransform.translation(-c[0], -c[1])
    back = AffineTransform.translation(c[0], c[1])
    return back.compose(trans).compose(to_origin)
