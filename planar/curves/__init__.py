# -*- coding: utf-8 -*-
# Clipxus/planar/curves/__init__.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 8/24/2025 (Updated: 10/19/2026)

Curves Subfolder:
-----------------
Immutable parametric curves sharing the `ContinuousCurve` interface.

Modules:
--------
- base:      `CurveKind`, the `ContinuousCurve` ABC and shared free functions
             (signed distance, corner rule, sampling, intersection filtering).

- lines:     `LineArc` (segment / ray / infinite line) and its factories.

- ellipse:   `EllipseArc` (circles, ellipses and their arcs).

- parabola:  `ParabolaArc`.

- hyperbola: `HyperbolaBranchArc`.

- polyline:  `Polyline` (open) and `LinearRing` (closed).

- polycurve: `PolyCurve`, continuous chains of heterogeneous curves.
"""

from .base import CurveKind, ContinuousCurve
from .lines import LineArc, segment, ray, straight_line, line_through
from .ellipse import EllipseArc, circle, circle_arc, ellipse, ellipse_arc
from .parabola import ParabolaArc, parabola, parabola_arc
from .hyperbola import HyperbolaBranchArc, hyperbola_branch
from .polyline import Polyline, LinearRing, polyline, linear_ring
from .polycurve import PolyCurve

__all__ = [
    "CurveKind",
    "ContinuousCurve",
    "LineArc",
    "EllipseArc",
    "ParabolaArc",
    "HyperbolaBranchArc",
    "Polyline",
    "LinearRing",
    "PolyCurve",
    "segment",
    "ray",
    "straight_line",
    "line_through",
    "circle",
    "circle_arc",
    "ellipse",
    "ellipse_arc",
    "parabola",
    "parabola_arc",
    "hyperbola_branch",
    "polyline",
    "linear_ring",
]
