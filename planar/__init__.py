# -*- coding: utf-8 -*-
# Clipxus/planar/__init__.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 7/18/2025 (Updated: 10/19/2026)

Modules:
--------
- core:     Numerical helpers, `AffineTransform`, `Box` and its outline parameterization.

- curves:   Immutable parametric curves (lines, ellipse/parabola/hyperbola arcs,
            polylines, composite chains) sharing the `ContinuousCurve` interface.

- topology: Closure, orientation and winding numbers of sampled loops.

- domain:   `Boundary` (set of oriented curves) and `Domain` (region inside it).

- clip:     Curve and boundary clipping against boxes, fragment pooling and
            ring reconstruction.

- api:      Thin façade (`make_box`, `clip`, `clip_curve`).

- config:   Default policy (tolerance, stitch and plot options) and deep-merge helpers.

- errors:   Typed exceptions and the advisory stitch warning.
"""

from .api import make_box, clip, clip_curve
from .core.box import Box, BoxBoundary
from .core.transform import AffineTransform
from .domain import Boundary, Domain
from .errors import (
    GeometryError,
    UnboundedClipError,
    DegenerateGeometryError,
    AmbiguousStitchWarning,
)

__all__ = [
    "make_box",
    "clip",
    "clip_curve",
    "Box",
    "BoxBoundary",
    "AffineTransform",
    "Boundary",
    "Domain",
    "GeometryError",
    "UnboundedClipError",
    "DegenerateGeometryError",
    "AmbiguousStitchWarning",
]
