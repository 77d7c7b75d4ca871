# -*- coding: utf-8 -*-
# Clipxus/planar/topology/__init__.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 8/29/2025 (Updated: 10/19/2026)

Topology Subfolder:
-------------------
Connectivity-level operations on sampled closed 2D loops.

Modules:
--------
- loop:        Closure predicates and enforcement, signed area calculation,
               orientation detection (CW/CCW), CCW canonicalization and
               winding numbers around query points.

- _validation: (N, 2) point-array guards shared with boxes, polylines and polygons.
"""

from .loop import (
    is_closed,
    ensure_closed,
    signed_area,
    orientation,
    close_and_orient,
    winding_number,
    total_winding,
)

__all__ = [
    "is_closed",
    "ensure_closed",
    "signed_area",
    "orientation",
    "close_and_orient",
    "winding_number",
    "total_winding",
]
