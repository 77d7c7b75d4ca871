# -*- coding: utf-8 -*-
# Clipxus/planar/core/__init__.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 8/21/2025 (Updated: 10/19/2026)

Core Subfolder:
---------------
Numerical building blocks shared by every other layer.

Modules:
--------
- numeric:   Point coercion, angle bookkeeping, polynomial roots and helpers for
             possibly-infinite parameter intervals.

- transform: `AffineTransform`, an immutable 3x3 homogeneous matrix with factories,
             composition, inversion and classification predicates.

- box:       `Box` (axis-aligned clip rectangle) and `BoxBoundary` (outline
             parameterization over [0, 4)).
"""

__all__ = ["numeric", "transform", "box"]
