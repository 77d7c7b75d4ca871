# -*- coding: utf-8 -*-
# Clipxus/planar/clip/__init__.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 10/4/2025 (Updated: 10/19/2026)

Clip Subfolder:
---------------
Clipping of curves and boundaries against axis-aligned boxes.

Modules:
--------
- curve_clip:    Single-curve clipper (crossings, interval classification, sub-curves).

- pool:          `CurveFragment`, `FragmentPool` and the aggregate clipper `clip_to_pool`.

- stitch:        Ring reconstruction (`find_next_index`, `boundary_portion`, `reconstruct`).

- boundary_clip: `clip_boundary` entry point and the no-crossing cases.
"""

from .curve_clip import crossing_params, clip_curve, clip_curve_set
from .pool import CurveFragment, FragmentPool, clip_to_pool
from .stitch import find_next_index, boundary_portion, reconstruct
from .boundary_clip import clip_boundary

__all__ = [
    "crossing_params",
    "clip_curve",
    "clip_curve_set",
    "CurveFragment",
    "FragmentPool",
    "clip_to_pool",
    "find_next_index",
    "boundary_portion",
    "reconstruct",
    "clip_boundary",
]
