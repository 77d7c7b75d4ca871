# -*- coding: utf-8 -*-
# Clipxus/planar/clip/pool.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 10/4/2025 (Updated: 10/19/2026)

Purpose
-------
Clip every component of a boundary and gather the pieces into one indexed pool,
recording once where each open piece enters and leaves the box outline.

Main Tasks
----------
    1. `CurveFragment`: a clipped piece plus its outline start/end positions.
    2. `FragmentPool`: stable indexing with parallel start/end position arrays.
    3. `clip_to_pool`: run the single-curve clipper over all components.

Notes
-----
- Closed fragments (components entirely inside the box) carry NaN positions.
- Component provenance is not kept; the reconstructor only needs the positions.
"""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

from ..config import DEFAULT_TOL
from ..core.box import Box, BoxBoundary
from ..curves.base import ContinuousCurve
from ..errors import DegenerateGeometryError
from .curve_clip import clip_curve

logger = logging.getLogger(__name__)

__all__ = ["CurveFragment", "FragmentPool", "make_fragment", "clip_to_pool"]


@dataclass(frozen=True)
class CurveFragment:
    curve: ContinuousCurve
    start_pos: float = math.nan   # outline position of the first point (open only)
    end_pos: float = math.nan     # outline position of the last point (open only)

    @property
    def is_closed(self) -> bool:
        return self.curve.is_closed

    @property
    def is_open(self) -> bool:
        return not self.curve.is_closed


class FragmentPool:
    """
    Flat, stably indexed fragment collection from one clip call.

    Attributes
    ----------
    fragments : tuple of CurveFragment
    starts, ends : np.ndarray
        Outline positions per fragment (NaN for closed fragments).
    """

    def __init__(self, fragments: Sequence[CurveFragment] = ()):
        self.fragments = tuple(fragments)
        self.starts = np.array([f.start_pos for f in self.fragments], dtype=np.float64)
        self.ends = np.array([f.end_pos for f in self.fragments], dtype=np.float64)

    def __len__(self) -> int:
        return len(self.fragments)

    def __getitem__(self, i: int) -> CurveFragment:
        return self.fragments[i]

    def __iter__(self):
        return iter(self.fragments)

    def open_indices(self) -> List[int]:
        return [i for i, f in enumerate(self.fragments) if f.is_open]

    def closed_indices(self) -> List[int]:
        return [i for i, f in enumerate(self.fragments) if f.is_closed]

    def has_open(self) -> bool:
        return any(f.is_open for f in self.fragments)

    def curves(self) -> List[ContinuousCurve]:
        return [f.curve for f in self.fragments]


def make_fragment(curve: ContinuousCurve, outline: BoxBoundary) -> CurveFragment:
    """
    Wrap a clipped piece, recording outline positions for open pieces.

    Raises
    ------
    DegenerateGeometryError
        If an open piece starts or ends off the box outline.
    """
    if curve.is_closed:
        return CurveFragment(curve)
    p0, p1 = curve.first_point(), curve.last_point()
    s, e = outline.position(p0), outline.position(p1)
    if math.isnan(s) or math.isnan(e):
        raise DegenerateGeometryError(
            "Open fragment endpoint does not lie on the box outline",
            {"first": tuple(np.round(p0, 12)), "last": tuple(np.round(p1, 12)),
             "box": outline.box.as_tuple()},
        )
    return CurveFragment(curve, s, e)


def clip_to_pool(boundary: Iterable[ContinuousCurve], box: Box, *,
                 tol: float = DEFAULT_TOL) -> FragmentPool:
    """
    Clip every component of `boundary` against `box` into one `FragmentPool`.

    Raises
    ------
    UnboundedClipError
        If `box` has an infinite bound.
    DegenerateGeometryError
        If an open fragment has an endpoint off the outline.
    """
    outline = box.boundary(tol)
    frags = []
    for curve in boundary:
        for piece in clip_curve(curve, box, tol=tol):
            frags.append(make_fragment(piece, outline))
    pool = FragmentPool(frags)
    logger.debug("[clip_to_pool] %d fragment(s) (%d open)", len(pool), len(pool.open_indices()))
    return pool
