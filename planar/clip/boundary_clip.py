# -*- coding: utf-8 -*-
# Clipxus/planar/clip/boundary_clip.py

"""
Project: Clipxus
Author: Erfan Vaezi
Date: 10/4/2025 (Updated: 10/19/2026)

Purpose
-------
Entry point for clipping a whole boundary against a box: guards, pooling,
reconstruction and the cases where no fragment crosses the outline.

Main Tasks
----------
    1. Refuse unbounded boxes before any work is done.
    2. Clip to a fragment pool and reconstruct rings.
    3. Without open fragments, add the box outline when the box lies inside the domain
       (tested on the first vertex or outline point not lying on the boundary).
"""

import logging
from typing import Iterable, Union

from ..config import DEFAULT_TOL
from ..core.box import Box
from ..core.numeric import reach
from ..curves.base import ContinuousCurve
from ..domain.boundary import Boundary
from ..errors import UnboundedClipError
from .pool import clip_to_pool
from .stitch import reconstruct

logger = logging.getLogger(__name__)

__all__ = ["box_inside_domain", "clip_boundary"]


def box_inside_domain(boundary: Boundary, box: Box, tol: float = DEFAULT_TOL) -> bool:
    """
    Inside test of the box against a boundary that does not cross its outline.

    Vertices are tried first, then intermediate outline points; the first one farther
    than `tol` from the boundary decides. When the boundary runs through all of them
    it already traces the outline, which is then not added a second time.
    """
    outline = box.boundary(tol)
    positions = [float(k) for k in range(4)] + [k + j / 4.0 for k in range(4) for j in (2, 1, 3)]
    for s in positions:
        v = outline.point_at(s)
        if boundary.distance(v) > reach(tol, v):
            return boundary.is_inside(v)
    return False


def clip_boundary(boundary: Union[Boundary, Iterable[ContinuousCurve]], box: Box, *,
                  tol: float = DEFAULT_TOL, warn_on_ambiguous: bool = True) -> Boundary:
    """
    Boundary of (domain ∩ box).

    Parameters
    ----------
    boundary : Boundary or iterable of ContinuousCurve
        Oriented components; the domain lies on their left.
    box : Box
        Bounded clip rectangle.
    tol : float
        Geometric tolerance for crossings, outline positions and ties.
    warn_on_ambiguous : bool
        Emit `AmbiguousStitchWarning` on near-ties while stitching.

    Returns
    -------
    Boundary
        Closed rings: untouched closed components, stitched rings, and possibly the
        box outline (CCW) when the box lies inside the domain.

    Raises
    ------
    UnboundedClipError
        If `box` has an infinite bound.
    DegenerateGeometryError
        If fragments cannot be stitched (endpoint off the outline, revisited fragment).
    """
    if not box.is_bounded():
        raise UnboundedClipError("Cannot clip against an unbounded box", {"box": box.as_tuple()})
    if not isinstance(boundary, Boundary):
        boundary = Boundary(boundary)

    pool = clip_to_pool(boundary, box, tol=tol)
    result = reconstruct(pool, box, tol=tol, warn_on_ambiguous=warn_on_ambiguous)

    if not pool.has_open() and box_inside_domain(boundary, box, tol):
        logger.debug("[clip_boundary] box lies inside the domain; adding its outline")
        result = Boundary(list(result) + [box.as_ring()])

    logger.debug("[clip_boundary] %d component(s) -> %d ring(s)", len(boundary), len(result))
    return result
